# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Iterable
from importlib.metadata import entry_points
from importlib.util import find_spec
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from _sprig.typing import Loader, LoaderConstraint, SecondOrderDecorator


class PluginManager:
    __slots__ = ("loaders",)

    def __init__(self):
        self.loaders: list[Loader] = []

    @staticmethod
    def load_plugins():
        """
        Loads all modules that are registered as entrypoint in the ``sprig`` group and
        imports contributed extensions whose dependencies are available.
        """
        if find_spec("httpx"):
            import _sprig.plugins.web_loader  # noqa: F401

        for entrypoint in entry_points().select(group="sprig"):
            entrypoint.load()

    def register_loader(
        self, before: LoaderConstraint = None, after: LoaderConstraint = None
    ) -> SecondOrderDecorator:
        """
        Registers a document loader.

        A loader is called with the source that :func:`sprig.load` was called with and
        a :class:`types.SimpleNamespace` with configuration data, its
        ``parser_options`` attribute holds the :class:`sprig.ParserOptions`. It
        returns either a parsed :class:`sprig.Document` or a string that explains why
        it didn't attempt to load the source. That string supports debugging when no
        loader can handle a source.

        An example module that is specified as ``sprig`` plugin for a loader that
        retrieves documents from an in-memory store might look like this:

        .. testcode::

            from typing import Any

            from _sprig.nodes import Document
            from _sprig.parser import parse_document
            from _sprig.plugins import plugin_manager
            from _sprig.plugins.core_loaders import text_loader


            STORE = {"greeting": "<p>Hello!</p>"}


            @plugin_manager.register_loader(before=text_loader)
            def store_loader(source: Any, config) -> str | Document:
                if isinstance(source, str) and source.startswith("store:"):
                    return parse_document(STORE[source[6:]], config.parser_options)
                return "The input value is not a store reference."

        You might want to specify a loader to be considered before or after another
        one, as shown above. Only one of the ``before`` and ``after`` constraints can be
        used.
        """

        if before is not None and after is not None:
            raise NotImplementedError(
                "Loaders may only define one constraint atm. Please open an issue with "
                "a use-case description if you need to define both."
            )

        registered_loaders = self.loaders

        if before is not None:
            if not isinstance(before, Iterable):
                before = (before,)
            index = min(registered_loaders.index(x) for x in before)

        elif after is not None:
            if not isinstance(after, Iterable):
                after = (after,)
            index = max(registered_loaders.index(x) for x in after) + 1

        else:
            index = len(registered_loaders)

        def registrar(loader: Loader) -> Loader:
            assert callable(loader)
            registered_loaders.insert(index, loader)
            return loader

        return registrar


plugin_manager = PluginManager()


__all__ = (PluginManager.__name__, "plugin_manager")
