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

"""
Retrieval of documents over HTTP. This module is imported by
:meth:`_sprig.plugins.PluginManager.load_plugins` when httpx is available.
"""


from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import httpx

from _sprig.plugins import plugin_manager
from _sprig.plugins.core_loaders import text_loader

if TYPE_CHECKING:
    from types import SimpleNamespace
    from typing import Final

    from _sprig.typing import LoaderResult


try:
    import h2  # type: ignore
except ImportError:
    http2 = False
else:
    http2 = True
    del h2


DEFAULT_CLIENT: Final = httpx.Client(follow_redirects=True, http2=http2)


@plugin_manager.register_loader(before=text_loader)
def web_loader(
    data: Any, config: SimpleNamespace, client: Optional[httpx.Client] = None
) -> LoaderResult:
    """
    This loader fetches a document from a URL with the ``http`` or ``https`` scheme.
    The response body is decoded like any other byte sequence, the ``Content-Type``
    header's charset is not considered.

    Unless a ``client`` is passed, an :class:`httpx.Client` that was handed to
    :func:`sprig.load` as ``http_client`` keyword is used, e.g. to set timeouts or
    authentication:

    .. testcode::

        import httpx
        from sprig import load

        with httpx.Client(timeout=2.0, auth=("reader", "secret")) as client:
            document = load("https://example.org/feed.xml", http_client=client)

    Otherwise a shared client is used that follows redirects and respects httpx's
    `environment variables`_.

    .. _environment variables: https://www.python-httpx.org/environment_variables/
    """

    if not (isinstance(data, str) and data.lower().startswith(("http://", "https://"))):
        return "The input value is not an URL with the http or https scheme."

    if client is None:
        client = getattr(config, "http_client", DEFAULT_CLIENT)

    with client.stream("GET", data) as response:
        response.raise_for_status()
        return text_loader(response.read(), config)


__all__ = (web_loader.__name__,)
