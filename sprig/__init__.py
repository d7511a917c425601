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
``sprig`` parses a compact subset of XML into immutable trees: an optional XML
declaration and one root element with nested elements, attributes and text.

>>> document = parse_document('<svg:a xlink:href="#top">Back to top</svg:a>')
>>> document.root.qualified_name
'svg:a'
>>> document.root.attributes["xlink:href"].value
'#top'
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Optional

from _sprig.exceptions import FailedDocumentLoading, ParsingError
from _sprig.nodes import (
    Attribute,
    Attributes,
    ClosingTag,
    Document,
    Element,
    OpeningTag,
    QualifiedName,
)
from _sprig.parser import (
    ParserOptions,
    parse,
    parse_attribute,
    parse_attribute_with_value,
    parse_attributes,
    parse_boolean_attribute,
    parse_children,
    parse_closing_tag,
    parse_declaration,
    parse_document,
    parse_identifier,
    parse_namespaced_name,
    parse_opening_tag,
    parse_self_closing_tag,
    parse_string,
    parse_tree,
)
from _sprig.plugins import core_loaders, plugin_manager as _plugin_manager
from _sprig.serializer import to_data, to_json

if TYPE_CHECKING:
    from _sprig.typing import Loader


# plugin loading


_plugin_manager.load_plugins()


# api


def load(
    source: Any, /, parser_options: Optional[ParserOptions] = None, **config
) -> Document:
    """
    Obtains a :class:`Document` from anything that one of the configured loaders can
    make sense of. The core loaders handle :class:`pathlib.Path` objects, file-like
    objects and strings or byte sequences with the document's contents. If ``httpx``
    is available, URLs with the ``http`` and ``https`` schemes can be loaded too.

    :param source: The object to load the document from.
    :param parser_options: A :class:`ParserOptions` instance to configure the parser.
    :param config: Additional keyword arguments that are available to loaders as
                   attributes of their ``config`` argument.
    :raises ParsingError: When a loader handled the source, but it can't be parsed.
    :raises FailedDocumentLoading: When no loader could handle the source.

    >>> load("<p>Hello!</p>").root.children
    ('Hello!',)
    """
    config_namespace = SimpleNamespace(**config)
    config_namespace.parser_options = parser_options or ParserOptions()
    loader_excuses: dict[Loader, str | Exception] = {}

    for loader in _plugin_manager.loaders:
        try:
            loader_result = loader(source, config_namespace)
        except Exception as e:
            loader_excuses[loader] = e
        else:
            if isinstance(loader_result, str):
                loader_excuses[loader] = loader_result
            else:
                return loader_result

    parsing_errors = [e for e in loader_excuses.values() if isinstance(e, ParsingError)]
    if len(parsing_errors) == 1 and all(
        isinstance(e, (str, ParsingError)) for e in loader_excuses.values()
    ):
        raise parsing_errors[0]
    raise FailedDocumentLoading(source, loader_excuses)


__all__ = (
    Attribute.__name__,
    Attributes.__name__,
    ClosingTag.__name__,
    Document.__name__,
    Element.__name__,
    OpeningTag.__name__,
    ParserOptions.__name__,
    QualifiedName.__name__,
    "core_loaders",
    load.__name__,
    parse.__name__,
    parse_attribute.__name__,
    parse_attribute_with_value.__name__,
    parse_attributes.__name__,
    parse_boolean_attribute.__name__,
    parse_children.__name__,
    parse_closing_tag.__name__,
    parse_declaration.__name__,
    parse_document.__name__,
    parse_identifier.__name__,
    parse_namespaced_name.__name__,
    parse_opening_tag.__name__,
    parse_self_closing_tag.__name__,
    parse_string.__name__,
    parse_tree.__name__,
    to_data.__name__,
    to_json.__name__,
)
