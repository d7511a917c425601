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

import sys
from typing import TYPE_CHECKING, NamedTuple, Optional

from _sprig.exceptions import ExcessiveNesting, ParsingError
from _sprig.language import RULE_NAMES, make_language

if TYPE_CHECKING:
    from _sprig.nodes import (
        Attribute,
        Attributes,
        ClosingTag,
        Document,
        Element,
        OpeningTag,
        QualifiedName,
    )
    from _sprig.typing import ChildType, Declaration


class ParserOptions(NamedTuple):
    """
    The configuration options that define the parser's behaviour.

    :param encoding: An optional encoding that is expected when binary data is loaded.
                     This should be used for streams where the encoding is not noted
                     in an XML document declaration or indicated by a BOM for Unicode
                     encodings. It doesn't affect parsing of data that is passed as
                     :class:`str`.
    :param reject_duplicate_attributes: Fail with a
                                        :exc:`_sprig.exceptions.DuplicateAttribute`
                                        when a tag or declaration contains the same
                                        attribute name more than once. Otherwise the
                                        last occurrence is kept in
                                        :class:`_sprig.nodes.Attributes` mappings.
    """

    encoding: Optional[str] = None
    reject_duplicate_attributes: bool = False


def parse(text: str, rule: str = "document", options: Optional[ParserOptions] = None):
    """
    Parses the complete ``text`` with the named grammar rule.

    :param text: The input that must be matched by the rule in its entirety.
    :param rule: One of :obj:`_sprig.language.RULE_NAMES`.
    :param options: The parser's configuration.
    :raises ParsingError: When the input can't be parsed.
    :raises ExcessiveNesting: When the input's elements are nested deeper than the
                              interpreter's recursion limit permits.
    """
    if rule not in RULE_NAMES:
        raise ValueError(f"There's no grammar rule named `{rule}`.")

    try:
        return getattr(make_language(options or ParserOptions()), rule).parse(text)
    except ParsingError as e:
        e.text = text
        if e.position is None:
            e.position = 0
        raise e
    except RecursionError as e:
        raise ExcessiveNesting(sys.getrecursionlimit(), text=text) from e


# entry points per grammar rule


def parse_identifier(text: str, options: Optional[ParserOptions] = None) -> str:
    return parse(text, "identifier", options)


def parse_string(text: str, options: Optional[ParserOptions] = None) -> str:
    """Returns the contents of a single- or double-quoted string."""
    return parse(text, "string", options)


def parse_namespaced_name(
    text: str, options: Optional[ParserOptions] = None
) -> QualifiedName:
    return parse(text, "namespaced_name", options)


def parse_attribute(text: str, options: Optional[ParserOptions] = None) -> Attribute:
    return parse(text, "attribute", options)


def parse_attribute_with_value(
    text: str, options: Optional[ParserOptions] = None
) -> Attribute:
    """Parses an attribute with an assigned value, e.g. ``type="text"``."""
    return parse(text, "attribute_with_value", options)


def parse_boolean_attribute(
    text: str, options: Optional[ParserOptions] = None
) -> Attribute:
    """Parses an attribute without value, its value is the attribute's name."""
    return parse(text, "boolean_attribute", options)


def parse_attributes(text: str, options: Optional[ParserOptions] = None) -> Attributes:
    return parse(text, "attributes", options)


def parse_opening_tag(
    text: str, options: Optional[ParserOptions] = None
) -> OpeningTag:
    return parse(text, "opening_tag", options)


def parse_self_closing_tag(
    text: str, options: Optional[ParserOptions] = None
) -> Element:
    return parse(text, "self_closing_tag", options)


def parse_closing_tag(text: str, options: Optional[ParserOptions] = None) -> ClosingTag:
    return parse(text, "closing_tag", options)


def parse_children(
    text: str, options: Optional[ParserOptions] = None
) -> list[ChildType]:
    return parse(text, "children", options)


def parse_tree(text: str, options: Optional[ParserOptions] = None) -> Element:
    """
    Parses an element with its descendants. Surrounding whitespace is ignored.
    """
    return parse(text, "tree", options)


def parse_declaration(
    text: str, options: Optional[ParserOptions] = None
) -> Declaration:
    """
    Parses an XML declaration like ``<?xml version="1.0"?>`` into a read-only mapping
    of its pseudo-attributes.
    """
    return parse(text, "declaration", options)


def parse_document(text: str, options: Optional[ParserOptions] = None) -> Document:
    """
    Parses a complete document that consists of an optional declaration and one root
    element.

    >>> document = parse_document('<?xml version="1.0"?><p>Hi!</p>')
    >>> document.declaration["version"]
    '1.0'
    >>> document.root.children
    ('Hi!',)
    """
    return parse(text, "document", options)


__all__ = (
    ParserOptions.__name__,
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
)
