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
The grammar of the supported XML subset, defined bottom-up from lexical rules to the
document rule. Each rule is a :class:`_sprig.combinators.Parser` and can be applied
on its own.

Where one alternative's input is a prefix of another's, the longer form is tried
first. Otherwise a boolean attribute would be accepted where a value assignment
follows and a name without prefix where a prefixed one is written.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

from _sprig.combinators import Parser, Result, alt, regex, seq, string
from _sprig.exceptions import DuplicateAttribute, MissingRequiredAttribute, TagMismatch
from _sprig.grammar import (
    QUOTES,
    identifier_pattern,
    optional_whitespace_pattern,
    text_pattern,
)
from _sprig.nodes import (
    Attribute,
    Attributes,
    ClosingTag,
    Document,
    Element,
    OpeningTag,
    QualifiedName,
)

if TYPE_CHECKING:
    from typing import Final

    from _sprig.parser import ParserOptions
    from _sprig.typing import ChildType, Declaration


REQUIRED_DECLARATION_ATTRIBUTE: Final = "version"


class Language(NamedTuple):
    identifier: Parser
    string: Parser
    namespaced_name: Parser
    attribute_with_value: Parser
    boolean_attribute: Parser
    attribute: Parser
    attributes: Parser
    opening_tag: Parser
    self_closing_tag: Parser
    closing_tag: Parser
    children: Parser
    tree: Parser
    declaration: Parser
    document: Parser


RULE_NAMES: Final = Language._fields


# lexical rules


optional_whitespace: Final = regex(optional_whitespace_pattern, "whitespace")
identifier: Final = regex(identifier_pattern, "identifier")
text: Final = regex(text_pattern, "text")


def _quoted(quote: str) -> Parser:
    return seq(string(quote), regex(f"[^{quote}]*"), string(quote)).combine(
        lambda _, content, __: content
    )


quoted_string: Final = alt(*(_quoted(q) for q in QUOTES))


# names


namespaced_name: Final = alt(
    seq(identifier.skip(string(":")), identifier),
    identifier.map(lambda local_name: (None, local_name)),
).combine(QualifiedName)


# attributes


attribute_with_value: Final = seq(
    namespaced_name, string("=").trim(optional_whitespace), quoted_string
).combine(lambda name, _, value: Attribute(name.namespace, name.local_name, value))

boolean_attribute: Final = namespaced_name.map(
    lambda name: Attribute(name.namespace, name.local_name, name.local_name)
)

attribute: Final = alt(attribute_with_value, boolean_attribute)


# tags


closing_tag: Final = seq(
    string("<").trim(optional_whitespace),
    string("/").trim(optional_whitespace),
    namespaced_name,
    string(">").trim(optional_whitespace),
).combine(lambda _, __, name, ___: ClosingTag(name))


# document parts


def _make_declaration(marked_attributes: tuple[int, Attributes, int]) -> Declaration:
    position, attributes, _ = marked_attributes
    if REQUIRED_DECLARATION_ATTRIBUTE not in attributes:
        raise MissingRequiredAttribute(
            REQUIRED_DECLARATION_ATTRIBUTE, position=position
        )
    return MappingProxyType(attributes.as_values())


def _make_tree_rules(
    opening_tag: Parser, self_closing_tag: Parser
) -> tuple[Parser, Parser]:
    """
    Returns the mutually recursive rules for trees and children. They are plain
    functions that call each other, so that each level of nesting in a document
    costs two frames of the interpreter's stack.
    """
    parse_opening_tag = opening_tag._function
    parse_self_closing_tag = self_closing_tag._function
    parse_closing_tag = closing_tag._function
    parse_text = text._function
    skip_whitespace = optional_whitespace._function

    def parse_children(text: str, index: int) -> Result:
        values: list[ChildType] = []
        result = None
        position = index

        while True:
            child = parse_tree(text, position).aggregate(result)
            if not child.status:
                child = parse_text(text, position).aggregate(child)
            result = child
            if not child.status:
                return Result.success(index, values).aggregate(result)
            values.append(child.value)
            index = child.position
            position = skip_whitespace(text, index).position

    def parse_tree(text: str, index: int) -> Result:
        index = skip_whitespace(text, index).position

        result = parse_opening_tag(text, index)
        if result.status:
            tag: OpeningTag = result.value
            result = parse_children(text, result.position).aggregate(result)
            children = result.value
            position = skip_whitespace(text, result.position).position
            result = parse_closing_tag(text, position).aggregate(result)
            if result.status:
                if result.value.name != tag.name:
                    raise TagMismatch(
                        expected=tag.name, found=result.value.name, position=position
                    )
                result = result._replace(
                    value=Element(tag.name, tag.attributes, tuple(children))
                )

        if not result.status:
            result = parse_self_closing_tag(text, index).aggregate(result)
            if not result.status:
                return result

        return result._replace(position=skip_whitespace(text, result.position).position)

    return Parser(parse_tree), Parser(parse_children)


@lru_cache(8)
def make_language(options: ParserOptions) -> Language:
    """
    Returns the grammar's rules that depend on the given options along with the
    invariable ones.
    """

    def collect_attributes(
        marked_attributes: list[tuple[int, Attribute, int]],
    ) -> Attributes:
        if options.reject_duplicate_attributes:
            names: set[str] = set()
            for position, attribute, _ in marked_attributes:
                if (name := attribute.qualified_name) in names:
                    raise DuplicateAttribute(name, position=position)
                names.add(name)
        return Attributes(a for _, a, _ in marked_attributes)

    attributes = (
        attribute.mark()
        .sep_by(optional_whitespace)
        .trim(optional_whitespace)
        .map(collect_attributes)
    )

    opening_tag = seq(
        string("<"),
        namespaced_name.desc("tag name").trim(optional_whitespace),
        attributes,
        string(">"),
    ).combine(lambda _, name, attributes, __: OpeningTag(name, attributes))

    self_closing_tag = seq(
        string("<"),
        namespaced_name.desc("tag name"),
        attributes,
        string("/").trim(optional_whitespace),
        string(">"),
    ).combine(lambda _, name, attributes, __, ___: Element(name, attributes, ()))

    tree, children = _make_tree_rules(opening_tag, self_closing_tag)

    declaration = seq(
        seq(*(string(s).trim(optional_whitespace) for s in ("<", "?", "xml"))).desc(
            "XML declaration"
        ),
        attributes.mark(),
        seq(
            string("?").trim(optional_whitespace),
            string(">").trim(optional_whitespace),
        ),
    ).combine(lambda _, marked_attributes, __: _make_declaration(marked_attributes))

    document = alt(
        seq(declaration, tree).combine(Document),
        tree.map(lambda root: Document(None, root)),
    )

    return Language(
        identifier=identifier,
        string=quoted_string,
        namespaced_name=namespaced_name,
        attribute_with_value=attribute_with_value,
        boolean_attribute=boolean_attribute,
        attribute=attribute,
        attributes=attributes,
        opening_tag=opening_tag,
        self_closing_tag=self_closing_tag,
        closing_tag=closing_tag,
        children=children,
        tree=tree,
        declaration=declaration,
        document=document,
    )


__all__ = (Language.__name__, "RULE_NAMES", make_language.__name__)
