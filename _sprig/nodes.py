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

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from collections.abc import Iterable

    from _sprig.typing import ChildType, Declaration


class QualifiedName(NamedTuple):
    """
    A name with an optional namespace prefix. Only the syntactic prefix is captured,
    it's not resolved to a namespace URI.

    >>> str(QualifiedName("svg", "foreignObject"))
    'svg:foreignObject'
    >>> str(QualifiedName(None, "p"))
    'p'
    """

    namespace: Optional[str]
    local_name: str

    def __str__(self) -> str:
        if self.namespace is None:
            return self.local_name
        return f"{self.namespace}:{self.local_name}"


class Attribute(NamedTuple):
    """
    An attribute as it was written in a tag. The ``value`` of a boolean attribute,
    which is written without a value, is its ``property`` name.
    """

    namespace: Optional[str]
    property: str
    value: str

    @property
    def qualified_name(self) -> str:
        return str(QualifiedName(self.namespace, self.property))


class Attributes(Mapping):
    """
    A :term:`mapping` of qualified attribute names to :class:`Attribute`\\ s. When an
    attribute name occurs more than once, the last occurrence is contained.
    All parsed attributes, including repetitions, are available in document order as
    :attr:`ordered`.

    >>> attributes = Attributes([Attribute(None, "a", "1"), Attribute(None, "a", "2")])
    >>> attributes["a"].value
    '2'
    >>> len(attributes.ordered)
    2
    """

    __slots__ = ("__data", "ordered")

    def __init__(self, attributes: Iterable[Attribute] = ()):
        self.ordered: tuple[Attribute, ...] = tuple(attributes)
        self.__data: Mapping[str, Attribute] = MappingProxyType(
            {a.qualified_name: a for a in self.ordered}
        )

    def __getitem__(self, item: str) -> Attribute:
        return self.__data[item]

    def __hash__(self) -> int:
        return hash(frozenset(self.__data.items()))

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.ordered)!r})"

    def as_values(self) -> dict[str, str]:
        """Returns a plain dictionary of qualified attribute names and values."""
        return {k: v.value for k, v in self.__data.items()}


class OpeningTag(NamedTuple):
    name: QualifiedName
    attributes: Attributes


class ClosingTag(NamedTuple):
    name: QualifiedName


class Element(NamedTuple):
    """
    An XML element with its attributes and children. Children are either nested
    :class:`Element`\\ s or text as :class:`str` objects.
    """

    name: QualifiedName
    attributes: Attributes
    children: tuple[ChildType, ...] = ()

    @property
    def local_name(self) -> str:
        return self.name.local_name

    @property
    def namespace(self) -> Optional[str]:
        return self.name.namespace

    @property
    def qualified_name(self) -> str:
        return str(self.name)

    @property
    def text(self) -> str:
        """The concatenated text contents of all descendants."""
        return "".join(c for c in self.iterate_descendants() if isinstance(c, str))

    def iterate_children(self) -> Iterator[ChildType]:
        yield from self.children

    def iterate_descendants(self) -> Iterator[ChildType]:
        """Yields all descendants depth-first in document order."""
        for child in self.children:
            yield child
            if isinstance(child, Element):
                yield from child.iterate_descendants()


class Document(NamedTuple):
    """
    A parsed document with its optional declaration's pseudo-attributes and the root
    element.
    """

    declaration: Optional[Declaration]
    root: Element

    def __hash__(self) -> int:
        # the declaration is a read-only view on a dictionary
        if self.declaration is None:
            return hash((None, self.root))
        return hash((frozenset(self.declaration.items()), self.root))


__all__ = (
    Attribute.__name__,
    Attributes.__name__,
    ClosingTag.__name__,
    Document.__name__,
    Element.__name__,
    OpeningTag.__name__,
    QualifiedName.__name__,
)
