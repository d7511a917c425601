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

import enum
from itertools import zip_longest
from typing import TYPE_CHECKING

from _sprig.exceptions import InvalidCodePath
from _sprig.nodes import Element

if TYPE_CHECKING:
    from _sprig.typing import ChildType


class TreeDifferenceKind(enum.Enum):
    None_ = enum.auto()
    NodeContent = enum.auto()
    NodeType = enum.auto()
    TagAttributes = enum.auto()
    TagChildrenSize = enum.auto()
    TagLocalName = enum.auto()
    TagNamespace = enum.auto()


class TreesComparisonResult:
    """
    Instances of this class describe one or no difference between two trees.
    Casting an instance to :class:`bool` will yield :obj:`True` when it describes no
    difference, thus the compared trees were equal.
    Casted to strings they're intended to support debugging. The ``path`` is the
    sequence of child indexes that leads from the compared roots to the differing
    nodes.
    """

    def __init__(
        self,
        difference_kind: TreeDifferenceKind,
        lhn: ChildType | None,
        rhn: ChildType | None,
        path: tuple[int, ...] = (),
    ):
        self.difference_kind = difference_kind
        self.lhn = lhn
        self.rhn = rhn
        self.path = path

    def __bool__(self):
        return self.difference_kind is TreeDifferenceKind.None_

    def __str__(self):
        if self.difference_kind is TreeDifferenceKind.None_:
            return "Trees are equal."
        elif self.difference_kind in (
            TreeDifferenceKind.NodeContent,
            TreeDifferenceKind.NodeType,
        ):
            return self.__str_child()
        else:
            return self.__str_tag()

    @property
    def _location(self) -> str:
        return "/" + "/".join(str(i) for i in self.path)

    def __str_child(self) -> str:
        if self.difference_kind is TreeDifferenceKind.NodeContent:
            return (
                f"Nodes' content differ at {self._location}:\n"
                f"{self.lhn!r}\n{self.rhn!r}"
            )
        else:  # difference_kind is TreeDifferenceKind.NodeType
            return (
                f"Nodes are of different type at {self._location}: "
                f"{self.lhn.__class__} != {self.rhn.__class__}"
            )

    def __str_tag(self) -> str:
        assert isinstance(self.lhn, Element)
        assert isinstance(self.rhn, Element)

        if self.difference_kind is TreeDifferenceKind.TagAttributes:
            return (
                f"Attributes of elements at {self._location} differ:\n"
                f"{self.lhn.attributes}\n{self.rhn.attributes}"
            )
        elif self.difference_kind is TreeDifferenceKind.TagChildrenSize:
            result = f"Child nodes of elements at {self._location} differ:"
            for a, b in zip_longest(
                self.lhn.iterate_children(),
                self.rhn.iterate_children(),
                fillvalue=None,
            ):
                result += f"\n\n{a!r}\n{b!r}"
            return result
        elif self.difference_kind is TreeDifferenceKind.TagLocalName:
            return (
                f"Local names of elements at {self._location} differ: "
                f"{self.lhn.local_name} != {self.rhn.local_name}"
            )
        elif self.difference_kind is TreeDifferenceKind.TagNamespace:
            return (
                f"Namespaces of elements at {self._location} differ: "
                f"{self.lhn.namespace} != {self.rhn.namespace}"
            )

        raise InvalidCodePath()


def compare_trees(
    lhr: ChildType, rhr: ChildType, _path: tuple[int, ...] = ()
) -> TreesComparisonResult:
    """
    Compares two element trees for equality. Upon the first detection of a difference
    of nodes that are located at the same position within the compared (sub-)trees a
    mismatch is reported.

    :param lhr: The node that is considered as root of the left hand operand.
    :param rhr: The node that is considered as root of the right hand operand.
    :return: An object that contains information about the first or no difference.
    """
    if not isinstance(rhr, lhr.__class__):
        return TreesComparisonResult(TreeDifferenceKind.NodeType, lhr, rhr, _path)

    if isinstance(lhr, Element):
        assert isinstance(rhr, Element)
        if lhr.namespace != rhr.namespace:
            return TreesComparisonResult(
                TreeDifferenceKind.TagNamespace, lhr, rhr, _path
            )
        if lhr.local_name != rhr.local_name:
            return TreesComparisonResult(
                TreeDifferenceKind.TagLocalName, lhr, rhr, _path
            )
        if lhr.attributes != rhr.attributes:
            return TreesComparisonResult(
                TreeDifferenceKind.TagAttributes, lhr, rhr, _path
            )
        if len(lhr.children) != len(rhr.children):
            return TreesComparisonResult(
                TreeDifferenceKind.TagChildrenSize, lhr, rhr, _path
            )

        for index, (lhn, rhn) in enumerate(zip(lhr.children, rhr.children)):
            result = compare_trees(lhn, rhn, (*_path, index))
            if not result:
                return result

    elif lhr != rhr:
        return TreesComparisonResult(TreeDifferenceKind.NodeContent, lhr, rhr, _path)

    return TreesComparisonResult(TreeDifferenceKind.None_, None, None)


__all__ = (
    compare_trees.__name__,
    TreeDifferenceKind.__name__,
    TreesComparisonResult.__name__,
)
