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

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

if TYPE_CHECKING:
    from types import SimpleNamespace

    from _sprig.combinators import Result
    from _sprig.nodes import Document, Element


GenericDecorated = TypeVar("GenericDecorated", bound=Callable[..., Any])
SecondOrderDecorator: TypeAlias = "Callable[[GenericDecorated], GenericDecorated]"

ChildType: TypeAlias = "Element | str"
Declaration: TypeAlias = Mapping[str, str]
ParserFunction: TypeAlias = "Callable[[str, int], Result]"

LoaderResult: TypeAlias = "Document | str"
Loader: TypeAlias = "Callable[[Any, SimpleNamespace], LoaderResult]"
LoaderConstraint: TypeAlias = "Loader | Iterable[Loader] | None"


__all__ = (
    "ChildType",
    "Declaration",
    "GenericDecorated",
    "Loader",
    "LoaderConstraint",
    "LoaderResult",
    "ParserFunction",
    "SecondOrderDecorator",
)
