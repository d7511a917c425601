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

"""These are the specific sprig exceptions."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from _sprig.nodes import QualifiedName
    from _sprig.typing import Loader


class SprigBaseException(Exception):
    pass


class FailedDocumentLoading(SprigBaseException):
    def __init__(self, source: Any, excuses: dict[Loader, str | Exception]):
        self.source = source
        self.excuses = excuses

    def __str__(self):
        return f"Couldn't load {self.source!r} with these loaders: {self.excuses}"


class InvalidCodePath(SprigBaseException, RuntimeError):
    """Raised when a code path that is not expected to be executed is reached."""

    def __init__(self):  # pragma: no cover
        super().__init__(
            "An unintended path was taken through the code. Please report this bug."
        )


class ParsingError(SprigBaseException):
    """
    The base class for all failures to parse an input. The failing ``position`` is
    an offset of characters into the input ``text``.
    """

    def __init__(
        self,
        text: Optional[str] = None,
        position: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.text = text
        self.position = position
        self.message = message

    def __str__(self):
        assert self.message is not None
        position = self.position
        text = self.text

        if position is None or text is None:
            return f"Parsing error: {self.message}"

        text_length = len(text)
        snippet_end = min(position + 16, text_length)

        if text_length > snippet_end:
            snippet = f"`{text[position:snippet_end]}…`"
        else:
            snippet = f"`{text[position:snippet_end]}`"

        if len(snippet) > 2:
            return f"Parsing error at character {position} ({snippet}): {self.message}"
        else:
            return f"Parsing error at character {position}: {self.message}"


class UnexpectedInput(ParsingError):
    """
    Raised when the input doesn't match the grammar. ``expected`` holds descriptions
    of what would have been acceptable at the furthest position that any attempted
    alternative reached.
    """

    def __init__(
        self,
        text: Optional[str] = None,
        position: Optional[int] = None,
        expected: Iterable[str] = (),
    ):
        self.expected = tuple(sorted(set(expected)))
        super().__init__(text=text, position=position, message=self._make_message())

    def _make_message(self) -> str:
        match len(self.expected):
            case 0:
                return "Unexpected input."
            case 1:
                return f"Expected {self.expected[0]}."
            case _:
                return f"Expected one of {', '.join(self.expected)}."


class ExcessiveNesting(ParsingError):
    """
    Raised when a document's elements are nested too deeply to be parsed within the
    interpreter's recursion limit, see :func:`sys.setrecursionlimit`.
    """

    def __init__(self, recursion_limit: int, text: Optional[str] = None):
        self.recursion_limit = recursion_limit
        super().__init__(
            text=text,
            message=(
                "Elements are nested deeper than the recursion limit of "
                f"{recursion_limit} allows."
            ),
        )


class ParsingValidityError(ParsingError):
    """
    Raised for structurally sound input that violates a constraint beyond the
    grammar's syntax. These are never recovered by trying alternatives.
    """

    pass


class TagMismatch(ParsingValidityError):
    """Raised when a closing tag's name doesn't match its opening tag's name."""

    def __init__(
        self,
        expected: QualifiedName,
        found: QualifiedName,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(
            text=text,
            position=position,
            message=f"Expected </{expected}> closing tag, got </{found}> instead.",
        )


class MissingRequiredAttribute(ParsingValidityError):
    def __init__(
        self,
        attribute_name: str,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.attribute_name = attribute_name
        super().__init__(
            text=text,
            position=position,
            message=f'Required attribute "{attribute_name}" was omitted.',
        )


class DuplicateAttribute(ParsingValidityError):
    def __init__(
        self,
        attribute_name: str,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.attribute_name = attribute_name
        super().__init__(
            text=text,
            position=position,
            message=f'Attribute "{attribute_name}" is defined more than once.',
        )


__all__ = (
    DuplicateAttribute.__name__,
    ExcessiveNesting.__name__,
    FailedDocumentLoading.__name__,
    InvalidCodePath.__name__,
    MissingRequiredAttribute.__name__,
    ParsingError.__name__,
    ParsingValidityError.__name__,
    SprigBaseException.__name__,
    TagMismatch.__name__,
    UnexpectedInput.__name__,
)
