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
A small set of backtracking parser combinators. A :class:`Parser` wraps a function
that is called with the complete input text and a position within it and returns a
:class:`Result`. Alternatives are tried at the same position, so rewinding is
implicit as a failed attempt never advances the caller's position.

Failed attempts are aggregated into every result so that the furthest position that
any alternative reached along with the constructs it expected there can be reported
if the whole parse fails.

Combinators call the wrapped functions of their operands directly, every layer of
combination adds only one frame to the interpreter's stack.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from _sprig.exceptions import UnexpectedInput

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Final

    from _sprig.typing import ParserFunction


class Result(NamedTuple):
    status: bool
    position: int
    value: Any
    furthest: int
    expected: frozenset[str]

    @staticmethod
    def success(index: int, value: Any) -> Result:
        return Result(True, index, value, -1, frozenset())

    @staticmethod
    def failure(index: int, expected: str) -> Result:
        return Result(False, -1, None, index, frozenset((expected,)))

    def aggregate(self, other: Optional[Result]) -> Result:
        if other is None or self.furthest > other.furthest:
            return self
        if self.furthest < other.furthest:
            return self._replace(furthest=other.furthest, expected=other.expected)
        return self._replace(expected=self.expected | other.expected)


class Parser:
    __slots__ = ("_function",)

    def __init__(self, function: ParserFunction):
        self._function = function

    def parse(self, text: str) -> Any:
        """
        Applies the parser to the whole ``text`` and returns the parsed value.

        :raises UnexpectedInput: If the input doesn't match or isn't consumed
                                 completely.
        """
        result = self.skip(eof)._function(text, 0)
        if result.status:
            return result.value
        raise UnexpectedInput(
            text=text, position=result.furthest, expected=result.expected
        )

    def combine(self, function: Callable[..., Any]) -> Parser:
        """Maps a sequence of values by passing them as arguments to ``function``."""
        return self.map(lambda values: function(*values))

    def desc(self, description: str) -> Parser:
        """Replaces the expectations of a failure with ``description``."""
        parse = self._function

        def described_parser(text: str, index: int) -> Result:
            result = parse(text, index)
            if result.status:
                return result
            return Result.failure(index, description)

        return Parser(described_parser)

    def map(self, function: Callable[[Any], Any]) -> Parser:
        parse = self._function

        def mapped_parser(text: str, index: int) -> Result:
            result = parse(text, index)
            if result.status:
                return result._replace(value=function(result.value))
            return result

        return Parser(mapped_parser)

    def mark(self) -> Parser:
        """Wraps the parsed value in a tuple with its start and end positions."""
        parse = self._function

        def marked_parser(text: str, index: int) -> Result:
            result = parse(text, index)
            if result.status:
                return result._replace(value=(index, result.value, result.position))
            return result

        return Parser(marked_parser)

    def sep_by(self, separator: Parser) -> Parser:
        """
        Zero or more occurrences, delimited by ``separator``. A separator that isn't
        followed by another occurrence is not consumed.
        """
        parse = self._function
        parse_separator = separator._function

        def separated_parser(text: str, index: int) -> Result:
            values = []
            result = parse(text, index)

            while result.status:
                values.append(result.value)
                index = result.position
                separation = parse_separator(text, index).aggregate(result)
                if not separation.status:
                    result = separation
                    break
                result = parse(text, separation.position).aggregate(separation)

            return Result.success(index, values).aggregate(result)

        return Parser(separated_parser)

    def skip(self, other: Parser) -> Parser:
        """Parses ``other`` after this one, but only keeps this parser's value."""
        parse = self._function
        parse_other = other._function

        def skipping_parser(text: str, index: int) -> Result:
            result = parse(text, index)
            if not result.status:
                return result
            following = parse_other(text, result.position).aggregate(result)
            if not following.status:
                return following
            return following._replace(value=result.value)

        return Parser(skipping_parser)

    def trim(self, padding: Parser) -> Parser:
        """Parses ``padding`` before and after this one, keeps this parser's value."""
        parse = self._function
        parse_padding = padding._function

        def trimmed_parser(text: str, index: int) -> Result:
            before = parse_padding(text, index)
            if not before.status:
                return before
            result = parse(text, before.position).aggregate(before)
            if not result.status:
                return result
            after = parse_padding(text, result.position).aggregate(result)
            if not after.status:
                return after
            return after._replace(value=result.value)

        return Parser(trimmed_parser)


# combinator functions


def alt(*parsers: Parser) -> Parser:
    """Tries the ``parsers`` in the given order, the first success is returned."""
    functions = tuple(p._function for p in parsers)

    def alternatives_parser(text: str, index: int) -> Result:
        result = None
        for parse in functions:
            result = parse(text, index).aggregate(result)
            if result.status:
                return result
        assert result is not None
        return result

    return Parser(alternatives_parser)


def regex(pattern: str, description: Optional[str] = None) -> Parser:
    match = re.compile(pattern).match
    expected = description or pattern

    def regex_parser(text: str, index: int) -> Result:
        if (result := match(text, index)) is not None:
            return Result.success(result.end(), result.group())
        return Result.failure(index, expected)

    return Parser(regex_parser)


def seq(*parsers: Parser) -> Parser:
    """Applies the ``parsers`` one after another, yields a tuple of their values."""
    functions = tuple(p._function for p in parsers)

    def sequence_parser(text: str, index: int) -> Result:
        values = []
        result = None
        for parse in functions:
            result = parse(text, index).aggregate(result)
            if not result.status:
                return result
            values.append(result.value)
            index = result.position
        return Result.success(index, tuple(values)).aggregate(result)

    return Parser(sequence_parser)


def string(expected: str) -> Parser:
    length = len(expected)
    description = f"`{expected}`"

    def string_parser(text: str, index: int) -> Result:
        if text.startswith(expected, index):
            return Result.success(index + length, expected)
        return Result.failure(index, description)

    return Parser(string_parser)


def _eof(text: str, index: int) -> Result:
    if index >= len(text):
        return Result.success(index, None)
    return Result.failure(index, "end of input")


eof: Final = Parser(_eof)


__all__ = (
    Parser.__name__,
    Result.__name__,
    alt.__name__,
    "eof",
    regex.__name__,
    seq.__name__,
    string.__name__,
)
