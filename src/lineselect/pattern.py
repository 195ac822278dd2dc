"""
SPDX-License-Identifier: MIT

  Copyright (c) 2026, SCANOSS

  Permission is hereby granted, free of charge, to any person obtaining a copy
  of this software and associated documentation files (the "Software"), to deal
  in the Software without restriction, including without limitation the rights
  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
  copies of the Software, and to permit persons to whom the Software is
  furnished to do so, subject to the following conditions:

  The above copyright notice and this permission notice shall be included in
  all copies or substantial portions of the Software.

  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
  THE SOFTWARE.

  Line Pattern Module - Parses line number patterns written as Rust-like ranges.

  Supported forms (line numbers are 1-indexed):
  - N       a single line
  - A..B    lines A up to, but excluding, B
  - A..=B   lines A up to and including B
  - A..     line A to the end of the input
  - ..B     first line up to, but excluding, B (..=B to include it)
  - ..      every line
"""

import re
from dataclasses import dataclass
from typing import Optional

from .constants import FIRST_LINE_NUMBER, INCLUSIVE_END_MARKER, RANGE_OPERATOR

LINE_NUMBER_REGEX = re.compile(r'[0-9]+')


class PatternError(Exception):
    """
    Base class for line pattern parsing problems. Always records the offending token
    """

    def __init__(self, token: str, message: str):
        super().__init__(f'{message}: "{token}"')
        self.token = token


class PatternSyntaxError(PatternError):
    """
    Token does not follow the pattern grammar, or holds an invalid line number
    """


class ReversedRangeError(PatternError):
    """
    Token starts after it ends (i.e. 9..=5)
    """


class ExclusiveEndTooSmallError(PatternError):
    """
    Exclusive end of a range is 1 or lower, so it cannot select anything
    """


def parse_line_number(token: str, value: str) -> int:
    """
    Convert the given text into a 1-indexed line number

    :param token: full pattern token (for error reporting)
    :param value: text to convert
    :return: line number
    :raises PatternSyntaxError: if the value is not a positive decimal integer
    """
    if not LINE_NUMBER_REGEX.fullmatch(value):
        raise PatternSyntaxError(token, f'Invalid line number "{value}" in pattern')
    number = int(value)
    if number < FIRST_LINE_NUMBER:
        raise PatternSyntaxError(token, 'Line numbers are 1-indexed')
    return number


@dataclass(frozen=True)
class LinePattern:
    """
    Span of 1-indexed line numbers. A missing start/end means the span is open on that side.
    The end is always stored as INCLUSIVE.
    """

    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def is_bounded(self) -> bool:
        """
        Check if either end of this pattern is set
        """
        return self.start is not None or self.end is not None

    def includes(self, line_number: int) -> bool:
        """
        Check if the given line number is selected by this pattern

        :param line_number: 1-indexed line number
        :return: True if included, False otherwise
        """
        if self.start is not None and line_number < self.start:
            return False
        if self.end is not None and line_number > self.end:
            return False
        return True

    def can_match_after(self, line_number: int) -> bool:
        """
        Check if any line after the given line number could still be selected by this pattern
        """
        return self.end is None or self.end > line_number

    @classmethod
    def parse(cls, token: str) -> 'LinePattern':
        """
        Parse a single pattern token into a LinePattern

        :param token: pattern text (i.e. 5, 5.., 5..=10, .., ..10)
        :return: LinePattern
        :raises PatternError: if the token is malformed
        """
        left, operator, right = token.partition(RANGE_OPERATOR)
        if not operator:
            number = parse_line_number(token, token)
            return cls(start=number, end=number)

        start = parse_line_number(token, left) if left else None
        if not right:
            end = None
        elif right.startswith(INCLUSIVE_END_MARKER):
            end = parse_line_number(token, right[len(INCLUSIVE_END_MARKER):])
        else:
            if not LINE_NUMBER_REGEX.fullmatch(right):
                raise PatternSyntaxError(token, f'Invalid line number "{right}" in pattern')
            exclusive_end = int(right)
            if exclusive_end <= FIRST_LINE_NUMBER:
                raise ExclusiveEndTooSmallError(token, 'End of exclusive range must be greater than 1')
            end = exclusive_end - 1

        if start is not None and end is not None and start > end:
            raise ReversedRangeError(token, 'Reverse patterns not supported')
        return cls(start=start, end=end)

    def __str__(self) -> str:
        start = '' if self.start is None else str(self.start)
        if self.end is None:
            return f'{start}{RANGE_OPERATOR}'
        if self.start == self.end:
            return start
        return f'{start}{RANGE_OPERATOR}{INCLUSIVE_END_MARKER}{self.end}'


#
# End of LinePattern Class
#
