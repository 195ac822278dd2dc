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

  Line Selector Module - Streams the lines of an input that match a list of line patterns.

  The input is consumed in a single forward pass, one line at a time. Because
  earlier lines cannot be revisited, the patterns must be supplied in order.
"""

import math
from typing import BinaryIO, List, Optional

from .constants import FIRST_LINE_NUMBER, LINE_TERMINATOR, PATTERN_LIST_DELIMITER
from .lineselectbase import LineSelectBase
from .pattern import LinePattern, PatternError
from .selector_config import SelectorConfig


class SelectionError(Exception):
    """
    Problem with the pattern list supplied for a selection
    """


class OrderViolationError(SelectionError):
    """
    Patterns were not supplied in non-decreasing, non-overlapping order
    """


def parse_pattern_list(patterns: str) -> List[LinePattern]:
    """
    Parse a comma separated list of line patterns (i.e. 1,5..7,10..)

    :param patterns: pattern list text
    :return: list of LinePattern in the order supplied
    :raises PatternError: if any token is malformed
    """
    return [LinePattern.parse(token) for token in patterns.split(PATTERN_LIST_DELIMITER)]


def validate_pattern_order(patterns: List[LinePattern]) -> None:
    """
    Make sure each pattern starts at or after the end of the one before it.
    A fully open pattern (..) places no constraint on the pattern that follows.

    :param patterns: parsed patterns
    :raises OrderViolationError: if two adjacent patterns are out of order
    """
    for prev, this in zip(patterns, patterns[1:]):
        if not prev.is_bounded:
            continue
        prev_end = math.inf if prev.end is None else prev.end
        this_start = FIRST_LINE_NUMBER if this.start is None else this.start
        if prev_end > this_start:
            raise OrderViolationError(f'Lines must be given in order: "{this}" starts before "{prev}" ends')


def strip_line_terminator(line: bytes) -> bytes:
    """
    Remove the trailing newline (\\n or \\r\\n) from a line read from the input
    """
    if line.endswith(LINE_TERMINATOR):
        line = line[:-1]
        if line.endswith(b'\r'):
            line = line[:-1]
    return line


class LineSelector(LineSelectBase):
    """
    Selects lines from a binary input stream and writes them to a binary output stream
    """

    def __init__(self, config: Optional[SelectorConfig] = None, show_progress: bool = False):
        """
        Initialise LineSelector
        Parameters
        ----------
            config: SelectorConfig
                Selection and diagnostic options (defaults if not supplied)
            show_progress: bool
                Display a spinner on STDERR while reading (only if STDERR is a TTY)
        """
        if config is None:
            config = SelectorConfig()
        super().__init__(config.debug, config.trace, config.quiet)
        self.show_line_number = config.show_line_number
        self.line_separator = config.line_separator.encode()
        self.show_progress = show_progress

    def load_patterns(self, patterns: str) -> List[LinePattern]:
        """
        Parse and validate the pattern list. Nothing is read or written here.

        :param patterns: comma separated pattern list
        :return: validated list of LinePattern
        :raises SelectionError: if the list is malformed or out of order
        """
        try:
            line_patterns = parse_pattern_list(patterns)
        except PatternError as e:
            raise SelectionError(f'Invalid line pattern list "{patterns}": {e}') from e
        validate_pattern_order(line_patterns)
        self.print_debug(f'Loaded {len(line_patterns)} line pattern(s): {", ".join(map(str, line_patterns))}')
        return line_patterns

    def write_line(self, fout: BinaryIO, line_number: int, line: bytes):
        """
        Write a single selected line (with optional line number prefix)
        """
        if self.show_line_number:
            fout.write(str(line_number).encode() + self.line_separator)
        fout.write(line)
        fout.write(LINE_TERMINATOR)

    def select(self, fin: BinaryIO, fout: BinaryIO, patterns: str) -> int:
        """
        Write each line of the input once for every pattern that includes it

        :param fin: binary input stream, read forward only
        :param fout: binary output stream
        :param patterns: comma separated pattern list
        :return: number of lines written
        :raises SelectionError: if the pattern list is invalid (before any input is read)
        :raises OSError: if reading or writing fails
        """
        return self.select_patterns(fin, fout, self.load_patterns(patterns))

    def select_patterns(self, fin: BinaryIO, fout: BinaryIO, line_patterns: List[LinePattern]) -> int:
        """
        Stream the input against patterns already returned by load_patterns

        :param fin: binary input stream, read forward only
        :param fout: binary output stream
        :param line_patterns: validated patterns
        :return: number of lines written
        :raises OSError: if reading or writing fails
        """
        lines_written = 0
        line_number = 0
        with self.spinner_context('Selecting ', self.show_progress) as spinner:
            for line_number, line in enumerate(fin, start=FIRST_LINE_NUMBER):
                line = strip_line_terminator(line)
                for pattern in line_patterns:
                    if pattern.includes(line_number):
                        self.print_trace(f'Line {line_number}: selected by pattern {pattern}')
                        self.write_line(fout, line_number, line)
                        lines_written += 1
                if spinner:
                    spinner.next()
                # Don't bother reading the rest if nothing else can match
                if not any(pattern.can_match_after(line_number) for pattern in line_patterns):
                    self.print_debug(f'No pattern can match beyond line {line_number}. Stopping.')
                    break
        self.print_debug(f'Read {line_number} line(s), wrote {lines_written} line(s).')
        return lines_written


def select_lines(fin: BinaryIO, fout: BinaryIO, patterns: str, show_line_number: bool = False) -> int:
    """
    Select lines from the input using default (quiet) settings

    :param fin: binary input stream
    :param fout: binary output stream
    :param patterns: comma separated pattern list
    :param show_line_number: prefix each written line with its line number
    :return: number of lines written
    """
    selector = LineSelector(SelectorConfig(quiet=True, show_line_number=show_line_number))
    return selector.select(fin, fout, patterns)


#
# End of LineSelector Class
#
