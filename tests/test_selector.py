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
"""
import io
import unittest
from contextlib import nullcontext
from unittest.mock import patch

from lineselect.pattern import LinePattern, PatternError
from lineselect.selector import (
    LineSelector,
    OrderViolationError,
    SelectionError,
    parse_pattern_list,
    select_lines,
    validate_pattern_order,
)
from lineselect.selector_config import SelectorConfig


def run_selection(data: str, patterns: str, show_line_number: bool = False) -> list:
    fin = io.BytesIO(data.encode())
    fout = io.BytesIO()
    select_lines(fin, fout, patterns, show_line_number)
    return fout.getvalue().decode().splitlines()


class LimitedInput:
    """
    Binary input that fails the test if more than `limit` lines are requested
    """

    def __init__(self, limit: int):
        self.limit = limit
        self.lines_read = 0

    def __iter__(self):
        while True:
            if self.lines_read >= self.limit:
                raise AssertionError(f'Read past line {self.limit}')
            self.lines_read += 1
            yield f'line {self.lines_read}\n'.encode()


class FailingInput:
    """
    Binary input that raises an I/O error after a number of lines
    """

    def __init__(self, lines: list):
        self.lines = lines
        self.iterated = False

    def __iter__(self):
        self.iterated = True
        yield from self.lines
        raise OSError('device went away')


class TestPatternList(unittest.TestCase):
    """
    Test suite for pattern list parsing and ordering
    """

    def test_parse_keeps_order(self):
        patterns = parse_pattern_list('1,5..7,9..')
        self.assertEqual(patterns, [LinePattern(1, 1), LinePattern(5, 6), LinePattern(9, None)])

    def test_parse_rejects_empty_tokens(self):
        for patterns in ('', '1,,2', '1,'):
            with self.assertRaises(PatternError, msg=patterns):
                parse_pattern_list(patterns)

    def test_lines_must_be_specified_in_order(self):
        test_vectors = [
            ('4,4', False),
            ('4,5', False),
            ('5,4', True),
            ('1..9,4', True),
            ('8..9,4', True),
            ('2..4,1', True),
            ('2..4,4', False),
            ('1,..=3', False),
            ('..=1,..', False),
            ('1,..', False),
            ('2..=4,4', False),
            ('5..,6', True),
            ('..,1', False),
            ('..3,3,3', False),
        ]
        for patterns, should_error in test_vectors:
            line_patterns = parse_pattern_list(patterns)
            if should_error:
                with self.assertRaises(OrderViolationError, msg=patterns):
                    validate_pattern_order(line_patterns)
            else:
                validate_pattern_order(line_patterns)

    def test_out_of_order_fails_through_selector(self):
        for patterns in ('5,4', '1..9,4', '8..9,4', '2..4,1'):
            fin = io.BytesIO(b'Foo\nBar\nBaz')
            with self.assertRaises(SelectionError, msg=patterns):
                select_lines(fin, io.BytesIO(), patterns)

    def test_bad_pattern_is_wrapped(self):
        with self.assertRaises(SelectionError) as ctx:
            select_lines(io.BytesIO(b'Foo'), io.BytesIO(), '1,0')
        self.assertIsInstance(ctx.exception.__cause__, PatternError)
        self.assertIn('"0"', str(ctx.exception))

    def test_nothing_read_or_written_on_pattern_errors(self):
        for patterns in ('5,4', '9..=5', 'x', '..1'):
            fin = FailingInput([b'Foo\n'])
            fout = io.BytesIO()
            with self.assertRaises(SelectionError, msg=patterns):
                select_lines(fin, fout, patterns)
            self.assertFalse(fin.iterated)
            self.assertEqual(fout.getvalue(), b'')


class TestLineSelector(unittest.TestCase):
    """
    Test suite for streaming line selection
    """

    def test_select_lines(self):
        test_vectors = [
            ('', '1,2,2', []),
            ('Foo\nBar', '1,2,2', ['Foo', 'Bar', 'Bar']),
            ('Foo\nBar\nBaz', '..', ['Foo', 'Bar', 'Baz']),
            ('Foo\nBar\nBaz', '1..', ['Foo', 'Bar', 'Baz']),
            ('Foo\nBar\nBaz', '2..', ['Bar', 'Baz']),
            ('Foo\nBar\nBaz', '2..3', ['Bar']),
            ('Foo\nBar\nBaz', '2..=3', ['Bar', 'Baz']),
            ('Foo\nBar\nBaz', '..=3', ['Foo', 'Bar', 'Baz']),
            ('Foo\nBar\nBaz', '..3', ['Foo', 'Bar']),
            ('Foo\nBar\nBaz', '..3,3,3', ['Foo', 'Bar', 'Baz', 'Baz']),
            ('Foo\nBar', '..', ['Foo', 'Bar']),
            ('Foo\nBar\n', '..', ['Foo', 'Bar']),
            ('Foo\nBar\n\n', '..', ['Foo', 'Bar', '']),
            ('Foo\nBar\nBaz', '1,2..', ['Foo', 'Bar', 'Baz']),
            ('Foo\nBar\nBaz', '7', []),
            ('Foo\nBar\nBaz', '2,7..', ['Bar']),
        ]
        for data, patterns, expected in test_vectors:
            self.assertEqual(run_selection(data, patterns), expected, f'{data!r} with {patterns!r}')

    def test_empty_input(self):
        for patterns in ('..', '1', '3..=9', '1,2,2'):
            fout = io.BytesIO()
            self.assertEqual(select_lines(io.BytesIO(b''), fout, patterns), 0)
            self.assertEqual(fout.getvalue(), b'')

    def test_all_lines_reproduces_input(self):
        data = b'alpha\n  beta  \n\n\tgamma\ndelta\n'
        fout = io.BytesIO()
        written = select_lines(io.BytesIO(data), fout, '..')
        self.assertEqual(written, 5)
        self.assertEqual(fout.getvalue(), data)

    def test_missing_final_newline_is_added(self):
        fout = io.BytesIO()
        select_lines(io.BytesIO(b'Foo\nBar'), fout, '..')
        self.assertEqual(fout.getvalue(), b'Foo\nBar\n')

    def test_crlf_terminators_are_removed(self):
        fout = io.BytesIO()
        select_lines(io.BytesIO(b'Foo\r\nBar\r\n'), fout, '2')
        self.assertEqual(fout.getvalue(), b'Bar\n')

    def test_non_utf8_bytes_are_preserved(self):
        fout = io.BytesIO()
        select_lines(io.BytesIO(b'ok\n\xff\xfe\x00raw\n'), fout, '2')
        self.assertEqual(fout.getvalue(), b'\xff\xfe\x00raw\n')

    def test_show_line_number(self):
        self.assertEqual(run_selection('Foo\nBar', '1,2', show_line_number=True), ['1\tFoo', '2\tBar'])
        self.assertEqual(run_selection('Foo\nBar\nBaz', '..3,3,3', True), ['1\tFoo', '2\tBar', '3\tBaz', '3\tBaz'])

    def test_custom_line_separator(self):
        selector = LineSelector(SelectorConfig(quiet=True, show_line_number=True, line_separator=': '))
        fout = io.BytesIO()
        selector.select(io.BytesIO(b'Foo\nBar\n'), fout, '2')
        self.assertEqual(fout.getvalue(), b'2: Bar\n')

    def test_returns_lines_written(self):
        self.assertEqual(select_lines(io.BytesIO(b'Foo\nBar'), io.BytesIO(), '1,2,2'), 3)

    def test_stops_reading_when_nothing_else_can_match(self):
        test_vectors = [
            ('3', 3),
            ('1,2,5', 5),
            ('..4', 3),
            ('2..=6', 6),
            ('..=4,4', 4),
        ]
        for patterns, expected_reads in test_vectors:
            fin = LimitedInput(expected_reads)
            fout = io.BytesIO()
            select_lines(fin, fout, patterns)
            self.assertEqual(fin.lines_read, expected_reads, patterns)

    def test_open_ended_patterns_read_to_the_end(self):
        fin = LimitedInput(3)
        with self.assertRaises(AssertionError):
            select_lines(fin, io.BytesIO(), '1,3..')

    def test_io_error_keeps_partial_output(self):
        fin = FailingInput([b'Foo\n', b'Bar\n'])
        fout = io.BytesIO()
        with self.assertRaises(OSError):
            select_lines(fin, fout, '..')
        self.assertEqual(fout.getvalue(), b'Foo\nBar\n')

    @patch('lineselect.lineselectbase.Spinner')
    def test_spinner_ticks_once_per_line(self, mock_spinner_class):
        """Progress spinner advances for every line read when STDERR is a TTY"""
        spinner = mock_spinner_class.return_value.__enter__.return_value
        selector = LineSelector(SelectorConfig(), show_progress=True)
        selector.isatty = True
        fout = io.BytesIO()
        selector.select(io.BytesIO(b'Foo\nBar\nBaz\n'), fout, '1,3')
        mock_spinner_class.assert_called_once_with('Selecting ')
        self.assertEqual(spinner.next.call_count, 3)
        self.assertEqual(fout.getvalue(), b'Foo\nBaz\n')

    def test_spinner_disabled(self):
        """No spinner in quiet mode, without a TTY, or when progress is not requested"""
        quiet_selector = LineSelector(SelectorConfig(quiet=True), show_progress=True)
        quiet_selector.isatty = True
        self.assertIsInstance(quiet_selector.spinner_context('Selecting ', True), nullcontext)

        selector = LineSelector(SelectorConfig(), show_progress=False)
        selector.isatty = True
        self.assertIsInstance(selector.spinner_context('Selecting ', selector.show_progress), nullcontext)

        selector.isatty = False
        self.assertIsInstance(selector.spinner_context('Selecting ', True), nullcontext)

    def test_selector_can_be_reused(self):
        selector = LineSelector(SelectorConfig(quiet=True))
        for data, expected in ((b'a\nb\n', b'b\n'), (b'c\nd\ne\n', b'd\n')):
            fout = io.BytesIO()
            selector.select(io.BytesIO(data), fout, '2')
            self.assertEqual(fout.getvalue(), expected)


if __name__ == '__main__':
    unittest.main()
