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

import argparse
import os
import sys
from contextlib import nullcontext
from typing import List, Optional

from . import __version__
from .selector import LineSelector, SelectionError
from .selector_config import create_selector_config_from_args
from .utils.file import validate_input_file

PATTERN_HELP = """
pattern examples:
  "5"       show line 5
  "1,6,7"   show lines 1, 6, and 7
  "5..7"    show lines 5 and 6
  "5..=7"   show lines 5, 6, and 7
  "1,5..7"  show lines 1, 5, and 6
  ".."      show all lines
  "5.."     show all lines after and including 5
  "..7"     show all lines up to 7, excluding 7
  "..=7"    show all lines up to 7, including 7

Lines must be specified in order.
"""


def print_stderr(*args, **kwargs):
    """
    Print the given message to STDERR
    """
    print(*args, file=sys.stderr, **kwargs)


def setup_args(argv: Optional[List[str]] = None) -> None:
    """
    Setup all the command line arguments for processing
    :param argv: arguments to parse (default: sys.argv)
    """
    parser = argparse.ArgumentParser(description=f'Line Select CLI. Ver: {__version__}, License: MIT')
    parser.add_argument('--version', '-v', action='store_true', help='Display version details')

    subparsers = parser.add_subparsers(
        title='Sub Commands', dest='subparser', description='valid subcommands', help='sub-command help'
    )
    # Sub-command: version
    p_ver = subparsers.add_parser(
        'version', aliases=['ver'], description=f'Version of Line Select CLI: {__version__}', help='Line Select version'
    )
    p_ver.set_defaults(func=ver)

    # Sub-command: select
    p_sel = subparsers.add_parser(
        'select',
        aliases=['sel'],
        description=f'Display selected lines from a file or STDIN: {__version__}',
        help='Select lines',
        epilog=PATTERN_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sel.set_defaults(func=select)
    p_sel.add_argument(
        'lines', metavar='LINES', type=str, help='The lines or ranges of lines to display, separated by a comma'
    )
    p_sel.add_argument('file', metavar='FILE', type=str, nargs='?', help='The file to read (optional - default STDIN)')
    p_sel.add_argument('--line-number', '-n', action='store_true', help='Show line numbers')
    p_sel.add_argument(
        '--separator', '-s', type=str, help='Text between the line number and the line (optional - default TAB)'
    )
    p_sel.add_argument('--output', '-o', type=str, help='Output result file name (optional - default stdout).')
    p_sel.add_argument('--binary', '-b', action='store_true', help='Select lines from files that look binary')

    # Global command options
    for p in [p_sel]:
        p.add_argument('--debug', '-d', action='store_true', help='Enable debug messages')
        p.add_argument('--trace', '-t', action='store_true', help='Enable trace messages, including selected lines')
        p.add_argument('--quiet', '-q', action='store_true', help='Enable quiet mode')

    args = parser.parse_args(argv)
    if args.version:
        ver(parser, args)
        sys.exit(0)
    if not args.subparser:
        parser.print_help()  # No sub command subcommand, print general help
        sys.exit(1)
    args.func(parser, args)  # Execute the function associated with the sub-command


def ver(*_):
    """
    Run the "ver" sub-command
    :param _: ignored/unused
    """
    print(f'Version: {__version__}')


def select(parser, args):
    """
    Run the "select" sub-command
    Parameters
    ----------
        parser: ArgumentParser
            command line parser object
        args: Namespace
            Parsed arguments
    """
    if not args.lines:
        print_stderr('Please specify the lines to select')
        parser.print_help()
        sys.exit(1)
    if args.file:
        validation = validate_input_file(args.file, args.binary)
        if not validation.is_valid:
            print_stderr(f'ERROR: {validation.error}')
            sys.exit(1)
        if validation.is_binary and not args.quiet:
            print_stderr(f'Warning: Selecting lines from a binary file: {args.file}')

    config = create_selector_config_from_args(args)
    selector = LineSelector(config, show_progress=bool(args.output))
    try:
        line_patterns = selector.load_patterns(args.lines)  # Fail before touching the input or output
    except SelectionError as e:
        print_stderr(f'ERROR: {e}')
        sys.exit(1)

    try:
        with open(args.file, 'rb') if args.file else nullcontext(sys.stdin.buffer) as fin:
            with open(args.output, 'wb') if args.output else nullcontext(sys.stdout.buffer) as fout:
                lines_written = selector.select_patterns(fin, fout, line_patterns)
                fout.flush()
    except BrokenPipeError:
        # Reader went away (i.e. piped into head). Point stdout at devnull so the exit flush is silent.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return
    except OSError as e:
        print_stderr(f'ERROR: Problem selecting lines: {e}')
        sys.exit(1)
    if args.output:
        selector.print_msg(f'Wrote {lines_written} line(s) to {args.output}')


def main():
    """
    Run the Line Select CLI
    """
    setup_args()


if __name__ == '__main__':
    main()
