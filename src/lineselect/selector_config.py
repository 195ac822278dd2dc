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

from dataclasses import dataclass

from .constants import DEFAULT_LINE_SEPARATOR


@dataclass
class SelectorConfig:
    debug: bool = False
    trace: bool = False
    quiet: bool = False
    show_line_number: bool = False
    line_separator: str = DEFAULT_LINE_SEPARATOR


def create_selector_config_from_args(args) -> SelectorConfig:
    return SelectorConfig(
        debug=args.debug,
        trace=args.trace,
        quiet=args.quiet,
        show_line_number=getattr(args, 'line_number', False),
        line_separator=getattr(args, 'separator', None) or DEFAULT_LINE_SEPARATOR,
    )
