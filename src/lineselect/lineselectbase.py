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

import sys
from contextlib import nullcontext

from progress.spinner import Spinner


class LineSelectBase:
    """
    Base class holding the diagnostic flags and STDERR helpers shared by the line selection classes
    """

    def __init__(self, debug: bool = False, trace: bool = False, quiet: bool = False):
        """
        Initialise class
        :param debug:  enable debug
        :param trace:  enable tracing
        :param quiet:  enable quiet mode
        """
        self.debug = debug
        self.quiet = quiet
        self.trace = trace
        self.isatty = sys.stderr.isatty()

    @staticmethod
    def print_stderr(*args, **kwargs):
        """
        Print the given message to STDERR
        """
        print(*args, file=sys.stderr, **kwargs)

    def print_msg(self, *args, **kwargs):
        """
        Print message if quiet mode is not enabled
        """
        if not self.quiet:
            self.print_stderr(*args, **kwargs)

    def print_debug(self, *args, **kwargs):
        """
        Print debug message if enabled
        """
        if self.debug:
            self.print_stderr(*args, **kwargs)

    def print_trace(self, *args, **kwargs):
        """
        Print trace message if enabled
        """
        if self.trace:
            self.print_stderr(*args, **kwargs)

    def spinner_context(self, message: str, enabled: bool = True):
        """
        Get a progress spinner for STDERR, or a null context when it should not be shown
        :param message: spinner label
        :param enabled: caller side switch (i.e. only when STDOUT is not the destination)
        :return: Spinner context manager or nullcontext (yielding None)
        """
        if enabled and not self.quiet and self.isatty:
            return Spinner(message)
        return nullcontext()
