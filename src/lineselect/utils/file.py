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

import os
from dataclasses import dataclass
from typing import Optional

from binaryornot.check import is_binary

INPUT_ERROR_FILE_NOT_FOUND = 1
INPUT_ERROR_NOT_A_FILE = 2
INPUT_ERROR_BINARY = 3


@dataclass
class InputValidation:
    is_valid: bool
    is_binary: bool = False
    error: Optional[str] = None
    error_code: Optional[int] = None


def validate_input_file(input_file_path: str, allow_binary: bool = False) -> InputValidation:
    """
    Validate if the specified file can be read for line selection

    Args:
        input_file_path (str): The file to validate
        allow_binary (bool): Accept files that look binary

    Returns:
        InputValidation: An InputValidation object containing a boolean indicating if the file is valid, the binary flag, error, and error code
    """  # noqa: E501
    if not input_file_path:
        return InputValidation(is_valid=False, error='No input file specified')
    if not os.path.exists(input_file_path):
        return InputValidation(
            is_valid=False,
            error=f'File not found: {input_file_path}',
            error_code=INPUT_ERROR_FILE_NOT_FOUND,
        )
    if not os.path.isfile(input_file_path):
        return InputValidation(
            is_valid=False,
            error=f'Path specified is not a file: {input_file_path}',
            error_code=INPUT_ERROR_NOT_A_FILE,
        )
    binary_file = is_binary(input_file_path)
    if binary_file and not allow_binary:
        return InputValidation(
            is_valid=False,
            is_binary=True,
            error=f'File looks binary (use --binary to select from it anyway): {input_file_path}',
            error_code=INPUT_ERROR_BINARY,
        )
    return InputValidation(is_valid=True, is_binary=binary_file)
