#!/usr/bin/env python3
"""
Line Select SDK Example: Selecting lines from a log file

This example demonstrates how to:
1. Configure a LineSelector with line numbers enabled
2. Select a few ranges of lines from a sample file
3. Handle an invalid (out of order) pattern list

Usage:
    python select_lines_example.py
"""

import os
import sys

from lineselect.selector import LineSelector, SelectionError
from lineselect.selector_config import SelectorConfig

# Get the directory where this script is located
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))

# Sample paths relative to this script
SAMPLE_FILE = os.path.join(SCRIPT_DIR, 'sample_data', 'server.log')
OUTPUT_DIR = os.path.join(SCRIPT_DIR, 'output')
RESULTS_FILE = os.path.join(OUTPUT_DIR, 'selected.txt')


def main():
    # Create output directory if it doesn't exist
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    # Step 1: Create LineSelector instance with options
    selector = LineSelector(SelectorConfig(debug=True, show_line_number=True))

    # Step 2: Keep the first line, then lines 4 to 6 (inclusive), then everything from line 9
    print(f'Selecting lines from: {SAMPLE_FILE}')
    with open(SAMPLE_FILE, 'rb') as fin, open(RESULTS_FILE, 'wb') as fout:
        written = selector.select(fin, fout, '1,4..=6,9..')
    print(f'Wrote {written} lines to: {RESULTS_FILE}\n')

    # Step 3: Patterns must be given in order, this list is rejected before reading anything
    try:
        with open(SAMPLE_FILE, 'rb') as fin:
            selector.select(fin, sys.stdout.buffer, '4..=6,1')
    except SelectionError as e:
        print(f'Rejected pattern list: {e}')


if __name__ == '__main__':
    main()
