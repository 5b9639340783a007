#!/usr/bin/env python3
"""
Interactive console front end.

Asks for an operation and two matrix files, then writes the result to
``result.txt`` (or ``MATRIX_RESULT_FILE``).
"""

import logging
import os
import sys

from dotenv import load_dotenv

from matrixcalc.utils.sparse_matrix import DimensionMismatch, FormatError, apply_operation, load, save

logger = logging.getLogger(__name__)

MENU = "Select operation:\n1. Addition\n2. Subtraction\n3. Multiplication"
CHOICES = {'1': 'add', '2': 'subtract', '3': 'multiply'}


def run(output_file=None):
    """Runs one prompt session and returns the exit code"""
    output_file = output_file or os.environ.get('MATRIX_RESULT_FILE', 'result.txt')

    print(MENU)
    choice = input("Enter your choice (1, 2, or 3): ").strip()
    operation = CHOICES.get(choice)
    if not operation:
        print("Invalid choice", file=sys.stderr)
        return 1

    file1 = input("Enter the first input file path: ").strip()
    file2 = input("Enter the second input file path: ").strip()

    try:
        matrix1 = load(file1)
        matrix2 = load(file2)
        result = apply_operation(operation, matrix1, matrix2)
        save(result, output_file)
    except (FormatError, DimensionMismatch, OSError) as e:
        logger.debug("Operation %s failed", operation, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Operation successful, result saved to {output_file}")
    return 0


def main():
    load_dotenv()
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'WARNING'))
    try:
        return run()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1


if __name__ == '__main__':
    sys.exit(main())
