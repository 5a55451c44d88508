"""Demonstration entry point.

Prints the evaluation of a fixed sample expression:
    python -m calculation_pkg
    python -m calculation_pkg --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys

from .calculator import calc
from .config import DEMO_EXPRESSION, LOG_LEVEL
from .logging_config import setup_logging


def main_entry(argv: list[str] | None = None) -> int:
    """Evaluate DEMO_EXPRESSION and print the result or the error message.

    Returns:
        Exit code (0 for success, 1 if the sample failed)
    """
    parser = argparse.ArgumentParser(prog="calculation")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    result, error = calc(DEMO_EXPRESSION)
    if error is not None:
        print(error)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
