"""Stage 1: Data cleaning.

This module is a simple entry point that calls data_processing functions.

    python -m layoffs.cleaning [input.csv] [output.csv]
"""

from __future__ import annotations

import sys

from .data_processing import run_cleaning


def main(argv: list | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    input_path = args[0] if len(args) > 0 else None
    output_path = args[1] if len(args) > 1 else None
    run_cleaning(input_path, output_path)


if __name__ == "__main__":
    main()
