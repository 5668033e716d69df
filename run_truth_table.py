#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Command-line interface for truth tables and canonical normal forms

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from logic import BooleanFunction
from utils.logger import configure_logging, get_logger
from parser.exceptions import ParseError


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def print_truth_table(function: BooleanFunction) -> None:
    """Print every row of a built truth table."""
    logger = get_logger()
    table = function.truth_table

    logger.table_header(function.expression, table.columns.keys())
    for index, row in enumerate(table.rows()):
        logger.table_row(index, row.values())


def print_canonical_forms(function: BooleanFunction) -> None:
    """Print the normal forms, binary forms, binary index and row counts."""
    logger = get_logger()

    logger.canonical_form("SDNF", function.sdnf)
    logger.canonical_form("SKNF", function.sknf)
    logger.canonical_form("CDNF", function.cdnf)
    logger.canonical_form("CCNF", function.ccnf)
    logger.canonical_form("CDNF bin", function.cdnf_binary)
    logger.canonical_form("CCNF bin", function.ccnf_binary)
    logger.canonical_form("Binary index", str(function.binary_index))
    logger.counts(function.positive, function.negative, function.total)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula truth tables and canonical normal forms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "(¬(((¬x2)+x3)•(¬(x1•x3))))"
  python run_truth_table.py -f formula.txt --full
  python run_truth_table.py "(x1>x2)" --forms-only --debug
  python run_truth_table.py "(x1>x2)" --quiet

Operators:
  ¬ NOT    • AND    + OR    > IMPLIES    ~ EQUIVALENCE
  Every operator application is bracketed, e.g. ((¬x1)•(x2+x3))
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula text")
    source.add_argument(
        "-f", "--formula-file", type=Path, help="Path to a file containing the formula"
    )

    parser.add_argument(
        "--full",
        action="store_true",
        help="Include every sub-expression as a truth table column",
    )

    parser.add_argument(
        "--forms-only",
        action="store_true",
        help="Print only the canonical forms, not the table rows",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report warnings and errors; exit code tells whether the formula is valid",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Results are logged at INFO, so they show unless --quiet is given
    configure_logging(verbose=not args.quiet, debug=args.debug)
    logger = get_logger()

    try:
        formula = args.formula
        if formula is None:
            formula = read_formula_file(args.formula_file)

        function = BooleanFunction(formula)
        function.details(full=args.full)

        if not args.forms_only:
            print_truth_table(function)
        print_canonical_forms(function)

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Evaluation interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
