#!/usr/bin/env python3
# run_engine.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Command-line interface for formula evaluation with configurable logging levels

import sys
import argparse
from typing import Dict, List, Optional

from core import Engine, MAX_VARIABLES, TooManyVariablesError, UnboundVariableError
from parser.exceptions import LexError, ParseError
from utils.logger import configure_logging, get_logger

_TRUE_WORDS = {"1", "t", "true", "yes", "on"}
_FALSE_WORDS = {"0", "f", "false", "no", "off"}


def parse_assignments(pairs: List[str]) -> Dict[str, bool]:
    """Convert NAME=VALUE command line pairs into an assignment.

    Args:
        pairs: Strings such as ``p=true`` or ``q=0``

    Returns:
        Mapping from variable name to truth value

    Raises:
        ValueError: A pair is malformed or its value is not a truth value
    """
    assignment = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Assignment '{pair}' must have the form NAME=VALUE")

        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            assignment[name] = True
        elif word in _FALSE_WORDS:
            assignment[name] = False
        else:
            raise ValueError(f"Value '{raw}' for '{name}' is not a truth value")
    return assignment


def read_formula(formula: Optional[str]) -> str:
    """Return the formula argument, or read it from stdin when absent.

    Raises:
        ValueError: The formula is empty
    """
    text = formula if formula is not None else sys.stdin.read()
    text = text.strip()
    if not text:
        raise ValueError("No formula given")
    return text


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tarski propositional logic evaluation engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_engine.py "p -> p"
  python run_engine.py "p AND q" -a p=true -a q=false
  python run_engine.py "(p -> q) <-> (!q -> !p)" --table
  echo "p && !p" | python run_engine.py --classify

Operators (symbolic or keyword):
  !  ~  NOT       &  &&  AND       |  ||  OR
  -> =>  IMPLIES  <-> <=> ==  IFF   true  false
        """,
    )

    parser.add_argument(
        "formula", nargs="?", help="Formula text (read from stdin when omitted)"
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-a",
        "--assign",
        action="append",
        metavar="NAME=VALUE",
        help="Evaluate under this assignment (repeatable)",
    )
    mode.add_argument(
        "--table", action="store_true", help="Print the complete truth table"
    )
    mode.add_argument(
        "--classify",
        action="store_true",
        help="Print tautology, contradiction or contingency (default)",
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=MAX_VARIABLES,
        help=f"Largest variable count to enumerate (default: {MAX_VARIABLES})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the evaluation engine CLI.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        formula = read_formula(args.formula)
        engine = Engine(max_variables=args.max_variables)
        logger.info(f"Formula: {formula}")

        if args.assign:
            print(engine.evaluate(formula, parse_assignments(args.assign)))
        elif args.table:
            print(engine.compute_truth_table(formula).format())
        else:
            print(engine.classify(formula))

        return 0

    except LexError as e:
        logger.error(f"Lexical error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except UnboundVariableError as e:
        logger.error(f"Assignment error: {e}")
        return 3

    except TooManyVariablesError as e:
        logger.error(f"Enumeration refused: {e}")
        return 4

    except ValueError as e:
        logger.error(f"Input error: {e}")
        return 5

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 6


if __name__ == "__main__":
    sys.exit(main())
