#!/usr/bin/env python3
# run_logic.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Command-line interface for formula parsing and transformation

import sys
import argparse
from pathlib import Path
from typing import Dict

from logic.exceptions import ParseError, TooManyVariablesError, UnassignedVariableError
from logic.expression import Expr, Literal
from logic.truth_table import TruthAssignment
from parser import parse
from picker.console import run_picker
from transform.normal_form import NormalForm
from transform.simplify import SIMPLIFY
from utils.logger import configure_logging, get_logger
from utils.tree_visualizer import render_expression_tree

TRUE_VALUES = {"t", "true", "1"}
FALSE_VALUES = {"f", "false", "0"}


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()

        if not content:
            raise ValueError("Formula file is empty")

        return content

    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")


def parse_settings(text: str) -> Dict[Literal, bool]:
    """Parse an assignment such as ``A=T,B=false``.

    Raises:
        ValueError: A pair is malformed or a value is not a truth value
    """
    settings = {}
    for pair in filter(None, (part.strip() for part in text.split(","))):
        name, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected NAME=VALUE, got '{pair}'")
        value = value.strip().lower()
        if value in TRUE_VALUES:
            settings[Literal(name.strip())] = True
        elif value in FALSE_VALUES:
            settings[Literal(name.strip())] = False
        else:
            raise ValueError(f"'{value}' is not a truth value for {name.strip()}")
    return settings


def report_normal_form(form: NormalForm, expression: Expr, show_steps: bool) -> None:
    """Print the normal form of the expression, with its derivation on request."""
    logger = get_logger()
    steps = form.transform_with_steps(expression)
    logger.info(f"{str(form).capitalize()}: {steps.result().pretty_print()}")
    if show_steps:
        logger.derivation(str(steps))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Sentential propositional logic toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_logic.py -f "A∧(B∨¬C)" --table
  python run_logic.py -f "NEG (P AND Q)" --nnf --steps
  python run_logic.py -f "¬(P∨Q)" --prove "(¬Q)∧(¬P)"
  python run_logic.py -f "A∨B" --evaluate A=T,B=F
  python run_logic.py -p formula.txt --cnf --dnf

Notation:
  ¬ or NEG, ∧ or AND, ∨ or OR; parentheses group, there is no precedence.
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--formula", help="Formula text")
    source.add_argument("-p", "--property", type=Path, help="Path to a file holding the formula")

    parser.add_argument("--table", action="store_true", help="Print the truth table")
    parser.add_argument("--nnf", action="store_true", help="Print the negation normal form")
    parser.add_argument("--cnf", action="store_true", help="Print the conjunctive normal form")
    parser.add_argument("--dnf", action="store_true", help="Print the disjunctive normal form")
    parser.add_argument("--simplify", action="store_true", help="Print a simplified formula")
    parser.add_argument("--steps", action="store_true", help="Print the derivation of each transformation")
    parser.add_argument("--prove", metavar="OTHER", help="Derive OTHER from the formula")
    parser.add_argument("--evaluate", metavar="ASSIGNMENT", help="Evaluate under e.g. A=T,B=F")
    parser.add_argument("--pick", action="store_true", help="Assign values interactively (short truth table)")
    parser.add_argument("--render", metavar="NAME", help="Render the expression tree with Graphviz")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output (implies --steps)"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug)
    logger = get_logger()

    try:
        text = args.formula if args.formula is not None else read_formula_file(args.property)
        expression = parse(text)
        logger.info(f"Formula: {expression.pretty_print()}")
        show_steps = args.steps or args.verbose

        if args.table:
            logger.info(str(TruthAssignment.of(expression)))

        for flag, form in ((args.nnf, NormalForm.NEGATION),
                           (args.cnf, NormalForm.CONJUNCTIVE),
                           (args.dnf, NormalForm.DISJUNCTIVE)):
            if flag:
                report_normal_form(form, expression, show_steps)

        if args.simplify:
            steps = SIMPLIFY.transform_with_steps(expression)
            logger.info(f"Simplified: {steps.result().pretty_print()}")
            if show_steps:
                logger.derivation(str(steps))

        if args.prove is not None:
            other = parse(args.prove)
            proof = expression.prove_equivalence(other)
            if proof is None:
                logger.info(f"No derivation found from {expression.pretty_print()} to {other.pretty_print()}")
            else:
                logger.info(f"Derived {other.pretty_print()} in {len(proof)} steps")
                logger.derivation(str(proof))

        if args.evaluate is not None:
            value = expression.evaluate(parse_settings(args.evaluate))
            logger.info(f"Value: {'T' if value else 'F'}")

        if args.render:
            render_expression_tree(expression, args.render)

        if args.pick:
            run_picker(expression)

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError, UnassignedVariableError, TooManyVariablesError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
