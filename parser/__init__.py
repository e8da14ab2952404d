# parser/__init__.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Formula parsing entry points

"""Propositional formula parsing.

This module turns formula text into expression trees. Both the symbolic
notation (``¬``, ``∧``, ``∨``) and the English keywords (``NEG``, ``AND``,
``OR``) are accepted, in infix or prefix position. There is no operator
precedence: each parenthesis level holds a single operator.

Core Functions:
    parse: Converts formula strings into expression trees
    parse_unsafe: ``parse`` for text known to be well formed
    parse_and_normalize: Parsing followed by a normal form transformation

Example:
    >>> from parser import parse
    >>> parse("NEG ((NEG P) OR (NEG Q))").pretty_print()
    '¬(¬P ∨ ¬Q)'
"""

from logic.exceptions import (
    ParseError,
    UnmatchedParenthesesError,
    NotAnOperatorError,
    InvalidArgumentsError,
    EmptyExpressionError,
    MalformedExpressionDefect,
)
from logic.expression import Expr
from .grammar import _FormulaReader
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse a formula string into an expression tree.

    Uses a fresh reader for each invocation so parsing is stateless.

    Args:
        source: Formula text to parse

    Returns:
        Root node of the expression tree

    Raises:
        ParseError: The formula is malformed; the subclass tells how

    Example:
        >>> parse("A∧B")
        Function((AND A B))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    reader = _FormulaReader()

    try:
        result = reader.parse(source)
        logger.debug(f"Formula parsed successfully into {type(result).__name__}")
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise


def parse_unsafe(source: str) -> Expr:
    """Parse text that is well formed by construction.

    Meant for built-in patterns. A failure here is a programming defect, so
    the recoverable ParseError is converted into MalformedExpressionDefect.
    """
    try:
        return parse(source)
    except ParseError as exc:
        get_logger().error(f"Built-in formula failed to parse: {source}: {exc}")
        raise MalformedExpressionDefect(str(exc)) from exc


def parse_and_normalize(source: str, form: str = "conjunctive") -> Expr:
    """Parse a formula and transform it into a normal form.

    Args:
        source: Formula text to parse
        form: ``negation``, ``conjunctive`` or ``disjunctive``

    Returns:
        The expression in the requested normal form

    Raises:
        ParseError: Formula parsing fails
        ValueError: Unknown normal form name
    """
    from transform.normal_form import NormalForm

    try:
        normal_form = NormalForm[form.upper()]
    except KeyError:
        raise ValueError(f"Unknown normal form: {form}") from None

    logger = get_logger()
    expression = parse(source)
    logger.debug(f"Parsed, beginning {normal_form} transformation")
    return normal_form.transform(expression)


__all__ = [
    "parse",
    "parse_unsafe",
    "parse_and_normalize",
    "ParseError",
    "UnmatchedParenthesesError",
    "NotAnOperatorError",
    "InvalidArgumentsError",
    "EmptyExpressionError",
    "MalformedExpressionDefect",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing"
