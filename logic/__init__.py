# logic/__init__.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Public API for formula representation and evaluation

"""Representation and evaluation of propositional formulas.

Primary Components:
    Operator: Closed catalog of connectives (negation, conjunction, disjunction)
    Literal, Function: The two node types of an expression tree
    TruthAssignment: Truth tables of expressions and operators
    ParseError: Base of the malformed-expression exception family

Example:
    >>> from logic import Literal, Function, Operator
    >>> expr = Function(Operator.CONJUNCTION, (Literal("A"), Literal("B")))
    >>> expr.pretty_print()
    'A ∧ B'
"""

from .exceptions import (
    ParseError,
    UnmatchedParenthesesError,
    NotAnOperatorError,
    InvalidArgumentsError,
    EmptyExpressionError,
    MalformedExpressionDefect,
    UnassignedVariableError,
    TooManyVariablesError,
    TransformNotApplicableError,
)
from .operators import Operator, OperatorTrait
from .expression import Expr, Literal, Function, build
from .truth_table import TruthAssignment, semantically_equivalent

__all__ = [
    "Operator",
    "OperatorTrait",
    "Expr",
    "Literal",
    "Function",
    "build",
    "TruthAssignment",
    "semantically_equivalent",
    "ParseError",
    "UnmatchedParenthesesError",
    "NotAnOperatorError",
    "InvalidArgumentsError",
    "EmptyExpressionError",
    "MalformedExpressionDefect",
    "UnassignedVariableError",
    "TooManyVariablesError",
    "TransformNotApplicableError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula representation and evaluation"
