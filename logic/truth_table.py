# logic/truth_table.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Truth table enumeration for formulas and operators

"""Truth tables for expressions and operators.

A :class:`TruthAssignment` pairs an ordered list of literal columns with one
row per assignment; each row holds the input values followed by the output.
Tables for expressions enumerate all ``2^n`` assignments from all-true down
to all-false. Nothing is cached, enumeration is exponential in the number of
variables and refuses to run above ``MAX_TRUTH_TABLE_VARIABLES``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .exceptions import TooManyVariablesError
from .expression import Expr, Literal
from .operators import Operator
from utils.logger import get_logger

# Ceiling on free variables before enumeration fails fast
MAX_TRUTH_TABLE_VARIABLES = 16


@dataclass(frozen=True)
class TruthAssignment:
    """Read-only truth table.

    Attributes:
        columns: Input literals in column order
        rows: Input values followed by the output, one tuple per row
    """

    columns: Tuple[Literal, ...]
    rows: Tuple[Tuple[bool, ...], ...]

    @classmethod
    def of(cls, source: Union[Expr, Operator]) -> TruthAssignment:
        """Build the table of an expression or of an operator."""
        if isinstance(source, Operator):
            return cls.for_operator(source)
        return cls.for_expression(source)

    @classmethod
    def for_expression(
        cls, expression: Expr, max_variables: int = MAX_TRUTH_TABLE_VARIABLES
    ) -> TruthAssignment:
        """Enumerate every assignment of the expression's variables.

        Column ``i`` takes bit ``i`` of a counter running from ``2^n - 1``
        down to 0, so the first row is all true and the last all false.

        Args:
            expression: Formula to tabulate
            max_variables: Refuse formulas with more free variables

        Raises:
            TooManyVariablesError: The formula exceeds ``max_variables``
        """
        columns = tuple(sorted(expression.get_variables(), key=lambda lit: lit.name))
        if len(columns) > max_variables:
            raise TooManyVariablesError(
                f"{len(columns)} variables exceed the truth table limit of {max_variables}"
            )

        rows = []
        for pattern in range((1 << len(columns)) - 1, -1, -1):
            values = tuple(bool(pattern >> i & 1) for i in range(len(columns)))
            settings = dict(zip(columns, values))
            rows.append(values + (expression.evaluate(settings),))

        get_logger().truth_table(expression, len(columns), len(rows))
        return cls(columns, tuple(rows))

    @classmethod
    def for_operator(cls, operator: Operator) -> TruthAssignment:
        """Reshape an operator's stored table; columns are named A, B, ..."""
        columns = tuple(Literal(chr(ord("A") + i)) for i in range(operator.arity))
        return cls(columns, tuple(tuple(row) for row in operator.truth_table))

    @property
    def outputs(self) -> Tuple[bool, ...]:
        return tuple(row[-1] for row in self.rows)

    def settings(self, row: int) -> Dict[Literal, bool]:
        """Assignment of the given row as a mapping usable by ``evaluate``."""
        return dict(zip(self.columns, self.rows[row][:-1]))

    def is_tautology(self) -> bool:
        return all(self.outputs)

    def is_contradiction(self) -> bool:
        return not any(self.outputs)

    def __len__(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        lines = ["".join(f"{column}|" for column in self.columns)]
        for row in self.rows:
            lines.append("".join(("T" if value else "F") + "|" for value in row))
        return "\n".join(lines) + "\n"


def semantically_equivalent(first: Expr, second: Expr) -> bool:
    """Compare two formulas on every assignment of their combined variables.

    Independent of the rewrite engine, so it can be used to check it.
    """
    combined = first.get_variables() | second.get_variables()
    columns = tuple(sorted(combined, key=lambda lit: lit.name))
    if len(columns) > MAX_TRUTH_TABLE_VARIABLES:
        raise TooManyVariablesError(
            f"{len(columns)} variables exceed the truth table limit of "
            f"{MAX_TRUTH_TABLE_VARIABLES}"
        )
    for pattern in range(1 << len(columns)):
        settings = {column: bool(pattern >> i & 1) for i, column in enumerate(columns)}
        if first.evaluate(settings) != second.evaluate(settings):
            return False
    return True
