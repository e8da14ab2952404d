# logic/operators.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Closed catalog of the supported logical connectives

"""Operator catalog for propositional formulas.

Every connective the toolkit understands is a member of :class:`Operator`.
The members carry all of their data as fields: the display symbol, the
English keyword accepted by the parser, the arity, the position of the
symbol in infix notation, the complete truth table and the algebraic traits.

Truth tables list one row per input combination in ascending order
(all false first), each row holding the inputs followed by the output.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import FrozenSet, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .truth_table import TruthAssignment


class OperatorTrait(Enum):
    """Algebraic properties an operator may declare."""

    COMMUTATIVE = auto()
    ASSOCIATIVE = auto()


class Operator(Enum):
    """The closed set of connectives: negation, conjunction and disjunction.

    Attributes:
        symbol: Unicode symbol used when pretty-printing
        keyword: English spelling accepted by the parser
        arity: Number of arguments the operator takes
        symbol_position: Index of the symbol in the printed form, e.g. the
            '∧' in "A ∧ B" sits at position 1
        truth_table: Rows of inputs followed by the output
        traits: Algebraic traits of the operator
    """

    NEGATION = (
        "¬",
        "NEG",
        1,
        0,
        (
            (False, True),
            (True, False),
        ),
        frozenset(),
    )
    CONJUNCTION = (
        "∧",
        "AND",
        2,
        1,
        (
            (False, False, False),
            (False, True, False),
            (True, False, False),
            (True, True, True),
        ),
        frozenset({OperatorTrait.COMMUTATIVE, OperatorTrait.ASSOCIATIVE}),
    )
    DISJUNCTION = (
        "∨",
        "OR",
        2,
        1,
        (
            (False, False, False),
            (False, True, True),
            (True, False, True),
            (True, True, True),
        ),
        frozenset({OperatorTrait.COMMUTATIVE, OperatorTrait.ASSOCIATIVE}),
    )

    def __init__(
        self,
        symbol: str,
        keyword: str,
        arity: int,
        symbol_position: int,
        truth_table: Tuple[Tuple[bool, ...], ...],
        traits: FrozenSet[OperatorTrait],
    ):
        self.symbol = symbol
        self.keyword = keyword
        self.arity = arity
        self.symbol_position = symbol_position
        self.truth_table = truth_table
        self.traits = traits

    def __str__(self) -> str:
        return self.keyword

    def has_trait(self, trait: OperatorTrait) -> bool:
        """Check whether the operator declares the given trait."""
        return trait in self.traits

    def apply(self, *values: bool) -> bool:
        """Compute the operator's output by scanning its truth table.

        Args:
            values: One boolean per argument, in argument order

        Returns:
            Output column of the matching row

        Raises:
            ValueError: Wrong number of input values
        """
        if len(values) != self.arity:
            raise ValueError(
                f"Operator {self.keyword} expects {self.arity} values, "
                f"{len(values)} were provided"
            )
        for row in self.truth_table:
            if row[:-1] == tuple(values):
                return row[-1]
        # Tables are exhaustive, this only triggers for non-boolean input
        raise ValueError(f"No truth table row of {self.keyword} matches {values}")

    def get_truth_table(self) -> TruthAssignment:
        """Return the operator's own table as a TruthAssignment."""
        from .truth_table import TruthAssignment

        return TruthAssignment.for_operator(self)

    @classmethod
    def lookup(cls, text: str) -> Optional[Operator]:
        """Find the operator spelled by ``text`` as symbol or keyword."""
        for operator in cls:
            if text in (operator.symbol, operator.keyword):
                return operator
        return None

    @classmethod
    def is_operator_text(cls, text: str) -> bool:
        """Tell whether ``text`` is any operator's symbol or keyword."""
        return cls.lookup(text) is not None
