# transform/rules.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Named rewrite rules over expression trees

"""Rewrite rules for propositional formulas.

An :class:`InferenceRule` is a named, bidirectional rewrite between a
"left" pattern and a "right" pattern built from placeholder literals
(``P``, ``Q``, ``R``). By convention the left side is the one a normal form
driver rewrites away. Rules are applied speculatively: when neither side
matches, the input comes back unchanged.

:class:`MiscTransform` holds structural rewrites that are not expressible as
a pattern pair, currently only commutation.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Protocol, TYPE_CHECKING

from logic.expression import Expr, Function
from logic.operators import OperatorTrait
from parser import parse_unsafe
from utils.logger import get_logger

if TYPE_CHECKING:
    from .steps import TransformSteps


class Transform(Protocol):
    """Interface shared by every rewrite the ledger can record."""

    def transform(self, orig: Expr) -> Expr: ...

    def transform_with_steps(self, orig: Expr) -> TransformSteps: ...

    def rewrites(self, before: Expr, after: Expr) -> bool: ...


class InferenceRule(Enum):
    """Catalog of bidirectional inference rules.

    Each member holds the left pattern, the right pattern and an optional
    display name. Patterns are parsed when the catalog is built.
    """

    DE_MORGANS_OR = ("¬(P∨Q)", "(¬P)∧(¬Q)", "DeMorgan's or")
    DE_MORGANS_AND = ("¬(P∧Q)", "(¬P)∨(¬Q)", "DeMorgan's and")
    OR_DISTRIBUTION = ("P∨(Q∧R)", "(P∨Q)∧(P∨R)", None)
    OR_DISTRIBUTION_FLIPPED = ("(Q∧R)∨P", "(Q∨P)∧(R∨P)", None)
    AND_DISTRIBUTION = ("P∧(Q∨R)", "(P∧Q)∨(P∧R)", None)
    AND_DISTRIBUTION_FLIPPED = ("(Q∨R)∧P", "(Q∧P)∨(R∧P)", None)
    DOUBLE_NEGATION = ("¬¬P", "P", None)

    def __init__(self, left: str, right: str, label: Optional[str]):
        # parse_unsafe: a broken pattern here is a defect, not bad input
        self._left = parse_unsafe(left)
        self._right = parse_unsafe(right)
        self._label = label

    @property
    def left(self) -> Expr:
        """The pattern rewritten away by normal form drivers."""
        return self._left

    @property
    def right(self) -> Expr:
        return self._right

    def transform(self, orig: Expr) -> Expr:
        """Rewrite left to right if possible, else right to left, else no-op."""
        bindings = orig.fill_matches(self._left)
        if bindings is not None:
            return self._right.substitute(bindings)
        bindings = orig.fill_matches(self._right)
        if bindings is not None:
            return self._left.substitute(bindings)
        get_logger().rule_not_applicable(self, orig)
        return orig

    def transform_left(self, orig: Expr) -> Expr:
        """Rewrite from the left form to the right form if applicable."""
        bindings = orig.fill_matches(self._left)
        if bindings is None:
            return orig
        return self._right.substitute(bindings)

    def transform_right(self, orig: Expr) -> Expr:
        """Rewrite from the right form to the left form if applicable."""
        bindings = orig.fill_matches(self._right)
        if bindings is None:
            return orig
        return self._left.substitute(bindings)

    def in_left(self, orig: Expr) -> bool:
        return orig.fill_matches(self._left) is not None

    def in_right(self, orig: Expr) -> bool:
        return orig.fill_matches(self._right) is not None

    def transform_with_steps(self, orig: Expr) -> TransformSteps:
        from .steps import TransformSteps

        steps = TransformSteps(orig)
        if self.in_left(orig) or self.in_right(orig):
            steps.add_step(self)
        return steps

    def rewrites(self, before: Expr, after: Expr) -> bool:
        """Check whether one application in either direction turns
        ``before`` into ``after``."""
        if self.in_left(before) and self.transform_left(before) == after:
            return True
        return self.in_right(before) and self.transform_right(before) == after

    def __str__(self) -> str:
        """Display name, defaulting to the lowercased member name."""
        if self._label is not None:
            return self._label
        return self.name.replace("_", " ").lower()


class MiscTransform(Enum):
    """Structural rewrites without a pattern pair."""

    COMMUTE = "commute"

    def transform(self, orig: Expr) -> Expr:
        """Swap the arguments of a commutative operator; no-op otherwise."""
        if (
            isinstance(orig, Function)
            and orig.operator.has_trait(OperatorTrait.COMMUTATIVE)
            and len(orig.terms) == 2
        ):
            return Function(orig.operator, (orig.terms[1], orig.terms[0]))
        return orig

    def transform_with_steps(self, orig: Expr) -> TransformSteps:
        from .steps import TransformSteps

        steps = TransformSteps(orig)
        if self.transform(orig) != orig:
            steps.add_step(self)
        return steps

    def rewrites(self, before: Expr, after: Expr) -> bool:
        return self.transform(before) == after

    def __str__(self) -> str:
        return self.value
