# transform/normal_form.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Normal form drivers built from inference rules

"""Normal form transformations.

Three canonical shapes are supported:

- Negation normal form: only conjunctions and disjunctions, with negations
  applied directly to literals.
- Conjunctive normal form: a conjunction of clauses, each clause a
  disjunction of possibly negated literals.
- Disjunctive normal form: a disjunction of clauses, each clause a
  conjunction of possibly negated literals.

Every driver is a fixed top-down strategy without backtracking: at a node,
apply the form's rules left to right until none matches, rewrite the
children, and look at the node again in case a child changed shape. The
whole derivation is recorded in a :class:`TransformSteps` ledger, and
:meth:`NormalForm.in_form` checks the result independently of the rewriter.
"""

from __future__ import annotations
from enum import Enum
from typing import Sequence

from logic.expression import Expr, Function, Literal
from logic.operators import Operator
from parser import parse_unsafe
from utils.logger import get_logger
from .rules import InferenceRule
from .steps import TransformSteps

# Shape of a negated literal; names are ignored when comparing against it
_NEGATED_LITERAL = parse_unsafe("¬A")

_NEGATION_RULES = (
    InferenceRule.DE_MORGANS_OR,
    InferenceRule.DE_MORGANS_AND,
    InferenceRule.DOUBLE_NEGATION,
)
_CONJUNCTIVE_RULES = (
    InferenceRule.OR_DISTRIBUTION,
    InferenceRule.OR_DISTRIBUTION_FLIPPED,
)
_DISJUNCTIVE_RULES = (
    InferenceRule.AND_DISTRIBUTION,
    InferenceRule.AND_DISTRIBUTION_FLIPPED,
)


class NormalForm(Enum):
    """The supported normal form transformations."""

    NEGATION = "negation"
    CONJUNCTIVE = "conjunctive"
    DISJUNCTIVE = "disjunctive"

    def transform(self, orig: Expr) -> Expr:
        """Rewrite ``orig`` into this normal form."""
        return self.transform_with_steps(orig).result()

    def transform_with_steps(self, orig: Expr) -> TransformSteps:
        """Rewrite ``orig`` into this normal form, recording every step."""
        if self is NormalForm.NEGATION:
            steps = _drive(orig, _NEGATION_RULES)
        else:
            rules = (
                _CONJUNCTIVE_RULES
                if self is NormalForm.CONJUNCTIVE
                else _DISJUNCTIVE_RULES
            )
            # Put into NNF, then drive the distributions inwards
            negation_steps = NormalForm.NEGATION.transform_with_steps(orig)
            steps = negation_steps.combine(_drive(negation_steps.result(), rules))

        get_logger().normal_form_result(self, orig, steps.result(), len(steps))
        return steps

    def in_form(self, e: Expr) -> bool:
        """Check if the expression already has this normal form's shape."""
        if self is NormalForm.CONJUNCTIVE:
            # Either a single clause, or a conjunction of CNF parts
            return _check_all(Operator.DISJUNCTION, e) or e.map_predicate(
                NormalForm.CONJUNCTIVE.in_form, Operator.CONJUNCTION
            )
        if self is NormalForm.DISJUNCTIVE:
            return _check_all(Operator.CONJUNCTION, e) or e.map_predicate(
                NormalForm.DISJUNCTIVE.in_form, Operator.DISJUNCTION
            )
        return _is_literal_clause(e) or e.map_predicate(
            NormalForm.NEGATION.in_form, Operator.CONJUNCTION, Operator.DISJUNCTION
        )

    def __str__(self) -> str:
        return f"{self.value} normal form"


def _is_literal_clause(e: Expr) -> bool:
    """A literal or a negated literal."""
    return isinstance(e, Literal) or e.equal_without_literals(_NEGATED_LITERAL)


def _check_all(operator: Operator, e: Expr) -> bool:
    """True if ``e`` is built only from ``operator`` over possibly negated
    literals."""
    return _is_literal_clause(e) or (
        isinstance(e, Function) and e.map_predicate(lambda t: _check_all(operator, t), operator)
    )


def _apply_at_root(steps: TransformSteps, rules: Sequence[InferenceRule]) -> None:
    """Apply rules left to right at the result's root until none matches."""
    applied = True
    while applied:
        applied = False
        for rule in rules:
            if rule.in_left(steps.result()):
                steps.add_step(rule)
                applied = True


def _drive(orig: Expr, rules: Sequence[InferenceRule]) -> TransformSteps:
    """Rewrite top-down with ``rules`` until no node matches a left side."""
    steps = TransformSteps(orig)
    while True:
        _apply_at_root(steps, rules)
        current = steps.result()
        if isinstance(current, Function):
            for index, term in enumerate(current.terms):
                steps.splice(_drive(term, rules), index)
        # A rewritten child may have made the root match again
        if not any(rule.in_left(steps.result()) for rule in rules):
            return steps
