# transform/equivalence.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Equivalence checks producing replayable derivations

"""Equivalence of formulas with derivations.

Two levels are offered. Simple equivalence is structural equality up to
swapping the arguments of commutative operators, at any depth. A proof of
equivalence drives both formulas into conjunctive normal form and looks for
a simple equivalence between the results; when one exists the three pieces
are stitched into a single derivation from the first formula to the second.

Associativity is not exploited, so formulas whose normal forms only differ
in grouping are not recognized as equivalent.
"""

from typing import List, Optional, Sequence

from logic.expression import Expr, Function
from logic.operators import OperatorTrait
from utils.logger import get_logger
from .normal_form import NormalForm
from .rules import MiscTransform
from .steps import TransformSteps


def simply_equivalent(first: Expr, second: Expr) -> bool:
    """Check structural equality up to commutation."""
    return simply_equivalent_with_steps(first, second) is not None


def simply_equivalent_with_steps(first: Expr, second: Expr) -> Optional[TransformSteps]:
    """Find the commutation steps turning ``first`` into ``second``.

    Returns:
        A ledger from ``first`` to ``second``, empty when they are equal,
        or ``None`` if they are not simply equivalent
    """
    if first == second:
        return TransformSteps(first)
    if not (isinstance(first, Function) and isinstance(second, Function)):
        return None
    if first.operator is not second.operator:
        return None

    in_order = _terms_with_steps(first.terms, second.terms)
    if in_order is not None:
        return _spliced(TransformSteps(first), in_order)

    if first.operator.has_trait(OperatorTrait.COMMUTATIVE) and len(first.terms) == 2:
        swapped = _terms_with_steps(first.terms[::-1], second.terms)
        if swapped is not None:
            steps = TransformSteps(first)
            steps.add_step(MiscTransform.COMMUTE)
            return _spliced(steps, swapped)
    return None


def prove_equivalence(first: Expr, second: Expr) -> Optional[TransformSteps]:
    """Derive ``second`` from ``first`` through conjunctive normal form.

    The derivation is (first → CNF) + (commutations) + reverse(second → CNF).

    Returns:
        The stitched derivation, or ``None`` if the normal forms are not
        simply equivalent
    """
    first_half = NormalForm.CONJUNCTIVE.transform_with_steps(first)
    second_half = NormalForm.CONJUNCTIVE.transform_with_steps(second)

    bridge = simply_equivalent_with_steps(first_half.result(), second_half.result())
    if bridge is None:
        get_logger().proof_result(first, second, None)
        return None

    proof = first_half.combine(bridge).combine(second_half.reverse())
    get_logger().proof_result(first, second, len(proof))
    return proof


def _terms_with_steps(
    terms: Sequence[Expr], others: Sequence[Expr]
) -> Optional[List[TransformSteps]]:
    found = []
    for term, other in zip(terms, others):
        steps = simply_equivalent_with_steps(term, other)
        if steps is None:
            return None
        found.append(steps)
    return found


def _spliced(steps: TransformSteps, sub_steps: List[TransformSteps]) -> TransformSteps:
    for index, sub in enumerate(sub_steps):
        steps.splice(sub, index)
    return steps
