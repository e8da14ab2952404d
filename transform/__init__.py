# transform/__init__.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Rewrite engine public API

"""Term rewriting over propositional formulas.

Primary Components:
    InferenceRule: Named bidirectional rewrites (De Morgan, distribution, ...)
    MiscTransform: Structural rewrites such as commutation
    NormalForm: Negation, conjunctive and disjunctive normal form drivers
    SIMPLIFY: Greedy complexity-reducing simplifier
    TransformSteps: Ledger of the rewrites behind a derivation

Example:
    >>> from parser import parse
    >>> from transform import NormalForm
    >>> NormalForm.NEGATION.transform(parse("¬(P∧Q)")).pretty_print()
    '¬P ∨ ¬Q'
"""

from .rules import Transform, InferenceRule, MiscTransform
from .steps import TransformStep, TransformSteps, StepOrExpression
from .normal_form import NormalForm
from .simplify import Simplify, SIMPLIFY
from .equivalence import simply_equivalent, simply_equivalent_with_steps, prove_equivalence

__all__ = [
    "Transform",
    "InferenceRule",
    "MiscTransform",
    "TransformStep",
    "TransformSteps",
    "StepOrExpression",
    "NormalForm",
    "Simplify",
    "SIMPLIFY",
    "simply_equivalent",
    "simply_equivalent_with_steps",
    "prove_equivalence",
]
