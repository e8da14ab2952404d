# transform/simplify.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Greedy complexity-reducing simplifier

"""Best-effort simplification.

At every node the simplifier tries each inference rule in catalog order (in
whichever direction the rule applies), keeps the rewrite that lowers the
complexity the most, and repeats until no rule gives a strict reduction.
It then moves on to the children, and comes back to the node when the
simplified children allow a further reduction. Ties go to the rule listed
first.

This is not a single pass of one rule per node: a node is rewritten until
it stops shrinking, and is visited again after its children change, so
``¬¬¬¬A`` and ``¬((¬P)∨(¬Q))`` come out fully reduced.

This is a heuristic, not a minimizer: a reduction hidden behind a rewrite
that first grows the formula is never found.
"""

from typing import Optional, Sequence

from logic.expression import Expr, Function
from utils.logger import get_logger
from .rules import InferenceRule
from .steps import TransformSteps


class Simplify:
    """Greedy simplifier over a fixed list of rules."""

    def __init__(self, strategies: Sequence[InferenceRule] = tuple(InferenceRule)):
        self.strategies = tuple(strategies)

    def transform(self, orig: Expr) -> Expr:
        return self.transform_with_steps(orig).result()

    def transform_with_steps(self, orig: Expr) -> TransformSteps:
        steps = TransformSteps(orig)
        rule = self._best_rule(orig)
        while True:
            while rule is not None:
                steps.add_step(rule)
                rule = self._best_rule(steps.result())

            current = steps.result()
            if isinstance(current, Function):
                for index, term in enumerate(current.terms):
                    steps.splice(self.transform_with_steps(term), index)

            # Simpler children can expose a reduction at this node
            rule = self._best_rule(steps.result())
            if rule is None:
                return steps

    def rewrites(self, before: Expr, after: Expr) -> bool:
        return any(rule.rewrites(before, after) for rule in self.strategies)

    def _best_rule(self, e: Expr) -> Optional[InferenceRule]:
        """Rule with the largest strict complexity reduction at the root."""
        best = None
        best_reduction = 0
        for rule in self.strategies:
            reduction = e.complexity() - rule.transform(e).complexity()
            if reduction > best_reduction:
                best, best_reduction = rule, reduction
        logger = get_logger()
        if best is not None and logger.is_debug_enabled():
            logger.debug(f"  Simplify picked {best} (-{best_reduction}) for {e.pretty_print()}")
        return best

    def __str__(self) -> str:
        return "simplify"


SIMPLIFY = Simplify()
