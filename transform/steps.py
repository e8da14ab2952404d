# transform/steps.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Ledger of rewrite steps backing derivations and proofs

"""Transform ledger.

A :class:`TransformSteps` records a derivation as ``k + 1`` intermediate
expressions interleaved with the ``k`` rules applied between them. Each rule
carries the path of argument indices at which it rewrote, so a step applied
deep inside a formula by :meth:`TransformSteps.splice` can still be checked
against the rule that justifies it.

The ledger is mutable and owned by the call chain that builds it.
``combine`` and ``reverse`` return new ledgers and leave their inputs alone.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING

from logic.expression import Expr, Function
from utils.logger import get_logger

if TYPE_CHECKING:
    from .rules import Transform

Path = Tuple[int, ...]


@dataclass(frozen=True)
class TransformStep:
    """A single rule application with the expressions around it.

    Attributes:
        before: Whole expression before the step
        rule: The transform that was applied
        after: Whole expression after the step
        path: Argument indices leading to the rewritten subterm
    """

    before: Expr
    rule: Transform
    after: Expr
    path: Path = ()

    def is_justified(self) -> bool:
        """Check that the rule at ``path`` turns ``before`` into ``after``."""
        try:
            old = self.before.subterm(self.path)
            new = self.after.subterm(self.path)
        except IndexError:
            return False
        if not self.rule.rewrites(old, new):
            return False
        # Nothing outside the rewritten subterm may change
        return self.before.replace_at(self.path, new) == self.after

    def __str__(self) -> str:
        return f"{self.before} --- {self.rule} --- {self.after}"


@dataclass(frozen=True)
class StepOrExpression:
    """Element of a ledger iteration: either a step or an expression."""

    step: Optional[TransformStep] = None
    expression: Optional[Expr] = None

    @property
    def is_step(self) -> bool:
        return self.step is not None

    def __str__(self) -> str:
        if self.step is not None:
            return f"TransformStep: {self.step}"
        return f"Expression: {self.expression}"


class TransformSteps:
    """Mutable ordered record of intermediate expressions and applied rules.

    Invariant: ``len(intermediates) == len(rules) + 1`` after every mutation.
    """

    def __init__(self, original: Expr):
        self._intermediates: List[Expr] = [original]
        self._rules: List[Tuple[Transform, Path]] = []
        self._check_rep()

    @classmethod
    def _from_parts(
        cls, intermediates: List[Expr], rules: List[Tuple[Transform, Path]]
    ) -> TransformSteps:
        steps = cls.__new__(cls)
        steps._intermediates = intermediates
        steps._rules = rules
        steps._check_rep()
        return steps

    def add_step(self, rule: Transform) -> TransformSteps:
        """Apply ``rule`` to the current result and record it."""
        before = self.result()
        after = rule.transform(before)
        self._rules.append((rule, ()))
        self._intermediates.append(after)
        get_logger().rule_applied(rule, before, after)
        self._check_rep()
        return self

    def splice(self, other: TransformSteps, index: int) -> TransformSteps:
        """Merge a derivation of one argument of the current result.

        The parent Function is rebuilt around every intermediate of
        ``other``; its steps are recorded with ``index`` prepended to their
        paths.

        Args:
            other: Ledger whose original is argument ``index`` of the result
            index: Argument position the sub-derivation applies to

        Raises:
            ValueError: The result is not a Function or the argument differs
                from ``other``'s original
        """
        if not other._rules:
            return self
        parent = self.result()
        if not isinstance(parent, Function):
            raise ValueError(f"Cannot splice into the literal {parent}")
        if parent.terms[index] != other.original:
            raise ValueError(
                f"Argument {index} of {parent} is not {other.original}"
            )

        terms = list(parent.terms)
        # The current result is rebuilt as the first spliced intermediate
        self._intermediates.pop()
        for intermediate in other._intermediates:
            terms[index] = intermediate
            self._intermediates.append(Function(parent.operator, terms))
        self._rules.extend((rule, (index,) + path) for rule, path in other._rules)
        self._check_rep()
        return self

    def combine(self, other: TransformSteps) -> TransformSteps:
        """Concatenate two ledgers sharing the junction expression.

        Raises:
            ValueError: ``other`` does not start where this ledger ends
        """
        if self.result() != other.original:
            raise ValueError(
                f"Cannot combine: {self.result()} does not continue as {other.original}"
            )
        return TransformSteps._from_parts(
            self._intermediates[:-1] + other._intermediates,
            self._rules + other._rules,
        )

    def reverse(self) -> TransformSteps:
        """Return the derivation run backwards."""
        return TransformSteps._from_parts(
            list(reversed(self._intermediates)), list(reversed(self._rules))
        )

    @property
    def original(self) -> Expr:
        return self._intermediates[0]

    def result(self) -> Expr:
        """Return the final expression formed by the contained steps."""
        return self._intermediates[-1]

    @property
    def intermediates(self) -> Tuple[Expr, ...]:
        return tuple(self._intermediates)

    @property
    def rules(self) -> Tuple[Transform, ...]:
        return tuple(rule for rule, _ in self._rules)

    def get(self, i: int) -> Expr:
        return self._intermediates[i]

    def get_step(self, i: int) -> TransformStep:
        rule, path = self._rules[i]
        return TransformStep(self._intermediates[i], rule, self._intermediates[i + 1], path)

    @property
    def steps(self) -> Tuple[TransformStep, ...]:
        return tuple(self.get_step(i) for i in range(len(self._rules)))

    def verify(self) -> bool:
        """Check that every recorded step is justified by its rule."""
        return all(step.is_justified() for step in self.steps)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[StepOrExpression]:
        """Yield expressions and steps alternately, ending with the result."""
        for i in range(len(self._rules)):
            yield StepOrExpression(expression=self._intermediates[i])
            yield StepOrExpression(step=self.get_step(i))
        yield StepOrExpression(expression=self.result())

    def __str__(self) -> str:
        lines = ["-----"]
        for i, (rule, _) in enumerate(self._rules):
            lines.append(self._intermediates[i].pretty_print())
            lines.append(f"    [{rule}]")
        lines.append(self.result().pretty_print())
        lines.append("-----")
        return "\n".join(lines)

    def _check_rep(self):
        assert len(self._intermediates) == len(self._rules) + 1
