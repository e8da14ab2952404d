# tests/transform_tests/test_transform_steps.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Tests for the transform ledger

"""Tests for TransformSteps: recording, splicing, combining, reversing and
replaying derivations."""

import pytest
from parser import parse
from transform.rules import InferenceRule, MiscTransform
from transform.steps import TransformStep, TransformSteps


def _de_morgan_steps() -> TransformSteps:
    return TransformSteps(parse("¬(P∧Q)")).add_step(InferenceRule.DE_MORGANS_AND)


def _double_negation_steps() -> TransformSteps:
    return TransformSteps(parse("¬¬B")).add_step(InferenceRule.DOUBLE_NEGATION)


class TestLedgerBasics:
    """Recording and inspection."""

    def test_empty_ledger(self):
        steps = TransformSteps(parse("A"))

        assert len(steps) == 0
        assert steps.original == parse("A")
        assert steps.result() == parse("A")
        assert steps.intermediates == (parse("A"),)
        assert steps.rules == ()
        assert steps.verify()

    def test_add_step(self):
        steps = _de_morgan_steps()

        assert len(steps) == 1
        assert steps.intermediates == (parse("¬(P∧Q)"), parse("¬P∨¬Q"))
        assert steps.rules == (InferenceRule.DE_MORGANS_AND,)
        assert steps.get(1) == parse("¬P∨¬Q")

    def test_add_step_chains(self):
        steps = _de_morgan_steps().add_step(MiscTransform.COMMUTE)

        assert len(steps) == 2
        assert len(steps.intermediates) == len(steps.rules) + 1
        assert steps.result() == parse("¬Q∨¬P")

    def test_get_step(self):
        step = _de_morgan_steps().get_step(0)

        assert step.before == parse("¬(P∧Q)")
        assert step.rule is InferenceRule.DE_MORGANS_AND
        assert step.after == parse("¬P∨¬Q")
        assert step.path == ()

    def test_iteration_alternates(self):
        steps = _de_morgan_steps().add_step(MiscTransform.COMMUTE)
        items = list(steps)

        assert len(items) == 2 * len(steps) + 1
        assert [item.is_step for item in items] == [False, True, False, True, False]
        assert items[0].expression == steps.original
        assert items[-1].expression == steps.result()
        assert items[1].step.rule is InferenceRule.DE_MORGANS_AND

    def test_string_rendering(self):
        text = str(_de_morgan_steps())
        lines = text.splitlines()

        assert lines[0] == "-----"
        assert lines[1] == "¬(P ∧ Q)"
        assert lines[2] == "    [DeMorgan's and]"
        assert lines[3] == "¬P ∨ ¬Q"
        assert lines[-1] == "-----"


class TestSplice:
    """Merging a sub-derivation into an argument."""

    def test_splice(self):
        steps = TransformSteps(parse("A∧¬¬B"))
        steps.splice(_double_negation_steps(), 1)

        assert steps.result() == parse("A∧B")
        assert steps.intermediates == (parse("A∧¬¬B"), parse("A∧B"))
        assert steps.get_step(0).path == (1,)
        assert steps.verify()

    def test_nested_splice_paths(self):
        """Paths accumulate through repeated splicing."""
        inner = TransformSteps(parse("A∧¬¬B"))
        inner.splice(_double_negation_steps(), 1)
        outer = TransformSteps(parse("¬(A∧¬¬B)"))
        outer.splice(inner, 0)

        assert outer.result() == parse("¬(A∧B)")
        assert outer.get_step(0).path == (0, 1)
        assert outer.verify()

    def test_splice_empty_is_noop(self):
        steps = TransformSteps(parse("A∧B"))
        steps.splice(TransformSteps(parse("B")), 1)

        assert len(steps) == 0
        assert steps.result() == parse("A∧B")

    def test_splice_mismatched_argument(self):
        with pytest.raises(ValueError):
            TransformSteps(parse("A∧B")).splice(_double_negation_steps(), 1)

    def test_splice_into_literal(self):
        with pytest.raises(ValueError):
            TransformSteps(parse("A")).splice(_double_negation_steps(), 0)


class TestCombineAndReverse:
    """Concatenation and reversal return new ledgers."""

    def test_combine(self):
        first = _de_morgan_steps()
        second = TransformSteps(parse("¬P∨¬Q")).add_step(MiscTransform.COMMUTE)
        combined = first.combine(second)

        assert len(combined) == 2
        assert combined.intermediates == (
            parse("¬(P∧Q)"),
            parse("¬P∨¬Q"),
            parse("¬Q∨¬P"),
        )
        assert combined.verify()
        # Inputs are untouched
        assert len(first) == 1
        assert len(second) == 1

    def test_combine_with_empty(self):
        first = _de_morgan_steps()
        combined = first.combine(TransformSteps(first.result()))
        assert combined.intermediates == first.intermediates

    def test_combine_junction_mismatch(self):
        with pytest.raises(ValueError):
            _de_morgan_steps().combine(TransformSteps(parse("A")))

    def test_reverse(self):
        steps = _de_morgan_steps().add_step(MiscTransform.COMMUTE)
        reversed_steps = steps.reverse()

        assert reversed_steps.original == parse("¬Q∨¬P")
        assert reversed_steps.result() == parse("¬(P∧Q)")
        assert reversed_steps.rules == (MiscTransform.COMMUTE, InferenceRule.DE_MORGANS_AND)
        assert reversed_steps.verify()
        assert steps.original == parse("¬(P∧Q)")

    def test_reverse_spliced(self):
        steps = TransformSteps(parse("A∧¬¬B"))
        steps.splice(_double_negation_steps(), 1)
        reversed_steps = steps.reverse()

        assert reversed_steps.result() == parse("A∧¬¬B")
        assert reversed_steps.get_step(0).path == (1,)
        assert reversed_steps.verify()


class TestStepJustification:
    """Replaying single steps."""

    JUSTIFICATION_CASES = [
        ("A∧B", MiscTransform.COMMUTE, "B∧A", (), True),
        ("A∧B", MiscTransform.COMMUTE, "A∨B", (), False),
        ("¬(A∧B)", MiscTransform.COMMUTE, "¬(B∧A)", (0,), True),
        ("¬(A∧B)", MiscTransform.COMMUTE, "¬(B∧A)", (), False),
        ("¬(A∧B)", MiscTransform.COMMUTE, "¬(B∧A)", (0, 0), False),
        ("¬(A∧B)", MiscTransform.COMMUTE, "¬(B∧A)", (0, 0, 0), False),
        ("C∨¬(P∧Q)", InferenceRule.DE_MORGANS_AND, "C∨(¬P∨¬Q)", (1,), True),
        ("C∨¬(P∧Q)", InferenceRule.DE_MORGANS_AND, "D∨(¬P∨¬Q)", (1,), False),
    ]

    @pytest.mark.parametrize("before, rule, after, path, expected", JUSTIFICATION_CASES)
    def test_is_justified(self, before, rule, after, path, expected):
        """A step is justified only if the rule rewrites the subterm at its
        path and nothing else changes.

        Args:
            before: Expression before the step
            rule: Claimed rule
            after: Expression after the step
            path: Claimed position of the rewrite
            expected: Whether the step should replay
        """
        step = TransformStep(parse(before), rule, parse(after), path)
        assert step.is_justified() is expected
