# tests/transform_tests/test_normal_form.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Tests for normal form transformations

"""Tests for negation, conjunctive and disjunctive normal forms.

Every transformation is checked three ways: the result has the form's
shape, it is semantically equivalent to the input by truth table, and the
recorded derivation replays step by step.
"""

import pytest
from parser import parse
from logic.truth_table import semantically_equivalent
from transform.normal_form import NormalForm
from transform.rules import InferenceRule
from utils.logger import get_logger

FORMULAS = [
    "A",
    "¬A",
    "A∧B",
    "¬(P∧Q)",
    "¬(P∨Q)",
    "¬¬A",
    "¬¬¬A",
    "P∨(Q∧R)",
    "(Q∧R)∨P",
    "P∧(Q∨R)",
    "(A∧B)∨(C∧D)",
    "(A∨B)∧(C∨D)",
    "(A∨B)∧(¬C∨(D∧¬A))",
    "¬¬(A∧(B∨¬C))",
    "((P∧Q)∨(R∧S))∨¬T",
    "¬(¬(A∧¬B)∨(C∧¬(D∨E)))",
    "¬((A∨B)∧¬(C∧D))",
]


class TestNormalForms:
    """Normal form drivers."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_negation_normal_form_de_morgan(self, de_morgan_formula):
        """NEGATION.transform(¬(P∧Q)) gives (¬P)∨(¬Q)."""
        result = NormalForm.NEGATION.transform(parse(de_morgan_formula))
        assert result == parse("(¬P)∨(¬Q)")

    EXPECTED_RESULTS = [
        (NormalForm.NEGATION, "¬(P∨Q)", "¬P∧¬Q"),
        (NormalForm.NEGATION, "¬¬A", "A"),
        (NormalForm.NEGATION, "¬¬¬A", "¬A"),
        (NormalForm.NEGATION, "¬(A∧¬B)", "¬A∨B"),
        (NormalForm.CONJUNCTIVE, "P∨(Q∧R)", "(P∨Q)∧(P∨R)"),
        (NormalForm.CONJUNCTIVE, "(Q∧R)∨P", "(Q∨P)∧(R∨P)"),
        (NormalForm.CONJUNCTIVE, "(A∧B)∨(C∧D)", "((A∨C)∧(B∨C))∧((A∨D)∧(B∨D))"),
        (NormalForm.CONJUNCTIVE, "¬(P∨Q)", "¬P∧¬Q"),
        (NormalForm.DISJUNCTIVE, "P∧(Q∨R)", "(P∧Q)∨(P∧R)"),
        (NormalForm.DISJUNCTIVE, "(Q∨R)∧P", "(Q∧P)∨(R∧P)"),
        (NormalForm.DISJUNCTIVE, "¬(P∧Q)", "¬P∨¬Q"),
    ]

    @pytest.mark.parametrize("form, formula, expected", EXPECTED_RESULTS)
    def test_expected_results(self, form, formula, expected):
        """Known inputs reach their known normal form.

        Args:
            form: Normal form to apply
            formula: Input formula
            expected: Expected result
        """
        result = form.transform(parse(formula))
        self.logger.debug(f"{form}: {formula} -> {result.pretty_print()}")
        assert result == parse(expected)

    @pytest.mark.parametrize("form", list(NormalForm))
    @pytest.mark.parametrize("formula", FORMULAS)
    def test_result_is_in_form(self, form, formula):
        """in_form holds for every transformation result."""
        result = form.transform(parse(formula))
        assert form.in_form(result), f"{form} of {formula} gave {result.pretty_print()}"

    @pytest.mark.parametrize("form", list(NormalForm))
    @pytest.mark.parametrize("formula", FORMULAS)
    def test_result_is_equivalent(self, form, formula):
        """Rewriting preserves meaning."""
        expr = parse(formula)
        assert semantically_equivalent(expr, form.transform(expr))

    @pytest.mark.parametrize("form", list(NormalForm))
    @pytest.mark.parametrize("formula", FORMULAS)
    def test_derivation_replays(self, form, formula):
        """Every recorded step is justified by its rule."""
        expr = parse(formula)
        steps = form.transform_with_steps(expr)

        assert steps.original == expr
        assert steps.result() == form.transform(expr)
        assert steps.verify()

    @pytest.mark.parametrize("form", list(NormalForm))
    @pytest.mark.parametrize("formula", FORMULAS)
    def test_idempotent(self, form, formula):
        """Transforming a result again changes nothing."""
        result = form.transform(parse(formula))
        again = form.transform_with_steps(result)
        assert again.result() == result
        assert len(again) == 0

    IN_FORM_CASES = [
        (NormalForm.NEGATION, "A", True),
        (NormalForm.NEGATION, "¬A∧(B∨¬C)", True),
        (NormalForm.NEGATION, "¬¬A", False),
        (NormalForm.NEGATION, "¬(A∧B)", False),
        (NormalForm.CONJUNCTIVE, "A∨¬B", True),
        (NormalForm.CONJUNCTIVE, "(A∨B)∧¬C", True),
        (NormalForm.CONJUNCTIVE, "A∨(B∧C)", False),
        (NormalForm.CONJUNCTIVE, "¬(A∨B)", False),
        (NormalForm.DISJUNCTIVE, "A∧¬B", True),
        (NormalForm.DISJUNCTIVE, "(A∧B)∨¬C", True),
        (NormalForm.DISJUNCTIVE, "A∧(B∨C)", False),
    ]

    @pytest.mark.parametrize("form, formula, expected", IN_FORM_CASES)
    def test_in_form(self, form, formula, expected):
        assert form.in_form(parse(formula)) is expected

    def test_de_morgan_derivation(self):
        """The NNF of ¬(P∧Q) takes exactly one De Morgan step."""
        steps = NormalForm.NEGATION.transform_with_steps(parse("¬(P∧Q)"))
        assert steps.rules == (InferenceRule.DE_MORGANS_AND,)

    def test_names(self):
        assert str(NormalForm.CONJUNCTIVE) == "conjunctive normal form"
        assert NormalForm("disjunctive") is NormalForm.DISJUNCTIVE

    @pytest.mark.parametrize("form", list(NormalForm))
    def test_deeply_nested_negations(self, form):
        """Four hundred stacked negations cancel out in pairs."""
        steps = form.transform_with_steps(parse("¬" * 400 + "A"))

        assert steps.result() == parse("A")
        assert len(steps) == 200
        assert set(steps.rules) == {InferenceRule.DOUBLE_NEGATION}
