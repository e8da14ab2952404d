# tests/utils_tests/test_tree_visualizer.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Tests for Graphviz expression tree rendering

"""Tests for expression tree graphs and logger configuration."""

import logging

import pytest
from parser import parse
from utils import tree_visualizer
from utils.logger import LogLevel, configure_logging, get_logger


class TestExpressionGraph:
    """Graph construction; rendering itself needs the dot executable."""

    def test_graph_nodes_and_edges(self):
        pytest.importorskip("graphviz")
        dot = tree_visualizer.build_expression_graph(parse("A∧¬B"))

        source = dot.source
        for node_id in ("n_0", "n_1", "n_1_0"):
            assert node_id in source
        assert source.count("->") == 3

    def test_missing_graphviz(self, monkeypatch):
        monkeypatch.setattr(tree_visualizer, "GRAPHVIZ_AVAILABLE", False)

        assert tree_visualizer.build_expression_graph(parse("A")) is None
        assert tree_visualizer.render_expression_tree(parse("A"), "tree") is None


class TestLoggerConfiguration:
    """Process-wide logger."""

    def teardown_method(self):
        get_logger().set_level(LogLevel.INFO)

    def test_singleton(self):
        assert get_logger() is get_logger()

    @pytest.mark.parametrize("debug, level", [(False, logging.INFO), (True, logging.DEBUG)])
    def test_configure_logging(self, debug, level):
        configure_logging(debug=debug)
        assert get_logger().logger.level == level

    def test_debug_helpers_render_only_when_enabled(self):
        """Expressions handed to the debug helpers are not printed at INFO."""

        class Unprintable:
            def pretty_print(self):
                raise AssertionError("rendered while debug output is off")

        logger = get_logger()
        logger.set_level(LogLevel.INFO)
        assert not logger.is_debug_enabled()

        logger.rule_applied("rule", Unprintable(), Unprintable())
        logger.rule_not_applicable("rule", Unprintable())
        logger.normal_form_result("form", Unprintable(), Unprintable(), 0)
        logger.proof_result(Unprintable(), Unprintable(), None)
        logger.truth_table(Unprintable(), 1, 2)

    def test_debug_helpers_render_when_enabled(self):
        collected = []
        handler = logging.Handler()
        handler.emit = lambda record: collected.append(record.getMessage())
        logger = get_logger()
        logger.logger.addHandler(handler)
        try:
            configure_logging(debug=True)
            logger.rule_applied("double negation", parse("¬¬A"), parse("A"))
        finally:
            logger.logger.removeHandler(handler)

        assert collected == ["    🔁 double negation: ¬¬A ⟶ A"]
