# utils/tree_visualizer.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Graphviz rendering of expression trees

import os
from typing import Optional

from logic.expression import Expr, Literal
from utils.logger import get_logger

# Conditional import of graphviz
try:
    from graphviz import Digraph

    GRAPHVIZ_AVAILABLE = True
except ImportError:
    GRAPHVIZ_AVAILABLE = False

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "tree_visualizations"


def build_expression_graph(expression: Expr, fmt: str = "png") -> Optional["Digraph"]:
    """
    Builds a Graphviz digraph with one node per subterm of the expression.
    Operators are drawn as circles labelled with their symbol, literals as
    boxes. Edges are labelled with the argument index they lead to.

    Returns None when the graphviz package is not installed.
    """
    if not GRAPHVIZ_AVAILABLE:
        logger.warning("Graphviz library not installed. Skipping expression tree rendering. "
                       "To enable, install graphviz: pip install graphviz")
        return None

    dot = Digraph(comment=expression.pretty_print(), format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")
    dot.attr(label=expression.pretty_print(), labelloc="t", fontsize="12")

    def add(node: Expr, node_id: str) -> None:
        if isinstance(node, Literal):
            dot.node(node_id, node.name, shape="box", style="filled", fillcolor="lightgoldenrodyellow")
            return
        dot.node(node_id, node.operator.symbol, shape="circle", style="filled", fillcolor="lightskyblue")
        for index, term in enumerate(node.terms):
            child_id = f"{node_id}_{index}"
            add(term, child_id)
            label = str(index) if len(node.terms) > 1 else ""
            dot.edge(node_id, child_id, label=label)

    add(expression, "n")
    return dot


def render_expression_tree(expression: Expr, base_filename: str, fmt: str = "png") -> Optional[str]:
    """
    Renders the expression tree to an image inside the visualization folder.

    Args:
        expression: The expression to draw.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").

    Returns:
        Path of the rendered file, or None if rendering was skipped or failed.
    """
    dot = build_expression_graph(expression, fmt)
    if dot is None:
        return None

    # Ensure the output directory exists
    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for tree visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
        logger.info(f"Expression tree saved to {rendered}")
        return rendered
    except Exception as e:
        # graphviz raises ExecutableNotFound when the dot binary is missing
        logger.warning(f"Failed to render expression tree to {output_path}.{fmt}: {e}. "
                       f"Ensure the Graphviz executables are installed and in your PATH.")
        return None
