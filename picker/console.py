# picker/console.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Interactive console front end for short truth tables

"""Console picker walking a formula node by node.

The picker shows the formula, then asks for a truth value for each symbol
in printed order. Input and output functions are injectable so the loop can
be driven without a terminal.
"""

from typing import Callable

from logic.expression import Expr
from .assignment import Assignment

TRUE_ANSWERS = {"t", "true", "1", "y", "yes"}
FALSE_ANSWERS = {"f", "false", "0", "n", "no"}


def run_picker(
    expression: Expr,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Assignment:
    """Ask for a value for every node and report the conflicts.

    Args:
        expression: Formula to walk
        input_fn: Reads one answer given a prompt
        output_fn: Prints one line

    Returns:
        The filled-in assignment
    """
    root = Assignment(expression)
    output_fn(expression.pretty_print())

    for node in root.walk():
        while node.setting is None:
            answer = input_fn(f"{node.participle} [T/F]: ").strip().lower()
            if answer in TRUE_ANSWERS:
                node.assign(True)
            elif answer in FALSE_ANSWERS:
                node.assign(False)
            else:
                output_fn(f"Unrecognized answer '{answer}', expected T or F")

    output_fn(" ".join(str(node) for node in root.walk()))
    conflicts = root.conflicts()
    if conflicts:
        output_fn("Conflicts: " + ", ".join(str(node) for node in conflicts))
    else:
        output_fn("Assignment is consistent")
    return root
