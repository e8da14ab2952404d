# picker/assignment.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Short truth table assignments over an expression's structure

"""Short truth table bookkeeping.

An :class:`Assignment` mirrors an expression tree node for node and lets a
user assign a truth value to every node, in the order the nodes appear in
the printed formula: for a binary operator the left argument, then the
operator itself, then the right argument; for a negation the operator first.

Once values are in place the tree can report conflicts: nodes whose value
disagrees with their operator applied to their children's values, and
occurrences of one literal that were given different values.
"""

from typing import Dict, Iterator, List, Optional

from logic.expression import Expr, Function, Literal


class Assignment:
    """Truth value slot for one node of an expression."""

    def __init__(self, expression: Expr):
        self.expression = expression
        self.setting: Optional[bool] = None
        self.sub_assignments: List[Assignment] = []
        if isinstance(expression, Function):
            self.sub_assignments = [Assignment(term) for term in expression.terms]

    def assignments(self) -> List["Assignment"]:
        """Children with this node inserted at its operator's symbol position."""
        ordered = list(self.sub_assignments)
        if isinstance(self.expression, Function):
            ordered.insert(self.expression.operator.symbol_position, self)
        else:
            ordered.append(self)
        return ordered

    def walk(self) -> Iterator["Assignment"]:
        """Every node of the tree in printed, left to right order."""
        for assignment in self.assignments():
            if assignment is self:
                yield self
            else:
                yield from assignment.walk()

    @property
    def participle(self) -> str:
        """Operator symbol of a Function, name of a Literal."""
        if isinstance(self.expression, Function):
            return self.expression.operator.symbol
        return self.expression.pretty_print()

    def assign(self, value: bool) -> None:
        self.setting = value

    def is_complete(self) -> bool:
        return all(node.setting is not None for node in self.walk())

    def conflicts(self) -> List["Assignment"]:
        """Nodes whose setting contradicts the rest of the assignment.

        A Function conflicts when all of its children are set and its own
        setting differs from its operator's truth table. A Literal conflicts
        when another occurrence of the same name holds a different value.
        """
        found = []
        literal_values: Dict[Literal, bool] = {}
        for node in self.walk():
            if node.setting is None:
                continue
            if isinstance(node.expression, Literal):
                previous = literal_values.setdefault(node.expression, node.setting)
                if previous != node.setting:
                    found.append(node)
                continue
            values = [child.setting for child in node.sub_assignments]
            if None in values:
                continue
            if node.expression.operator.apply(*values) != node.setting:
                found.append(node)
        return found

    def __str__(self) -> str:
        value = "?" if self.setting is None else ("T" if self.setting else "F")
        return f"{self.participle}={value}"
