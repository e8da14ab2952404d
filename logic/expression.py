# logic/expression.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Expression tree classes and structural pattern matching

"""Expression tree for propositional formulas.

This module defines the two immutable and hashable node classes used to
represent parsed formulas:

    Literal: A named atomic proposition (leaf)
    Function: An operator applied to a fixed number of argument expressions

Equality is deep and order sensitive, so ``A ∧ B`` and ``B ∧ A`` are
different trees. Commutativity is only taken into account by the
equivalence checks in :mod:`transform.equivalence`.

Besides evaluation and printing, every node supports structural matching
against a pattern whose literals act as wildcards. Matching is what the
rewrite engine uses to decide whether an inference rule applies and to
collect the subtrees bound to each pattern variable.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Callable,
    Dict,
    FrozenSet,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .exceptions import (
    InvalidArgumentsError,
    TransformNotApplicableError,
    UnassignedVariableError,
)
from .operators import Operator

if TYPE_CHECKING:
    from transform.steps import TransformSteps

Path = Tuple[int, ...]
Bindings = Dict["Literal", "Expr"]


@dataclass(frozen=True, slots=True, repr=False)
class Expr:
    """Base class for all nodes of a formula tree.

    Concrete nodes implement the abstract operations below; the matching,
    path and equivalence helpers are shared.
    """

    @property
    def operator(self) -> Optional[Operator]:
        """Operator of a Function, ``None`` for a Literal."""
        raise NotImplementedError

    @property
    def terms(self) -> Tuple[Expr, ...]:
        """Arguments of a Function, empty for a Literal."""
        raise NotImplementedError

    def get_variables(self) -> FrozenSet[Literal]:
        """Return every literal occurring in the expression."""
        raise NotImplementedError

    def complexity(self) -> int:
        """Node count; used as a tie breaker when simplifying."""
        raise NotImplementedError

    def evaluate(self, settings: Mapping[Literal, bool]) -> bool:
        """Evaluate the expression under a truth assignment.

        Args:
            settings: Truth value for every literal of the expression

        Raises:
            UnassignedVariableError: A literal has no value in ``settings``
        """
        raise NotImplementedError

    def pretty_print(self) -> str:
        """Infix rendering with symbols and minimal parentheses."""
        raise NotImplementedError

    def map_terms(self, f: Callable[[Expr], Expr]) -> Expr:
        """Rebuild the node with ``f`` applied to every argument."""
        raise NotImplementedError

    def map_predicate(self, p: Callable[[Expr], bool], *allowed: Operator) -> bool:
        """Test ``p`` against the node's arguments.

        For a Function this is true when its operator is one of ``allowed``
        and ``p`` holds for every argument. A Literal has no arguments and
        tests ``p`` on itself. Intended to be used recursively.
        """
        raise NotImplementedError

    def substitute(self, bindings: Mapping[Literal, Expr]) -> Expr:
        """Replace every literal with its binding.

        Raises:
            TransformNotApplicableError: A literal has no binding
        """
        raise NotImplementedError

    def matches(self, pattern: Union[Expr, str]) -> bool:
        """Check if the expression has the shape of ``pattern``.

        Literals of the pattern match any subtree, so ``(A ∧ B) ∨ C``
        matches ``P ∨ Q`` but not ``P ∧ Q``.
        """
        pattern = _as_pattern(pattern)
        if isinstance(pattern, Literal):
            return True
        if self.operator is not pattern.operator:
            return False
        return all(t.matches(p) for t, p in zip(self.terms, pattern.terms))

    def fill_matches(self, pattern: Union[Expr, str]) -> Optional[Bindings]:
        """Match against ``pattern`` and collect the bindings.

        A pattern literal that occurs more than once must be bound to equal
        subtrees every time, so ``P ∧ P`` matches ``A ∧ A`` but not ``A ∧ B``.

        Returns:
            Mapping from pattern literals to subtrees, or ``None`` if the
            expression does not match
        """
        bindings: Bindings = {}
        if _unify(self, _as_pattern(pattern), bindings):
            return bindings
        return None

    def equal_without_literals(self, other: Union[Expr, str]) -> bool:
        """Check if both trees are the same apart from literal names."""
        other = _as_pattern(other)
        if isinstance(self, Literal) or isinstance(other, Literal):
            return isinstance(self, Literal) and isinstance(other, Literal)
        if self.operator is not other.operator:
            return False
        return all(
            t.equal_without_literals(o) for t, o in zip(self.terms, other.terms)
        )

    def subterm(self, path: Sequence[int]) -> Expr:
        """Follow argument indices from this node down to a subterm."""
        node = self
        for index in path:
            if not isinstance(node, Function):
                raise IndexError(f"Path {tuple(path)} leads below the literal {node}")
            node = node.terms[index]
        return node

    def replace_at(self, path: Sequence[int], replacement: Expr) -> Expr:
        """Return a copy with the subterm at ``path`` replaced."""
        if not path:
            return replacement
        if not isinstance(self, Function):
            raise IndexError(f"Path {tuple(path)} leads below the literal {self}")
        index, rest = path[0], path[1:]
        terms = list(self.terms)
        terms[index] = terms[index].replace_at(rest, replacement)
        return Function(self.operator, terms)

    def simply_equivalent(self, other: Expr) -> bool:
        """Equal up to swapping arguments of commutative operators."""
        from transform.equivalence import simply_equivalent

        return simply_equivalent(self, other)

    def simply_equivalent_with_steps(self, other: Expr) -> Optional[TransformSteps]:
        """Like :meth:`simply_equivalent` but returns the commutation steps."""
        from transform.equivalence import simply_equivalent_with_steps

        return simply_equivalent_with_steps(self, other)

    def prove_equivalence(self, other: Expr) -> Optional[TransformSteps]:
        """Derive ``other`` from this expression through conjunctive normal form."""
        from transform.equivalence import prove_equivalence

        return prove_equivalence(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def __str__(self) -> str:
        """Prefix rendering such as ``(AND A (NEG B))``; the parser accepts it."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True, repr=False)
class Literal(Expr):
    """Atomic proposition such as ``A`` or ``rain``.

    Attributes:
        name: Identifier of the proposition

    Raises:
        InvalidArgumentsError: The name is empty or spells an operator
    """

    name: str

    def __post_init__(self):
        if not self.name:
            raise InvalidArgumentsError("A literal needs a non-empty name")
        if Operator.is_operator_text(self.name):
            raise InvalidArgumentsError(f"{self.name} is an operator")

    @property
    def operator(self) -> None:
        return None

    @property
    def terms(self) -> Tuple[Expr, ...]:
        return ()

    def get_variables(self) -> FrozenSet[Literal]:
        return frozenset({self})

    def complexity(self) -> int:
        return 1

    def evaluate(self, settings: Mapping[Literal, bool]) -> bool:
        try:
            return bool(settings[self])
        except KeyError:
            raise UnassignedVariableError(self.name) from None

    def pretty_print(self) -> str:
        return self.name

    def map_terms(self, f: Callable[[Expr], Expr]) -> Expr:
        return self

    def map_predicate(self, p: Callable[[Expr], bool], *allowed: Operator) -> bool:
        return p(self)

    def substitute(self, bindings: Mapping[Literal, Expr]) -> Expr:
        if self not in bindings:
            raise TransformNotApplicableError(f"No binding for pattern literal {self}")
        return bindings[self]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, repr=False)
class Function(Expr):
    """An operator applied to an ordered tuple of arguments.

    Attributes:
        operator: The connective of this node
        terms: Arguments in order, ``terms[0]`` being the first

    Raises:
        InvalidArgumentsError: The number of terms differs from the
            operator's arity, or a term is not an expression
    """

    operator: Operator
    terms: Tuple[Expr, ...]

    def __post_init__(self):
        terms = tuple(self.terms)
        if len(terms) != self.operator.arity:
            raise InvalidArgumentsError(
                f'Operator "{self.operator}" expects {self.operator.arity} '
                f"arguments, {len(terms)} were provided"
            )
        for term in terms:
            if not isinstance(term, Expr):
                raise InvalidArgumentsError(
                    f'Operator "{self.operator}" takes expressions, got {term!r}'
                )
        object.__setattr__(self, "terms", terms)

    def get_variables(self) -> FrozenSet[Literal]:
        variables = frozenset()
        for term in self.terms:
            variables |= term.get_variables()
        return variables

    def complexity(self) -> int:
        return 1 + sum(term.complexity() for term in self.terms)

    def evaluate(self, settings: Mapping[Literal, bool]) -> bool:
        values = tuple(term.evaluate(settings) for term in self.terms)
        return self.operator.apply(*values)

    def pretty_print(self) -> str:
        if self.operator is Operator.NEGATION:
            operand = self.terms[0]
            if isinstance(operand, Function):
                return f"{self.operator.symbol}({operand.pretty_print()})"
            return f"{self.operator.symbol}{operand.pretty_print()}"

        parts = []
        position = self.operator.symbol_position
        for i in range(len(self.terms) + 1):
            if i == position:
                parts.append(self.operator.symbol)
                continue
            # Account for the symbol inserted before this term
            term = self.terms[i if i < position else i - 1]
            if isinstance(term, Literal) or term.operator is Operator.NEGATION:
                parts.append(term.pretty_print())
            else:
                parts.append(f"({term.pretty_print()})")
        return " ".join(parts)

    def map_terms(self, f: Callable[[Expr], Expr]) -> Expr:
        return Function(self.operator, [f(term) for term in self.terms])

    def map_predicate(self, p: Callable[[Expr], bool], *allowed: Operator) -> bool:
        return self.operator in allowed and all(p(term) for term in self.terms)

    def substitute(self, bindings: Mapping[Literal, Expr]) -> Expr:
        return self.map_terms(lambda term: term.substitute(bindings))

    def __str__(self) -> str:
        arguments = " ".join(str(term) for term in self.terms)
        return f"({self.operator.keyword} {arguments})"


def build(operator: Operator, *terms: Union[Expr, str]) -> Function:
    """Convenience constructor accepting literal names for arguments.

    Example:
        >>> build(Operator.CONJUNCTION, "A", build(Operator.NEGATION, "B"))
        Function((AND A (NEG B)))
    """
    return Function(
        operator, [Literal(t) if isinstance(t, str) else t for t in terms]
    )


def _as_pattern(pattern: Union[Expr, str]) -> Expr:
    if isinstance(pattern, str):
        from parser import parse_unsafe

        return parse_unsafe(pattern)
    return pattern


def _unify(expression: Expr, pattern: Expr, bindings: Bindings) -> bool:
    if isinstance(pattern, Literal):
        bound = bindings.get(pattern)
        if bound is not None and bound != expression:
            return False
        bindings[pattern] = expression
        return True
    if expression.operator is not pattern.operator:
        return False
    return all(_unify(t, p, bindings) for t, p in zip(expression.terms, pattern.terms))
