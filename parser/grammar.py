# parser/grammar.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Recursive term reader turning token streams into expression trees

"""Term reader for propositional formulas.

The notation has no operator precedence. Every level of a formula holds at
most one binary operator, written either infix (at the operator's declared
symbol position) or prefix, and parentheses are the only way to nest:

    A ∧ B            infix conjunction
    AND A B          the same, prefix
    ¬A ∨ (B ∧ C)     negation binds the single term that follows it
    A ∧ B ∨ C        rejected, two operators on one level

Reading is recursive over token lists: redundant parenthesis layers are
stripped, the level is split into terms, the operator term is moved to the
front and the remaining terms are read as its arguments.
"""

from typing import List, Sequence

from logic.exceptions import (
    EmptyExpressionError,
    InvalidArgumentsError,
    UnmatchedParenthesesError,
)
from logic.expression import Expr, Function, Literal
from logic.operators import Operator
from utils.logger import get_logger
from .lexer import FormulaLexer, OPERATOR_TOKENS


class _FormulaReader:
    """Reads one formula from text.

    A fresh reader is used for each formula so no state leaks between calls.
    """

    def parse(self, text: str) -> Expr:
        """Parse formula text into an expression tree.

        Args:
            text: Formula in symbolic or keyword notation

        Returns:
            Root of the expression tree

        Raises:
            UnmatchedParenthesesError: Parentheses do not balance
            EmptyExpressionError: Nothing but whitespace was given
            NotAnOperatorError: A character is not part of the notation
            InvalidArgumentsError: Operators or arguments are misplaced
        """
        logger = get_logger()
        logger.debug(f"Reading formula: {text}")

        check_matching_parentheses(text)
        if not text.strip():
            raise EmptyExpressionError()

        tokens = list(FormulaLexer().tokenize(text))
        logger.debug(f"Token types: {[token.type for token in tokens]}")

        result = self._read_term(tokens)
        logger.debug(f"Successfully read formula into {type(result).__name__}")
        return result

    def _read_term(self, tokens: Sequence) -> Expr:
        if not tokens:
            raise InvalidArgumentsError("Expected a term but found empty parentheses")

        # Unwrap any surrounding parentheses
        layers = _wrapping_layers(tokens)
        if layers:
            return self._read_term(tokens[layers : len(tokens) - layers])

        terms = _split_terms(tokens)

        if len(terms) == 1:
            term = terms[0]
            first = term[0]
            if first.type == "NEG":
                if len(term) == 1:
                    raise InvalidArgumentsError(
                        f"Operator {Operator.NEGATION.symbol} has no argument"
                    )
                return Function(Operator.NEGATION, (self._read_term(term[1:]),))
            if first.type == "ID":
                return Literal(first.value)
            raise InvalidArgumentsError(
                f"Operator {OPERATOR_TOKENS[first.type].symbol} has no arguments"
            )

        operator, arguments = _move_operator_to_prefix(terms)
        return Function(operator, [self._read_term(term) for term in arguments])


def check_matching_parentheses(text: str) -> None:
    """Verify that every parenthesis in ``text`` is matched.

    Raises:
        UnmatchedParenthesesError: At the index of a ``)`` that closes
            nothing, or at ``len(text)`` if a group is left open
    """
    depth = 0
    for i, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise UnmatchedParenthesesError(text, i)
    if depth != 0:
        raise UnmatchedParenthesesError(text, len(text))


def _find_closing(tokens: Sequence, start: int) -> int:
    """Index of the parenthesis closing the one at ``start``, or -1."""
    depth = 0
    for i in range(start, len(tokens)):
        if tokens[i].type == "LPAREN":
            depth += 1
        elif tokens[i].type == "RPAREN":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _wrapping_layers(tokens: Sequence) -> int:
    """Count redundant parenthesis layers wrapped around the whole list."""
    last = len(tokens) - 1
    layers = 0
    while (
        layers <= last - layers
        and tokens[layers].type == "LPAREN"
        and _find_closing(tokens, layers) == last - layers
    ):
        layers += 1
    return layers


def _split_terms(tokens: Sequence) -> List[Sequence]:
    """Split one level of a formula into its top-level terms.

    A term is a run of negations followed by an identifier or a
    parenthesized group, or a lone binary operator.
    """
    terms = []
    start = 0
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.type == "NEG":
            i += 1
            continue
        if token.type == "LPAREN":
            i = _find_closing(tokens, i)
        elif token.type in ("AND", "OR") and i > start:
            # Negations directly before a binary operator form their own term
            terms.append(tokens[start:i])
            start = i
        terms.append(tokens[start : i + 1])
        i += 1
        start = i
    if start < len(tokens):
        terms.append(tokens[start:])
    return terms


def _operator_of(term: Sequence):
    if len(term) == 1 and term[0].type in OPERATOR_TOKENS:
        return OPERATOR_TOKENS[term[0].type]
    return None


def _move_operator_to_prefix(terms: List[Sequence]):
    """Locate the single operator of a level and return it with its arguments.

    Raises:
        InvalidArgumentsError: No operator, several operators, or an operator
            that is neither prefix nor at its symbol position
    """
    positions = [i for i, term in enumerate(terms) if _operator_of(term) is not None]
    if not positions:
        raise InvalidArgumentsError(
            f"No operator found among terms {[_term_text(t) for t in terms]}"
        )
    if len(positions) > 1:
        found = ", ".join(_operator_of(terms[i]).symbol for i in positions)
        raise InvalidArgumentsError(
            f"Ambiguous expression, operators {found} share one level; "
            f"add parentheses"
        )

    position = positions[0]
    operator = _operator_of(terms[position])
    if position != 0 and position != operator.symbol_position:
        raise InvalidArgumentsError(
            f"Operator {operator.symbol} found in position {position}, "
            f"should be 0 or {operator.symbol_position}"
        )
    arguments = terms[:position] + terms[position + 1 :]
    return operator, arguments


def _term_text(term: Sequence) -> str:
    return " ".join(str(token.value) for token in term)
