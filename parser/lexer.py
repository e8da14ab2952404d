# parser/lexer.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula text into tokens for the term reader. Operator
symbols and their English keywords produce the same token type, which makes
``A∧B`` and ``A AND B`` indistinguishable after tokenization. Whitespace only
separates tokens.

Supported Tokens:
- Operators: ¬ / NEG, ∧ / AND, ∨ / OR (keywords are case sensitive)
- Grouping: (, )
- Identifiers: runs of letters naming propositions
"""

from sly import Lexer
from logic.exceptions import NotAnOperatorError
from logic.operators import Operator
from utils.logger import get_logger

# Keyword spellings mapped to their token type
KEYWORDS = {
    Operator.NEGATION.keyword: "NEG",
    Operator.CONJUNCTION.keyword: "AND",
    Operator.DISJUNCTION.keyword: "OR",
}

# Token type of each operator, shared with the term reader
OPERATOR_TOKENS = {
    "NEG": Operator.NEGATION,
    "AND": Operator.CONJUNCTION,
    "OR": Operator.DISJUNCTION,
}


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NEG",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # Operator symbols and punctuation
    NEG = r"¬"
    AND = r"∧"
    OR = r"∨"
    LPAREN = r"\("
    RPAREN = r"\)"

    @_(r"[^\W\d_]+")
    def ID(self, t):
        """Letter run; keywords are retyped to their operator token."""
        t.type = KEYWORDS.get(t.value, "ID")
        return t

    def error(self, t):
        """Handle characters that cannot start any token.

        Args:
            t: SLY token object containing error context

        Raises:
            NotAnOperatorError: Always raised with character and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise NotAnOperatorError(illegal_char, error_pos)
