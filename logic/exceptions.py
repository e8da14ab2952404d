# logic/exceptions.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Exceptions for formula construction, parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

The malformed-expression family shares the ``ParseError`` base so callers
can catch bad user input with a single clause. Errors raised for built-in
rule patterns are defects rather than input problems and derive from
``AssertionError`` instead, so they are never swallowed by handlers meant
for user input.
"""


class ParseError(RuntimeError):
    """Exception raised when a formula is malformed.

    Base class of every recoverable failure produced by the parser and by
    expression construction.
    """

    pass


class UnmatchedParenthesesError(ParseError):
    """A closing parenthesis without an opener, or an unclosed opener.

    Attributes:
        text: The formula text that was being checked
        index: Offending index, ``len(text)`` when a group is left open
    """

    def __init__(self, text: str, index: int):
        super().__init__(f'Unmatched parentheses found in "{text}" at index {index}')
        self.text = text
        self.index = index


class NotAnOperatorError(ParseError):
    """A character that is neither a letter, whitespace, a parenthesis nor
    an operator symbol."""

    def __init__(self, character: str, index: int):
        super().__init__(
            f"The character '{character}' at index {index} is not a valid operator"
        )
        self.character = character
        self.index = index


class InvalidArgumentsError(ParseError):
    """Wrong argument count, operator at the wrong position, or a literal
    named like an operator."""

    pass


class EmptyExpressionError(ParseError):
    """The input contains no formula at all."""

    def __init__(self, message: str = "The input is empty"):
        super().__init__(message)


class MalformedExpressionDefect(AssertionError):
    """A formula that is well formed by construction failed to build.

    Raised by ``parse_unsafe`` and friends. Seeing this means a built-in
    pattern is broken, not that the user typed something wrong.
    """

    pass


class UnassignedVariableError(KeyError):
    """Evaluation met a literal with no value in the assignment."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No truth value assigned to literal '{self.name}'"


class TooManyVariablesError(ValueError):
    """The formula has more free variables than a truth table may enumerate."""

    pass


class TransformNotApplicableError(RuntimeError):
    """A substitution found a pattern literal without a binding."""

    pass
