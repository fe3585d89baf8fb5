# parser/exceptions.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the root of the engine's error taxonomy together with the
two front-end failures: lexical errors (an unrecognized character) and parse
errors (a grammar violation). Every exception keeps the structured details a
caller needs to point at the offending input, rather than collapsing them
into a message string.
"""

from typing import Optional, Sequence


class FormulaError(RuntimeError):
    """Base class for every failure raised by the evaluation engine.

    Callers that do not care about the specific kind can catch this single
    type; the subclasses carry the distinguishing details.
    """

    pass


class LexError(FormulaError):
    """Exception raised when the lexer meets a character that cannot start a token.

    Attributes:
        character: The offending character
        position: Zero-based index of the character in the formula text
    """

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Illegal character '{character}' encountered at position {position}"
        )


class ParseError(FormulaError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the token sequence does not conform to the formula grammar.
    Position and token kinds are optional so that unexpected failures wrapped
    by the public ``parse`` entry point can still be reported as parse errors.

    Attributes:
        position: Zero-based source index of the offending token, if known
        expected: Token kinds the parser would have accepted at that point
        found: Kind of the offending token, if known
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expected: Sequence[str] = (),
        found: Optional[str] = None,
    ):
        self.position = position
        self.expected = tuple(expected)
        self.found = found
        super().__init__(message)
