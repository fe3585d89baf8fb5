# parser/__init__.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Formula tokenization and parsing components for propositional logic

"""Propositional formula parsing for the evaluation engine.

This module turns formula text into a ``Formula``: an immutable Abstract
Syntax Tree plus the sorted, de-duplicated list of variable names it
references. Tokenization is handled by an SLY lexer and structure by a
precedence-aware recursive descent parser.

Core Functions:
    tokenize: Converts formula text into a token list terminated by END
    parse_tokens: Builds a Formula from a token list
    parse: Complete text to Formula pipeline

Supported Logic:
    - Propositional variables and the constants true / false
    - Negation, conjunction, disjunction
    - Material implication (right-associative)
    - Biconditional (left-associative, lowest precedence)

Example:
    >>> from parser import parse
    >>> formula = parse("p AND q OR r")
    >>> formula.variables
    ('p', 'q', 'r')
"""

from .exceptions import FormulaError, LexError, ParseError
from .formula import Formula
from .grammar import parse_tokens
from .lexer import Token, tokenize
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse formula text into a Formula.

    A fresh lexer and parser are used for each invocation, so parsing holds
    no state between calls.

    Args:
        source: Formula text to parse

    Returns:
        Formula holding the AST root and the canonical variable ordering

    Raises:
        LexError: Formula contains a character that cannot begin a token
        ParseError: Formula syntax is malformed

    Example:
        >>> parse("p -> q").root
        Implies(left=Variable(name='p'), right=Variable(name='q'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        return parse_tokens(tokenize(source), source)

    except FormulaError:
        logger.debug("Error encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "parse_tokens",
    "tokenize",
    "Formula",
    "Token",
    "FormulaError",
    "LexError",
    "ParseError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula tokenization and parsing components"
