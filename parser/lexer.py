# parser/lexer.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional logic formulas, breaking
input strings into tokens for parser consumption. Both symbolic and keyword
spellings of every connective are accepted; the two families are disjoint
token patterns, so mixing them within one formula is never ambiguous.

Supported Tokens:
- NOT: !, ~, NOT, not
- AND: &, &&, AND, and
- OR: |, ||, OR, or
- IMPLIES: ->, =>, IMPLIES, implies
- IFF: <->, <=>, ==, IFF, iff
- Constants: true, TRUE, false, FALSE
- Parentheses: (, )
- Identifiers: a letter followed by letters, digits or underscores
- Whitespace: ignored during tokenization
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from sly import Lexer

from .exceptions import LexError
from utils.logger import get_logger

# Kind of the sentinel token appended after the last real token
END = "END"


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable lexical unit handed to the parser.

    Attributes:
        kind: Token kind (ID, AND, OR, NOT, IMPLIES, IFF, TRUE, FALSE,
            LPAREN, RPAREN or END)
        position: Zero-based index of the token's first character
        name: Variable name for ID tokens, None otherwise
    """

    kind: str
    position: int
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.kind == "ID":
            return f"ID({self.name})@{self.position}"
        return f"{self.kind}@{self.position}"


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Multi-character operators are declared before their prefixes because SLY
    tries patterns in definition order.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "ID",
        "TRUE",
        "FALSE",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    IFF = r"<->|<=>|=="
    IMPLIES = r"->|=>"
    AND = r"&&|&"
    OR = r"\|\||\|"
    NOT = r"!|~"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z][a-zA-Z0-9_]*"

    # Keyword spellings: reassign token types for reserved words
    ID["NOT"] = "NOT"
    ID["not"] = "NOT"
    ID["AND"] = "AND"
    ID["and"] = "AND"
    ID["OR"] = "OR"
    ID["or"] = "OR"
    ID["IMPLIES"] = "IMPLIES"
    ID["implies"] = "IMPLIES"
    ID["IFF"] = "IFF"
    ID["iff"] = "IFF"
    ID["true"] = "TRUE"
    ID["TRUE"] = "TRUE"
    ID["false"] = "FALSE"
    ID["FALSE"] = "FALSE"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            LexError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise LexError(illegal_char, error_pos)


def tokenize(text: str) -> List[Token]:
    """Convert formula text into a list of tokens terminated by END.

    Args:
        text: Formula source text

    Returns:
        Token list; the final END token sits at position ``len(text)``

    Raises:
        LexError: At the first character that cannot begin a token
    """
    logger = get_logger()

    result = []
    for tok in FormulaLexer().tokenize(text):
        name = tok.value if tok.type == "ID" else None
        result.append(Token(tok.type, tok.index, name))
    result.append(Token(END, len(text)))

    logger.debug(f"Tokenized into {len(result)} tokens: {' '.join(map(str, result))}")
    return result
