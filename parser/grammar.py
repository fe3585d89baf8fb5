# parser/grammar.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Recursive descent grammar and parser for propositional formulas

"""Propositional formula grammar implemented by recursive descent.

This module defines the grammar rules and parsing logic for propositional
logic formulas. The parser consumes the token list produced by the lexer,
builds an Abstract Syntax Tree and records every variable leaf it creates.

Grammar (lowest to highest precedence):
    iff     := implies (IFF implies)*
    implies := or (IMPLIES or)*          folded to the right
    or      := and (OR and)*
    and     := not (AND not)*
    not     := NOT* atom
    atom    := ID | TRUE | FALSE | LPAREN iff RPAREN

Associativity:
- IFF ('<->'): left-associative
- IMPLIES ('->'): right-associative, so ``p -> q -> r`` is ``p -> (q -> r)``
- OR ('|') and AND ('&'): left-associative
- NOT ('!'): prefix, may be repeated

Chains of operators and negations are parsed with loops; only parenthesized
groups recurse, and their nesting is limited to ``MAX_NESTING_DEPTH`` so that
every rejected formula is reported as a ParseError at a source position.
"""

from typing import List, Sequence, Set

from .ast_nodes import Expr, Variable, Constant, Not, And, Or, Implies, Iff
from .exceptions import ParseError
from .formula import Formula
from .lexer import END, Token
from utils.logger import get_logger

# Token kinds that may begin an operand
OPERAND_START = ("ID", "TRUE", "FALSE", "NOT", "LPAREN")

# Token kinds that may follow a complete operand
BINARY_OPERATORS = ("AND", "OR", "IMPLIES", "IFF")

# Deepest parenthesized group accepted; each level costs a few stack frames
MAX_NESTING_DEPTH = 100


class _FormulaParser:
    """Recursive descent parser over a token list.

    Each grammar rule is one method; precedence falls out of which rule
    calls which. A parser instance is used for a single token list.

    Attributes:
        tokens: Token list terminated by END
        variables: Names of every Variable leaf built so far
    """

    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].kind != END:
            raise ParseError("Token stream must be terminated by END")

        self.tokens: List[Token] = list(tokens)
        self.variables: Set[str] = set()
        self._index = 0
        self._depth = 0

    def parse(self, source: str = "") -> Formula:
        """Parse the whole token list into a Formula.

        Args:
            source: Original formula text, kept on the Formula for diagnostics

        Returns:
            Formula with the AST root and sorted variable names

        Raises:
            ParseError: On empty input or the first grammar violation
        """
        first = self._peek()
        if first.kind == END:
            raise ParseError(
                "Input formula is empty.",
                position=first.position,
                expected=OPERAND_START,
                found=END,
            )

        root = self._iff()

        if self._peek().kind != END:
            self._fail(BINARY_OPERATORS + (END,))

        return Formula(root, tuple(sorted(self.variables)), source)

    # Token helpers
    def _peek(self) -> Token:
        return self.tokens[self._index]

    def _advance(self) -> Token:
        token = self.tokens[self._index]
        if token.kind != END:
            self._index += 1
        return token

    def _expect(self, kind: str, expected: Sequence[str]) -> Token:
        if self._peek().kind != kind:
            self._fail(expected)
        return self._advance()

    def _fail(self, expected: Sequence[str]):
        token = self._peek()
        choices = ", ".join(expected)

        if token.kind == END:
            message = (
                f"Unexpected end of formula at position {token.position}: "
                f"expected one of {choices}"
            )
        else:
            shown = token.name if token.kind == "ID" else token.kind
            message = (
                f"Syntax error near '{shown}' (type: {token.kind}) at position "
                f"{token.position}: expected one of {choices}"
            )

        raise ParseError(
            message, position=token.position, expected=expected, found=token.kind
        )

    # Grammar rules
    def _iff(self) -> Expr:
        left = self._implies()
        while self._peek().kind == "IFF":
            self._advance()
            left = Iff(left, self._implies())
        return left

    def _implies(self) -> Expr:
        operands = [self._or()]
        while self._peek().kind == "IMPLIES":
            self._advance()
            operands.append(self._or())

        result = operands.pop()
        while operands:
            result = Implies(operands.pop(), result)
        return result

    def _or(self) -> Expr:
        left = self._and()
        while self._peek().kind == "OR":
            self._advance()
            left = Or(left, self._and())
        return left

    def _and(self) -> Expr:
        left = self._not()
        while self._peek().kind == "AND":
            self._advance()
            left = And(left, self._not())
        return left

    def _not(self) -> Expr:
        negations = 0
        while self._peek().kind == "NOT":
            self._advance()
            negations += 1

        node = self._atom()
        for _ in range(negations):
            node = Not(node)
        return node

    def _atom(self) -> Expr:
        token = self._peek()

        if token.kind == "ID":
            self._advance()
            self.variables.add(token.name)
            return Variable(token.name)

        if token.kind == "TRUE":
            self._advance()
            return Constant(True)

        if token.kind == "FALSE":
            self._advance()
            return Constant(False)

        if token.kind == "LPAREN":
            if self._depth >= MAX_NESTING_DEPTH:
                raise ParseError(
                    f"Parentheses nested deeper than {MAX_NESTING_DEPTH} levels "
                    f"at position {token.position}",
                    position=token.position,
                    expected=("ID", "TRUE", "FALSE", "NOT"),
                    found=token.kind,
                )

            self._advance()
            self._depth += 1
            inner = self._iff()
            self._expect("RPAREN", BINARY_OPERATORS + ("RPAREN",))
            self._depth -= 1
            return inner

        self._fail(OPERAND_START)


def parse_tokens(tokens: Sequence[Token], source: str = "") -> Formula:
    """Parse a token list into a Formula.

    Args:
        tokens: Tokens produced by ``tokenize``, terminated by END
        source: Original formula text

    Returns:
        Parsed Formula

    Raises:
        ParseError: On the first structural violation
    """
    logger = get_logger()

    formula = _FormulaParser(tokens).parse(source)
    logger.formula_parsed(source, formula.variables)
    return formula
