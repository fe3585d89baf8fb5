# tests/parser_tests/test_parser_basic.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Test suite for basic parser functionality and round-trip integrity

"""Test suite for basic parser functionality and Formula integrity.

This module tests that valid formulas parse into the expected node types,
that the variable list is sorted and de-duplicated, and that the string
rendering of an AST parses back into an equal tree.
"""

import pytest
from parser import parse, parse_tokens, tokenize, Formula
from parser.ast_nodes import Variable, Constant, Not, And, Or, Implies, Iff
from parser.grammar import MAX_NESTING_DEPTH
from utils.logger import get_logger


class TestParserBasic:
    """Test cases for basic parser functionality and round-trip integrity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_FORMULAS = [
        # Basic variables and operators
        "p",
        "!q",
        "p & q",
        "p | r",
        "p -> q",
        "p <-> q",
        # Precedence and associativity
        "p & q | r",
        "p | q & r",
        "a & b & c",
        "a | b | c",
        "a -> b -> c",
        "a <-> b <-> c",
        "!!!p",
        # Parentheses and grouping
        "p & (q | r)",
        "!(p & q)",
        "((p))",
        "(p -> q) -> r",
        # Keyword spellings
        "NOT p AND q OR r",
        "p IMPLIES q IFF NOT q IMPLIES NOT p",
        # Constants
        "true",
        "false",
        "!false",
        "(p | true) & !false",
        # Whitespace handling
        " p\n& \tq ",
        # Longer identifiers
        "rain -> wet_ground",
        "x1 & x2 & x10",
    ]

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_round_trip_ast_integrity(self, formula):
        """Test that parse -> stringify -> parse preserves the Formula.

        Args:
            formula: Valid formula string
        """
        original = parse(formula)
        stringified = str(original)
        reparsed = parse(stringified)

        self.logger.debug(f"Original: {formula!r} Stringified: {stringified!r}")

        assert original == reparsed, (
            f"AST structure changed during round-trip:\n"
            f"Original: {formula!r}\n"
            f"Stringified: {stringified!r}"
        )

    @pytest.mark.parametrize(
        "formula, expected_type",
        [
            ("p", Variable),
            ("true", Constant),
            ("!p", Not),
            ("p & q", And),
            ("p | q", Or),
            ("p -> q", Implies),
            ("p <-> q", Iff),
            ("(p)", Variable),
        ],
    )
    def test_root_node_types(self, formula, expected_type):
        """Test each connective produces its node type at the root."""
        assert type(parse(formula).root) is expected_type

    def test_parse_returns_formula(self):
        """Test parse wraps the AST, variables and source text."""
        formula = parse("q AND p")

        assert isinstance(formula, Formula)
        assert formula.root == And(Variable("q"), Variable("p"))
        assert formula.variables == ("p", "q")
        assert formula.source == "q AND p"
        assert formula.arity == 2

    @pytest.mark.parametrize(
        "formula, expected_variables",
        [
            ("p", ("p",)),
            ("p & p & p", ("p",)),
            ("z | a | m", ("a", "m", "z")),
            ("(b -> a) <-> (a -> b)", ("a", "b")),
            ("true & false", ()),
            ("!true", ()),
            # Lexicographic by code point: upper case sorts first
            ("q | Q | p", ("Q", "p", "q")),
            ("x10 & x2 & x1", ("x1", "x10", "x2")),
        ],
    )
    def test_variable_collection(self, formula, expected_variables):
        """Test variables are sorted and de-duplicated across every leaf."""
        assert parse(formula).variables == expected_variables

    def test_deeply_nested_variables_are_collected(self):
        """Test variables deep inside nested groups are not missed."""
        formula = parse("a & (b | (c -> (d <-> !(e & f))))")
        assert formula.variables == ("a", "b", "c", "d", "e", "f")

    def test_constants(self):
        """Test both spellings of the constants."""
        assert parse("true").root == Constant(True)
        assert parse("TRUE").root == Constant(True)
        assert parse("false").root == Constant(False)
        assert parse("FALSE").root == Constant(False)

    def test_parse_tokens_matches_parse(self):
        """Test the two-stage pipeline gives the same Formula as parse."""
        text = "p -> (q | !r)"
        assert parse_tokens(tokenize(text), text) == parse(text)

    def test_spellings_are_interchangeable(self):
        """Test symbolic, doubled and keyword spellings build the same tree."""
        symbolic = parse("!p & q | r -> s <-> t")
        doubled = parse("~p && q || r => s == t")
        keywords = parse("NOT p AND q OR r IMPLIES s IFF t")
        lower = parse("not p and q or r implies s iff t")

        assert symbolic == doubled == keywords == lower

    def test_ast_nodes_are_hashable_and_immutable(self):
        """Test AST nodes compare structurally and cannot be changed."""
        first = parse("p & q").root
        second = parse("(p) AND (q)").root

        assert first == second
        assert hash(first) == hash(second)
        with pytest.raises(AttributeError):
            first.left = Variable("r")

    def test_string_rendering(self):
        """Test the fully parenthesized symbolic rendering."""
        formula = parse("NOT p AND q OR r IMPLIES s IFF true")
        assert str(formula) == "((((!p & q) | r) -> s) <-> true)"

    def test_long_negation_run(self):
        """Test 1200 prefix negations parse into a chain of Not nodes."""
        node = parse("!" * 1200 + "p").root

        depth = 0
        while isinstance(node, Not):
            node = node.operand
            depth += 1

        assert depth == 1200
        assert isinstance(node, Variable) and node.name == "p"

    def test_long_implication_chain_folds_right(self):
        """Test a long implication chain nests on the right operand."""
        node = parse(" -> ".join(f"v{i}" for i in range(1500))).root

        for i in range(1499):
            assert isinstance(node, Implies)
            assert node.left.name == f"v{i}"
            node = node.right

        assert node.name == "v1499"

    def test_long_conjunction_chain_folds_left(self):
        """Test a 2000-term conjunction nests on the left operand."""
        formula = parse(" & ".join(f"v{i}" for i in range(2000)))
        node = formula.root

        for i in range(1999, 0, -1):
            assert isinstance(node, And)
            assert node.right.name == f"v{i}"
            node = node.left

        assert node.name == "v0"
        assert formula.arity == 2000

    def test_nesting_up_to_the_limit(self):
        """Test parentheses nested to the maximum depth are accepted."""
        text = "(" * MAX_NESTING_DEPTH + "p" + ")" * MAX_NESTING_DEPTH
        assert parse(text).root == Variable("p")
