# tests/core_tests/test_classifier.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Test suite for tautology, contradiction and contingency classification

"""Test suite for formula classification.

Checks the classifier on known formulas, its agreement with full truth-table
enumeration, and the duality properties between the three checks.
"""

import pytest
from core.classifier import (
    Classification,
    classify,
    is_contingency,
    is_contradiction,
    is_tautology,
)
from core.exceptions import TooManyVariablesError
from core.truth_table import enumerate_table
from parser import parse
from parser.ast_nodes import Not
from parser.formula import Formula
from utils.logger import get_logger

SAMPLE_FORMULAS = [
    "p",
    "!p",
    "p -> p",
    "p AND NOT p",
    "p | q",
    "p & q -> p",
    "(p -> q) & p & !q",
    "(p <-> q) <-> (q <-> p)",
    "p -> q -> r",
    "true",
    "false",
    "!true | p",
]


def _negate(formula: Formula) -> Formula:
    return Formula(Not(formula.root), formula.variables)


class TestClassifier:
    """Test cases for the classifier."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_tautologies(self, tautologies):
        """Test known tautologies are classified as such."""
        for text in tautologies:
            formula = parse(text)
            assert is_tautology(formula), text
            assert not is_contradiction(formula), text
            assert not is_contingency(formula), text
            assert classify(formula) is Classification.TAUTOLOGY, text

    def test_contradictions(self, contradictions):
        """Test known contradictions are classified as such."""
        for text in contradictions:
            formula = parse(text)
            assert is_contradiction(formula), text
            assert not is_tautology(formula), text
            assert not is_contingency(formula), text
            assert classify(formula) is Classification.CONTRADICTION, text

    def test_contingencies(self, contingencies):
        """Test known contingencies are classified as such."""
        for text in contingencies:
            formula = parse(text)
            assert is_contingency(formula), text
            assert not is_tautology(formula), text
            assert not is_contradiction(formula), text
            assert classify(formula) is Classification.CONTINGENCY, text

    @pytest.mark.parametrize("text", SAMPLE_FORMULAS)
    def test_agrees_with_full_enumeration(self, text):
        """Test short-circuit answers match the complete truth table."""
        formula = parse(text)
        results = enumerate_table(formula).results()

        assert is_tautology(formula) == all(results)
        assert is_contradiction(formula) == (not any(results))
        assert is_contingency(formula) == (any(results) and not all(results))

    @pytest.mark.parametrize("text", SAMPLE_FORMULAS)
    def test_contradiction_is_negated_tautology(self, text):
        """Test is_contradiction(F) == is_tautology(NOT F)."""
        formula = parse(text)
        assert is_contradiction(formula) == is_tautology(_negate(formula))

    @pytest.mark.parametrize("text", SAMPLE_FORMULAS)
    def test_contingency_is_neither(self, text):
        """Test is_contingency(F) == not tautology and not contradiction."""
        formula = parse(text)
        assert is_contingency(formula) == (
            not is_tautology(formula) and not is_contradiction(formula)
        )

    def test_exactly_one_classification(self):
        """Test every formula falls into exactly one class."""
        for text in SAMPLE_FORMULAS:
            formula = parse(text)
            flags = [is_tautology(formula), is_contradiction(formula), is_contingency(formula)]
            assert flags.count(True) == 1, text

    def test_classification_str(self):
        """Test classifications render as their names."""
        assert str(Classification.TAUTOLOGY) == "TAUTOLOGY"
        assert str(classify(parse("p"))) == "CONTINGENCY"

    def test_variable_limit_applies(self):
        """Test classification refuses formulas beyond the bound."""
        formula = parse("a | b | c")

        with pytest.raises(TooManyVariablesError):
            is_tautology(formula, max_variables=2)
        with pytest.raises(TooManyVariablesError):
            classify(formula, max_variables=2)
