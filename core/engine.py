# core/engine.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Text-in public operations of the evaluation engine

"""Public entry points taking formula text.

Every operation reparses its input; nothing is cached between calls. The
``Engine`` class groups the same operations around an enumeration limit and
holds no other state, so one instance can be shared freely between callers.
"""

from typing import Mapping

from parser import parse
from utils.logger import get_logger
from . import classifier
from .evaluator import evaluate as evaluate_ast
from .exceptions import UnboundVariableError
from .truth_table import MAX_VARIABLES, TruthTable, enumerate_table


def evaluate(formula_text: str, assignment: Mapping[str, bool]) -> bool:
    """Parse a formula and evaluate it under an assignment.

    Variables are checked in canonical order before evaluation, so the
    reported name is the first missing one in sorted order.

    Raises:
        LexError, ParseError: The text is not a well-formed formula
        UnboundVariableError: ``assignment`` misses a referenced variable
    """
    formula = parse(formula_text)

    for name in formula.variables:
        if name not in assignment:
            raise UnboundVariableError(name)

    result = evaluate_ast(formula.root, assignment)
    get_logger().evaluation_result(formula_text, result)
    return result


def is_tautology(formula_text: str, max_variables: int = MAX_VARIABLES) -> bool:
    """True iff the formula holds under every assignment.

    Raises:
        LexError, ParseError: The text is not a well-formed formula
        TooManyVariablesError: The formula has more than ``max_variables`` variables
    """
    return classifier.is_tautology(parse(formula_text), max_variables)


def is_contradiction(formula_text: str, max_variables: int = MAX_VARIABLES) -> bool:
    """True iff the formula fails under every assignment.

    Raises:
        LexError, ParseError: The text is not a well-formed formula
        TooManyVariablesError: The formula has more than ``max_variables`` variables
    """
    return classifier.is_contradiction(parse(formula_text), max_variables)


def is_contingency(formula_text: str, max_variables: int = MAX_VARIABLES) -> bool:
    """True iff the formula is neither a tautology nor a contradiction.

    Raises:
        LexError, ParseError: The text is not a well-formed formula
        TooManyVariablesError: The formula has more than ``max_variables`` variables
    """
    return classifier.is_contingency(parse(formula_text), max_variables)


def classify(formula_text: str, max_variables: int = MAX_VARIABLES) -> classifier.Classification:
    """Parse a formula and classify it.

    Raises:
        LexError, ParseError: The text is not a well-formed formula
        TooManyVariablesError: The formula has more than ``max_variables`` variables
    """
    return classifier.classify(parse(formula_text), max_variables)


def compute_truth_table(formula_text: str, max_variables: int = MAX_VARIABLES) -> TruthTable:
    """Parse a formula and enumerate its truth table.

    Raises:
        LexError, ParseError: The text is not a well-formed formula
        TooManyVariablesError: The formula has more than ``max_variables`` variables
    """
    return enumerate_table(parse(formula_text), max_variables)


class Engine:
    """Stateless grouping of the engine operations.

    Attributes:
        max_variables: Enumeration bound applied to tables and classification
    """

    def __init__(self, max_variables: int = MAX_VARIABLES):
        if max_variables < 0:
            raise ValueError("max_variables must be non-negative")
        self._max_variables = max_variables

    @property
    def max_variables(self) -> int:
        return self._max_variables

    def evaluate(self, formula_text: str, assignment: Mapping[str, bool]) -> bool:
        return evaluate(formula_text, assignment)

    def is_tautology(self, formula_text: str) -> bool:
        return is_tautology(formula_text, self._max_variables)

    def is_contradiction(self, formula_text: str) -> bool:
        return is_contradiction(formula_text, self._max_variables)

    def is_contingency(self, formula_text: str) -> bool:
        return is_contingency(formula_text, self._max_variables)

    def classify(self, formula_text: str) -> classifier.Classification:
        return classify(formula_text, self._max_variables)

    def compute_truth_table(self, formula_text: str) -> TruthTable:
        return compute_truth_table(formula_text, self._max_variables)

    def __repr__(self) -> str:
        return f"Engine(max_variables={self._max_variables})"
