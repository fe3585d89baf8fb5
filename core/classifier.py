# core/classifier.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Tautology, contradiction and contingency classification

"""Semantic classification of formulas.

Classification walks the canonical assignments lazily and stops as soon as the
answer is known: a tautology check ends at the first false row, a
contradiction check at the first true row, and a full classification once
both values have been seen. The answers always agree with inspecting the
complete truth table.
"""

from enum import Enum, auto

from parser.formula import Formula
from utils.logger import get_logger
from .evaluator import evaluate
from .truth_table import MAX_VARIABLES, check_variable_limit, iter_assignments


class Classification(Enum):
    """Semantic status of a propositional formula."""

    TAUTOLOGY = auto()  # true under every assignment
    CONTRADICTION = auto()  # false under every assignment
    CONTINGENCY = auto()  # true under some, false under others

    def __str__(self) -> str:
        return self.name


def _find_result(formula: Formula, wanted: bool, max_variables: int) -> bool:
    """Return True if some assignment makes the formula evaluate to ``wanted``."""
    check_variable_limit(formula, max_variables)

    variables = formula.variables
    for values in iter_assignments(variables):
        if evaluate(formula.root, dict(zip(variables, values))) is wanted:
            return True
    return False


def is_tautology(formula: Formula, max_variables: int = MAX_VARIABLES) -> bool:
    """True iff no assignment makes the formula false."""
    return not _find_result(formula, False, max_variables)


def is_contradiction(formula: Formula, max_variables: int = MAX_VARIABLES) -> bool:
    """True iff no assignment makes the formula true."""
    return not _find_result(formula, True, max_variables)


def is_contingency(formula: Formula, max_variables: int = MAX_VARIABLES) -> bool:
    """True iff the formula is true under some assignment and false under another."""
    return classify(formula, max_variables) is Classification.CONTINGENCY


def classify(formula: Formula, max_variables: int = MAX_VARIABLES) -> Classification:
    """Classify a formula, stopping once both truth values have been seen.

    Args:
        formula: Parsed formula
        max_variables: Largest variable count that will be traversed

    Returns:
        The formula's Classification

    Raises:
        TooManyVariablesError: Variable count exceeds ``max_variables``
    """
    check_variable_limit(formula, max_variables)

    seen_true = seen_false = False
    checked = 0
    variables = formula.variables

    for values in iter_assignments(variables):
        checked += 1
        if evaluate(formula.root, dict(zip(variables, values))):
            seen_true = True
        else:
            seen_false = True
        if seen_true and seen_false:
            break

    if seen_true and seen_false:
        result = Classification.CONTINGENCY
    elif seen_true:
        result = Classification.TAUTOLOGY
    else:
        result = Classification.CONTRADICTION

    get_logger().classification_result(formula.source or "<formula>", str(result), checked)
    return result
