# core/__init__.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Core module public API for formula evaluation components

"""Core components for propositional formula evaluation.

This module provides the semantic half of the engine: evaluating a parsed
formula under an assignment, enumerating its truth table and classifying it
as a tautology, contradiction or contingency. The text-in operations parse
their input on every call and keep no state between calls.

Primary Components:
    evaluate: Evaluate formula text under an assignment
    is_tautology, is_contradiction, is_contingency: Semantic checks
    classify: Full classification as a Classification value
    compute_truth_table: Enumerate the complete truth table
    Engine: Stateless grouping of the above with an enumeration limit
    TruthTable, TruthTableRow: Enumerated table values
    UnboundVariableError, TooManyVariablesError: Evaluation failures

Example:
    >>> from core import evaluate, is_tautology
    >>> evaluate("p OR q", {"p": False, "q": True})
    True
    >>> is_tautology("p -> p")
    True
"""

from .classifier import Classification
from .engine import (
    Engine,
    evaluate,
    is_tautology,
    is_contradiction,
    is_contingency,
    classify,
    compute_truth_table,
)
from .exceptions import TooManyVariablesError, UnboundVariableError
from .truth_table import MAX_VARIABLES, TruthTable, TruthTableRow

__all__ = [
    "Engine",
    "evaluate",
    "is_tautology",
    "is_contradiction",
    "is_contingency",
    "classify",
    "compute_truth_table",
    "Classification",
    "TruthTable",
    "TruthTableRow",
    "MAX_VARIABLES",
    "UnboundVariableError",
    "TooManyVariablesError",
]

__version__ = "1.0.0"
__description__ = "Evaluation, truth table and classification components"
