# core/exceptions.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Exceptions raised while evaluating and enumerating formulas

"""Evaluation-time failures of the engine.

Both exceptions extend ``FormulaError`` so that a caller can handle every
engine failure through one type while still being able to tell them apart.
"""

from parser.exceptions import FormulaError


class UnboundVariableError(FormulaError):
    """Raised when an assignment has no value for a variable the formula uses.

    Attributes:
        name: The missing variable name
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No value assigned to variable '{name}'")


class TooManyVariablesError(FormulaError):
    """Raised before enumeration when a formula has more variables than allowed.

    Attributes:
        count: Number of distinct variables in the formula
        limit: Maximum number of variables the enumeration accepts
    """

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Formula has {count} distinct variables; at most {limit} can be "
            f"enumerated ({2 ** limit} rows)"
        )
