# parser/formula.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Parsed formula: AST root plus canonical variable ordering

"""
Encapsulates a parsed propositional formula.

The variable tuple is sorted and de-duplicated; its order is the canonical
ordering used for assignment validation, truth-table columns and the bit
order of assignment enumeration.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .ast_nodes import Expr


@dataclass(frozen=True)
class Formula:
    """
    Wraps the root of a parsed AST.

    Attributes:
        root: The top-level expression.
        variables: Distinct variable names in lexicographic order.
        source: The text the formula was parsed from.
    """
    root: Expr
    variables: Tuple[str, ...]
    source: str = field(default="", compare=False)

    @property
    def arity(self) -> int:
        """Number of distinct variables referenced by the formula."""
        return len(self.variables)

    def __str__(self) -> str:
        return str(self.root)
