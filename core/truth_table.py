# core/truth_table.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Truth table enumeration over a formula's variables

"""Truth table enumeration for parsed formulas.

Assignments are generated in a fixed canonical order: row ``i`` of a table
over ``n`` variables is ``i`` written as an ``n``-bit binary number, the first
variable (in sorted order) taking the most significant bit. The first row is
therefore all-false and the last all-true.

Table size grows as ``2^n``, so enumeration refuses formulas with more than
``MAX_VARIABLES`` distinct variables before generating any row.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import product
from typing import Dict, Iterator, List, Sequence, Tuple

from parser.formula import Formula
from utils.logger import get_logger
from .evaluator import evaluate
from .exceptions import TooManyVariablesError

# 2^20 = 1,048,576 rows
MAX_VARIABLES = 20


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment and the formula's value under it.

    Attributes:
        variables: Variable names, in canonical order
        values: Truth value of each variable, aligned with ``variables``
        result: Value of the formula under this assignment
    """

    variables: Tuple[str, ...]
    values: Tuple[bool, ...]
    result: bool

    @property
    def assignment(self) -> Dict[str, bool]:
        """This row's assignment as a name to value mapping."""
        return dict(zip(self.variables, self.values))


@dataclass(frozen=True)
class TruthTable:
    """Ordered truth table of a formula.

    Attributes:
        variables: Column names, in canonical order
        rows: One row per assignment, in canonical enumeration order
    """

    variables: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[TruthTableRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> TruthTableRow:
        return self.rows[index]

    def results(self) -> List[bool]:
        """Result column, top to bottom."""
        return [row.result for row in self.rows]

    def to_rows(self) -> List[List[bool]]:
        """Plain nested lists: the assignment values followed by the result."""
        return [list(row.values) + [row.result] for row in self.rows]

    def to_dicts(self, result_key: str = "result") -> List[Dict[str, bool]]:
        """One dict per row mapping each variable, and ``result_key``, to a value.

        Raises:
            ValueError: ``result_key`` collides with a variable name
        """
        if result_key in self.variables:
            raise ValueError(f"Result key '{result_key}' is also a variable name")

        records = []
        for row in self.rows:
            record = row.assignment
            record[result_key] = row.result
            records.append(record)
        return records

    def format(
        self,
        true_symbol: str = "T",
        false_symbol: str = "F",
        result_header: str = "result",
    ) -> str:
        """Render the table as aligned text with a header line.

        Args:
            true_symbol: Cell text for true
            false_symbol: Cell text for false
            result_header: Header of the result column

        Returns:
            Multi-line string, one line per row after the header and separator
        """
        headers = list(self.variables) + [result_header]
        cells = [
            [true_symbol if value else false_symbol for value in line]
            for line in self.to_rows()
        ]

        widths = [
            max([len(header)] + [len(line[col]) for line in cells])
            for col, header in enumerate(headers)
        ]

        def render(items: Sequence[str]) -> str:
            return " | ".join(item.ljust(width) for item, width in zip(items, widths)).rstrip()

        lines = [render(headers), "-+-".join("-" * width for width in widths)]
        lines.extend(render(line) for line in cells)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


def check_variable_limit(formula: Formula, max_variables: int = MAX_VARIABLES):
    """Refuse formulas whose assignment space exceeds the enumeration bound.

    Raises:
        TooManyVariablesError: ``formula`` has more than ``max_variables`` variables
    """
    if formula.arity > max_variables:
        get_logger().debug(
            f"Refusing to enumerate {formula.arity} variables (limit {max_variables})"
        )
        raise TooManyVariablesError(formula.arity, max_variables)


def iter_assignments(variables: Sequence[str]) -> Iterator[Tuple[bool, ...]]:
    """Iterate over every assignment to ``variables`` in canonical order.

    Each assignment is a tuple of values aligned with ``variables``; the first
    variable takes the most significant bit of the row index. Zero variables
    give a single empty assignment.
    """
    # product() varies the last position fastest: the first variable is the MSB
    return product((False, True), repeat=len(variables))


def enumerate_table(formula: Formula, max_variables: int = MAX_VARIABLES) -> TruthTable:
    """Build the full truth table of a formula.

    Args:
        formula: Parsed formula
        max_variables: Largest variable count that will be enumerated

    Returns:
        TruthTable with ``2^n`` rows in canonical order

    Raises:
        TooManyVariablesError: Variable count exceeds ``max_variables``
    """
    check_variable_limit(formula, max_variables)

    variables = formula.variables
    rows = []
    for values in iter_assignments(variables):
        result = evaluate(formula.root, dict(zip(variables, values)))
        rows.append(TruthTableRow(variables, values, result))

    get_logger().table_enumerated(len(variables), len(rows))
    return TruthTable(variables, tuple(rows))
