# core/evaluator.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Boolean evaluation of formula ASTs under a variable assignment

"""Evaluation of propositional ASTs.

The evaluator walks the tree in post-order with an explicit stack, so the
depth of a formula is bounded by memory rather than by the interpreter's
recursion limit. Each node is dispatched to its visitor method once all of
its children have been evaluated; the visit methods combine operand values
taken from a value stack.

Both operands of every binary connective are always evaluated, so a missing
variable is reported no matter what the other operand evaluates to; the
result is the same as with short-circuit evaluation.
"""

from typing import List, Mapping, Tuple

from parser.ast_nodes import Expr, Variable, Constant, Not, And, Or, Implies, Iff
from .exceptions import UnboundVariableError


def _children(node: Expr) -> Tuple[Expr, ...]:
    if isinstance(node, Not):
        return (node.operand,)
    if isinstance(node, (And, Or, Implies, Iff)):
        return (node.left, node.right)
    return ()


class Evaluator:
    """Visitor computing the truth value of an AST.

    Attributes:
        assignment: Mapping from variable name to truth value
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment
        self._values: List[bool] = []

    def evaluate(self, node: Expr) -> bool:
        """Evaluate ``node`` without recursing on the Python call stack."""
        self._values = []
        pending = [(node, False)]

        while pending:
            current, expanded = pending.pop()
            children = _children(current)

            if expanded or not children:
                current.accept(self)
                continue

            pending.append((current, True))
            # Right pushed first so the left operand is evaluated first
            for child in reversed(children):
                pending.append((child, False))

        return self._values.pop()

    def _operands(self) -> Tuple[bool, bool]:
        right = self._values.pop()
        left = self._values.pop()
        return left, right

    def visit_variable(self, n: Variable):
        try:
            value = self.assignment[n.name]
        except KeyError:
            raise UnboundVariableError(n.name) from None

        if not isinstance(value, bool):
            raise TypeError(
                f"Value for variable '{n.name}' must be a bool, "
                f"got {type(value).__name__}"
            )
        self._values.append(value)

    def visit_constant(self, n: Constant):
        self._values.append(n.value)

    def visit_not(self, n: Not):
        self._values.append(not self._values.pop())

    def visit_and(self, n: And):
        left, right = self._operands()
        self._values.append(left and right)

    def visit_or(self, n: Or):
        left, right = self._operands()
        self._values.append(left or right)

    def visit_implies(self, n: Implies):
        left, right = self._operands()
        self._values.append((not left) or right)

    def visit_iff(self, n: Iff):
        left, right = self._operands()
        self._values.append(left == right)


def evaluate(ast: Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate an AST under an assignment.

    Args:
        ast: Root of the expression tree
        assignment: Truth value for every variable referenced by ``ast``;
            extra entries are ignored

    Returns:
        Truth value of the expression

    Raises:
        UnboundVariableError: A variable leaf has no entry in ``assignment``
        TypeError: An assigned value is not a bool
    """
    return Evaluator(assignment).evaluate(ast)
