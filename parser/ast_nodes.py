# parser/ast_nodes.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. Trees are built bottom-up by
the parser, so every child is created before its parent and no node can refer
back to an ancestor.

Node Types:
    Variable: Named propositional variable
    Constant: Boolean constants true and false
    Not, And, Or: Standard Boolean connectives
    Implies, Iff: Material implication and biconditional

All nodes support the visitor design pattern for traversal and evaluation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal.
    """

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch and
    ``__str__`` for a fully parenthesized rendering that parses back to an
    equal tree.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable, a leaf of the tree.

    Attributes:
        name: The identifier string for this variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant ``true`` or ``false``.

    Attributes:
        value: The truth value of the constant
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


@dataclass(frozen=True, slots=True)
class Implies(Expr):
    """Material implication, false only when the antecedent holds and the
    consequent does not.

    Attributes:
        left: Antecedent
        right: Consequent
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    def __str__(self) -> str:
        return f"({self.left} -> {self.right})"


@dataclass(frozen=True, slots=True)
class Iff(Expr):
    """Biconditional, true when both operands have the same truth value.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_iff(self)

    def __str__(self) -> str:
        return f"({self.left} <-> {self.right})"
