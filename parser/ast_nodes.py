# parser/ast_nodes.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct
tree representations of fully-parenthesized propositional formulas over
named variables and the constants 0 and 1.

Node Types:
    Atomic: Named propositional variables such as ``x1``
    Constant: The literals 0 and 1
    Not: Unary negation
    And, Or, Implies, Equiv: Binary connectives

Every node has a canonical ``key``: the fully-parenthesized text the node
stands for, written with the operator glyphs and no whitespace. Two
occurrences of the same sub-expression share one key, which is what the
expression table deduplicates on.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Protocol, Type

NOT_GLYPH = "¬"
AND_GLYPH = "•"
OR_GLYPH = "+"
IMPLIES_GLYPH = ">"
EQUIV_GLYPH = "~"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_atomic(self, n: Atomic): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_equiv(self, n: Equiv): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Concrete node types implement ``accept`` for visitor dispatch and
    ``key`` for their canonical text.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def key(self) -> str:
        """Canonical fully-parenthesized text of this node."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class Atomic(Expr):
    """Named propositional variable.

    A name is a run of letters followed by an optional run of digits,
    e.g. ``x``, ``x1`` or ``ab12``.

    Attributes:
        name: The full variable name
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_atomic(self)

    @property
    def key(self) -> str:
        return self.name

    @property
    def letters(self) -> str:
        """Letter part of the name."""
        return self.name.rstrip("0123456789")

    @property
    def suffix(self) -> Optional[int]:
        """Numeric suffix of the name, or None when there is none."""
        digits = self.name[len(self.letters):]
        return int(digits) if digits else None


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant 0 or 1.

    Attributes:
        value: 0 or 1
    """

    value: int

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    @property
    def key(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr
    symbol: ClassVar[str] = NOT_GLYPH

    def accept(self, v: Visitor):
        return v.visit_not(self)

    @property
    def key(self) -> str:
        return f"({NOT_GLYPH}{self.operand.key})"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Common shape of the binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
        symbol: Operator glyph, fixed per subclass
    """

    left: Expr
    right: Expr
    symbol: ClassVar[str] = ""

    @property
    def key(self) -> str:
        return f"({self.left.key}{self.symbol}{self.right.key})"


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Conjunction, written ``•``."""

    symbol: ClassVar[str] = AND_GLYPH

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Disjunction, written ``+``."""

    symbol: ClassVar[str] = OR_GLYPH

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryOp):
    """Material implication, written ``>``."""

    symbol: ClassVar[str] = IMPLIES_GLYPH

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Equiv(BinaryOp):
    """Equivalence, written ``~``."""

    symbol: ClassVar[str] = EQUIV_GLYPH

    def accept(self, v: Visitor):
        return v.visit_equiv(self)


# Glyph to node class, used by the grammar when building binary nodes
BINARY_OPERATORS: Dict[str, Type[BinaryOp]] = {
    cls.symbol: cls for cls in (And, Or, Implies, Equiv)
}
