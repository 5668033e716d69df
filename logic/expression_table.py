# logic/expression_table.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Variable/value table built by interpreting a formula tree under a binding

"""Expression table construction.

The expression table maps the canonical key of every atomic and every
bracketed sub-expression to its current value. Keys are registered in the
order a left-to-right parse completes them, so atomics precede the
expressions that use them and the root expression is always the last entry.

Each table is built from scratch for one binding. Building one per
assignment keeps the rows of a truth table independent of each other.
"""

from typing import Dict, Mapping, Optional

from parser import ast_nodes as ast
from utils.logger import get_logger
from .evaluator import TruthValue, solve_operation, solve_unary_operation


class ExpressionTable(ast.Visitor):
    """Deduplicated mapping from sub-expression key to value.

    Attributes:
        values: Key to 0/1, or to the key itself while symbolic
        result: Value of the root expression
    """

    def __init__(self, bindings: Optional[Mapping[str, int]] = None, atomics_only: bool = False):
        self._bindings: Dict[str, int] = _checked_bindings(bindings or {})
        self._atomics_only = atomics_only
        self.values: Dict[str, TruthValue] = {}
        self.result: Optional[TruthValue] = None

    @classmethod
    def evaluate(
        cls,
        root: ast.Expr,
        bindings: Optional[Mapping[str, int]] = None,
        atomics_only: bool = False,
    ) -> "ExpressionTable":
        """Build the table for root under bindings.

        Args:
            root: Root node of the formula
            bindings: Atomic name to 0/1; unbound atomics stay symbolic
            atomics_only: Register atomic names only, not sub-expressions

        Returns:
            Populated ExpressionTable

        Raises:
            ValueError: A binding is not 0 or 1
        """
        table = cls(bindings, atomics_only)
        table.result = table._visit(root)
        return table

    @property
    def root_key(self) -> Optional[str]:
        """Key of the last registered entry."""
        return next(reversed(self.values), None)

    def is_complete(self) -> bool:
        """Return True if every registered value is concrete."""
        return all(isinstance(v, int) for v in self.values.values())

    def _visit(self, node: ast.Expr) -> TruthValue:
        # Identical sub-expressions share one entry and are walked once
        if node.key in self.values:
            return self.values[node.key]
        return node.accept(self)

    def _register(self, key: str, value: TruthValue) -> TruthValue:
        if not self._atomics_only:
            self.values[key] = value
        return value

    def visit_atomic(self, n: ast.Atomic) -> TruthValue:
        value = self._bindings.get(n.name, n.name)
        self.values[n.name] = value
        return value

    def visit_constant(self, n: ast.Constant) -> int:
        return n.value

    def visit_not(self, n: ast.Not) -> TruthValue:
        operand = self._visit(n.operand)
        solved = solve_unary_operation(n.symbol, operand)
        return self._register(n.key, n.key if solved is None else solved)

    def _visit_binary(self, n: ast.BinaryOp) -> TruthValue:
        first = self._visit(n.left)
        second = self._visit(n.right)
        solved = solve_operation(first, n.symbol, second)
        return self._register(n.key, n.key if solved is None else solved)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_implies = _visit_binary
    visit_equiv = _visit_binary


def _checked_bindings(bindings: Mapping[str, int]) -> Dict[str, int]:
    checked = {}
    for name, value in bindings.items():
        if value not in (0, 1):
            raise ValueError(f"Binding for '{name}' must be 0 or 1, got {value!r}")
        checked[name] = int(value)
    get_logger().debug(f"Bindings: {checked}")
    return checked
