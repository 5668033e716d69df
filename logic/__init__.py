# logic/__init__.py

"""Truth-table evaluation of propositional formulas.

This package provides:
  • BooleanFunction: parsed formula with truth table and canonical forms
  • TruthTable: column-oriented table with SDNF/SKNF and row counts
  • ExpressionTable: deduplicated sub-expression values under one binding
  • AssignmentEnumerator: all 2^n assignments in ascending binary order
"""

from .boolean_function import BooleanFunction
from .enumerator import AssignmentEnumerator
from .expression_table import ExpressionTable
from .truth_table import TruthTable, build_truth_table

__all__ = [
    "BooleanFunction",
    "TruthTable",
    "ExpressionTable",
    "AssignmentEnumerator",
    "build_truth_table",
]
