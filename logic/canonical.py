# logic/canonical.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Canonical normal forms derived from a finished truth table

"""Canonical normal forms in display notation.

These forms are read straight off a finished truth table and written with
the operator glyphs for people rather than for the parser:

- CDNF joins one term per true row with ``  +  ``; each term joins the
  atomics with `` • `` and negates those that are 0 on the row.
- CCNF joins one term per false row with ``  •  ``; each term joins the
  atomics with `` + `` and negates those that are 1 on the row.
- The binary forms list the matching row indices, ``V(...)`` for CDNF and
  ``Λ(...)`` for CCNF.
- The binary index is the result column read as a big-endian number.
"""

from typing import List

from parser.ast_nodes import AND_GLYPH, NOT_GLYPH, OR_GLYPH
from .truth_table import TruthTable

DISJUNCTION_PREFIX = "V"
CONJUNCTION_PREFIX = "Λ"


def matching_rows(table: TruthTable, disjunctive: bool) -> List[int]:
    """Row indices whose result is 1 (disjunctive) or 0 (conjunctive)."""
    return [index for index, result in enumerate(table.result) if bool(result) == disjunctive]


def canonical_normal_form(table: TruthTable, disjunctive: bool) -> str:
    """Render the CDNF (disjunctive=True) or CCNF (disjunctive=False)."""
    inner = f" {AND_GLYPH} " if disjunctive else f" {OR_GLYPH} "
    outer = f"  {OR_GLYPH}  " if disjunctive else f"  {AND_GLYPH}  "

    terms = []
    for index in matching_rows(table, disjunctive):
        literals = [
            (NOT_GLYPH if bool(table.columns[atomic][index]) != disjunctive else "") + atomic
            for atomic in table.atomics
        ]
        terms.append(inner.join(literals))
    return outer.join(terms)


def canonical_normal_form_binary(table: TruthTable, disjunctive: bool) -> str:
    """Comma-joined row indices of the CDNF or CCNF."""
    return ",".join(str(index) for index in matching_rows(table, disjunctive))


def cdnf_binary(table: TruthTable) -> str:
    return f"{DISJUNCTION_PREFIX}({canonical_normal_form_binary(table, True)})"


def ccnf_binary(table: TruthTable) -> str:
    return f"{CONJUNCTION_PREFIX}({canonical_normal_form_binary(table, False)})"


def binary_index(table: TruthTable) -> int:
    """Sum of the weight column."""
    return sum(table.weight)
