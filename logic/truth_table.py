# logic/truth_table.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Truth table construction with SDNF/SKNF accumulation

"""Truth table construction.

The table builder drives one independent evaluation of the formula per
assignment and collects, column by column:

- the value of each chosen key (atomics, or every registered sub-expression
  in full mode) per row,
- ``result``: the root value per row,
- ``weight``: ``result[i] * 2**(rows - i - 1)``, i.e. the result column read
  as a big-endian binary number, most significant bit first.

While the rows are produced it also folds the minterms of true rows into
the SDNF and the maxterms of false rows into the SKNF. A literal is the
atomic itself when its row value equals the row result, and its negation
otherwise, so a minterm is 1 exactly on its row and a maxterm is 0 exactly
on its row.
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, Iterator, List, Optional, Sequence

from parser.ast_nodes import AND_GLYPH, NOT_GLYPH, OR_GLYPH, Expr
from utils.logger import get_logger
from .enumerator import AssignmentEnumerator
from .evaluator import TruthValue
from .expression_table import ExpressionTable

RESULT_COLUMN = "result"
WEIGHT_COLUMN = "weight"


@dataclass
class TruthTable:
    """Column-oriented truth table.

    Attributes:
        atomics: Sorted atomic names; the first is the most significant bit
        columns: Column key to per-row values, ending with result and weight
        sdnf: Folded disjunction of minterms, empty when no row is true
        sknf: Folded conjunction of maxterms, empty when no row is false
        positive: Number of true rows
        negative: Number of false rows
        total: Number of rows
    """

    atomics: List[str]
    columns: Dict[str, List[TruthValue]] = field(default_factory=dict)
    sdnf: str = ""
    sknf: str = ""
    positive: int = 0
    negative: int = 0
    total: int = 0

    @property
    def result(self) -> List[int]:
        return self.columns[RESULT_COLUMN]

    @property
    def weight(self) -> List[int]:
        return self.columns[WEIGHT_COLUMN]

    def __len__(self) -> int:
        return self.total

    def rows(self) -> Iterator[Dict[str, TruthValue]]:
        """Yield each row as a column-key to value mapping."""
        for index in range(self.total):
            yield {key: values[index] for key, values in self.columns.items()}


def fold(terms: Sequence[str], glyph: str) -> str:
    """Left-fold terms into a fully-parenthesized chain.

    ``fold(["a", "b", "c"], "+")`` gives ``((a+b)+c)``; a single term is
    returned unchanged and no terms give the empty string.
    """
    return reduce(lambda acc, term: f"({acc}{glyph}{term})", terms) if terms else ""


def weights(result: Sequence[int]) -> List[int]:
    """Weight of each result bit, most significant bit first."""
    length = len(result)
    return [value * 2 ** (length - index - 1) for index, value in enumerate(result)]


def build_truth_table(
    root: Expr,
    atomics: Sequence[str],
    keys: Optional[Sequence[str]] = None,
) -> TruthTable:
    """Evaluate root under every assignment to atomics.

    Args:
        root: Root node of the formula
        atomics: Atomic names in bit order
        keys: Columns to record besides result and weight; defaults to atomics

    Returns:
        Populated TruthTable
    """
    logger = get_logger()
    enumerator = AssignmentEnumerator(atomics)
    source = list(keys) if keys else list(enumerator.atomics)

    logger.debug(f"Building truth table over {enumerator.atomics} ({len(enumerator)} rows)")

    table = TruthTable(atomics=list(enumerator.atomics))
    table.columns = {key: [] for key in source}
    table.columns[RESULT_COLUMN] = []
    minterms: List[str] = []
    maxterms: List[str] = []

    for bindings in enumerator.bindings():
        row = ExpressionTable.evaluate(root, bindings)
        result = row.result

        for key in source:
            table.columns[key].append(row.values[key])
        table.columns[RESULT_COLUMN].append(result)

        literals = [
            atomic if bindings[atomic] == result else f"({NOT_GLYPH}{atomic})"
            for atomic in enumerator.atomics
        ]
        if result:
            minterms.append(fold(literals, AND_GLYPH))
        else:
            maxterms.append(fold(literals, OR_GLYPH))

        logger.debug(f"Row {bindings} -> {result}")

    table.columns[WEIGHT_COLUMN] = weights(table.columns[RESULT_COLUMN])
    table.sdnf = fold(minterms, OR_GLYPH)
    table.sknf = fold(maxterms, AND_GLYPH)
    table.positive = len(minterms)
    table.negative = len(maxterms)
    table.total = len(enumerator)

    logger.debug(
        f"Truth table complete: {table.positive} true, {table.negative} false, {table.total} rows"
    )
    return table
