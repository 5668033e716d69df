# logic/boolean_function.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Entry point tying parsing, truth table and normal forms together

"""BooleanFunction: one parsed formula and everything derived from it.

Construction parses the formula and registers its expression table under
the initial bindings; a malformed formula never yields an instance.
``details`` builds the truth table, optionally with every sub-expression
as a column. All output accessors (table, SDNF/SKNF, row counts and the
canonical forms) build the default table themselves on first access.

Example:
    >>> fn = BooleanFunction("(¬(((¬x2)+x3)•(¬(x1•x3))))")
    >>> fn.cdnf_binary
    'V(2,5,6,7)'
    >>> fn.binary_index
    39
"""

from typing import Dict, List, Mapping, Optional

from parser import parse_formula
from utils.logger import get_logger
from . import canonical
from .evaluator import TruthValue
from .expression_table import ExpressionTable
from .truth_table import TruthTable, build_truth_table


class BooleanFunction:
    """A propositional formula with its truth table and normal forms.

    Attributes:
        expression: Formula text as given
        atomics: Distinct variable names, sorted once the table is built
        variables: Expression table under the initial bindings
        sdnf, sknf: Folded canonical forms
        positive, negative, total: Row counts
    """

    def __init__(
        self,
        expression: str,
        initial_variables: Optional[Mapping[str, int]] = None,
        atomics_only: bool = False,
    ):
        """Parse the formula and register its expression table.

        Args:
            expression: Formula text
            initial_variables: Atomic name to 0/1 bindings applied at construction
            atomics_only: Register only atomics in ``variables``

        Raises:
            ParseError: The formula is malformed or has no atomic variable
            ValueError: An initial binding is not 0 or 1
        """
        self.expression = expression
        self._atomics_only = atomics_only

        parsed = parse_formula(expression)
        self.root = parsed.root
        self.atomics: List[str] = parsed.atomics

        self._expression_table = ExpressionTable.evaluate(
            self.root, initial_variables, atomics_only
        )
        self.variables: Dict[str, TruthValue] = self._expression_table.values

        self.truth_table: Optional[TruthTable] = None

    def __repr__(self) -> str:
        return f"BooleanFunction({self.expression!r})"

    @property
    def value(self) -> TruthValue:
        """Root value under the initial bindings, symbolic if any atomic is unbound."""
        return self._expression_table.result

    def details(self, full: bool = False) -> TruthTable:
        """Build the truth table over all assignments.

        Args:
            full: Record every registered sub-expression as a column, not
                only the atomics

        Returns:
            The built TruthTable, also kept on ``truth_table``
        """
        logger = get_logger()
        self.atomics.sort()

        keys = list(self.variables) if full else self.atomics
        logger.debug(f"Computing details for {self.expression!r} (full={full})")

        table = build_truth_table(self.root, self.atomics, keys)

        self.truth_table = table
        return table

    @property
    def table(self) -> Dict[str, List[TruthValue]]:
        """Truth table columns keyed by atomic (or sub-expression), result and weight."""
        return self._table().columns

    def _table(self) -> TruthTable:
        if self.truth_table is None:
            self.details()
        return self.truth_table

    @property
    def sdnf(self) -> str:
        return self._table().sdnf

    @property
    def sknf(self) -> str:
        return self._table().sknf

    @property
    def positive(self) -> int:
        return self._table().positive

    @property
    def negative(self) -> int:
        return self._table().negative

    @property
    def total(self) -> int:
        return self._table().total

    def evaluate(self, assignment: Mapping[str, int]) -> int:
        """Root value under one complete assignment.

        Args:
            assignment: Atomic name to 0/1 for every atomic of the formula

        Raises:
            ValueError: Missing or unknown atomics, or non-0/1 values
        """
        missing = set(self.atomics) - set(assignment)
        unknown = set(assignment) - set(self.atomics)
        if missing or unknown:
            raise ValueError(
                f"Assignment must bind exactly {sorted(self.atomics)} "
                f"(missing {sorted(missing)}, unknown {sorted(unknown)})"
            )
        return ExpressionTable.evaluate(self.root, assignment, atomics_only=True).result

    @property
    def cdnf(self) -> str:
        return canonical.canonical_normal_form(self._table(), True)

    @property
    def ccnf(self) -> str:
        return canonical.canonical_normal_form(self._table(), False)

    @property
    def cdnf_binary(self) -> str:
        return canonical.cdnf_binary(self._table())

    @property
    def ccnf_binary(self) -> str:
        return canonical.ccnf_binary(self._table())

    @property
    def binary_index(self) -> int:
        return canonical.binary_index(self._table())

    @property
    def is_tautology(self) -> bool:
        return self._table().negative == 0

    @property
    def is_contradiction(self) -> bool:
        return self._table().positive == 0

    @property
    def is_satisfiable(self) -> bool:
        return self._table().positive > 0
