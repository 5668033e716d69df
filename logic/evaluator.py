# logic/evaluator.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Truth-value semantics of the propositional connectives

"""Operation evaluator.

Values flowing through the evaluator are either a concrete truth value
(the integers 0 and 1) or a symbolic value: the canonical key of an
atomic or sub-expression that has no binding yet. An operation over a
symbolic operand is undetermined and yields None, which lets the
expression table be built before every variable is bound.
"""

from typing import Optional, Union

from parser.ast_nodes import (
    AND_GLYPH,
    EQUIV_GLYPH,
    IMPLIES_GLYPH,
    NOT_GLYPH,
    OR_GLYPH,
)
from parser.exceptions import ParseError

# 0/1 when evaluated, the expression key while still symbolic
TruthValue = Union[int, str]


def is_concrete(value: TruthValue) -> bool:
    """Return True if value is an evaluated 0/1 rather than a symbolic key."""
    return isinstance(value, int)


def solve_unary_operation(operator: str, operand: TruthValue) -> Optional[int]:
    """Apply a unary operator.

    Args:
        operator: Operator glyph
        operand: Current operand value

    Returns:
        0 or 1, or None when the operand is still symbolic

    Raises:
        ParseError: Unknown unary operator
    """
    if operator != NOT_GLYPH:
        raise ParseError(f"Invalid unary operator '{operator}'")
    if not is_concrete(operand):
        return None
    return 1 - int(bool(operand))


def solve_operation(first: TruthValue, operator: str, second: TruthValue) -> Optional[int]:
    """Apply a binary operator.

    Args:
        first: Current value of the left operand
        operator: Operator glyph
        second: Current value of the right operand

    Returns:
        0 or 1, or None when either operand is still symbolic

    Raises:
        ParseError: Unknown binary operator
    """
    if operator not in _BINARY_SEMANTICS:
        raise ParseError(f"Invalid operator '{operator}'")
    if not (is_concrete(first) and is_concrete(second)):
        return None
    return int(_BINARY_SEMANTICS[operator](bool(first), bool(second)))


_BINARY_SEMANTICS = {
    AND_GLYPH: lambda a, b: a and b,
    OR_GLYPH: lambda a, b: a or b,
    IMPLIES_GLYPH: lambda a, b: (not a) or b,
    EQUIV_GLYPH: lambda a, b: a == b,
}
