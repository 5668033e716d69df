# parser/atomic.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Validation of atomic tokens into variables and constants

"""Atomic token parsing.

An atomic token is either a variable name (a run of letters followed by an
optional run of digits) or one of the constants ``0`` and ``1``. The lexer
hands over every alphanumeric run unchanged; this module decides which of
the two it is, or rejects it.
"""

import re

from .ast_nodes import Atomic, Constant, Expr
from .exceptions import ParseError

CONSTANTS = "01"

# Column names of the truth table that a variable must not shadow
RESERVED_NAMES = frozenset({"result", "weight"})

_LETTERS_THEN_DIGITS = re.compile(r"([a-zA-Z]*)([0-9]*)")


def parse_atomic(text: str) -> Expr:
    """Turn an alphanumeric token into an Atomic or Constant node.

    Args:
        text: Alphanumeric token text

    Returns:
        Constant for ``0``/``1``, Atomic for a well-formed variable name

    Raises:
        ParseError: Letters follow digits, a bare digit run is not a single
            ``0``/``1``, or the name is reserved
    """
    match = _LETTERS_THEN_DIGITS.match(text)
    letters, postfix = match.group(1), match.group(2)

    if match.end() < len(text):
        # First offending letter after the digit run
        raise ParseError(f"Invalid atomic '{text[:match.end() + 1]}'")

    if not letters:
        if len(postfix) != 1 or postfix not in CONSTANTS:
            raise ParseError(f"Invalid atomic '{postfix}'")
        return Constant(int(postfix))

    if text in RESERVED_NAMES:
        raise ParseError(f"Atomic name '{text}' is reserved")

    return Atomic(text)
