# parser/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

This package turns fully-parenthesized formula text into an abstract syntax
tree. Parsing runs in three stages: the SLY lexer drops whitespace and
rejects characters outside the alphabet, the atomic parser validates
variable names and constants, and a recursive-descent parser checks the
bracket structure and builds the tree.

Core Functions:
    parse: Converts a formula string into its root AST node
    parse_formula: Returns the root together with the variable names

Supported Logic:
    - NOT (¬), AND (•), OR (+), IMPLIES (>), EQUIVALENCE (~)
    - Variables: letters followed by optional digits (x, x1, ab12)
    - Constants: 0 and 1

Example:
    >>> from parser import parse
    >>> parse("((¬x2)+x3)").key
    '((¬x2)+x3)'
"""

from .exceptions import ParseError
from .grammar import ParsedFormula, parse_formula
from utils.logger import get_logger


def parse(source: str):
    """Parse a formula string into its Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Fully-parenthesized formula string

    Returns:
        Root AST node of the formula

    Raises:
        ParseError: Formula syntax is malformed or references no variable

    Example:
        >>> ast = parse("(x1•(¬x2))")
        >>> # Returns And node with an Atomic and a Not node
    """
    logger = get_logger()

    try:
        return parse_formula(source).root

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise


__all__ = ["parse", "parse_formula", "ParsedFormula", "ParseError"]

__version__ = "1.0.0"
__description__ = "Propositional formula tokenizer and recursive-descent parser"
