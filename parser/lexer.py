# parser/lexer.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements the input normalization step: all whitespace is
removed before lexing (so ``x 1`` reads as ``x1``) and every remaining
character must belong to the formula alphabet. Atomic tokens are kept as raw alphanumeric runs; their shape is checked later by
the atomic parser so that errors such as ``x1y`` can be reported as a
malformed atomic rather than a missing operator.

Supported Tokens:
- Operators: ¬ (NOT), • (AND), + (OR), > (IMPLIES), ~ (EQUIVALENCE)
- Brackets: ( and )
- Atoms: runs of letters and digits
- Whitespace: stripped by ``tokenize`` before lexing
"""

from sly import Lexer
from utils.logger import get_logger
from .exceptions import ParseError


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ATOM",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "EQUIV",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"¬"
    AND = r"•"
    OR = r"\+"
    IMPLIES = r">"
    EQUIV = r"~"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Letters and digits in any order; the atomic parser validates the shape
    ATOM = r"[a-zA-Z0-9]+"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        # Map back to the unstripped input when tokenize() removed whitespace
        positions = getattr(self, "source_positions", None)
        error_pos = positions[self.index] if positions else self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ParseError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )


def tokenize(source: str) -> list:
    """Tokenize a formula eagerly.

    All whitespace is removed before lexing, so ``x 1`` reads as ``x1``.
    The whole input is consumed before structural parsing starts, so an
    illegal character anywhere in the text is reported first. Reported
    positions refer to the text as given.

    Args:
        source: Raw formula text

    Returns:
        List of SLY tokens in input order

    Raises:
        ParseError: Input contains a character outside the formula alphabet
    """
    positions = [index for index, char in enumerate(source) if not char.isspace()]
    cleaned = "".join(source[index] for index in positions)

    lexer = FormulaLexer()
    lexer.source_positions = positions
    tokens = list(lexer.tokenize(cleaned))
    get_logger().debug(f"Tokenized {len(tokens)} tokens from formula: {source!r}")
    return tokens
