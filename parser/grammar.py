# parser/grammar.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Recursive-descent parser for fully-parenthesized propositional formulas

"""Propositional formula grammar.

Grammar (every operator application is bracketed):

    Formula := '¬' Formula
             | '(' '¬' Formula ')'
             | '(' Formula BinOp Formula ')'
             | Atomic
    BinOp   := '•' | '+' | '>' | '~'

A NOT written without its own bracket negates the formula that follows it.
Inside a bracket, a NOT followed by the closing bracket is the bracketed
unary application; otherwise the negated formula is the left operand of a
binary application. Both spellings build the same node.

Errors are reported with the text reconstructed so far, e.g.
``No operator found after '(x1' (unexpected ')')``.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from utils.logger import get_logger
from .ast_nodes import BINARY_OPERATORS, NOT_GLYPH, Atomic, Expr, Not
from .atomic import parse_atomic
from .exceptions import ParseError
from .lexer import tokenize


@dataclass
class ParsedFormula:
    """Result of a successful parse.

    Attributes:
        root: Root node of the formula
        atomics: Distinct variable names in first-seen order
    """

    root: Expr
    atomics: List[str] = field(default_factory=list)


class FormulaParser:
    """Recursive-descent parser over the token list of one formula.

    A parser instance is used for a single formula; ``parse`` may only be
    called once.
    """

    def __init__(self, tokens: list):
        self._tokens = tokens
        self._pos = 0
        self._atomics: List[str] = []

    def parse(self) -> ParsedFormula:
        """Parse the whole token list.

        Returns:
            ParsedFormula with the root node and the atomic names

        Raises:
            ParseError: The tokens do not form exactly one formula, or the
                formula references no variable
        """
        root = self._formula()

        leftover = self._peek()
        if leftover is not None:
            after = f" after '{root.key}'" if root is not None else ""
            raise ParseError(f"Unexpected '{leftover.value}'{after}")

        # Pure-constant formulas have nothing to enumerate
        if root is None or not self._atomics:
            raise ParseError("The formula is invalid or empty")

        return ParsedFormula(root, list(self._atomics))

    def _peek(self):
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _advance(self):
        token = self._peek()
        if token is not None:
            self._pos += 1
        return token

    def _formula(self) -> Optional[Expr]:
        """Parse one formula, or return None when no operand starts here."""
        token = self._peek()
        if token is None:
            return None

        if token.type == "NOT":
            self._advance()
            return self._negation()

        if token.type == "LPAREN":
            self._advance()
            return self._bracketed()

        if token.type == "ATOM":
            self._advance()
            return self._atomic(token.value)

        return None

    def _negation(self) -> Not:
        operand = self._formula()
        if operand is None:
            raise ParseError(f"No operand found for operator '{NOT_GLYPH}'")
        return Not(operand)

    def _bracketed(self) -> Expr:
        token = self._peek()
        if token is not None and token.type == "NOT":
            self._advance()
            negated = self._negation()
            closing = self._peek()
            if closing is not None and closing.type == "RPAREN":
                self._advance()
                return negated
            if closing is None:
                raise ParseError(
                    f"No closing bracket found after '({NOT_GLYPH}{negated.operand.key}'"
                )
            # Negated left operand of a binary application
            return self._binary_rest(negated)

        first = self._formula()
        if first is None:
            raise ParseError(
                f"No operand found after opening bracket (unexpected {self._describe_next()})"
            )
        return self._binary_rest(first)

    def _binary_rest(self, first: Expr) -> Expr:
        operator = self._advance()
        if operator is None or operator.value not in BINARY_OPERATORS:
            unexpected = f"'{operator.value}'" if operator is not None else "end of formula"
            raise ParseError(f"No operator found after '({first.key}' (unexpected {unexpected})")

        second = self._formula()
        if second is None:
            raise ParseError(
                f"No operand found after '({first.key}{operator.value}' "
                f"(unexpected {self._describe_next()})"
            )

        closing = self._advance()
        if closing is None or closing.type != "RPAREN":
            raise ParseError(
                f"No closing bracket found after '({first.key}{operator.value}{second.key}'"
            )

        return BINARY_OPERATORS[operator.value](first, second)

    def _atomic(self, text: str) -> Expr:
        node = parse_atomic(text)
        if isinstance(node, Atomic) and node.name not in self._atomics:
            self._atomics.append(node.name)
        return node

    def _describe_next(self) -> str:
        token = self._peek()
        return f"'{token.value}'" if token is not None else "end of formula"


def parse_formula(source: str) -> ParsedFormula:
    """Tokenize and parse a formula string.

    Args:
        source: Formula text

    Returns:
        ParsedFormula with root node and atomic names in first-seen order

    Raises:
        ParseError: Formula is malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parsed = FormulaParser(tokenize(source)).parse()

    logger.debug(
        f"Parsed {type(parsed.root).__name__} with atomics {parsed.atomics}: {parsed.root.key}"
    )
    return parsed
