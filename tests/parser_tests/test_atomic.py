# tests/parser_tests/test_atomic.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test suite for atomic token validation

import pytest
from parser.ast_nodes import Atomic, Constant
from parser.atomic import parse_atomic
from parser.exceptions import ParseError


class TestAtomicParser:
    """Test cases for variable names and constants."""

    @pytest.mark.parametrize("text", ["x", "x1", "ab12", "X10", "p"])
    def test_variable_names(self, text):
        assert parse_atomic(text) == Atomic(text)

    @pytest.mark.parametrize("text, value", [("0", 0), ("1", 1)])
    def test_constants(self, text, value):
        assert parse_atomic(text) == Constant(value)

    @pytest.mark.parametrize(
        "text, message",
        [
            ("x1y", "Invalid atomic 'x1y'"),
            ("ab12cd", "Invalid atomic 'ab12c'"),
            ("1x", "Invalid atomic '1x'"),
            ("2", "Invalid atomic '2'"),
            ("01", "Invalid atomic '01'"),
            ("10", "Invalid atomic '10'"),
        ],
    )
    def test_malformed_atomics(self, text, message):
        with pytest.raises(ParseError) as exc_info:
            parse_atomic(text)
        assert str(exc_info.value) == message

    @pytest.mark.parametrize("text", ["result", "weight"])
    def test_reserved_names(self, text):
        with pytest.raises(ParseError, match="reserved"):
            parse_atomic(text)

    def test_letters_and_suffix(self):
        node = parse_atomic("ab12")
        assert node.letters == "ab"
        assert node.suffix == 12

    def test_name_without_suffix(self):
        node = parse_atomic("q")
        assert node.letters == "q"
        assert node.suffix is None
