# parser/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula processing.

Every malformed-input condition detected while tokenizing or parsing a
formula is reported through a single exception type, so callers only have
one thing to catch.
"""


class ParseError(SyntaxError):
    """Exception raised when formula parsing fails due to syntax errors.

    Covers illegal characters, malformed atomics, missing operands or
    operators, unknown operators, unclosed brackets, trailing input and
    formulas without any atomic variable. The message always carries the
    offending token and the text parsed so far where one exists.
    """

    pass
