# tests/integration_tests/test_boolean_function.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# End-to-end tests for BooleanFunction

"""End-to-end tests for BooleanFunction.

Drives the full pipeline from formula text to canonical forms and checks
the properties every truth table must have: row count, partition of rows
into true and false, binary index equal to the result bits, and SDNF/SKNF
that reproduce the original table when parsed again.
"""

import pytest
from logic import BooleanFunction
from parser import ParseError
from utils.logger import get_logger

FORMULAS = [
    "x1",
    "(¬x1)",
    "(a>b)",
    "(a~b)",
    "((a•b)+c)",
    "(¬(((¬x2)+x3)•(¬(x1•x3))))",
    "¬((¬x2 + ¬x3) • ¬(x1 • ¬x3))",
    "((p>q)~((¬q)>(¬p)))",
    "((x1•1)+(x2•0))",
    "(((a+b)•(c+d))>(a~d))",
]


class TestBooleanFunction:
    """Test cases for the facade over parsing, tables and forms."""

    def setup_method(self):
        self.logger = get_logger()

    def test_bracketed_example(self, bracketed_formula):
        fn = BooleanFunction(bracketed_formula)
        fn.details()

        assert fn.table["result"] == [0, 0, 1, 0, 0, 1, 1, 1]
        assert fn.cdnf_binary == "V(2,5,6,7)"
        assert fn.ccnf_binary == "Λ(0,1,3,4)"
        assert fn.binary_index == 39
        assert (fn.positive, fn.negative, fn.total) == (4, 4, 8)

    def test_prefix_example(self, prefix_formula):
        fn = BooleanFunction(prefix_formula)
        fn.details()

        assert fn.atomics == ["x1", "x2", "x3"]
        assert fn.total == 8
        assert fn.evaluate({"x1": 0, "x2": 0, "x3": 0}) == 0
        assert fn.evaluate({"x1": 1, "x2": 1, "x3": 1}) == 1
        assert fn.table["result"][0] == 0
        assert fn.table["result"][7] == 1
        assert fn.binary_index == 27

    def test_atomics_sorted_by_details(self):
        fn = BooleanFunction("((x3•x1)+x2)")
        assert fn.atomics == ["x3", "x1", "x2"]

        fn.details()
        assert fn.atomics == ["x1", "x2", "x3"]
        assert list(fn.table)[:3] == ["x1", "x2", "x3"]

    def test_variables_registered_at_construction(self):
        fn = BooleanFunction("((¬x2)+x3)")

        assert list(fn.variables) == ["x2", "(¬x2)", "x3", "((¬x2)+x3)"]
        assert fn.value == "((¬x2)+x3)"

    def test_initial_variables(self):
        fn = BooleanFunction("((¬x2)+x3)", {"x2": 0, "x3": 0})

        assert fn.variables["(¬x2)"] == 1
        assert fn.value == 1

    def test_atomics_only_variables(self):
        fn = BooleanFunction("((¬x2)+x3)", atomics_only=True)

        assert list(fn.variables) == ["x2", "x3"]
        fn.details(full=True)
        assert list(fn.table) == ["x2", "x3", "result", "weight"]

    def test_full_details(self):
        fn = BooleanFunction("((¬x2)+x3)")
        table = fn.details(full=True)

        assert list(table.columns) == ["x2", "(¬x2)", "x3", "((¬x2)+x3)", "result", "weight"]
        assert table.columns["(¬x2)"] == [1, 1, 0, 0]
        assert fn.truth_table is table

    def test_forms_build_table_on_first_access(self):
        fn = BooleanFunction("(a>b)")

        assert fn.truth_table is None
        assert fn.cdnf == "¬a • ¬b  +  ¬a • b  +  a • b"
        assert fn.ccnf == "¬a + b"
        assert fn.truth_table is not None
        assert fn.sdnf == "((((¬a)•(¬b))+((¬a)•b))+(a•b))"

    def test_classification(self):
        assert BooleanFunction("((p>q)~((¬q)>(¬p)))").is_tautology
        assert BooleanFunction("(p•(¬p))").is_contradiction
        satisfiable = BooleanFunction("(p•q)")
        assert satisfiable.is_satisfiable
        assert not satisfiable.is_tautology

    def test_evaluate_requires_complete_assignment(self):
        fn = BooleanFunction("(a•b)")

        with pytest.raises(ValueError):
            fn.evaluate({"a": 1})
        with pytest.raises(ValueError):
            fn.evaluate({"a": 1, "b": 1, "c": 0})
        with pytest.raises(ValueError):
            fn.evaluate({"a": 1, "b": 3})

    @pytest.mark.parametrize("formula", ["(x1•", "x1 + )", "", "(0•1)", "(x1 & x2)"])
    def test_malformed_formula_never_constructs(self, formula):
        with pytest.raises(ParseError):
            BooleanFunction(formula)

    def test_folded_forms_and_counts_build_table_on_first_access(self):
        fn = BooleanFunction("(a>b)")

        assert fn.truth_table is None
        assert fn.sdnf == "((((¬a)•(¬b))+((¬a)•b))+(a•b))"
        assert fn.sknf == "((¬a)+b)"
        assert (fn.positive, fn.negative, fn.total) == (3, 1, 4)
        assert fn.truth_table is not None

    def test_counts_before_details(self):
        fn = BooleanFunction("(x1•(¬x1))")

        assert fn.total == 2
        assert fn.positive == 0
        assert fn.sdnf == ""

    def test_full_details_keep_folded_forms(self):
        fn = BooleanFunction("(a>b)")
        fn.details(full=True)

        assert "(a>b)" in fn.table
        assert fn.sknf == "((¬a)+b)"

    def test_whitespace_inside_atomic_name(self):
        fn = BooleanFunction("(x 1•y)")

        assert fn.atomics == ["x1", "y"]
        assert fn.table["result"] == [0, 0, 0, 1]

    def test_bad_initial_binding(self):
        with pytest.raises(ValueError):
            BooleanFunction("(a•b)", {"a": 5})

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_row_count(self, formula):
        fn = BooleanFunction(formula)
        fn.details()

        assert fn.total == 2 ** len(fn.atomics)
        assert all(len(column) == fn.total for column in fn.table.values())
        assert fn.positive + fn.negative == fn.total

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_binary_index_matches_result_bits(self, formula):
        fn = BooleanFunction(formula)
        bits = "".join(str(v) for v in fn.table["result"])

        assert fn.binary_index == int(bits, 2)
        assert fn.binary_index == sum(fn.table["weight"])

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_sdnf_reproduces_truth_table(self, formula):
        fn = BooleanFunction(formula)
        fn.details()
        if not fn.sdnf:
            pytest.skip("no true rows")

        self.logger.debug(f"SDNF of {formula}: {fn.sdnf}")
        rebuilt = BooleanFunction(fn.sdnf)
        rebuilt.details()

        assert rebuilt.atomics == fn.atomics
        assert rebuilt.table["result"] == fn.table["result"]

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_sknf_reproduces_truth_table(self, formula):
        fn = BooleanFunction(formula)
        fn.details()
        if not fn.sknf:
            pytest.skip("no false rows")

        rebuilt = BooleanFunction(fn.sknf)
        rebuilt.details()

        assert rebuilt.table["result"] == fn.table["result"]

    @pytest.mark.parametrize("formula", FORMULAS)
    def test_evaluate_agrees_with_table(self, formula):
        fn = BooleanFunction(formula)
        table = fn.details()

        for index, row in enumerate(table.rows()):
            assignment = {atomic: row[atomic] for atomic in fn.atomics}
            assert fn.evaluate(assignment) == table.result[index]
