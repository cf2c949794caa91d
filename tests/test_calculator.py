# test_calculator.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from techterm.commands.calculator import (
    CalculatorError, evaluate, format_number, tokenize
)


class TestTokenize:
    """Tokenizer accepts numbers, operators and parentheses only."""

    def test_numbers_and_operators(self):
        assert tokenize("12 + 3.5*(.5)") == [
            ('num', '12'), ('op', '+'), ('num', '3.5'), ('op', '*'),
            ('op', '('), ('num', '.5'), ('op', ')'),
        ]

    def test_whitespace_is_ignored(self):
        assert tokenize("  7   -  2  ") == [('num', '7'), ('op', '-'), ('num', '2')]

    @pytest.mark.parametrize("expression", ["x + 1", "2 ** 3", "__import__('os')", "1; 2", "2 % 3"])
    def test_rejects_anything_else(self, expression):
        with pytest.raises(CalculatorError):
            evaluate(expression)


class TestEvaluate:
    """Arithmetic semantics."""

    @pytest.mark.parametrize("expression, expected", [
        ("2 + 2", 4),
        ("2 + 3 * 4", 14),
        ("(2 + 3) * 4", 20),
        ("10 - 4 - 3", 3),
        ("12 / 4 / 3", 1),
        ("7 / 2", 3.5),
        ("-3 + 5", 2),
        ("2 * -3", -6),
        ("--4", 4),
        ("+(1)", 1),
        ("((1))", 1),
    ])
    def test_values(self, expression, expected):
        assert evaluate(expression) == expected

    @pytest.mark.parametrize("expression", ["2 +", "", "   ", "(1 + 2", "1 + 2)", "* 3", "1 2", "()"])
    def test_malformed(self, expression):
        with pytest.raises(CalculatorError):
            evaluate(expression)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            evaluate("2 +")

    def test_large_results_use_exponent_form(self):
        assert format_number(evaluate("1000000000000000000000 * 10")) == "1e+22"

    def test_division_by_zero_is_not_an_error(self):
        assert format_number(evaluate("1 / 0")) == "Infinity"
        assert format_number(evaluate("-1 / 0")) == "-Infinity"
        assert format_number(evaluate("0 / 0")) == "NaN"


class TestFormatNumber:
    """Results print the way a browser console prints numbers."""

    @pytest.mark.parametrize("value, expected", [
        (4.0, "4"),
        (-6.0, "-6"),
        (-0.0, "0"),
        (3.5, "3.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (1.5e21, "1.5e+21"),
        (-2e25, "-2e+25"),
        (0.000001, "0.000001"),
        (0.000025, "0.000025"),
        (1e-7, "1e-7"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
