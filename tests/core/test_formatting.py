"""
Tests for fraction formatting and matrix rendering.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.formatting import (
    compatibility_hint,
    explain_elementwise,
    explain_multiply,
    format_matrix,
    to_fraction,
)
from pymatrix.core.matrix import Matrix
from pymatrix.core.validation import Dimensions


class TestToFraction:

    @pytest.mark.parametrize("value,expected", [
        (2.0, "2"),
        (-3.0, "-3"),
        (0.0, "0"),
        (-0.0, "0"),
        (0.5, "1/2"),
        (-0.5, "-1/2"),
        (1 / 3, "1/3"),
        (-7 / 4, "-7/4"),
        (2.0000000001, "2"),
    ])
    def test_integers_and_fractions(self, value, expected):
        assert to_fraction(value) == expected

    def test_decimal_fallback(self):
        assert to_fraction(0.1234567) == "0.123457"

    def test_denominator_limit(self):
        assert to_fraction(1 / 101) == "0.009901"
        assert to_fraction(1 / 101, max_denominator=200) == "1/101"

    def test_non_finite(self):
        assert to_fraction(np.inf) == "inf"
        assert to_fraction(np.nan) == "nan"


class TestFormatMatrix:

    def test_alignment(self):
        text = format_matrix([[1, 0.5], [0, -2]])
        assert text == "[ 1  1/2 ]\n[ 0   -2 ]"

    def test_accepts_matrix(self):
        assert format_matrix(Matrix.identity(2)) == "[ 1  0 ]\n[ 0  1 ]"

    def test_empty(self):
        assert format_matrix(Matrix.from_rows([])) == "[]"


class TestCompatibilityHint:

    def test_mentions_both_rules(self):
        hint = compatibility_hint(Dimensions(2, 3), Dimensions(3, 2))
        assert "A: 2x3, B: 3x2" in hint
        assert "(3 vs 3)" in hint


class TestExplainElementwise:

    def test_add_layout(self):
        text = explain_elementwise('add', [[1, 2]], [[3, 4]], [[4, 6]])
        assert text == (
            "A is 1x2, B is 1x2\n"
            "\n"
            "A + B =\n"
            "[ 1 + 3  2 + 4 ]\n"
            "=\n"
            "[ 4  6 ]"
        )

    def test_subtract_parenthesises_negative_operand(self):
        text = explain_elementwise('subtract', [[1]], [[-2]], [[3]])
        assert "[ 1 - (-2) ]" in text
        assert text.endswith("[ 3 ]")

    def test_fractions(self):
        text = explain_elementwise('add', [[0.5]], [[0.25]], [[0.75]])
        assert "[ 1/2 + 1/4 ]" in text
        assert text.endswith("[ 3/4 ]")

    def test_accepts_matrix_values(self):
        I = Matrix.identity(2)
        text = explain_elementwise('add', I, I, Matrix.from_rows([[2, 0], [0, 2]]))
        assert "A is 2x2, B is 2x2" in text

    def test_unknown_op(self):
        with pytest.raises(ValidationError, match="op: expected 'add' or 'subtract'"):
            explain_elementwise('multiply', [[1]], [[1]], [[1]])


class TestExplainMultiply:

    def test_dot_product_per_entry(self, square_pair):
        A, B = square_pair
        text = explain_multiply(A, B, [[19, 22], [43, 50]])
        assert "A is 2x2, B is 2x2" in text
        assert "(1, 1): 1·5 + 2·7 = 19" in text
        assert "(1, 2): 1·6 + 2·8 = 22" in text
        assert "(2, 2): 3·6 + 4·8 = 50" in text

    def test_expression_grid(self):
        text = explain_multiply([[1, 2, 3]], [[1], [2], [3]], [[14]])
        assert "[ 1·1 + 2·2 + 3·3 ]" in text
        assert "=\n[ 14 ]" in text

    def test_negative_right_operand(self):
        text = explain_multiply([[2]], [[-3]], [[-6]])
        assert "(1, 1): 2·(-3) = -6" in text
