"""
Tests for the RREF engine.

Validates:
    - Worked examples (full rank, rank-deficient, non-square)
    - Partial pivoting and first-row tie breaking
    - Pivot-acceptance tolerance (skipped columns, skipped factors)
    - Cleanup tolerance (residue snapped to exactly 0)
    - Input ownership and result immutability
    - Overflow during elimination raises NumericalError
"""

import warnings

import numpy as np
import pytest

from pymatrix.core.exceptions import DecodeError, NumericalError, ShapeError
from pymatrix.core.matrix import Matrix
from pymatrix.rref import reduce, rref


class TestWorkedExamples:

    def test_rank_deficient_2x2(self):
        assert rref([[1, 2], [2, 4]]).to_rows() == [[1.0, 2.0], [0.0, 0.0]]

    def test_full_rank_2x2(self):
        assert rref([[2, 4], [1, 3]]).to_rows() == [[1.0, 0.0], [0.0, 1.0]]

    def test_wide(self):
        assert rref([[1, 2, 3], [4, 5, 6]]).to_rows() == [[1.0, 0.0, -1.0], [0.0, 1.0, 2.0]]

    def test_tall(self):
        result = rref([[1, 2], [3, 4], [5, 6]])
        assert result.to_rows() == [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]

    def test_singular_3x3(self, singular_3x3):
        result = rref(singular_3x3)
        np.testing.assert_allclose(
            result.data,
            [[1.0, 0.0, -1.0], [0.0, 1.0, 2.0], [0.0, 0.0, 0.0]],
            atol=1e-12,
        )
        # Theoretically-zero cells read as exactly zero
        assert result.to_rows()[2] == [0.0, 0.0, 0.0]
        assert result[0, 1] == 0.0
        assert result[1, 0] == 0.0

    def test_zero_matrix(self):
        assert rref([[0, 0], [0, 0]]).to_rows() == [[0.0, 0.0], [0.0, 0.0]]

    def test_leading_zero_column(self):
        assert rref([[0, 1], [0, 2]]).to_rows() == [[0.0, 1.0], [0.0, 0.0]]

    def test_single_cell(self):
        assert rref([[5]]).to_rows() == [[1.0]]

    def test_solves_augmented_system(self):
        # x + y = 3, x - y = 1  =>  x = 2, y = 1
        result = rref([[1, 1, 3], [1, -1, 1]])
        np.testing.assert_allclose(result.data, [[1, 0, 2], [0, 1, 1]], atol=1e-12)


class TestIdentity:

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
    def test_identity_is_fixed_point(self, n):
        I = Matrix.identity(n)
        assert rref(I).equals(I)


class TestPivoting:

    def test_largest_magnitude_selected(self):
        """A tiny leading entry must not be used as the divisor."""
        result = rref([[1e-8, 1], [1, 1]])
        np.testing.assert_allclose(result.data, [[1, 0], [0, 1]], atol=1e-12)

    def test_negative_pivot_magnitude(self):
        result = rref([[1, 1], [-3, 3]])
        assert result.to_rows() == [[1.0, 0.0], [0.0, 1.0]]

    def test_tie_keeps_first_row(self):
        sol = reduce([[1, 2], [-1, 0]], record_steps=True)
        assert sol.steps[0].kind != 'swap'
        assert sol.reduced.to_rows() == [[1.0, 0.0], [0.0, 1.0]]


class TestTolerances:

    def test_sub_tolerance_column_skipped(self):
        result = rref([[1e-11, 1], [0, 1]])
        # Column 0 has no usable pivot; its residue is above the cleanup threshold
        assert result.to_rows() == [[1e-11, 1.0], [0.0, 0.0]]

    def test_small_factor_not_eliminated_then_snapped(self):
        result = rref([[1, 5e-13], [0, 1]])
        assert result.to_rows() == [[1.0, 0.0], [0.0, 1.0]]

    def test_cleanup_snaps_to_positive_zero(self):
        result = rref([[1, -1e-13], [0, 0]])
        assert result[0, 1] == 0.0
        assert not np.signbit(result[0, 1])


class TestErrors:

    def test_jagged(self):
        with pytest.raises(ShapeError) as exc:
            rref([[1, 2], [3, 4], [5]])
        assert exc.value.kind == 'jagged'
        assert exc.value.row == 2
        assert str(exc.value) == "A: row 2 has length 1 (expected 2)"

    def test_zero_rows(self):
        with pytest.raises(ShapeError, match="A: matrix has zero rows"):
            rref([])

    def test_zero_columns(self):
        with pytest.raises(ShapeError, match="A: matrix has zero columns"):
            rref([[]])

    def test_non_numeric(self):
        with pytest.raises(DecodeError):
            rref([["a"]])


class TestOwnership:

    def test_list_input_untouched(self):
        rows = [[2.0, 4.0], [1.0, 3.0]]
        rref(rows)
        assert rows == [[2.0, 4.0], [1.0, 3.0]]

    def test_matrix_input_untouched(self):
        m = Matrix.from_rows([[1, 2], [2, 4]])
        rref(m)
        assert m.to_rows() == [[1.0, 2.0], [2.0, 4.0]]

    def test_result_read_only(self):
        result = rref([[2, 4], [1, 3]])
        with pytest.raises(ValueError):
            result.data[0, 0] = 3.0


class TestOverflow:

    def test_elimination_overflow(self):
        with pytest.raises(NumericalError) as exc:
            rref([[1e308, 1e308], [-1e308, 1e308]])
        assert str(exc.value) == (
            "rref: row 1 overflowed to a non-finite value while eliminating column 0"
        )

    def test_scaling_overflow(self):
        with pytest.raises(NumericalError, match="rref: row 0 overflowed .* while scaling column 0"):
            rref([[1e-9, 1e300]])

    def test_no_runtime_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(NumericalError):
                rref([[1e308, 1e308], [-1e308, 1e308]])

    def test_large_but_finite(self):
        result = rref([[1e300, 2e300], [3e300, 4e300]])
        np.testing.assert_allclose(result.data, [[1, 0], [0, 1]], atol=1e-12)
