"""
Tests for the coefficient utilities.
"""

import math

import numpy as np
import pytest
import torch


def _t(values):
    return torch.tensor(values, dtype=torch.float64)


class TestAsCoefficients:
    """Tests for coefficient validation and conversion."""

    def test_list_to_float64(self):
        from polydist.polynomial import as_coefficients

        coeffs = as_coefficients([1, 0, -2])
        assert coeffs.dtype == torch.float64
        assert coeffs.tolist() == [1.0, 0.0, -2.0]

    def test_numpy_and_tensor_inputs(self):
        from polydist.polynomial import as_coefficients

        assert as_coefficients(np.array([3, 4], dtype=np.int32)).tolist() == [3.0, 4.0]
        coeffs = as_coefficients(torch.tensor([0.5, 1.5], dtype=torch.float32))
        assert coeffs.dtype == torch.float64
        assert coeffs.tolist() == [0.5, 1.5]

    def test_python_ints_beyond_int64(self):
        from polydist.polynomial import as_coefficients

        coeffs = as_coefficients([10 ** 30, 0])
        assert coeffs.dtype == torch.float64
        assert coeffs.tolist() == [1e30, 0.0]

    def test_empty_rejected(self):
        from polydist.errors import InvalidInputError
        from polydist.polynomial import as_coefficients

        with pytest.raises(InvalidInputError, match="at least one coefficient"):
            as_coefficients([])

    @pytest.mark.parametrize("bad", [
        [[1.0, 2.0], [3.0, 4.0]],
        ["a", "b"],
        [1.0, math.nan],
        [math.inf],
        [1.0 + 2.0j],
        [None, 1.0],
        4.0,
    ])
    def test_malformed_rejected(self, bad):
        from polydist.errors import InvalidInputError
        from polydist.polynomial import as_coefficients

        with pytest.raises(InvalidInputError):
            as_coefficients(bad)

    def test_degree_ignores_leading_zeros(self):
        from polydist.polynomial import degree

        assert degree(_t([0.0, 0.0, 1.0, 2.0])) == 1
        assert degree(_t([4.0])) == 0


class TestArithmetic:
    """Tests for multiplication, padding, addition and differentiation."""

    def test_poly_mul(self):
        """(x + 1)(x - 1) = x^2 - 1"""
        from polydist.polynomial import poly_mul

        assert poly_mul(_t([1.0, 1.0]), _t([1.0, -1.0])).tolist() == [1.0, 0.0, -1.0]

    def test_poly_square(self):
        """(x^2 + 2x + 3)^2 = x^4 + 4x^3 + 10x^2 + 12x + 9"""
        from polydist.polynomial import poly_square

        assert poly_square(_t([1.0, 2.0, 3.0])).tolist() == [1.0, 4.0, 10.0, 12.0, 9.0]

    def test_poly_square_constant(self):
        from polydist.polynomial import poly_square

        assert poly_square(_t([-3.0])).tolist() == [9.0]

    def test_pad_left(self):
        from polydist.polynomial import pad_left

        assert pad_left(_t([1.0, 2.0]), 4).tolist() == [0.0, 0.0, 1.0, 2.0]
        assert pad_left(_t([1.0, 2.0]), 2).tolist() == [1.0, 2.0]

    def test_pad_left_cannot_shrink(self):
        from polydist.polynomial import pad_left

        with pytest.raises(ValueError):
            pad_left(_t([1.0, 2.0, 3.0]), 2)

    def test_poly_add_different_degrees(self):
        from polydist.polynomial import poly_add

        assert poly_add(_t([1.0, 0.0, 0.0]), _t([1.0, 1.0])).tolist() == [1.0, 1.0, 1.0]
        assert poly_add(_t([2.0]), _t([1.0, 1.0, 1.0])).tolist() == [1.0, 1.0, 3.0]

    def test_poly_derivative(self):
        """d/dx (x^3 + 5) = 3x^2"""
        from polydist.polynomial import poly_derivative

        assert poly_derivative(_t([1.0, 0.0, 0.0, 5.0])).tolist() == [3.0, 0.0, 0.0]
        assert poly_derivative(_t([4.0, -1.0, 2.0])).tolist() == [8.0, -1.0]

    def test_poly_derivative_constant(self):
        from polydist.polynomial import poly_derivative

        assert poly_derivative(_t([7.0])).tolist() == [0.0]


class TestSquaredDistancePoly:
    """Tests for building D(x) = (x - x0)^2 + (p(x) - y0)^2."""

    def test_parabola(self):
        """y = x^2, point (1, 0): x^4 + x^2 - 2x + 1"""
        from polydist.polynomial import squared_distance_poly

        dist_poly = squared_distance_poly(_t([1.0, 0.0, 0.0]), 1.0, 0.0)
        assert dist_poly.tolist() == [1.0, 0.0, 1.0, -2.0, 1.0]

    def test_constant_pads_y_part(self):
        """y = 3, point (0, 1): x^2 + 4"""
        from polydist.polynomial import squared_distance_poly

        dist_poly = squared_distance_poly(_t([3.0]), 0.0, 1.0)
        assert dist_poly.tolist() == [1.0, 0.0, 4.0]

    def test_line(self):
        """y = x, point (0, 1): x^2 + (x - 1)^2 = 2x^2 - 2x + 1"""
        from polydist.polynomial import squared_distance_poly

        dist_poly = squared_distance_poly(_t([1.0, 0.0]), 0.0, 1.0)
        assert dist_poly.tolist() == [2.0, -2.0, 1.0]

    def test_input_not_modified(self):
        from polydist.polynomial import squared_distance_poly

        coeffs = _t([1.0, 2.0, 3.0])
        squared_distance_poly(coeffs, 1.0, 10.0)
        assert coeffs.tolist() == [1.0, 2.0, 3.0]

    def test_matches_direct_evaluation(self):
        from polydist.kernels.polyval import polyval_py
        from polydist.polynomial import squared_distance_poly

        p = [0.5, -1.0, 0.0, 2.0]
        x0, y0 = 0.3, -0.7
        dist_poly = squared_distance_poly(_t(p), x0, y0)
        assert dist_poly.numel() == 7

        for x in [-2.0, -0.5, 0.0, 1.25, 3.0]:
            direct = (x - x0) ** 2 + (polyval_py(p, x) - y0) ** 2
            assert polyval_py(dist_poly.tolist(), x) == pytest.approx(direct, rel=1e-12)
