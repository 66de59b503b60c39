"""
Tests for equation formatting.
"""

import numpy as np
import pytest

from pypolyreg.regression import format_equation


class TestFormatEquation:

    def test_small_term_suppressed(self):
        assert format_equation([2.0, -3.0, 0.0005]) == "2.00 - 3.00x"

    def test_empty(self):
        assert format_equation([]) == "y = 0"

    def test_all_suppressed(self):
        assert format_equation([0.0004, -0.0009, 0.0]) == "y = 0"

    def test_constant_only(self):
        assert format_equation([1.0, 0.0]) == "1.00"

    def test_negative_leading_constant(self):
        assert format_equation([-1.5, 2.0]) == "- 1.50 + 2.00x"

    def test_leading_term_not_constant(self):
        assert format_equation([0.0, 0.0, 1.0]) == "1.00x^2"

    def test_negative_leading_term_not_constant(self):
        assert format_equation([0.0, -2.0, 0.5]) == "- 2.00x + 0.50x^2"

    def test_powers(self):
        assert format_equation([1.0, 2.0, 3.0, 4.0]) == "1.00 + 2.00x + 3.00x^2 + 4.00x^3"

    def test_high_power_label(self):
        coefficients = [0.0] * 12 + [1.25]
        assert format_equation(coefficients) == "1.25x^12"

    def test_threshold_is_exclusive(self):
        # |c| == threshold is kept, and rounds to 0.00
        assert format_equation([1.0, 0.001]) == "1.00 + 0.00x"

    def test_rounding(self):
        assert format_equation([0.126, -12.3449]) == "0.13 - 12.34x"

    @pytest.mark.parametrize("coefficients, expected", [
        ([0.125, 0.625], "0.13 + 0.63x"),
        ([-0.375], "- 0.38"),
        ([2.5, 0.0, 1.005], "2.50 + 1.00x^2"),
    ])
    def test_ties_round_half_up(self, coefficients, expected):
        # 1.005 is stored just below the tie, so it still rounds down
        assert format_equation(coefficients) == expected

    def test_large_magnitude_is_fixed_point(self):
        assert format_equation([1e22]) == "10000000000000000000000.00"

    def test_accepts_numpy_array(self):
        assert format_equation(np.array([5.0, -0.25])) == "5.00 - 0.25x"

    @pytest.mark.parametrize("threshold, expected", [
        (1e-3, "1.00 + 0.01x"),
        (0.1, "1.00"),
    ])
    def test_custom_threshold(self, threshold, expected):
        assert format_equation([1.0, 0.01], threshold=threshold) == expected

    def test_custom_decimals(self):
        assert format_equation([1.0, -0.5], decimals=3) == "1.000 - 0.500x"
