"""
Tests for PolynomialDesign.
"""

import numpy as np
import pytest

from pypolyreg.core.exceptions import NumericalError, ValidationError
from pypolyreg.regression import PolynomialDesign


class TestDesignBuild:

    def test_vandermonde_ascending(self):
        design = PolynomialDesign.build([(2.0, 1.0), (3.0, 0.0)], 3)
        np.testing.assert_array_equal(
            design.X,
            [[1.0, 2.0, 4.0, 8.0],
             [1.0, 3.0, 9.0, 27.0]],
        )

    def test_shape_properties(self, seed_points):
        design = PolynomialDesign.build(seed_points, 2)
        assert design.n == 7
        assert design.p == 3
        assert design.degree == 2
        assert design.X.shape == (7, 3)
        assert not design.is_underdetermined

    def test_degree_zero_is_column_of_ones(self, seed_points):
        design = PolynomialDesign.build(seed_points, 0)
        np.testing.assert_array_equal(design.X, np.ones((7, 1)))

    def test_underdetermined_flag(self):
        assert PolynomialDesign.build([(0, 0), (1, 1)], 4).is_underdetermined

    def test_from_arrays(self):
        design = PolynomialDesign.from_arrays([0, 1, 2], [1, 3, 5], 1)
        np.testing.assert_array_equal(design.y, [1.0, 3.0, 5.0])
        np.testing.assert_array_equal(design.x, [0.0, 1.0, 2.0])

    def test_empty(self):
        design = PolynomialDesign.build([], 2)
        assert design.n == 0
        assert design.X.shape == (0, 3)

    def test_read_only(self, seed_points):
        design = PolynomialDesign.build(seed_points, 1)
        with pytest.raises(ValueError):
            design.X[0, 0] = 2.0


class TestDesignValidation:

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            PolynomialDesign.build([(0.0, np.nan)], 1)

    def test_negative_degree(self):
        with pytest.raises(ValidationError):
            PolynomialDesign.build([(0.0, 1.0)], -2)

    def test_overflow(self):
        with pytest.raises(NumericalError) as exc_info:
            PolynomialDesign.build([(1e200, 0.0)], 2)
        assert exc_info.value.stage == 'design'

    def test_oversized_matrix_rejected_before_allocation(self):
        with pytest.raises(NumericalError, match="too large") as exc_info:
            PolynomialDesign.build([(0.0, 1.0), (1.0, 2.0)], 10 ** 9)
        assert exc_info.value.stage == 'design'

    def test_empty_points_with_huge_degree(self):
        design = PolynomialDesign.build([], 10 ** 9)
        assert design.n == 0
