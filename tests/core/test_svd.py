"""
Tests for the SVD pseudo-inverse kernels.

Compares against numpy's pinv and lstsq, which use the same LAPACK
routines and cutoff rule, on column-scaled matrices where the solve
equilibrates.
"""

import numpy as np
import pytest

from pypolyreg.core.compute.linalg import column_norms, pinv_cpu, pinv_solve_cpu, svd_cpu
from pypolyreg.core.compute.tolerances import pinv_cutoff
from pypolyreg.core.exceptions import NumericalError


class TestSVD:

    def test_full_rank(self, rng):
        X = rng.standard_normal((10, 3))
        svd = svd_cpu(X)
        assert svd.rank == 3
        assert svd.U.shape == (10, 3)
        assert svd.s.shape == (3,)
        assert svd.Vt.shape == (3, 3)
        np.testing.assert_allclose((svd.U * svd.s) @ svd.Vt, X, atol=1e-12)

    def test_rank_deficient_columns(self, rng):
        a = rng.standard_normal(8)
        X = np.column_stack([a, 2.0 * a, rng.standard_normal(8)])
        assert svd_cpu(X).rank == 2

    def test_wide_matrix(self):
        X = np.vander([0.0, 1.0, 2.0], 6, increasing=True)
        svd = svd_cpu(X)
        assert svd.rank == 3
        assert svd.s.shape == (3,)

    def test_cutoff_rule(self, rng):
        X = rng.standard_normal((5, 4))
        svd = svd_cpu(X)
        assert svd.cutoff == pytest.approx(pinv_cutoff(X.shape, svd.s[0]))


class TestPinv:

    def test_matches_numpy_pinv(self, rng):
        X = rng.standard_normal((7, 4))
        np.testing.assert_allclose(pinv_cpu(svd_cpu(X)), np.linalg.pinv(X), atol=1e-10)

    def test_matches_numpy_pinv_rank_deficient(self):
        X = np.array([[1.0, 1.0], [1.0, 1.0], [1.0, 1.0]])
        np.testing.assert_allclose(pinv_cpu(svd_cpu(X)), np.linalg.pinv(X), atol=1e-12)


class TestPinvSolve:

    def test_overdetermined_matches_lstsq(self, rng):
        X = rng.standard_normal((30, 4))
        y = rng.standard_normal(30)
        beta, _ = pinv_solve_cpu(X, y)
        expected = np.linalg.lstsq(X, y, rcond=None)[0]
        np.testing.assert_allclose(beta, expected, atol=1e-10)

    def test_underdetermined_is_minimum_norm_in_scaled_columns(self):
        X = np.vander([0.0, 1.0, 2.0], 5, increasing=True)
        y = np.array([1.0, -1.0, 4.0])
        beta, svd = pinv_solve_cpu(X, y)
        scale = np.linalg.norm(X, axis=0)
        expected = np.linalg.lstsq(X / scale, y, rcond=None)[0] / scale
        np.testing.assert_allclose(beta, expected, atol=1e-10)
        np.testing.assert_allclose(X @ beta, y, atol=1e-10)
        assert svd.rank == 3

    def test_non_finite_result_raises(self):
        X = np.array([[1.0], [1.0]])
        y = np.array([np.inf, 1.0])
        with pytest.raises(NumericalError, match="non-finite"):
            pinv_solve_cpu(X, y)

    def test_without_equilibration_is_raw_minimum_norm(self):
        X = np.vander([0.0, 1.0, 2.0], 5, increasing=True)
        y = np.array([1.0, -1.0, 4.0])
        beta, _ = pinv_solve_cpu(X, y, equilibrate=False)
        expected = np.linalg.lstsq(X, y, rcond=None)[0]
        np.testing.assert_allclose(beta, expected, atol=1e-10)

    def test_wide_range_vandermonde_keeps_full_rank(self):
        # Raw columns span x**0 .. 70**15; scaling keeps every direction
        x = np.array([10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0])
        y = np.array([20.0, 45.0, 35.0, 65.0, 55.0, 80.0, 70.0])
        X = np.vander(x, 16, increasing=True)
        beta, svd = pinv_solve_cpu(X, y)
        assert svd.rank == 7
        np.testing.assert_allclose(X @ beta, y, rtol=1e-6, atol=1e-6)
        assert svd_cpu(X).rank < 7


class TestColumnNorms:

    def test_matches_numpy_norm(self, rng):
        X = rng.standard_normal((6, 3))
        np.testing.assert_allclose(column_norms(X), np.linalg.norm(X, axis=0))

    def test_zero_column_maps_to_one(self):
        X = np.array([[0.0, 3.0], [0.0, 4.0]])
        np.testing.assert_allclose(column_norms(X), [1.0, 5.0])

    def test_no_overflow_for_huge_entries(self):
        X = np.array([[1e200], [1e200]])
        np.testing.assert_allclose(column_norms(X), [np.sqrt(2.0) * 1e200])
