"""
Linear algebra kernels for pypolyreg.

Only what the least-squares solve needs: a thin SVD, the pseudo-inverse
built from it, and the minimum-norm solve. CPU functions use SciPy
(LAPACK under the hood).
"""

from pypolyreg.core.compute.linalg.svd import (
    SVDResult,
    column_norms,
    svd_cpu,
    pinv_cpu,
    pinv_solve_cpu,
)

__all__ = [
    "SVDResult",
    "column_norms",
    "svd_cpu",
    "pinv_cpu",
    "pinv_solve_cpu",
]
