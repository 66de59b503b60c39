"""
SVD-based pseudo-inverse and least-squares solve.

The pseudo-inverse route is robust to singular and ill-conditioned
design matrices: it always returns a solution, and when the system is
rank-deficient it returns the minimum-norm one. A normal-equations
inverse (X'X)^-1 X'y offers neither guarantee.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sp_linalg

from pypolyreg.core.compute.tolerances import pinv_cutoff
from pypolyreg.core.exceptions import NumericalError


@dataclass(frozen=True)
class SVDResult:
    """
    Result of a thin singular value decomposition X = U diag(s) Vt.
    
    Attributes:
        U: Left singular vectors (n x k, k = min(n, p))
        s: Singular values, descending (k,)
        Vt: Right singular vectors, transposed (k x p)
        rank: Number of singular values above the pseudo-inverse cutoff
        cutoff: The cutoff that determined rank
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vt: NDArray[np.floating[Any]]
    rank: int
    cutoff: float


def svd_cpu(X: NDArray[np.floating[Any]]) -> SVDResult:
    """
    Thin SVD using LAPACK (via SciPy).
    
    Uses the divide-and-conquer driver (gesdd) and falls back to the
    slower but more robust gesvd when gesdd fails to converge.
    
    Args:
        X: Matrix to decompose (n x p)
        
    Returns:
        SVDResult with U, s, Vt and numerical rank
        
    Raises:
        numpy.linalg.LinAlgError: If neither driver converges
    """
    try:
        U, s, Vt = sp_linalg.svd(
            X, full_matrices=False, check_finite=False, lapack_driver='gesdd'
        )
    except np.linalg.LinAlgError:
        U, s, Vt = sp_linalg.svd(
            X, full_matrices=False, check_finite=False, lapack_driver='gesvd'
        )
    
    s_max = float(s[0]) if s.size > 0 else 0.0
    cutoff = pinv_cutoff(X.shape, s_max)
    rank = int(np.sum(s > cutoff))
    
    return SVDResult(U=U, s=s, Vt=Vt, rank=rank, cutoff=cutoff)


def pinv_cpu(svd: SVDResult) -> NDArray[np.floating[Any]]:
    """
    Moore-Penrose pseudo-inverse from a precomputed SVD.
    
    pinv(X) = V diag(1/s_i) U', with 1/s_i replaced by 0 for singular
    values at or below the cutoff.
    
    Returns:
        Pseudo-inverse (p x n)
    """
    s_inv = np.zeros_like(svd.s)
    keep = svd.s > svd.cutoff
    s_inv[keep] = 1.0 / svd.s[keep]
    return (svd.Vt.T * s_inv) @ svd.U.T


def column_norms(X: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Euclidean norm of each column, with zero columns mapped to 1.
    
    Computed as max|X_j| * ||X_j / max|X_j|||, so columns whose squared
    entries would overflow still get a finite norm.
    """
    peak = np.max(np.abs(X), axis=0) if X.shape[0] > 0 else np.zeros(X.shape[1])
    peak[peak == 0] = 1.0
    return peak * np.sqrt(np.sum((X / peak) ** 2, axis=0))


def pinv_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    equilibrate: bool = True,
) -> tuple[NDArray[np.floating[Any]], SVDResult]:
    """
    Minimum-norm least-squares solve via the pseudo-inverse.
    
    Solves min_β ||y - Xβ||² as β = pinv(X) y. Works for any shape of X,
    including n < p and repeated rows.

    With equilibrate=True (the default) each column is divided by its
    norm before the SVD and β is unscaled afterwards, as numpy's polyfit
    does. Vandermonde columns span many orders of magnitude, and without
    this the relative cutoff discards directions the data determines.
    The minimum-norm property then holds for the scaled coefficients
    β_j * ||X_j||, not for β itself.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)
        equilibrate: Scale columns to unit norm before decomposing

    Returns:
        (β, svd) with β of shape (p,) and the decomposition used
        (of the scaled matrix when equilibrate is True)

    Raises:
        NumericalError: If β is not finite
        numpy.linalg.LinAlgError: If the SVD does not converge
    """
    if equilibrate:
        scale = column_norms(X)
        svd = svd_cpu(X / scale)
        beta = (pinv_cpu(svd) @ y) / scale
    else:
        svd = svd_cpu(X)
        beta = pinv_cpu(svd) @ y
    
    if not np.all(np.isfinite(beta)):
        raise NumericalError(
            f"Pseudo-inverse solve produced non-finite coefficients "
            f"(rank={svd.rank}, shape={X.shape})",
            stage='solve',
        )
    
    return beta, svd
