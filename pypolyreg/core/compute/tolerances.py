"""
Numerical thresholds and tolerance tiers.

Thresholds used by the solver and the equation formatter live here,
together with the tolerance tiers the test suite compares against.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned fits (low degree, moderate x range)
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned design',
)

# Interpolating or high-degree fits; the Vandermonde matrix is
# ill-conditioned, so only a handful of digits survive.
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned Vandermonde design',
)

# Coefficients smaller than this are left out of the formatted equation
EQUATION_THRESHOLD = 1e-3

# Decimal places shown for each coefficient in the formatted equation
EQUATION_DECIMALS = 2


def pinv_cutoff(shape: tuple[int, int], s_max: float) -> float:
    """
    Singular value cutoff for the pseudo-inverse.

    Singular values at or below max(n, p) * eps * s_max are treated as
    zero, the same rule LAPACK's gelsd and numpy's matrix_rank use.
    """
    return max(shape) * np.finfo(np.float64).eps * s_max


# Largest design matrix (n * (degree + 1) entries) fit() will allocate
MAX_DESIGN_ELEMENTS = 2 ** 25
