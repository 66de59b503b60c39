"""
Shared compute infrastructure for pypolyreg.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Thresholds and tolerance tiers
    linalg: SVD and pseudo-inverse kernels
"""

from pypolyreg.core.compute.timing import Timer
from pypolyreg.core.compute.tolerances import (
    ToleranceTier,
    EQUATION_THRESHOLD,
    EQUATION_DECIMALS,
    pinv_cutoff,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "EQUATION_THRESHOLD",
    "EQUATION_DECIMALS",
    "pinv_cutoff",
]
