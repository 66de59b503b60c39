"""
Core infrastructure for pypolyreg.

This module provides the shared abstractions and utilities used by the
regression and curve submodules.

Key components:
    points: Point, CurvePoint and the immutable PointSet
    defaults: Seed data, degree range, plotting viewport
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, SVD kernels
"""

from pypolyreg.core.points import Point, CurvePoint, PointSet
from pypolyreg.core.protocols import Backend
from pypolyreg.core.result import Result
from pypolyreg.core.exceptions import (
    PyPolyregError,
    ValidationError,
    DimensionError,
    NumericalError,
)

__all__ = [
    # Data model
    "Point",
    "CurvePoint",
    "PointSet",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyPolyregError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
]
