"""
Polynomial least-squares regression.

Public API:
    fit(points, degree, ...) -> RegressionSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design (Vandermonde matrix) construction
    - Backend selection
    - Result wrapping, including the empty and error results

Example:
    >>> from pypolyreg.regression import fit
    >>> result = fit([(10, 20), (20, 45), (30, 35)], degree=2)
    >>> print(result.equation)
    >>> print(result.r2)
    >>> result.predict(25.0)
"""

from pypolyreg.regression.design import PolynomialDesign
from pypolyreg.regression.solution import (
    Polynomial,
    PolynomialParams,
    RegressionSolution,
)
from pypolyreg.regression._equation import format_equation
from pypolyreg.regression.solvers import fit

__all__ = [
    "fit",
    "format_equation",
    "Polynomial",
    "PolynomialDesign",
    "PolynomialParams",
    "RegressionSolution",
]
