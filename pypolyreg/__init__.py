"""
pypolyreg: polynomial least-squares regression for interactive teaching.

Place points, pick a degree, and get back the fitted coefficients, a
prediction function, R² and a printable equation, plus an evenly
sampled curve for plotting.

Submodules:
    regression: fit() - the SVD-based least-squares solver
    curve: sample() - evenly spaced curve points
    pipeline: recompute() - fit then sample, in one call
    core: data model, defaults, validation, linear algebra kernels
"""

__version__ = "0.1.0"

from pypolyreg.core.points import Point, CurvePoint, PointSet
from pypolyreg.core.defaults import DEFAULT_DEGREE, DEFAULT_VIEWPORT, Viewport
from pypolyreg.regression import fit, format_equation, RegressionSolution
from pypolyreg.curve import sample, CurveSolution
from pypolyreg.pipeline import recompute, RegressionView

__all__ = [
    "__version__",
    "fit",
    "sample",
    "recompute",
    "format_equation",
    "Point",
    "CurvePoint",
    "PointSet",
    "Viewport",
    "DEFAULT_DEGREE",
    "DEFAULT_VIEWPORT",
    "RegressionSolution",
    "CurveSolution",
    "RegressionView",
]
