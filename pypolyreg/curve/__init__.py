"""
Curve sampling for plotting.

Public API:
    sample(predict, x_min, x_max, steps) -> CurveSolution
"""

from pypolyreg.curve.design import SamplingDesign
from pypolyreg.curve.solution import CurveSolution
from pypolyreg.curve.solvers import sample

__all__ = [
    "sample",
    "SamplingDesign",
    "CurveSolution",
]
