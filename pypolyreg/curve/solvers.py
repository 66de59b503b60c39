"""
Curve sampling.

sample() evaluates a prediction function on an evenly spaced grid.
"""

from collections.abc import Callable

import numpy as np

from pypolyreg.curve.design import SamplingDesign
from pypolyreg.curve.solution import CurveSolution


def sample(
    predict: Callable[[float], float],
    x_min: float,
    x_max: float,
    steps: int = 100,
) -> CurveSolution:
    """
    Sample predict at steps + 1 evenly spaced points of [x_min, x_max].

    x_i = x_min + i * (x_max - x_min) / steps for i = 0..steps; both
    endpoints are always included. predict is called once per point
    with a float, so any float -> float callable works.

    Args:
        predict: Prediction function, e.g. RegressionSolution.predict
        x_min: Left end of the interval
        x_max: Right end of the interval
        steps: Number of segments, >= 1

    Returns:
        CurveSolution with steps + 1 CurvePoints

    Raises:
        ValidationError: If steps < 1 or a bound is not finite

    Example:
        >>> curve = sample(lambda x: x * x, 0, 100, 200)
        >>> len(curve), curve[0].x, curve[-1].x
        (201, 0.0, 100.0)
    """
    design = SamplingDesign.build(x_min, x_max, steps)
    x = design.grid()
    y = np.array([float(predict(float(xi))) for xi in x], dtype=np.float64)
    x.flags.writeable = False
    y.flags.writeable = False
    return CurveSolution(_x=x, _y=y)
