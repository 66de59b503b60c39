"""
Recompute pipeline.

The host application calls recompute() whenever the point set or the
degree changes. Every call is independent: points + degree -> fit ->
sample -> view. How often the host calls it (on every click, debounced,
...) is the host's business.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pypolyreg.core.defaults import DEFAULT_VIEWPORT, Viewport
from pypolyreg.curve import CurveSolution, sample
from pypolyreg.regression import RegressionSolution, fit
from pypolyreg.regression.solvers import BackendChoice


@dataclass(frozen=True, eq=False)
class RegressionView:
    """Everything the rendering layer needs for one (points, degree) state."""
    result: RegressionSolution
    curve: CurveSolution
    viewport: Viewport

    @property
    def equation(self) -> str:
        return self.result.equation

    @property
    def r2(self) -> float:
        return self.result.r2

    @property
    def n_points(self) -> int:
        return self.result.n_points


def recompute(
    points: Any,
    degree: int,
    *,
    viewport: Viewport = DEFAULT_VIEWPORT,
    backend: BackendChoice = 'auto',
) -> RegressionView:
    """
    Fit points and sample the fitted curve across the viewport.

    Args:
        points: Anything fit() accepts
        degree: Polynomial degree
        viewport: Sampling interval and resolution
        backend: Passed through to fit()

    Returns:
        RegressionView with the fit result and viewport.steps + 1 curve points
    """
    result = fit(points, degree, backend=backend)
    curve = sample(result.predict, viewport.x_min, viewport.x_max, viewport.steps)
    return RegressionView(result=result, curve=curve, viewport=viewport)
