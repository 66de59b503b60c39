"""
Application defaults for pypolyreg.

This module is the SINGLE SOURCE OF TRUTH for the seed data, the degree
range offered by the UI, and the plotting viewport. Hosts import from
here rather than repeating the numbers.

Usage:
    from pypolyreg.core.defaults import DEFAULT_VIEWPORT, DEFAULT_DEGREE

    curve = sample(result.predict, DEFAULT_VIEWPORT.x_min,
                   DEFAULT_VIEWPORT.x_max, DEFAULT_VIEWPORT.steps)
"""

from __future__ import annotations

from dataclasses import dataclass

from pypolyreg.core.exceptions import ValidationError
from pypolyreg.core.validation import check_degree, check_integer, check_scalar

# Seed data shown on start-up and restored by "reset"
DEFAULT_POINTS: tuple[tuple[float, float], ...] = (
    (10.0, 20.0),
    (20.0, 45.0),
    (30.0, 35.0),
    (40.0, 65.0),
    (50.0, 55.0),
    (60.0, 80.0),
    (70.0, 70.0),
)

DEFAULT_DEGREE = 2

# Degree range offered by the UI slider. The solver itself accepts any
# non-negative degree.
MIN_DEGREE = 1
MAX_DEGREE = 15


@dataclass(frozen=True)
class Viewport:
    """
    Plotting window in data coordinates.

    Attributes:
        x_min, x_max: Horizontal extent, also the curve sampling interval
        y_min, y_max: Vertical extent; curve points outside are clipped
            by the renderer
        steps: Number of curve segments sampled across [x_min, x_max]
    """
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    steps: int

    def __post_init__(self) -> None:
        for name in ('x_min', 'x_max', 'y_min', 'y_max'):
            check_scalar(getattr(self, name), name)
        check_integer(self.steps, 'steps', minimum=1)
        if self.x_min >= self.x_max:
            raise ValidationError(
                f"Viewport: x_min ({self.x_min}) must be < x_max ({self.x_max})"
            )
        if self.y_min >= self.y_max:
            raise ValidationError(
                f"Viewport: y_min ({self.y_min}) must be < y_max ({self.y_max})"
            )

    def contains(self, point: tuple[float, float]) -> bool:
        """True if point lies inside the window (edges included)."""
        x, y = point
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


DEFAULT_VIEWPORT = Viewport(x_min=0.0, x_max=100.0, y_min=0.0, y_max=100.0, steps=200)


def clamp_degree(degree: int) -> int:
    """Clamp a degree into the UI range [MIN_DEGREE, MAX_DEGREE]."""
    degree = check_degree(degree)
    return min(max(degree, MIN_DEGREE), MAX_DEGREE)


__all__ = [
    'DEFAULT_POINTS',
    'DEFAULT_DEGREE',
    'MIN_DEGREE',
    'MAX_DEGREE',
    'Viewport',
    'DEFAULT_VIEWPORT',
    'clamp_degree',
]
