"""
Curve sampling design.

Validates the sampling interval and produces the evenly spaced x grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pypolyreg.core.validation import check_integer, check_scalar


@dataclass(frozen=True)
class SamplingDesign:
    """
    Evenly spaced sampling of [x_min, x_max] into steps segments.

    Immutable after construction. x_min > x_max is allowed and samples
    right to left; x_min == x_max yields steps + 1 copies of one x.
    """
    x_min: float
    x_max: float
    steps: int

    @classmethod
    def build(cls, x_min: Any, x_max: Any, steps: Any) -> SamplingDesign:
        """
        Raises:
            ValidationError: If a bound is not a finite real, or steps is
                not an integer >= 1
        """
        return cls(
            x_min=check_scalar(x_min, 'x_min'),
            x_max=check_scalar(x_max, 'x_max'),
            steps=check_integer(steps, 'steps', minimum=1),
        )

    @property
    def step_size(self) -> float:
        return (self.x_max - self.x_min) / self.steps

    def grid(self) -> NDArray[np.floating[Any]]:
        """x_min + i * step_size for i in 0..steps, last value pinned to x_max."""
        x = self.x_min + np.arange(self.steps + 1, dtype=np.float64) * self.step_size
        x[-1] = self.x_max
        return x
