"""
Curve solution type.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, overload
import numpy as np
from numpy.typing import NDArray

from pypolyreg.core.points import CurvePoint


@dataclass(frozen=True, eq=False)
class CurveSolution(Sequence[CurvePoint]):
    """
    Sampled curve, ready for drawing as a connected polyline.

    Behaves as a read-only sequence of CurvePoint and also exposes the
    coordinates as arrays.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def steps(self) -> int:
        """Number of segments (len - 1)."""
        return len(self) - 1

    def __len__(self) -> int:
        return self._x.shape[0]

    @overload
    def __getitem__(self, index: int) -> CurvePoint: ...

    @overload
    def __getitem__(self, index: slice) -> list[CurvePoint]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [CurvePoint(float(x), float(y))
                    for x, y in zip(self._x[index], self._y[index])]
        return CurvePoint(float(self._x[index]), float(self._y[index]))

    def __iter__(self) -> Iterator[CurvePoint]:
        for x, y in zip(self._x, self._y):
            yield CurvePoint(float(x), float(y))

    def __repr__(self) -> str:
        if len(self) == 0:
            return "CurveSolution(n=0)"
        return (
            f"CurveSolution(n={len(self)}, "
            f"x=[{self._x[0]:g}, {self._x[-1]:g}])"
        )
