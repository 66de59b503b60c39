"""
Point data model for pypolyreg.

Point is one observed (x, y) sample; CurvePoint is the same shape but
produced by evaluating a fitted polynomial. PointSet is an immutable
snapshot of the points a user has placed. Every change (add, clear,
reset) produces a new PointSet rather than mutating the old one.

Usage:
    from pypolyreg.core.points import PointSet, Point

    ps = PointSet.from_points([(10, 20), (20, 45)])
    ps = PointSet.from_points([{'x': 10, 'y': 20}])
    ps = PointSet.from_arrays(x=[10, 20], y=[20, 45])
    ps = ps.added(Point(30, 35))

    ps.x   # read-only array([10., 20., 30.])
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypolyreg.core.defaults import DEFAULT_POINTS
from pypolyreg.core.exceptions import DimensionError, ValidationError
from pypolyreg.core.validation import check_1d, check_array, check_consistent_length


class Point(NamedTuple):
    """One observed sample."""
    x: float
    y: float


class CurvePoint(NamedTuple):
    """One sample of a fitted curve."""
    x: float
    y: float


PointLike = Union[Point, tuple[float, float], Mapping[str, float]]


@dataclass(frozen=True)
class PointSet:
    """
    Immutable, ordered collection of points.

    Construct via factory classmethods, not directly. The x and y arrays
    are read-only; order is preserved for display but is irrelevant to
    the fit.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, *, x: ArrayLike, y: ArrayLike) -> PointSet:
        """Construct from parallel x and y arrays."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return cls._build(x_arr, y_arr)

    @classmethod
    def from_points(cls, points: Iterable[PointLike] | ArrayLike) -> PointSet:
        """
        Construct from a sequence of points.

        Accepts Point objects, (x, y) pairs, mappings with 'x' and 'y'
        keys, or an (n, 2) array.
        """
        if isinstance(points, PointSet):
            return points
        if isinstance(points, np.ndarray):
            return cls._from_matrix(points)

        xs: list[float] = []
        ys: list[float] = []
        for i, p in enumerate(points):
            if isinstance(p, Mapping):
                try:
                    xs.append(p['x'])
                    ys.append(p['y'])
                except KeyError as e:
                    raise ValidationError(
                        f"points[{i}]: mapping is missing key {e.args[0]!r}"
                    ) from e
            else:
                try:
                    px, py = p
                except (TypeError, ValueError) as e:
                    raise DimensionError(
                        f"points[{i}]: expected an (x, y) pair, got {p!r}"
                    ) from e
                xs.append(px)
                ys.append(py)

        x_arr = check_array(xs, 'x')
        y_arr = check_array(ys, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        return cls._build(x_arr, y_arr)

    @classmethod
    def _from_matrix(cls, data: NDArray) -> PointSet:
        """Construct from an (n, 2) array of rows (x, y)."""
        data = check_array(data, 'points')
        if data.size == 0:
            return cls.empty()
        if data.ndim != 2 or data.shape[1] != 2:
            raise DimensionError(
                f"points: expected shape (n, 2), got {data.shape}"
            )
        return cls._build(data[:, 0], data[:, 1])

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> PointSet:
        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y)

    @classmethod
    def empty(cls) -> PointSet:
        """A set with no points (the "clear" action)."""
        return cls._build(np.empty(0), np.empty(0))

    @classmethod
    def default(cls) -> PointSet:
        """The seed data the application starts with (and resets to)."""
        return cls.from_points(DEFAULT_POINTS)

    # === Derived Sets ===

    def added(self, point: PointLike) -> PointSet:
        """Return a new set with point appended. self is unchanged."""
        extra = PointSet.from_points([point])
        return PointSet._build(
            np.concatenate([self._x, extra.x]),
            np.concatenate([self._y, extra.y]),
        )

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x coordinates (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y coordinates (n,)."""
        return self._y

    def __len__(self) -> int:
        return self._x.shape[0]

    def __iter__(self) -> Iterator[Point]:
        for x, y in zip(self._x, self._y):
            yield Point(float(x), float(y))

    def __getitem__(self, index: int) -> Point:
        return Point(float(self._x[index]), float(self._y[index]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        return (
            np.array_equal(self._x, other._x)
            and np.array_equal(self._y, other._y)
        )

    def __hash__(self) -> int:
        return hash((self._x.tobytes(), self._y.tobytes()))

    def __repr__(self) -> str:
        return f"PointSet(n={len(self)})"
