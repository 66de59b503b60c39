"""
Polynomial regression design.

The design turns a point set and a degree into the Vandermonde matrix
X (X[i, j] = x_i ** j) and the response vector y. It knows it is
building a polynomial fit; PointSet doesn't.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pypolyreg.core.compute.tolerances import MAX_DESIGN_ELEMENTS
from pypolyreg.core.exceptions import NumericalError
from pypolyreg.core.points import PointSet
from pypolyreg.core.validation import check_degree, check_finite


@dataclass(frozen=True)
class PolynomialDesign:
    """
    Polynomial regression design matrix specification.

    Immutable after construction.

    Construction:
        PolynomialDesign.build(points, degree)
        PolynomialDesign.from_arrays(x, y, degree)
    """
    _points: PointSet
    _X: NDArray[np.floating[Any]]
    _degree: int

    @classmethod
    def build(cls, points: Any, degree: int) -> PolynomialDesign:
        """
        Build a design from any accepted point input.

        Args:
            points: PointSet, sequence of points, or (n, 2) array
            degree: Non-negative polynomial degree

        Returns:
            Design ready for solving

        Raises:
            ValidationError: If points or degree are invalid, or if any
                coordinate is non-finite
            NumericalError: If x ** degree overflows, or the matrix would
                exceed MAX_DESIGN_ELEMENTS entries
        """
        degree = check_degree(degree)
        points = PointSet.from_points(points)
        check_finite(points.x, 'x')
        check_finite(points.y, 'y')

        if len(points) * (degree + 1) > MAX_DESIGN_ELEMENTS:
            raise NumericalError(
                f"Design matrix too large: {len(points)} points x "
                f"{degree + 1} coefficients exceeds {MAX_DESIGN_ELEMENTS} entries",
                stage='design',
            )

        with np.errstate(over='ignore'):
            X = np.vander(points.x, degree + 1, increasing=True)
        if not np.all(np.isfinite(X)):
            raise NumericalError(
                f"Design matrix overflows: max |x| = {np.max(np.abs(points.x)):g} "
                f"raised to degree {degree}",
                stage='design',
            )
        X.flags.writeable = False

        return cls(_points=points, _X=X, _degree=degree)

    @classmethod
    def from_arrays(cls, x: Any, y: Any, degree: int) -> PolynomialDesign:
        """Build a design directly from parallel x and y arrays."""
        return cls.build(PointSet.from_arrays(x=x, y=y), degree)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Vandermonde matrix (n x (degree + 1)), ascending powers."""
        return self._X

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._points.x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._points.y

    @property
    def points(self) -> PointSet:
        return self._points

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def n(self) -> int:
        """Number of points."""
        return len(self._points)

    @property
    def p(self) -> int:
        """Number of coefficients (degree + 1)."""
        return self._degree + 1

    @property
    def is_underdetermined(self) -> bool:
        """True when there are fewer points than coefficients."""
        return self.n < self.p
