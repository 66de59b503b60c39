"""
Regression solution types.

Contains the prediction value object, the parameter payload computed by
backends, and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, overload
import numpy as np
from numpy.polynomial import polynomial as P
from numpy.typing import ArrayLike, NDArray

from pypolyreg.core.result import Result
from pypolyreg.regression._equation import ERROR_EQUATION, format_equation

Status = Literal['ok', 'empty', 'error']


@dataclass(frozen=True)
class Polynomial:
    """
    Stateless prediction function.

    Holds only the coefficients (ascending powers); evaluation is a pure
    function of (coefficients, x). An empty coefficient tuple evaluates
    to 0 everywhere, so a Polynomial is always callable.

    Example:
        >>> f = Polynomial((1.0, 0.0, 2.0))
        >>> f(3.0)
        19.0
    """
    coefficients: tuple[float, ...] = ()

    @overload
    def __call__(self, x: float) -> float: ...

    @overload
    def __call__(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]: ...

    def __call__(self, x):
        return evaluate(self.coefficients, x)

    @property
    def degree(self) -> int:
        """Highest power held, or -1 for the zero polynomial with no terms."""
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)


def evaluate(coefficients: tuple[float, ...] | NDArray, x: ArrayLike) -> Any:
    """
    Evaluate sum_j coefficients[j] * x ** j.

    Scalars in, float out; arrays in, arrays out.
    """
    if np.ndim(x) == 0:
        if len(coefficients) == 0:
            return 0.0
        return float(P.polyval(float(x), coefficients))

    x = np.asarray(x, dtype=np.float64)
    if len(coefficients) == 0:
        return np.zeros_like(x)
    return P.polyval(x, coefficients)


@dataclass(frozen=True)
class PolynomialParams:
    """
    Parameter payload for polynomial regression.

    This is the immutable data computed by backends. All arrays are empty
    for the degenerate (no points) and error results.
    """
    coefficients: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int


@dataclass(frozen=True, eq=False)
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the backend Result. Always a valid object: an empty point set
    or a failed solve is reported through status, equation and r2 rather
    than an exception.
    """
    _result: Result[PolynomialParams]
    _degree: int
    _n: int

    @property
    def status(self) -> Status:
        """'ok', 'empty' (no points) or 'error' (solve failed)."""
        return self._result.info['status']

    @property
    def ok(self) -> bool:
        return self.status == 'ok'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients in ascending power order; length degree + 1 when ok."""
        return self._result.params.coefficients

    @property
    def predict(self) -> Polynomial:
        return Polynomial(tuple(float(c) for c in self.coefficients))

    @property
    def equation(self) -> str:
        if self.status == 'error':
            return ERROR_EQUATION
        return format_equation(self.coefficients)

    @property
    def r2(self) -> float:
        """
        Coefficient of determination, 1 - rss / tss.

        Not bounded below: a fit worse than the mean gives r2 < 0. When
        tss is exactly 0 (all y equal) it is replaced by 1, so the result
        is 1 - rss rather than undefined. Empty and error results report 0.
        """
        if self.status != 'ok':
            return 0.0
        tss = self.tss if self.tss != 0 else 1.0
        return 1.0 - self.rss / tss

    @property
    def r_squared(self) -> float:
        return self.r2

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.singular_values

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def n_points(self) -> int:
        return self._n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary of the fit."""
        lines = [
            "Polynomial Regression Results",
            "=" * 60,
            f"Status: {self.status}",
            f"Points: {self.n_points}",
            f"Degree: {self.degree}",
            f"Rank: {self.rank}",
            f"R-squared: {self.r2:.6f}",
            f"Equation: {self.equation}",
        ]

        if len(self.coefficients) > 0:
            lines.extend([
                "",
                "Coefficients:",
                "-" * 60,
            ])
            for j, coef in enumerate(self.coefficients):
                lines.append(f"  x^{j:<3d} {coef: .6e}")
            lines.append("-" * 60)

        if self.status == 'error':
            lines.append(f"Error: {self.info.get('error', 'unknown')}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(status={self.status!r}, n={self.n_points}, "
            f"degree={self.degree}, r2={self.r2:.4f})"
        )
