"""
Solver dispatch for polynomial regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Any, Literal
import numbers
import warnings

import numpy as np

from pypolyreg.core.exceptions import PyPolyregError, ValidationError
from pypolyreg.core.result import Result
from pypolyreg.regression.design import PolynomialDesign
from pypolyreg.regression.solution import PolynomialParams, RegressionSolution
from pypolyreg.regression.backends.cpu import CPUSVDBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_svd']


def fit(
    points: Any,
    degree: int,
    *,
    backend: BackendChoice = 'auto',
) -> RegressionSolution:
    """
    Fit a least-squares polynomial to a set of points.

    Solves:
        min_β ||y - Xβ||²,   X[i, j] = x_i ** j,  j = 0..degree

    with β = pinv(X) y, so degree may exceed the number of points and
    x values may repeat; the minimum-norm solution is returned then.

    fit() never raises for bad data. An empty point set yields the zero
    model (equation 'y = 0', r2 = 0); any validation or numerical failure
    yields an error result (equation 'Error', r2 = 0) and a
    RuntimeWarning.

    Args:
        points: PointSet, sequence of Point / (x, y) pairs / {'x', 'y'}
            mappings, or an (n, 2) array
        degree: Non-negative polynomial degree
        backend: Computational backend to use:
            - 'auto': Select best available (currently the CPU SVD backend)
            - 'cpu' / 'cpu_svd': CPU SVD pseudo-inverse

    Returns:
        RegressionSolution with coefficients, predict, equation and r2

    Raises:
        ValidationError: If backend is not a known backend name

    Example:
        >>> from pypolyreg.regression import fit
        >>> result = fit([(0, 1), (1, 3), (2, 5)], degree=1)
        >>> result.equation
        '1.00 + 2.00x'
        >>> round(result.predict(3.0), 6)
        7.0
    """
    backend_impl = _get_backend(backend)
    n, d = _peek_shape(points, degree)

    try:
        design = PolynomialDesign.build(points, degree)
        if design.n == 0:
            return RegressionSolution(
                _result=_degenerate_result('empty', backend_impl.name),
                _degree=design.degree,
                _n=0,
            )
        result = backend_impl.solve(design)
    except (
        PyPolyregError, np.linalg.LinAlgError, ValueError, TypeError, MemoryError,
    ) as e:
        message = f"{type(e).__name__}: {e}"
        warnings.warn(
            f"Polynomial regression failed, returning error result. {message}",
            RuntimeWarning,
            stacklevel=2,
        )
        return RegressionSolution(
            _result=_degenerate_result('error', backend_impl.name, error=message),
            _degree=d,
            _n=n,
        )

    return RegressionSolution(_result=result, _degree=design.degree, _n=design.n)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_svd'):
        return CPUSVDBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


def _peek_shape(points: Any, degree: Any) -> tuple[int, int]:
    """Best-effort (n, degree) for labelling an error result."""
    try:
        n = len(points)
    except TypeError:
        n = 0
    if isinstance(degree, numbers.Integral) and not isinstance(degree, bool):
        d = int(degree)
    else:
        d = -1
    return n, d


def _degenerate_result(
    status: str,
    backend_name: str,
    error: str | None = None,
) -> Result[PolynomialParams]:
    """Result with no coefficients, for empty input and failed solves."""
    empty = np.empty(0, dtype=np.float64)
    empty.flags.writeable = False
    params = PolynomialParams(
        coefficients=empty,
        fitted_values=empty,
        residuals=empty,
        singular_values=empty,
        rss=0.0,
        tss=0.0,
        rank=0,
    )
    info: dict[str, Any] = {'method': 'svd', 'status': status, 'rank': 0}
    warnings_: tuple[str, ...] = ()
    if error is not None:
        info['error'] = error
        warnings_ = (error,)
    return Result(
        params=params,
        info=info,
        timing=None,
        backend_name=backend_name,
        warnings=warnings_,
    )
