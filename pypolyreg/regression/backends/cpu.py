"""
CPU reference backend for polynomial regression.

Solves the least-squares problem with the SVD pseudo-inverse (LAPACK
through SciPy), which returns the minimum-norm solution when the
Vandermonde matrix is rank-deficient: degree >= number of points, or
repeated x values.
"""

from typing import Any
import numpy as np

from pypolyreg.core.result import Result
from pypolyreg.core.compute.timing import Timer
from pypolyreg.core.compute.linalg.svd import pinv_solve_cpu
from pypolyreg.regression.design import PolynomialDesign
from pypolyreg.regression.solution import PolynomialParams, evaluate


class CPUSVDBackend:
    """
    CPU backend using the SVD pseudo-inverse.
    
    Implements the Backend protocol for PolynomialDesign -> PolynomialParams.
    """
    
    @property
    def name(self) -> str:
        return 'cpu_svd'
    
    def solve(self, design: PolynomialDesign) -> Result[PolynomialParams]:
        """
        Solve least squares via the pseudo-inverse.
        
        Algorithm:
            1. Scale each column of X to unit norm, then thin SVD:
               X / d = U diag(s) V'
            2. β = V diag(1/s) U'y / d, dropping singular values below cutoff
            3. Evaluate the polynomial at each x for fitted values
            4. Residual and total sums of squares
            
        Args:
            design: Validated polynomial design with at least one point
            
        Returns:
            Result containing PolynomialParams
            
        Raises:
            NumericalError: If the coefficients are not finite
            numpy.linalg.LinAlgError: If the SVD does not converge
        """
        timer = Timer()
        timer.start()
        
        X = design.X
        x = design.x
        y = design.y
        
        # === Pseudo-inverse Solve ===
        with timer.section('svd'):
            coefficients, svd = pinv_solve_cpu(X, y)
        coefficients.flags.writeable = False
        
        # === Fitted Values and Residuals ===
        with timer.section('statistics'):
            fitted_values = evaluate(coefficients, x)
            residuals = y - fitted_values
            rss = float(residuals @ residuals)
            y_mean = np.mean(y)
            tss = float(np.sum((y - y_mean) ** 2))
        
        timer.stop()
        
        params = PolynomialParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            singular_values=svd.s,
            rss=rss,
            tss=tss,
            rank=svd.rank,
        )
        
        info: dict[str, Any] = {
            'method': 'svd',
            'status': 'ok',
            'rank': svd.rank,
            'cutoff': svd.cutoff,
            'underdetermined': design.is_underdetermined,
        }
        
        warnings: tuple[str, ...] = ()
        if svd.rank < design.p:
            warnings = (
                f"Design matrix is rank-deficient (rank={svd.rank}, "
                f"coefficients={design.p}); returned the minimum-norm solution",
            )
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
