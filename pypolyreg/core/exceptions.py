"""
Exception hierarchy for pypolyreg.

All exceptions inherit from PyPolyregError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Note that fit() converts these into an error result rather than
letting them escape; the validators still raise so that the failure
reason can be recorded.
"""


class PyPolyregError(Exception):
    """Base exception for all pypolyreg errors."""
    pass


class ValidationError(PyPolyregError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when point data does not have the (x, y) shape or when the
    x and y arrays have different lengths.
    """
    pass


class NumericalError(PyPolyregError):
    """
    Numerical computation failed.
    
    Raised when the least-squares solve produces a result that cannot
    be used (non-finite design matrix or coefficients).
    
    Attributes:
        stage: Computation stage that failed ('design', 'svd', 'solve')
    """
    
    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage
