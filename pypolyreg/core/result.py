"""
Generic result container for pypolyreg computations.

The Result class is the standardized envelope produced by backends.
Domain solutions (RegressionSolution) wrap it and add convenient
accessors.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, status, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); results are snapshots
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a computation.
    
    Type Parameters:
        P: The domain-specific parameter payload type
        
    Attributes:
        params: Domain-specific parameters (coefficients, statistics, etc.)
        info: Structured metadata (method, status, rank, error message)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=PolynomialParams(...),
        ...     info={'method': 'svd', 'status': 'ok', 'rank': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_svd'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
