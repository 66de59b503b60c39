"""
Regression backends.

Available backends:
    CPUSVDBackend: CPU reference implementation using the SVD pseudo-inverse
"""

from pypolyreg.regression.backends.cpu import CPUSVDBackend

__all__ = [
    "CPUSVDBackend",
]
