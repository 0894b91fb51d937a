"""
Core infrastructure for pymatrix.

Shared abstractions used by the matrix container and the square-matrix
algorithms.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    options: Immutable configuration presets
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    RankDeficiencyWarning,
)
from pymatrix.core.options import DisplayOptions, DEFAULT_DISPLAY

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "RankDeficiencyWarning",
    # Options
    "DisplayOptions",
    "DEFAULT_DISPLAY",
]
