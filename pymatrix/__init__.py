"""
pymatrix: small integer square-matrix toolkit.

Dense integer matrices with the classic textbook algorithms: cofactor
determinant, transpose, Gauss-Jordan inverse, upper-triangular reduction,
and trace.

Submodules:
    core: Exceptions, validators, configuration presets
    matrix: Matrix, the rectangular integer container
    square: SquareMatrix and its algorithms
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymatrix.matrix import Matrix
from pymatrix.square import SquareMatrix
from pymatrix.core.options import DisplayOptions, DEFAULT_DISPLAY
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    RankDeficiencyWarning,
)

__all__ = [
    "__version__",
    "Matrix",
    "SquareMatrix",
    "DisplayOptions",
    "DEFAULT_DISPLAY",
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "RankDeficiencyWarning",
]
