"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, indices, element values,
    options) fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    Matrix dimensions are invalid.

    Raised when a dimension is not a positive integer, when array input is
    not two-dimensional, or when a square matrix is requested from
    non-square data.

    Attributes:
        rows: Offending row count, if known
        cols: Offending column count, if known
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index lies outside the matrix.

    Valid positions are 0 <= i < rows and 0 <= j < cols. Negative indices
    are never wrapped around.

    Attributes:
        index: The (i, j) pair that was requested
        shape: The (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when inversion meets an exactly-zero pivot on the diagonal of
    the augmented matrix.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column of the zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class RankDeficiencyWarning(UserWarning):
    """
    Elimination found a column without a usable pivot.

    Issued by SquareMatrix.upper_triangular() when no row at or below the
    diagonal has a nonzero entry in the pivot column. The reduction still
    completes.
    """
    pass
