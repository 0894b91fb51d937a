"""
SquareMatrix: determinant, transpose, inverse, upper-triangular form, trace.

All algorithms work on the current contents of an n x n integer matrix.
Inexact arithmetic runs on a float64 working copy; results that return a
matrix are stored back into the integer container through the truncating
store (Matrix.from_real), so fractional values are cut toward zero.

Operations never mutate the receiver. Matrix-valued results are fresh
SquareMatrix instances.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    NumericalError,
    SingularMatrixError,
    RankDeficiencyWarning,
)
from pymatrix.core.validation import (
    INT64_MIN,
    INT64_MAX,
    check_2d,
    check_square,
    check_dimension,
)
from pymatrix.matrix import Matrix


def _determinant(matrix: NDArray[np.float64]) -> float:
    """
    Laplace expansion along the first row.

    O(n!) with no memoisation; intended for small matrices.
    """
    n = matrix.shape[0]
    if n == 1:
        return float(matrix[0, 0])
    if n == 2:
        return float(matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0])

    det = 0.0
    for p in range(n):
        sign = 1 if p % 2 == 0 else -1
        det += matrix[0, p] * _determinant(_minor(matrix, p)) * sign
    return float(det)


def _minor(matrix: NDArray[np.float64], exclude_column: int) -> NDArray[np.float64]:
    """(n-1) x (n-1) submatrix without row 0 and the given column."""
    return np.delete(matrix[1:], exclude_column, axis=1)


class SquareMatrix(Matrix):
    """
    n x n integer matrix with elimination-based algorithms.

    Construction:
        SquareMatrix(size)
        SquareMatrix.from_array([[1, 2], [3, 4]])
        SquareMatrix.identity(3)

    Non-square input fails with InvalidDimensionError.
    """

    def __init__(self, size: int):
        size = check_dimension(size, "size")
        super().__init__(size, size)

    @classmethod
    def _check_shape(cls, values: NDArray[Any], name: str) -> None:
        check_2d(values, name)
        check_square(values, name)

    @classmethod
    def identity(cls, size: int) -> SquareMatrix:
        """size x size identity matrix."""
        size = check_dimension(size, "size")
        return cls._wrap(np.eye(size, dtype=np.int64))

    # Narrow the inherited constructors' return type
    @classmethod
    def from_array(cls, values: ArrayLike) -> SquareMatrix:
        return super().from_array(values)  # type: ignore[return-value]

    @classmethod
    def from_real(cls, values: ArrayLike) -> SquareMatrix:
        return super().from_real(values)  # type: ignore[return-value]

    @property
    def size(self) -> int:
        """Number of rows (equivalently columns)."""
        return self.rows

    def _as_float(self) -> NDArray[np.float64]:
        return self._data.astype(np.float64)

    # --- Scalars ---

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Base cases: 1x1 returns the sole element, 2x2 returns a*d - b*c.
        For larger n the signed minors are accumulated column by column.
        Runs on a float64 copy, so the result is a float even though it is
        integral for integer input.
        """
        return _determinant(self._as_float())

    def trace(self) -> int:
        """Sum of the diagonal elements."""
        return sum(int(self._data[i, i]) for i in range(self.size))

    # --- Matrix-valued ---

    def transpose(self) -> SquareMatrix:
        """New matrix with result[j, i] == self[i, j]."""
        return type(self)._wrap(self._data.T.copy())

    def inverse_array(self) -> NDArray[np.float64]:
        """
        Real-valued inverse by Gauss-Jordan elimination on [A | I].

        For each pivot row k the pivot aug[k, k] must be nonzero; the row is
        divided by the pivot and column k is eliminated from every other row.
        No row swapping is attempted, so a zero pivot is reported as singular
        even when a nonzero entry exists lower in the same column.

        Only an exactly-zero pivot is detected. A singular matrix whose
        pivot is left slightly off zero by rounding is not rejected and
        yields meaningless, typically huge, values.

        Returns
        -------
        ndarray of shape (n, n), dtype float64

        Raises
        ------
        SingularMatrixError
            A pivot is exactly zero.
        """
        n = self.size
        augmented = np.hstack([self._as_float(), np.eye(n)])

        for k in range(n):
            pivot = augmented[k, k]
            if pivot == 0:
                raise SingularMatrixError(
                    f"matrix is singular: zero pivot at row {k}, no inverse exists",
                    matrix_name="augmented",
                    pivot_index=k,
                )

            augmented[k] /= pivot

            for i in range(n):
                if i == k:
                    continue
                factor = augmented[i, k]
                augmented[i] -= factor * augmented[k]

        return augmented[:, n:].copy()

    def inverse(self) -> SquareMatrix:
        """
        Inverse truncated into the integer container.

        Same elimination as inverse_array(); every entry is then cut toward
        zero, so fractional inverses lose precision (the inverse of
        [[2, 0], [0, 2]] stores as all zeros). Use inverse_array() for the
        exact values.

        Raises
        ------
        SingularMatrixError
            A pivot is exactly zero.
        NumericalError
            An inverse entry is too large for the int64 store, as happens
            for nearly singular input.
        """
        return type(self).from_real(self.inverse_array())

    def upper_triangular(self) -> SquareMatrix:
        """
        Row-echelon form by forward elimination with row-swap rescue.

        When the pivot result[k, k] is zero, the first row below it with a
        nonzero entry in column k is swapped into place. Each subtraction
        factor * result[k, j] is truncated to an integer before it is
        applied, one element at a time, so rounding compounds across steps.

        A column with no nonzero pivot candidate is left as is and a
        RankDeficiencyWarning is issued; the reduction still returns.

        Raises
        ------
        NumericalError
            An eliminated entry falls outside the int64 range.
        """
        n = self.size
        result = self._data.copy()

        for k in range(n):
            if result[k, k] == 0:
                for i in range(k + 1, n):
                    if result[i, k] != 0:
                        result[[k, i]] = result[[i, k]]
                        break
                else:
                    warnings.warn(
                        f"column {k} has no nonzero pivot; matrix is rank-deficient",
                        RankDeficiencyWarning,
                        stacklevel=2,
                    )

            for i in range(k + 1, n):
                if result[i, k] != 0:
                    factor = float(result[i, k]) / float(result[k, k])
                    for j in range(k, n):
                        value = int(result[i, j]) - int(factor * float(result[k, j]))
                        if not (INT64_MIN <= value <= INT64_MAX):
                            raise NumericalError(
                                f"elimination overflows int64 at ({i}, {j}): {value}"
                            )
                        result[i, j] = value

        return type(self)._wrap(result)
