"""
Matrix: dense rectangular container of integers.

The container has fixed dimensions set at construction, element read/write
by (row, column), and a fixed-width text display. It carries no algorithms;
see pymatrix.square for the square-matrix operations.
"""

from __future__ import annotations

from typing import Any, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import NumericalError
from pymatrix.core.options import DisplayOptions, DEFAULT_DISPLAY
from pymatrix.core.validation import (
    check_array,
    check_2d,
    check_integral,
    check_dimension,
    check_index,
    check_element,
)

_INT64_MIN = float(np.iinfo(np.int64).min)


class Matrix:
    """
    Dense rows x cols matrix of int64 values, zero-initialised.

    The backing store always has shape (rows, cols); it is never resized.
    Elements are read and written in place through get()/set() or the
    m[i, j] indexer.

    Construction:
        Matrix(rows, cols)
        Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        Matrix.from_real(values)   # truncating store of real values
    """

    def __init__(self, rows: int, cols: int):
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        self._data: NDArray[np.int64] = np.zeros((rows, cols), dtype=np.int64)

    @classmethod
    def _wrap(cls, data: NDArray[np.int64]) -> Matrix:
        """Adopt an already-validated int64 array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def _check_shape(cls, values: NDArray[Any], name: str) -> None:
        check_2d(values, name)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like of whole numbers.

        Parameters
        ----------
        values : array-like
            Nested sequences, numpy array, or any object with a .values
            attribute (e.g. a DataFrame). Floating input is accepted only
            when every entry is integral.

        Raises
        ------
        ValidationError
            Non-numeric, non-finite or fractional entries.
        InvalidDimensionError
            Input is not a non-empty 2D array.
        """
        if hasattr(values, 'values') and not isinstance(values, np.ndarray):
            values = values.values
        array = check_array(values, "values")
        cls._check_shape(array, "values")
        check_integral(array, "values")
        return cls._wrap(array.astype(np.int64, copy=True))

    @classmethod
    def from_real(cls, values: ArrayLike) -> Matrix:
        """
        Truncating store: convert real values into the integer container.

        Every entry is truncated toward zero, the way a C-style integer cast
        behaves (0.5 -> 0, -1.7 -> -1). This is lossy by intent and is the
        only path by which real-valued results enter an integer matrix.

        Raises
        ------
        NumericalError
            Entries are NaN, infinite, or outside the int64 range.
        """
        array = np.asarray(values, dtype=np.float64)
        cls._check_shape(array, "values")
        if not np.all(np.isfinite(array)):
            raise NumericalError("cannot truncate non-finite values into integer matrix")
        truncated = np.trunc(array)
        if np.any((truncated < _INT64_MIN) | (truncated >= 2.0 ** 63)):
            raise NumericalError("values exceed int64 range of the integer matrix")
        return cls._wrap(truncated.astype(np.int64))

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    # --- Element access ---

    def get(self, i: int, j: int) -> int:
        """Return the element at row i, column j."""
        i, j = check_index(i, j, self.shape)
        return int(self._data[i, j])

    def set(self, i: int, j: int, value: int) -> None:
        """Store value at row i, column j."""
        i, j = check_index(i, j, self.shape)
        self._data[i, j] = check_element(value, f"value at ({i}, {j})")

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = key
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = key
        self.set(i, j, value)

    def to_array(self) -> NDArray[np.int64]:
        """Copy of the backing store, shape (rows, cols)."""
        return self._data.copy()

    # --- Display ---

    def format(self, options: DisplayOptions | None = None) -> str:
        """
        Render the grid as text.

        Each element is right-aligned in a field of options.width characters
        (4 by default); wider numbers overflow the field rather than being
        cut. Rows are separated by newlines with no trailing delimiter.
        """
        width = (options or DEFAULT_DISPLAY).width
        return "\n".join(
            "".join(f"{int(v):>{width}}" for v in row)
            for row in self._data
        )

    def display(self, file: TextIO | None = None, options: DisplayOptions | None = None) -> None:
        """Write the formatted grid, one row per line, to file (stdout by default)."""
        print(self.format(options), file=file)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols})"

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable
