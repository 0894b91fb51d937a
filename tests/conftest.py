"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import SquareMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """4x4 matrix with entries in [1, 100], like the sample driver uses."""
    values = rng.integers(1, 101, size=(4, 4))
    return SquareMatrix.from_array(values)


@pytest.fixture
def two_by_two():
    """[[1, 2], [3, 4]]: determinant -2, trace 5."""
    return SquareMatrix.from_array([[1, 2], [3, 4]])


@pytest.fixture
def zero_column():
    """3x3 matrix whose middle column is all zeros (singular)."""
    return SquareMatrix.from_array([
        [1, 0, 2],
        [3, 0, 4],
        [5, 0, 6],
    ])
