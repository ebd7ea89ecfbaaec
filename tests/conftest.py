"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from fixedlinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Factory for random float64 k x k matrices (numpy array, Matrix)."""
    def make(k):
        arr = rng.standard_normal((k, k))
        return arr, Matrix.from_values(k, k, arr)
    return make


@pytest.fixture
def singular_matrices():
    """Square matrices that are singular in exact arithmetic."""
    return [
        Matrix.from_rows([[1, 2], [2, 4]]),
        Matrix.from_rows([[1, 2], [0, 0]]),
        Matrix.from_rows([[0, 0], [0, 1]]),
        Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]),
        Matrix.from_rows([[0, 1, 2], [0, 3, 4], [0, 5, 6]]),
        Matrix(3, 3),
    ]
