"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m23():
    """2 x 3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix(2, 3).set([1, 2, 3, 4, 5, 6])


@pytest.fixture
def m32():
    """3 x 2 matrix [[7, 8], [9, 10], [11, 12]]."""
    return Matrix(3, 2).set([7, 8, 9, 10, 11, 12])


@pytest.fixture
def random_pair(rng):
    """Two random 4 x 5 matrices with signed entries."""
    a = Matrix.from_array(rng.standard_normal((4, 5)))
    b = Matrix.from_array(rng.standard_normal((4, 5)))
    return a, b
