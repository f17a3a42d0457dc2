"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for random Matrices of a given shape."""
    def make(num_rows, num_cols):
        return Matrix.from_array(rng.standard_normal((num_rows, num_cols)))
    return make


@pytest.fixture
def random_vector(rng):
    """Factory for random Vectors of a given length."""
    def make(length):
        return Vector.from_array(rng.standard_normal(length))
    return make
