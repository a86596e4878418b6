"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def signed_2x2():
    """[[-1, 2], [3, -4]]: L1 = 10, L2 = sqrt(30)."""
    return Matrix.from_rows([[-1.0, 2.0], [3.0, -4.0]])


@pytest.fixture
def square_2x2():
    """[[1, 2], [3, 4]]."""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def empty_matrix():
    """0x0 matrix in the unallocated state."""
    return Matrix(0, 0)
