"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_pair():
    """The 2x2 pair used throughout the worked examples."""
    A = [[1, 2], [3, 4]]
    B = [[5, 6], [7, 8]]
    return A, B


@pytest.fixture
def singular_3x3():
    """Rank-2 matrix: third row is 2*row2 - row1."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]
