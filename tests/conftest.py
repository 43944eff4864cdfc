"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.core.tolerance import reset_epsilon


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def _restore_epsilon():
    """Every test starts and ends with the default process-wide tolerance."""
    reset_epsilon()
    yield
    reset_epsilon()


@pytest.fixture
def well_conditioned_system(rng):
    """Diagonally dominant 6x6 system with a known solution."""
    n = 6
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def singular_matrix():
    """Rank-2 3x3 matrix (row 3 = row 1 + row 2)."""
    return np.array([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [5.0, 7.0, 9.0],
    ])
