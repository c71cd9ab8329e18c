"""
Shared pytest configuration for the histogram tests.
"""
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def small_data():
    """Sample with one outlier, range (1, 19)."""
    return np.array([1.0, 1.0, 2.0, 3.0, 19.0])


@pytest.fixture
def irregular_breaks():
    """Strictly increasing, non-equidistant breaks."""
    return np.array([1.0, 2.0, 15.0, 20.0])
