"""Shared fixtures for scalemodel tests."""
import numpy as np
import pytest

import scalemodel  # noqa: F401  (enables JAX x64 before any array is built)
from scalemodel.core.identifiers import ScalerType

STRATEGY_TYPES = [t for t in ScalerType if t.is_strategy]
LINEAR_TYPES = [t for t in STRATEGY_TYPES if not t.is_whitening]
WHITENING_TYPES = [t for t in STRATEGY_TYPES if t.is_whitening]


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def dataset(rng):
    """(200, 3) data with distinct offsets and scales per feature."""
    return rng.normal(size=(200, 3)) * np.array([1.0, 5.0, 0.1]) + np.array([3.0, -2.0, 10.0])


@pytest.fixture
def correlated_dataset(rng):
    """(500, 3) data with a dense covariance, for whitening checks."""
    mixing = np.array([[2.0, 0.5, 0.0], [0.3, 1.0, 0.4], [0.0, 0.7, 1.5]])
    return rng.normal(size=(500, 3)) @ mixing + np.array([1.0, 2.0, 3.0])
