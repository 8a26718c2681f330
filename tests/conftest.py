"""Shared test fixtures and utilities for prepkit tests."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from prepkit import ColumnType, TabularDataset

# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def outlier_dataset() -> TabularDataset:
    """Single continuous column with one large outlier.

    Returns:
        Dataset whose column has median 3, Q1 2 and Q3 4.
    """
    return TabularDataset([[1.0], [2.0], [3.0], [4.0], [100.0]])


@pytest.fixture
def mixed_dataset() -> TabularDataset:
    """Dataset with continuous and categorical columns interleaved.

    Returns:
        Dataset with columns (continuous, categorical, continuous).
    """
    return TabularDataset(
        [
            [1.0, "red", 10.0],
            [2.0, "blue", 20.0],
            [3.0, "red", 30.0],
            [4.0, "green", 40.0],
            [5.0, "blue", 50.0],
        ]
    )


@pytest.fixture
def constant_dataset() -> TabularDataset:
    """Dataset with a constant continuous column next to a varying one."""
    return TabularDataset([[7.0, 1.0], [7.0, 2.0], [7.0, 3.0], [7.0, 4.0]])


@pytest.fixture
def random_matrix() -> np.ndarray:
    """Random continuous matrix with heavy tails.

    Returns:
        Array of shape (200, 4).
    """
    rng = np.random.default_rng(42)
    data = rng.standard_t(df=3, size=(200, 4))
    data[:, 1] *= 1000
    data[:, 2] += 50
    return data


@pytest.fixture
def random_dataset(random_matrix: np.ndarray) -> TabularDataset:
    """All-continuous dataset built from random_matrix."""
    return TabularDataset(
        random_matrix.tolist(),
        [ColumnType.CONTINUOUS] * random_matrix.shape[1],
    )


@pytest.fixture
def mixed_frame() -> pd.DataFrame:
    """DataFrame with numeric, string, and boolean columns."""
    return pd.DataFrame(
        {
            "age": [25, 32, 47, 51],
            "city": ["NYC", "LA", "NYC", "SF"],
            "income": [50000.0, 64000.0, 81000.0, 72000.0],
            "member": [True, False, True, True],
        }
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
