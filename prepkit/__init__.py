"""prepkit: Fit-then-apply preprocessing operators.

This library provides a robust column scaler that centers and scales
continuous features by median and interquartile range, and a lottery
strategy that guesses a categorical value uniformly at random.

Example usage:
    from prepkit import RobustColumnScaler, TabularDataset, UniformCategoryPicker

    dataset = TabularDataset([[1.0, "a"], [2.0, "b"], [3.0, "a"], [4.0, "c"], [100.0, "b"]])

    scaler = RobustColumnScaler().fit(dataset)
    samples = [[10.0, "a"]]
    scaler.transform(samples)  # samples == [[3.5, "a"]]

    picker = UniformCategoryPicker(rng=42).fit(dataset.column(1))
    picker.guess()  # one of "a", "b", "c"
"""

from __future__ import annotations

# Configuration
from .config import PickerConfig, QuartileMethod, ScalerConfig

# Protocols (from core module)
from .core import Categorical, ColumnType, Dataset, Transformer

# Datasets
from .datasets import TabularDataset

# Errors
from .errors import (
    InvalidConfigError,
    InvalidInputError,
    NotFittedError,
    PrepKitError,
)

# Strategies
from .strategies import UniformCategoryPicker

# Transformers
from .transformers import RobustColumnScaler

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "ScalerConfig",
    "PickerConfig",
    "QuartileMethod",
    # Protocols (from core)
    "ColumnType",
    "Dataset",
    "Transformer",
    "Categorical",
    # Datasets
    "TabularDataset",
    # Transformers
    "RobustColumnScaler",
    # Strategies
    "UniformCategoryPicker",
    # Errors
    "PrepKitError",
    "InvalidConfigError",
    "InvalidInputError",
    "NotFittedError",
]
