"""Core types and protocols for prepkit.

This module contains the column type enum and the protocols that datasets,
transformers, and categorical strategies follow.
"""

from __future__ import annotations

from .protocols import Categorical, ColumnType, Dataset, Transformer

__all__ = [
    "ColumnType",
    "Dataset",
    "Transformer",
    "Categorical",
]
