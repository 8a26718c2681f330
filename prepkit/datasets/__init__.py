"""Dataset collaborators.

This module provides an in-memory implementation of the Dataset protocol.
"""

from __future__ import annotations

from .tabular import TabularDataset

__all__ = [
    "TabularDataset",
]
