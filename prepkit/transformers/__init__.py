"""Fitted transformers.

This module provides transformers that learn per-column parameters from a
dataset and rewrite sample rows in place.
"""

from __future__ import annotations

from .quartile import RobustColumnScaler

__all__ = [
    "RobustColumnScaler",
]
