"""Guessing strategies.

This module provides strategies that learn possible outcomes from a set of
values and guess one of them on demand.
"""

from __future__ import annotations

from .lottery import UniformCategoryPicker

__all__ = [
    "UniformCategoryPicker",
]
