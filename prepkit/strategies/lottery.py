"""Lottery strategy for guessing categorical values."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from ..config import PickerConfig
from ..errors import InvalidInputError, NotFittedError

logger = logging.getLogger(__name__)


class UniformCategoryPicker:
    """Holds a lottery in which each category has an equal chance of being picked.

    Fitting stores every distinct value once, in order of first occurrence,
    so frequent values gain no extra weight. Each guess is an independent
    draw from a numpy Generator.
    """

    def __init__(self, rng: np.random.Generator | int | None = None) -> None:
        """Initialize the picker.

        Args:
            rng: A Generator, a seed for a new one, or None for fresh entropy.
        """
        self._rng = np.random.default_rng(rng)
        self._categories: list[Any] = []

    @classmethod
    def from_config(cls, config: PickerConfig) -> UniformCategoryPicker:
        """Create a picker seeded from a PickerConfig."""
        return cls(rng=config.random_seed)

    @property
    def categories(self) -> list[Any]:
        """Distinct fitted values in first-occurrence order."""
        return self._categories.copy()

    @property
    def is_fitted(self) -> bool:
        """Whether the picker holds at least one category."""
        return bool(self._categories)

    def fit(self, values: Iterable[Any]) -> UniformCategoryPicker:
        """Store every unique value.

        Args:
            values: Hashable outcomes; duplicates are collapsed.

        Returns:
            Self for method chaining.

        Raises:
            InvalidInputError: If ``values`` is empty.
        """
        categories = list(dict.fromkeys(values))
        if not categories:
            raise InvalidInputError("strategy needs to be fit with at least one value")

        self._categories = categories

        logger.debug(f"Fitted lottery with {len(categories)} categories")
        return self

    def guess(self) -> Any:
        """Return one of the fitted categories chosen uniformly at random.

        Raises:
            NotFittedError: If the picker has not been fitted.
        """
        if not self._categories:
            raise NotFittedError(type(self).__name__)

        return self._categories[int(self._rng.integers(len(self._categories)))]
