"""Configuration dataclasses for prepkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidConfigError


class QuartileMethod(Enum):
    """Quantile estimators understood by ``numpy.quantile``.

    LINEAR interpolates between order statistics at position ``q * (n - 1)``
    and is the default everywhere in prepkit.
    """

    LINEAR = "linear"
    LOWER = "lower"
    HIGHER = "higher"
    MIDPOINT = "midpoint"
    NEAREST = "nearest"
    HAZEN = "hazen"
    WEIBULL = "weibull"
    MEDIAN_UNBIASED = "median_unbiased"
    NORMAL_UNBIASED = "normal_unbiased"

    @classmethod
    def parse(cls, value: QuartileMethod | str) -> QuartileMethod:
        """Coerce an enum member or its string value into a QuartileMethod.

        Raises:
            InvalidConfigError: If the value names no known method.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = [m.value for m in cls]
            raise InvalidConfigError(
                f"unknown quartile method {value!r}, expected one of {known}"
            ) from None


@dataclass
class ScalerConfig:
    """Configuration for RobustColumnScaler.

    Attributes:
        center: Whether to subtract the fitted median.
        scale: Whether to divide by the fitted interquartile range.
        method: Quantile estimator used to compute the quartiles.
    """

    center: bool = True
    scale: bool = True
    method: QuartileMethod = QuartileMethod.LINEAR

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.center, bool):
            raise InvalidConfigError("center must be a bool")
        if not isinstance(self.scale, bool):
            raise InvalidConfigError("scale must be a bool")
        self.method = QuartileMethod.parse(self.method)


@dataclass
class PickerConfig:
    """Configuration for UniformCategoryPicker.

    Attributes:
        random_seed: Seed for the picker's generator. None draws fresh entropy.
    """

    random_seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.random_seed is not None:
            if isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int):
                raise InvalidConfigError("random_seed must be an int or None")
            if self.random_seed < 0:
                raise InvalidConfigError("random_seed must be non-negative")
