"""Robust column scaling by median and interquartile range."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence
from numbers import Real
from typing import Any

import numpy as np

from ..config import QuartileMethod, ScalerConfig
from ..core import ColumnType, Dataset
from ..errors import InvalidInputError, NotFittedError

logger = logging.getLogger(__name__)


class RobustColumnScaler:
    """Centers and scales continuous columns using median and IQR.

    The IQR is the range between the 1st quartile (25th percentile) and the
    3rd quartile (75th percentile), which makes the scaling insensitive to
    outliers. Only columns the dataset reports as continuous are fitted;
    every other column passes through transform untouched.

    A column whose fitted IQR is exactly zero is scaled to the constant 1.0
    rather than divided.

    Example:
        scaler = RobustColumnScaler()
        scaler.fit(TabularDataset([[1.0], [2.0], [3.0], [4.0], [100.0]]))

        samples = [[10.0]]
        scaler.transform(samples)
        print(samples)  # [[3.5]]
    """

    def __init__(
        self,
        center: bool = True,
        scale: bool = True,
        method: QuartileMethod | str = QuartileMethod.LINEAR,
    ) -> None:
        """Initialize the scaler.

        Args:
            center: Whether to subtract the fitted median.
            scale: Whether to divide by the fitted IQR.
            method: Quantile estimator passed to ``numpy.quantile``.

        Raises:
            InvalidConfigError: If a flag is not a bool or ``method`` is not
                a known estimator.
        """
        config = ScalerConfig(center=center, scale=scale, method=method)
        self._center = config.center
        self._scale = config.scale
        self._method = config.method
        self._medians: dict[int, float] | None = None
        self._iqrs: dict[int, float] | None = None

    @classmethod
    def from_config(cls, config: ScalerConfig) -> RobustColumnScaler:
        """Create a scaler from a ScalerConfig."""
        return cls(center=config.center, scale=config.scale, method=config.method)

    @property
    def center(self) -> bool:
        return self._center

    @property
    def scale(self) -> bool:
        return self._scale

    @property
    def method(self) -> QuartileMethod:
        return self._method

    @property
    def is_fitted(self) -> bool:
        """Whether the scaler has been fitted."""
        return self._medians is not None and self._iqrs is not None

    def medians(self) -> dict[int, float] | None:
        """Return the fitted medians indexed by column, or None if unfitted."""
        return dict(self._medians) if self._medians is not None else None

    def iqrs(self) -> dict[int, float] | None:
        """Return the fitted interquartile ranges indexed by column, or None if unfitted."""
        return dict(self._iqrs) if self._iqrs is not None else None

    def fit(self, dataset: Dataset) -> RobustColumnScaler:
        """Compute the median and IQR of every continuous column.

        Previously fitted parameters are discarded. A dataset without
        continuous columns leaves both mappings empty.

        Args:
            dataset: Reference data, traversed once column by column.

        Returns:
            Self for method chaining.

        Raises:
            InvalidInputError: If a continuous column holds non-numeric values.
        """
        medians: dict[int, float] = {}
        iqrs: dict[int, float] = {}

        for column, values in dataset.columns():
            if dataset.column_type(column) != ColumnType.CONTINUOUS:
                continue

            try:
                data = np.asarray(values, dtype=np.float64)
            except (TypeError, ValueError) as e:
                raise InvalidInputError(
                    f"continuous column {column} holds non-numeric values"
                ) from e

            if data.size == 0:
                logger.warning(f"Continuous column {column} has no values, skipping")
                continue

            q1, q2, q3 = self._quartiles(data)
            medians[column] = q2
            iqrs[column] = q3 - q1

            if iqrs[column] == 0.0 and self._scale:
                logger.warning(
                    f"Column {column} has zero interquartile range, "
                    "its scaled values will be 1.0"
                )

        self._medians = medians
        self._iqrs = iqrs

        logger.debug(f"Fitted quartiles for {len(medians)} continuous columns")
        return self

    def transform(self, samples: Sequence[MutableSequence[Any]]) -> None:
        """Center and scale the fitted columns of every sample in place.

        Args:
            samples: Rows addressable by column index. Each row is rewritten
                in place; nothing is returned.

        Raises:
            NotFittedError: If the scaler has not been fitted.
            InvalidInputError: If a row is too short to hold a fitted column,
                a fitted feature is not a number, or ``samples`` is an array
                that cannot hold floats. No row is modified in that case.
        """
        if self._medians is None or self._iqrs is None:
            raise NotFittedError(type(self).__name__)

        if not self._medians:
            return

        if isinstance(samples, np.ndarray) and not np.issubdtype(samples.dtype, np.floating):
            raise InvalidInputError(
                f"samples array has dtype {samples.dtype}, expected a floating dtype"
            )

        width = max(self._medians) + 1
        scaled: list[list[float]] = []

        for offset, sample in enumerate(samples):
            if len(sample) < width:
                raise InvalidInputError(
                    f"sample {offset} has {len(sample)} features, "
                    f"fitted columns need at least {width}"
                )

            features = []
            for column, median in self._medians.items():
                feature = sample[column]
                if not isinstance(feature, Real) or isinstance(feature, bool):
                    raise InvalidInputError(
                        f"sample {offset} column {column} is not a number: {feature!r}"
                    )

                if self._center:
                    feature -= median

                if self._scale:
                    iqr = self._iqrs[column]

                    feature = feature / iqr if iqr != 0.0 else 1.0

                features.append(feature)

            scaled.append(features)

        for sample, features in zip(samples, scaled):
            for column, feature in zip(self._medians, features):
                sample[column] = feature

    def fit_transform(
        self, dataset: Dataset, samples: Sequence[MutableSequence[Any]]
    ) -> None:
        """Fit on ``dataset`` then transform ``samples`` in place."""
        self.fit(dataset)
        self.transform(samples)

    def _quartiles(self, data: np.ndarray) -> tuple[float, float, float]:
        """Return (Q1, Q2, Q3) of a column."""
        q1, q2, q3 = np.quantile(data, [0.25, 0.5, 0.75], method=self._method.value)
        return float(q1), float(q2), float(q3)
