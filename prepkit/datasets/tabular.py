"""In-memory tabular dataset.

Holds a row-major sample matrix together with one ColumnType per column and
exposes the column-major traversal that fit operations consume.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from numbers import Real
from typing import Any

import pandas as pd

from ..core import ColumnType
from ..errors import InvalidInputError


class TabularDataset:
    """Row-major sample matrix with per-column types.

    Example:
        dataset = TabularDataset([[1.0, "red"], [2.5, "blue"]])
        dataset.column_type(0)  # ColumnType.CONTINUOUS
        dataset.column_type(1)  # ColumnType.CATEGORICAL
    """

    def __init__(
        self,
        samples: Sequence[Sequence[Any]],
        types: Sequence[ColumnType] | None = None,
    ) -> None:
        """Initialize from rows.

        Args:
            samples: Rows of equal length.
            types: Type of each column. Inferred from the values when omitted.

        Raises:
            InvalidInputError: If rows are ragged or ``types`` has the wrong length.
        """
        self._samples = [list(sample) for sample in samples]

        if self._samples:
            width = len(self._samples[0])
            for offset, sample in enumerate(self._samples):
                if len(sample) != width:
                    raise InvalidInputError(
                        f"row {offset} has {len(sample)} columns, expected {width}"
                    )
        else:
            width = len(types) if types is not None else 0

        if types is None:
            self._types = [self._infer_type(self.column(i)) for i in range(width)]
        else:
            if len(types) != width:
                raise InvalidInputError(
                    f"got {len(types)} column types for {width} columns"
                )
            self._types = list(types)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> TabularDataset:
        """Build a dataset from a DataFrame, typing columns by dtype.

        Numeric columns are continuous; boolean and every other dtype is
        categorical.
        """
        types = [
            ColumnType.CONTINUOUS
            if pd.api.types.is_numeric_dtype(frame[col])
            and not pd.api.types.is_bool_dtype(frame[col])
            else ColumnType.CATEGORICAL
            for col in frame.columns
        ]
        return cls(frame.itertuples(index=False, name=None), types)

    @property
    def num_rows(self) -> int:
        return len(self._samples)

    @property
    def num_columns(self) -> int:
        return len(self._types)

    @property
    def samples(self) -> list[list[Any]]:
        """Copy of the sample matrix."""
        return [list(sample) for sample in self._samples]

    def column_type(self, index: int) -> ColumnType:
        """Return the type of the column at ``index``."""
        return self._types[index]

    def column(self, index: int) -> list[Any]:
        """Return the values of a single column."""
        return [sample[index] for sample in self._samples]

    def columns(self) -> Iterator[tuple[int, list[Any]]]:
        """Yield ``(index, values)`` for every column in order."""
        for index in range(self.num_columns):
            yield index, self.column(index)

    def __len__(self) -> int:
        return self.num_rows

    @staticmethod
    def _infer_type(values: list[Any]) -> ColumnType:
        if values and all(
            isinstance(v, Real) and not isinstance(v, bool) for v in values
        ):
            return ColumnType.CONTINUOUS
        return ColumnType.CATEGORICAL
