"""Protocols shared by prepkit components.

This module defines the Dataset protocol that fit operations consume, along
with the Transformer and Categorical protocols the fitted components follow.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Self


class ColumnType(Enum):
    """Kind of feature held by a dataset column."""

    CONTINUOUS = "continuous"
    CATEGORICAL = "categorical"


@runtime_checkable
class Dataset(Protocol):
    """Protocol for datasets that can be traversed column by column.

    prepkit never decides whether a column is continuous; the dataset
    reports it.
    """

    def column_type(self, index: int) -> ColumnType:
        """Return the type of the column at ``index``."""
        ...

    def columns(self) -> Iterator[tuple[int, Sequence[Any]]]:
        """Yield ``(index, values)`` once for every column."""
        ...


@runtime_checkable
class Transformer(Protocol):
    """Protocol for fit-then-transform operators.

    ``transform`` rewrites the caller's rows in place and returns nothing.
    """

    def fit(self, dataset: Dataset) -> Self:
        """Learn parameters from a reference dataset."""
        ...

    def transform(self, samples: Sequence[MutableSequence[Any]]) -> None:
        """Apply the fitted parameters to ``samples`` in place."""
        ...


@runtime_checkable
class Categorical(Protocol):
    """Protocol for strategies that guess a categorical value."""

    def fit(self, values: Iterable[Any]) -> Self:
        """Learn the possible outcomes from ``values``."""
        ...

    def guess(self) -> Any:
        """Return one guessed outcome."""
        ...
