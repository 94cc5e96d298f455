"""
Insertion-order views.

No ordering guarantee: points come out in the order they were inserted into
the container. The baseline traversal the other views are checked against.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..types import DataPoint
from .base import TimeSeriesView

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")


class TimeSeriesIter(TimeSeriesView[I, T, T]):
    """Insertion-order pass producing owned (copied) points."""

    def __init__(self, ts: TimeSeries[I, T], start: int = 0) -> None:
        super().__init__(ts, start)

    def _step(self) -> DataPoint[I, T] | None:
        if self._cursor < len(self._ts):
            self._cursor += 1
            return self._point(self._cursor - 1, self._cursor - 1)
        return self._finish()


class TimeSeriesRefIter(TimeSeriesIter[I, T]):
    """Insertion-order pass producing points that reference the channel elements."""

    by_reference = True
