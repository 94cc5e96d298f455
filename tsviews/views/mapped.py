"""
Map view: insertion-order pass applying a pure function to each value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from ..types import DataPoint
from .base import TimeSeriesView

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")


class MappedTimeSeriesIter(TimeSeriesView[I, T, R]):

    def __init__(self, ts: TimeSeries[I, T], func: Callable[[T], R], start: int = 0) -> None:
        super().__init__(ts, start)
        self._func = func

    def _step(self) -> DataPoint[I, R] | None:
        if self._cursor >= len(self._ts):
            return self._finish()
        self._cursor += 1
        position = self._cursor - 1
        return self._emit(position, self._func(self._ts.value_at(position)))
