"""
Skip-apply view: combine two points ``span_size`` positions apart.

An N-step difference is ``transform_func = lambda prior, current: current - prior``:

    values 1 2 3 4 5, span 1 -> (t1,1) (t2,1) (t3,1) (t4,1)
    values 1 2 3 4 5, span 2 -> (t2,2) (t4,2)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from ..errors import EmptySeriesError, InvalidSpanError
from ..types import DataPoint
from .base import TimeSeriesView

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")


class SkipApplyTimeSeriesIter(TimeSeriesView[I, T, R]):
    """Apply ``transform_func(prior, current)`` across non-overlapping spans."""

    def __init__(
        self,
        ts: TimeSeries[I, T],
        span_size: int,
        transform_func: Callable[[T, T], R],
    ) -> None:
        if span_size < 1:
            raise InvalidSpanError(span_size)
        if len(ts) == 0:
            raise EmptySeriesError(type(self).__name__)
        super().__init__(ts, span_size)
        self.span_size = span_size
        self._transform_func = transform_func
        self._prior_value = ts.value_at(0)

    def _step(self) -> DataPoint[I, R] | None:
        # cursor is the next read position
        if self._cursor >= len(self._ts):
            return self._finish()

        self._cursor += self.span_size
        position = self._cursor - self.span_size
        current = self._ts.value_at(position)
        transformed = self._transform_func(self._prior_value, current)
        self._prior_value = current
        return self._emit(position, transformed)
