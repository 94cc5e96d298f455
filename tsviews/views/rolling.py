"""
Rolling-window views.

RollingTimeSeriesIter recomputes a reduction over the whole window buffer on
every step. RollingTimeSeriesIterWithUpdate maintains the same result in O(1)
per step from an update/decrement pair, e.g. for a rolling sum:

    update(running, incoming)  -> (running or 0) + incoming
    decrement(running, leaving) -> (running or 0) - leaving

For reductions expressible that way both views emit identical points.
Transform functions must be pure: views may be replayed or compared.

Both views require 1 <= window_size <= len(series).
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

from ..errors import InvalidWindowError
from ..types import DataPoint
from ..utils.logger import format_view_event
from .base import TimeSeriesView

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def _check_window(window_size: int, series_len: int) -> None:
    if window_size < 1 or window_size > series_len:
        raise InvalidWindowError(window_size, series_len)


class RollingTimeSeriesIter(TimeSeriesView[I, T, R]):
    """
    Rolling reduction with full recompute per step.

    The buffer is seeded with the first ``window_size - 1`` values. Each step
    appends the next value, reduces the full buffer (passed as a tuple), drops
    the oldest value and emits the result at the index of the newest value.
    """

    def __init__(
        self,
        ts: TimeSeries[I, T],
        window_size: int,
        transform_func: Callable[[Sequence[T]], R],
    ) -> None:
        _check_window(window_size, len(ts))
        super().__init__(ts, window_size - 1)
        self.window_size = window_size
        self._transform_func = transform_func
        self._buffer: deque[T] = deque(ts.value_at(i) for i in range(window_size - 1))

    def _step(self) -> DataPoint[I, R] | None:
        if self._cursor >= len(self._ts):
            return self._finish()

        self._cursor += 1
        self._buffer.append(self._ts.value_at(self._cursor - 1))
        reduced = self._transform_func(tuple(self._buffer))
        self._buffer.popleft()
        return self._emit(self._cursor - 1, reduced)


class RollingTimeSeriesIterWithUpdate(TimeSeriesView[I, T, R]):
    """
    Rolling reduction maintained incrementally.

    The running value starts as ``update`` folded over the first
    ``window_size`` values from None. Each step applies ``update`` with the
    incoming value, then ``decrement`` with the value leaving the window.

    A step whose running value is None emits nothing but does NOT end the
    view: advance() returns None with ``exhausted`` still False, and
    iteration moves on to the next position.
    """

    def __init__(
        self,
        ts: TimeSeries[I, T],
        window_size: int,
        update_func: Callable[[R | None, T], R | None],
        decrement_func: Callable[[R | None, T], R | None],
    ) -> None:
        _check_window(window_size, len(ts))
        super().__init__(ts, window_size - 1)
        self.window_size = window_size
        self._update_func = update_func
        self._decrement_func = decrement_func

        running: R | None = None
        for i in range(window_size):
            running = update_func(running, ts.value_at(i))
        self._running = running
        self._last_value = ts.value_at(window_size - 1)

    @property
    def running_value(self) -> R | None:
        return self._running

    def _step(self) -> DataPoint[I, R] | None:
        if self._cursor >= len(self._ts):
            return self._finish()

        self._cursor += 1
        incoming = self._ts.value_at(self._cursor - 1)
        self._running = self._update_func(self._running, incoming)
        self._running = self._decrement_func(self._running, self._last_value)
        self._last_value = self._ts.value_at(self._cursor - self.window_size)

        if self._running is None:
            logger.debug(format_view_event("UNDEFINED_STEP", type(self).__name__, cursor=self._cursor))
            return None
        return self._emit(self._cursor - 1, self._running)
