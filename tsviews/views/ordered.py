"""
Order-validating views.

Same traversal as the passthrough views, but every index value must be >=
the last one emitted. On the first decreasing index value the view stops for
good, even though unread elements remain: a single out-of-order point breaks
the assumption every downstream window/lag computation relies on, so the
prefix before it is all that is trusted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..types import DataPoint
from .base import TimeSeriesView

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")

_NO_PRIOR = object()


class OrderedTimeSeriesIter(TimeSeriesView[I, T, T]):
    """
    Order-validating pass producing owned points.

    Attributes:
        violation_at: Position of the first out-of-order index value, or None
            if no violation has been seen.
    """

    def __init__(self, ts: TimeSeries[I, T], start: int = 0) -> None:
        super().__init__(ts, start)
        self._prior = _NO_PRIOR
        self.violation_at: int | None = None

    def _step(self) -> DataPoint[I, T] | None:
        if self._cursor >= len(self._ts):
            return self._finish()

        self._cursor += 1
        position = self._cursor - 1
        current = self._ts.index_at(position)

        if self._prior is not _NO_PRIOR and not current >= self._prior:
            self.violation_at = position
            return self._finish("ORDER_VIOLATION", position=position)

        self._prior = current
        return self._point(position, position)


class OrderedTimeSeriesRefIter(OrderedTimeSeriesIter[I, T]):
    """Order-validating pass producing points by reference."""

    by_reference = True
