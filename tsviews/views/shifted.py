"""
Shift/lag view: realign the value channel against the index channel.

A negative shift is a lag (past values paired with later indices), a positive
shift a lead (future values paired with earlier indices):

    index:   t0 t1 t2 t3 t4
    values:   1  2  3  4  5
    shift -1 -> (t1,1) (t2,2) (t3,3) (t4,4)
    shift +1 -> (t0,2) (t1,3) (t2,4) (t3,5)

A shift whose magnitude reaches the series length yields no points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..errors import InvalidStartError
from ..types import DataPoint
from ..utils.offsets import add_offset
from .base import TimeSeriesView

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")


class ShiftedTimeSeriesIter(TimeSeriesView[I, T, T]):
    """
    Shifted pass producing owned points.

    The value read position is always ``cursor - 1``; the index read position
    is ``cursor + shift_index - 1`` with ``shift_index = -shift``.
    """

    def __init__(self, ts: TimeSeries[I, T], start: int = 0, shift: int = 0) -> None:
        if start < 0:
            raise InvalidStartError(start)
        shift_index = -shift
        # Leads skip the first |shift| values so the index side starts at 0
        init_cursor = -shift_index if shift_index < 0 else start
        super().__init__(ts, init_cursor)
        self.shift = shift
        self._shift_index = shift_index

    def _step(self) -> DataPoint[I, T] | None:
        self._cursor += 1
        index_pos = add_offset(self._cursor, self._shift_index - 1)
        if index_pos is None:
            return self._finish(reason="index_underflow")

        value_pos = self._cursor - 1
        if max(index_pos, value_pos) >= len(self._ts):
            return self._finish()
        return self._point(index_pos, value_pos)
