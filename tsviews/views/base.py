"""
Base class for lazy TimeSeries views.

A view borrows a TimeSeries read-only and produces points on demand through
advance(), the single "produce next point" operation. advance() returns None
in two distinct situations:

- exhaustion: the view is finished for good (``exhausted`` becomes True);
  order-validating views also end this way on the first decreasing index.
- an undefined step: only the incremental rolling view does this, when its
  running value is None. ``exhausted`` stays False and the next advance()
  continues with the following position.

Python iteration skips undefined steps and stops on exhaustion.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..config import get_config
from ..errors import ConcurrentModificationError, InvalidStartError
from ..types import DataPoint
from ..utils.logger import format_view_event
from .collect import collect, collect_unchecked

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class TimeSeriesView(ABC, Generic[I, T, R]):
    """Stateful, non-rewindable generator of points over a TimeSeries."""

    # True for views that hand out the channel objects instead of copies
    by_reference: bool = False

    def __init__(self, ts: TimeSeries[I, T], cursor: int) -> None:
        if cursor < 0:
            raise InvalidStartError(cursor)
        self._ts = ts
        self._cursor = cursor
        self._exhausted = False
        self._version = ts.version
        self._check_mutation = get_config().views.check_mutation
        logger.debug(format_view_event(
            "CREATED", type(self).__name__, cursor=cursor, series_len=len(ts),
        ))

    @abstractmethod
    def _step(self) -> DataPoint[I, R] | None:
        """Advance the cursor once. Call _finish() to signal exhaustion."""
        ...

    def advance(self) -> DataPoint[I, R] | None:
        """
        Produce the next point.

        Returns:
            The next point, or None. Check ``exhausted`` to tell the end of
            the view from a step that produced nothing.

        Raises:
            ConcurrentModificationError: If the source TimeSeries was mutated
                after this view was created.
        """
        if self._exhausted:
            return None
        if self._check_mutation and self._ts.version != self._version:
            raise ConcurrentModificationError(type(self).__name__, self._version, self._ts.version)
        return self._step()

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def cursor(self) -> int:
        return self._cursor

    def _finish(self, action: str = "EXHAUSTED", **fields: Any) -> None:
        self._exhausted = True
        logger.debug(format_view_event(action, type(self).__name__, cursor=self._cursor, **fields))
        return None

    def _point(self, index_pos: int, value_pos: int) -> DataPoint[I, T]:
        index = self._ts.index_at(index_pos)
        value = self._ts.value_at(value_pos)
        if self.by_reference:
            return DataPoint(index, value)
        return DataPoint(copy.copy(index), copy.copy(value))

    def _emit(self, index_pos: int, value: R) -> DataPoint[I, R]:
        index = self._ts.index_at(index_pos)
        if self.by_reference:
            return DataPoint(index, value)
        return DataPoint(copy.copy(index), value)

    def __iter__(self) -> TimeSeriesView[I, T, R]:
        return self

    def __next__(self) -> DataPoint[I, R]:
        while True:
            point = self.advance()
            if point is not None:
                return point
            if self._exhausted:
                raise StopIteration

    def collect(self) -> TimeSeries[I, R]:
        """Drain the remaining points into a new, validated TimeSeries."""
        return collect(self)

    def collect_unchecked(self) -> TimeSeries[I, R]:
        """Drain the remaining points into a new TimeSeries without validation."""
        return collect_unchecked(self)

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else f"cursor={self._cursor}"
        return f"{type(self).__name__}({state}, series_len={len(self._ts)})"
