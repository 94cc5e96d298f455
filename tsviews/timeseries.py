"""
In-memory ordered time-series container.

A TimeSeries owns two parallel channels: the index channel (orderable,
hashable markers such as datetimes) and the value channel (payloads).
Position i of both channels is one logical point. Insertion order is
authoritative; sortedness is never enforced here and is only asserted lazily
by the order-validating views.

Views borrow the container read-only. Mutation goes through append()/extend(),
which bump ``version`` so that live views can detect it.

Usage:
    from tsviews import TimeSeries
    from tsviews.reducers import window_sum, difference

    ts = TimeSeries.from_vecs(index, values)
    lagged = ts.shift(-1).collect()
    rolled = ts.apply_rolling(5, window_sum).collect_unchecked()
    changes = ts.skip_apply(1, difference).collect()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from .errors import ChannelLengthMismatchError, UnhashableIndexError
from .types import DataPoint
from .views import (
    MappedTimeSeriesIter,
    OrderedTimeSeriesIter,
    OrderedTimeSeriesRefIter,
    RollingTimeSeriesIter,
    RollingTimeSeriesIterWithUpdate,
    ShiftedTimeSeriesIter,
    SkipApplyTimeSeriesIter,
    TimeSeriesIter,
    TimeSeriesRefIter,
)

I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")

_MISSING = object()


class TimeSeries(Generic[I, T]):
    """
    Two same-length channels (index, values) in insertion order.

    Build through the classmethod constructors:
    - from_vecs / from_points validate channel shape (equal lengths, hashable
      index elements) but do not sort.
    - from_points_unchecked trusts the caller and performs no checks.
    """

    __slots__ = ("_index", "_values", "_version", "_lookup", "_lookup_version")

    def __init__(self, index: list[I], values: list[T]) -> None:
        self._index = index
        self._values = values
        self._version = 0
        self._lookup: dict[I, int] | None = None
        self._lookup_version = -1

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_vecs(cls, index: Iterable[I], values: Iterable[T]) -> TimeSeries[I, T]:
        """
        Build from separate index and value channels.

        Raises:
            ChannelLengthMismatchError: If the channels differ in length.
            UnhashableIndexError: If an index element cannot be hashed.
        """
        index_list = list(index)
        values_list = list(values)
        if len(index_list) != len(values_list):
            raise ChannelLengthMismatchError(len(index_list), len(values_list))
        _check_hashable(index_list)
        return cls(index_list, values_list)

    @classmethod
    def from_points(cls, points: Iterable[DataPoint[I, T]]) -> TimeSeries[I, T]:
        """Build from a sequence of points, validating the index channel."""
        index_list: list[I] = []
        values_list: list[T] = []
        for point in points:
            index_list.append(point.index)
            values_list.append(point.value)
        _check_hashable(index_list)
        return cls(index_list, values_list)

    @classmethod
    def from_points_unchecked(cls, points: Iterable[DataPoint[I, T]]) -> TimeSeries[I, T]:
        """
        Build from points the caller attests are already ordered.

        No validation of any kind happens here; the sortedness of the result
        is assumed, not verified.
        """
        index_list: list[I] = []
        values_list: list[T] = []
        for point in points:
            index_list.append(point.index)
            values_list.append(point.value)
        return cls(index_list, values_list)

    @classmethod
    def empty(cls) -> TimeSeries[I, T]:
        return cls([], [])

    # =========================================================================
    # Read-only access
    # =========================================================================

    def __len__(self) -> int:
        return len(self._index)

    def index_at(self, position: int) -> I:
        return self._index[position]

    def value_at(self, position: int) -> T:
        return self._values[position]

    def __getitem__(self, position: int) -> DataPoint[I, T]:
        return DataPoint(self._index[position], self._values[position])

    @property
    def index(self) -> tuple[I, ...]:
        """Snapshot of the index channel."""
        return tuple(self._index)

    @property
    def values(self) -> tuple[T, ...]:
        """Snapshot of the value channel."""
        return tuple(self._values)

    @property
    def version(self) -> int:
        """Incremented on every mutation."""
        return self._version

    def is_sorted(self) -> bool:
        """True if the index channel is non-decreasing."""
        index = self._index
        return all(index[i] >= index[i - 1] for i in range(1, len(index)))

    def get(self, index_value: I, default: Any = None) -> T | Any:
        """
        Value at the first position carrying ``index_value``.

        The hash table behind this lookup is built on first use and rebuilt
        after any mutation.
        """
        if self._lookup is None or self._lookup_version != self._version:
            lookup: dict[I, int] = {}
            for position, key in enumerate(self._index):
                lookup.setdefault(key, position)
            self._lookup = lookup
            self._lookup_version = self._version
        position = self._lookup.get(index_value, _MISSING)
        if position is _MISSING:
            return default
        return self._values[position]

    def __contains__(self, index_value: object) -> bool:
        return self.get(index_value, _MISSING) is not _MISSING

    # =========================================================================
    # Mutation
    # =========================================================================

    def append(self, index_value: I, value: T) -> None:
        """Append one point. Invalidates every live view over this series."""
        _check_hashable([index_value], offset=len(self._index))
        self._index.append(index_value)
        self._values.append(value)
        self._version += 1

    def extend(self, points: Iterable[DataPoint[I, T]]) -> None:
        """Append points in order. Invalidates every live view over this series."""
        new_points = list(points)
        _check_hashable([p.index for p in new_points], offset=len(self._index))
        for point in new_points:
            self._index.append(point.index)
            self._values.append(point.value)
        self._version += 1

    # =========================================================================
    # Views
    # =========================================================================

    def __iter__(self) -> TimeSeriesIter[I, T]:
        return TimeSeriesIter(self)

    def iter(self, start: int = 0) -> TimeSeriesIter[I, T]:
        """Insertion-order pass, owned points."""
        return TimeSeriesIter(self, start)

    def iter_ref(self, start: int = 0) -> TimeSeriesRefIter[I, T]:
        """Insertion-order pass, points referencing the channel elements."""
        return TimeSeriesRefIter(self, start)

    def iter_ordered(self, start: int = 0) -> OrderedTimeSeriesIter[I, T]:
        """Order-validating pass; stops at the first decreasing index value."""
        return OrderedTimeSeriesIter(self, start)

    def iter_ordered_ref(self, start: int = 0) -> OrderedTimeSeriesRefIter[I, T]:
        """Order-validating pass returning points by reference."""
        return OrderedTimeSeriesRefIter(self, start)

    def shift(self, shift: int, start: int = 0) -> ShiftedTimeSeriesIter[I, T]:
        """Negative shift lags the values, positive shift leads them."""
        return ShiftedTimeSeriesIter(self, start, shift)

    def apply_rolling(
        self,
        window_size: int,
        transform_func: Callable[[Sequence[T]], R],
    ) -> RollingTimeSeriesIter[I, T, R]:
        """Rolling reduction, recomputed over the whole window each step."""
        return RollingTimeSeriesIter(self, window_size, transform_func)

    def apply_updating_rolling(
        self,
        window_size: int,
        update_func: Callable[[R | None, T], R | None],
        decrement_func: Callable[[R | None, T], R | None],
    ) -> RollingTimeSeriesIterWithUpdate[I, T, R]:
        """Rolling reduction maintained in O(1) per step by update/decrement."""
        return RollingTimeSeriesIterWithUpdate(self, window_size, update_func, decrement_func)

    def skip_apply(
        self,
        span_size: int,
        transform_func: Callable[[T, T], R],
    ) -> SkipApplyTimeSeriesIter[I, T, R]:
        """Combine points ``span_size`` apart, e.g. an N-step difference."""
        return SkipApplyTimeSeriesIter(self, span_size, transform_func)

    def map(self, func: Callable[[T], R], start: int = 0) -> MappedTimeSeriesIter[I, T, R]:
        """Insertion-order pass applying ``func`` to each value."""
        return MappedTimeSeriesIter(self, func, start)

    # =========================================================================
    # Dunder
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self._index == other._index and self._values == other._values

    def __repr__(self) -> str:
        n = len(self._index)
        if n == 0:
            return "TimeSeries(len=0)"
        return (
            f"TimeSeries(len={n}, first={self._index[0]!r}, "
            f"last={self._index[-1]!r})"
        )


def _check_hashable(index: Sequence[Any], offset: int = 0) -> None:
    for position, element in enumerate(index):
        try:
            hash(element)
        except TypeError:
            raise UnhashableIndexError(position + offset, element) from None
