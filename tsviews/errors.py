"""
Exception types for tsviews.

Construction-time contract violations raise subclasses of TimeSeriesError
(a ValueError). Views never raise for ordinary runtime conditions: exhaustion
and order violations are reported as "no further points". The one runtime
exception is ConcurrentModificationError, raised when a container is mutated
while a view over it is still being advanced.
"""

from __future__ import annotations


class TimeSeriesError(ValueError):
    """Base class for invalid container or view construction."""


class ChannelLengthMismatchError(TimeSeriesError):
    """Index and value channels differ in length."""

    def __init__(self, index_len: int, values_len: int) -> None:
        self.index_len = index_len
        self.values_len = values_len
        super().__init__(
            f"index channel has {index_len} elements but value channel has {values_len}\n"
            f"\n"
            f"Fix: TimeSeries.from_vecs(index, values) with len(index) == len(values)"
        )


class UnhashableIndexError(TimeSeriesError):
    """An index element cannot be hashed."""

    def __init__(self, position: int, element: object) -> None:
        self.position = position
        super().__init__(
            f"index element at position {position} is unhashable "
            f"({type(element).__name__})\n"
            f"\n"
            f"Fix: use hashable index values such as datetime, int or str"
        )


class InvalidWindowError(TimeSeriesError):
    """Rolling window size outside 1..len(series)."""

    def __init__(self, window_size: int, series_len: int) -> None:
        self.window_size = window_size
        self.series_len = series_len
        super().__init__(
            f"window_size must be in [1, {series_len}], got {window_size}\n"
            f"\n"
            f"Fix: ts.apply_rolling(window_size=min(20, len(ts)), transform_func=window_sum)"
        )


class InvalidSpanError(TimeSeriesError):
    """Skip-apply span size below 1."""

    def __init__(self, span_size: int) -> None:
        self.span_size = span_size
        super().__init__(
            f"span_size must be >= 1, got {span_size}\n"
            f"\n"
            f"Fix: ts.skip_apply(span_size=1, transform_func=difference)"
        )


class InvalidStartError(TimeSeriesError):
    """View start offset below zero."""

    def __init__(self, start: int) -> None:
        self.start = start
        super().__init__(
            f"start must be >= 0, got {start}\n"
            f"\n"
            f"Fix: ts.iter(start=max(0, len(ts) - n)) to begin n points from the end"
        )


class EmptySeriesError(TimeSeriesError):
    """A view that needs at least one point was built over an empty series."""

    def __init__(self, view_name: str) -> None:
        self.view_name = view_name
        super().__init__(f"{view_name} requires a non-empty TimeSeries")


class ConcurrentModificationError(RuntimeError):
    """The source TimeSeries changed while a view over it was alive."""

    def __init__(self, view_name: str, expected_version: int, actual_version: int) -> None:
        self.view_name = view_name
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"TimeSeries mutated during {view_name} iteration "
            f"(version {expected_version} -> {actual_version})"
        )
