"""
Collect point sequences back into a TimeSeries.

collect() goes through the validating constructor. collect_unchecked() is
the named escape hatch for output the caller already knows is ordered (an
order-validating, shifted or rolling view over an ordered series): it skips
every check, so the sortedness of the result is assumed, not verified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

from ..types import DataPoint

if TYPE_CHECKING:
    from ..timeseries import TimeSeries

I = TypeVar("I")
T = TypeVar("T")


def collect(points: Iterable[DataPoint[I, T]]) -> TimeSeries[I, T]:
    """Build a TimeSeries from points through the validating constructor."""
    from ..timeseries import TimeSeries
    return TimeSeries.from_points(points)


def collect_unchecked(points: Iterable[DataPoint[I, T]]) -> TimeSeries[I, T]:
    """Build a TimeSeries from points without any validation."""
    from ..timeseries import TimeSeries
    return TimeSeries.from_points_unchecked(points)
