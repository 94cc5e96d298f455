"""
Lazy views over a TimeSeries.

Every view borrows its source read-only and produces points on demand via
advance() or ordinary iteration. None of them copy the source channels.

Usage:
    from tsviews.views import OrderedTimeSeriesIter, collect_unchecked

    prefix = collect_unchecked(OrderedTimeSeriesIter(ts))
"""

from __future__ import annotations

# Base class
from .base import TimeSeriesView

# Collectors
from .collect import collect, collect_unchecked

# Insertion-order views
from .passthrough import TimeSeriesIter, TimeSeriesRefIter

# Order-validating views
from .ordered import OrderedTimeSeriesIter, OrderedTimeSeriesRefIter

# Index/value realignment
from .shifted import ShiftedTimeSeriesIter

# Windowed reductions
from .rolling import RollingTimeSeriesIter, RollingTimeSeriesIterWithUpdate
from .skip_apply import SkipApplyTimeSeriesIter

# Value transforms
from .mapped import MappedTimeSeriesIter

__all__ = [
    # Base
    "TimeSeriesView",
    # Collectors
    "collect",
    "collect_unchecked",
    # Insertion-order
    "TimeSeriesIter",
    "TimeSeriesRefIter",
    # Order-validating
    "OrderedTimeSeriesIter",
    "OrderedTimeSeriesRefIter",
    # Shift
    "ShiftedTimeSeriesIter",
    # Windowed
    "RollingTimeSeriesIter",
    "RollingTimeSeriesIterWithUpdate",
    "SkipApplyTimeSeriesIter",
    # Value transforms
    "MappedTimeSeriesIter",
]
