"""
tsviews - ordered time series with lazy, zero-copy views

An in-memory TimeSeries container (index channel + value channel) and a
family of lazy views over it: insertion-order and order-validating passes,
shift/lag, rolling reduce, O(1) rolling update, skip-apply, and collectors
that turn view output back into a TimeSeries.
"""

__version__ = "0.1.0"

from .errors import (
    TimeSeriesError,
    ChannelLengthMismatchError,
    UnhashableIndexError,
    InvalidWindowError,
    InvalidSpanError,
    InvalidStartError,
    EmptySeriesError,
    ConcurrentModificationError,
)
from .types import DataPoint
from .timeseries import TimeSeries
from .views import (
    TimeSeriesView,
    TimeSeriesIter,
    TimeSeriesRefIter,
    OrderedTimeSeriesIter,
    OrderedTimeSeriesRefIter,
    ShiftedTimeSeriesIter,
    RollingTimeSeriesIter,
    RollingTimeSeriesIterWithUpdate,
    SkipApplyTimeSeriesIter,
    MappedTimeSeriesIter,
    collect,
    collect_unchecked,
)

__all__ = [
    "__version__",
    # Errors
    "TimeSeriesError",
    "ChannelLengthMismatchError",
    "UnhashableIndexError",
    "InvalidWindowError",
    "InvalidSpanError",
    "InvalidStartError",
    "EmptySeriesError",
    "ConcurrentModificationError",
    # Data model
    "DataPoint",
    "TimeSeries",
    # Views
    "TimeSeriesView",
    "TimeSeriesIter",
    "TimeSeriesRefIter",
    "OrderedTimeSeriesIter",
    "OrderedTimeSeriesRefIter",
    "ShiftedTimeSeriesIter",
    "RollingTimeSeriesIter",
    "RollingTimeSeriesIterWithUpdate",
    "SkipApplyTimeSeriesIter",
    "MappedTimeSeriesIter",
    # Collectors
    "collect",
    "collect_unchecked",
]
