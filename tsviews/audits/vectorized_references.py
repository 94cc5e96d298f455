"""
Vectorized reference implementations of the view algorithms.

Uses pandas as the ground truth: trivial to verify by eye, and independent
of the cursor arithmetic the views implement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from ..timeseries import TimeSeries


def to_pandas(ts: TimeSeries) -> pd.Series:
    """Channels of ``ts`` as a float Series indexed by the index channel."""
    return pd.Series(list(ts.values), index=pd.Index(list(ts.index)), dtype="float64")


def vectorized_shift(ts: TimeSeries, shift: int) -> pd.Series:
    """
    Shift values against the index (negative lags, positive leads).

    pandas shifts the other way round, so shift=-1 here is Series.shift(1).
    Positions the shift leaves empty are dropped, never filled.
    """
    series = to_pandas(ts)
    n = len(series)
    if abs(shift) >= n:
        return series.iloc[0:0]
    shifted = series.shift(-shift)
    if shift < 0:
        return shifted.iloc[-shift:]
    return shifted.iloc[: n - shift]


def vectorized_rolling(ts: TimeSeries, window_size: int, how: str = "sum") -> pd.Series:
    """Rolling sum/mean/min/max over complete windows only."""
    rolling = to_pandas(ts).rolling(window=window_size, min_periods=window_size)
    if how == "sum":
        result = rolling.sum()
    elif how == "mean":
        result = rolling.mean()
    elif how == "min":
        result = rolling.min()
    elif how == "max":
        result = rolling.max()
    else:
        raise ValueError(f"how must be 'sum', 'mean', 'min' or 'max', got '{how}'")
    return result.iloc[window_size - 1:]


def vectorized_span_difference(ts: TimeSeries, span_size: int) -> pd.Series:
    """Difference between points ``span_size`` apart, taken at 0, span, 2*span, ..."""
    return to_pandas(ts).iloc[::span_size].diff().iloc[1:]
