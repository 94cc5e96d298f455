"""
Ready-made transform functions for the windowed views.

Three families, one per view signature:
- window reducers for apply_rolling():            f(window) -> value
- update/decrement pairs for apply_updating_rolling(): f(running, x) -> running
- two-point transforms for skip_apply():          f(prior, current) -> value

All of them are pure. Window reducers use numpy and return Python floats.

Usage:
    from tsviews.reducers import create_incremental_pair, window_sum

    update, decrement = create_incremental_pair("sum")
    fast = ts.apply_updating_rolling(20, update, decrement).collect_unchecked()
    slow = ts.apply_rolling(20, window_sum).collect_unchecked()
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np


# =============================================================================
# Window reducers (full recompute)
# =============================================================================

def window_sum(window: Sequence[float]) -> float:
    return float(np.sum(window))


def window_mean(window: Sequence[float]) -> float:
    return float(np.mean(window))


def window_min(window: Sequence[float]) -> float:
    return float(np.min(window))


def window_max(window: Sequence[float]) -> float:
    return float(np.max(window))


def window_std(window: Sequence[float]) -> float:
    """Sample standard deviation (ddof=1); NaN for a single-value window."""
    if len(window) < 2:
        return np.nan
    return float(np.std(window, ddof=1))


# =============================================================================
# Incremental update/decrement pairs
# =============================================================================
# A running value of None means "nothing accumulated yet".

def sum_update(running: float | None, incoming: float) -> float | None:
    return (0.0 if running is None else running) + incoming


def sum_decrement(running: float | None, outgoing: float) -> float | None:
    return (0.0 if running is None else running) - outgoing


def count_update(running: int | None, incoming: Any) -> int | None:
    return (0 if running is None else running) + 1


def count_decrement(running: int | None, outgoing: Any) -> int | None:
    return (0 if running is None else running) - 1


def sum_sq_update(running: float | None, incoming: float) -> float | None:
    return (0.0 if running is None else running) + incoming * incoming


def sum_sq_decrement(running: float | None, outgoing: float) -> float | None:
    return (0.0 if running is None else running) - outgoing * outgoing


# =============================================================================
# Two-point transforms (skip-apply)
# =============================================================================

def difference(prior: float, current: float) -> float:
    return current - prior


def pct_change(prior: float, current: float) -> float:
    """Relative change; NaN when prior is zero."""
    if prior == 0:
        return np.nan
    return current / prior - 1.0


def log_return(prior: float, current: float) -> float:
    """Natural-log return; NaN unless both values are positive."""
    if prior <= 0 or current <= 0:
        return np.nan
    return float(np.log(current / prior))


# =============================================================================
# Registries
# =============================================================================

IncrementalPair = tuple[Callable[[Any, Any], Any], Callable[[Any, Any], Any]]

INCREMENTAL_REDUCERS: dict[str, IncrementalPair] = {
    "sum": (sum_update, sum_decrement),
    "count": (count_update, count_decrement),
    "sum_sq": (sum_sq_update, sum_sq_decrement),
}

WINDOW_REDUCERS: dict[str, Callable[[Sequence[float]], float]] = {
    "sum": window_sum,
    "mean": window_mean,
    "min": window_min,
    "max": window_max,
    "std": window_std,
}

SKIP_TRANSFORMS: dict[str, Callable[[float, float], float]] = {
    "difference": difference,
    "pct_change": pct_change,
    "log_return": log_return,
}


def _lookup(registry: dict[str, Any], kind: str, name: str) -> Any:
    func = registry.get(name.lower())
    if func is None:
        raise ValueError(
            f"Unknown {kind} '{name}'. Valid: {sorted(registry)}\n"
            f"\n"
            f"Fix: pass one of the registered names or your own callable"
        )
    return func


def create_incremental_pair(name: str) -> IncrementalPair:
    """
    Return the (update, decrement) pair registered under ``name``.

    Raises:
        ValueError: If no pair is registered under that name.
    """
    return _lookup(INCREMENTAL_REDUCERS, "incremental reducer", name)


def get_window_reducer(name: str) -> Callable[[Sequence[float]], float]:
    return _lookup(WINDOW_REDUCERS, "window reducer", name)


def get_skip_transform(name: str) -> Callable[[float, float], float]:
    return _lookup(SKIP_TRANSFORMS, "skip transform", name)


def supports_incremental(name: str) -> bool:
    """True if ``name`` has a registered update/decrement pair."""
    return name.lower() in INCREMENTAL_REDUCERS


def list_incremental_reducers() -> list[str]:
    return sorted(INCREMENTAL_REDUCERS)
