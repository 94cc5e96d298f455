"""
View vs vectorized parity audit.

Runs a view over a numeric TimeSeries and compares its output against the
pandas reference in vectorized_references. Index channels must match
exactly, values within ``tolerance`` (NaN equals NaN).

Audit kinds:
1. shift            - ShiftedTimeSeriesIter vs Series.shift
2. rolling_sum      - RollingTimeSeriesIter(window_sum) vs rolling().sum()
3. rolling_mean     - RollingTimeSeriesIter(window_mean) vs rolling().mean()
4. updating_sum     - RollingTimeSeriesIterWithUpdate(sum pair) vs rolling().sum()
5. span_difference  - SkipApplyTimeSeriesIter(difference) vs iloc[::span].diff()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from ..reducers import create_incremental_pair, difference, window_mean, window_sum
from .vectorized_references import (
    vectorized_rolling,
    vectorized_shift,
    vectorized_span_difference,
)

if TYPE_CHECKING:
    from ..timeseries import TimeSeries
    from ..views import TimeSeriesView

logger = logging.getLogger(__name__)

AUDIT_KINDS = ("shift", "rolling_sum", "rolling_mean", "updating_sum", "span_difference")


@dataclass
class ParityResult:
    """Result of comparing one view against its reference."""

    kind: str
    passed: bool
    compared: int
    max_abs_diff: float
    index_match: bool
    params: dict[str, Any] = field(default_factory=dict)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "passed": self.passed,
            "compared": self.compared,
            "max_abs_diff": self.max_abs_diff,
            "index_match": self.index_match,
            "params": dict(self.params),
            "error_message": self.error_message,
        }


@dataclass
class ParityAuditResult:
    """Result of running every audit kind over one series."""

    success: bool
    tolerance: float
    points_tested: int
    results: list[ParityResult] = field(default_factory=list)

    @property
    def failed(self) -> list[ParityResult]:
        return [r for r in self.results if not r.passed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "tolerance": self.tolerance,
            "points_tested": self.points_tested,
            "results": [r.to_dict() for r in self.results],
        }


def _build(ts: TimeSeries, kind: str, params: dict[str, Any]) -> tuple[TimeSeriesView, pd.Series]:
    if kind == "shift":
        shift = params["shift"]
        return ts.shift(shift), vectorized_shift(ts, shift)
    if kind == "rolling_sum":
        window = params["window_size"]
        return ts.apply_rolling(window, window_sum), vectorized_rolling(ts, window, "sum")
    if kind == "rolling_mean":
        window = params["window_size"]
        return ts.apply_rolling(window, window_mean), vectorized_rolling(ts, window, "mean")
    if kind == "updating_sum":
        window = params["window_size"]
        update, decrement = create_incremental_pair("sum")
        return (
            ts.apply_updating_rolling(window, update, decrement),
            vectorized_rolling(ts, window, "sum"),
        )
    if kind == "span_difference":
        span = params["span_size"]
        return ts.skip_apply(span, difference), vectorized_span_difference(ts, span)
    raise ValueError(
        f"Unknown audit kind '{kind}'. Valid: {list(AUDIT_KINDS)}\n"
        f"\n"
        f"Fix: audit_view_parity(ts, 'rolling_sum', window_size=5)"
    )


def audit_view_parity(
    ts: TimeSeries,
    kind: str,
    tolerance: float = 1e-9,
    **params: Any,
) -> ParityResult:
    """
    Compare one view kind against its pandas reference.

    Args:
        ts: Series with numeric values.
        kind: One of AUDIT_KINDS.
        tolerance: Absolute tolerance for value comparison.
        **params: shift / window_size / span_size as the kind requires.

    Raises:
        ValueError: For an unknown kind.
        TimeSeriesError: If the view rejects its parameters.
    """
    view, reference = _build(ts, kind, params)
    points = list(view)

    view_index = [p.index for p in points]
    view_values = np.asarray([p.value for p in points], dtype="float64")
    ref_values = reference.to_numpy(dtype="float64")

    if len(points) != len(reference):
        result = ParityResult(
            kind=kind,
            passed=False,
            compared=0,
            max_abs_diff=np.inf,
            index_match=False,
            params=params,
            error_message=f"length mismatch: view={len(points)} reference={len(reference)}",
        )
        logger.debug("parity %s failed: %s", kind, result.error_message)
        return result

    index_match = view_index == list(reference.index)
    if len(points) == 0:
        max_abs_diff = 0.0
        values_match = True
    else:
        diffs = np.abs(view_values - ref_values)
        max_abs_diff = float(np.nanmax(diffs)) if not np.all(np.isnan(diffs)) else 0.0
        values_match = bool(np.all(np.isclose(view_values, ref_values, rtol=0.0, atol=tolerance, equal_nan=True)))

    passed = index_match and values_match
    result = ParityResult(
        kind=kind,
        passed=passed,
        compared=len(points),
        max_abs_diff=max_abs_diff,
        index_match=index_match,
        params=params,
        error_message=None if passed else (
            "index mismatch" if not index_match else f"max_abs_diff {max_abs_diff:.3e} > {tolerance}"
        ),
    )
    logger.debug("parity %s passed=%s compared=%d max_abs_diff=%.3e", kind, passed, len(points), max_abs_diff)
    return result


def run_parity_audit(
    ts: TimeSeries,
    window_size: int = 3,
    shift: int = -1,
    span_size: int = 1,
    tolerance: float = 1e-9,
) -> ParityAuditResult:
    """Run every audit kind over ``ts`` and collect the results."""
    params = {
        "shift": {"shift": shift},
        "rolling_sum": {"window_size": window_size},
        "rolling_mean": {"window_size": window_size},
        "updating_sum": {"window_size": window_size},
        "span_difference": {"span_size": span_size},
    }
    results = [audit_view_parity(ts, kind, tolerance, **params[kind]) for kind in AUDIT_KINDS]
    return ParityAuditResult(
        success=all(r.passed for r in results),
        tolerance=tolerance,
        points_tested=len(ts),
        results=results,
    )
