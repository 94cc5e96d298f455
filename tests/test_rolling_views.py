"""
Tests for the rolling-reduce and rolling-incremental views.

The incremental view must emit exactly what the recompute view emits for
any reduction expressible as an update/decrement pair.
"""

import random

import pytest

from tsviews import (
    DataPoint,
    InvalidWindowError,
    RollingTimeSeriesIter,
    RollingTimeSeriesIterWithUpdate,
    TimeSeries,
)
from tsviews.reducers import (
    count_decrement,
    count_update,
    sum_decrement,
    sum_update,
    window_sum,
)


def roll_sum(buffer):
    return sum(buffer)


# ─────────────────────────────────────────────────────────────────────────────
# Rolling reduce
# ─────────────────────────────────────────────────────────────────────────────

class TestRollingTimeSeriesIter:
    """Full recompute per step."""

    def test_rolling_sum_of_ones(self, ones, t):
        rolled = ones.apply_rolling(2, roll_sum).collect()
        expected = TimeSeries.from_points([
            DataPoint(t[1], 2.0),
            DataPoint(t[2], 2.0),
            DataPoint(t[3], 2.0),
            DataPoint(t[4], 2.0),
        ])
        assert rolled == expected

    def test_window_contents(self, ramp):
        seen = []

        def record(window):
            seen.append(window)
            return len(window)

        list(ramp.apply_rolling(3, record))
        assert seen == [(1.0, 2.0, 3.0), (2.0, 3.0, 4.0), (3.0, 4.0, 5.0)]

    def test_window_of_one_is_elementwise(self, ramp):
        assert ramp.apply_rolling(1, roll_sum).collect() == ramp

    def test_window_of_full_length_yields_one_point(self, ramp, t):
        assert list(ramp.apply_rolling(5, roll_sum)) == [DataPoint(t[4], 15.0)]

    @pytest.mark.parametrize("window_size", [0, -1, 6])
    def test_invalid_window_raises(self, ramp, window_size):
        with pytest.raises(InvalidWindowError, match="window_size"):
            RollingTimeSeriesIter(ramp, window_size, roll_sum)

    def test_empty_series_raises(self):
        with pytest.raises(InvalidWindowError):
            TimeSeries.empty().apply_rolling(1, roll_sum)

    def test_reducer_result_type_is_free(self, ramp):
        points = list(ramp.apply_rolling(2, lambda w: f"{w[0]:.0f}-{w[1]:.0f}"))
        assert [p.value for p in points] == ["1-2", "2-3", "3-4", "4-5"]


# ─────────────────────────────────────────────────────────────────────────────
# Rolling incremental
# ─────────────────────────────────────────────────────────────────────────────

class TestRollingTimeSeriesIterWithUpdate:
    """O(1) update/decrement per step."""

    def test_rolling_sum_of_ones(self, ones, t):
        rolled = ones.apply_updating_rolling(2, sum_update, sum_decrement).collect()
        expected = TimeSeries.from_points([
            DataPoint(t[1], 2.0),
            DataPoint(t[2], 2.0),
            DataPoint(t[3], 2.0),
            DataPoint(t[4], 2.0),
        ])
        assert rolled == expected

    def test_matches_recompute_on_irregular_values(self, bumpy):
        buffered = bumpy.apply_rolling(2, roll_sum).collect()
        updated = bumpy.apply_updating_rolling(2, sum_update, sum_decrement).collect()
        assert buffered == updated

    @pytest.mark.parametrize("window_size", [1, 2, 3, 7, 20])
    def test_matches_recompute_for_random_integers(self, window_size):
        """Integer values keep both paths exact for any window."""
        rng = random.Random(window_size)
        values = [rng.randint(-100, 100) for _ in range(20)]
        ts = TimeSeries.from_vecs(list(range(20)), values)
        buffered = ts.apply_rolling(window_size, roll_sum).collect()
        updated = ts.apply_updating_rolling(window_size, sum_update, sum_decrement).collect()
        assert buffered == updated

    def test_count_pair_matches_window_length(self, ramp):
        counts = [p.value for p in ramp.apply_updating_rolling(3, count_update, count_decrement)]
        assert counts == [3, 3, 3]

    def test_initial_running_value_is_fold_of_first_window(self, ramp):
        view = ramp.apply_updating_rolling(3, sum_update, sum_decrement)
        assert view.running_value == 6.0
        assert view.cursor == 2

    @pytest.mark.parametrize("window_size", [0, 6])
    def test_invalid_window_raises(self, ramp, window_size):
        with pytest.raises(InvalidWindowError):
            RollingTimeSeriesIterWithUpdate(ramp, window_size, sum_update, sum_decrement)

    def test_undefined_step_does_not_end_the_view(self, t):
        """A None running value skips that step; later steps still emit."""
        ts = TimeSeries.from_vecs(t, [1.0, 1.0, None, 1.0, 1.0])

        def update(running, incoming):
            if incoming is None:
                return None
            return (0.0 if running is None else running) + incoming

        def decrement(running, outgoing):
            if running is None or outgoing is None:
                return running
            return running - outgoing

        view = ts.apply_updating_rolling(1, update, decrement)
        results = [view.advance() for _ in range(5)]
        assert [r is None for r in results] == [False, False, True, False, False]
        assert not view.exhausted
        assert view.advance() is None
        assert view.exhausted

    def test_iteration_skips_undefined_steps(self, t):
        ts = TimeSeries.from_vecs(t, [1.0, None, 1.0, None, 1.0])

        def update(running, incoming):
            return None if incoming is None else incoming

        def decrement(running, outgoing):
            return running

        points = list(ts.apply_updating_rolling(1, update, decrement))
        assert [p.index for p in points] == [t[0], t[2], t[4]]


class TestRollingEquivalence:
    """Both rolling views agree, including the numpy reducer."""

    def test_window_sum_reducer_matches_incremental(self, bumpy):
        a = [p.value for p in bumpy.apply_rolling(3, window_sum)]
        b = [p.value for p in bumpy.apply_updating_rolling(3, sum_update, sum_decrement)]
        assert a == pytest.approx(b)
