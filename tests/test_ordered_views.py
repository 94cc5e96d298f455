"""
Tests for order-validating views.

A decreasing index value ends the view for good; the prefix before it is
emitted and everything after it (even ordered points) is discarded.
"""

import pytest

from tsviews import (
    DataPoint,
    OrderedTimeSeriesIter,
    OrderedTimeSeriesRefIter,
    TimeSeries,
)


class TestOrderedTimeSeriesIter:
    """Owned order-validating pass."""

    def test_sorted_series_passes_through(self, ramp):
        assert list(ramp.iter_ordered()) == list(ramp.iter())

    def test_ties_are_allowed(self):
        ts = TimeSeries.from_vecs([1, 1, 2, 2], ["a", "b", "c", "d"])
        assert [p.value for p in ts.iter_ordered()] == ["a", "b", "c", "d"]

    @pytest.mark.parametrize("k", [1, 2, 3, 4])
    def test_ordering_gate_emits_exactly_first_k_points(self, k):
        """Decreasing value at position k -> exactly k points, nothing after."""
        index = list(range(10, 15))
        index[k] = -1
        ts = TimeSeries.from_vecs(index, list(range(5)))
        view = OrderedTimeSeriesIter(ts)
        points = list(view)
        assert [p.value for p in points] == list(range(k))
        assert view.violation_at == k
        assert view.exhausted

    def test_violation_is_permanent(self):
        ts = TimeSeries.from_vecs([1, 3, 2, 4, 5], list("abcde"))
        view = ts.iter_ordered()
        assert view.advance() == DataPoint(1, "a")
        assert view.advance() == DataPoint(3, "b")
        assert view.advance() is None
        # 4 and 5 would be in order relative to 3, but the view stays closed
        assert view.advance() is None
        assert view.advance() is None

    def test_no_violation_leaves_marker_unset(self, ramp):
        view = ramp.iter_ordered()
        list(view)
        assert view.violation_at is None

    def test_first_point_always_emitted(self):
        ts = TimeSeries.from_vecs([5, 1], ["a", "b"])
        assert [p.value for p in ts.iter_ordered()] == ["a"]

    def test_start_offset_skips_earlier_disorder(self):
        ts = TimeSeries.from_vecs([9, 1, 2, 3], list("abcd"))
        assert [p.value for p in ts.iter_ordered(start=1)] == ["b", "c", "d"]

    def test_nan_index_fails_closed(self):
        ts = TimeSeries.from_vecs([1.0, float("nan"), 3.0], list("abc"))
        assert [p.value for p in ts.iter_ordered()] == ["a"]

    def test_collected_prefix_is_sorted(self):
        ts = TimeSeries.from_vecs([1, 2, 3, 0, 4], list("abcde"))
        prefix = ts.iter_ordered().collect_unchecked()
        assert prefix.index == (1, 2, 3)
        assert prefix.is_sorted()


class TestOrderedTimeSeriesRefIter:
    """By-reference order-validating pass."""

    def test_points_reference_channel_objects(self):
        ts = TimeSeries.from_vecs([1, 2], [[1], [2]])
        point = next(OrderedTimeSeriesRefIter(ts))
        assert point.value is ts.value_at(0)

    def test_same_gate_as_owned(self):
        ts = TimeSeries.from_vecs([1, 2, 0, 3], list("abcd"))
        assert list(ts.iter_ordered_ref()) == list(ts.iter_ordered())
