"""
Tests for the shift/lag view.
"""

import pytest

from tsviews import DataPoint, ShiftedTimeSeriesIter, TimeSeries


class TestLagAndLead:
    """Negative shift lags the values, positive shift leads them."""

    def test_lag_one(self, ramp, t):
        lagged = ramp.shift(-1).collect()
        expected = TimeSeries.from_points([
            DataPoint(t[1], 1.0),
            DataPoint(t[2], 2.0),
            DataPoint(t[3], 3.0),
            DataPoint(t[4], 4.0),
        ])
        assert lagged == expected

    def test_lead_one(self, ramp, t):
        led = ramp.shift(1).collect()
        expected = TimeSeries.from_points([
            DataPoint(t[0], 2.0),
            DataPoint(t[1], 3.0),
            DataPoint(t[2], 4.0),
            DataPoint(t[3], 5.0),
        ])
        assert led == expected

    def test_zero_shift_is_identity(self, ramp):
        assert ramp.shift(0).collect() == ramp

    @pytest.mark.parametrize("shift,expected_values,expected_positions", [
        (-2, [1.0, 2.0, 3.0], [2, 3, 4]),
        (2, [3.0, 4.0, 5.0], [0, 1, 2]),
        (-4, [1.0], [4]),
        (4, [5.0], [0]),
    ])
    def test_larger_shifts(self, ramp, t, shift, expected_values, expected_positions):
        points = list(ramp.shift(shift))
        assert [p.value for p in points] == expected_values
        assert [p.index for p in points] == [t[i] for i in expected_positions]

    @pytest.mark.parametrize("shift", [5, -5, 6, -6, 100, -100])
    def test_out_of_range_shift_is_empty(self, ramp, shift):
        assert len(ramp.shift(shift).collect()) == 0

    def test_empty_series(self):
        assert list(TimeSeries.empty().shift(-1)) == []
        assert list(TimeSeries.empty().shift(0)) == []


class TestShiftCursor:
    """Cursor placement and exhaustion."""

    def test_lag_honours_start_offset(self, ramp, t):
        points = list(ShiftedTimeSeriesIter(ramp, start=2, shift=-1))
        assert points == [DataPoint(t[3], 3.0), DataPoint(t[4], 4.0)]

    def test_lead_ignores_start_offset(self, ramp):
        """Leads always start reading |shift| values in."""
        assert list(ShiftedTimeSeriesIter(ramp, start=3, shift=1)) == list(ramp.shift(1))

    def test_exhaustion_is_sticky(self, ramp):
        view = ramp.shift(-1)
        assert len(list(view)) == 4
        assert view.exhausted
        assert view.advance() is None

    def test_lag_then_lead_restores_alignment(self, ramp, t):
        """Lagging then leading by the same amount trims both ends."""
        round_trip = ramp.shift(-1).collect().shift(1).collect()
        assert round_trip.index == (t[1], t[2], t[3])
        assert round_trip.values == (2.0, 3.0, 4.0)

    def test_lag_output_is_ordered(self, ramp):
        assert ramp.shift(-2).collect_unchecked().is_sorted()
