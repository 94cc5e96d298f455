"""
Shared fixtures for tsviews tests.
"""

from datetime import datetime, timedelta

import pytest

from tsviews import TimeSeries
from tsviews.config import reset_config


def minute_index(n: int) -> list[datetime]:
    """n one-minute timestamps starting at the epoch."""
    start = datetime(1970, 1, 1)
    return [start + timedelta(seconds=60 * i) for i in range(n)]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from a default, environment-driven config."""
    monkeypatch.delenv("TSVIEWS_CHECK_MUTATION", raising=False)
    monkeypatch.delenv("TSVIEWS_LOG_TO_FILE", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def t() -> list[datetime]:
    """Five minute timestamps t0..t4."""
    return minute_index(5)


@pytest.fixture
def ramp(t) -> TimeSeries:
    """Values 1..5 on t0..t4."""
    return TimeSeries.from_vecs(t, [1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def ones(t) -> TimeSeries:
    """Values all 1.0 on t0..t4."""
    return TimeSeries.from_vecs(t, [1.0] * 5)


@pytest.fixture
def bumpy(t) -> TimeSeries:
    """Irregular values on t0..t4."""
    return TimeSeries.from_vecs(t, [1.0, 4.0, 2.0, 9.0, 100.0])
