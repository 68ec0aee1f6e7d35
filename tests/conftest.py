"""
Shared test fixtures and helpers for swing engine tests.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Sequence

import pytest

from swing_engine.core.models import PriceBar

T0 = datetime(2025, 1, 2, 9, 35)


def make_bar(index: int, high, low, timestamp=None) -> PriceBar:
    """Helper to create a PriceBar one minute after the previous one.

    Args:
        index: Bar index in the sequence
        high: High price (converted through str to keep it exact)
        low: Low price
        timestamp: Defaults to T0 + index minutes

    Returns:
        PriceBar for use in detector tests
    """
    if isinstance(high, (int, float)):
        high = Decimal(str(high))
    if isinstance(low, (int, float)):
        low = Decimal(str(low))
    mid = (high + low) / 2 if high is not None and low is not None else None
    return PriceBar(
        timestamp=timestamp or T0 + timedelta(minutes=index),
        high=high,
        low=low,
        open=mid,
        close=mid,
        volume=0,
    )


def make_bars(highs: Sequence, lows: Sequence) -> List[PriceBar]:
    """Build bars from parallel high/low sequences."""
    assert len(highs) == len(lows)
    return [make_bar(i, h, l) for i, (h, l) in enumerate(zip(highs, lows))]


@pytest.fixture
def valley_bars():
    """Five bars with a single low pivot at index 2."""
    return make_bars([10, 9, 8, 9, 10], [9, 8, 7, 8, 9])


@pytest.fixture
def step_bars():
    """Two valleys (lows at 2 and 6) with a peak at 4."""
    return make_bars(
        [10, 9, 8, 9, 10, 9, 8, 9, 10],
        [9, 8, 7, 8, 9, 8, 7, 8, 9],
    )
