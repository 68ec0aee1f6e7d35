"""
Swing window predicates.

Each predicate inspects the symmetric window ``[p - strength, p + strength]``
around a candidate pivot ``p``:

- Left side is strict and skips indices before the first bar.
- Right side is non-strict and requires every index to exist, so a pivot is
  only confirmable once the full trailing window is known.

The asymmetry makes the earliest bar of a tie win: on a double bottom the
second equal low has an equal value to its left and fails, while the first
one tolerates the equal value to its right.

A bar with a missing (None) price never qualifies, and a missing price
inside the window disqualifies the pivot.
"""
from typing import Sequence

from swing_engine.core.models import PriceBar


def is_swing_high(bars: Sequence[PriceBar], pivot_index: int, strength: int) -> bool:
    """True if bars[pivot_index].high is a confirmed swing high."""
    pivot = bars[pivot_index].high
    if pivot is None:
        return False

    # Check left side
    for i in range(pivot_index - strength, pivot_index):
        if i < 0:
            continue
        high = bars[i].high
        if high is None or high >= pivot:
            return False

    # Check right side
    for i in range(pivot_index + 1, pivot_index + strength + 1):
        if i >= len(bars):
            return False
        high = bars[i].high
        if high is None or high > pivot:
            return False

    return True


def is_swing_low(bars: Sequence[PriceBar], pivot_index: int, strength: int) -> bool:
    """True if bars[pivot_index].low is a confirmed swing low."""
    pivot = bars[pivot_index].low
    if pivot is None:
        return False

    # Check left side
    for i in range(pivot_index - strength, pivot_index):
        if i < 0:
            continue
        low = bars[i].low
        if low is None or low <= pivot:
            return False

    # Check right side
    for i in range(pivot_index + 1, pivot_index + strength + 1):
        if i >= len(bars):
            return False
        low = bars[i].low
        if low is None or low < pivot:
            return False

    return True


def is_flat_window(bars: Sequence[PriceBar], pivot_index: int, strength: int) -> bool:
    """True if every in-bounds bar of the window has the pivot's exact high and low."""
    high = bars[pivot_index].high
    low = bars[pivot_index].low
    if high is None or low is None:
        return False

    for i in range(pivot_index - strength, pivot_index + strength + 1):
        if i < 0 or i >= len(bars):
            continue
        if bars[i].high != high or bars[i].low != low:
            return False

    return True
