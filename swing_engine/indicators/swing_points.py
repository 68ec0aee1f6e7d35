"""
Swing High/Low Detection Module

A swing high is a bar whose high is not exceeded by any bar within
``strength`` bars on either side; a swing low is the mirror image for lows.
A pivot at index ``p`` can only be confirmed at index ``p + strength``, when
its trailing window exists. On confirmation the new level is backfilled from
``p`` forward, so every output row carries the most recent swing level that
was in effect at that bar.

Uses Decimal for exact price comparisons; output values are floats.
"""
from numbers import Integral
from typing import Iterable, List, Optional

from swing_engine.config.settings import DEFAULT_STRENGTH
from swing_engine.core.models import PriceBar, SwingPoint
from swing_engine.exceptions import InvalidParameterError
from swing_engine.indicators.window import is_flat_window, is_swing_high, is_swing_low
from swing_engine.utils.decimal_utils import to_float


def validate_strength(strength: int) -> None:
    """
    Validate the swing strength parameter.

    Raises:
        InvalidParameterError: If strength is not an integer >= 1.
    """
    if isinstance(strength, bool) or not isinstance(strength, Integral):
        raise InvalidParameterError(
            "strength", strength, "Strength must be an integer."
        )
    if strength < 1:
        raise InvalidParameterError(
            "strength", strength, "Strength must be greater than or equal to 1."
        )


def compute_swing_points(
    bars: Iterable[PriceBar],
    strength: int = DEFAULT_STRENGTH
) -> List[SwingPoint]:
    """
    Calculate swing high and swing low levels for every bar.

    Args:
        bars: Price bars in chronological order (not validated).
        strength: Number of bars on each side required to confirm a pivot.
                  Must be >= 1.

    Returns:
        One SwingPoint per input bar, in input order. Fields are None until
        the first pivot of that kind is confirmed.

    Raises:
        InvalidParameterError: If strength < 1. Raised before any bar is read.
    """
    validate_strength(strength)
    strength = int(strength)

    bars = list(bars)
    length = len(bars)

    current_high: Optional[float] = None
    current_low: Optional[float] = None

    # buffers for backfilling
    swing_highs: List[Optional[float]] = [None] * length
    swing_lows: List[Optional[float]] = [None] * length

    for i in range(length):
        # carry forward last confirmed levels
        swing_highs[i] = current_high
        swing_lows[i] = current_low

        # need at least 2 * strength bars before the first pivot is knowable
        if i < 2 * strength:
            continue

        pivot_index = i - strength

        high_confirmed = is_swing_high(bars, pivot_index, strength)
        low_confirmed = is_swing_low(bars, pivot_index, strength)

        if high_confirmed and low_confirmed:
            if is_flat_window(bars, pivot_index, strength):
                continue

            current_high = to_float(bars[pivot_index].high)
            current_low = to_float(bars[pivot_index].low)

            for j in range(pivot_index, i + 1):
                swing_highs[j] = current_high
                swing_lows[j] = current_low

        elif high_confirmed:
            current_high = to_float(bars[pivot_index].high)

            for j in range(pivot_index, i + 1):
                swing_highs[j] = current_high

        elif low_confirmed:
            current_low = to_float(bars[pivot_index].low)

            for j in range(pivot_index, i + 1):
                swing_lows[j] = current_low

    return [
        SwingPoint(
            timestamp=bar.timestamp,
            swing_high=swing_highs[i],
            swing_low=swing_lows[i]
        )
        for i, bar in enumerate(bars)
    ]
