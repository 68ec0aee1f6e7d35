"""
Swing Service

Runs swing detection over bar sequences or candle DataFrames and logs a
summary of what was found.
"""
from typing import Iterable, List, Optional, Tuple

import pandas as pd
import structlog

from swing_engine.config.settings import SWING_STRENGTH
from swing_engine.core.models import PriceBar, SwingPoint
from swing_engine.indicators.swing_points import compute_swing_points, validate_strength
from swing_engine.services.candle_service import CandleService

logger = structlog.get_logger(__name__)

Pivot = Tuple[int, str, float]


class SwingService:
    """Service wrapping swing detection with a configured strength."""

    def __init__(self, strength: Optional[int] = None, candle_service: Optional[CandleService] = None):
        self.strength = SWING_STRENGTH if strength is None else strength
        validate_strength(self.strength)
        self.candle_service = candle_service or CandleService()

    def detect(self, bars: Iterable[PriceBar]) -> List[SwingPoint]:
        """Compute swing points for the bars and log a summary."""
        bars = list(bars)
        min_required = 2 * self.strength + 1

        if len(bars) < min_required:
            logger.warning(
                "not_enough_bars_for_swing_detection",
                bars=len(bars),
                min_required=min_required
            )

        points = compute_swing_points(bars, self.strength)
        pivots = self.pivots(points)

        logger.info(
            "swing_points_computed",
            bars=len(points),
            strength=self.strength,
            swing_highs=sum(1 for _, kind, _ in pivots if kind == 'high'),
            swing_lows=sum(1 for _, kind, _ in pivots if kind == 'low'),
            latest_swing_high=points[-1].swing_high if points else None,
            latest_swing_low=points[-1].swing_low if points else None
        )
        return points

    def annotate(self, df: Optional[pd.DataFrame]) -> pd.DataFrame:
        """
        Return the candles in chronological order with 'swing_high' and
        'swing_low' columns added.

        Returns an empty DataFrame (with the swing columns) for None or empty input.
        """
        candles = self.candle_service.prepare_candles(df)
        if candles is None:
            columns = list(df.columns) if df is not None else []
            return pd.DataFrame(columns=columns + ['swing_high', 'swing_low'])

        points = self.detect(self.candle_service.to_bars(candles))

        result = candles.copy()
        result['swing_high'] = pd.Series([p.swing_high for p in points], index=result.index, dtype=object)
        result['swing_low'] = pd.Series([p.swing_low for p in points], index=result.index, dtype=object)
        return result

    @staticmethod
    def pivots(points: List[SwingPoint]) -> List[Pivot]:
        """
        List the bars where a new swing level takes effect.

        Because confirmations are backfilled, a level change appears at the
        pivot bar itself. A new pivot with the same value as the previous
        level is not distinguishable and is not listed.

        Returns:
            (index, 'high' | 'low', value) tuples in index order
        """
        result: List[Pivot] = []
        previous_high: Optional[float] = None
        previous_low: Optional[float] = None

        for index, point in enumerate(points):
            if point.swing_high is not None and point.swing_high != previous_high:
                result.append((index, 'high', point.swing_high))
            if point.swing_low is not None and point.swing_low != previous_low:
                result.append((index, 'low', point.swing_low))
            previous_high = point.swing_high
            previous_low = point.swing_low

        return result
