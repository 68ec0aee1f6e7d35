"""
Candle Service

This module converts candle DataFrames to and from the engine's data types.
"""
from typing import List, Optional, Sequence

import pandas as pd

from swing_engine.core.models import PriceBar, SwingPoint
from swing_engine.exceptions import ValidationError
from swing_engine.logger import setup_logger

logger = setup_logger(__name__)

REQUIRED_COLUMNS = ('high', 'low')
OPTIONAL_COLUMNS = ('open', 'close', 'volume')
TIME_COLUMNS = ('unix', 'timestamp')


class CandleService:
    """Service for converting candle data."""

    @staticmethod
    def _time_column(df: pd.DataFrame) -> Optional[str]:
        for column in TIME_COLUMNS:
            if column in df.columns:
                return column
        return None

    def prepare_candles(self, df: Optional[pd.DataFrame]) -> Optional[pd.DataFrame]:
        """
        Return a copy of the candles in chronological order (oldest first).

        Args:
            df: DataFrame with OHLC data, in any order, or None

        Returns:
            DataFrame with a fresh RangeIndex, or None if there is no data
        """
        if df is None or len(df) == 0:
            return None

        df_copy = df.copy()
        time_column = self._time_column(df_copy)

        if time_column is not None and not df_copy[time_column].is_monotonic_increasing:
            logger.debug(f"Sorting {len(df_copy)} candles by '{time_column}'")
            df_copy = df_copy.sort_values(time_column, kind='mergesort')

        return df_copy.reset_index(drop=True)

    def to_bars(self, df: pd.DataFrame) -> List[PriceBar]:
        """
        Build one PriceBar per row, in row order.

        The timestamp is taken from the 'unix' or 'timestamp' column, falling
        back to the row index label. Prices that are missing or NaN become None.

        Raises:
            ValidationError: If the 'high' or 'low' column is missing.
        """
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise ValidationError(f"Candle DataFrame is missing columns: {missing}")

        time_column = self._time_column(df)
        timestamps = df[time_column].tolist() if time_column else df.index.tolist()

        columns = {
            column: df[column].tolist() if column in df.columns else [None] * len(df)
            for column in REQUIRED_COLUMNS + OPTIONAL_COLUMNS
        }

        return [
            PriceBar(
                timestamp=timestamps[i],
                high=columns['high'][i],
                low=columns['low'][i],
                open=columns['open'][i],
                close=columns['close'][i],
                volume=columns['volume'][i]
            )
            for i in range(len(df))
        ]

    @staticmethod
    def to_frame(points: Sequence[SwingPoint]) -> pd.DataFrame:
        """
        Build a DataFrame with 'timestamp', 'swing_high' and 'swing_low' columns.

        Swing columns use object dtype so absent values stay None instead of NaN.
        """
        return pd.DataFrame({
            'timestamp': pd.Series([p.timestamp for p in points], dtype=object),
            'swing_high': pd.Series([p.swing_high for p in points], dtype=object),
            'swing_low': pd.Series([p.swing_low for p in points], dtype=object),
        })
