"""
Data models for the swing engine.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from swing_engine.utils.decimal_utils import to_decimal


@dataclass(frozen=True)
class PriceBar:
    """One OHLC bar. Prices are stored as Decimal (None when malformed)."""
    timestamp: Any
    high: Optional[Decimal]
    low: Optional[Decimal]
    open: Optional[Decimal] = None
    close: Optional[Decimal] = None
    volume: Optional[Decimal] = None

    def __post_init__(self):
        for name in ('high', 'low', 'open', 'close', 'volume'):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))


@dataclass(frozen=True)
class SwingPoint:
    """Most recently confirmed swing levels effective as of one bar."""
    timestamp: Any
    swing_high: Optional[float] = None
    swing_low: Optional[float] = None

    @property
    def value(self) -> Optional[float]:
        """Primary value of the result (the swing high)."""
        return self.swing_high

    @property
    def has_swing(self) -> bool:
        return self.swing_high is not None or self.swing_low is not None
