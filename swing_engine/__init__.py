"""
Swing Engine Package

Detects swing highs and swing lows in OHLC price bars:
- Window predicates with exact Decimal comparisons
- Single-pass scanner with carry-forward and backfill of confirmed levels
- Candle DataFrame adapters
"""
from swing_engine.core.models import PriceBar, SwingPoint
from swing_engine.exceptions import InvalidParameterError
from swing_engine.indicators.swing_points import compute_swing_points

__version__ = "1.0.0"

__all__ = [
    'PriceBar',
    'SwingPoint',
    'InvalidParameterError',
    'compute_swing_points'
]
