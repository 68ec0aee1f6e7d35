"""
Core data types.
"""
from .models import PriceBar, SwingPoint

__all__ = [
    'PriceBar',
    'SwingPoint'
]
