"""Technical indicators module."""

from .swing_points import compute_swing_points, validate_strength
from .window import is_swing_high, is_swing_low, is_flat_window

__all__ = [
    'compute_swing_points',
    'validate_strength',
    'is_swing_high',
    'is_swing_low',
    'is_flat_window'
]
