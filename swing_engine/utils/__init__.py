"""
Utility modules for the swing engine.
"""
from .decimal_utils import to_decimal, to_float

__all__ = [
    'to_decimal',
    'to_float'
]
