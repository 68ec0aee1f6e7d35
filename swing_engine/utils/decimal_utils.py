"""
Decimal utility functions for exact price comparisons.

Bar prices are held as Decimal so that swing tie-breaks (strict on the left,
non-strict on the right) compare exactly. Conversion to float happens only
for values that leave the engine.
"""
from decimal import Decimal, InvalidOperation
from typing import Union, Optional
import math

import numpy as np
import pandas as pd

PriceLike = Union[int, float, Decimal, str, np.number, None]


def to_decimal(value: PriceLike) -> Optional[Decimal]:
    """
    Convert a value to Decimal for exact arithmetic.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal('0.1')``
    rather than its binary expansion.

    Args:
        value: Value to convert (int, float, Decimal, numpy scalar, str, or None)

    Returns:
        Finite Decimal, or None if value is None, NaN, infinite or unparsable

    Examples:
        >>> to_decimal(0.009222)
        Decimal('0.009222')
        >>> to_decimal(float('nan')) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
    elif not isinstance(value, (int, str)):
        if pd.api.types.is_scalar(value) and pd.isna(value):
            return None

    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None

    return result if result.is_finite() else None


def to_float(value: Optional[Decimal]) -> Optional[float]:
    """
    Convert an exact price to float for output.

    None stays None; a NaN is never produced.
    """
    if value is None:
        return None
    result = float(value)
    if math.isnan(result):
        return None
    return result
