"""Unit conversion helpers for species attributes."""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from numbers import Real
from typing import Any, Optional

from frontend.config.settings import config


def _to_number(value: Any) -> Optional[float]:
    """Coerce a number-like value, None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def convert_height(
    height_in_cm: Any = None,
    decimals: int = 0,
    ratio: Optional[float] = None
) -> str:
    """Convert a height in centimeters to a display string in inches.

    Args:
        height_in_cm: Height in cm, as a number or a numeric string
        decimals: Fractional digits in the result (default 0)
        ratio: cm -> in factor (default config.CM_TO_IN_CONVERSION_RATIO)

    Returns:
        Height such as '50"', or "n/a" when the value is not a number

    Example:
        >>> convert_height("127")
        '50"'
        >>> convert_height("unknown")
        'n/a'
    """
    value = _to_number(height_in_cm)
    if value is None:
        return config.NOT_AVAILABLE

    if ratio is None:
        ratio = config.CM_TO_IN_CONVERSION_RATIO

    product = value * ratio
    if math.isinf(product):
        return config.NOT_AVAILABLE

    inches = Decimal(repr(product))
    # Enough digits for every integer digit plus the requested fraction
    with localcontext() as ctx:
        ctx.prec = max(28, inches.adjusted() + decimals + 2)
        rounded = inches.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f'{rounded:f}"'
