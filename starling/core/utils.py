"""
Shared utility functions for Starling.
"""

import math

from starling.core.errors import InvalidInput


def lerp(start: float, end: float, amount: float) -> float:
    """Linear interpolation: ``start`` at amount 0, ``end`` at amount 1."""
    return start + (end - start) * amount


def require_finite(name: str, value: float) -> float:
    """
    Return ``value`` unchanged, or raise InvalidInput if it is NaN/infinite.
    """
    try:
        finite = math.isfinite(value)
    except TypeError:
        raise InvalidInput(f"{name} must be a real number, got {value!r}") from None
    if not finite:
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return value


def hill_fraction(x: float, k: float, h: float) -> float:
    """
    Hill/sigmoidal saturation fraction ``x^h / (k^h + x^h)`` for x, k >= 0.

    Evaluated through the ratio of x and k so large volumes cannot overflow
    the power. There is no epsilon term: at ``x == k`` the result is
    exactly 0.5. A zero denominator (x and k both zero) gives 0.0.
    """
    if x > k:
        # k^h / x^h <= 1
        return 1.0 / (1.0 + (k / x) ** h)
    if k == 0:
        return 0.0
    ratio_h = (x / k) ** h
    return ratio_h / (1.0 + ratio_h)


def format_signed(value: float, decimals: int = 0) -> str:
    """Format with an explicit '+' for positive values ('+40', '-25', '0')."""
    text = f"{value:.{decimals}f}"
    if value > 0:
        return f"+{text}"
    return text
