"""Core utility functions for US Debt Tools.

This module provides shared helpers used by the loader and the validation checks.
"""

from __future__ import annotations

import math
from typing import Any


def is_present(value: Any) -> bool:
    """Return True if a field value exists.

    A value is present when it is neither None nor NaN. Zero is present: a
    legitimate zero must never be classified as missing.

    Examples:
        >>> is_present(0)
        True
        >>> is_present(None)
        False
        >>> is_present(float("nan"))
        False
    """
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded towards +infinity.

    Published adjusted values are rounded this way, so comparisons must use the
    same convention rather than Python's banker's rounding.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def round_half_up_to(value: float, ndigits: int) -> float:
    """Round to `ndigits` decimal places, with halves rounded towards +infinity.

    Examples:
        >>> round_half_up_to(6.25, 1)
        6.3
        >>> round(6.25, 1)
        6.2
    """
    scale = 10 ** ndigits
    return round_half_up(value * scale) / scale


def format_number(value: float) -> str:
    """Format a value for messages, dropping the fraction of whole numbers.

    Examples:
        >>> format_number(150000.0)
        '150000'
        >>> format_number(0.05)
        '0.05'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
