"""Rounding and number formatting shared by the scoring rules."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero, unlike the builtin banker's rounding."""
    factor = 10**digits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    return math.copysign(rounded, value) if rounded else 0.0


def round_int(value: float) -> int:
    return int(round_half_up(value))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def format_number(value: float) -> str:
    """Render whole floats without a trailing ``.0`` (``4.0`` -> ``4``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_amount(value: float) -> str:
    """Thousands-separated amount, e.g. ``1,250,000``."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
