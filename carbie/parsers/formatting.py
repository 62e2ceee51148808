"""
Number and duration formatting for display strings.
"""
import math


def format_number(value: float) -> str:
    """
    Format a number without a trailing '.0'.

    Examples:
        >>> format_number(200.0)
        '200'
        >>> format_number(1.5)
        '1.5'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return f"{value:g}"


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def format_clock_label(minutes: float) -> str:
    """
    Format a time offset for an axis label.

    Whole hours render as "Nh", anything else as "H:MM".

    Examples:
        >>> format_clock_label(120)
        '2h'
        >>> format_clock_label(90)
        '1:30'
    """
    total = int(minutes)
    hours = total // 60
    mins = total % 60
    if mins == 0:
        return f"{hours}h"
    return f"{hours}:{mins:02d}"
