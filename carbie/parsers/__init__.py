"""
Parsing and formatting utilities for analysis data.
"""
from .peak_time_parser import parse_peak_time, DEFAULT_PEAK_MINUTES
from .formatting import format_number, round_half_up, format_clock_label

__all__ = [
    'parse_peak_time',
    'DEFAULT_PEAK_MINUTES',
    'format_number',
    'round_half_up',
    'format_clock_label',
]
