"""
Peak blood-glucose time parsing.

The analysis service reports peak times as free text:
- Minutes: "90min", "45 min", "30 Minutes"
- Hours: "1.5h", "2 hours"
Anything else falls back to DEFAULT_PEAK_MINUTES.
"""
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PEAK_MINUTES = 60

MINUTES_RE = re.compile(r"(\d+)\s*min", re.IGNORECASE)
HOURS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*h", re.IGNORECASE)


def parse_peak_time(label: Any) -> float:
    """
    Parse a peak-time label into minutes.

    Never fails: unrecognized input returns DEFAULT_PEAK_MINUTES.

    Args:
        label: Text such as "90min" or "1.5h"

    Returns:
        Minutes (non-negative)

    Examples:
        >>> parse_peak_time("90min")
        90
        >>> parse_peak_time("1.5h")
        90.0
        >>> parse_peak_time("soon")
        60
    """
    if not isinstance(label, str):
        logger.debug("Non-text peak time %r, using %d min", label, DEFAULT_PEAK_MINUTES)
        return DEFAULT_PEAK_MINUTES

    match = MINUTES_RE.search(label)
    if match:
        return int(match.group(1))

    match = HOURS_RE.search(label)
    if match:
        return float(match.group(1)) * 60

    logger.debug("Unrecognized peak time %r, using %d min", label, DEFAULT_PEAK_MINUTES)
    return DEFAULT_PEAK_MINUTES
