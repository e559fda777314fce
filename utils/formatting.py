"""
Number and string formatting utilities.
"""

import logging
import math
import re

from constants import DISPLAY_BUCKETS, MAGNITUDE_SUFFIXES

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")
_FLOAT_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_number(val) -> float:
    """
    Parse formatted magnitude strings (e.g., 34.7M, 367.8k, 1,234) into floats.

    Numbers pass through unchanged. Anything that cannot be read as a
    magnitude (None, empty or non-string input, no digits) becomes 0.

    Args:
        val: Number or string representation of a number (k, m, b suffixes)

    Returns:
        Parsed float value
    """
    if _is_number(val):
        return float(val) if math.isfinite(val) else 0.0
    if not isinstance(val, str):
        return 0.0

    s = val.strip()
    if not s:
        return 0.0

    multiplier = MAGNITUDE_SUFFIXES.get(s[-1].lower(), 1)
    match = _FLOAT_PREFIX.match(_NON_NUMERIC.sub("", s))
    if not match:
        logger.debug(f"Unparseable magnitude {val!r}, using 0")
        return 0.0
    return float(match.group()) * multiplier


def format_number(num) -> str:
    """
    Convert a large number into a human-readable string (e.g., 1.2M, 3.4K).

    Args:
        num: The input number, or a magnitude string.

    Returns:
        str: Human-readable formatted string.
    """
    if isinstance(num, str):
        num = parse_number(num)
    if not _is_number(num) or not math.isfinite(num):
        return "0"

    num = abs(num)
    for threshold, suffix in DISPLAY_BUCKETS:
        if num >= threshold:
            return f"{num / threshold:.1f}{suffix}"
    # Round half up like the browser does, not banker's rounding
    return str(int(math.floor(num + 0.5)))


def format_percentage(x) -> str:
    """Format a value already expressed in percent units, e.g. 5.0 -> '5.00%'."""
    return f"{format_float(x, 2):.2f}%"


def format_float(value, decimals: int = 2) -> float:
    """
    Clean floating-point precision errors.
    Convert 0.699999999999996 → 0.70

    Args:
        value: Float value to clean
        decimals: Number of decimal places

    Returns:
        Cleaned float value
    """
    if not _is_number(value) or not math.isfinite(value):
        return 0.0
    return round(float(value), decimals)


def format_score(value) -> str:
    """Format a score with one decimal."""
    return f"{format_float(value, 1):.1f}"
