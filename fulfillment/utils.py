# warehouse-fulfillment/fulfillment/utils.py
"""
Time utilities for the Warehouse Order-Fulfillment Simulation.

All simulation times are 4-digit HHMM strings (e.g. "0905"). Differences are
computed on minutes-since-midnight without any day rollover, while additions
wrap silently past midnight.
"""

from __future__ import annotations

from typing import Tuple

from . import config


def _split_time(hhmm: str) -> Tuple[int, int]:
    """Split an HHMM string into (hour, minute), rejecting malformed input."""
    if not is_valid_time(hhmm):
        raise ValueError(f"Invalid HHMM time: {hhmm!r}")
    return int(hhmm[:2]), int(hhmm[2:])


def is_valid_time(hhmm: str) -> bool:
    """
    Check whether a string is a well-formed HHMM time.

    Args:
        hhmm: Candidate time string

    Returns:
        True for exactly four ASCII digits with hour < 24 and minute < 60
    """
    if not isinstance(hhmm, str) or len(hhmm) != 4 or not hhmm.isascii() or not hhmm.isdigit():
        return False
    return int(hhmm[:2]) < 24 and int(hhmm[2:]) < 60


def time_to_minutes(hhmm: str) -> int:
    """
    Convert an HHMM time to minutes since midnight.

    Example:
        >>> time_to_minutes("1430")
        870  # 14*60 + 30
    """
    hour, minute = _split_time(hhmm)
    return hour * 60 + minute


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes since midnight to an HHMM time, wrapping past midnight.

    Example:
        >>> minutes_to_time(870)
        '1430'
    """
    minutes %= config.MINUTES_PER_DAY
    return f"{minutes // 60:02d}{minutes % 60:02d}"


def time_difference(time1: str, time2: str) -> int:
    """
    Absolute difference in minutes between two HHMM times.

    Both times are treated as minutes since midnight of the same day, so
    "2355" and "0005" are 1430 minutes apart, not 10.

    Example:
        >>> time_difference("0900", "0905")
        5
    """
    return abs(time_to_minutes(time2) - time_to_minutes(time1))


def add_minutes_to_time(base_time: str, minutes_to_add: int) -> str:
    """
    Add a number of minutes to an HHMM time.

    Note: This is designed for single-day simulations. Times past midnight
    wrap around silently.

    Args:
        base_time: The starting time
        minutes_to_add: Number of minutes to add

    Returns:
        The resulting HHMM time

    Example:
        >>> add_minutes_to_time("2359", 1)
        '0000'
    """
    return minutes_to_time(time_to_minutes(base_time) + minutes_to_add)


def format_time_duration(minutes: float) -> str:
    """
    Format a duration in minutes as a human-readable string.

    Args:
        minutes: Duration in minutes

    Returns:
        Formatted string like "1h 23m" or "45m"
    """
    if minutes < 60:
        return f"{minutes:.0f}m"
    hours = int(minutes // 60)
    mins = int(minutes % 60)
    return f"{hours}h {mins}m"
