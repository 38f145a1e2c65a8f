"""Conversions between the backend's 24-hour times and 12-hour display."""

import re

_TIME_24_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)(?::[0-5]\d)?$")
_TIME_12_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.IGNORECASE)


def format_time_24_to_12(time_24: str) -> str:
    """
    Convert "HH:MM[:SS]" to "h:MM AM/PM".

    Input that does not look like a 24-hour time is returned unchanged.

    Examples:
        "00:30:00" -> "12:30 AM", "13:05:00" -> "1:05 PM"
    """
    match = _TIME_24_RE.match(time_24.strip())
    if not match:
        return time_24

    hours = int(match.group(1))
    minutes = match.group(2)
    period = "PM" if hours >= 12 else "AM"
    hours_12 = hours % 12 or 12
    return f"{hours_12}:{minutes} {period}"


def format_time_12_to_24(time_12: str) -> str:
    """
    Convert "h:MM AM/PM" to "HH:MM:00".

    Input that does not look like a 12-hour time is returned unchanged.
    """
    match = _TIME_12_RE.match(time_12.strip())
    if not match:
        return time_12

    hours = int(match.group(1))
    minutes = match.group(2)
    period = match.group(3).upper()

    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0

    return f"{hours:02d}:{minutes}:00"
