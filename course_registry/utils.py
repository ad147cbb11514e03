"""Utility functions for course-registry package."""

import threading
import time
import uuid
from collections.abc import Callable
from datetime import date, datetime

# Formats tried after ISO-8601, most specific first
DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y")

IdFactory = Callable[[], str]


def new_id() -> str:
    """Generate a fresh unique record id.

    Returns:
        Random UUID4 string
    """
    return str(uuid.uuid4())


class SystemClock:
    """Nanosecond wall clock that never goes backwards.

    Readings are clamped to the last value handed out, so timestamps stamped
    by the same clock are non-decreasing even if the host clock steps back.
    """

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self._last = max(self._last, time.time_ns())
            return self._last


Clock = Callable[[], int]


def parse_date(date_str: str) -> date:
    """Parse an ISO-8601 date or datetime string.

    Accepts full ISO-8601 dates and datetimes (e.g., "2020-05-01",
    "2020-05-01T09:30:00Z") as well as reduced precision "2020-05" and "2020".

    Args:
        date_str: Date string

    Returns:
        date object

    Raises:
        ValueError: If date format is invalid
    """
    text = date_str.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Invalid date format: {date_str}. Expected ISO-8601 (YYYY-MM-DD)")


def parse_year(date_str: str) -> int | None:
    """Extract the calendar year from a date string.

    Args:
        date_str: Date string

    Returns:
        Year, or None if the string cannot be parsed
    """
    try:
        return parse_date(date_str).year
    except (ValueError, AttributeError):
        return None
