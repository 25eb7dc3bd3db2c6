"""Date and time utility functions."""
import calendar
import re
from typing import Tuple

DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def is_date_format(date_str: str) -> bool:
    """Check whether a string is shaped like dd/mm/yyyy."""
    return DATE_PATTERN.fullmatch(date_str) is not None


def is_time_format(time_str: str) -> bool:
    """Check whether a string is shaped like hh:mm."""
    return TIME_PATTERN.fullmatch(time_str) is not None


def parse_date(date_str: str) -> Tuple[int, int, int]:
    """
    Split a date string in dd/mm/yyyy format into its parts.

    Args:
        date_str: Date string (e.g., "04/07/2024")

    Returns:
        Tuple of (day, month, year) as integers, not range-checked

    Raises:
        ValueError: If date format is invalid
    """
    if not is_date_format(date_str):
        raise ValueError(f"Invalid date format: {date_str}")

    day, month, year = (int(part) for part in date_str.split("/"))
    return day, month, year


def parse_time(time_str: str) -> Tuple[int, int]:
    """
    Split a time string in hh:mm format into its parts.

    Args:
        time_str: Time string (e.g., "15:27")

    Returns:
        Tuple of (hour, minute) as integers, not range-checked

    Raises:
        ValueError: If time format is invalid
    """
    if not is_time_format(time_str):
        raise ValueError(f"Invalid time format: {time_str}")

    hour, minute = (int(part) for part in time_str.split(":"))
    return hour, minute


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month, accounting for leap years.

    Args:
        month: Month number, 1-12
        year: Four digit year

    Returns:
        Day count (28-31)
    """
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]
