"""Data validation utilities."""
import re
from typing import Any

from visitor_registry.utils.date_utils import (
    days_in_month,
    is_date_format,
    is_time_format,
    parse_date,
    parse_time,
)
from visitor_registry.utils.exceptions import ValidationError

NAME_CHAR_LIMIT = 70
NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
DEFAULT_COMMENT = "No comment"


def validate_non_empty_string(value: Any, field_name: str) -> str:
    """
    Validate that a value is a string with visible content.

    Args:
        value: Raw value to check
        field_name: Field name used in the error message

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If value is not a string or is blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field_name, f"{field_name} must be a non-empty string")
    return value


def validate_full_name(value: Any, field_name: str = "fullName") -> str:
    """
    Validate a person's full name.

    Shared by the visitor's own name and the assisting staff member.

    Args:
        value: Raw name value
        field_name: Field name used in error messages

    Returns:
        The name as given (not trimmed)

    Raises:
        ValidationError: On the first rule the name violates, checked in order:
            - not a non-empty string
            - fewer than two names
            - more than 70 letters across all names
            - anything other than letters and whitespace
    """
    validate_non_empty_string(value, field_name)
    names = value.split()

    if len(names) < 2:
        raise ValidationError(
            field_name, f"{field_name} expects at least a first name AND last name"
        )

    if len("".join(names)) > NAME_CHAR_LIMIT:
        raise ValidationError(
            field_name, f"{field_name} expects less than {NAME_CHAR_LIMIT} characters"
        )

    if NAME_PATTERN.fullmatch(value) is None:
        raise ValidationError(
            field_name, f"{field_name} should only contain alphabetic characters"
        )

    return value


def validate_age(value: Any) -> int:
    """Validate age is a positive integer. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("age", "age must be an integer")

    if value <= 0:
        raise ValidationError("age", "age must be a positive integer")

    return value


def validate_visit_date(value: Any) -> str:
    """
    Validate visit date string in dd/mm/yyyy format.

    Args:
        value: Raw date value

    Returns:
        The date string, unchanged

    Raises:
        ValidationError: If the value is blank, badly formatted, or names a
            month or day that does not exist
    """
    validate_non_empty_string(value, "visitDate")

    if not is_date_format(value):
        raise ValidationError(
            "visitDate", "visitDate is not correctly formatted in dd/mm/yyyy"
        )

    day, month, year = parse_date(value)

    if month < 1 or month > 12:
        raise ValidationError(
            "visitDate",
            "visitDate has an invalid month. Month should be between 01 and 12",
        )

    max_day = days_in_month(month, year)
    if day < 1 or day > max_day:
        raise ValidationError(
            "visitDate",
            f"visitDate has an invalid day for the month {month}. "
            f"The day should be between 01 and {max_day}",
        )

    return value


def validate_visit_time(value: Any) -> str:
    """
    Validate visit time string in hh:mm format.

    Args:
        value: Raw time value

    Returns:
        The time string, unchanged

    Raises:
        ValidationError: If the value is blank, badly formatted, or the hour
            or minute is out of range
    """
    validate_non_empty_string(value, "visitTime")

    if not is_time_format(value):
        raise ValidationError("visitTime", "visitTime is not correctly formatted in hh:mm")

    hour, minute = parse_time(value)

    if hour < 0 or hour > 23:
        raise ValidationError(
            "visitTime",
            "visitTime has an invalid hour. Hour should be between 00 and 23",
        )

    if minute < 0 or minute > 59:
        raise ValidationError(
            "visitTime",
            "visitTime has an invalid minute. Minute should be between 00 and 59",
        )

    return value


def validate_comments(value: Any) -> str:
    """
    Validate free-text comments.

    Returns:
        "No comment" for blank input, otherwise the comments verbatim
    """
    if not isinstance(value, str):
        raise ValidationError("comments", "comments must receive string data")

    if not value.strip():
        return DEFAULT_COMMENT

    return value


def normalize_name(name: str) -> str:
    """
    Normalize a name for use in a storage key.

    Args:
        name: Name to normalize

    Returns:
        Normalized name (trimmed, lowercased, whitespace runs as "_")

    Behavior:
        - Example: " James  Blake " → "james_blake"
        - Distinct visitors sharing a name normalize identically
    """
    return re.sub(r"\s+", "_", name.strip().lower())
