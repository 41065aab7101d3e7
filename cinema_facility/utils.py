"""Utility functions for cinema-facility package."""

import re
from datetime import timedelta

from .exceptions import NullReferenceError, ValidationError

ONE_DAY = timedelta(days=1)

# Characters outside the XML 1.0 Char production
XML_INVALID_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def require(value, name: str):
    """Return value, raising if it is None.

    Args:
        value: Reference to check
        name: Name used in the error message

    Raises:
        NullReferenceError: If value is None
    """
    if value is None:
        raise NullReferenceError(f"{name} cannot be None")
    return value


def require_text(value: str, name: str) -> str:
    """Validate a non-blank string that can be written to XML.

    Args:
        value: String to check
        name: Attribute name used in the error message

    Returns:
        The value unchanged

    Raises:
        ValidationError: If value is not a string, is blank or holds control characters
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} cannot be empty")
    if XML_INVALID_CHARS.search(value):
        raise ValidationError(f"{name} contains characters that cannot be stored: {value!r}")
    return value


def require_int(value: int, name: str, minimum: int, maximum: int | None = None) -> int:
    """Validate an integer within [minimum, maximum].

    Raises:
        ValidationError: If value is not an int or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValidationError(f"{name} must be at least {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{name} must be at most {maximum}, got {value}")
    return value


def require_period(value: timedelta, name: str = "cleaning_period") -> timedelta:
    """Validate a duration in [0, 24h).

    Raises:
        ValidationError: If value is not a timedelta or is outside the day
    """
    if not isinstance(value, timedelta):
        raise ValidationError(f"{name} must be a timedelta, got {value!r}")
    if value < timedelta(0) or value >= ONE_DAY:
        raise ValidationError(f"{name} must be between 00:00 and 23:59, got {value}")
    return value


def format_duration(value: timedelta) -> str:
    """Format a sub-day duration as HH:MM:SS.

    Args:
        value: Duration shorter than a day

    Returns:
        Duration string (e.g., "03:00:00")
    """
    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.microseconds:
        text += f".{value.microseconds:06d}"
    return text
