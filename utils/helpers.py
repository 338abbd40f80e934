"""
Helper functions shared by the submission path.
"""

from datetime import datetime, timezone


def utc_timestamp() -> str:
    """
    Current UTC time as ISO-8601 with milliseconds and a Z suffix.

    Returns:
        str: e.g. '2026-10-19T12:00:00.000Z'
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_valid_email(value) -> bool:
    """
    Accepts any non-empty string containing '@'.

    Args:
        value: Raw value taken from the request body

    Returns:
        bool: True if the value can be stored
    """
    return isinstance(value, str) and bool(value) and "@" in value
