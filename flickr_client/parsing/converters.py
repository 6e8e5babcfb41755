"""
Conversions between Flickr wire strings and Python values.

Dates arrive either as unix timestamps or as ``YYYY-MM-DD HH:MM:SS``
strings. All dates are returned as timezone-aware UTC datetimes.
"""

import re
from datetime import datetime, timezone

from flickr_client.exceptions import FormatError

ALTERNATE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_UNIX_TIMESTAMP = re.compile(r"\d+", re.ASCII)
_INTEGER = re.compile(r"[+-]?[0-9]+")
_ALTERNATE_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def unix_timestamp_to_date(value: str) -> datetime:
    """Convert a count of seconds since the epoch to a UTC datetime."""
    if not _UNIX_TIMESTAMP.fullmatch(value):
        raise FormatError(value, expected="unix timestamp")
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise FormatError(value, expected="unix timestamp") from e


def alternate_date_to_date(value: str) -> datetime:
    """Convert a ``YYYY-MM-DD HH:MM:SS`` string to a UTC datetime."""
    if not _ALTERNATE_DATE.fullmatch(value):
        raise FormatError(value, expected=ALTERNATE_DATE_FORMAT)
    try:
        parsed = datetime.strptime(value, ALTERNATE_DATE_FORMAT)
    except ValueError as e:
        raise FormatError(value, expected=ALTERNATE_DATE_FORMAT) from e
    return parsed.replace(tzinfo=timezone.utc)


def parse_date(value: str) -> datetime:
    """
    Parse a date field that may use either wire format.

    All-digit values are unix timestamps; anything else must be in the
    alternate format.
    """
    if _UNIX_TIMESTAMP.fullmatch(value):
        return unix_timestamp_to_date(value)
    return alternate_date_to_date(value)


def parse_int(value: str) -> int:
    """Parse a base-10 integer, rejecting locale digits and separators."""
    if not _INTEGER.fullmatch(value):
        raise FormatError(value, expected="integer")
    return int(value)


def parse_bool(value: str) -> bool:
    """Parse a boolean sent as ``0`` or ``1``."""
    if value == "1":
        return True
    if value == "0":
        return False
    raise FormatError(value, expected="0 or 1")


def date_to_unix_timestamp(value: datetime) -> str:
    """Format a datetime as a unix timestamp string. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return str(int(value.timestamp()))


def date_to_alternate_format(value: datetime) -> str:
    """Format a datetime in the ``YYYY-MM-DD HH:MM:SS`` wire format, in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(ALTERNATE_DATE_FORMAT)
