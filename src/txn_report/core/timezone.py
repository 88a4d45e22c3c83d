"""Timezone utilities for sale timestamps."""

from datetime import datetime
from typing import Optional, Union

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc


def get_timezone(name: str) -> pytz.BaseTzInfo:
    """Resolve a timezone name such as ``UTC`` or ``Asia/Kolkata``."""
    return pytz.timezone(name)


def to_utc_naive(dt: datetime, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Normalise a datetime to naive UTC for storage and comparison.

    Naive input is assumed to be in ``default_tz`` (UTC if not given).
    """
    if dt.tzinfo is None:
        dt = (default_tz or UTC).localize(dt)
    return dt.astimezone(UTC).replace(tzinfo=None)


def parse_sale_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse a ``dateOfSale`` value into naive UTC.

    Accepts ISO-8601 strings with or without offset (e.g.
    ``2021-11-27T20:29:54+05:30`` or ``2022-03-05``). Returns None for
    missing or blank values.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_utc_naive(value)
    if not str(value).strip():
        return None
    return to_utc_naive(date_parser.parse(str(value)))


def format_utc(dt: Optional[datetime]) -> Optional[str]:
    """Render a stored naive-UTC datetime as an ISO-8601 string with ``Z``."""
    if dt is None:
        return None
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
