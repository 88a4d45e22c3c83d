"""Calendar month to date-window resolution."""

from datetime import date, datetime, time, timedelta
from typing import Optional

from txn_report.core.exceptions import ValidationError
from txn_report.core.timezone import get_timezone, to_utc_naive


def month_range(month: int, year: int) -> tuple[date, date]:
    """
    Return the inclusive ``(start, end)`` dates of ``month`` in ``year``.

    The end is the last calendar day, taken as "day 0" of the following
    month, i.e. the day before its first day. Leap years fall out of the
    calendar arithmetic.
    """
    start = date(year, month, 1)
    if month == 12:
        next_month_start = date(year + 1, 1, 1)
    else:
        next_month_start = date(year, month + 1, 1)
    return start, next_month_start - timedelta(days=1)


def validate_month(month: Optional[int]) -> Optional[int]:
    """Reject month numbers outside 1..12; None passes through."""
    if month is None:
        return None
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError("Invalid month")
    return month


class MonthWindow:
    """
    Half-open datetime window ``[start, end)`` covering one calendar month.

    Bounds are naive UTC, matching how sale timestamps are stored. An empty
    window (no month given) matches nothing.
    """

    def __init__(self, start: Optional[datetime], end: Optional[datetime]):
        self.start = start
        self.end = end

    @property
    def is_empty(self) -> bool:
        return self.start is None or self.end is None

    @classmethod
    def empty(cls) -> "MonthWindow":
        return cls(None, None)

    @classmethod
    def for_month(cls, month: Optional[int], year: int, tz_name: str = "UTC") -> "MonthWindow":
        """Build the window for ``month`` of ``year`` drawn in ``tz_name``."""
        month = validate_month(month)
        if month is None:
            return cls.empty()

        tz = get_timezone(tz_name)
        first_day, last_day = month_range(month, year)
        start = datetime.combine(first_day, time.min)
        end = datetime.combine(last_day + timedelta(days=1), time.min)
        return cls(to_utc_naive(start, tz), to_utc_naive(end, tz))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthWindow):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __repr__(self) -> str:
        return f"MonthWindow(start={self.start!r}, end={self.end!r})"
