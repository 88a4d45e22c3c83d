"""Core utilities and shared functionality."""

from txn_report.core.timezone import (
    UTC,
    get_timezone,
    to_utc_naive,
    parse_sale_datetime,
    format_utc,
)
from txn_report.core.months import month_range, validate_month, MonthWindow
from txn_report.core.exceptions import (
    AppError,
    ValidationError,
    StoreError,
    UpstreamError,
)

__all__ = [
    "UTC",
    "get_timezone",
    "to_utc_naive",
    "parse_sale_datetime",
    "format_utc",
    "month_range",
    "validate_month",
    "MonthWindow",
    "AppError",
    "ValidationError",
    "StoreError",
    "UpstreamError",
]
