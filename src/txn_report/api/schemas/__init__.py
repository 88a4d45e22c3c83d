"""API request/response schemas."""

from txn_report.api.schemas.transaction import TransactionOut
from txn_report.api.schemas.report import (
    StatisticsResponse,
    BarChartEntry,
    PieChartEntry,
    CombinedResponse,
)

__all__ = [
    "TransactionOut",
    "StatisticsResponse",
    "BarChartEntry",
    "PieChartEntry",
    "CombinedResponse",
]
