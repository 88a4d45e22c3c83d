"""Domain models package."""

from txn_report.domain.models.transaction import Transaction, parse_sold

__all__ = [
    "Transaction",
    "parse_sold",
]
