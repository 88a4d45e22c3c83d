"""Domain layer - pure business models with no storage dependencies."""

from txn_report.domain.models import Transaction

__all__ = [
    "Transaction",
]
