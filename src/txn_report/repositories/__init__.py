"""Repository layer - data access abstractions and implementations."""

from txn_report.repositories.protocols import TransactionRepository

__all__ = [
    "TransactionRepository",
]
