"""Repository protocol definitions (interfaces)."""

from txn_report.repositories.protocols.transaction_repo import TransactionRepository

__all__ = [
    "TransactionRepository",
]
