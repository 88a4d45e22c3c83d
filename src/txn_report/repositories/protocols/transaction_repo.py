"""Transaction repository protocol."""

from typing import Protocol, Optional

from txn_report.core.months import MonthWindow
from txn_report.domain.models import Transaction
from txn_report.domain.views import CategoryCount


class TransactionRepository(Protocol):
    """Interface for transaction store access."""

    def find(
        self,
        window: MonthWindow,
        search: str = "",
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions in the window whose text or price matches ``search``."""
        ...

    def count(
        self,
        window: MonthWindow,
        sold: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        above_price: Optional[float] = None,
    ) -> int:
        """
        Count transactions in the window matching the given filters.

        ``min_price`` and ``max_price`` are inclusive; ``above_price`` is an
        exclusive lower bound.
        """
        ...

    def sum_price(self, window: MonthWindow, sold: Optional[bool] = None) -> float:
        """Sum ``price`` over the window (0 for an empty set)."""
        ...

    def count_by_category(self, window: MonthWindow) -> list[CategoryCount]:
        """Count transactions in the window per category."""
        ...

    def list_all(self) -> list[Transaction]:
        """
        Return every stored transaction in id order.

        Not used by the report endpoints; it exists so a load can be checked
        against the store as a whole, ignoring month windows.
        """
        ...

    def replace_all(self, transactions: list[Transaction]) -> int:
        """Delete all transactions and insert the given ones."""
        ...
