"""Month-scoped transaction listings and analytics."""

import asyncio
from typing import Optional

from txn_report.core.exceptions import ValidationError
from txn_report.core.months import MonthWindow, validate_month
from txn_report.domain.models import Transaction
from txn_report.domain.views import (
    PRICE_BUCKETS,
    SaleStatistics,
    PriceBucketCount,
    CategoryCount,
    CombinedReport,
)
from txn_report.repositories.protocols import TransactionRepository


class ReportService:
    """
    Service for the month reports.

    Store calls are blocking, so each one runs in a worker thread;
    independent queries within a report are issued together and joined in
    a fixed order.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        report_year: int = 2022,
        report_timezone: str = "UTC",
    ):
        self._transactions = transaction_repo
        self._year = report_year
        self._tz = report_timezone

    def window(self, month: Optional[int]) -> MonthWindow:
        """Resolve ``month`` of the report year to a query window."""
        return MonthWindow.for_month(month, self._year, self._tz)

    async def list_transactions(
        self,
        month: Optional[int],
        page: int = 1,
        per_page: int = 10,
        search: str = "",
    ) -> list[Transaction]:
        """One page of the month's transactions matching ``search``."""
        if page < 1 or per_page < 1:
            raise ValidationError("page and perPage must be positive")
        window = self.window(month)
        return await asyncio.to_thread(
            self._transactions.find,
            window,
            search,
            (page - 1) * per_page,
            per_page,
        )

    async def statistics(self, month: Optional[int]) -> SaleStatistics:
        """Total sale amount and sold / not-sold counts for the month."""
        window = self.window(month)
        total_amount, sold, not_sold = await asyncio.gather(
            asyncio.to_thread(self._transactions.sum_price, window, True),
            asyncio.to_thread(self._transactions.count, window, True),
            asyncio.to_thread(self._transactions.count, window, False),
        )
        return SaleStatistics(
            total_sale_amount=total_amount or 0,
            total_sold_items=sold,
            total_not_sold_items=not_sold,
        )

    async def bar_chart(self, month: Optional[int]) -> list[PriceBucketCount]:
        """Count of the month's transactions in each fixed price bucket."""
        window = self.window(month)
        counts = await asyncio.gather(*(
            asyncio.to_thread(
                self._transactions.count,
                window,
                min_price=bucket.min_price if bucket.lower_inclusive else None,
                above_price=None if bucket.lower_inclusive else bucket.min_price,
                max_price=bucket.max_price,
            )
            for bucket in PRICE_BUCKETS
        ))
        return [
            PriceBucketCount(range=bucket.label, count=count)
            for bucket, count in zip(PRICE_BUCKETS, counts)
        ]

    async def pie_chart(self, month: Optional[int]) -> list[CategoryCount]:
        """Count of the month's transactions per category."""
        window = self.window(month)
        return await asyncio.to_thread(self._transactions.count_by_category, window)

    async def combined(
        self,
        month: Optional[int],
        page: int = 1,
        per_page: int = 10,
        search: str = "",
    ) -> CombinedReport:
        """
        All four reports for the same parameters.

        Fails as a whole if any one report fails.
        """
        validate_month(month)
        transactions, statistics, bar_chart, pie_chart = await asyncio.gather(
            self.list_transactions(month, page, per_page, search),
            self.statistics(month),
            self.bar_chart(month),
            self.pie_chart(month),
        )
        return CombinedReport(
            transactions=transactions,
            statistics=statistics,
            bar_chart=bar_chart,
            pie_chart=pie_chart,
        )
