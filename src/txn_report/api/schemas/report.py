"""Pydantic schemas for report endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from txn_report.api.schemas.transaction import TransactionOut
from txn_report.domain.views import (
    SaleStatistics,
    PriceBucketCount,
    CategoryCount,
    CombinedReport,
)


class StatisticsResponse(BaseModel):
    """Response schema for month sale statistics."""

    model_config = ConfigDict(populate_by_name=True)

    total_sale_amount: float = Field(alias="totalSaleAmount")
    total_sold_items: int = Field(alias="totalSoldItems")
    total_not_sold_items: int = Field(alias="totalNotSoldItems")

    @classmethod
    def from_view(cls, stats: SaleStatistics) -> "StatisticsResponse":
        return cls(
            total_sale_amount=stats.total_sale_amount,
            total_sold_items=stats.total_sold_items,
            total_not_sold_items=stats.total_not_sold_items,
        )


class BarChartEntry(BaseModel):
    """One price bucket of the histogram."""

    range: str
    count: int

    @classmethod
    def from_view(cls, entry: PriceBucketCount) -> "BarChartEntry":
        return cls(range=entry.range, count=entry.count)


class PieChartEntry(BaseModel):
    """One category of the breakdown, keyed ``_id`` on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    category: Optional[str] = Field(alias="_id")
    count: int

    @classmethod
    def from_view(cls, entry: CategoryCount) -> "PieChartEntry":
        return cls(category=entry.category, count=entry.count)


class CombinedResponse(BaseModel):
    """Response schema for the combined month report."""

    model_config = ConfigDict(populate_by_name=True)

    transactions: list[TransactionOut]
    statistics: StatisticsResponse
    bar_chart: list[BarChartEntry] = Field(alias="barChart")
    pie_chart: list[PieChartEntry] = Field(alias="pieChart")

    @classmethod
    def from_view(cls, report: CombinedReport) -> "CombinedResponse":
        return cls(
            transactions=[TransactionOut.from_domain(t) for t in report.transactions],
            statistics=StatisticsResponse.from_view(report.statistics),
            bar_chart=[BarChartEntry.from_view(e) for e in report.bar_chart],
            pie_chart=[PieChartEntry.from_view(e) for e in report.pie_chart],
        )
