"""Domain view models."""

from txn_report.domain.views.reports import (
    PriceBucket,
    PRICE_BUCKETS,
    SaleStatistics,
    PriceBucketCount,
    CategoryCount,
    CombinedReport,
)

__all__ = [
    "PriceBucket",
    "PRICE_BUCKETS",
    "SaleStatistics",
    "PriceBucketCount",
    "CategoryCount",
    "CombinedReport",
]
