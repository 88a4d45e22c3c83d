"""View models for report outputs."""

from dataclasses import dataclass, field
from typing import Optional

from txn_report.domain.models import Transaction


@dataclass(frozen=True)
class PriceBucket:
    """
    Price range with an inclusive upper bound.

    The lower bound is exclusive unless ``lower_inclusive`` is set, so
    consecutive buckets share their edge and every non-negative price lands
    in exactly one. ``max_price`` of None means unbounded.
    """

    label: str
    min_price: float
    max_price: Optional[float] = None
    lower_inclusive: bool = False


PRICE_BUCKETS: tuple[PriceBucket, ...] = (
    PriceBucket("0-100", 0, 100, lower_inclusive=True),
    PriceBucket("101-200", 100, 200),
    PriceBucket("201-300", 200, 300),
    PriceBucket("301-400", 300, 400),
    PriceBucket("401-500", 400, 500),
    PriceBucket("501-600", 500, 600),
    PriceBucket("601-700", 600, 700),
    PriceBucket("701-800", 700, 800),
    PriceBucket("801-900", 800, 900),
    PriceBucket("901-above", 900, None),
)


@dataclass
class SaleStatistics:
    """Sold/unsold totals for one month."""

    total_sale_amount: float = 0
    total_sold_items: int = 0
    total_not_sold_items: int = 0


@dataclass
class PriceBucketCount:
    """Histogram entry."""

    range: str
    count: int


@dataclass
class CategoryCount:
    """Pie chart entry."""

    category: Optional[str]
    count: int


@dataclass
class CombinedReport:
    """All four month reports computed from the same parameters."""

    transactions: list[Transaction] = field(default_factory=list)
    statistics: SaleStatistics = field(default_factory=SaleStatistics)
    bar_chart: list[PriceBucketCount] = field(default_factory=list)
    pie_chart: list[CategoryCount] = field(default_factory=list)
