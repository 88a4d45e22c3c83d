"""Pydantic schemas for transaction listings."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from txn_report.core.timezone import format_utc
from txn_report.domain.models import Transaction


class TransactionOut(BaseModel):
    """Response schema for a single transaction."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    date_of_sale: Optional[str] = Field(default=None, alias="dateOfSale")
    category: Optional[str] = None
    sold: Optional[bool] = None

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionOut":
        return cls(
            id=txn.id,
            title=txn.title,
            description=txn.description,
            price=txn.price,
            date_of_sale=format_utc(txn.date_of_sale),
            category=txn.category,
            sold=txn.sold,
        )
