"""Transaction domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from txn_report.core.timezone import parse_sale_datetime


_SOLD_STRINGS = {"true": True, "false": False}


def parse_sold(value: Any) -> Optional[bool]:
    """
    Read a ``sold`` flag.

    Booleans pass through and the strings ``"true"``/``"false"`` are accepted
    in any case. Anything else raises ``ValueError``.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _SOLD_STRINGS:
            return _SOLD_STRINGS[key]
    raise ValueError(f"Invalid sold flag: {value!r}")


@dataclass
class Transaction:
    """
    A product sale record.

    Every field but ``id`` is optional; the store assigns ``id`` on insert.
    ``date_of_sale`` is naive UTC.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    date_of_sale: Optional[datetime] = None
    category: Optional[str] = None
    sold: Optional[bool] = None
    id: Optional[int] = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Transaction":
        """
        Build a transaction from a raw dataset record.

        Unknown keys (the source's own ``id``, ``image``, ...) are dropped.
        A value that cannot be read raises ``ValueError`` or ``TypeError``.
        """
        price = record.get("price")
        return cls(
            title=record.get("title"),
            description=record.get("description"),
            price=float(price) if price is not None else None,
            date_of_sale=parse_sale_datetime(record.get("dateOfSale")),
            category=record.get("category"),
            sold=parse_sold(record.get("sold")),
        )
