"""Transaction listing endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from txn_report.api.deps import get_month, get_report_service
from txn_report.api.schemas import TransactionOut
from txn_report.core.exceptions import StoreError
from txn_report.services import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["transactions"])


@router.get("/transactions", response_model=list[TransactionOut])
async def list_transactions(
    month: Optional[int] = Depends(get_month),
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, alias="perPage"),
    search: str = Query("", description="Case-insensitive match on title/description, exact on price"),
    service: ReportService = Depends(get_report_service),
):
    """
    List one page of a month's transactions.
    search: substring of title or description, or a price
    """
    try:
        transactions = await service.list_transactions(month, page, per_page, search)
    except StoreError:
        logger.exception("Fetching transactions failed")
        return PlainTextResponse("Error fetching transactions", status_code=500)
    return [TransactionOut.from_domain(t) for t in transactions]
