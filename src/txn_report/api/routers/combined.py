"""Combined month report endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from txn_report.api.deps import get_month, get_report_service
from txn_report.api.schemas import CombinedResponse
from txn_report.core.exceptions import StoreError
from txn_report.services import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["combined"])


@router.get("/combined-data", response_model=CombinedResponse)
async def get_combined_data(
    month: Optional[int] = Depends(get_month),
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, alias="perPage"),
    search: str = Query(""),
    service: ReportService = Depends(get_report_service),
):
    """Transactions, statistics, bar chart and pie chart in one response."""
    try:
        report = await service.combined(month, page, per_page, search)
    except StoreError:
        logger.exception("Fetching combined data failed")
        return PlainTextResponse("Error fetching combined data", status_code=500)
    return CombinedResponse.from_view(report)
