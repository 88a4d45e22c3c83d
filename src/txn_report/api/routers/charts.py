"""Month statistics and chart endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from txn_report.api.deps import get_month, get_report_service
from txn_report.api.schemas import StatisticsResponse, BarChartEntry, PieChartEntry
from txn_report.core.exceptions import StoreError
from txn_report.services import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["charts"])


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    month: Optional[int] = Depends(get_month),
    service: ReportService = Depends(get_report_service),
):
    """Total sale amount and sold / not-sold item counts for a month."""
    try:
        stats = await service.statistics(month)
    except StoreError:
        logger.exception("Fetching statistics failed")
        return PlainTextResponse("Error fetching statistics", status_code=500)
    return StatisticsResponse.from_view(stats)


@router.get("/bar-chart", response_model=list[BarChartEntry])
async def get_bar_chart(
    month: Optional[int] = Depends(get_month),
    service: ReportService = Depends(get_report_service),
):
    """Item counts per price range for a month."""
    try:
        buckets = await service.bar_chart(month)
    except StoreError:
        logger.exception("Fetching bar chart data failed")
        return PlainTextResponse("Error fetching bar chart data", status_code=500)
    return [BarChartEntry.from_view(b) for b in buckets]


@router.get("/pie-chart", response_model=list[PieChartEntry])
async def get_pie_chart(
    month: Optional[int] = Depends(get_month),
    service: ReportService = Depends(get_report_service),
):
    """Item counts per category for a month."""
    try:
        categories = await service.pie_chart(month)
    except StoreError:
        logger.exception("Fetching pie chart data failed")
        return PlainTextResponse("Error fetching pie chart data", status_code=500)
    return [PieChartEntry.from_view(c) for c in categories]
