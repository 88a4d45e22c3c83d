"""Dataset initialisation endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from txn_report.api.deps import get_dataset_service
from txn_report.core.exceptions import StoreError, UpstreamError
from txn_report.services import DatasetService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dataset"])


@router.get("/init", response_class=PlainTextResponse)
async def initialize_dataset(
    service: DatasetService = Depends(get_dataset_service),
) -> PlainTextResponse:
    """Replace the stored transactions with the remote dataset."""
    try:
        await service.initialize()
    except (UpstreamError, StoreError):
        logger.exception("Database initialization failed")
        return PlainTextResponse("Error initializing database", status_code=500)
    return PlainTextResponse("Database initialized", status_code=200)
