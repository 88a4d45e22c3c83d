"""API routers package."""

from txn_report.api.routers.dataset import router as dataset_router
from txn_report.api.routers.transactions import router as transactions_router
from txn_report.api.routers.charts import router as charts_router
from txn_report.api.routers.combined import router as combined_router

__all__ = [
    "dataset_router",
    "transactions_router",
    "charts_router",
    "combined_router",
]
