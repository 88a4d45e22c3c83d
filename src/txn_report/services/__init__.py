"""Service layer - business logic orchestration."""

from txn_report.services.dataset_service import DatasetService
from txn_report.services.report_service import ReportService

__all__ = [
    "DatasetService",
    "ReportService",
]
