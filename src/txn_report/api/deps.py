"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import sessionmaker

from txn_report.config.settings import get_settings
from txn_report.core.exceptions import ValidationError
from txn_report.providers import HttpDatasetProvider
from txn_report.providers.dataset_provider import DatasetProvider
from txn_report.repositories.sqlalchemy import (
    get_session_factory,
    SqlAlchemyTransactionRepository,
)
from txn_report.services import DatasetService, ReportService


def get_month(
    month: Optional[str] = Query(None, description="Month number 1-12 of the report year"),
) -> Optional[int]:
    """Parse the ``month`` query parameter; absent stays None."""
    if month is None or month == "":
        return None
    try:
        return int(month)
    except ValueError:
        raise ValidationError("Invalid month")


def get_transaction_repo(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(session_factory)


def get_dataset_provider() -> DatasetProvider:
    """Provide the remote dataset provider."""
    settings = get_settings()
    return HttpDatasetProvider(
        url=settings.dataset_url,
        timeout_seconds=settings.dataset_fetch_timeout_seconds,
    )


def get_report_service(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> ReportService:
    """Provide ReportService instance."""
    settings = get_settings()
    return ReportService(
        transaction_repo=transaction_repo,
        report_year=settings.report_year,
        report_timezone=settings.report_timezone,
    )


def get_dataset_service(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    provider: DatasetProvider = Depends(get_dataset_provider),
) -> DatasetService:
    """Provide DatasetService instance."""
    return DatasetService(transaction_repo=transaction_repo, provider=provider)
