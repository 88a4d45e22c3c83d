"""
Pytest configuration and fixtures for the transaction reporting tests.

This module provides:
- File-backed SQLite database fixtures (one database per test)
- Repository and service fixtures
- Deterministic and failing dataset providers
- Record factory helpers
- FastAPI test client wired to the test database
"""

import asyncio
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from txn_report.config.settings import Settings, set_settings, reset_settings
from txn_report.core.exceptions import StoreError, UpstreamError
from txn_report.core.months import MonthWindow
from txn_report.domain.models import Transaction
from txn_report.domain.views import CategoryCount
from txn_report.main import app
from txn_report.api.deps import get_dataset_provider, get_transaction_repo
from txn_report.repositories.sqlalchemy import (
    Base,
    create_store_engine,
    get_session_factory,
    reset_database,
    SqlAlchemyTransactionRepository,
)
# Import ORM models to register them with Base before creating tables
from txn_report.repositories.sqlalchemy import orm_models  # noqa: F401
from txn_report.services import DatasetService, ReportService


# =============================================================================
# RECORD HELPERS
# =============================================================================


def make_record(
    title: str = "Item",
    price: Optional[float] = 100.0,
    date_of_sale: Optional[str] = "2022-03-10T10:00:00Z",
    category: Optional[str] = "electronics",
    sold: Optional[bool] = True,
    description: Optional[str] = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw dataset record shaped like the remote JSON."""
    record = {
        "title": title,
        "description": description if description is not None else f"{title} description",
        "price": price,
        "dateOfSale": date_of_sale,
        "category": category,
        "sold": sold,
    }
    record.update(extra)
    return record


SAMPLE_RECORDS: list[dict[str, Any]] = [
    make_record("Fjallraven Backpack", 109.95, "2022-03-27T20:29:54+05:30", "men's clothing", False,
                description="Your perfect pack for everyday use", id=1, image="https://example.com/1.jpg"),
    make_record("Slim Fit T-Shirt", 22.3, "2022-03-05T20:29:54+05:30", "men's clothing", True,
                description="Slim-fitting style, contrast raglan long sleeve", id=2),
    make_record("Gold Bracelet", 695.0, "2022-03-15T12:00:00+05:30", "jewelery", True,
                description="From our Legends Collection", id=3),
    make_record("Portable SSD 1TB", 109.0, "2022-03-20T08:00:00+05:30", "electronics", False,
                description="Easy upgrade for faster boot up", id=4),
    make_record("27-inch Monitor", 999.99, "2022-03-31T22:00:00Z", "electronics", True,
                description="Full HD IPS display", id=5),
    make_record("Rain Jacket", 39.99, "2022-04-02T09:00:00+05:30", "women's clothing", True,
                description="Lightweight perfect for trip", id=6),
    make_record("Cotton Jacket", 55.99, "2021-03-12T09:00:00+05:30", "men's clothing", True,
                description="Great outerwear jacket", id=7),
]


# =============================================================================
# DATASET PROVIDERS
# =============================================================================


class StaticDatasetProvider:
    """Dataset provider returning a fixed list of records."""

    def __init__(self, records: Optional[list[dict[str, Any]]] = None):
        self.records = list(records if records is not None else SAMPLE_RECORDS)
        self.calls = 0

    @property
    def source(self) -> str:
        return "static://test"

    async def fetch(self) -> list[dict[str, Any]]:
        self.calls += 1
        return [dict(r) for r in self.records]


class FailingDatasetProvider:
    """Dataset provider that always fails."""

    @property
    def source(self) -> str:
        return "static://unreachable"

    async def fetch(self) -> list[dict[str, Any]]:
        raise UpstreamError(self.source, "connection refused")


class FailingTransactionRepository:
    """
    Repository whose queries fail.

    ``fail_on_price`` limits failures to counts whose lower price bound
    (inclusive or exclusive) equals it; every other call is delegated to
    ``inner``.
    """

    def __init__(self, inner=None, fail_on_price: Optional[float] = None):
        self._inner = inner
        self._fail_on = fail_on_price

    def _fail(self, operation: str):
        raise StoreError(operation, "database is locked")

    def find(self, window: MonthWindow, search: str = "", offset: int = 0, limit=None):
        if self._inner is None:
            self._fail("find")
        return self._inner.find(window, search, offset, limit)

    def count(self, window: MonthWindow, sold=None, min_price=None, max_price=None, above_price=None) -> int:
        lower = min_price if min_price is not None else above_price
        if self._inner is None or (self._fail_on is not None and lower == self._fail_on):
            self._fail("count")
        return self._inner.count(window, sold, min_price, max_price, above_price)

    def sum_price(self, window: MonthWindow, sold=None) -> float:
        if self._inner is None:
            self._fail("sum")
        return self._inner.sum_price(window, sold)

    def count_by_category(self, window: MonthWindow) -> list[CategoryCount]:
        if self._inner is None:
            self._fail("group")
        return self._inner.count_by_category(window)

    def list_all(self) -> list[Transaction]:
        if self._inner is None:
            self._fail("list")
        return self._inner.list_all()

    def replace_all(self, transactions: list[Transaction]) -> int:
        self._fail("replace")


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a per-test SQLite file."""
    reset_settings()
    reset_database()
    settings = Settings(
        data_dir=tmp_path,
        database_url=f"sqlite:///{tmp_path / 'transactions_test.sqlite'}",
        report_year=2022,
        report_timezone="UTC",
    )
    set_settings(settings)
    yield settings
    reset_database()
    reset_settings()


@pytest.fixture(scope="function")
def test_engine(test_settings):
    """Create test database engine on a file-backed SQLite database."""
    engine = create_store_engine(test_settings.get_database_url())
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def transaction_repo(session_factory) -> SqlAlchemyTransactionRepository:
    """Provide test TransactionRepository."""
    return SqlAlchemyTransactionRepository(session_factory)


@pytest.fixture
def report_service(transaction_repo) -> ReportService:
    """Provide test ReportService for 2022 in UTC."""
    return ReportService(transaction_repo=transaction_repo, report_year=2022, report_timezone="UTC")


@pytest.fixture
def static_provider() -> StaticDatasetProvider:
    """Provide a deterministic dataset provider."""
    return StaticDatasetProvider()


@pytest.fixture
def dataset_service(transaction_repo, static_provider) -> DatasetService:
    """Provide test DatasetService."""
    return DatasetService(transaction_repo=transaction_repo, provider=static_provider)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def seed_records(transaction_repo) -> Callable[..., list[Transaction]]:
    """Factory replacing the store contents with the given raw records."""

    def _seed(records: Optional[list[dict[str, Any]]] = None) -> list[Transaction]:
        records = SAMPLE_RECORDS if records is None else records
        transaction_repo.replace_all([Transaction.from_record(r) for r in records])
        return transaction_repo.list_all()

    return _seed


@pytest.fixture
def sample_data(seed_records) -> list[Transaction]:
    """Store pre-loaded with SAMPLE_RECORDS."""
    return seed_records()


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(session_factory, static_provider) -> TestClient:
    """Provide FastAPI test client with test database and static dataset."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_dataset_provider] = lambda: static_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_store_client(client) -> TestClient:
    """Test client whose store queries all fail."""
    app.dependency_overrides[get_transaction_repo] = lambda: FailingTransactionRepository()
    return client


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def run(coro):
    """Run a service coroutine to completion."""
    return asyncio.run(coro)
