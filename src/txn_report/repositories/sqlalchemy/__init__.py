"""SQLAlchemy repository implementations."""

from txn_report.repositories.sqlalchemy.database import (
    create_store_engine,
    get_engine,
    get_session_factory,
    init_db,
    reset_database,
    Base,
)
from txn_report.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository

__all__ = [
    "create_store_engine",
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyTransactionRepository",
]
