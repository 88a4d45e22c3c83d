"""SQLAlchemy implementation of TransactionRepository."""

import logging
import math
from typing import Optional

from sqlalchemy import and_, or_, false, func, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from txn_report.core.exceptions import StoreError
from txn_report.core.months import MonthWindow
from txn_report.domain.models import Transaction
from txn_report.domain.views import CategoryCount
from txn_report.repositories.sqlalchemy.orm_models import TransactionORM

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _numeric_search(term: str) -> Optional[float]:
    """Return ``term`` as a finite number, or None if it is not one."""
    try:
        value = float(term)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class SqlAlchemyTransactionRepository:
    """
    SQLAlchemy-backed transaction store.

    Every call opens its own session so independent queries can run on
    separate worker threads at the same time.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def find(
        self,
        window: MonthWindow,
        search: str = "",
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions in the window matching ``search``, in id order."""
        conditions = [self._window_condition(window)]
        search_condition = self._search_condition(search)
        if search_condition is not None:
            conditions.append(search_condition)

        stmt = (
            select(TransactionORM)
            .where(and_(*conditions))
            .order_by(TransactionORM.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            with self._session_factory() as session:
                return [self._to_domain(t) for t in session.scalars(stmt).all()]
        except SQLAlchemyError as exc:
            raise StoreError("find", str(exc)) from exc

    def count(
        self,
        window: MonthWindow,
        sold: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        above_price: Optional[float] = None,
    ) -> int:
        """Count transactions in the window, optionally by sale status and price."""
        conditions = [self._window_condition(window)]
        if sold is not None:
            conditions.append(TransactionORM.sold == sold)
        if min_price is not None:
            conditions.append(TransactionORM.price >= min_price)
        if above_price is not None:
            conditions.append(TransactionORM.price > above_price)
        if max_price is not None:
            conditions.append(TransactionORM.price <= max_price)

        stmt = select(func.count(TransactionORM.id)).where(and_(*conditions))
        try:
            with self._session_factory() as session:
                return session.scalar(stmt) or 0
        except SQLAlchemyError as exc:
            raise StoreError("count", str(exc)) from exc

    def sum_price(self, window: MonthWindow, sold: Optional[bool] = None) -> float:
        """Sum prices in the window; an empty set sums to 0."""
        conditions = [self._window_condition(window)]
        if sold is not None:
            conditions.append(TransactionORM.sold == sold)

        stmt = select(func.coalesce(func.sum(TransactionORM.price), 0)).where(and_(*conditions))
        try:
            with self._session_factory() as session:
                return session.scalar(stmt) or 0
        except SQLAlchemyError as exc:
            raise StoreError("sum", str(exc)) from exc

    def count_by_category(self, window: MonthWindow) -> list[CategoryCount]:
        """Group the window by category and count each group."""
        stmt = (
            select(TransactionORM.category, func.count(TransactionORM.id))
            .where(self._window_condition(window))
            .group_by(TransactionORM.category)
            .order_by(TransactionORM.category)
        )
        try:
            with self._session_factory() as session:
                return [
                    CategoryCount(category=category, count=count)
                    for category, count in session.execute(stmt).all()
                ]
        except SQLAlchemyError as exc:
            raise StoreError("group", str(exc)) from exc

    def list_all(self) -> list[Transaction]:
        """Return every stored transaction in id order, for checking a load."""
        try:
            with self._session_factory() as session:
                rows = session.scalars(select(TransactionORM).order_by(TransactionORM.id)).all()
                return [self._to_domain(t) for t in rows]
        except SQLAlchemyError as exc:
            raise StoreError("list", str(exc)) from exc

    def replace_all(self, transactions: list[Transaction]) -> int:
        """
        Delete every stored transaction, then insert ``transactions``.

        The delete and the insert commit separately; if the insert fails the
        store is left empty.
        """
        try:
            with self._session_factory() as session:
                deleted = session.execute(delete(TransactionORM)).rowcount
                session.commit()
                logger.debug("Deleted %s transactions", deleted)

                session.add_all([self._to_orm(t) for t in transactions])
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError("replace", str(exc)) from exc
        return len(transactions)

    @staticmethod
    def _window_condition(window: MonthWindow):
        if window.is_empty:
            return false()
        return and_(
            TransactionORM.date_of_sale >= window.start,
            TransactionORM.date_of_sale < window.end,
        )

    @staticmethod
    def _search_condition(search: str):
        """Case-insensitive substring on title/description; exact match on price."""
        if not search:
            return None
        pattern = f"%{_escape_like(search)}%"
        clauses = [
            TransactionORM.title.ilike(pattern, escape="\\"),
            TransactionORM.description.ilike(pattern, escape="\\"),
        ]
        number = _numeric_search(search.strip())
        if number is not None:
            clauses.append(TransactionORM.price == number)
        return or_(*clauses)

    @staticmethod
    def _to_orm(txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model."""
        return TransactionORM(
            title=txn.title,
            description=txn.description,
            price=txn.price,
            date_of_sale=txn.date_of_sale,
            category=txn.category,
            sold=txn.sold,
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            id=orm.id,
            title=orm.title,
            description=orm.description,
            price=orm.price,
            date_of_sale=orm.date_of_sale,
            category=orm.category,
            sold=orm.sold,
        )
