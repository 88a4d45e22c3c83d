"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, Float, Text

from txn_report.repositories.sqlalchemy.database import Base


class TransactionORM(Base):
    """SQLAlchemy model for a product transaction."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    date_of_sale = Column(DateTime, nullable=True, index=True)
    category = Column(String(100), nullable=True)
    sold = Column(Boolean, nullable=True)
