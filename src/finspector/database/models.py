"""SQLAlchemy models for finspector database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Index,
    create_engine,
    func,
    true,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(UTC)


class Category(Base):
    """Expense category model.

    parent_id is a plain self-referencing foreign key. Acyclicity is not
    enforced here.
    """

    __tablename__ = "expense_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(String(255), nullable=True)
    color_code = Column(String(7), nullable=True)
    icon_name = Column(String(50), nullable=True)
    parent_id = Column(Integer, ForeignKey("expense_categories.id"), nullable=True, index=True)
    is_active = Column(Boolean, default=True, nullable=False)
    sort_order = Column(Integer, nullable=True)
    created_on = Column(DateTime, default=utcnow, nullable=False)
    updated_on = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    created_by = Column(String(100), nullable=True)
    updated_by = Column(String(100), nullable=True)


# Names are unique among active categories only
Index(
    "uq_expense_categories_active_name",
    func.lower(Category.name),
    unique=True,
    sqlite_where=Category.is_active == true(),
    postgresql_where=Category.is_active == true(),
)


class Expense(Base):
    """Expense model, kept to the columns category bookkeeping needs."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    category_id = Column(Integer, ForeignKey("expense_categories.id"), nullable=False, index=True)
    amount = Column(Numeric(15, 4), nullable=False)
    spent_on = Column(Date, nullable=False)
    description = Column(String(255), nullable=True)
    created_on = Column(DateTime, default=utcnow, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine_kwargs = {}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session sees an empty database
        engine_kwargs = {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    engine = create_engine(database_url, echo=False, **engine_kwargs)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
