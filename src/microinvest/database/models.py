"""SQLAlchemy models for the microinvest ledger."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class LedgerEntry(Base):
    """Ledger entry model: one asset or liability balance on one date."""

    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True)
    date = Column(String(10), nullable=False, index=True)
    asset_name = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    annual_rate = Column(Numeric(8, 4), nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # One balance per asset per date
    __table_args__ = (UniqueConstraint("date", "asset_name", name="uq_date_asset"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
