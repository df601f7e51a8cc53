"""Generic SQLAlchemy database implementation."""

import logging
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session

from microinvest.database.base import Database
from microinvest.database.models import LedgerEntry, create_session_factory
from microinvest.database.mappers import ledger_entry_to_domain
from microinvest.domain.entities import LedgerEntry as DomainLedgerEntry
from microinvest.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_entry,
    entry_not_found,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _find(self, session: Session, date: str, asset_name: str) -> Optional[LedgerEntry]:
        return (
            session.query(LedgerEntry)
            .filter(LedgerEntry.date == date, LedgerEntry.asset_name == asset_name)
            .first()
        )

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # Ledger entry operations
    def add_entry(
        self, date: str, asset_name: str, amount: Decimal, annual_rate: Decimal
    ) -> None:
        """Add a ledger entry."""
        session = self._get_session()
        if self._find(session, date, asset_name) is not None:
            raise ConflictError(duplicate_entry(date, asset_name))

        session.add(
            LedgerEntry(
                date=date, asset_name=asset_name, amount=amount, annual_rate=annual_rate
            )
        )
        session.commit()
        logger.debug("Added entry %s / %s", date, asset_name)

    def get_entry(self, date: str, asset_name: str) -> Optional[DomainLedgerEntry]:
        """Get the entry for an asset on a date."""
        entry = self._find(self._get_session(), date, asset_name)
        if entry is None:
            return None
        return ledger_entry_to_domain(entry)

    def entry_exists(self, date: str, asset_name: str) -> bool:
        """Check whether an entry exists for an asset on a date."""
        return self._find(self._get_session(), date, asset_name) is not None

    def list_entries(
        self, date: Optional[str] = None, asset_name: Optional[str] = None
    ) -> list[DomainLedgerEntry]:
        """List entries ordered by date then asset name, optionally filtered."""
        session = self._get_session()
        query = session.query(LedgerEntry)
        if date is not None:
            query = query.filter(LedgerEntry.date == date)
        if asset_name is not None:
            query = query.filter(LedgerEntry.asset_name == asset_name)
        entries = query.order_by(LedgerEntry.date, LedgerEntry.asset_name).all()
        return [ledger_entry_to_domain(entry) for entry in entries]

    def update_entry(
        self,
        date: str,
        asset_name: str,
        amount: Optional[Decimal] = None,
        annual_rate: Optional[Decimal] = None,
        new_date: Optional[str] = None,
        new_asset_name: Optional[str] = None,
    ) -> None:
        """Update fields of an existing entry (None leaves a field unchanged)."""
        session = self._get_session()
        entry = self._find(session, date, asset_name)
        if entry is None:
            raise NotFoundError(entry_not_found(date, asset_name))

        target_date = new_date if new_date is not None else date
        target_asset = new_asset_name if new_asset_name is not None else asset_name
        if (target_date, target_asset) != (date, asset_name):
            if self._find(session, target_date, target_asset) is not None:
                raise ConflictError(duplicate_entry(target_date, target_asset))

        entry.date = target_date
        entry.asset_name = target_asset
        if amount is not None:
            entry.amount = amount
        if annual_rate is not None:
            entry.annual_rate = annual_rate
        session.commit()
        logger.debug("Updated entry %s / %s", date, asset_name)

    def delete_entry(self, date: str, asset_name: str) -> None:
        """Delete the entry for an asset on a date."""
        session = self._get_session()
        entry = self._find(session, date, asset_name)
        if entry is None:
            raise NotFoundError(entry_not_found(date, asset_name))

        session.delete(entry)
        session.commit()
        logger.debug("Deleted entry %s / %s", date, asset_name)

    def clear_entries(self) -> int:
        """Delete every entry. Returns the number deleted."""
        session = self._get_session()
        deleted = session.query(LedgerEntry).delete()
        session.commit()
        logger.debug("Cleared %d entries", deleted)
        return deleted

    def list_dates(self) -> list[str]:
        """List distinct entry dates in ascending order."""
        session = self._get_session()
        rows = session.query(LedgerEntry.date).distinct().order_by(LedgerEntry.date).all()
        return [row[0] for row in rows]

    def list_asset_names(self) -> list[str]:
        """List distinct asset names in alphabetical order."""
        session = self._get_session()
        rows = (
            session.query(LedgerEntry.asset_name)
            .distinct()
            .order_by(LedgerEntry.asset_name)
            .all()
        )
        return [row[0] for row in rows]
