"""Abstract database interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from microinvest.domain.entities import LedgerEntry


class Database(ABC):
    """Abstract ledger storage interface for microinvest."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Ledger entry operations
    @abstractmethod
    def add_entry(
        self, date: str, asset_name: str, amount: Decimal, annual_rate: Decimal
    ) -> None:
        """Add a ledger entry."""
        pass

    @abstractmethod
    def get_entry(self, date: str, asset_name: str) -> Optional[LedgerEntry]:
        """Get the entry for an asset on a date."""
        pass

    @abstractmethod
    def entry_exists(self, date: str, asset_name: str) -> bool:
        """Check whether an entry exists for an asset on a date."""
        pass

    @abstractmethod
    def list_entries(
        self, date: Optional[str] = None, asset_name: Optional[str] = None
    ) -> list[LedgerEntry]:
        """List entries ordered by date then asset name, optionally filtered."""
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def delete_entry(self, date: str, asset_name: str) -> None:
        """Delete the entry for an asset on a date."""
        pass

    @abstractmethod
    def clear_entries(self) -> int:
        """Delete every entry. Returns the number deleted."""
        pass

    @abstractmethod
    def list_dates(self) -> list[str]:
        """List distinct entry dates in ascending order."""
        pass

    @abstractmethod
    def list_asset_names(self) -> list[str]:
        """List distinct asset names in alphabetical order."""
        pass
