"""Ledger domain service."""

import logging
from decimal import Decimal
from typing import Optional

from microinvest.database.base import Database
from microinvest.domain.entities import LedgerEntry
from microinvest.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_entry,
    entry_not_found,
    invalid_entry_date,
    no_earlier_snapshot,
)
from microinvest.utils.date_parser import is_calendar_date

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for recording and editing ledger entries."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, date: str, asset_name: str) -> tuple[str, str]:
        date = date.strip()
        asset_name = asset_name.strip()
        if not is_calendar_date(date):
            raise ValidationError(invalid_entry_date(date))
        if not asset_name:
            raise ValidationError("Asset name cannot be empty")
        return date, asset_name

    def add_entry(
        self,
        date: str,
        asset_name: str,
        amount: Decimal,
        annual_rate: Decimal = Decimal("0"),
    ) -> LedgerEntry:
        """Record a balance for an asset on a date.

        Args:
            date: Snapshot date (YYYY-MM-DD)
            asset_name: Asset or liability label
            amount: Balance (negative for a liability)
            annual_rate: Expected annual growth rate in percent

        Returns:
            The recorded ledger entry

        Raises:
            ValidationError: If the date or asset name is invalid
            ConflictError: If the asset already has an entry on that date
        """
        date, asset_name = self._validate(date, asset_name)
        if self.db.entry_exists(date, asset_name):
            raise ConflictError(duplicate_entry(date, asset_name))

        self.db.add_entry(
            date=date, asset_name=asset_name, amount=amount, annual_rate=annual_rate
        )
        logger.info("Recorded %s on %s: %s", asset_name, date, amount)
        return self.db.get_entry(date, asset_name)

    def get_entry(self, date: str, asset_name: str) -> Optional[LedgerEntry]:
        """Get the entry for an asset on a date, or None."""
        return self.db.get_entry(date, asset_name)

    def update_entry(
        self,
        date: str,
        asset_name: str,
        *,
        amount: Optional[Decimal] = None,
        annual_rate: Optional[Decimal] = None,
        new_date: Optional[str] = None,
        new_asset_name: Optional[str] = None,
    ) -> LedgerEntry:
        """Replace fields of an existing entry.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If the new date or asset name is invalid
            ConflictError: If the new (date, asset) pair is already taken
        """
        if self.db.get_entry(date, asset_name) is None:
            raise NotFoundError(entry_not_found(date, asset_name))

        target_date, target_asset = self._validate(
            new_date if new_date is not None else date,
            new_asset_name if new_asset_name is not None else asset_name,
        )
        self.db.update_entry(
            date=date,
            asset_name=asset_name,
            amount=amount,
            annual_rate=annual_rate,
            new_date=target_date,
            new_asset_name=target_asset,
        )
        return self.db.get_entry(target_date, target_asset)

    def delete_entry(self, date: str, asset_name: str) -> None:
        """Delete the entry for an asset on a date.

        Raises:
            NotFoundError: If the entry does not exist
        """
        if not self.db.entry_exists(date, asset_name):
            raise NotFoundError(entry_not_found(date, asset_name))
        self.db.delete_entry(date, asset_name)
        logger.info("Deleted %s on %s", asset_name, date)

    def copy_latest_to(self, date: str) -> dict:
        """Prefill a date with the balances of the most recent earlier snapshot.

        Assets already recorded on the target date are left untouched.

        Args:
            date: Target snapshot date (YYYY-MM-DD)

        Returns:
            Dictionary with the source date, the copied entries and the
            names of skipped assets

        Raises:
            ValidationError: If the date is invalid
            NotFoundError: If nothing was recorded before the date
        """
        date = date.strip()
        if not is_calendar_date(date):
            raise ValidationError(invalid_entry_date(date))

        earlier = [d for d in self.db.list_dates() if d < date]
        if not earlier:
            raise NotFoundError(no_earlier_snapshot(date))
        source_date = earlier[-1]

        copied: list[LedgerEntry] = []
        skipped: list[str] = []
        for entry in self.db.list_entries(date=source_date):
            if self.db.entry_exists(date, entry.asset_name):
                skipped.append(entry.asset_name)
                continue
            self.db.add_entry(
                date=date,
                asset_name=entry.asset_name,
                amount=Decimal(str(entry.amount)),
                annual_rate=Decimal(str(entry.annual_rate)),
            )
            copied.append(self.db.get_entry(date, entry.asset_name))

        logger.info(
            "Copied %d entries from %s to %s (%d skipped)",
            len(copied), source_date, date, len(skipped),
        )
        return {"source_date": source_date, "copied": copied, "skipped": skipped}

    def clear(self) -> int:
        """Delete the whole ledger. Returns the number of entries removed."""
        return self.db.clear_entries()

    def list_entries(
        self, date: Optional[str] = None, asset_name: Optional[str] = None
    ) -> list[LedgerEntry]:
        """List entries, optionally restricted to a date or an asset."""
        return self.db.list_entries(date=date, asset_name=asset_name)

    def get_available_dates(self) -> list[str]:
        """Snapshot dates, most recent first."""
        return list(reversed(self.db.list_dates()))

    def get_asset_names(self) -> list[str]:
        """Distinct asset names in alphabetical order."""
        return self.db.list_asset_names()
