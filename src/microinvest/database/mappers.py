"""Mapper functions to convert between domain models and SQLAlchemy models.

Amounts are stored as fixed-point Numeric columns and handed to the
analytics engine as floats.
"""

from microinvest.domain import entities as domain
from microinvest.database.models import LedgerEntry as ORMLedgerEntry


def ledger_entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        date=orm_entry.date,
        asset_name=orm_entry.asset_name,
        amount=float(orm_entry.amount),
        annual_rate=float(orm_entry.annual_rate),
    )
