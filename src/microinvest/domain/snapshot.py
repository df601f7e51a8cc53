"""Snapshot builder: groups ledger entries by date into portfolio snapshots."""

import logging
from typing import Iterable, Optional, Sequence

from microinvest.domain.entities import LedgerEntry, PortfolioSnapshot
from microinvest.utils import precision

logger = logging.getLogger(__name__)


def build_snapshot(
    entries: Iterable[LedgerEntry], target_date: str
) -> PortfolioSnapshot:
    """Build the snapshot of every entry recorded on ``target_date``.

    Positive amounts count toward total assets, negative amounts toward total
    liabilities (as absolute values). Zero amounts stay in ``entries`` but
    count toward neither total.

    Args:
        entries: All ledger entries
        target_date: Date string to select (exact match)

    Returns:
        PortfolioSnapshot for the date; all totals are zero when no entry
        matches
    """
    date_entries = tuple(entry for entry in entries if entry.date == target_date)

    total_assets = precision.total(
        entry.amount for entry in date_entries if entry.amount > 0
    )
    total_liabilities = abs(
        precision.total(entry.amount for entry in date_entries if entry.amount < 0)
    )

    return PortfolioSnapshot(
        date=target_date,
        entries=date_entries,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=precision.subtract(total_assets, total_liabilities),
    )


def build_all_snapshots(entries: Iterable[LedgerEntry]) -> list[PortfolioSnapshot]:
    """Build one snapshot per distinct date, in ascending date order."""
    entries = list(entries)
    dates = sorted({entry.date for entry in entries})
    logger.debug("Building %d snapshots from %d entries", len(dates), len(entries))
    return [build_snapshot(entries, snapshot_date) for snapshot_date in dates]


def sort_snapshots(snapshots: Iterable[PortfolioSnapshot]) -> list[PortfolioSnapshot]:
    """Return a new list of snapshots sorted ascending by date."""
    return sorted(snapshots, key=lambda snapshot: snapshot.date)


def find_snapshot(
    snapshots: Sequence[PortfolioSnapshot], snapshot_date: str
) -> Optional[PortfolioSnapshot]:
    """Return the snapshot for a date, or None."""
    for snapshot in snapshots:
        if snapshot.date == snapshot_date:
            return snapshot
    return None


def find_previous_snapshot(
    snapshots: Sequence[PortfolioSnapshot], snapshot_date: str
) -> Optional[PortfolioSnapshot]:
    """Return the snapshot immediately preceding ``snapshot_date``.

    Snapshots are sorted before the lookup. Returns None when the date is the
    earliest one or is not present at all.
    """
    ordered = sort_snapshots(snapshots)
    for index, snapshot in enumerate(ordered):
        if snapshot.date == snapshot_date:
            return ordered[index - 1] if index > 0 else None
    return None
