"""Insight calculator: compares a snapshot with its immediate predecessor."""

from typing import Optional

from microinvest.domain.entities import (
    EntryChange,
    Performer,
    PortfolioInsight,
    PortfolioSnapshot,
)
from microinvest.utils import precision


def calculate_actual_return(
    current_amount: float, previous_amount: Optional[float]
) -> Optional[float]:
    """Realised percentage change of a balance between two snapshots.

    Returns None (undefined, not zero) when there is no comparable previous
    balance, i.e. the asset is new or its previous balance was zero.
    """
    if previous_amount is None or previous_amount == 0:
        return None
    return precision.percent_change(current_amount, previous_amount)


def calculate_allocation(snapshot: PortfolioSnapshot) -> dict[str, float]:
    """Share of total assets held by each positive entry, in percent."""
    allocation: dict[str, float] = {}
    for entry in snapshot.asset_entries:
        share = precision.percent_of(entry.amount, snapshot.total_assets)
        allocation[entry.asset_name] = share if share is not None else 0.0
    return allocation


def calculate_entry_changes(
    current: PortfolioSnapshot, previous: Optional[PortfolioSnapshot] = None
) -> tuple[EntryChange, ...]:
    """Dollar change and actual return of every entry in ``current``.

    Liabilities and zero balances are included, unlike performer ranking.
    """
    changes = []
    for entry in current.entries:
        previous_entry = previous.find_entry(entry.asset_name) if previous else None
        previous_amount = previous_entry.amount if previous_entry else None
        changes.append(
            EntryChange(
                entry=entry,
                change=(
                    precision.subtract(entry.amount, previous_amount)
                    if previous_amount is not None
                    else 0.0
                ),
                actual_return=calculate_actual_return(entry.amount, previous_amount),
            )
        )
    return tuple(changes)


def compute_insight(
    current: PortfolioSnapshot, previous: Optional[PortfolioSnapshot] = None
) -> PortfolioInsight:
    """Derive performers, period change, allocation and per-entry changes.

    Assets without a defined actual return are not ranked. When no asset
    has one, both performers are empty placeholders.

    Args:
        current: Snapshot being described
        previous: Snapshot immediately before ``current``, if any

    Returns:
        PortfolioInsight for ``current``
    """
    top: Optional[Performer] = None
    under: Optional[Performer] = None

    for entry in current.asset_entries:
        previous_entry = previous.find_entry(entry.asset_name) if previous else None
        actual_return = calculate_actual_return(
            entry.amount, previous_entry.amount if previous_entry else None
        )
        if actual_return is None:
            continue
        if top is None or actual_return > top.growth:
            top = Performer(name=entry.asset_name, growth=actual_return)
        if under is None or actual_return < under.growth:
            under = Performer(name=entry.asset_name, growth=actual_return)

    period_change_pct = 0.0
    period_change = 0.0
    if previous is not None:
        change = precision.percent_change(current.net_worth, previous.net_worth)
        period_change_pct = change if change is not None else 0.0
        period_change = precision.subtract(current.net_worth, previous.net_worth)

    return PortfolioInsight(
        top_performer=top or Performer.empty(),
        underperformer=under or Performer.empty(),
        period_change_pct=period_change_pct,
        allocation=calculate_allocation(current),
        period_change=period_change,
        entry_changes=calculate_entry_changes(current, previous),
    )
