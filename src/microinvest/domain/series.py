"""Series transform engine: snapshots to chart-ready points.

Every combination of (series kind, time view, display mode) is dispatched
from ``transform_series``. Numeric edge cases never raise; a zero baseline or
an asset missing from the baseline degrades to 0 or to the raw balance.
"""

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from dateutil import parser as date_parser

from microinvest.domain.entities import (
    ChartPoint,
    DisplayMode,
    PortfolioSnapshot,
    SeriesKind,
    TimeView,
)
from microinvest.domain.snapshot import sort_snapshots
from microinvest.utils import precision

logger = logging.getLogger(__name__)

PERIOD_LABEL_FORMAT = "%Y-%m"
# Fields missing from a partial date are taken from here, not from today
PERIOD_LABEL_DEFAULT = datetime(2000, 1, 1)


def format_period_label(date_str: str) -> str:
    """Normalise a snapshot date to a year-month label.

    Malformed dates pass through unchanged.
    """
    try:
        return date_parser.parse(date_str, default=PERIOD_LABEL_DEFAULT).strftime(
            PERIOD_LABEL_FORMAT
        )
    except (ValueError, TypeError, OverflowError):
        return date_str


def transform_series(
    snapshots: Sequence[PortfolioSnapshot],
    kind: SeriesKind,
    time_view: TimeView,
    display_mode: DisplayMode = DisplayMode.PERCENTAGE,
) -> list[ChartPoint]:
    """Turn a snapshot history into chart points for one selector triple.

    Args:
        snapshots: Snapshot history (sorted ascending by date before use)
        kind: What to measure (returns, portfolio value, allocation)
        time_view: Cumulative against the first snapshot, or per period
        display_mode: Percentage or dollar amounts (returns only)

    Returns:
        One ChartPoint per snapshot; empty when there are no snapshots
    """
    ordered = sort_snapshots(snapshots)
    if not ordered:
        return []

    kind = SeriesKind(kind)
    time_view = TimeView(time_view)
    display_mode = DisplayMode(display_mode)
    logger.debug(
        "Transforming %d snapshots as %s/%s/%s",
        len(ordered), kind.value, time_view.value, display_mode.value,
    )

    if kind == SeriesKind.RETURNS:
        return _returns_series(ordered, time_view, display_mode)
    if kind == SeriesKind.PORTFOLIO_VALUE:
        return _portfolio_value_series(ordered, time_view)
    return _allocation_series(ordered)


def collect_asset_names(points: Iterable[ChartPoint]) -> list[str]:
    """Sorted names of every asset appearing in any point."""
    names: set[str] = set()
    for point in points:
        names.update(point.per_asset)
    return sorted(names)


def _baseline_for(
    ordered: Sequence[PortfolioSnapshot], index: int, time_view: TimeView
) -> PortfolioSnapshot:
    if time_view == TimeView.CUMULATIVE:
        return ordered[0]
    # The first period point is compared against itself
    return ordered[index - 1] if index > 0 else ordered[index]


def _change(current: float, base: float, display_mode: DisplayMode) -> float:
    if display_mode == DisplayMode.ABSOLUTE:
        return precision.subtract(current, base)
    change = precision.percent_change(current, base)
    return change if change is not None else 0.0


def _asset_change(
    amount: float, base_amount: Optional[float], display_mode: DisplayMode
) -> float:
    if base_amount is None or base_amount <= 0:
        return amount if display_mode == DisplayMode.ABSOLUTE else 0.0
    return _change(amount, base_amount, display_mode)


def _returns_series(
    ordered: Sequence[PortfolioSnapshot],
    time_view: TimeView,
    display_mode: DisplayMode,
) -> list[ChartPoint]:
    points = []
    for index, snapshot in enumerate(ordered):
        baseline = _baseline_for(ordered, index, time_view)

        per_asset: dict[str, float] = {}
        for entry in snapshot.asset_entries:
            base_entry = baseline.find_entry(entry.asset_name)
            per_asset[entry.asset_name] = _asset_change(
                entry.amount,
                base_entry.amount if base_entry else None,
                display_mode,
            )

        points.append(
            ChartPoint(
                date=format_period_label(snapshot.date),
                total=_change(snapshot.net_worth, baseline.net_worth, display_mode),
                per_asset=per_asset,
            )
        )
    return points


def _portfolio_value_series(
    ordered: Sequence[PortfolioSnapshot], time_view: TimeView
) -> list[ChartPoint]:
    points = []
    for index, snapshot in enumerate(ordered):
        date = format_period_label(snapshot.date)

        if time_view == TimeView.CUMULATIVE:
            per_asset = {
                entry.asset_name: entry.amount for entry in snapshot.asset_entries
            }
            points.append(ChartPoint(date=date, total=snapshot.net_worth, per_asset=per_asset))
            continue

        previous = _baseline_for(ordered, index, time_view)
        per_asset = {}
        for entry in snapshot.asset_entries:
            previous_entry = previous.find_entry(entry.asset_name)
            previous_amount = previous_entry.amount if previous_entry else 0.0
            per_asset[entry.asset_name] = precision.subtract(entry.amount, previous_amount)

        points.append(
            ChartPoint(
                date=date,
                total=precision.subtract(snapshot.net_worth, previous.net_worth),
                per_asset=per_asset,
            )
        )
    return points


def _allocation_series(ordered: Sequence[PortfolioSnapshot]) -> list[ChartPoint]:
    points = []
    for snapshot in ordered:
        asset_entries = snapshot.asset_entries
        positive_total = precision.total(entry.amount for entry in asset_entries)

        per_asset: dict[str, float] = {}
        for entry in asset_entries:
            share = precision.percent_of(entry.amount, positive_total)
            per_asset[entry.asset_name] = share if share is not None else 0.0

        points.append(
            ChartPoint(
                date=format_period_label(snapshot.date), total=100.0, per_asset=per_asset
            )
        )
    return points
