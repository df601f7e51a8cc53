"""Portfolio analytics service over the stored ledger."""

from typing import Any, Optional

from microinvest.database.base import Database
from microinvest.domain.entities import (
    AssetPerformance,
    ChartPoint,
    DisplayMode,
    PortfolioInsight,
    PortfolioMetrics,
    PortfolioSnapshot,
    SeriesKind,
    TimeView,
)
from microinvest.domain.growth import calculate_asset_performance
from microinvest.domain.insight import compute_insight
from microinvest.domain.metrics import compute_metrics
from microinvest.domain.series import transform_series
from microinvest.domain.snapshot import (
    build_all_snapshots,
    build_snapshot,
    find_previous_snapshot,
    find_snapshot,
)


class PortfolioService:
    """Service that feeds the ledger through the analytics engine.

    Nothing is cached: every call rebuilds snapshots from the current ledger,
    so results always reflect the latest write.
    """

    def __init__(self, db: Database):
        """Initialize portfolio service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_snapshots(self) -> list[PortfolioSnapshot]:
        """All snapshots in ascending date order."""
        return build_all_snapshots(self.db.list_entries())

    def get_snapshot_for_date(self, date: str) -> Optional[PortfolioSnapshot]:
        """Snapshot for a date, or None when nothing was recorded that day."""
        entries = self.db.list_entries(date=date)
        if not entries:
            return None
        return build_snapshot(entries, date)

    def get_latest_snapshot(self) -> Optional[PortfolioSnapshot]:
        """Most recent snapshot, or None for an empty ledger."""
        dates = self.db.list_dates()
        if not dates:
            return None
        return self.get_snapshot_for_date(dates[-1])

    def get_insight_for_date(self, date: str) -> Optional[PortfolioInsight]:
        """Insight comparing a date's snapshot with the one before it."""
        snapshots = self.get_snapshots()
        current = find_snapshot(snapshots, date)
        if current is None:
            return None
        return compute_insight(current, find_previous_snapshot(snapshots, date))

    def get_metrics(self) -> PortfolioMetrics:
        """Whole-history metrics."""
        return compute_metrics(self.get_snapshots())

    def get_series(
        self,
        kind: SeriesKind,
        time_view: TimeView,
        display_mode: DisplayMode = DisplayMode.PERCENTAGE,
    ) -> list[ChartPoint]:
        """Chart points for a selector triple."""
        return transform_series(self.get_snapshots(), kind, time_view, display_mode)

    def get_asset_performance(self, asset_name: str) -> Optional[AssetPerformance]:
        """First-to-last performance of a single asset."""
        return calculate_asset_performance(
            self.db.list_entries(asset_name=asset_name), asset_name
        )

    def get_portfolio_evolution(self) -> list[dict[str, Any]]:
        """Net worth and total assets per snapshot date."""
        return [
            {
                "date": snapshot.date,
                "net_worth": snapshot.net_worth,
                "total_assets": snapshot.total_assets,
            }
            for snapshot in self.get_snapshots()
        ]
