"""Domain model entities for microinvest.

These are pure data classes representing ledger and analytics concepts,
independent of database schema. Every analytics value is derived from the
ledger on each query, so all of them are frozen. Mapping fields are stored
as read-only views; classes holding one compare by value but are not
hashable.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


@dataclass(frozen=True)
class LedgerEntry:
    """One dated balance record for a named asset or liability.

    A negative amount is a liability (e.g. a loan). ``date`` is kept as an
    ISO ``YYYY-MM-DD`` string so lexicographic order is chronological order.
    """

    date: str
    asset_name: str
    amount: float
    annual_rate: float

    @property
    def is_asset(self) -> bool:
        return self.amount > 0

    @property
    def is_liability(self) -> bool:
        return self.amount < 0


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Aggregated state of all ledger entries sharing one date."""

    date: str
    entries: tuple[LedgerEntry, ...]
    total_assets: float
    total_liabilities: float
    net_worth: float

    def find_entry(self, asset_name: str) -> LedgerEntry | None:
        """Return the first entry recorded for an asset, if any."""
        for entry in self.entries:
            if entry.asset_name == asset_name:
                return entry
        return None

    @property
    def asset_entries(self) -> tuple[LedgerEntry, ...]:
        return tuple(entry for entry in self.entries if entry.amount > 0)


@dataclass(frozen=True)
class Performer:
    """Named asset paired with its realised growth percentage."""

    name: str
    growth: float

    @classmethod
    def empty(cls) -> "Performer":
        return cls(name="", growth=0.0)

    @property
    def is_empty(self) -> bool:
        return self.name == ""


@dataclass(frozen=True)
class EntryChange:
    """A snapshot entry alongside its movement since the previous snapshot.

    ``change`` is 0 for an asset absent from the previous snapshot, and
    ``actual_return`` is None (undefined) in that case or when the previous
    balance was zero.
    """

    entry: LedgerEntry
    change: float
    actual_return: float | None


@dataclass(frozen=True)
class PortfolioInsight:
    """Comparison of a snapshot against its immediate predecessor."""

    top_performer: Performer
    underperformer: Performer
    period_change_pct: float
    allocation: Mapping[str, float] = field(default_factory=dict)
    period_change: float = 0.0
    entry_changes: tuple[EntryChange, ...] = ()

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "allocation", MappingProxyType(dict(self.allocation)))
        object.__setattr__(self, "entry_changes", tuple(self.entry_changes))

    @property
    def has_highlights(self) -> bool:
        """Whether the performer card carries anything worth showing.

        Nothing is surfaced when the best asset did not grow and the worst
        asset did not shrink.
        """
        return not (
            self.top_performer.growth <= 0 and self.underperformer.growth >= 0
        )


@dataclass(frozen=True)
class PeriodReturn:
    """Return of a single period, keyed by the period's closing date."""

    date: str
    return_pct: float

    @classmethod
    def empty(cls) -> "PeriodReturn":
        return cls(date="", return_pct=0.0)


@dataclass(frozen=True)
class PortfolioMetrics:
    """Whole-history statistics over an ordered snapshot sequence.

    ``sharpe_like`` is mean period return over volatility with a zero
    risk-free rate and population standard deviation. It is not a true
    Sharpe ratio.
    """

    total_return: float
    total_return_pct: float
    monthly_growth_rate: float
    volatility: float
    sharpe_like: float
    max_drawdown: float
    best_period: PeriodReturn
    worst_period: PeriodReturn

    @classmethod
    def empty(cls) -> "PortfolioMetrics":
        return cls(
            total_return=0.0,
            total_return_pct=0.0,
            monthly_growth_rate=0.0,
            volatility=0.0,
            sharpe_like=0.0,
            max_drawdown=0.0,
            best_period=PeriodReturn.empty(),
            worst_period=PeriodReturn.empty(),
        )


@dataclass(frozen=True)
class AssetPerformance:
    """First-to-last performance of a single asset across the ledger."""

    asset_name: str
    initial_value: float
    current_value: float
    total_growth: float
    growth_pct: float
    monthly_growth_rate: float


@dataclass(frozen=True)
class ChartPoint:
    """One chart-ready point; meaning of the values depends on the selector."""

    date: str
    total: float
    per_asset: Mapping[str, float] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "per_asset", MappingProxyType(dict(self.per_asset)))


class SeriesKind(str, Enum):
    """What a chart series measures."""

    RETURNS = "returns"
    PORTFOLIO_VALUE = "portfolio"
    ALLOCATION = "allocation"


class TimeView(str, Enum):
    """Whether values accumulate from the first snapshot or reset each period."""

    CUMULATIVE = "cumulative"
    PERIOD = "period"


class DisplayMode(str, Enum):
    """Whether changes are shown as percentages or dollar amounts."""

    PERCENTAGE = "percentage"
    ABSOLUTE = "absolute"


class RiskLevel(str, Enum):
    """Coarse risk bucket derived from volatility."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
