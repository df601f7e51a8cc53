"""Whole-history portfolio metrics."""

import logging
import math
from typing import Sequence

from microinvest.domain.entities import (
    PeriodReturn,
    PortfolioMetrics,
    PortfolioSnapshot,
    RiskLevel,
)
from microinvest.domain.snapshot import sort_snapshots
from microinvest.utils import precision

logger = logging.getLogger(__name__)

LOW_RISK_VOLATILITY = 5
MEDIUM_RISK_VOLATILITY = 15


def calculate_growth_from_previous(
    current: PortfolioSnapshot, previous: PortfolioSnapshot
) -> float:
    """Percentage change in net worth between two snapshots (0 if undefined)."""
    change = precision.percent_change(current.net_worth, previous.net_worth)
    return change if change is not None else 0.0


def calculate_compound_rate(first: float, last: float, periods: int) -> float:
    """Average per-period growth rate, in percent, from ``first`` to ``last``.

    Solves ``last = first * (1 + r) ** periods``. Returns 0 when there are no
    periods, when ``first`` is not positive, or when the ratio is negative
    (no real root).
    """
    if periods <= 0 or first <= 0:
        return 0.0
    ratio = precision.divide(last, first)
    if ratio is None or ratio < 0:
        return 0.0
    root = precision.power(ratio, precision.divide(1, periods))
    if root is None:
        return 0.0
    return precision.multiply(precision.subtract(root, 1), 100)


def compute_metrics(snapshots: Sequence[PortfolioSnapshot]) -> PortfolioMetrics:
    """Compute return, risk and drawdown statistics over a snapshot history.

    Snapshots are sorted by date before use. Fewer than two snapshots yield
    the all-zero metrics.
    """
    if len(snapshots) < 2:
        return PortfolioMetrics.empty()

    ordered = sort_snapshots(snapshots)
    first = ordered[0]
    last = ordered[-1]

    total_return = precision.subtract(last.net_worth, first.net_worth)
    total_return_pct = precision.percent_change(last.net_worth, first.net_worth)

    period_returns: list[float] = []
    best_period = None
    worst_period = None
    for previous, current in zip(ordered, ordered[1:]):
        period_return = calculate_growth_from_previous(current, previous)
        period_returns.append(period_return)
        # Strict comparisons: earliest period wins ties
        if best_period is None or period_return > best_period.return_pct:
            best_period = PeriodReturn(date=current.date, return_pct=period_return)
        if worst_period is None or period_return < worst_period.return_pct:
            worst_period = PeriodReturn(date=current.date, return_pct=period_return)

    periods = len(ordered) - 1
    monthly_growth_rate = calculate_compound_rate(
        first.net_worth, last.net_worth, periods
    )

    mean_return = sum(period_returns) / len(period_returns)
    variance = sum((r - mean_return) ** 2 for r in period_returns) / len(
        period_returns
    )
    volatility = math.sqrt(variance)
    sharpe_like = mean_return / volatility if volatility != 0 else 0.0

    max_drawdown = 0.0
    peak = first.net_worth
    for snapshot in ordered:
        if snapshot.net_worth > peak:
            peak = snapshot.net_worth
        drawdown = precision.percent_of(peak - snapshot.net_worth, peak)
        if drawdown is not None and drawdown > max_drawdown:
            max_drawdown = drawdown

    logger.debug(
        "Metrics over %d snapshots: return=%s volatility=%s", len(ordered),
        total_return, volatility,
    )

    return PortfolioMetrics(
        total_return=total_return,
        total_return_pct=total_return_pct if total_return_pct is not None else 0.0,
        monthly_growth_rate=monthly_growth_rate,
        volatility=volatility,
        sharpe_like=sharpe_like,
        max_drawdown=max_drawdown,
        best_period=best_period,
        worst_period=worst_period,
    )


def calculate_risk_level(volatility: float) -> RiskLevel:
    """Bucket a volatility figure into a coarse risk level."""
    if volatility < LOW_RISK_VOLATILITY:
        return RiskLevel.LOW
    if volatility < MEDIUM_RISK_VOLATILITY:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def calculate_diversification_score(allocation: dict[str, float]) -> float:
    """Score how evenly holdings are spread, from 0 (concentrated) to 100.

    Uses the Herfindahl-Hirschman index of the allocation percentages,
    normalised between a single holding (HHI 10000) and an even split across
    all holdings (HHI 10000 / n).
    """
    values = list(allocation.values())
    n = len(values)
    if n <= 1:
        return 0.0

    hhi = sum(value ** 2 for value in values)
    max_hhi = 10000.0
    min_hhi = 10000.0 / n
    score = (max_hhi - hhi) / (max_hhi - min_hhi) * 100
    return max(0.0, min(100.0, score))
