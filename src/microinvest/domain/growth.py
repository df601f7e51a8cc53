"""Growth projections and per-asset performance."""

from typing import Iterable, Optional

from microinvest.domain.entities import AssetPerformance, LedgerEntry
from microinvest.domain.metrics import calculate_compound_rate
from microinvest.utils import precision
from microinvest.utils.precision import Numeric, to_decimal

BREAK_EVEN_MONTH_LIMIT = 1000


def calculate_compound_growth(principal: Numeric, rate: Numeric, periods: int) -> float:
    """Value of ``principal`` after compounding ``rate`` percent ``periods`` times."""
    growth = precision.power(precision.add(1, precision.divide(rate, 100)), periods)
    return precision.multiply(principal, growth)


def calculate_projected_value(
    current_value: Numeric, monthly_growth_rate: Numeric, months: int
) -> float:
    """Project a balance forward by ``months`` at a monthly percentage rate."""
    return calculate_compound_growth(current_value, monthly_growth_rate, months)


def calculate_break_even_month(
    debt_amount: Numeric, monthly_payment: Numeric, monthly_growth_rate: Numeric
) -> Optional[int]:
    """Number of monthly payments needed to clear a debt accruing interest.

    Each month the remaining debt grows by ``monthly_growth_rate`` percent and
    is then reduced by ``monthly_payment``.

    Returns:
        Month count, or None when the payment is not positive, the rate is at
        least the payment, or the debt is not cleared within the month limit
    """
    payment = to_decimal(monthly_payment)
    if payment <= 0 or to_decimal(monthly_growth_rate) >= payment:
        return None

    remaining = abs(to_decimal(debt_amount))
    rate = precision.divide(monthly_growth_rate, 100)

    months = 0
    while remaining > 0 and months < BREAK_EVEN_MONTH_LIMIT:
        interest = precision.multiply(remaining, rate)
        remaining = to_decimal(precision.subtract(precision.add(remaining, interest), payment))
        months += 1

    return months if months < BREAK_EVEN_MONTH_LIMIT else None


def calculate_asset_performance(
    entries: Iterable[LedgerEntry], asset_name: str
) -> Optional[AssetPerformance]:
    """First-to-last performance of one asset across the whole ledger.

    Returns None when the asset has no entries.
    """
    asset_entries = sorted(
        (entry for entry in entries if entry.asset_name == asset_name),
        key=lambda entry: entry.date,
    )
    if not asset_entries:
        return None

    initial_value = asset_entries[0].amount
    current_value = asset_entries[-1].amount
    growth_pct = precision.percent_change(current_value, initial_value)

    return AssetPerformance(
        asset_name=asset_name,
        initial_value=initial_value,
        current_value=current_value,
        total_growth=precision.subtract(current_value, initial_value),
        growth_pct=growth_pct if growth_pct is not None else 0.0,
        monthly_growth_rate=calculate_compound_rate(
            abs(initial_value), current_value, len(asset_entries) - 1
        ),
    )
