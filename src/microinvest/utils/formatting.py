"""Currency and percentage rendering for presentation."""

from decimal import Decimal, ROUND_HALF_UP

from microinvest.domain.entities import DisplayMode, SeriesKind, TimeView
from microinvest.utils.precision import to_decimal


def _whole_dollars(amount: float) -> str:
    rounded = abs(to_decimal(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}${rounded:,.0f}"


def format_currency(amount: float, compact: bool = False) -> str:
    """Format an amount as whole US dollars.

    Examples:
        format_currency(1234.5) -> "$1,235"
        format_currency(-50) -> "-$50"
        format_currency(2_500_000, compact=True) -> "2.5M"
        format_currency(12_400, compact=True) -> "12k"
    """
    abs_amount = abs(amount)
    if compact and abs_amount >= 1000:
        if abs_amount >= 1_000_000:
            return f"{amount / 1_000_000:.1f}M"
        return f"{amount / 1000:.0f}k"
    return _whole_dollars(amount)


def format_percentage(percentage: float, decimals: int = 1) -> str:
    """Format a percentage with an explicit sign for non-negative values."""
    sign = "+" if percentage >= 0 else ""
    return f"{sign}{percentage:.{decimals}f}%"


def format_growth(growth: float) -> str:
    """Format a dollar change with an explicit sign for non-negative values."""
    sign = "+" if growth >= 0 else ""
    return f"{sign}{format_currency(growth)}"


def get_series_label(kind: SeriesKind) -> str:
    """Human-readable title for a series kind."""
    labels = {
        SeriesKind.RETURNS: "Performance Analysis",
        SeriesKind.PORTFOLIO_VALUE: "Portfolio Value",
        SeriesKind.ALLOCATION: "Asset Allocation",
    }
    return labels.get(SeriesKind(kind), "Analysis")


def get_series_unit(
    kind: SeriesKind,
    time_view: TimeView,
    display_mode: DisplayMode = DisplayMode.PERCENTAGE,
) -> str:
    """Unit symbol of the values a series produces."""
    kind = SeriesKind(kind)
    if kind == SeriesKind.RETURNS:
        return "$" if DisplayMode(display_mode) == DisplayMode.ABSOLUTE else "%"
    if kind == SeriesKind.PORTFOLIO_VALUE:
        return "$" if TimeView(time_view) == TimeView.CUMULATIVE else "Δ$"
    return "%"


def format_chart_value(
    value: float,
    kind: SeriesKind,
    time_view: TimeView,
    display_mode: DisplayMode = DisplayMode.PERCENTAGE,
) -> str:
    """Format a single chart value according to its series unit.

    Dollar values show a sign and the magnitude ("+$1,200", "-$300").
    Allocation percentages are unsigned; other percentages are signed.
    """
    unit = get_series_unit(kind, time_view, display_mode)
    if "$" in unit:
        sign = "+" if value >= 0 else "-"
        return f"{sign}{_whole_dollars(abs(value))}"
    if SeriesKind(kind) == SeriesKind.ALLOCATION:
        return f"{value:.1f}%"
    return format_percentage(value)
