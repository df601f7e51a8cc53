"""Time-series command."""

import click
from microinvest.domain.entities import DisplayMode, SeriesKind, TimeView
from microinvest.domain.portfolio import PortfolioService
from microinvest.domain.series import collect_asset_names
from microinvest.utils.formatting import format_chart_value, get_series_label


@click.command("series")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in SeriesKind]),
    default=SeriesKind.RETURNS.value,
    show_default=True,
    help="What to chart",
)
@click.option(
    "--view",
    type=click.Choice([v.value for v in TimeView]),
    default=TimeView.CUMULATIVE.value,
    show_default=True,
    help="Accumulate from the first snapshot or show each period",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in DisplayMode]),
    default=DisplayMode.PERCENTAGE.value,
    show_default=True,
    help="Show returns as percentages or dollar amounts",
)
@click.option("--by-asset", is_flag=True, help="Add a column per asset")
@click.pass_context
def show_series(ctx, kind: str, view: str, mode: str, by_asset: bool):
    """Show a time series of the portfolio.

    Examples:
        microinvest series --kind returns --view period
        microinvest series --kind portfolio --by-asset
        microinvest series --kind allocation
    """
    db = ctx.obj["db"]
    service = PortfolioService(db)

    series_kind = SeriesKind(kind)
    time_view = TimeView(view)
    display_mode = DisplayMode(mode)

    points = service.get_series(series_kind, time_view, display_mode)
    if not points:
        click.echo("No entries found.")
        return

    asset_names = collect_asset_names(points) if by_asset else []
    show_total = series_kind != SeriesKind.ALLOCATION or not by_asset

    def fmt(value: float) -> str:
        return format_chart_value(value, series_kind, time_view, display_mode)

    header = f"{'Date':<10}"
    if show_total:
        header += f" {'Total':>14}"
    for name in asset_names:
        header += f" {name[:14]:>14}"

    click.echo(f"\n{get_series_label(series_kind)} ({time_view.value}):")
    click.echo("-" * len(header))
    click.echo(header)
    click.echo("-" * len(header))
    for point in points:
        line = f"{point.date:<10}"
        if show_total:
            line += f" {fmt(point.total):>14}"
        for name in asset_names:
            value = point.per_asset.get(name)
            line += f" {(fmt(value) if value is not None else '-'):>14}"
        click.echo(line)


def register_commands(cli):
    """Register series command with main CLI."""
    cli.add_command(show_series)
