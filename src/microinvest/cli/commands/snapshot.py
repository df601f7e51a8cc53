"""Snapshot viewing command."""

import click
from microinvest.cli.date_resolution import resolve_date_or_exit
from microinvest.domain.errors import snapshot_not_found
from microinvest.domain.portfolio import PortfolioService
from microinvest.utils.formatting import (
    format_currency,
    format_growth,
    format_percentage,
)


@click.command("snapshot")
@click.option("--date", help="Snapshot date (defaults to the most recent one)")
@click.pass_context
def show_snapshot(ctx, date: str | None):
    """Show the balances, totals and insight for one snapshot date."""
    db = ctx.obj["db"]
    service = PortfolioService(db)

    if date:
        snapshot_date = resolve_date_or_exit(ctx, date)
        snapshot = service.get_snapshot_for_date(snapshot_date)
        if snapshot is None:
            click.echo(f"Error: {snapshot_not_found(snapshot_date)}", err=True)
            ctx.exit(1)
    else:
        snapshot = service.get_latest_snapshot()
        if snapshot is None:
            click.echo("No entries found.")
            return

    insight = service.get_insight_for_date(snapshot.date)

    click.echo(f"\nSnapshot {snapshot.date}:")
    click.echo("-" * 84)
    click.echo(
        f"{'Asset':<24} {'Amount':>12} {'Change':>12} {'Rate':>8} {'Actual':>10} {'Share':>12}"
    )
    click.echo("-" * 84)
    for row in sorted(insight.entry_changes, key=lambda r: -r.entry.amount):
        e = row.entry
        share = insight.allocation.get(e.asset_name)
        share_str = f"{share:.1f}%" if share is not None else "-"
        rate_str = f"{e.annual_rate:g}%"
        actual_str = (
            format_percentage(row.actual_return) if row.actual_return is not None else "-"
        )
        click.echo(
            f"{e.asset_name[:24]:<24} {format_currency(e.amount):>12} "
            f"{format_growth(row.change):>12} {rate_str:>8} {actual_str:>10} {share_str:>12}"
        )
    click.echo("-" * 84)
    click.echo(f"{'Total Assets':<30} {format_currency(snapshot.total_assets):>14}")
    click.echo(f"{'Total Liabilities':<30} {format_currency(snapshot.total_liabilities):>14}")
    click.echo(f"{'Net Worth':<30} {format_currency(snapshot.net_worth):>14}")
    click.echo(f"{'Change from Previous':<30} {format_percentage(insight.period_change_pct):>14}")
    click.echo(f"{'Change from Previous ($)':<30} {format_growth(insight.period_change):>14}")

    if insight.has_highlights:
        click.echo("\nHighlights:")
        top = insight.top_performer
        under = insight.underperformer
        click.echo(f"  Top performer:  {top.name} ({format_percentage(top.growth)})")
        click.echo(f"  Underperformer: {under.name} ({format_percentage(under.growth)})")


def register_commands(cli):
    """Register snapshot command with main CLI."""
    cli.add_command(show_snapshot)
