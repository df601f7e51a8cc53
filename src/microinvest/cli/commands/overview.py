"""Portfolio overview command."""

import click
from microinvest.domain.insight import calculate_allocation
from microinvest.domain.metrics import (
    calculate_diversification_score,
    calculate_risk_level,
)
from microinvest.domain.portfolio import PortfolioService
from microinvest.utils.formatting import (
    format_currency,
    format_growth,
    format_percentage,
)


@click.command("overview")
@click.pass_context
def overview(ctx):
    """Show net worth and whole-history performance."""
    db = ctx.obj["db"]
    service = PortfolioService(db)

    snapshots = service.get_snapshots()
    if not snapshots:
        click.echo("No entries found. Record balances with 'microinvest add'.")
        return

    latest = snapshots[-1]
    metrics = service.get_metrics()
    allocation = calculate_allocation(latest)

    click.echo(f"\nPortfolio Overview (as of {latest.date}):")
    click.echo("-" * 60)
    click.echo(f"{'Net Worth':<40} {format_currency(latest.net_worth):>19}")
    click.echo(f"{'Total Assets':<40} {format_currency(latest.total_assets):>19}")
    click.echo(f"{'Total Liabilities':<40} {format_currency(latest.total_liabilities):>19}")
    click.echo("-" * 60)

    if len(snapshots) < 2:
        click.echo("Record at least two snapshots to see performance metrics.")
        return

    click.echo(f"{'Total Return':<40} {format_growth(metrics.total_return):>19}")
    click.echo(f"{'Total Return %':<40} {format_percentage(metrics.total_return_pct):>19}")
    click.echo(
        f"{'Avg Monthly Growth':<40} {format_percentage(metrics.monthly_growth_rate, 2):>19}"
    )
    click.echo(f"{'Volatility':<40} {metrics.volatility:>18.2f}%")
    click.echo(f"{'Return/Volatility (zero risk-free)':<40} {metrics.sharpe_like:>19.2f}")
    click.echo(f"{'Max Drawdown':<40} {metrics.max_drawdown:>18.2f}%")
    click.echo(
        f"{'Best Period':<40} {metrics.best_period.date:>10} "
        f"{format_percentage(metrics.best_period.return_pct):>8}"
    )
    click.echo(
        f"{'Worst Period':<40} {metrics.worst_period.date:>10} "
        f"{format_percentage(metrics.worst_period.return_pct):>8}"
    )
    click.echo("-" * 60)
    click.echo(f"{'Risk Level':<40} {calculate_risk_level(metrics.volatility).value:>19}")
    click.echo(
        f"{'Diversification Score':<40} "
        f"{calculate_diversification_score(allocation):>18.0f}%"
    )

    click.echo("\nNet Worth History:")
    click.echo("-" * 60)
    click.echo(f"{'Date':<12} {'Net Worth':>22} {'Total Assets':>24}")
    click.echo("-" * 60)
    for point in service.get_portfolio_evolution():
        click.echo(
            f"{point['date']:<12} {format_currency(point['net_worth']):>22} "
            f"{format_currency(point['total_assets']):>24}"
        )


def register_commands(cli):
    """Register overview command with main CLI."""
    cli.add_command(overview)
