"""Per-asset performance and projection command."""

import click
from microinvest.domain.growth import calculate_projected_value
from microinvest.domain.ledger import LedgerService
from microinvest.domain.portfolio import PortfolioService
from microinvest.utils.formatting import format_currency, format_percentage


@click.command("assets")
@click.option(
    "--project",
    type=click.IntRange(min=0),
    default=0,
    help="Also project each balance this many months ahead at its average growth",
)
@click.pass_context
def show_assets(ctx, project: int):
    """Show first-to-last performance of every asset in the ledger."""
    db = ctx.obj["db"]
    ledger_service = LedgerService(db)
    portfolio_service = PortfolioService(db)

    asset_names = ledger_service.get_asset_names()
    if not asset_names:
        click.echo("No entries found.")
        return

    width = 86 if project else 70
    header = f"{'Asset':<22} {'Initial':>12} {'Current':>12} {'Growth':>10} {'Monthly':>10}"
    if project:
        header += f" {'In ' + str(project) + 'm':>14}"

    click.echo("\nAsset Performance:")
    click.echo("-" * width)
    click.echo(header)
    click.echo("-" * width)
    for name in asset_names:
        perf = portfolio_service.get_asset_performance(name)
        if perf is None:
            continue
        line = (
            f"{name[:22]:<22} {format_currency(perf.initial_value):>12} "
            f"{format_currency(perf.current_value):>12} "
            f"{format_percentage(perf.growth_pct):>10} "
            f"{format_percentage(perf.monthly_growth_rate, 2):>10}"
        )
        if project:
            projected = calculate_projected_value(
                perf.current_value, perf.monthly_growth_rate, project
            )
            line += f" {format_currency(projected):>14}"
        click.echo(line)


def register_commands(cli):
    """Register assets command with main CLI."""
    cli.add_command(show_assets)
