"""Add ledger entry command."""

import click
from microinvest.cli.date_resolution import resolve_date_or_exit
from microinvest.cli.error_handling import handle_domain_error
from microinvest.domain.errors import DomainError
from microinvest.domain.ledger import LedgerService
from microinvest.utils.amount_parser import parse_amount, parse_rate
from microinvest.utils.formatting import format_currency


@click.command("add")
@click.option(
    "--date",
    required=True,
    help="Snapshot date (YYYY-MM-DD or relative like 'this month', 'last month')",
)
@click.option("--asset", required=True, help="Asset or liability name (e.g., 'Roth IRA')")
@click.option(
    "--amount",
    required=True,
    help="Balance (e.g., 1500.00; negative or (250.00) for a liability)",
)
@click.option("--rate", default="0", show_default=True, help="Expected annual growth rate in percent")
@click.pass_context
def add_entry(ctx, date: str, asset: str, amount: str, rate: str):
    """Record the balance of an asset on a date.

    Examples:
        microinvest add --date 2024-01-01 --asset "Roth IRA" --amount 12000 --rate 7
        microinvest add --date "this month" --asset "Car Loan" --amount -8500 --rate 4.5
    """
    db = ctx.obj["db"]
    service = LedgerService(db)

    entry_date = resolve_date_or_exit(ctx, date)

    try:
        entry_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        entry_rate = parse_rate(rate)
    except ValueError as e:
        click.echo(f"Error: Invalid rate format: {e}", err=True)
        ctx.exit(1)

    try:
        entry = service.add_entry(
            date=entry_date,
            asset_name=asset,
            amount=entry_amount,
            annual_rate=entry_rate,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    kind = "liability" if entry.is_liability else "asset"
    click.echo(f"Recorded {kind} '{entry.asset_name}' on {entry.date}")
    click.echo(f"  Amount: {format_currency(entry.amount)}")
    click.echo(f"  Rate: {entry.annual_rate:g}%")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
