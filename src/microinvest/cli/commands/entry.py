"""Ledger entry management commands."""

import click
from microinvest.cli.date_resolution import resolve_date_or_exit
from microinvest.cli.error_handling import handle_domain_error
from microinvest.domain.errors import DomainError
from microinvest.domain.ledger import LedgerService
from microinvest.utils.amount_parser import parse_amount, parse_rate
from microinvest.utils.formatting import format_currency


@click.group()
def entry_group():
    """Manage ledger entries."""
    pass


@entry_group.command("list")
@click.option("--date", help="Only show entries recorded on this date")
@click.option("--asset", help="Only show entries for this asset")
@click.pass_context
def list_entries(ctx, date: str | None, asset: str | None):
    """List ledger entries ordered by date."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    entry_date = resolve_date_or_exit(ctx, date) if date else None
    entries = service.list_entries(date=entry_date, asset_name=asset)
    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 70)
    click.echo(f"{'Date':<12} {'Asset':<30} {'Amount':>14} {'Rate':>10}")
    click.echo("-" * 70)
    for e in entries:
        rate_str = f"{e.annual_rate:g}%"
        click.echo(
            f"{e.date:<12} {e.asset_name[:30]:<30} {format_currency(e.amount):>14} {rate_str:>10}"
        )


@entry_group.command("update")
@click.argument("date", metavar="DATE")
@click.argument("asset", metavar="ASSET")
@click.option("--amount", help="New balance")
@click.option("--rate", help="New expected annual rate in percent")
@click.option("--new-date", help="Move the entry to another date")
@click.option("--name", "new_name", help="Rename the asset on this entry")
@click.pass_context
def update_entry(
    ctx,
    date: str,
    asset: str,
    amount: str | None,
    rate: str | None,
    new_date: str | None,
    new_name: str | None,
):
    """Update the entry for ASSET on DATE.

    Examples:
        microinvest entry update 2024-01-01 "Roth IRA" --amount 12500
        microinvest entry update 2024-01-01 "IRA" --name "Traditional IRA"
    """
    db = ctx.obj["db"]
    service = LedgerService(db)

    if amount is None and rate is None and new_date is None and new_name is None:
        click.echo("Error: Nothing to update. Use --amount, --rate, --new-date or --name.", err=True)
        ctx.exit(1)

    entry_date = resolve_date_or_exit(ctx, date)
    target_date = resolve_date_or_exit(ctx, new_date, "new date") if new_date else None

    try:
        new_amount = parse_amount(amount) if amount is not None else None
        new_rate = parse_rate(rate) if rate is not None else None
        updated = service.update_entry(
            entry_date,
            asset,
            amount=new_amount,
            annual_rate=new_rate,
            new_date=target_date,
            new_asset_name=new_name,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated '{updated.asset_name}' on {updated.date}")
    click.echo(f"  Amount: {format_currency(updated.amount)}")
    click.echo(f"  Rate: {updated.annual_rate:g}%")


@entry_group.command("delete")
@click.argument("date", metavar="DATE")
@click.argument("asset", metavar="ASSET")
@click.pass_context
def delete_entry(ctx, date: str, asset: str):
    """Delete the entry for ASSET on DATE."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    entry_date = resolve_date_or_exit(ctx, date)
    try:
        service.delete_entry(entry_date, asset)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted '{asset}' on {entry_date}")


@entry_group.command("clear")
@click.confirmation_option(prompt="Delete every ledger entry?")
@click.pass_context
def clear_entries(ctx):
    """Delete the whole ledger."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    removed = service.clear()
    click.echo(f"Deleted {removed} entr{'y' if removed == 1 else 'ies'}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
