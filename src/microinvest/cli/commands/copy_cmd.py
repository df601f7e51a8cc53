"""Copy previous snapshot command."""

import click
from microinvest.cli.date_resolution import resolve_date_or_exit
from microinvest.cli.error_handling import handle_domain_error
from microinvest.domain.errors import DomainError
from microinvest.domain.ledger import LedgerService


@click.command("copy")
@click.option(
    "--date",
    required=True,
    help="Target date (YYYY-MM-DD or relative like 'this month')",
)
@click.pass_context
def copy_latest(ctx, date: str):
    """Prefill a date with the balances of the most recent earlier snapshot.

    Assets already recorded on the target date are skipped, so the command
    can be run after entering a few balances by hand.

    Examples:
        microinvest copy --date 2024-04-01
        microinvest copy --date "this month"
    """
    db = ctx.obj["db"]
    service = LedgerService(db)

    target_date = resolve_date_or_exit(ctx, date)

    try:
        result = service.copy_latest_to(target_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Copied {len(result['copied'])} entries from {result['source_date']} to {target_date}"
    )
    if result["skipped"]:
        click.echo(f"  Skipped: {len(result['skipped'])} already recorded")


def register_commands(cli):
    """Register copy command with main CLI."""
    cli.add_command(copy_latest)
