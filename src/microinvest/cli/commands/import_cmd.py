"""Ledger CSV import and export commands."""

import click
from microinvest.domain.csv_import import LedgerCSVService

MAX_REPORTED_ERRORS = 5


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True))
@click.option("--replace", is_flag=True, help="Clear the ledger before importing")
@click.pass_context
def import_csv(ctx, csv_file: str, replace: bool):
    """Import ledger entries from a CSV file (Date,Investment,Amount,Rate)."""
    db = ctx.obj["db"]
    service = LedgerCSVService(db)

    try:
        result = service.import_csv(csv_file_path=csv_file, replace=replace)
        click.echo(f"\nImport complete:")
        click.echo(f"  Imported: {result['imported']} entries")
        click.echo(f"  Skipped: {result['skipped']} duplicates")
        if result["errors"]:
            click.echo(f"  Errors: {len(result['errors'])}")
            for error in result["errors"][:MAX_REPORTED_ERRORS]:
                click.echo(f"    {error}", err=True)
            hidden = len(result["errors"]) - MAX_REPORTED_ERRORS
            if hidden > 0:
                click.echo(f"    ... and {hidden} more", err=True)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.command("export")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write CSV to this file")
@click.pass_context
def export_csv(ctx, output: str | None):
    """Export the ledger as CSV (to stdout unless --output is given)."""
    db = ctx.obj["db"]
    service = LedgerCSVService(db)

    content = service.export_csv(csv_file_path=output)
    if output:
        click.echo(f"Exported ledger to {output}")
    else:
        click.echo(content, nl=False)


def register_commands(cli):
    """Register import and export commands with main CLI."""
    cli.add_command(import_csv)
    cli.add_command(export_csv)
