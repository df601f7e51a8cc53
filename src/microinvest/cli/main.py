"""Main CLI entry point."""

import logging

import click
from microinvest.database.factories import DB_PATH_ENV_VAR, create_sqlite_database

# Import and register all commands at module level
from microinvest.cli.commands import (
    add,
    copy_cmd,
    entry,
    import_cmd,
    overview,
    snapshot,
    series,
    assets,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """microinvest - Personal investment ledger.

    Record monthly balances of your assets and liabilities, then review net
    worth, performance, allocation and time-series views of the ledger.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
copy_cmd.register_commands(cli)
entry.register_commands(cli)
import_cmd.register_commands(cli)
overview.register_commands(cli)
snapshot.register_commands(cli)
series.register_commands(cli)
assets.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
