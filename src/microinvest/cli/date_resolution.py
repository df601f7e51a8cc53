"""CLI helpers for ledger date resolution."""

from __future__ import annotations

import click

from microinvest.utils.date_parser import to_ledger_date


def resolve_date_or_exit(ctx: click.Context, value: str, label: str = "date") -> str:
    """Resolve a user-supplied date to YYYY-MM-DD, or exit with a CLI error.

    Accepts anything ``parse_date`` does, including "this month" and
    "last month".
    """
    try:
        return to_ledger_date(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid {label}: {exc}", err=True)
        ctx.exit(1)
