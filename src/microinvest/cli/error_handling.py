"""CLI error reporting for ledger and analytics commands."""

import logging

import click

from microinvest.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1.

    The failing command and error type are logged at debug level, so they
    show up under ``--verbose``.
    """
    logger.debug("%s failed with %s", ctx.command_path, type(error).__name__)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
