"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested ledger entry or snapshot does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate ledger entry."""


def entry_not_found(entry_date: str, asset_name: str) -> str:
    """Return message for a missing ledger entry."""
    return f"No entry for '{asset_name}' on {entry_date}"


def duplicate_entry(entry_date: str, asset_name: str) -> str:
    """Return message for a duplicate (date, asset) ledger entry."""
    return f"An entry for '{asset_name}' on {entry_date} already exists"


def snapshot_not_found(snapshot_date: str) -> str:
    """Return message for a date with no ledger entries."""
    return f"No snapshot recorded for {snapshot_date}"


def invalid_entry_date(value: str) -> str:
    """Return message for a ledger date that is not YYYY-MM-DD."""
    return f"Invalid date format '{value}'. Expected YYYY-MM-DD"


def no_earlier_snapshot(snapshot_date: str) -> str:
    """Return message for a copy target with nothing recorded before it."""
    return f"No snapshot recorded before {snapshot_date} to copy from"
