"""Shared pytest fixtures for microinvest tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest

from microinvest.database.factories import create_sqlite_database
from microinvest.domain.entities import LedgerEntry
from microinvest.domain.ledger import LedgerService
from microinvest.domain.portfolio import PortfolioService
from microinvest.domain.csv_import import LedgerCSVService
from microinvest.domain.snapshot import build_snapshot


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def portfolio_service(temp_db):
    """Create a PortfolioService with a temporary database."""
    return PortfolioService(temp_db)


@pytest.fixture
def csv_service(temp_db):
    """Create a LedgerCSVService with a temporary database."""
    return LedgerCSVService(temp_db)


@pytest.fixture
def sample_entries():
    """Three monthly snapshots with two assets, a loan and a late asset.

    Net worth goes 800 -> 1000 -> 1300.
    """
    return [
        LedgerEntry("2024-01-01", "Wealthfront", 600.0, 5.0),
        LedgerEntry("2024-01-01", "Roth IRA", 400.0, 7.0),
        LedgerEntry("2024-01-01", "Car Loan", -200.0, 4.5),
        LedgerEntry("2024-02-01", "Wealthfront", 660.0, 5.0),
        LedgerEntry("2024-02-01", "Roth IRA", 440.0, 7.0),
        LedgerEntry("2024-02-01", "Car Loan", -100.0, 4.5),
        LedgerEntry("2024-03-01", "Wealthfront", 700.0, 5.0),
        LedgerEntry("2024-03-01", "Roth IRA", 500.0, 7.0),
        LedgerEntry("2024-03-01", "Crypto", 100.0, 20.0),
    ]


@pytest.fixture
def populated_ledger(ledger_service, sample_entries):
    """Store the sample entries in the temporary database."""
    for entry in sample_entries:
        ledger_service.add_entry(
            date=entry.date,
            asset_name=entry.asset_name,
            amount=Decimal(str(entry.amount)),
            annual_rate=Decimal(str(entry.annual_rate)),
        )
    return ledger_service


@pytest.fixture
def make_snapshot():
    """Build a snapshot from (asset, amount) pairs on a date."""

    def _make(date, *holdings):
        entries = [LedgerEntry(date, name, float(amount), 0.0) for name, amount in holdings]
        return build_snapshot(entries, date)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
