"""Tests for CSV import and export commands."""

import pytest
from click.testing import CliRunner
from microinvest.cli.main import cli


def test_import_successful(cli_runner, temp_db, fixtures_dir):
    """Test successful CSV import."""
    csv_file = fixtures_dir / "sample_ledger.csv"

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(csv_file)]
    )

    assert result.exit_code == 0
    assert "Import complete" in result.output
    assert "Imported: 9 entries" in result.output
    assert "Skipped: 0 duplicates" in result.output


def test_import_duplicate_detection(cli_runner, temp_db, fixtures_dir):
    """Test that re-importing a file skips entries already in the ledger."""
    csv_file = fixtures_dir / "sample_ledger.csv"
    cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "import", str(csv_file)])

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(csv_file)]
    )

    assert result.exit_code == 0
    assert "Imported: 0 entries" in result.output
    assert "Skipped: 9 duplicates" in result.output


def test_import_replace(cli_runner, temp_db, fixtures_dir, populated_ledger):
    """Test --replace clears the ledger first."""
    csv_file = fixtures_dir / "ledger_with_errors.csv"

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(csv_file), "--replace"]
    )

    assert result.exit_code == 0
    assert "Imported: 2 entries" in result.output
    assert len(temp_db.list_entries()) == 2


def test_import_reports_errors(cli_runner, temp_db, fixtures_dir):
    """Test that row errors are reported without aborting the import."""
    csv_file = fixtures_dir / "ledger_with_errors.csv"

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(csv_file)]
    )

    assert result.exit_code == 0
    assert "Imported: 2 entries" in result.output
    assert "Errors: 4" in result.output
    assert 'Line 4: Invalid amount "abc"' in result.output


def test_import_bad_headers(cli_runner, temp_db, fixtures_dir):
    """Test that a file with the wrong header is rejected."""
    csv_file = fixtures_dir / "ledger_bad_headers.csv"

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(csv_file)]
    )

    assert result.exit_code == 1
    assert "Invalid headers" in result.output


def test_import_missing_file(cli_runner, temp_db, tmp_path):
    """Test importing a file that does not exist."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(tmp_path / "missing.csv")]
    )

    assert result.exit_code != 0


def test_export_to_stdout(cli_runner, temp_db, populated_ledger):
    """Test exporting the ledger to standard output."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "export"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "Date,Investment,Amount,Rate"
    assert "2024-03-01,Crypto,100,20" in lines
    assert len(lines) == 10


def test_export_to_file_then_reimport(cli_runner, temp_db, populated_ledger, tmp_path):
    """Test that an exported file imports cleanly into an empty ledger."""
    out = tmp_path / "ledger.csv"

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "export", "--output", str(out)]
    )
    assert result.exit_code == 0
    assert f"Exported ledger to {out}" in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(out), "--replace"]
    )

    assert result.exit_code == 0
    assert "Imported: 9 entries" in result.output
