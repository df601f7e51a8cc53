"""Tests for ledger CSV import and export service."""

import pytest
from decimal import Decimal

from microinvest.domain.csv_import import CSV_HEADERS, entries_to_csv
from microinvest.domain.entities import LedgerEntry
from microinvest.domain.errors import ValidationError


def test_import_sample_ledger(csv_service, temp_db, fixtures_dir):
    """Test importing a well-formed ledger file."""
    result = csv_service.import_csv(str(fixtures_dir / "sample_ledger.csv"))

    assert result == {"imported": 9, "skipped": 0, "errors": []}
    assert temp_db.list_dates() == ["2024-01-01", "2024-02-01", "2024-03-01"]
    loan = temp_db.get_entry("2024-01-01", "Car Loan")
    assert loan.amount == -200.0
    assert loan.annual_rate == 4.5


def test_import_reports_row_errors(csv_service, temp_db, fixtures_dir):
    """Test that bad rows are reported by line and good rows still import."""
    result = csv_service.import_csv(str(fixtures_dir / "ledger_with_errors.csv"))

    assert result["imported"] == 2
    assert result["errors"] == [
        "Line 3: Missing required fields",
        'Line 4: Invalid amount "abc"',
        'Line 5: Invalid rate "fast"',
        "Line 6: Invalid date format '01/02/2024'. Expected YYYY-MM-DD",
    ]
    assert [e.amount for e in temp_db.list_entries(asset_name="Wealthfront")] == [600.0, 650.0]


def test_import_bad_headers(csv_service, temp_db, fixtures_dir):
    with pytest.raises(ValidationError, match="Invalid headers. Expected: Date, Investment, Amount, Rate"):
        csv_service.import_csv(str(fixtures_dir / "ledger_bad_headers.csv"))

    assert temp_db.list_entries() == []


def test_import_missing_file(csv_service, tmp_path):
    with pytest.raises(FileNotFoundError):
        csv_service.import_csv(str(tmp_path / "nope.csv"))


def test_import_skips_existing_entries(csv_service, fixtures_dir):
    """Test that re-importing the same file skips every row."""
    path = str(fixtures_dir / "sample_ledger.csv")
    csv_service.import_csv(path)

    result = csv_service.import_csv(path)

    assert result["imported"] == 0
    assert result["skipped"] == 9


def test_import_replace_clears_ledger(csv_service, temp_db, fixtures_dir):
    temp_db.add_entry("2023-12-01", "Old", Decimal("5"), Decimal("0"))

    result = csv_service.import_csv(str(fixtures_dir / "sample_ledger.csv"), replace=True)

    assert result["imported"] == 9
    assert temp_db.get_entry("2023-12-01", "Old") is None


def test_parse_csv_defaults(csv_service, tmp_path):
    """Test blank rates default to zero and blank rows are ignored."""
    path = tmp_path / "ledger.csv"
    path.write_text(
        "Date,Investment,Amount,Rate\n"
        "2024-01-01,Cash,\"$1,250.50\",\n"
        ",,,\n"
        "2024-01-01,Loan,(300),3%\n",
        encoding="utf-8",
    )

    rows, errors = csv_service.parse_csv(str(path))

    assert errors == []
    assert rows == [
        ("2024-01-01", "Cash", Decimal("1250.50"), Decimal("0")),
        ("2024-01-01", "Loan", Decimal("-300"), Decimal("3")),
    ]


def test_parse_csv_reordered_columns(csv_service, tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text("Investment, Rate, Date, Amount\nCash,1,2024-01-01,10\n", encoding="utf-8")

    rows, errors = csv_service.parse_csv(str(path))

    assert errors == []
    assert rows == [("2024-01-01", "Cash", Decimal("10"), Decimal("1"))]


def test_export_round_trip(csv_service, populated_ledger, fixtures_dir, tmp_path):
    """Test that an export matches the fixture it mirrors."""
    out = tmp_path / "export.csv"

    content = csv_service.export_csv(str(out))

    assert out.read_text(encoding="utf-8") == content
    lines = content.splitlines()
    assert lines[0] == ",".join(CSV_HEADERS)
    assert len(lines) == 10
    assert "2024-01-01,Car Loan,-200,4.5" in lines
    assert sorted(lines[1:]) == sorted(
        (fixtures_dir / "sample_ledger.csv").read_text(encoding="utf-8").splitlines()[1:]
    )


def test_export_empty_ledger(csv_service):
    assert csv_service.export_csv() == "Date,Investment,Amount,Rate\n"


def test_entries_to_csv_quotes_names():
    content = entries_to_csv([LedgerEntry("2024-01-01", "Stocks, Bonds", 1.25, 0.0)])

    assert content.splitlines()[1] == '2024-01-01,"Stocks, Bonds",1.25,0'
