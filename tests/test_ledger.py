"""Tests for ledger service."""

import pytest
from decimal import Decimal

from microinvest.domain.entities import LedgerEntry
from microinvest.domain.errors import ConflictError, NotFoundError, ValidationError


def test_add_entry(ledger_service):
    """Test recording a balance."""
    entry = ledger_service.add_entry(
        date="2024-01-01",
        asset_name="Wealthfront",
        amount=Decimal("600.00"),
        annual_rate=Decimal("5"),
    )

    assert entry == LedgerEntry("2024-01-01", "Wealthfront", 600.0, 5.0)


def test_add_entry_default_rate(ledger_service):
    """Test that the annual rate defaults to zero."""
    entry = ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"))

    assert entry.annual_rate == 0.0


def test_add_entry_strips_whitespace(ledger_service):
    entry = ledger_service.add_entry(" 2024-01-01 ", "  Cash ", Decimal("50"))

    assert entry.date == "2024-01-01"
    assert entry.asset_name == "Cash"


def test_add_liability(ledger_service):
    """Test recording a negative balance."""
    entry = ledger_service.add_entry("2024-01-01", "Car Loan", Decimal("-200"), Decimal("4.5"))

    assert entry.is_liability


def test_add_duplicate_entry(ledger_service):
    """Test that an asset can only have one balance per date."""
    ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"))

    with pytest.raises(ConflictError, match="already exists"):
        ledger_service.add_entry("2024-01-01", "Cash", Decimal("60"))


@pytest.mark.parametrize(
    "bad_date", ["01/02/2024", "2024-1-1", "", "yesterday", "2024-02-30", "2023-02-29", "2024-13-01"]
)
def test_add_entry_invalid_date(ledger_service, bad_date):
    with pytest.raises(ValidationError, match="Invalid date format"):
        ledger_service.add_entry(bad_date, "Cash", Decimal("50"))


def test_add_entry_empty_name(ledger_service):
    with pytest.raises(ValidationError, match="cannot be empty"):
        ledger_service.add_entry("2024-01-01", "   ", Decimal("50"))


def test_update_entry(ledger_service):
    """Test updating amount and rate."""
    ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"), Decimal("1"))

    updated = ledger_service.update_entry(
        "2024-01-01", "Cash", amount=Decimal("75"), annual_rate=Decimal("2")
    )

    assert updated.amount == 75.0
    assert updated.annual_rate == 2.0


def test_update_entry_rename(ledger_service):
    """Test moving an entry to another date and name."""
    ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"))

    updated = ledger_service.update_entry(
        "2024-01-01", "Cash", new_date="2024-02-01", new_asset_name="Savings"
    )

    assert (updated.date, updated.asset_name, updated.amount) == ("2024-02-01", "Savings", 50.0)
    assert ledger_service.get_entry("2024-01-01", "Cash") is None


def test_update_missing_entry(ledger_service):
    with pytest.raises(NotFoundError, match="No entry for 'Cash'"):
        ledger_service.update_entry("2024-01-01", "Cash", amount=Decimal("1"))


def test_update_entry_invalid_new_date(ledger_service):
    ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"))

    with pytest.raises(ValidationError):
        ledger_service.update_entry("2024-01-01", "Cash", new_date="Feb 2024")


def test_update_entry_onto_existing(ledger_service):
    ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"))
    ledger_service.add_entry("2024-01-01", "Savings", Decimal("10"))

    with pytest.raises(ConflictError):
        ledger_service.update_entry("2024-01-01", "Cash", new_asset_name="Savings")


def test_delete_entry(ledger_service):
    ledger_service.add_entry("2024-01-01", "Cash", Decimal("50"))

    ledger_service.delete_entry("2024-01-01", "Cash")

    assert ledger_service.list_entries() == []


def test_delete_missing_entry(ledger_service):
    with pytest.raises(NotFoundError):
        ledger_service.delete_entry("2024-01-01", "Cash")


def test_clear(populated_ledger, sample_entries):
    assert populated_ledger.clear() == len(sample_entries)
    assert populated_ledger.list_entries() == []


def test_list_entries(populated_ledger):
    """Test listing with and without filters."""
    assert len(populated_ledger.list_entries()) == 9
    assert len(populated_ledger.list_entries(date="2024-03-01")) == 3
    assert [e.amount for e in populated_ledger.list_entries(asset_name="Wealthfront")] == [
        600.0,
        660.0,
        700.0,
    ]


def test_available_dates_newest_first(populated_ledger):
    assert populated_ledger.get_available_dates() == ["2024-03-01", "2024-02-01", "2024-01-01"]


def test_asset_names(populated_ledger):
    assert populated_ledger.get_asset_names() == ["Car Loan", "Crypto", "Roth IRA", "Wealthfront"]


def test_empty_ledger(ledger_service):
    assert ledger_service.get_available_dates() == []
    assert ledger_service.get_asset_names() == []


class TestCopyLatest:
    """Tests for prefilling a date from the previous snapshot."""

    def test_copies_most_recent_earlier_snapshot(self, populated_ledger):
        result = populated_ledger.copy_latest_to("2024-04-01")

        assert result["source_date"] == "2024-03-01"
        assert result["skipped"] == []
        assert result["copied"] == [
            LedgerEntry("2024-04-01", "Crypto", 100.0, 20.0),
            LedgerEntry("2024-04-01", "Roth IRA", 500.0, 7.0),
            LedgerEntry("2024-04-01", "Wealthfront", 700.0, 5.0),
        ]
        assert populated_ledger.get_available_dates()[0] == "2024-04-01"

    def test_source_is_before_target_not_latest(self, populated_ledger):
        result = populated_ledger.copy_latest_to("2024-02-15")

        assert result["source_date"] == "2024-02-01"
        assert populated_ledger.get_entry("2024-02-15", "Car Loan").amount == -100.0
        assert populated_ledger.get_entry("2024-02-15", "Crypto") is None

    def test_skips_assets_already_recorded(self, populated_ledger):
        populated_ledger.add_entry("2024-04-01", "Roth IRA", Decimal("525"), Decimal("7"))

        result = populated_ledger.copy_latest_to("2024-04-01")

        assert result["skipped"] == ["Roth IRA"]
        assert [e.asset_name for e in result["copied"]] == ["Crypto", "Wealthfront"]
        assert populated_ledger.get_entry("2024-04-01", "Roth IRA").amount == 525.0

    def test_rerun_copies_nothing(self, populated_ledger):
        populated_ledger.copy_latest_to("2024-04-01")

        result = populated_ledger.copy_latest_to("2024-04-01")

        assert result["source_date"] == "2024-03-01"
        assert result["copied"] == []
        assert len(result["skipped"]) == 3

    def test_no_earlier_snapshot(self, populated_ledger):
        with pytest.raises(NotFoundError, match="No snapshot recorded before 2024-01-01"):
            populated_ledger.copy_latest_to("2024-01-01")

    def test_empty_ledger(self, ledger_service):
        with pytest.raises(NotFoundError):
            ledger_service.copy_latest_to("2024-01-01")

    @pytest.mark.parametrize("bad_date", ["2024-02-30", "April 2024"])
    def test_invalid_date(self, populated_ledger, bad_date):
        with pytest.raises(ValidationError, match="Invalid date format"):
            populated_ledger.copy_latest_to(bad_date)
