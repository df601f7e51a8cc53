"""Ledger CSV import and export."""

import csv
import io
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from microinvest.database.base import Database
from microinvest.domain.entities import LedgerEntry
from microinvest.domain.errors import ValidationError, invalid_entry_date
from microinvest.utils.amount_parser import parse_amount, parse_rate
from microinvest.utils.date_parser import is_iso_date

logger = logging.getLogger(__name__)

CSV_HEADERS = ("Date", "Investment", "Amount", "Rate")


class LedgerCSVService:
    """Service for moving the ledger in and out of CSV files.

    Files use the header ``Date,Investment,Amount,Rate`` with ISO dates,
    plain numeric amounts (negative for liabilities) and rates in percent.
    """

    def __init__(self, db: Database):
        """Initialize ledger CSV service.

        Args:
            db: Database instance
        """
        self.db = db

    def parse_csv(
        self, csv_file_path: str
    ) -> tuple[list[tuple[str, str, Decimal, Decimal]], list[str]]:
        """Parse a ledger CSV file without touching the database.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            Tuple of (rows, errors). Each row is (date, asset_name, amount,
            rate); each error names the offending file line.

        Raises:
            FileNotFoundError: If CSV file doesn't exist
            ValidationError: If the header is missing required columns
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        rows: list[tuple[str, str, Decimal, Decimal]] = []
        errors: list[str] = []

        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)

            columns = [c.strip() for c in (reader.fieldnames or [])]
            missing = [h for h in CSV_HEADERS if h not in columns]
            if missing:
                raise ValidationError(
                    f"Invalid headers. Expected: {', '.join(CSV_HEADERS)}. "
                    f"Got: {', '.join(columns)}"
                )
            reader.fieldnames = columns

            for line_num, row in enumerate(reader, start=2):  # Header is line 1
                values = {h: (row.get(h) or "").strip() for h in CSV_HEADERS}
                if not any(values.values()):
                    continue

                if not values["Date"] or not values["Investment"] or not values["Amount"]:
                    errors.append(f"Line {line_num}: Missing required fields")
                    continue

                try:
                    amount = parse_amount(values["Amount"])
                except ValueError:
                    errors.append(f"Line {line_num}: Invalid amount \"{values['Amount']}\"")
                    continue

                try:
                    rate = parse_rate(values["Rate"]) if values["Rate"] else Decimal("0")
                except ValueError:
                    errors.append(f"Line {line_num}: Invalid rate \"{values['Rate']}\"")
                    continue

                if not is_iso_date(values["Date"]):
                    errors.append(f"Line {line_num}: {invalid_entry_date(values['Date'])}")
                    continue

                rows.append((values["Date"], values["Investment"], amount, rate))

        return rows, errors

    def import_csv(self, csv_file_path: str, replace: bool = False) -> dict[str, Any]:
        """Import ledger entries from a CSV file.

        Args:
            csv_file_path: Path to CSV file
            replace: If True, clear the ledger before importing

        Returns:
            Dict with import statistics:
            - imported: number of entries imported
            - skipped: number of entries skipped (already in the ledger)
            - errors: list of error messages

        Raises:
            FileNotFoundError: If CSV file doesn't exist
            ValidationError: If the header is missing required columns
        """
        rows, errors = self.parse_csv(csv_file_path)

        if replace:
            removed = self.db.clear_entries()
            logger.info("Cleared %d entries before import", removed)

        imported = 0
        skipped = 0
        for entry_date, asset_name, amount, rate in rows:
            if self.db.entry_exists(entry_date, asset_name):
                skipped += 1
                continue
            self.db.add_entry(
                date=entry_date, asset_name=asset_name, amount=amount, annual_rate=rate
            )
            imported += 1

        logger.info(
            "Imported %d entries from %s (%d skipped, %d errors)",
            imported, csv_file_path, skipped, len(errors),
        )
        return {
            "imported": imported,
            "skipped": skipped,
            "errors": errors,
        }

    def export_csv(self, csv_file_path: Optional[str] = None) -> str:
        """Export the ledger as CSV text.

        Args:
            csv_file_path: Optional path to also write the CSV to

        Returns:
            CSV text including the header row
        """
        content = entries_to_csv(self.db.list_entries())
        if csv_file_path is not None:
            Path(csv_file_path).write_text(content, encoding="utf-8")
            logger.info("Exported ledger to %s", csv_file_path)
        return content


def _format_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def entries_to_csv(entries: list[LedgerEntry]) -> str:
    """Render entries as ledger CSV text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for entry in entries:
        writer.writerow(
            [
                entry.date,
                entry.asset_name,
                _format_number(entry.amount),
                _format_number(entry.annual_rate),
            ]
        )
    return buffer.getvalue()
