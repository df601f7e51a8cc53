"""Utility functions for microinvest."""

from microinvest.utils.date_parser import parse_date, to_ledger_date
from microinvest.utils.amount_parser import parse_amount, parse_rate

__all__ = ["parse_date", "to_ledger_date", "parse_amount", "parse_rate"]
