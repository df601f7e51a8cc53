"""Tests for growth projections and per-asset performance."""

import math

import pytest

from microinvest.domain.growth import (
    calculate_asset_performance,
    calculate_break_even_month,
    calculate_compound_growth,
    calculate_projected_value,
)


def test_compound_growth():
    assert calculate_compound_growth(1000, 5, 2) == 1102.5


def test_compound_growth_zero_periods():
    assert calculate_compound_growth(1000, 5, 0) == 1000.0


def test_projected_value_monthly():
    assert calculate_projected_value(100, 1, 12) == pytest.approx(112.68250301319697)


def test_projected_value_negative_rate():
    assert calculate_projected_value(1000, -10, 1) == 900.0


class TestBreakEvenMonth:
    """Tests for debt payoff month count."""

    def test_no_interest(self):
        assert calculate_break_even_month(1000, 100, 0) == 10

    def test_with_interest(self):
        assert calculate_break_even_month(1000, 100, 1) == 11

    def test_negative_debt_amount_uses_balance(self):
        assert calculate_break_even_month(-1000, 100, 0) == 10

    def test_non_positive_payment(self):
        assert calculate_break_even_month(1000, 0, 1) is None
        assert calculate_break_even_month(1000, -5, 1) is None

    def test_rate_not_below_payment(self):
        assert calculate_break_even_month(1000, 5, 5) is None

    def test_never_cleared_within_limit(self):
        # Interest equals the payment, so the balance never shrinks
        assert calculate_break_even_month(1000, 10, 1) is None


class TestAssetPerformance:
    """Tests for calculate_asset_performance."""

    def test_growing_asset(self, sample_entries):
        perf = calculate_asset_performance(sample_entries, "Wealthfront")

        assert perf.asset_name == "Wealthfront"
        assert perf.initial_value == 600
        assert perf.current_value == 700
        assert perf.total_growth == 100
        assert perf.growth_pct == pytest.approx(100 / 6)
        assert perf.monthly_growth_rate == pytest.approx((math.sqrt(700 / 600) - 1) * 100)

    def test_single_entry_asset(self, sample_entries):
        perf = calculate_asset_performance(sample_entries, "Crypto")

        assert perf.total_growth == 0
        assert perf.growth_pct == 0.0
        assert perf.monthly_growth_rate == 0.0

    def test_liability(self, sample_entries):
        perf = calculate_asset_performance(sample_entries, "Car Loan")

        assert perf.initial_value == -200
        assert perf.current_value == -100
        assert perf.total_growth == 100
        assert perf.growth_pct == pytest.approx(50.0)
        assert perf.monthly_growth_rate == 0.0

    def test_unknown_asset(self, sample_entries):
        assert calculate_asset_performance(sample_entries, "Nope") is None

    def test_unsorted_entries(self, sample_entries):
        perf = calculate_asset_performance(list(reversed(sample_entries)), "Roth IRA")

        assert perf.initial_value == 400
        assert perf.current_value == 500
