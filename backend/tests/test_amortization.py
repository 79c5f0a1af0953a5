"""Tests for the loan math: periodic rates, PMT, schedules, lump sums."""
import math
from datetime import date

import pytest

from calc_engine.finance.amortization import (
    add_months,
    amortization_schedule,
    annual_summary,
    calculate_monthly_payment,
    calculate_payment,
    extra_payment_schedule,
    future_value,
    periods_per_year,
    present_value,
    rate_per_payment,
    remaining_balance,
)
from calc_engine.models.common import CompoundingFrequency, PaymentFrequency


# --- Periodic rate tests ---


def test_rate_per_payment_matching_frequencies():
    rate = rate_per_payment(0.06, CompoundingFrequency.monthly, 12)
    assert math.isclose(rate, 0.005, rel_tol=1e-12)


def test_rate_per_payment_biweekly_payments_monthly_compounding():
    rate = rate_per_payment(0.06, CompoundingFrequency.monthly, 26)
    assert math.isclose(rate, 1.005 ** (12 / 26) - 1, rel_tol=1e-12)


def test_rate_per_payment_continuous():
    rate = rate_per_payment(0.06, CompoundingFrequency.continuously, 12)
    assert math.isclose(rate, math.exp(0.005) - 1, rel_tol=1e-12)


def test_interest_only_counts_as_monthly():
    assert periods_per_year(PaymentFrequency.interest_only) == 12
    assert periods_per_year(PaymentFrequency.biweekly) == 26


# --- PMT formula tests ---


def test_pmt_known_value():
    # $100k at 6% for 120 months ≈ $1,110.21
    pmt = calculate_monthly_payment(100_000, 0.06, 120)
    assert abs(pmt - 1110.21) < 0.01


def test_pmt_known_value_30_year():
    pmt = calculate_monthly_payment(200_000, 0.06, 360)
    assert abs(pmt - 1199.10) < 0.01


def test_pmt_zero_rate():
    assert calculate_payment(120_000, 0.0, 120) == 1000.0


def test_pmt_zero_balance_or_term():
    assert calculate_payment(0, 0.005, 360) == 0.0
    assert calculate_payment(100_000, 0.005, 0) == 0.0


# --- Schedule tests ---


def test_schedule_length_and_first_period():
    payment = calculate_payment(100_000, 0.005, 120)
    schedule = amortization_schedule(100_000, payment, 0.005, 120)
    assert len(schedule) == 120
    assert schedule[0].period == 1
    assert math.isclose(schedule[0].interest, 500.0)


def test_schedule_ends_at_zero():
    payment = calculate_payment(250_000, 0.065 / 12, 360)
    schedule = amortization_schedule(250_000, payment, 0.065 / 12, 360)
    assert schedule[-1].balance == 0.0
    assert math.isclose(schedule[-1].payment, payment, rel_tol=1e-6)


def test_schedule_principal_sums_to_loan():
    payment = calculate_payment(75_000, 0.004, 84)
    schedule = amortization_schedule(75_000, payment, 0.004, 84)
    assert sum(e.principal for e in schedule) == pytest.approx(75_000, abs=1e-6)


def test_schedule_balance_never_increases():
    payment = calculate_payment(50_000, 0.01, 48)
    schedule = amortization_schedule(50_000, payment, 0.01, 48)
    for prev, cur in zip(schedule, schedule[1:]):
        assert cur.balance <= prev.balance
        assert cur.balance >= 0.0


def test_schedule_zero_rate_is_straight_line():
    schedule = amortization_schedule(12_000, 1_000, 0.0, 12)
    assert all(e.interest == 0.0 for e in schedule)
    assert all(e.principal == pytest.approx(1_000) for e in schedule)
    assert schedule[-1].balance == 0.0


def test_remaining_balance_after_all_payments_is_zero():
    payment = calculate_payment(100_000, 0.005, 120)
    assert remaining_balance(100_000, 0.005, payment, 120) == pytest.approx(0.0, abs=1e-6)


def test_remaining_balance_matches_schedule():
    payment = calculate_payment(100_000, 0.005, 120)
    schedule = amortization_schedule(100_000, payment, 0.005, 120)
    assert remaining_balance(100_000, 0.005, payment, 36) == pytest.approx(schedule[35].balance)


# --- Lump sum tests ---


def test_future_value_monthly():
    fv = future_value(100_000, 0.06, 10, CompoundingFrequency.monthly)
    assert abs(fv - 181_939.67) < 0.01


def test_future_value_continuous():
    fv = future_value(100_000, 0.06, 10, CompoundingFrequency.continuously)
    assert math.isclose(fv, 100_000 * math.exp(0.6))


@pytest.mark.parametrize("frequency", list(CompoundingFrequency))
def test_present_value_inverts_future_value(frequency):
    pv = present_value(100_000, 0.045, 7.5, frequency)
    assert future_value(pv, 0.045, 7.5, frequency) == pytest.approx(100_000, rel=1e-10)


# --- Extra payment schedule tests ---


def test_extra_schedule_without_extras_runs_full_term():
    payment, schedule = extra_payment_schedule(250_000, 0.065, 360, date(2025, 1, 1))
    assert len(schedule) == 360
    assert abs(payment - 1580.17) < 0.01
    assert schedule[-1].balance < 0.01


def test_extra_monthly_payment_shortens_loan():
    _, base = extra_payment_schedule(250_000, 0.065, 360, date(2025, 1, 1))
    _, extra = extra_payment_schedule(
        250_000, 0.065, 360, date(2025, 1, 1), extra_monthly=200, extra_monthly_start=1,
    )
    assert len(extra) < len(base)
    assert sum(e.interest for e in extra) < sum(e.interest for e in base)


def test_extra_monthly_starts_at_requested_month():
    _, schedule = extra_payment_schedule(
        100_000, 0.06, 120, date(2025, 1, 1), extra_monthly=100, extra_monthly_start=3,
    )
    assert schedule[1].extra_payment == pytest.approx(0.0, abs=1e-6)
    assert schedule[2].extra_payment == pytest.approx(100.0)


def test_extra_yearly_payment_every_twelve_months():
    _, schedule = extra_payment_schedule(
        100_000, 0.06, 120, date(2025, 1, 1), extra_yearly=5_000, extra_yearly_start=1,
    )
    assert schedule[0].extra_payment == pytest.approx(5_000)
    assert schedule[1].extra_payment == pytest.approx(0.0, abs=1e-6)
    assert schedule[12].extra_payment == pytest.approx(5_000)


def test_extra_schedule_dates_roll_over_year():
    _, schedule = extra_payment_schedule(10_000, 0.05, 12, date(2025, 11, 1))
    assert schedule[0].date == date(2025, 11, 1)
    assert schedule[2].date == date(2026, 1, 1)


def test_add_months_clips_to_month_end():
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2025, 1, 15), 360) == date(2055, 1, 15)


def test_add_months_past_calendar_range_is_none():
    assert add_months(date(2025, 1, 1), 10_000_000) is None
    assert add_months(date(2025, 1, 1), 10**30) is None


def test_extra_payment_never_overpays():
    _, schedule = extra_payment_schedule(
        10_000, 0.05, 12, date(2025, 1, 1), extra_monthly=20_000,
    )
    assert len(schedule) == 1
    assert schedule[0].principal == pytest.approx(10_000)
    assert schedule[0].balance == 0.0


# --- Annual summary tests ---


def test_annual_summary_blocks_of_twelve():
    _, schedule = extra_payment_schedule(250_000, 0.065, 360, date(2025, 1, 1))
    annual = annual_summary(schedule, 2025)
    assert len(annual) == 30
    assert annual[0].year == 2025
    assert annual[-1].year == 2054
    assert annual[0].principal == pytest.approx(sum(e.principal for e in schedule[:12]))
    assert annual[0].balance == pytest.approx(schedule[11].balance)
    assert sum(a.principal for a in annual) == pytest.approx(250_000, abs=0.01)


def test_annual_summary_empty():
    assert annual_summary([], 2025) == []
