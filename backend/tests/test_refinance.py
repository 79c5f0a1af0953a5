"""Tests for the refinance calculator (POST /api/refinance)."""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from calc_engine.finance.amortization import calculate_monthly_payment
from calc_engine.main import app
from calc_engine.models.refinance import RefinanceRequest
from calc_engine.services.refinance_service import (
    break_even_months,
    calculate_refinance,
    current_loan_position,
)

client = TestClient(app)

AS_OF = date(2025, 1, 15)


def test_refinance_defaults():
    response = client.post("/api/refinance", json={"as_of": "2025-01-15"})
    assert response.status_code == 200
    data = response.json()
    assert data["current_monthly_payment"] == 2_500
    assert data["current_months_remaining"] == 300
    assert abs(data["new_monthly_payment"] - 1987.26) < 0.05
    assert data["monthly_savings"] == pytest.approx(2_500 - data["new_monthly_payment"])
    assert 6 < data["break_even_months"] < 7
    assert data["break_even_date"] == "2025-08-15"
    assert data["current_payoff_date"] == "2050-01-15"
    assert data["new_payoff_date"] == "2055-01-15"


def test_break_even_months():
    assert break_even_months(5_000, 200) == 25.0
    assert break_even_months(5_000, -200) == 25.0
    assert break_even_months(5_000, 0) is None


def test_refinance_unchanged_payment_never_breaks_even():
    current = calculate_monthly_payment(350_000, 5.5 / 100, 360)
    result = calculate_refinance(RefinanceRequest(current_payment=current, as_of=AS_OF))
    assert result.monthly_savings == 0
    assert result.break_even_months is None
    assert result.break_even_date is None
    assert result.display["break_even"] == "Never"


def test_refinance_unknown_balance_is_derived():
    request = RefinanceRequest(know_balance=False)
    balance, payment = current_loan_position(request)
    assert abs(payment - 2661.21) < 0.01
    assert 350_000 < balance < 400_000


def test_refinance_unknown_balance_as_string_flag():
    data = client.post("/api/refinance", json={"know_balance": "false", "as_of": "2025-01-15"}).json()
    assert abs(data["current_monthly_payment"] - 2661.21) < 0.01
    assert data["current_remaining_balance"] < 400_000


def test_refinance_points_and_cash_out():
    result = calculate_refinance(RefinanceRequest(points=1, cash_out=20_000, as_of=AS_OF))
    assert result.points_cost == pytest.approx(3_500)
    assert result.total_closing_costs == pytest.approx(7_000)
    assert result.new_loan_amount == pytest.approx(370_000)
    assert result.upfront_cost == pytest.approx(7_000 - 20_000)


def test_refinance_lifetime_savings():
    result = calculate_refinance(RefinanceRequest(as_of=AS_OF))
    expected = 2_500 * 300 - (result.new_monthly_payment * 360 + 3_500)
    assert result.lifetime_savings == pytest.approx(expected)
    assert result.new_total_interest == pytest.approx(result.new_total_payment - 350_000)


def test_refinance_higher_payment_still_reports_break_even():
    result = calculate_refinance(RefinanceRequest(new_rate=9, new_term=15, as_of=AS_OF))
    assert result.monthly_savings < 0
    assert result.break_even_months == pytest.approx(3_500 / -result.monthly_savings)


def test_refinance_defaults_to_today():
    result = calculate_refinance(RefinanceRequest())
    assert result.new_payoff_date.year == date.today().year + 30


def test_refinance_rounded_payment_break_even_past_calendar():
    # Current payment typed as the new payment rounded to cents
    new_payment = calculate_monthly_payment(350_000, 5.5 / 100, 360)
    response = client.post("/api/refinance", json={
        "current_payment": round(new_payment, 2),
        "as_of": "2025-01-15",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["break_even_months"] > 100_000
    assert data["break_even_date"] is None
    assert data["new_payoff_date"] == "2055-01-15"


def test_refinance_huge_remaining_term_has_no_payoff_date():
    result = calculate_refinance(RefinanceRequest(years_remaining=1e9, as_of=AS_OF))
    assert result.current_payoff_date is None
    assert result.new_payoff_date == date(2055, 1, 15)
