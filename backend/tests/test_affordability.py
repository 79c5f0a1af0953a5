"""Tests for the house affordability calculators."""
import pytest
from fastapi.testclient import TestClient

from calc_engine.main import app
from calc_engine.models.affordability import BudgetAffordabilityRequest, IncomeAffordabilityRequest
from calc_engine.services.affordability_service import (
    calculate_budget_affordability,
    calculate_income_affordability,
)

client = TestClient(app)


def test_income_affordability_defaults():
    response = client.post("/api/affordability/income", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["converged"] is True
    assert data["monthly_gross_income"] == pytest.approx(85_000 / 12)
    # Front-end limit (28%) binds: 1983.33 < 36% - 500
    assert data["max_monthly_payment"] == pytest.approx(85_000 / 12 * 0.28)
    assert abs(data["total_monthly_payment"] - data["max_monthly_payment"]) < 10
    assert 260_000 < data["max_home_price"] < 290_000


def test_income_affordability_parts_add_up():
    result = calculate_income_affordability(IncomeAffordabilityRequest())
    assert result.down_payment + result.loan_amount == pytest.approx(result.max_home_price)
    assert result.down_payment == pytest.approx(result.max_home_price * 0.2)
    assert result.monthly_property_tax == pytest.approx(result.max_home_price * 0.012 / 12)
    assert result.total_monthly_payment == pytest.approx(
        result.monthly_principal_interest + result.monthly_property_tax + 100 + 150
    )


def test_back_end_ratio_binds_with_high_debt():
    result = calculate_income_affordability(IncomeAffordabilityRequest(monthly_debt=1_500))
    assert result.max_monthly_payment == pytest.approx(85_000 / 12 * 0.36 - 1_500)
    assert result.back_end_ratio == pytest.approx(36, abs=0.2)
    assert result.front_end_ratio < 28


def test_unaffordable_target_gives_zero_price():
    result = calculate_income_affordability(IncomeAffordabilityRequest(monthly_debt=5_000))
    assert result.max_home_price == 0
    assert result.converged is True
    assert result.loan_amount == 0


def test_step_search_agrees_with_bisection():
    bisection = calculate_income_affordability(IncomeAffordabilityRequest())
    step = calculate_income_affordability(IncomeAffordabilityRequest(search_method="step"))
    assert step.converged
    assert abs(step.max_home_price - bisection.max_home_price) < 5_000


def test_budget_affordability_defaults():
    data = client.post("/api/affordability/budget", json={}).json()
    assert data["converged"] is True
    assert abs(data["total_monthly_payment"] - 2_500) < 10
    assert data["monthly_maintenance"] == pytest.approx(data["max_home_price"] * 0.01 / 12)
    assert data["front_end_ratio"] is None


def test_budget_affordability_maintenance_lowers_price():
    without = calculate_budget_affordability(BudgetAffordabilityRequest(maintenance_percent=0))
    with_maintenance = calculate_budget_affordability(BudgetAffordabilityRequest())
    assert with_maintenance.max_home_price < without.max_home_price


def test_budget_affordability_zero_rate():
    result = calculate_budget_affordability(BudgetAffordabilityRequest(interest_rate=0))
    assert result.converged
    assert abs(result.total_monthly_payment - 2_500) < 10
