"""Tests for the iterative solvers: APR Newton-Raphson and home price search."""
import pytest

from calc_engine.finance.amortization import calculate_payment
from calc_engine.finance.solvers import (
    bisect_home_price,
    discounted_payments,
    solve_apr,
    step_search_home_price,
)


def _linear_cost(per_dollar: float):
    return lambda price: price * per_dollar


# --- APR tests ---


def test_apr_no_fees_returns_nominal_rate():
    payment = calculate_payment(100_000, 0.005, 120)
    result = solve_apr(payment, 100_000, 120, initial_guess=0.06)
    assert result.converged
    assert result.value == pytest.approx(0.06, abs=1e-9)
    assert result.iterations == 0


def test_apr_upfront_fee_raises_rate():
    payment = calculate_payment(100_000, 0.005, 120)
    result = solve_apr(payment, 98_500, 120, initial_guess=0.06)
    assert result.converged
    assert 0.063 < result.value < 0.064


def test_apr_from_zero_nominal_rate():
    payment = calculate_payment(10_000, 0.0, 24)
    result = solve_apr(payment, 9_800, 24, initial_guess=0.0)
    assert result.converged
    assert result.value > 0
    assert discounted_payments(payment, result.value, 24) == pytest.approx(9_800, rel=1e-6)


def test_apr_reports_non_convergence():
    payment = calculate_payment(100_000, 0.005, 120)
    result = solve_apr(payment, 98_500, 120, initial_guess=0.06, max_iterations=1)
    assert not result.converged
    assert result.iterations == 1
    # The last guess is still returned
    assert result.value > 0.06


@pytest.mark.parametrize("principal", [1_000, 25_000, 300_000, 1_000_000])
@pytest.mark.parametrize("annual_rate", [0.0, 0.035, 0.08, 0.20])
@pytest.mark.parametrize("n_months", [6, 60, 240, 480])
def test_apr_reprices_net_amount(principal, annual_rate, n_months):
    payment = calculate_payment(principal, annual_rate / 12, n_months)
    net = principal * 0.98
    result = solve_apr(payment, net, n_months, initial_guess=annual_rate)
    assert discounted_payments(payment, result.value, n_months) == pytest.approx(net, rel=1e-4)


# --- Home price search tests ---


def test_bisection_hits_target_within_tolerance():
    cost = _linear_cost(0.0063)
    result = bisect_home_price(cost, 1_733.33)
    assert result.converged
    assert abs(cost(result.value) - 1_733.33) < 10


def test_bisection_expands_bracket_for_expensive_targets():
    cost = _linear_cost(0.005)
    result = bisect_home_price(cost, 25_000)
    assert result.converged
    assert result.value == pytest.approx(5_000_000, abs=2_000)


def test_bisection_custom_tolerance():
    cost = _linear_cost(0.0063)
    result = bisect_home_price(cost, 1_733.33, tolerance=0.01)
    assert abs(cost(result.value) - 1_733.33) < 0.01


def test_bisection_non_positive_target_is_zero_price():
    result = bisect_home_price(_linear_cost(0.006), -50)
    assert result.value == 0.0
    assert result.converged


def test_bisection_iteration_cap():
    result = bisect_home_price(_linear_cost(0.0063), 1_733.33, tolerance=1e-9, max_iterations=5)
    assert not result.converged
    assert result.iterations == 5


def test_step_search_matches_legacy_walk():
    # 100k -> 150k -> ... -> 300k overshoots, back to 250k, then 275k lands
    cost = _linear_cost(0.006322)
    result = step_search_home_price(cost, 1_733.33)
    assert result.converged
    assert result.value == 275_000


def test_step_search_iteration_cap():
    result = step_search_home_price(_linear_cost(0.0063), 1_733.33, tolerance=1e-9, max_iterations=3)
    assert not result.converged
    assert result.iterations == 3
