"""House affordability service.

Turns an income (debt-to-income limits) or a flat monthly budget into a
target monthly housing cost, then searches for the home price whose
principal, interest, property tax (and maintenance, in budget mode) meet it.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from calc_engine.config import settings
from calc_engine.finance.amortization import calculate_monthly_payment
from calc_engine.finance.solvers import bisect_home_price, step_search_home_price
from calc_engine.formatting import format_currency, format_percent
from calc_engine.models.affordability import (
    BudgetAffordabilityRequest,
    HomePriceSolution,
    IncomeAffordabilityRequest,
    SearchMethod,
)
from calc_engine.models.common import SolverResult

logger = logging.getLogger(__name__)

_SEARCHES = {
    SearchMethod.bisection: bisect_home_price,
    SearchMethod.step: step_search_home_price,
}


def _cost_breakdown(price: float, request, maintenance_rate: float = 0.0) -> dict[str, float]:
    """Monthly ownership costs that scale with the home price."""
    down = request.down_payment_percent / 100
    loan_amount = price * (1 - down)
    return {
        "loan_amount": loan_amount,
        "down_payment": price * down,
        "principal_interest": calculate_monthly_payment(
            loan_amount, request.interest_rate / 100, round(request.loan_term * 12)
        ),
        "property_tax": price * request.property_tax_percent / 100 / 12,
        "maintenance": price * maintenance_rate / 12,
    }


def _price_dependent_cost(request, maintenance_rate: float = 0.0) -> Callable[[float], float]:
    def cost(price: float) -> float:
        parts = _cost_breakdown(price, request, maintenance_rate)
        return parts["principal_interest"] + parts["property_tax"] + parts["maintenance"]
    return cost


def _search(request, target: float, maintenance_rate: float = 0.0) -> SolverResult:
    solution = _SEARCHES[request.search_method](
        _price_dependent_cost(request, maintenance_rate),
        target,
        tolerance=settings.AFFORDABILITY_TOLERANCE,
        max_iterations=settings.AFFORDABILITY_MAX_ITERATIONS,
    )
    if not solution.converged:
        logger.warning(
            "Home price search (%s) stopped after %d iterations, residual $%.2f",
            request.search_method.value, solution.iterations, solution.residual or 0.0,
        )
    return solution


def _display(result: HomePriceSolution) -> dict[str, str]:
    display = {
        "max_home_price": format_currency(result.max_home_price, 0),
        "down_payment": format_currency(result.down_payment, 0),
        "loan_amount": format_currency(result.loan_amount, 0),
        "total_monthly_payment": format_currency(result.total_monthly_payment, 0),
    }
    if result.front_end_ratio is not None:
        display["front_end_ratio"] = format_percent(result.front_end_ratio)
        display["back_end_ratio"] = format_percent(result.back_end_ratio)
    return display


def calculate_income_affordability(request: IncomeAffordabilityRequest) -> HomePriceSolution:
    gross_monthly = request.annual_income / 12
    max_front_end = gross_monthly * request.front_end_ratio / 100
    max_back_end = gross_monthly * request.dti_ratio / 100 - request.monthly_debt
    max_payment = min(max_front_end, max_back_end)

    target = max_payment - request.hoa_fee - request.insurance
    solution = _search(request, target)

    price = max(solution.value, 0.0)
    parts = _cost_breakdown(price, request)
    total = parts["principal_interest"] + parts["property_tax"] + request.hoa_fee + request.insurance

    result = HomePriceSolution(
        max_home_price=price,
        down_payment=parts["down_payment"],
        loan_amount=parts["loan_amount"],
        monthly_principal_interest=parts["principal_interest"],
        monthly_property_tax=parts["property_tax"],
        monthly_hoa=request.hoa_fee,
        monthly_insurance=request.insurance,
        total_monthly_payment=total,
        max_monthly_payment=max_payment,
        monthly_gross_income=gross_monthly,
        front_end_ratio=total / gross_monthly * 100,
        back_end_ratio=(total + request.monthly_debt) / gross_monthly * 100,
        converged=solution.converged,
        iterations=solution.iterations,
    )
    result.display = _display(result)
    return result


def calculate_budget_affordability(request: BudgetAffordabilityRequest) -> HomePriceSolution:
    maintenance_rate = request.maintenance_percent / 100
    target = request.monthly_budget - request.hoa_fee - request.insurance
    solution = _search(request, target, maintenance_rate)

    price = max(solution.value, 0.0)
    parts = _cost_breakdown(price, request, maintenance_rate)
    total = (
        parts["principal_interest"] + parts["property_tax"] + parts["maintenance"]
        + request.hoa_fee + request.insurance
    )

    result = HomePriceSolution(
        max_home_price=price,
        down_payment=parts["down_payment"],
        loan_amount=parts["loan_amount"],
        monthly_principal_interest=parts["principal_interest"],
        monthly_property_tax=parts["property_tax"],
        monthly_hoa=request.hoa_fee,
        monthly_insurance=request.insurance,
        monthly_maintenance=parts["maintenance"],
        total_monthly_payment=total,
        converged=solution.converged,
        iterations=solution.iterations,
    )
    result.display = _display(result)
    return result
