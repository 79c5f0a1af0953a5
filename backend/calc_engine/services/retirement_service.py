"""Retirement planning service: four independent calculators over one input set.

- need:       savings required at retirement and the monthly deposit to get there
- savings:    fund projected from a fixed share of income
- withdrawal: safe draw from the projected fund (4% rule by default)
- longevity:  how long a fund lasts under a fixed monthly withdrawal
"""
from __future__ import annotations

import logging

from calc_engine.config import settings
from calc_engine.finance.retirement import (
    months_until_depleted,
    project_fund,
    real_rate,
    required_savings,
    sinking_fund_payment,
)
from calc_engine.formatting import format_currency, format_months
from calc_engine.models.retirement import (
    LongevityResult,
    RetirementNeed,
    RetirementPlan,
    RetirementRequest,
    SavingsProjection,
    WithdrawalPlan,
)

logger = logging.getLogger(__name__)


def _years_to_retirement(request: RetirementRequest) -> float:
    return max(request.retirement_age - request.current_age, 0.0)


def calculate_need(request: RetirementRequest) -> RetirementNeed:
    years_to_retirement = _years_to_retirement(request)
    years_in_retirement = max(request.life_expectancy - request.retirement_age, 0.0)
    investment_return = request.investment_return / 100

    income_at_retirement = request.current_income * (1 + request.income_increase_rate / 100) ** years_to_retirement
    annual_income_needed = income_at_retirement * request.retirement_income_percent / 100
    from_savings = max(annual_income_needed - request.other_income * 12, 0.0)

    total_needed = required_savings(
        from_savings,
        years_in_retirement,
        real_rate(investment_return, request.inflation_rate / 100),
    )
    fv_savings = request.current_savings * (1 + investment_return) ** years_to_retirement
    additional = max(total_needed - fv_savings, 0.0)
    monthly = sinking_fund_payment(additional, investment_return / 12, years_to_retirement * 12)

    result = RetirementNeed(
        annual_income_needed=annual_income_needed,
        annual_income_from_savings=from_savings,
        total_needed=total_needed,
        future_value_of_savings=fv_savings,
        additional_savings_needed=additional,
        monthly_contribution=monthly,
        years_to_retirement=years_to_retirement,
        years_in_retirement=years_in_retirement,
    )
    result.display = {
        "total_needed": format_currency(total_needed, 0),
        "future_value_of_savings": format_currency(fv_savings, 0),
        "additional_savings_needed": format_currency(additional, 0),
        "monthly_contribution": format_currency(monthly, 0),
    }
    return result


def calculate_savings(request: RetirementRequest) -> SavingsProjection:
    annual_savings = request.current_income * request.future_savings_percent / 100
    fund, contributed = project_fund(
        request.current_savings,
        request.investment_return / 100,
        annual_savings,
        _years_to_retirement(request),
    )
    shortfall = max(request.amount_needed - fund, 0.0)

    result = SavingsProjection(
        annual_savings=annual_savings,
        monthly_savings=annual_savings / 12,
        projected_retirement_fund=fund,
        total_contributions=contributed,
        total_interest_earned=fund - contributed,
        amount_needed=request.amount_needed,
        shortfall=shortfall,
        on_track=shortfall == 0,
    )
    result.display = {
        "projected_retirement_fund": format_currency(fund, 0),
        "total_contributions": format_currency(contributed, 0),
        "total_interest_earned": format_currency(fund - contributed, 0),
        "shortfall": format_currency(shortfall, 0),
    }
    return result


def calculate_withdrawal(request: RetirementRequest) -> WithdrawalPlan:
    yearly_contribution = request.annual_contribution + request.monthly_contribution * 12
    fund, _ = project_fund(
        request.current_savings,
        request.investment_return / 100,
        yearly_contribution,
        _years_to_retirement(request),
    )
    rate = settings.SAFE_WITHDRAWAL_RATE
    annual = fund * rate

    result = WithdrawalPlan(
        projected_fund=fund,
        withdrawal_rate=rate * 100,
        annual_withdrawal=annual,
        monthly_withdrawal=annual / 12,
    )
    result.display = {
        "projected_fund": format_currency(fund, 0),
        "annual_withdrawal": format_currency(annual, 0),
        "monthly_withdrawal": format_currency(annual / 12, 0),
    }
    return result


def calculate_longevity(request: RetirementRequest) -> LongevityResult:
    max_months = settings.LONGEVITY_MAX_MONTHS
    months, ending = months_until_depleted(
        request.savings_amount,
        request.withdrawal_return / 100 / 12,
        request.monthly_withdrawal,
        max_months,
    )
    depleted = ending <= 0
    if not depleted:
        logger.info("Fund outlasted the %d-month simulation window", max_months)

    years, rem = divmod(months, 12)
    result = LongevityResult(
        months_lasting=months,
        years_until_depleted=years,
        months_until_depleted=rem,
        depleted=depleted,
        ending_balance=ending,
    )
    result.display = {
        "lasts": format_months(months) if depleted else f"More than {format_months(months)}",
        "ending_balance": format_currency(max(ending, 0.0), 0),
    }
    return result


def calculate_plan(request: RetirementRequest) -> RetirementPlan:
    return RetirementPlan(
        need=calculate_need(request),
        savings=calculate_savings(request),
        withdrawal=calculate_withdrawal(request),
        longevity=calculate_longevity(request),
    )
