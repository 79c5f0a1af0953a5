"""Refinance comparison service."""
from __future__ import annotations

import logging
import math
from datetime import date

from calc_engine.finance.amortization import add_months, calculate_monthly_payment, remaining_balance
from calc_engine.formatting import format_currency, format_months
from calc_engine.models.refinance import RefinanceRequest, RefinanceResult

logger = logging.getLogger(__name__)


def break_even_months(closing_costs: float, monthly_savings: float) -> float | None:
    """Months of payment difference needed to recover the closing costs.

    None when the payment does not change.
    """
    if monthly_savings == 0:
        return None
    return closing_costs / abs(monthly_savings)


def current_loan_position(request: RefinanceRequest) -> tuple[float, float]:
    """(balance, monthly payment) of the existing loan."""
    if request.know_balance:
        return request.remaining_balance, request.current_payment

    monthly_rate = request.current_rate / 100 / 12
    total_months = round(request.original_term * 12)
    months_left = round(request.years_remaining * 12 + request.months_remaining)
    months_paid = max(total_months - months_left, 0)

    payment = calculate_monthly_payment(request.original_loan_amount, request.current_rate / 100, total_months)
    balance = remaining_balance(request.original_loan_amount, monthly_rate, payment, months_paid)
    return balance, payment


def calculate_refinance(request: RefinanceRequest) -> RefinanceResult:
    as_of = request.as_of or date.today()

    balance, current_payment = current_loan_position(request)
    current_months = max(round(request.years_remaining * 12 + request.months_remaining), 0)
    current_total = current_payment * current_months

    points_cost = balance * request.points / 100
    total_closing = request.closing_costs + points_cost
    new_amount = balance + request.cash_out
    new_months = round(request.new_term * 12)
    new_payment = calculate_monthly_payment(new_amount, request.new_rate / 100, new_months)
    new_total = new_payment * new_months

    monthly_savings = current_payment - new_payment
    lifetime_savings = current_total - (new_total + total_closing)
    be_months = break_even_months(total_closing, monthly_savings)
    if be_months is None:
        logger.info("Refinance leaves the payment unchanged: closing costs are never recovered")

    result = RefinanceResult(
        current_monthly_payment=current_payment,
        current_remaining_balance=balance,
        current_months_remaining=current_months,
        current_total_interest=current_total - balance,
        current_payoff_date=add_months(as_of, current_months),
        new_monthly_payment=new_payment,
        new_loan_amount=new_amount,
        new_total_payment=new_total,
        new_total_interest=new_total - new_amount,
        new_payoff_date=add_months(as_of, new_months),
        monthly_savings=monthly_savings,
        lifetime_savings=lifetime_savings,
        points_cost=points_cost,
        total_closing_costs=total_closing,
        upfront_cost=total_closing - request.cash_out,
        break_even_months=be_months,
        break_even_date=add_months(as_of, math.ceil(be_months)) if be_months is not None else None,
    )
    result.display = {
        "current_monthly_payment": format_currency(current_payment),
        "new_monthly_payment": format_currency(new_payment),
        "monthly_savings": format_currency(monthly_savings),
        "lifetime_savings": format_currency(lifetime_savings),
        "total_closing_costs": format_currency(total_closing),
        "break_even": format_months(be_months),
    }
    return result
