"""Business loan service: payments, fees, simplified real APR and schedule."""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from calc_engine.finance.amortization import (
    add_months,
    amortization_schedule,
    calculate_payment,
    periods_per_year,
    rate_per_payment,
)
from calc_engine.formatting import format_currency, format_percent
from calc_engine.models.business_loan import BusinessLoanRequest, BusinessLoanResult
from calc_engine.models.common import AmortizationEntry, PaymentFrequency

logger = logging.getLogger(__name__)


def interest_only_schedule(principal: float, rate: float, n_payments: int) -> list[AmortizationEntry]:
    """Interest every period, the whole principal with the last payment."""
    schedule = []
    interest = principal * rate
    for period in range(1, n_payments + 1):
        last = period == n_payments
        schedule.append(AmortizationEntry(
            period=period,
            payment=interest + (principal if last else 0.0),
            interest=interest,
            principal=principal if last else 0.0,
            balance=0.0 if last else principal,
        ))
    return schedule


def simple_real_apr(total_interest: float, total_fees: float, principal: float, years: float) -> Optional[float]:
    """Interest plus fees per year over the cash actually received, in percent.

    A quick approximation rather than a solved rate; None when fees consume
    the whole loan.
    """
    effective_amount = principal - total_fees
    if effective_amount <= 0 or years <= 0:
        return None
    return (total_interest + total_fees) / effective_amount / years * 100


def calculate_business_loan(request: BusinessLoanRequest) -> Optional[BusinessLoanResult]:
    principal = request.loan_amount
    n_months = request.loan_term_years * 12 + request.loan_term_months
    annual_rate = request.interest_rate / 100.0
    total_fees = request.origination_fee + request.documentation_fee + request.other_fees

    if n_months <= 0 or principal <= 0:
        logger.info("Business loan calculation skipped: principal=%s months=%s", principal, n_months)
        return None

    interest_only = request.payment_frequency == PaymentFrequency.interest_only
    f = periods_per_year(request.payment_frequency)
    n_payments = round(n_months * f / 12)
    if n_payments <= 0:
        logger.info("Business loan calculation skipped: term shorter than one payment period")
        return None

    rate = rate_per_payment(annual_rate, request.compound_frequency, f)
    if interest_only:
        payment = principal * rate
        schedule = interest_only_schedule(principal, rate, n_payments)
        total_payment = payment * n_payments + principal
    else:
        payment = calculate_payment(principal, rate, n_payments)
        schedule = amortization_schedule(principal, payment, rate, n_payments)
        total_payment = payment * n_payments

    total_interest = total_payment - principal

    result = BusinessLoanResult(
        loan_amount=principal,
        payment_amount=payment,
        monthly_payment=payment * f / 12,
        number_of_payments=n_payments,
        total_payment=total_payment,
        total_interest=total_interest,
        total_fees=total_fees,
        interest_plus_fees=total_interest + total_fees,
        real_apr=simple_real_apr(total_interest, total_fees, principal, n_months / 12),
        payoff_date=add_months(request.as_of or date.today(), round(n_months)),
        schedule=schedule,
    )
    result.display = {
        "monthly_payment": format_currency(result.monthly_payment),
        "total_payment": format_currency(total_payment),
        "total_interest": format_currency(total_interest),
        "total_fees": format_currency(total_fees),
        "real_apr": format_percent(result.real_apr, 3),
        "payoff_date": result.payoff_date.strftime("%B %Y") if result.payoff_date else "N/A",
    }
    return result
