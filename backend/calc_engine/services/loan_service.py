"""Loan calculator service.

Routes to the amortized, deferred or bond computation based on
LoanRequest.calculator_type. Returns None when the inputs cannot describe
a loan (no principal, no term or a negative rate); the caller keeps
whatever it displayed before.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from calc_engine.config import settings
from calc_engine.finance.amortization import (
    amortization_schedule,
    annual_summary,
    calculate_payment,
    extra_payment_schedule,
    future_value,
    periods_per_year,
    present_value,
    rate_per_payment,
)
from calc_engine.formatting import format_currency, format_percent
from calc_engine.models.loan import (
    AmortizationRequest,
    AmortizationResult,
    LoanCalculatorType,
    LoanRequest,
    LoanResult,
)

logger = logging.getLogger(__name__)


def _split(principal: float, total: float) -> tuple[float, float]:
    """Principal and interest shares of ``total`` in percent."""
    if total <= 0:
        return 0.0, 0.0
    return principal / total * 100, (total - principal) / total * 100


def _display(result: LoanResult) -> dict[str, str]:
    return {
        "payment_amount": format_currency(result.payment_amount),
        "total_payments": format_currency(result.total_payments),
        "total_interest": format_currency(result.total_interest),
        "principal_percentage": format_percent(result.principal_percentage),
        "interest_percentage": format_percent(result.interest_percentage),
    }


def calculate_amortized(principal: float, years: float, annual_rate: float, request: LoanRequest) -> LoanResult:
    """Level payments at the chosen payment frequency, with full schedule."""
    f = periods_per_year(request.payment_frequency)
    n = round(years * f)
    rate = rate_per_payment(annual_rate, request.compound_frequency, f)
    payment = calculate_payment(principal, rate, n)

    total_paid = payment * n
    principal_pct, interest_pct = _split(principal, total_paid)

    result = LoanResult(
        calculator_type=LoanCalculatorType.amortized,
        payment_amount=payment,
        total_payments=total_paid,
        total_interest=total_paid - principal,
        principal_percentage=principal_pct,
        interest_percentage=interest_pct,
        number_of_payments=n,
        rate_per_payment=rate,
        schedule=amortization_schedule(principal, payment, rate, n),
    )
    result.display = _display(result)
    return result


def calculate_deferred(principal: float, years: float, annual_rate: float, request: LoanRequest) -> LoanResult:
    """Single repayment of principal plus compounded interest at maturity."""
    amount_due = future_value(principal, annual_rate, years, request.compound_frequency)
    principal_pct, interest_pct = _split(principal, amount_due)

    result = LoanResult(
        calculator_type=LoanCalculatorType.deferred,
        payment_amount=amount_due,
        total_payments=amount_due,
        total_interest=amount_due - principal,
        principal_percentage=principal_pct,
        interest_percentage=interest_pct,
        number_of_payments=1,
        rate_per_payment=amount_due / principal - 1.0,
    )
    result.display = _display(result)
    return result


def calculate_bond(face_value: float, years: float, annual_rate: float, request: LoanRequest) -> LoanResult:
    """Amount received today for a loan repaid by ``face_value`` at maturity."""
    amount_received = present_value(face_value, annual_rate, years, request.compound_frequency)
    received_pct, interest_pct = _split(amount_received, face_value)

    result = LoanResult(
        calculator_type=LoanCalculatorType.bond,
        payment_amount=amount_received,
        total_payments=face_value,
        total_interest=face_value - amount_received,
        principal_percentage=received_pct,
        interest_percentage=interest_pct,
        number_of_payments=1,
        rate_per_payment=face_value / amount_received - 1.0,
    )
    result.display = _display(result)
    return result


_CALCULATORS = {
    LoanCalculatorType.amortized: calculate_amortized,
    LoanCalculatorType.deferred: calculate_deferred,
    LoanCalculatorType.bond: calculate_bond,
}


def calculate_loan(request: LoanRequest) -> Optional[LoanResult]:
    """Dispatch to the requested loan computation."""
    principal = request.loan_amount
    years = request.loan_term_years + request.loan_term_months / 12.0
    annual_rate = request.interest_rate / 100.0

    if principal <= 0 or years <= 0 or annual_rate < 0:
        logger.info(
            "Loan calculation skipped: principal=%s years=%s rate=%s",
            principal, years, annual_rate,
        )
        return None

    if request.calculator_type == LoanCalculatorType.amortized:
        if round(years * periods_per_year(request.payment_frequency)) <= 0:
            logger.info("Loan calculation skipped: term shorter than one payment period")
            return None

    return _CALCULATORS[request.calculator_type](principal, years, annual_rate, request)


def calculate_amortization(request: AmortizationRequest) -> Optional[AmortizationResult]:
    """Monthly amortization with optional extra payments and a yearly roll-up."""
    principal = request.loan_amount
    n_months = round(request.loan_term_years * 12 + request.loan_term_months)
    annual_rate = request.interest_rate / 100.0

    if principal <= 0 or n_months <= 0 or annual_rate < 0:
        logger.info("Amortization skipped: principal=%s months=%s", principal, n_months)
        return None
    if n_months > settings.MAX_TERM_MONTHS:
        logger.info("Amortization skipped: %d months exceeds the %d-month limit", n_months, settings.MAX_TERM_MONTHS)
        return None

    start_month = min(max(request.start_month, 1), 12)
    start_year = min(max(request.start_year, settings.MIN_START_YEAR), settings.MAX_START_YEAR)
    start = date(start_year, start_month, 1)

    payment, schedule = extra_payment_schedule(
        principal,
        annual_rate,
        n_months,
        start,
        extra_monthly=request.extra_monthly_payment,
        extra_monthly_start=request.extra_monthly_start,
        extra_yearly=request.extra_yearly_payment,
        extra_yearly_start=request.extra_yearly_start,
    )

    total_paid = sum(e.payment for e in schedule)
    total_interest = sum(e.interest for e in schedule)
    baseline_interest = payment * n_months - principal

    result = AmortizationResult(
        monthly_payment=payment,
        total_payment=total_paid,
        total_interest=total_interest,
        payoff_date=schedule[-1].date if schedule else start,
        months_to_payoff=len(schedule),
        interest_saved=max(baseline_interest - total_interest, 0.0),
        schedule=schedule,
        annual_schedule=annual_summary(schedule, start_year),
    )
    result.display = {
        "monthly_payment": format_currency(result.monthly_payment),
        "total_payment": format_currency(result.total_payment),
        "total_interest": format_currency(result.total_interest),
        "interest_saved": format_currency(result.interest_saved),
        "payoff_date": result.payoff_date.strftime("%B %Y"),
    }
    return result
