"""APR service: true annual cost of a loan including fees."""
from __future__ import annotations

import logging
from typing import Optional

from calc_engine.config import settings
from calc_engine.finance.amortization import calculate_payment, rate_per_payment
from calc_engine.finance.solvers import solve_apr
from calc_engine.formatting import format_currency, format_percent
from calc_engine.models.apr import APRRequest, APRResult

logger = logging.getLogger(__name__)


def calculate_apr(request: APRRequest) -> Optional[APRResult]:
    """Monthly payment on principal plus loaned fees, then the rate that
    discounts those payments back to the cash actually received."""
    principal = request.loan_amount
    n_months = round(request.loan_term_years * 12 + request.loan_term_months)
    nominal = request.interest_rate / 100.0

    if principal <= 0 or n_months <= 0 or nominal < 0:
        logger.info("APR calculation skipped: principal=%s months=%s", principal, n_months)
        return None

    financed = principal + request.loaned_fees
    received = principal - request.upfront_fees

    monthly_rate = rate_per_payment(nominal, request.compounding_frequency, 12)
    payment = calculate_payment(financed, monthly_rate, n_months)
    total_paid = payment * n_months

    real_apr: Optional[float] = None
    converged = False
    iterations = 0
    if received > 0:
        solution = solve_apr(
            payment,
            received,
            n_months,
            initial_guess=nominal,
            tolerance=settings.APR_TOLERANCE,
            max_iterations=settings.APR_MAX_ITERATIONS,
        )
        real_apr = solution.value * 100
        converged = solution.converged
        iterations = solution.iterations
        if not converged:
            logger.warning(
                "APR solver did not converge after %d iterations (residual=%s)",
                solution.iterations, solution.residual,
            )
    else:
        logger.info("APR undefined: fees %.2f consume the loan amount %.2f", request.upfront_fees, principal)

    result = APRResult(
        real_apr=real_apr,
        nominal_rate=request.interest_rate,
        monthly_payment=payment,
        total_payments=n_months,
        total_paid=total_paid,
        total_interest=total_paid - financed,
        amount_financed=financed,
        amount_received=received,
        converged=converged,
        iterations=iterations,
    )
    result.display = {
        "real_apr": format_percent(real_apr, 3),
        "nominal_rate": format_percent(request.interest_rate, 3),
        "monthly_payment": format_currency(payment),
        "total_paid": format_currency(total_paid),
        "total_interest": format_currency(result.total_interest),
    }
    return result
