"""Iterative solvers: APR root-finding and home price search.

Every solver is capped and reports whether it converged rather than
raising; callers decide what to do with an unconverged estimate.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from calc_engine.models.common import SolverResult

logger = logging.getLogger(__name__)


def discounted_payments(payment: float, annual_rate: float, n_payments: int) -> float:
    """Present value of ``n_payments`` monthly payments at a nominal annual rate."""
    t = np.arange(1, n_payments + 1, dtype=float)
    return float(np.sum(payment / (1.0 + annual_rate / 12.0) ** t))


def solve_apr(
    payment: float,
    net_amount: float,
    n_payments: int,
    initial_guess: float,
    tolerance: float = 1e-6,
    max_iterations: int = 100,
) -> SolverResult:
    """Newton-Raphson for the annual rate ``a`` that prices the payments at ``net_amount``.

    Solves  sum_{t=1..N} payment / (1 + a/12)^t = net_amount.

    The derivative with respect to the monthly rate m is
    -sum t * payment / ((1+m) * (1+m)^t); with m = a/12 the update is
    a -= error / (dPV/dm / 12).
    """
    t = np.arange(1, n_payments + 1, dtype=float)
    guess = initial_guess
    error = float("nan")

    for i in range(max_iterations):
        monthly = guess / 12.0
        if monthly <= -1.0:
            logger.warning("APR iteration left the valid domain at %.6f", guess)
            return SolverResult(value=guess, converged=False, iterations=i, residual=error)

        factors = (1.0 + monthly) ** t
        present_value = float(np.sum(payment / factors))
        derivative = float(-np.sum(t * payment / ((1.0 + monthly) * factors)))

        error = present_value - net_amount
        if abs(error) < tolerance:
            return SolverResult(value=guess, converged=True, iterations=i, residual=error)
        if derivative == 0:
            break

        guess = guess - error / (derivative / 12.0)

    return SolverResult(value=guess, converged=False, iterations=max_iterations, residual=error)


def bisect_home_price(
    monthly_cost: Callable[[float], float],
    target: float,
    tolerance: float = 10.0,
    max_iterations: int = 100,
    initial_price: float = 100_000.0,
) -> SolverResult:
    """Largest home price whose monthly cost is within ``tolerance`` of ``target``.

    ``monthly_cost`` must be non-decreasing in price with cost(0) == 0. The
    upper bracket starts at ``initial_price`` and doubles until it overshoots
    the target; the bracket is then halved until the cost is close enough.
    """
    if target <= 0:
        return SolverResult(value=0.0, converged=True, iterations=0, residual=-target)

    lo, hi = 0.0, initial_price
    iterations = 0
    residual = monthly_cost(hi) - target

    while residual < 0:
        if abs(residual) < tolerance:
            return SolverResult(value=hi, converged=True, iterations=iterations, residual=residual)
        if iterations >= max_iterations:
            return SolverResult(value=hi, converged=False, iterations=iterations, residual=residual)
        lo, hi = hi, hi * 2.0
        residual = monthly_cost(hi) - target
        iterations += 1

    price = hi
    while iterations < max_iterations:
        if abs(residual) < tolerance:
            return SolverResult(value=price, converged=True, iterations=iterations, residual=residual)
        if residual > 0:
            hi = price
        else:
            lo = price
        price = (lo + hi) / 2.0
        residual = monthly_cost(price) - target
        iterations += 1

    converged = abs(residual) < tolerance
    return SolverResult(value=price, converged=converged, iterations=iterations, residual=residual)


def step_search_home_price(
    monthly_cost: Callable[[float], float],
    target: float,
    tolerance: float = 10.0,
    max_iterations: int = 100,
    initial_price: float = 100_000.0,
    initial_step: float = 50_000.0,
) -> SolverResult:
    """Legacy step search: overshoot steps back and halves the step,
    undershoot steps forward at the current step size."""
    price = initial_price
    step = initial_step
    residual = monthly_cost(price) - target

    for i in range(max_iterations):
        if abs(residual) < tolerance:
            return SolverResult(value=price, converged=True, iterations=i, residual=residual)
        if residual > 0:
            price -= step
            step /= 2.0
        else:
            price += step
        residual = monthly_cost(price) - target

    converged = abs(residual) < tolerance
    return SolverResult(value=price, converged=converged, iterations=max_iterations, residual=residual)
