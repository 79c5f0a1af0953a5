"""Retirement savings math."""
from __future__ import annotations

import math


def real_rate(nominal_return: float, inflation: float) -> float:
    """Inflation-adjusted return: (1 + r) / (1 + i) - 1."""
    return (1.0 + nominal_return) / (1.0 + inflation) - 1.0


def whole_years(years: float) -> int:
    """Number of yearly steps covering ``years`` (a partial year counts)."""
    return max(int(math.ceil(years)), 0)


def required_savings(annual_need: float, years_in_retirement: float, rate: float) -> float:
    """Savings needed at retirement to fund ``annual_need`` at the start of each year.

    Summed year by year: sum_{i=0..Y-1} need / (1 + rate)^i.
    """
    return sum(annual_need / (1.0 + rate) ** i for i in range(whole_years(years_in_retirement)))


def sinking_fund_payment(target: float, monthly_rate: float, n_months: float) -> float:
    """Level monthly deposit that accumulates to ``target`` after ``n_months``."""
    if n_months <= 0 or target <= 0:
        return 0.0
    if monthly_rate <= 0:
        return target / n_months
    return target * monthly_rate / ((1.0 + monthly_rate) ** n_months - 1.0)


def project_fund(
    starting_balance: float,
    annual_return: float,
    annual_contribution: float,
    years: float,
) -> tuple[float, float]:
    """Grow a fund year by year: fund = fund * (1 + r) + contribution.

    Returns (ending fund, total contributed including the starting balance).
    """
    fund = starting_balance
    contributed = starting_balance
    for _ in range(whole_years(years)):
        fund = fund * (1.0 + annual_return) + annual_contribution
        contributed += annual_contribution
    return fund, contributed


def months_until_depleted(
    balance: float,
    monthly_return: float,
    monthly_withdrawal: float,
    max_months: int = 1200,
) -> tuple[int, float]:
    """Month-by-month drawdown until the balance hits zero or the cap.

    Returns (months simulated, ending balance).
    """
    months = 0
    while balance > 0 and months < max_months:
        balance = balance * (1.0 + monthly_return) - monthly_withdrawal
        months += 1
    return months, balance
