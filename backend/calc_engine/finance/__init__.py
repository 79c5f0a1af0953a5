"""Financial math: loan amortization, solvers, retirement and Social Security."""
from calc_engine.finance.amortization import (
    amortization_schedule,
    calculate_monthly_payment,
    calculate_payment,
    future_value,
    present_value,
    rate_per_payment,
)
from calc_engine.finance.solvers import bisect_home_price, solve_apr, step_search_home_price
from calc_engine.finance.social_security import full_retirement_age

__all__ = [
    "amortization_schedule",
    "calculate_monthly_payment",
    "calculate_payment",
    "future_value",
    "present_value",
    "rate_per_payment",
    "bisect_home_price",
    "solve_apr",
    "step_search_home_price",
    "full_retirement_age",
]
