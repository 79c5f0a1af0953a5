from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel

from calc_engine.forms import form_flag, form_number


class RefinanceRequest(BaseModel):
    # Current loan: either the balance/payment are known, or they are
    # derived from the original loan and the time remaining.
    know_balance: Annotated[bool, form_flag(True)] = True
    remaining_balance: Annotated[float, form_number(350_000, positive=True)] = 350_000
    current_payment: Annotated[float, form_number(2_500, positive=True)] = 2_500
    original_loan_amount: Annotated[float, form_number(400_000, positive=True)] = 400_000
    original_term: Annotated[float, form_number(30, positive=True)] = 30
    years_remaining: Annotated[float, form_number(25)] = 25
    months_remaining: Annotated[float, form_number(0)] = 0
    current_rate: Annotated[float, form_number(7.0)] = 7.0

    # New loan
    new_term: Annotated[float, form_number(30, positive=True)] = 30
    new_rate: Annotated[float, form_number(5.5)] = 5.5
    points: Annotated[float, form_number(0)] = 0
    closing_costs: Annotated[float, form_number(3_500)] = 3_500
    cash_out: Annotated[float, form_number(0)] = 0

    as_of: Optional[date] = None


class RefinanceResult(BaseModel):
    current_monthly_payment: float
    current_remaining_balance: float
    current_months_remaining: int
    current_total_interest: float
    current_payoff_date: Optional[date] = None
    new_monthly_payment: float
    new_loan_amount: float
    new_total_payment: float
    new_total_interest: float
    new_payoff_date: Optional[date] = None
    monthly_savings: float
    lifetime_savings: float
    points_cost: float
    total_closing_costs: float
    upfront_cost: float
    # None when the payment does not change: the costs are never recovered.
    # Dates are None when they fall outside the supported calendar.
    break_even_months: Optional[float] = None
    break_even_date: Optional[date] = None
    display: dict[str, str] = {}
