from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel

from calc_engine.forms import form_number
from calc_engine.models.common import (
    AmortizationEntry,
    Compounding,
    CompoundingFrequency,
    PaymentFrequency,
    Payments,
)


class BusinessLoanRequest(BaseModel):
    loan_amount: Annotated[float, form_number(0)] = 50_000
    interest_rate: Annotated[float, form_number(0)] = 7.5
    loan_term_years: Annotated[float, form_number(0)] = 5
    loan_term_months: Annotated[float, form_number(0)] = 0
    compound_frequency: Compounding = CompoundingFrequency.monthly
    payment_frequency: Payments = PaymentFrequency.monthly
    origination_fee: Annotated[float, form_number(0)] = 1250
    documentation_fee: Annotated[float, form_number(0)] = 500
    other_fees: Annotated[float, form_number(0)] = 250
    as_of: Optional[date] = None  # Payoff date is counted from here, default today


class BusinessLoanResult(BaseModel):
    loan_amount: float
    payment_amount: float       # Per payment at the chosen frequency
    monthly_payment: float      # Monthly equivalent of payment_amount
    number_of_payments: int
    total_payment: float
    total_interest: float
    total_fees: float
    interest_plus_fees: float
    real_apr: Optional[float] = None
    payoff_date: Optional[date] = None
    schedule: list[AmortizationEntry] = []
    display: dict[str, str] = {}
