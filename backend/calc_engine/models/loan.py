from datetime import date
from enum import Enum
from typing import Annotated

from pydantic import BaseModel

from calc_engine.forms import form_int, form_number
from calc_engine.models.common import (
    AmortizationEntry,
    Compounding,
    CompoundingFrequency,
    PaymentFrequency,
    Payments,
)


class LoanCalculatorType(str, Enum):
    """Which loan computation to run."""
    amortized = "amortized"  # Fixed periodic payments
    deferred = "deferred"    # Single lump sum due at maturity
    bond = "bond"            # Present value of a predetermined face value


class LoanRequest(BaseModel):
    calculator_type: LoanCalculatorType = LoanCalculatorType.amortized
    loan_amount: Annotated[float, form_number(100_000, positive=True)] = 100_000
    loan_term_years: Annotated[float, form_number(0)] = 10
    loan_term_months: Annotated[float, form_number(0)] = 0
    interest_rate: Annotated[float, form_number(6.0)] = 6.0
    compound_frequency: Compounding = CompoundingFrequency.monthly
    payment_frequency: Payments = PaymentFrequency.monthly


class LoanResult(BaseModel):
    """Result of an amortized, deferred or bond calculation.

    payment_amount is the periodic payment (amortized), the amount due at
    maturity (deferred) or the amount received today (bond).
    """
    calculator_type: LoanCalculatorType
    payment_amount: float
    total_payments: float
    total_interest: float
    principal_percentage: float
    interest_percentage: float
    number_of_payments: int
    rate_per_payment: float
    schedule: list[AmortizationEntry] = []
    display: dict[str, str] = {}


class AmortizationRequest(BaseModel):
    loan_amount: Annotated[float, form_number(250_000, positive=True)] = 250_000
    loan_term_years: Annotated[float, form_number(30)] = 30
    loan_term_months: Annotated[float, form_number(0)] = 0
    interest_rate: Annotated[float, form_number(6.5)] = 6.5
    start_month: Annotated[int, form_int(1, positive=True)] = 1
    start_year: Annotated[int, form_int(2025, positive=True)] = 2025
    extra_monthly_payment: Annotated[float, form_number(0)] = 0
    extra_monthly_start: Annotated[int, form_int(1, positive=True)] = 1
    extra_yearly_payment: Annotated[float, form_number(0)] = 0
    extra_yearly_start: Annotated[int, form_int(1, positive=True)] = 1


class ScheduleEntry(AmortizationEntry):
    """Amortization entry tied to a calendar month."""
    date: date
    extra_payment: float = 0.0


class AnnualEntry(BaseModel):
    year: int
    principal: float
    interest: float
    total_payment: float
    balance: float


class AmortizationResult(BaseModel):
    monthly_payment: float
    total_payment: float
    total_interest: float
    payoff_date: date
    months_to_payoff: int
    interest_saved: float
    schedule: list[ScheduleEntry]
    annual_schedule: list[AnnualEntry]
    display: dict[str, str] = {}
