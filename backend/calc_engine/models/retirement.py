from typing import Annotated

from pydantic import BaseModel

from calc_engine.forms import form_number


class RetirementRequest(BaseModel):
    """Inputs shared by the four retirement calculators. Rates are percent."""
    current_age: Annotated[float, form_number(35, positive=True)] = 35
    retirement_age: Annotated[float, form_number(65, positive=True)] = 65
    life_expectancy: Annotated[float, form_number(85, positive=True)] = 85
    current_income: Annotated[float, form_number(75_000, positive=True)] = 75_000
    income_increase_rate: Annotated[float, form_number(2)] = 2
    retirement_income_percent: Annotated[float, form_number(80, positive=True)] = 80
    investment_return: Annotated[float, form_number(7)] = 7
    inflation_rate: Annotated[float, form_number(3)] = 3
    other_income: Annotated[float, form_number(2_000)] = 2_000  # monthly, in retirement
    current_savings: Annotated[float, form_number(100_000)] = 100_000

    # Savings projection
    amount_needed: Annotated[float, form_number(1_500_000, positive=True)] = 1_500_000
    future_savings_percent: Annotated[float, form_number(15)] = 15

    # Withdrawal plan
    annual_contribution: Annotated[float, form_number(10_000)] = 10_000
    monthly_contribution: Annotated[float, form_number(833)] = 833

    # Longevity
    savings_amount: Annotated[float, form_number(1_000_000, positive=True)] = 1_000_000
    monthly_withdrawal: Annotated[float, form_number(4_000, positive=True)] = 4_000
    withdrawal_return: Annotated[float, form_number(5)] = 5


class RetirementNeed(BaseModel):
    annual_income_needed: float
    annual_income_from_savings: float
    total_needed: float
    future_value_of_savings: float
    additional_savings_needed: float
    monthly_contribution: float
    years_to_retirement: float
    years_in_retirement: float
    display: dict[str, str] = {}


class SavingsProjection(BaseModel):
    annual_savings: float
    monthly_savings: float
    projected_retirement_fund: float
    total_contributions: float
    total_interest_earned: float
    amount_needed: float
    shortfall: float
    on_track: bool
    display: dict[str, str] = {}


class WithdrawalPlan(BaseModel):
    projected_fund: float
    withdrawal_rate: float
    annual_withdrawal: float
    monthly_withdrawal: float
    display: dict[str, str] = {}


class LongevityResult(BaseModel):
    months_lasting: int
    years_until_depleted: int
    months_until_depleted: int
    depleted: bool       # False when the fund outlived the simulation cap
    ending_balance: float
    display: dict[str, str] = {}


class RetirementPlan(BaseModel):
    need: RetirementNeed
    savings: SavingsProjection
    withdrawal: WithdrawalPlan
    longevity: LongevityResult
