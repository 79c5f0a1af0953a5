from enum import Enum
from typing import Annotated

from pydantic import BaseModel

from calc_engine.forms import form_number

# Every budget field falls back to 0 when left blank or mistyped.
Amount = Annotated[float, form_number(0)]


class BudgetStatus(str, Enum):
    surplus = "surplus"
    balanced = "balanced"
    deficit = "deficit"


class Income(BaseModel):
    salary: Amount = 75_000            # annual
    pension: Amount = 0                # monthly
    investment_income: Amount = 2_400  # annual
    other_income: Amount = 0           # monthly
    tax_rate: Amount = 25              # percent


class HousingExpenses(BaseModel):
    mortgage: Amount = 2_000
    property_tax: Amount = 400
    home_insurance: Amount = 150
    utilities: Amount = 250
    home_maintenance: Amount = 200


class TransportationExpenses(BaseModel):
    auto_loan: Amount = 450
    auto_insurance: Amount = 120
    gasoline: Amount = 200
    auto_maintenance: Amount = 100
    parking: Amount = 50


class DebtPayments(BaseModel):
    credit_cards: Amount = 200
    student_loans: Amount = 350
    personal_loans: Amount = 0


class LivingExpenses(BaseModel):
    groceries: Amount = 600
    dining_out: Amount = 300
    clothing: Amount = 150
    household_supplies: Amount = 100


class HealthcareExpenses(BaseModel):
    health_insurance: Amount = 400
    medical_expenses: Amount = 150


class ChildrenExpenses(BaseModel):
    childcare: Amount = 0
    tuition: Amount = 0
    child_support: Amount = 0


class SavingsContributions(BaseModel):
    retirement_401k: Amount = 625
    college_savings: Amount = 0
    investments: Amount = 200
    emergency_fund: Amount = 300


class MiscExpenses(BaseModel):
    pets: Amount = 100
    gifts: Amount = 100
    entertainment: Amount = 200
    travel: Amount = 150
    other_expenses: Amount = 100


class BudgetRequest(BaseModel):
    income: Income = Income()
    housing: HousingExpenses = HousingExpenses()
    transportation: TransportationExpenses = TransportationExpenses()
    debt: DebtPayments = DebtPayments()
    living: LivingExpenses = LivingExpenses()
    healthcare: HealthcareExpenses = HealthcareExpenses()
    children: ChildrenExpenses = ChildrenExpenses()
    savings: SavingsContributions = SavingsContributions()
    misc: MiscExpenses = MiscExpenses()


class BudgetResult(BaseModel):
    """Monthly budget summary. Percentages are 0-100."""
    total_income: float
    after_tax_income: float
    category_totals: dict[str, float]
    total_expenses: float
    net_income: float
    savings_rate: float
    housing_percent: float
    transportation_percent: float
    food_percent: float
    status: BudgetStatus
    display: dict[str, str] = {}
