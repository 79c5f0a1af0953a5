from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel

from calc_engine.forms import form_number


class SearchMethod(str, Enum):
    """Home price search algorithm."""
    bisection = "bisection"  # Bracketed bisection
    step = "step"            # Legacy step search: halve the step on overshoot only


class _HomeLoanTerms(BaseModel):
    loan_term: Annotated[float, form_number(30, positive=True)] = 30
    interest_rate: Annotated[float, form_number(7.0)] = 7.0
    down_payment_percent: Annotated[float, form_number(20)] = 20
    property_tax_percent: Annotated[float, form_number(1.2)] = 1.2
    hoa_fee: Annotated[float, form_number(100)] = 100
    insurance: Annotated[float, form_number(150)] = 150
    search_method: SearchMethod = SearchMethod.bisection


class IncomeAffordabilityRequest(_HomeLoanTerms):
    annual_income: Annotated[float, form_number(85_000, positive=True)] = 85_000
    monthly_debt: Annotated[float, form_number(500)] = 500
    dti_ratio: Annotated[float, form_number(36, positive=True)] = 36
    front_end_ratio: Annotated[float, form_number(28, positive=True)] = 28


class BudgetAffordabilityRequest(_HomeLoanTerms):
    monthly_budget: Annotated[float, form_number(2_500, positive=True)] = 2_500
    maintenance_percent: Annotated[float, form_number(1.0)] = 1.0


class HomePriceSolution(BaseModel):
    max_home_price: float
    down_payment: float
    loan_amount: float
    monthly_principal_interest: float
    monthly_property_tax: float
    monthly_hoa: float
    monthly_insurance: float
    monthly_maintenance: float = 0.0
    total_monthly_payment: float
    # Income mode only
    max_monthly_payment: Optional[float] = None
    monthly_gross_income: Optional[float] = None
    front_end_ratio: Optional[float] = None
    back_end_ratio: Optional[float] = None
    converged: bool
    iterations: int
    display: dict[str, str] = {}
