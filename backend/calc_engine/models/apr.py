from typing import Annotated, Optional

from pydantic import BaseModel

from calc_engine.forms import form_number
from calc_engine.models.common import Compounding, CompoundingFrequency


class APRRequest(BaseModel):
    loan_amount: Annotated[float, form_number(100_000, positive=True)] = 100_000
    loan_term_years: Annotated[float, form_number(0)] = 10
    loan_term_months: Annotated[float, form_number(0)] = 0
    interest_rate: Annotated[float, form_number(6.0)] = 6.0
    compounding_frequency: Compounding = CompoundingFrequency.monthly
    loaned_fees: Annotated[float, form_number(0)] = 0    # Added to the financed balance
    upfront_fees: Annotated[float, form_number(0)] = 1500  # Deducted from the amount received


class APRResult(BaseModel):
    """APR including fees. real_apr is None when the net amount cannot be priced."""
    real_apr: Optional[float] = None
    nominal_rate: float
    monthly_payment: float
    total_payments: int
    total_paid: float
    total_interest: float
    amount_financed: float
    amount_received: float
    converged: bool
    iterations: int
    display: dict[str, str] = {}
