from typing import Annotated, Optional

from pydantic import BaseModel

from calc_engine.forms import form_int, form_number


class SocialSecurityRequest(BaseModel):
    birth_year: Annotated[int, form_int(1960, positive=True)] = 1960
    life_expectancy: Annotated[int, form_int(85, positive=True)] = 85
    full_monthly_benefit: Annotated[float, form_number(2_000, positive=True)] = 2_000
    investment_return: Annotated[float, form_number(3)] = 3    # percent per year
    cola_adjustment: Annotated[float, form_number(2.5)] = 2.5  # percent per year


class ClaimingAgeOption(BaseModel):
    claiming_age: float
    monthly_benefit: float
    lifetime_benefit: float


class SocialSecurityResult(BaseModel):
    full_retirement_age: float
    reduction_at_62: float   # percent
    increase_at_70: float    # percent
    at_62: ClaimingAgeOption
    at_full_retirement_age: ClaimingAgeOption
    at_70: ClaimingAgeOption
    optimal_age: int
    # None when the later claim never catches up
    break_even_age_62_vs_fra: Optional[float] = None
    break_even_age_fra_vs_70: Optional[float] = None
    display: dict[str, str] = {}
