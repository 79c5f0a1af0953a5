"""Social Security claiming-age comparison service."""
from __future__ import annotations

import math

from calc_engine.finance.social_security import (
    EARLIEST_CLAIMING_AGE,
    LATEST_CLAIMING_AGE,
    benefit_at_age,
    break_even_age,
    full_retirement_age,
    lifetime_benefit,
)
from calc_engine.formatting import format_currency, format_percent
from calc_engine.models.social_security import (
    ClaimingAgeOption,
    SocialSecurityRequest,
    SocialSecurityResult,
)


def calculate_social_security(request: SocialSecurityRequest) -> SocialSecurityResult:
    fra = full_retirement_age(request.birth_year)
    pia = request.full_monthly_benefit
    cola = request.cola_adjustment / 100
    annual_return = request.investment_return / 100

    def option(age: float) -> ClaimingAgeOption:
        monthly = benefit_at_age(pia, age, fra)
        return ClaimingAgeOption(
            claiming_age=age,
            monthly_benefit=monthly,
            lifetime_benefit=lifetime_benefit(age, monthly, request.life_expectancy, cola, annual_return),
        )

    at_62 = option(EARLIEST_CLAIMING_AGE)
    at_fra = option(fra)
    at_70 = option(LATEST_CLAIMING_AGE)
    reduction = 1 - at_62.monthly_benefit / pia
    increase = at_70.monthly_benefit / pia - 1

    # Ties go to the earlier age
    best = at_62
    for candidate in (at_fra, at_70):
        if candidate.lifetime_benefit > best.lifetime_benefit:
            best = candidate

    result = SocialSecurityResult(
        full_retirement_age=fra,
        reduction_at_62=reduction * 100,
        increase_at_70=increase * 100,
        at_62=at_62,
        at_full_retirement_age=at_fra,
        at_70=at_70,
        optimal_age=math.floor(best.claiming_age + 0.5),  # half years round up
        break_even_age_62_vs_fra=break_even_age(
            EARLIEST_CLAIMING_AGE, at_62.monthly_benefit, fra, at_fra.monthly_benefit
        ),
        break_even_age_fra_vs_70=break_even_age(
            fra, at_fra.monthly_benefit, LATEST_CLAIMING_AGE, at_70.monthly_benefit
        ),
    )
    result.display = {
        "monthly_benefit_at_62": format_currency(at_62.monthly_benefit, 0),
        "monthly_benefit_at_fra": format_currency(at_fra.monthly_benefit, 0),
        "monthly_benefit_at_70": format_currency(at_70.monthly_benefit, 0),
        "reduction_at_62": format_percent(reduction * 100),
        "increase_at_70": format_percent(increase * 100),
    }
    return result
