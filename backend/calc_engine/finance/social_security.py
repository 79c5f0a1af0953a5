"""Social Security claiming-age rules.

Full retirement age (FRA) by birth year:

* before 1943: 65
* 1943-1954: 66
* 1955-1959: 66 plus 2 months for each year after 1954
* 1960 and later: 67

Claiming early reduces the benefit by 5/9 of 1% for each of the first 36
months before FRA and 5/12 of 1% for each month beyond that. Claiming after
FRA earns delayed retirement credits of 2/3 of 1% per month (8% a year),
up to age 70.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

EARLIEST_CLAIMING_AGE = 62
LATEST_CLAIMING_AGE = 70


def full_retirement_age(birth_year: int) -> float:
    if birth_year < 1943:
        return 65.0
    if birth_year <= 1954:
        return 66.0
    if birth_year < 1960:
        return 66.0 + (birth_year - 1954) * 2 / 12.0
    return 67.0


def early_reduction(months_early: float) -> float:
    """Fractional benefit reduction for claiming ``months_early`` before FRA."""
    if months_early <= 0:
        return 0.0
    if months_early <= 36:
        return months_early * (5 / 9) * 0.01
    return 36 * (5 / 9) * 0.01 + (months_early - 36) * (5 / 12) * 0.01


def delayed_credit(months_delayed: float) -> float:
    """Fractional benefit increase for claiming ``months_delayed`` after FRA."""
    return max(months_delayed, 0.0) * (2 / 3) * 0.01


def benefit_at_age(full_benefit: float, claiming_age: float, fra: float) -> float:
    """Monthly benefit when claiming at ``claiming_age`` (clamped to 62-70)."""
    age = min(max(claiming_age, EARLIEST_CLAIMING_AGE), LATEST_CLAIMING_AGE)
    months = round((age - fra) * 12)
    if months < 0:
        return full_benefit * (1.0 - early_reduction(-months))
    return full_benefit * (1.0 + delayed_credit(months))


def lifetime_benefit(
    start_age: float,
    monthly_benefit: float,
    end_age: float,
    cola: float,
    annual_return: float,
) -> float:
    """Value at ``end_age`` of all benefits received from ``start_age``.

    Each payment is raised by COLA once per completed year of receipt and
    then reinvested at ``annual_return`` (compounded monthly) until
    ``end_age``. Every claiming age is therefore valued at the same date.
    """
    months = int(round((end_age - start_age) * 12))
    if months <= 0:
        return 0.0
    m = np.arange(1, months + 1)
    amounts = monthly_benefit * (1.0 + cola) ** ((m - 1) // 12)
    growth = (1.0 + annual_return / 12.0) ** (months - m)
    return float(np.sum(amounts * growth))


def break_even_age(
    early_age: float,
    early_benefit: float,
    later_age: float,
    later_benefit: float,
) -> Optional[float]:
    """Age at which the later claim's cumulative (undiscounted) benefits catch up.

    None when the later benefit is not larger, since it never catches up.
    """
    difference = later_benefit - early_benefit
    if difference <= 0:
        return None
    head_start = early_benefit * (later_age - early_age) * 12
    return later_age + head_start / difference / 12
