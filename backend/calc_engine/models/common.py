from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator


class CompoundingFrequency(str, Enum):
    """How often interest compounds."""
    annually = "annually"
    semiannually = "semiannually"
    quarterly = "quarterly"
    monthly = "monthly"
    semimonthly = "semimonthly"
    biweekly = "biweekly"
    weekly = "weekly"
    daily = "daily"
    continuously = "continuously"


class PaymentFrequency(str, Enum):
    """How often payments are made. interest_only pays interest monthly."""
    annually = "annually"
    semiannually = "semiannually"
    quarterly = "quarterly"
    monthly = "monthly"
    semimonthly = "semimonthly"
    biweekly = "biweekly"
    weekly = "weekly"
    daily = "daily"
    interest_only = "interest_only"


PERIODS_PER_YEAR: dict[str, int] = {
    "annually": 1,
    "semiannually": 2,
    "quarterly": 4,
    "monthly": 12,
    "semimonthly": 24,
    "biweekly": 26,
    "weekly": 52,
    "daily": 365,
}

_ALIASES = {
    "yearly": "annually",
    "interestonly": "interest_only",
    # Numeric periods-per-year, as the APR form sends them
    "1": "annually",
    "2": "semiannually",
    "4": "quarterly",
    "12": "monthly",
    "24": "semimonthly",
    "26": "biweekly",
    "52": "weekly",
    "365": "daily",
}


def _frequency_validator(enum_cls: type[Enum]) -> BeforeValidator:
    """Normalise spellings like 'Semi-Annually'; unknown values become monthly."""
    valid = {m.value for m in enum_cls}

    def _parse(value: Any) -> str:
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(int(value))
        text = str(value).strip().lower()
        for ch in ("-", "_", " "):
            text = text.replace(ch, "")
        text = _ALIASES.get(text, text)
        return text if text in valid else "monthly"

    return BeforeValidator(_parse)


Compounding = Annotated[CompoundingFrequency, _frequency_validator(CompoundingFrequency)]
Payments = Annotated[PaymentFrequency, _frequency_validator(PaymentFrequency)]


class SolverResult(BaseModel):
    """Outcome of a capped iterative search."""
    value: float
    converged: bool
    iterations: int
    residual: Optional[float] = None


class AmortizationEntry(BaseModel):
    """One payment in an amortization schedule."""
    period: int
    payment: float
    interest: float
    principal: float
    balance: float
