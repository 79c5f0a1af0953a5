"""Loan math: periodic rates, level payments, amortization schedules.

All rates are decimals (0.06 for 6%). Schedules are returned unrounded so
that principal portions sum back to the original balance.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Optional

import pandas as pd

from calc_engine.models.common import PERIODS_PER_YEAR, AmortizationEntry
from calc_engine.models.loan import AnnualEntry, ScheduleEntry

_CONTINUOUS = "continuously"


def _key(frequency) -> str:
    return getattr(frequency, "value", frequency)


def periods_per_year(frequency) -> int:
    """Periods per year for a frequency. Unknown and interest-only mean monthly."""
    return PERIODS_PER_YEAR.get(_key(frequency), 12)


def is_continuous(frequency) -> bool:
    return _key(frequency) == _CONTINUOUS


def rate_per_payment(annual_rate: float, compounding, payments_per_year: int) -> float:
    """Effective interest rate per payment period.

    Continuous:  e^(r/f) - 1
    Discrete:    (1 + r/c)^(c/f) - 1
    """
    if is_continuous(compounding):
        return math.exp(annual_rate / payments_per_year) - 1.0
    c = periods_per_year(compounding)
    return (1.0 + annual_rate / c) ** (c / payments_per_year) - 1.0


def calculate_payment(principal: float, rate: float, n_payments: int) -> float:
    """Level payment that retires ``principal`` in ``n_payments`` periods.

    PMT = P * r * (1+r)^n / ((1+r)^n - 1), or P / n when r == 0.
    """
    if n_payments <= 0 or principal <= 0:
        return 0.0
    if rate == 0:
        return principal / n_payments
    growth = (1.0 + rate) ** n_payments
    return principal * rate * growth / (growth - 1.0)


def calculate_monthly_payment(principal: float, annual_rate: float, n_months: int) -> float:
    """Level monthly payment with monthly compounding."""
    return calculate_payment(principal, annual_rate / 12.0, n_months)


def amortization_schedule(
    principal: float,
    payment: float,
    rate: float,
    n_payments: int,
) -> list[AmortizationEntry]:
    """Period-by-period split of each payment into interest and principal.

    The principal portion never exceeds the outstanding balance, and the
    final entry retires whatever balance remains so it ends at exactly 0.
    """
    schedule: list[AmortizationEntry] = []
    balance = principal

    for period in range(1, n_payments + 1):
        interest = balance * rate
        if period == n_payments:
            principal_paid = balance
        else:
            principal_paid = min(max(payment - interest, 0.0), balance)
        balance = max(balance - principal_paid, 0.0)

        schedule.append(AmortizationEntry(
            period=period,
            payment=interest + principal_paid,
            interest=interest,
            principal=principal_paid,
            balance=balance,
        ))

    return schedule


def remaining_balance(principal: float, rate: float, payment: float, periods_paid: int) -> float:
    """Balance after ``periods_paid`` level payments, floored at 0."""
    balance = principal
    for _ in range(max(periods_paid, 0)):
        balance -= payment - balance * rate
    return max(balance, 0.0)


def future_value(principal: float, annual_rate: float, years: float, compounding) -> float:
    """Lump sum grown at the given compounding: P(1 + r/c)^(ct) or P e^(rt)."""
    if is_continuous(compounding):
        return principal * math.exp(annual_rate * years)
    c = periods_per_year(compounding)
    return principal * (1.0 + annual_rate / c) ** (c * years)


def present_value(face_value: float, annual_rate: float, years: float, compounding) -> float:
    """Inverse of future_value: the amount today that grows to ``face_value``."""
    if is_continuous(compounding):
        return face_value / math.exp(annual_rate * years)
    c = periods_per_year(compounding)
    return face_value / (1.0 + annual_rate / c) ** (c * years)


def add_months(start: date, months: int) -> Optional[date]:
    """``start`` moved forward by whole months, or None past the representable range."""
    try:
        return (pd.Timestamp(start) + pd.DateOffset(months=int(months))).date()
    except (OverflowError, ValueError):
        # pandas OutOfBoundsDatetime is a ValueError
        return None


def extra_payment_schedule(
    principal: float,
    annual_rate: float,
    n_months: int,
    start: date,
    extra_monthly: float = 0.0,
    extra_monthly_start: int = 1,
    extra_yearly: float = 0.0,
    extra_yearly_start: int = 1,
) -> tuple[float, list[ScheduleEntry]]:
    """Monthly schedule with optional recurring extra principal payments.

    The extra monthly amount is paid every month from ``extra_monthly_start``.
    The extra yearly amount is paid in month ``extra_yearly_start`` and every
    twelfth month after it. Stops once the balance is under a cent.

    Returns (base monthly payment, schedule).
    """
    monthly_rate = annual_rate / 12.0
    payment = calculate_payment(principal, monthly_rate, n_months)
    if n_months <= 0 or principal <= 0:
        return payment, []

    max_months = n_months * 2
    rows: list[dict] = []
    balance = principal
    month_num = 1

    while balance > 0.01 and month_num <= max_months:
        interest = balance * monthly_rate

        extra = 0.0
        if extra_monthly > 0 and month_num >= extra_monthly_start:
            extra += extra_monthly
        if (
            extra_yearly > 0
            and month_num >= extra_yearly_start
            and (month_num - extra_yearly_start) % 12 == 0
        ):
            extra += extra_yearly

        principal_paid = payment - interest + extra
        if principal_paid > balance:
            principal_paid = balance
        balance -= principal_paid

        rows.append(dict(
            period=month_num,
            payment=interest + principal_paid,
            interest=interest,
            principal=principal_paid,
            balance=max(balance, 0.0),
            extra_payment=max(principal_paid - (payment - interest), 0.0),
        ))
        month_num += 1

    # Calendar dates only for the months actually paid
    dates = pd.date_range(start=pd.Timestamp(start.year, start.month, 1), periods=len(rows), freq="MS")
    schedule = [ScheduleEntry(date=d.date(), **row) for d, row in zip(dates, rows)]
    return payment, schedule


def annual_summary(schedule: list[AmortizationEntry], first_year: int) -> list[AnnualEntry]:
    """Roll a monthly schedule up into consecutive 12-payment blocks."""
    if not schedule:
        return []

    df = pd.DataFrame([e.model_dump(include={"period", "payment", "interest", "principal", "balance"})
                       for e in schedule])
    df["block"] = (df["period"] - 1) // 12
    grouped = df.groupby("block").agg(
        principal=("principal", "sum"),
        interest=("interest", "sum"),
        total_payment=("payment", "sum"),
        balance=("balance", "last"),
    )

    return [
        AnnualEntry(
            year=first_year + int(block),
            principal=float(row["principal"]),
            interest=float(row["interest"]),
            total_payment=float(row["total_payment"]),
            balance=float(row["balance"]),
        )
        for block, row in grouped.iterrows()
    ]
