"""Budget service: sums line items by category and classifies the month."""
from __future__ import annotations

from calc_engine.formatting import format_currency, format_percent
from calc_engine.models.budget import BudgetRequest, BudgetResult, BudgetStatus

EXPENSE_CATEGORIES = (
    "housing",
    "transportation",
    "debt",
    "living",
    "healthcare",
    "children",
    "savings",
    "misc",
)

# Net income within this many dollars of zero counts as balanced.
_BALANCE_BAND = 100.0


def classify(net_income: float) -> BudgetStatus:
    if net_income > _BALANCE_BAND:
        return BudgetStatus.surplus
    if net_income < -_BALANCE_BAND:
        return BudgetStatus.deficit
    return BudgetStatus.balanced


def _pct(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def calculate_budget(request: BudgetRequest) -> BudgetResult:
    income = request.income
    monthly_income = (
        income.salary / 12
        + income.pension
        + income.investment_income / 12
        + income.other_income
    )
    after_tax = monthly_income * (1 - income.tax_rate / 100)

    category_totals = {
        name: sum(getattr(request, name).model_dump().values())
        for name in EXPENSE_CATEGORIES
    }
    total_expenses = sum(category_totals.values())
    net_income = after_tax - total_expenses
    food = request.living.groceries + request.living.dining_out

    result = BudgetResult(
        total_income=monthly_income,
        after_tax_income=after_tax,
        category_totals=category_totals,
        total_expenses=total_expenses,
        net_income=net_income,
        savings_rate=_pct(category_totals["savings"], after_tax),
        housing_percent=_pct(category_totals["housing"], monthly_income),
        transportation_percent=_pct(category_totals["transportation"], after_tax),
        food_percent=_pct(food, after_tax),
        status=classify(net_income),
    )
    result.display = {
        "total_income": format_currency(monthly_income, 0),
        "after_tax_income": format_currency(after_tax, 0),
        "total_expenses": format_currency(total_expenses, 0),
        "net_income": format_currency(net_income, 0),
        "savings_rate": format_percent(result.savings_rate),
    }
    return result
