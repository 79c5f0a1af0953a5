from fastapi import APIRouter

from calc_engine.models.affordability import (
    BudgetAffordabilityRequest,
    HomePriceSolution,
    IncomeAffordabilityRequest,
)
from calc_engine.services.affordability_service import (
    calculate_budget_affordability,
    calculate_income_affordability,
)

router = APIRouter(tags=["affordability"])


@router.post("/affordability/income", response_model=HomePriceSolution)
def income_affordability(request: IncomeAffordabilityRequest):
    """Maximum home price under front-end and back-end debt-to-income limits."""
    return calculate_income_affordability(request)


@router.post("/affordability/budget", response_model=HomePriceSolution)
def budget_affordability(request: BudgetAffordabilityRequest):
    """Maximum home price for a fixed monthly housing budget."""
    return calculate_budget_affordability(request)
