from fastapi import APIRouter

from calc_engine.models.budget import BudgetRequest, BudgetResult
from calc_engine.services.budget_service import calculate_budget

router = APIRouter(tags=["budget"])


@router.post("/budget", response_model=BudgetResult)
def budget_endpoint(request: BudgetRequest):
    return calculate_budget(request)
