"""Retirement planning routes: one per calculator, plus all four at once."""
from fastapi import APIRouter

from calc_engine.models.retirement import (
    LongevityResult,
    RetirementNeed,
    RetirementPlan,
    RetirementRequest,
    SavingsProjection,
    WithdrawalPlan,
)
from calc_engine.services.retirement_service import (
    calculate_longevity,
    calculate_need,
    calculate_plan,
    calculate_savings,
    calculate_withdrawal,
)

router = APIRouter(prefix="/retirement", tags=["retirement"])


@router.post("/need", response_model=RetirementNeed)
def retirement_need(request: RetirementRequest):
    return calculate_need(request)


@router.post("/savings", response_model=SavingsProjection)
def retirement_savings(request: RetirementRequest):
    return calculate_savings(request)


@router.post("/withdrawal", response_model=WithdrawalPlan)
def retirement_withdrawal(request: RetirementRequest):
    return calculate_withdrawal(request)


@router.post("/longevity", response_model=LongevityResult)
def retirement_longevity(request: RetirementRequest):
    return calculate_longevity(request)


@router.post("/plan", response_model=RetirementPlan)
def retirement_plan(request: RetirementRequest):
    return calculate_plan(request)
