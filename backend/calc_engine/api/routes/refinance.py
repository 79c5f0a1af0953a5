from fastapi import APIRouter

from calc_engine.models.refinance import RefinanceRequest, RefinanceResult
from calc_engine.services.refinance_service import calculate_refinance

router = APIRouter(tags=["refinance"])


@router.post("/refinance", response_model=RefinanceResult)
def refinance_endpoint(request: RefinanceRequest):
    """Compare the current loan against a refinance, including break-even."""
    return calculate_refinance(request)
