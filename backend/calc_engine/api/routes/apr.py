from fastapi import APIRouter, Response, status

from calc_engine.models.apr import APRRequest, APRResult
from calc_engine.services.apr_service import calculate_apr

router = APIRouter(tags=["apr"])


@router.post(
    "/apr",
    response_model=APRResult,
    responses={204: {"description": "Inputs do not describe a loan; keep the previous result"}},
)
def apr_endpoint(request: APRRequest):
    """Real APR of a loan including loaned and upfront fees."""
    result = calculate_apr(request)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result
