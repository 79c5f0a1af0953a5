from fastapi import APIRouter, Response, status

from calc_engine.models.loan import AmortizationRequest, AmortizationResult, LoanRequest, LoanResult
from calc_engine.services.loan_service import calculate_amortization, calculate_loan

router = APIRouter(tags=["loans"])


@router.post(
    "/loan",
    response_model=LoanResult,
    responses={204: {"description": "Inputs do not describe a loan; keep the previous result"}},
)
def loan_endpoint(request: LoanRequest):
    """Amortized, deferred-payment or bond loan calculation."""
    result = calculate_loan(request)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result


@router.post(
    "/amortization",
    response_model=AmortizationResult,
    responses={204: {"description": "Inputs do not describe a loan; keep the previous result"}},
)
def amortization_endpoint(request: AmortizationRequest):
    """Monthly amortization schedule with optional extra payments."""
    result = calculate_amortization(request)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result
