from fastapi import APIRouter, Response, status

from calc_engine.models.business_loan import BusinessLoanRequest, BusinessLoanResult
from calc_engine.services.business_loan_service import calculate_business_loan

router = APIRouter(tags=["business-loan"])


@router.post(
    "/business-loan",
    response_model=BusinessLoanResult,
    responses={204: {"description": "Inputs do not describe a loan; keep the previous result"}},
)
def business_loan_endpoint(request: BusinessLoanRequest):
    """Business loan payments, fees, real APR and amortization schedule."""
    result = calculate_business_loan(request)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result
