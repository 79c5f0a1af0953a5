from fastapi import APIRouter

from calc_engine.models.social_security import SocialSecurityRequest, SocialSecurityResult
from calc_engine.services.social_security_service import calculate_social_security

router = APIRouter(tags=["social-security"])


@router.post("/social-security", response_model=SocialSecurityResult)
def social_security_endpoint(request: SocialSecurityRequest):
    """Benefits at 62, full retirement age and 70, with break-even ages."""
    return calculate_social_security(request)
