from fastapi import APIRouter

router = APIRouter(tags=["health"])

CALCULATORS = [
    "loan",
    "amortization",
    "apr",
    "business-loan",
    "budget",
    "affordability",
    "refinance",
    "retirement",
    "social-security",
]


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "calculators": CALCULATORS,
    }
