import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calc_engine.config import settings
from calc_engine.api.routes import (
    affordability,
    apr,
    budget,
    business_loan,
    health,
    loan,
    refinance,
    retirement,
    social_security,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Calculator engine started (%d routes)", len(app.routes))
    yield


app = FastAPI(title="Calculator Engine", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(loan.router, prefix="/api")
app.include_router(apr.router, prefix="/api")
app.include_router(business_loan.router, prefix="/api")
app.include_router(budget.router, prefix="/api")
app.include_router(affordability.router, prefix="/api")
app.include_router(refinance.router, prefix="/api")
app.include_router(retirement.router, prefix="/api")
app.include_router(social_security.router, prefix="/api")
