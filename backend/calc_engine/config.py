from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # Iterative solver limits
    APR_TOLERANCE: float = 1e-6
    APR_MAX_ITERATIONS: int = 100
    AFFORDABILITY_TOLERANCE: float = 10.0
    AFFORDABILITY_MAX_ITERATIONS: int = 100
    LONGEVITY_MAX_MONTHS: int = 1200

    # Amortization calendar
    MIN_START_YEAR: int = 1900
    MAX_START_YEAR: int = 2100
    MAX_TERM_MONTHS: int = 1200

    SAFE_WITHDRAWAL_RATE: float = 0.04

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
