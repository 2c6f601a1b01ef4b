"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Fleet Ledger"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8080"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Pricing
    COMMISSION_RATE: float = 0.3  # Share of the discounted price kept as commission
    INSURANCE_SHARE: float = 0.5  # Share of the commission paid to the insurer
    ASSISTANCE_FEE_PER_DAY: int = 100  # Minor currency units
    DEDUCTIBLE_REDUCTION_PER_DAY: int = 400  # Minor currency units

    # Reporting
    DEFAULT_REPORT_STYLE: str = "modifications"

    # Batch runner
    DEFAULT_INPUT_FILE: str = "data.json"
    DEFAULT_OUTPUT_FILE: str = "output.json"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
