"""
Environment configuration for the back-office service.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class ReassignmentPolicy(str, Enum):
    """What to do when a fee structure is applied to an already-assigned student."""
    SKIP = "skip"
    ERROR = "error"
    DUPLICATE = "duplicate"


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = Field(default="Education Back Office", alias="PROJECT_NAME")
    API_VERSION: str = Field(default="v1", alias="PROJECT_VERSION")
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = ["*"]

    # Database configuration
    DATABASE_URL: str = "sqlite:///./backoffice.db"
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10
    DB_ECHO: bool = False
    DB_CONNECT_ARGS: Dict[str, Any] = {}

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_FILE: Optional[str] = None
    LOG_SQL_QUERIES: bool = False
    ENABLE_STRUCTURED_LOGGING: bool = True

    # Business logic
    CURRENCY: str = "INR"
    FEE_DEFAULT_DUE_DAYS: int = 30
    FEE_REASSIGNMENT_POLICY: ReassignmentPolicy = ReassignmentPolicy.SKIP
    OVERDUE_ALERT_DAYS: int = 30
    DEFAULT_GST_PERCENTAGE: float = 18.0
    INVOICE_NUMBER_PREFIX: str = "INV-"
    ADMISSION_NUMBER_PREFIX: str = "ADM"
    RECEIPT_NUMBER_PREFIX: str = "RCP"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        value = str(v).upper()
        if value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return value

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        value = str(v).lower()
        if value not in {"json", "text"}:
            raise ValueError(f"Invalid LOG_FORMAT: {v}")
        return value

    @field_validator("FEE_DEFAULT_DUE_DAYS", "OVERDUE_ALERT_DAYS")
    @classmethod
    def validate_non_negative_days(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Day counts cannot be negative")
        return v

    def get_database_url(self) -> str:
        """Return the SQLAlchemy database URL."""
        return self.DATABASE_URL


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


settings = get_settings()
