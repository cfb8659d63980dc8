"""
Configuration management for the account service
"""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-this-secret-in-prod"


class Settings(BaseSettings):
    """Account service configuration loaded from environment variables"""

    # Server Configuration
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./app.db"

    # Token Configuration
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRY_SECONDS: int = 24 * 60 * 60

    # Email Verification
    EMAIL_VERIFICATION_REQUIRED: bool = False
    EMAIL_VERIFICATION_TTL_HOURS: int = 24
    MAIL_FROM: str = "no-reply@localhost"

    # Links
    FRONTEND_URL: Optional[str] = None
    BACKEND_URL: str = "http://localhost:8000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
