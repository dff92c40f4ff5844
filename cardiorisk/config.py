"""
Configuration Management for the CardioRisk service

Environment-based configuration using Pydantic Settings.
Only the service and API layers read settings; risk calculators stay pure.
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CARDIORISK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from .env file
    )

    # Application
    app_name: str = "CardioRisk Assessment API"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Package log level")

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]

    # Risk evaluation
    who_region: str = Field(
        default="north_america_high_income",
        description="WHO CVD calibration region used by the assessment service"
    )
    top_risk_count: int = Field(default=3, ge=1, description="Number of ranked risks returned as top3")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
