"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Resend (application delivery)
    resend_api_key: Optional[str] = Field(
        default=None,
        description="Resend API key for sending applications",
    )
    application_from_address: str = Field(
        default="Healthcare Agent <onboarding@resend.dev>",
        description="Sender address for application emails",
    )

    # Job search
    default_search_query: str = Field(
        default="Healthcare Manager",
        description="Search term used when none is given",
    )
    default_search_location: str = Field(
        default="United States",
        description="Location filter used when none is given",
    )
    default_search_limit: int = Field(
        default=20,
        description="Maximum postings fetched per search",
    )
    remotive_category: Optional[str] = Field(
        default="medical-health",
        description="Remotive category slug to search within",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file path",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def profile_path(self) -> Path:
        """Path to the profile.yaml file."""
        return self.config_dir / "profile.yaml"


# Global settings instance
settings = Settings()
