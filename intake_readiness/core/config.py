"""Configuration management for the Intake Readiness service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    INTAKE_ENV: str = Field(default="dev", description="Environment: dev, staging, prod, test")

    # Readiness engine defaults
    READINESS_MIN_TOTAL_FIELDS: int = Field(
        default=7,
        ge=0,
        description="Total field count reported when a template yields no countable fields",
    )
    READINESS_TBD_HEADING: str = Field(
        default="Contractors & Inspections",
        description="Heading that collects undetermined relationship group entries",
    )
    RELATIONSHIP_SECTION_ID: str = Field(
        default="contractors_inspections",
        description="Section id used to scope GC / TPP / SIA toggle lookups",
    )
    DEFAULT_MAX_REPEAT: int = Field(
        default=4, ge=1, description="Repeat cap for repeatable sections without maxRepeat"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
