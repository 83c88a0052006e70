from pydantic_settings import BaseSettings
from typing import Optional
from pydantic import ValidationError, field_validator

from jobboard.core.exceptions import ConfigurationError

REQUIRED_FIELDS = ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY")


class Settings(BaseSettings):
    """Settings loaded from environment variables and an optional .env file"""

    PROJECT_NAME: str = "Job Board Admin"

    # Supabase Settings (service role key is required for admin writes)
    SUPABASE_URL: str
    SUPABASE_SERVICE_ROLE_KEY: str
    SUPABASE_TIMEOUT: Optional[float] = None

    # Table names
    STAFF_TABLE: str = "staff"
    JOBS_TABLE: str = "jobs"

    # Logging Settings
    LOG_LEVEL: str = "WARNING"
    JSON_LOGS: bool = False

    @field_validator("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", mode="before")
    @classmethod
    def reject_blank(cls, v: Optional[str]) -> str:
        """Treat empty values the same as missing ones"""
        if v is None or not str(v).strip():
            raise ValueError("must not be empty")
        return str(v).strip()

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def get_settings(**overrides) -> Settings:
    """
    Build settings from the environment.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the Supabase URL or service role key is missing,
            or another variable has a value that cannot be parsed
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors() if err.get("loc")]
        if not fields or any(f in REQUIRED_FIELDS for f in fields):
            raise ConfigurationError(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set in environment variables"
            ) from e
        raise ConfigurationError(f"Invalid value for {', '.join(fields)}") from e
