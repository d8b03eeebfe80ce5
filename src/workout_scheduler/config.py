"""Configuration settings for the Workout Scheduler."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/workout_scheduler/config.py
# .parent.parent.parent = project root
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORKOUT_SCHEDULER_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]

    # Scheduling defaults
    default_days_ahead: int = 7
    working_hours_start: str = "06:00"  # HH:MM
    working_hours_end: str = "22:00"  # HH:MM
    suggestion_list_limit: int = 10

    # Reminders
    reminder_offset_hours: int = 1

    # Calendar provider
    google_calendar_api_url: str = "https://www.googleapis.com/calendar/v3"
    http_timeout_seconds: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
