"""
Configuration management using Pydantic Settings

Every value can be overridden from the environment (prefix SOLID_) or a .env file in the working directory,
e.g. SOLID_GAME_STATE_CACHE=sql SOLID_LOG_LEVEL=DEBUG solid-examples srp
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Names accepted for the game_state_cache setting
MEMORY_CACHE = "memory"
SQL_CACHE = "sql"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings for the demonstration scenarios"""

    model_config = SettingsConfigDict(
        env_prefix="SOLID_",
        env_file=".env",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    # Demonstration data
    patient_id: int = Field(default=124, description="Patient monitored in the health alerting demo")
    player_id: int = Field(default=1, description="Player used in the game settings demo")

    # Game state cache
    game_state_cache: str = Field(
        default=MEMORY_CACHE,
        description=f"Cache backend for the game settings demo: '{MEMORY_CACHE}' or '{SQL_CACHE}'",
    )
    cache_database_url: str = Field(
        default="sqlite:///:memory:",
        description="SQLAlchemy URL used when game_state_cache is 'sql'",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level

    @field_validator("game_state_cache")
    @classmethod
    def normalize_cache_name(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
