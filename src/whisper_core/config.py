# ABOUTME: Configuration module for application settings.
# ABOUTME: Uses pydantic-settings for environment variable overrides and provides cached access.

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with the
    WHISPER_CORE_ prefix (e.g., WHISPER_CORE_DB_PATH).
    """

    model_config = SettingsConfigDict(
        env_prefix="WHISPER_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    db_path: Annotated[Path, Field(description="Path to SQLite database file")] = (
        Path.home() / ".whisper-core" / "data.db"
    )

    log_level: Annotated[str, Field(description="Minimum level for log output")] = "INFO"

    log_file: Annotated[
        Path | None, Field(description="Optional file to write rotated logs to")
    ] = None

    candidate_pool_size: Annotated[
        int, Field(description="Most recently active profiles considered per match", ge=1)
    ] = 100

    top_match_count: Annotated[
        int, Field(description="Size of the top-scored slice a match is drawn from", ge=1)
    ] = 10

    anti_repeat_hours: Annotated[
        int, Field(description="Hours before a matched user may be offered again", ge=0)
    ] = 24

    cleanup_batch_size: Annotated[
        int, Field(description="Maximum action records deleted per cleanup sweep", ge=1)
    ] = 500

    max_recent_matches: Annotated[
        int, Field(description="Upper bound on match history entries returned at once", ge=1)
    ] = 50


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists.

    Creates the directory containing the database file if it doesn't exist.

    Returns:
        Path to the data directory.
    """
    settings = get_settings()
    data_dir = settings.db_path.parent
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
