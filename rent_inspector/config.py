import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_PACKAGE_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PACKAGE_ROOT / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Rent Inspector API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/rent_inspector.db"
    cors_origins: list[str] = ["http://localhost:3020"]

    # Persisted schema version; upgrade steps below it are no-ops
    schema_version: int = 5

    # Photo files live here, addressed by file-name token
    photo_dir: str = "data/photos"

    # Exported PDF reports are written here
    export_dir: str = "data/exports"

    # Limits enforced by the UI-facing validators and the HTTP layer, not the store
    max_photos_per_room: int = 10
    max_room_name_length: int = 50
    max_comment_length: int = 500
    max_record_title_length: int = 100
    min_reminder_interval: int = 1
    max_reminder_interval: int = 365
    default_user_name: str = "User"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # InspectionStore operations

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.min_reminder_interval > self.max_reminder_interval:
            _config_logger.warning(
                "min_reminder_interval (%d) exceeds max_reminder_interval (%d); swapping",
                self.min_reminder_interval,
                self.max_reminder_interval,
            )
            low, high = self.max_reminder_interval, self.min_reminder_interval
            object.__setattr__(self, "min_reminder_interval", low)
            object.__setattr__(self, "max_reminder_interval", high)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
