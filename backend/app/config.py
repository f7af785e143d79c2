from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "User Records API"
    app_version: str = "1.0.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./users.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Server (used when running ``python -m app.main``)
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_requests: str = "INFO"         # app.requests — one line per request
    log_colors: bool = True                  # ANSI colours on request log lines

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def echo_sql(self) -> bool:
        return self.app_env == "development" and self.log_level_sql.upper() == "DEBUG"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
