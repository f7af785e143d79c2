"""Log levels for the user records service, one knob per logger family."""

import logging
import sys

from app.config import Settings, get_settings

# Settings field -> loggers it controls.
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": ["sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"],
    "log_level_uvicorn": ["uvicorn", "uvicorn.access", "uvicorn.error"],
    "log_level_requests": ["app.requests"],
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels; called from the app lifespan."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn brings its own handlers; plain test runs do not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s requests=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_requests,
    )


def _parse_level(raw: str) -> int:
    """Unknown level names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
