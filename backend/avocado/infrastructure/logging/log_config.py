"""Centralized logging configuration.

Per-category levels from Settings let noisy libraries (SQLAlchemy,
httpx) be silenced independently of the application's own loggers.

Usage:
    from avocado.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # avocado.main.lifespan does this on startup
"""

import logging
import sys

from avocado.config import Settings, get_settings

_FORMAT = "%(levelname)-8s %(name)s: %(message)s"

# ── Settings field → logger names ───────────────────────────────────

_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_storage": (
        "avocado.infrastructure.storage",
        "avocado.infrastructure.database",
    ),
    "log_level_ai": (
        "OpenRouterClient",
        "avocado.infrastructure.openrouter",
        "avocado.application.services.ai_gateway_service",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels. Safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # Scripts and tests may start without any handler installed.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        raw = getattr(settings, field_name)
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw))
        applied[field_name.removeprefix("log_level_")] = raw

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s",
        settings.log_level,
        " ".join(f"{k}={v}" for k, v in applied.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO
