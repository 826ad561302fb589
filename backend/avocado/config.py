import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
# Runtime-editable model choices, relative to the working directory.
_SETTINGS_FILE = Path("data/settings.json")
_MODEL_KEYS = frozenset({
    "task_generation_model",
    "summary_model",
})


def _load_model_overrides(path: Path) -> dict[str, Any]:
    """Return the model-name entries of ``path``, or {} if it is absent or unreadable."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text("utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        _config_logger.warning("Could not load settings overrides from %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: v for k, v in data.items() if k in _MODEL_KEYS and isinstance(v, str)}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = "Avocado Projects"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Persistence: one SQLAlchemy key-value table, or one JSON file per key
    storage_backend: Literal["database", "file"] = "database"
    database_url: str = "sqlite:///data/avocado.db"
    storage_dir: str = "data/storage"
    storage_namespace: str = "avocado"

    # OpenRouter; an empty key disables the AI features
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_name: str = "Avocado Projects"

    task_generation_model: str = "google/gemini-3-flash-preview"
    summary_model: str = "google/gemini-3-flash-preview"

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # root
    log_level_sql: str = "WARNING"           # sqlalchemy.engine, aiosqlite
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_storage: str = "INFO"          # key-value stores and collection storage
    log_level_ai: str = "INFO"               # OpenRouter client and AI gateway

    def model_post_init(self, __context: object) -> None:
        """Merge model names from data/settings.json over the environment."""
        for key, value in _load_model_overrides(_SETTINGS_FILE).items():
            object.__setattr__(self, key, value)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings; .env is read once."""
    return Settings()
