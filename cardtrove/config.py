from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "CardTrove"
    app_version: str = "0.1.0"

    # Per-installation storage area; one JSON file per entity kind
    data_dir: str = "data"
    client_profiles_file: str = "client_profiles.json"
    order_entries_file: str = "order_entries.json"
    material_stock_file: str = "material_stock.json"
    design_requests_file: str = "design_requests.json"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_storage: str = "WARNING"       # JSON file repositories
    log_level_stores: str = "INFO"           # Entity stores, editors, notifier

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def data_path(self, file_name: str) -> Path:
        return Path(self.data_dir) / file_name


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
