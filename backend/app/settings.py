"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.config_store import ConfigStore


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Freemarket API"
    app_version: str = "0.1.0"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    log_level: str = "INFO"

    # Storage: "memory" keeps everything in-process; "database" uses SQLAlchemy
    storage_backend: Literal["memory", "database"] = "memory"
    database_url: str = "sqlite+aiosqlite:///./freemarket.db"
    database_echo: bool = False
    seed_sample_data: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Marketplace
    default_currency: str = "JPY"
    review_timeline_default_limit: int = 10
    category_ranking_default_limit: int = 5
    stamp_card_save_retries: int = 3  # attempts before a concurrent stamp write gives up


# Config file path: CONFIG_FILE env or default backend/config.yaml (config file is master over env)
_config_file = os.environ.get("CONFIG_FILE") or str(
    Path(__file__).resolve().parent.parent / "config.yaml"
)
_config_store = ConfigStore(Settings, _config_file)


class _SettingsProxy:
    """Proxy so 'settings.attr' always returns the current value from the config store."""

    def __getattr__(self, name: str):
        return getattr(_config_store.get_settings(), name)


settings: Settings = _SettingsProxy()  # type: ignore[assignment]


def get_settings() -> Settings:
    """Return the current Settings snapshot."""
    return _config_store.get_settings()


def get_config_store() -> ConfigStore:
    """Return the config store for update(), reload_from_file(), clear_overrides()."""
    return _config_store
