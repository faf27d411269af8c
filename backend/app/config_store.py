"""Config store: config file (master over env) + pushable overrides."""
import json
import logging
import threading
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON config file into a flat dict. Returns {} when missing or unreadable."""
    if not path.exists():
        logger.debug("Config file not found: %s (optional; using env/defaults)", path)
        return {}
    try:
        raw = path.read_text()
    except OSError as e:
        logger.warning("Could not read config file %s: %s", path, e)
        return {}

    suffix = path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            logger.warning("Config file must be .yaml, .yml, or .json: %s", path)
            return {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file must contain a mapping; got %s", type(data).__name__)
        return {}
    return data


class ConfigStore:
    """
    Holds settings built from env/.env, an optional config file, and pushed overrides.
    Precedence: overrides > config file > env > defaults.
    """

    def __init__(self, settings_cls: type, config_file_path: Optional[str] = None):
        self._settings_cls = settings_cls
        self._file_path: Optional[Path] = (
            Path(config_file_path).expanduser().resolve() if config_file_path else None
        )
        self._overrides: dict[str, Any] = {}
        self._current: Optional[Any] = None
        self._lock = threading.RLock()

    @property
    def file_path(self) -> Optional[Path]:
        return self._file_path

    def _layers(self) -> dict[str, Any]:
        env_values = self._settings_cls().model_dump()
        file_values = read_config_file(self._file_path) if self._file_path else {}
        if file_values:
            logger.info("Loaded config file (master over env): %s", self._file_path)
        return {**env_values, **file_values}

    def load_initial(self) -> None:
        """Build settings from all layers. Call once at startup."""
        with self._lock:
            self._current = self._settings_cls(**{**self._layers(), **self._overrides})

    def get_settings(self) -> Any:
        """Current Settings instance (loads on first use)."""
        with self._lock:
            if self._current is None:
                self.load_initial()
            return self._current

    def update(self, overrides: dict[str, Any]) -> bool:
        """Apply overrides on top of the current settings. Keeps previous settings if invalid."""
        with self._lock:
            current = self.get_settings()
            try:
                candidate = self._settings_cls(**{**current.model_dump(), **overrides})
            except PydanticValidationError as e:
                logger.warning("Config update rejected; keeping previous config: %s", e)
                return False
            self._current = candidate
            self._overrides.update(overrides)
            return True

    def reload_from_file(self) -> None:
        """Re-read env and config file, then re-apply overrides."""
        with self._lock:
            try:
                self._current = self._settings_cls(**{**self._layers(), **self._overrides})
            except PydanticValidationError as e:
                logger.warning("Config reload rejected; keeping previous config: %s", e)

    def clear_overrides(self) -> None:
        """Drop pushed overrides and rebuild from file + env."""
        with self._lock:
            self._overrides.clear()
            self._current = self._settings_cls(**self._layers())
