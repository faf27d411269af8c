"""Tests for layered configuration (overrides > config file > env > defaults)."""
import json
import os

import pytest

from app.config_store import ConfigStore, read_config_file
from app.settings import Settings


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("app_name: From File\nreview_timeline_default_limit: 20\n")
    return path


@pytest.fixture(autouse=True)
def env(monkeypatch):
    monkeypatch.setenv("APP_NAME", "From Env")
    monkeypatch.setenv("DEFAULT_CURRENCY", "USD")


class TestReadConfigFile:
    def test_missing_file(self, tmp_path):
        assert read_config_file(tmp_path / "absent.yaml") == {}

    def test_json_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"debug": True}))
        assert read_config_file(path) == {"debug": True}

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("debug = true")
        assert read_config_file(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("app_name: [unclosed")
        assert read_config_file(path) == {}

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        assert read_config_file(path) == {}


class TestConfigStore:
    def test_env_without_file(self):
        store = ConfigStore(Settings)
        settings = store.get_settings()
        assert settings.app_name == "From Env"
        assert settings.default_currency == "USD"
        assert settings.api_v1_prefix == "/v1"

    def test_file_beats_env(self, config_file):
        store = ConfigStore(Settings, str(config_file))
        settings = store.get_settings()
        assert settings.app_name == "From File"
        assert settings.review_timeline_default_limit == 20
        # env still fills keys the file does not set
        assert settings.default_currency == "USD"

    def test_override_beats_file(self, config_file):
        store = ConfigStore(Settings, str(config_file))
        assert store.update({"app_name": "Pushed"}) is True
        assert store.get_settings().app_name == "Pushed"

        store.reload_from_file()
        assert store.get_settings().app_name == "Pushed"

        store.clear_overrides()
        assert store.get_settings().app_name == "From File"

    def test_invalid_override_keeps_previous(self, config_file):
        store = ConfigStore(Settings, str(config_file))
        assert store.update({"storage_backend": "redis"}) is False
        assert store.get_settings().storage_backend == "memory"
        assert store.update({"review_timeline_default_limit": "many"}) is False
        assert store.get_settings().review_timeline_default_limit == 20

    def test_reload_picks_up_file_changes(self, config_file):
        store = ConfigStore(Settings, str(config_file))
        assert store.get_settings().app_name == "From File"
        config_file.write_text("app_name: Edited\n")
        store.reload_from_file()
        assert store.get_settings().app_name == "Edited"


def test_app_config_store_defaults_to_backend_config():
    from app.settings import get_config_store, get_settings

    store = get_config_store()
    assert isinstance(store, ConfigStore)
    if not os.environ.get("CONFIG_FILE"):
        assert store.file_path.name == "config.yaml"
        assert store.file_path.parent.name == "backend"
    assert get_settings() is store.get_settings()
