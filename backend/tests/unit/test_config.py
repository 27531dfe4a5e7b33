"""Tests for configuration functionality."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from lostfound.core.config import Settings, get_settings, reload_settings


def test_settings_defaults(isolated_data_dir: Path) -> None:
    """Test that settings have correct defaults."""
    settings = Settings()

    assert settings.env == "development"
    assert settings.log_level == "INFO"
    assert settings.data_dir == isolated_data_dir.resolve()
    assert settings.is_debug is True
    assert settings.is_production is False
    assert settings.is_testing is False

    assert settings.config_dir == settings.data_dir / "config"
    assert settings.logs_dir == settings.data_dir / "logs"
    assert not settings.config_dir.exists()
    assert not settings.logs_dir.exists()


def test_ensure_directories(tmp_path: Path) -> None:
    """Test that ensure_directories creates the data layout, including a missing data_dir."""
    settings = Settings(data_dir=tmp_path / "nested" / "data")

    settings.ensure_directories()
    settings.ensure_directories()

    assert settings.data_dir.is_dir()
    assert settings.config_dir.is_dir()
    assert settings.logs_dir.is_dir()


def test_settings_from_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that settings can be loaded from environment variables."""
    monkeypatch.setenv("LOSTFOUND_ENV", "production")
    monkeypatch.setenv("LOSTFOUND_LOG_LEVEL", "WARNING")

    settings = reload_settings()

    assert settings.env == "production"
    assert settings.log_level == "WARNING"
    assert settings.is_production is True
    assert settings.is_debug is False


def test_settings_from_env_file(tmp_path: Path) -> None:
    """Test that settings can be loaded from .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("LOSTFOUND_ENV=testing\nLOSTFOUND_LOG_LEVEL=DEBUG\n")

    settings = Settings(_env_file=str(env_file))

    assert settings.env == "testing"
    assert settings.log_level == "DEBUG"
    assert settings.is_testing is True


def test_settings_from_json_file(isolated_data_dir: Path) -> None:
    """Test that top-level keys in settings.json are picked up."""
    config_dir = isolated_data_dir / "config"
    config_dir.mkdir()
    (config_dir / "settings.json").write_text(
        json.dumps({"LOG_LEVEL": "ERROR", "matching": {"min_score": 40}})
    )

    assert Settings().log_level == "ERROR"


def test_env_vars_override_json_file(isolated_data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment variables take priority over settings.json."""
    config_dir = isolated_data_dir / "config"
    config_dir.mkdir()
    (config_dir / "settings.json").write_text(json.dumps({"log_level": "ERROR"}))
    monkeypatch.setenv("LOSTFOUND_LOG_LEVEL", "DEBUG")

    assert Settings().log_level == "DEBUG"


def test_init_overrides_everything(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that values passed to Settings() win over env vars."""
    monkeypatch.setenv("LOSTFOUND_ENV", "production")

    assert Settings(env="testing").env == "testing"


def test_settings_validation() -> None:
    """Test that invalid values are rejected."""
    with pytest.raises(ValidationError):
        Settings(env="staging")

    with pytest.raises(ValidationError):
        Settings(log_level="VERBOSE")


def test_get_settings_cached() -> None:
    """Test that get_settings returns the same instance until reloaded."""
    first = get_settings()
    assert get_settings() is first

    reloaded = reload_settings()
    assert reloaded is not first
    assert get_settings() is reloaded
