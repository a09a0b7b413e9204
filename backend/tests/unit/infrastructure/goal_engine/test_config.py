"""Unit tests for environment-driven configuration."""

import logging
from pathlib import Path

import pytest

from domain.goal_engine.core.exceptions.domain_errors import (
    GoalEngineError,
    InvalidConfigurationError,
)
from infrastructure.config import GoalEngineSettings, load_environment
from infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so values loaded from .env files are undone on teardown
    for name in (
        "LOG_LEVEL",
        "GOAL_STORE_BACKEND",
        "GOAL_STORE_PATH",
        "GOAL_RECOMPUTE_DEBOUNCE_MS",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestGoalEngineSettings:
    """Test GoalEngineSettings.from_env."""

    def test_defaults(self):
        settings = GoalEngineSettings.from_env()

        assert settings.log_level == "INFO"
        assert settings.store_backend == "inmemory"
        assert settings.store_path == Path("goal_settings.json")
        assert settings.debounce_ms == 600
        assert settings.debounce_seconds == pytest.approx(0.6)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("GOAL_STORE_BACKEND", "Json")
        monkeypatch.setenv("GOAL_STORE_PATH", "/tmp/goals.json")
        monkeypatch.setenv("GOAL_RECOMPUTE_DEBOUNCE_MS", "250")

        settings = GoalEngineSettings.from_env()

        assert settings.log_level == "DEBUG"
        assert settings.store_backend == "json"
        assert settings.store_path == Path("/tmp/goals.json")
        assert settings.debounce_seconds == pytest.approx(0.25)

    @pytest.mark.parametrize("raw", ["soon", "1.5", "-1"])
    def test_invalid_debounce_raises(self, monkeypatch, raw):
        monkeypatch.setenv("GOAL_RECOMPUTE_DEBOUNCE_MS", raw)

        with pytest.raises(InvalidConfigurationError) as exc_info:
            GoalEngineSettings.from_env()

        assert isinstance(exc_info.value, GoalEngineError)

    def test_zero_debounce_allowed(self, monkeypatch):
        monkeypatch.setenv("GOAL_RECOMPUTE_DEBOUNCE_MS", "0")

        assert GoalEngineSettings.from_env().debounce_ms == 0


class TestLoadEnvironment:
    """Test .env loading."""

    def test_loads_file_without_overriding(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GOAL_STORE_BACKEND=json\nLOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        load_environment(env_file)

        settings = GoalEngineSettings.from_env()
        assert settings.store_backend == "json"
        assert settings.log_level == "WARNING"

    def test_missing_file_is_ignored(self, tmp_path):
        load_environment(tmp_path / "absent.env")

        assert GoalEngineSettings.from_env().store_backend == "inmemory"


class TestConfigureLogging:
    """Test logging setup."""

    def test_levels(self):
        configure_logging("debug")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("apscheduler").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty", json_output=True)

        assert logging.getLogger().level == logging.INFO
