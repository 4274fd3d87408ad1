"""
Shared test fixtures and configuration for modern-frontend CLI tests.

This module provides common fixtures used across all test types:
- In-memory fakes for the config manager, settings store and app state
- A reporter writing to a string buffer
- Isolation from the user's real settings and environment
"""

from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from modern_frontend_cli.app_state import MODE_ENV_VAR
from modern_frontend_cli.console_reporter import ConsoleReporter
from modern_frontend_cli.settings import CONFIG_ENV_VAR, SettingsLoader

# ============================================================================
# ENVIRONMENT ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Keep tests away from ~/.modern-frontend and inherited env overrides."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(MODE_ENV_VAR, raising=False)
    monkeypatch.setattr(
        SettingsLoader, "DEFAULT_CONFIG_FILE", tmp_path / "no-such-dir" / "config.toml"
    )


# ============================================================================
# FAKE COLLABORATORS
# ============================================================================


class FakeConfigManager:
    """In-memory compatibility config manager recording its calls."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        exists: bool = True,
        paths: list[str] | None = None,
    ):
        self.config = config if config is not None else {"modules": {}, "themes": {}}
        self.exists = exists
        self.paths = paths if paths is not None else ["out/compat.json", "out/compat.mjs"]
        self.calls: list[str] = []
        self.generate_error: Exception | None = None
        self.get_error: Exception | None = None

    @property
    def generate_calls(self) -> int:
        return self.calls.count("generate")

    def has_config(self) -> bool:
        self.calls.append("has_config")
        return self.exists

    def generate(self) -> None:
        self.calls.append("generate")
        if self.generate_error:
            raise self.generate_error
        self.exists = True

    def get(self) -> dict[str, Any]:
        self.calls.append("get")
        if not self.exists:
            raise AssertionError("get() called before the configuration file exists")
        if self.get_error:
            raise self.get_error
        return self.config

    def get_config_file_path(self) -> list[str]:
        self.calls.append("get_config_file_path")
        return list(self.paths)


class FakeSettingsStore:
    """Dictionary-backed settings store."""

    def __init__(self, values: dict[str, Any] | None = None):
        self.values = dict(values or {})
        self.error: Exception | None = None

    def get_value(self, key: str) -> Any:
        if self.error:
            raise self.error
        return self.values.get(key)

    def save(self, key: str, value: Any) -> None:
        if self.error:
            raise self.error
        self.values[key] = value


class FakeAppState:
    def __init__(self, mode: str = "developer"):
        self.mode = mode

    def get_mode(self) -> str:
        return self.mode


# ============================================================================
# REPORTER FIXTURES
# ============================================================================


class BufferedReporter(ConsoleReporter):
    """ConsoleReporter writing every stream into one buffer."""

    def __init__(self):
        self.buffer = StringIO()
        super().__init__(
            Console(file=self.buffer, width=200, soft_wrap=True, highlight=False, color_system=None)
        )

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def reporter():
    """Reporter capturing output in memory (see BufferedReporter.output)."""
    return BufferedReporter()


@pytest.fixture
def fake_config_manager():
    return FakeConfigManager()


@pytest.fixture
def fake_settings_store():
    return FakeSettingsStore()


@pytest.fixture
def fake_app_state():
    return FakeAppState()
