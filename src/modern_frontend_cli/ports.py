"""Ports (interfaces) consumed by the modern-frontend commands.

The commands only depend on these protocols. Default file-backed
implementations live in config_manager, settings_store and app_state;
tests substitute in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

PRODUCTION_MODE = "production"


@runtime_checkable
class CompatibilityConfigManager(Protocol):
    """Owns the modules/themes compatibility configuration file."""

    def has_config(self) -> bool:
        """Return True when the configuration file exists."""

    def generate(self) -> None:
        """Generate (or overwrite) the configuration file."""

    def get(self) -> dict[str, Any]:
        """Load the configuration document."""

    def get_config_file_path(self) -> list[str]:
        """Return the paths of the generated files."""


@runtime_checkable
class SettingsBackend(Protocol):
    """Persisted key/value application settings."""

    def get_value(self, key: str) -> Any:
        """Return the stored value or None."""

    def save(self, key: str, value: Any) -> None:
        """Persist a value under key."""


@runtime_checkable
class ModeProvider(Protocol):
    """Reports the running application mode."""

    def get_mode(self) -> str:
        """Return the mode name (``production`` or anything else)."""
