"""CLI settings module.

This module handles the tool's own configuration stored in TOML format:
where the project lives, which directories hold modules and themes, and
where generated files and persisted settings go.

Lookup order for the settings file:
1. --config option
2. MODERN_FRONTEND_CONFIG environment variable
3. ~/.modern-frontend/config.toml
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomli  # type: ignore[import]
except ImportError:
    # Fallback for newer Python versions
    try:
        import tomllib as tomli  # type: ignore[import]
    except ImportError as e:
        raise ImportError("toml library not available. Install with: pip install tomli") from e

from modern_frontend_cli.exceptions import SettingsError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MODERN_FRONTEND_CONFIG"


@dataclass
class CliSettings:
    """modern-frontend CLI settings."""

    project_root: str = "."
    module_roots: list[str] = field(default_factory=lambda: ["app/code", "vendor"])
    theme_roots: list[str] = field(default_factory=lambda: ["app/design/frontend"])
    output_dir: str = "var/modern-frontend"
    settings_file: str = "var/modern-frontend/settings.toml"
    marker_file: str = "modern-frontend.json"
    mode: str = "developer"

    def resolve(self, value: str) -> Path:
        """Resolve a path relative to the project root."""
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return Path(self.project_root).expanduser().resolve() / path

    @property
    def output_path(self) -> Path:
        return self.resolve(self.output_dir)

    @property
    def settings_path(self) -> Path:
        return self.resolve(self.settings_file)

    @property
    def module_paths(self) -> list[Path]:
        return [self.resolve(root) for root in self.module_roots]

    @property
    def theme_paths(self) -> list[Path]:
        return [self.resolve(root) for root in self.theme_roots]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CliSettings":
        """Create from dictionary, validating value types."""
        defaults = cls()
        values: dict[str, Any] = {}
        for key, default in defaults.to_dict().items():
            if key not in data:
                values[key] = default
                continue
            value = data[key]
            if isinstance(default, list):
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise SettingsError(f"Setting '{key}' must be a list of strings")
            elif not isinstance(value, str):
                raise SettingsError(f"Setting '{key}' must be a string")
            values[key] = value

        unknown = sorted(set(data) - set(values))
        if unknown:
            logger.warning(f"Unknown settings ignored: {', '.join(unknown)}")

        return cls(**values)


class SettingsLoader:
    """Locate and load the CLI settings file."""

    DEFAULT_CONFIG_DIR = Path.home() / ".modern-frontend"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get settings file path.

        Args:
            custom_path: Custom settings file path (optional)

        Returns:
            Path to settings file

        Raises:
            SettingsError: If an explicitly requested file does not exist
        """
        explicit = custom_path or os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            path = Path(explicit).expanduser().resolve()
            if not path.exists():
                raise SettingsError(f"Config file not found: {path}")
            return path

        return cls.DEFAULT_CONFIG_FILE

    @classmethod
    def load(cls, custom_path: str | None = None) -> CliSettings:
        """Load settings from file.

        Args:
            custom_path: Custom settings file path (optional)

        Returns:
            CliSettings object (defaults when the default file is missing)

        Raises:
            SettingsError: If loading fails
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Settings file not found, using defaults")
            return CliSettings()

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)  # type: ignore[attr-defined]
        except (OSError, tomli.TOMLDecodeError) as e:  # type: ignore[attr-defined]
            raise SettingsError(f"Failed to load config: {e}") from e
        except UnicodeDecodeError as e:
            raise SettingsError(
                f"Failed to load config: {config_path} is not valid UTF-8: {e}"
            ) from e

        logger.debug(f"Loaded settings from: {config_path}")
        return CliSettings.from_dict(data)
