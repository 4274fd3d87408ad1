"""Persisted application settings.

Key/value settings stored in a TOML file. Keys are slash-separated paths
(``modern_frontend/hmr/enabled``) mapped onto nested TOML tables:

    [modern_frontend.hmr]
    enabled = true

Security:
- Settings file permissions: 0600 (owner read/write only)
- Atomic write through a temporary file
"""

import logging
import os
from collections.abc import MutableMapping
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

try:
    import tomlkit
except ImportError as e:
    raise ImportError("tomlkit library not available. Install with: pip install tomlkit") from e

from tomlkit.exceptions import ParseError

from modern_frontend_cli.exceptions import FileSystemError, LocalizedError

logger = logging.getLogger(__name__)

HMR_ENABLED = "modern_frontend/hmr/enabled"


class SettingsStore:
    """Read and write settings in a TOML file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @staticmethod
    def _split_key(key: str) -> list[str]:
        parts = [part.strip() for part in key.split("/")]
        if not key or any(not part for part in parts):
            raise LocalizedError(f"Invalid settings key: '{key}'")
        return parts

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "rb") as f:
                return tomli.load(f)  # type: ignore[attr-defined]
        except OSError as e:
            raise FileSystemError(f"Failed to read settings file {self.path}: {e}") from e
        except tomli.TOMLDecodeError as e:  # type: ignore[attr-defined]
            raise LocalizedError(f"Settings file {self.path} is not valid TOML: {e}") from e
        except UnicodeDecodeError as e:
            raise LocalizedError(f"Settings file {self.path} is not valid UTF-8: {e}") from e

    def get_value(self, key: str) -> Any:
        """Return the value stored under key, or None when absent."""
        parts = self._split_key(key)
        node: Any = self._load()
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                logger.debug(f"Setting not found: {key}")
                return None
            node = node[part]
        return node

    def save(self, key: str, value: Any) -> None:
        """Persist value under key, keeping every other setting intact.

        Raises:
            FileSystemError: If the file cannot be written
            LocalizedError: If the key collides with a non-table value
        """
        parts = self._split_key(key)
        temp_path = self.path.with_suffix(".tmp")
        try:
            if self.path.exists():
                with open(self.path, encoding="utf-8") as f:
                    doc = tomlkit.load(f)
            else:
                doc = tomlkit.document()

            container: Any = doc
            for part in parts[:-1]:
                if part not in container:
                    container[part] = tomlkit.table()
                container = container[part]
                if not isinstance(container, MutableMapping):
                    raise LocalizedError(f"Cannot store '{key}': '{part}' is not a table")
            container[parts[-1]] = value

            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                tomlkit.dump(doc, f)
            os.chmod(temp_path, 0o600)
            temp_path.replace(self.path)

            logger.debug(f"Saved {key}={value!r} to: {self.path}")

        except ParseError as e:
            raise LocalizedError(f"Settings file {self.path} is not valid TOML: {e}") from e
        except UnicodeDecodeError as e:
            raise LocalizedError(f"Settings file {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise FileSystemError(f"Failed to save settings to {self.path}: {e}") from e
