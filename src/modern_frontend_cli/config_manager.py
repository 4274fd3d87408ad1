"""Compatibility configuration management.

Discovers the modules and themes compatible with the modern frontend and
writes the compatibility configuration consumed by the build pipeline.

A component is compatible when its directory holds a marker file
(``modern-frontend.json`` by default):

    {"name": "Vendor_Module", "src": "view/frontend/web"}

Both keys are optional. Without ``name`` the component name is derived
from the directory path relative to its root (``Vendor/Module`` becomes
``Vendor_Module``); ``src`` defaults to ``web``.

Generated files (under the output directory):
- compatibility.json: the configuration document
- compatibility.mjs: the same document as an ES module default export
"""

import json
import logging
from pathlib import Path
from typing import Any

from modern_frontend_cli.exceptions import FileSystemError, LocalizedError
from modern_frontend_cli.settings import CliSettings

logger = logging.getLogger(__name__)

SECTIONS = ("modules", "themes")
DEFAULT_SRC = "web"
JSON_FILE_NAME = "compatibility.json"
MODULE_FILE_NAME = "compatibility.mjs"


class ConfigManager:
    """Manage the modules/themes compatibility configuration file."""

    def __init__(
        self,
        module_roots: list[Path],
        theme_roots: list[Path],
        output_dir: Path,
        marker_file: str = "modern-frontend.json",
    ):
        self.module_roots = [Path(p) for p in module_roots]
        self.theme_roots = [Path(p) for p in theme_roots]
        self.output_dir = Path(output_dir)
        self.marker_file = marker_file

    @classmethod
    def from_settings(cls, settings: CliSettings) -> "ConfigManager":
        return cls(
            module_roots=settings.module_paths,
            theme_roots=settings.theme_paths,
            output_dir=settings.output_path,
            marker_file=settings.marker_file,
        )

    @property
    def json_path(self) -> Path:
        return self.output_dir / JSON_FILE_NAME

    @property
    def module_path(self) -> Path:
        return self.output_dir / MODULE_FILE_NAME

    def has_config(self) -> bool:
        return self.json_path.is_file()

    def get_config_file_path(self) -> list[str]:
        return [str(self.json_path), str(self.module_path)]

    def get(self) -> dict[str, Any]:
        """Load the compatibility configuration.

        Returns:
            Document with ``modules`` and ``themes`` sections

        Raises:
            FileSystemError: If the file is missing or unreadable
            LocalizedError: If the file content is malformed
        """
        try:
            content = self.json_path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileSystemError(f"Cannot read configuration file {self.json_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise LocalizedError(
                f"Configuration file {self.json_path} is not valid UTF-8: {e}"
            ) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise LocalizedError(f"Configuration file {self.json_path} is not valid JSON: {e}") from e

        self._validate(data)
        logger.debug(f"Loaded compatibility config from: {self.json_path}")
        return data

    def generate(self) -> None:
        """Scan roots for compatible components and write the configuration files.

        Raises:
            FileSystemError: If scanning or writing fails
            LocalizedError: If a marker is malformed or a name is duplicated
        """
        config = {
            "modules": self._collect(self.module_roots, "module"),
            "themes": self._collect(self.theme_roots, "theme"),
        }
        logger.debug(
            f"Found {len(config['modules'])} module(s) and {len(config['themes'])} theme(s)"
        )

        payload = json.dumps(config, indent=4)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            self._write_atomic(self.json_path, payload + "\n")
            self._write_atomic(self.module_path, f"export default {payload};\n")
        except OSError as e:
            raise FileSystemError(f"Failed to write configuration files: {e}") from e

        logger.debug(f"Wrote compatibility config to: {self.output_dir}")

    def _collect(self, roots: list[Path], kind: str) -> dict[str, dict[str, str]]:
        components: dict[str, dict[str, str]] = {}
        for root in roots:
            if not root.is_dir():
                logger.debug(f"Skipping missing {kind} root: {root}")
                continue
            try:
                markers = sorted(root.rglob(self.marker_file))
            except OSError as e:
                raise FileSystemError(f"Failed to scan {root}: {e}") from e

            for marker in markers:
                name, src = self._read_marker(marker, root)
                if name in components:
                    raise LocalizedError(
                        f"Duplicate {kind} name '{name}' ({components[name]['src']} and {src})"
                    )
                components[name] = {"src": src}
        return components

    def _read_marker(self, marker: Path, root: Path) -> tuple[str, str]:
        try:
            content = marker.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise FileSystemError(f"Cannot read {marker}: {e}") from e
        except UnicodeDecodeError as e:
            raise LocalizedError(f"Invalid marker file {marker}: not valid UTF-8: {e}") from e

        try:
            data = json.loads(content) if content else {}
        except json.JSONDecodeError as e:
            raise LocalizedError(f"Invalid marker file {marker}: {e}") from e
        if not isinstance(data, dict):
            raise LocalizedError(f"Invalid marker file {marker}: expected a JSON object")

        component_dir = marker.parent
        name = data.get("name") or "_".join(component_dir.relative_to(root).parts)
        src = data.get("src") or DEFAULT_SRC
        if not isinstance(name, str) or not name:
            raise LocalizedError(f"Invalid marker file {marker}: cannot derive a component name")
        if not isinstance(src, str):
            raise LocalizedError(f"Invalid marker file {marker}: 'src' must be a string")

        return name, str(component_dir / src)

    def _validate(self, data: Any) -> None:
        if not isinstance(data, dict):
            raise LocalizedError(f"Configuration file {self.json_path} must contain an object")
        for section in SECTIONS:
            entries = data.get(section, {})
            if not isinstance(entries, dict):
                raise LocalizedError(f"Section '{section}' must be an object")
            for name, entry in entries.items():
                if not isinstance(entry, dict) or not isinstance(entry.get("src"), str):
                    raise LocalizedError(f"Entry '{name}' in '{section}' has no 'src' path")

    @staticmethod
    def _write_atomic(path: Path, content: str) -> None:
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise
