"""Runtime context shared by the CLI commands.

The click group stores a FrontendContext on ``ctx.obj``. The CLI settings
file is read on first use, so ``--help`` works even when it is broken.
Collaborators are built lazily from the settings unless they were
supplied up front, which is how tests inject fakes.
"""

import logging
from dataclasses import dataclass

from modern_frontend_cli.app_state import AppState
from modern_frontend_cli.config_manager import ConfigManager
from modern_frontend_cli.console_reporter import ConsoleReporter
from modern_frontend_cli.ports import CompatibilityConfigManager, ModeProvider, SettingsBackend
from modern_frontend_cli.settings import CliSettings, SettingsLoader
from modern_frontend_cli.settings_store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class FrontendContext:
    """Settings plus the collaborators the commands delegate to."""

    settings: CliSettings | None = None
    config_manager: CompatibilityConfigManager | None = None
    settings_store: SettingsBackend | None = None
    app_state: ModeProvider | None = None
    reporter: ConsoleReporter | None = None
    config_path: str | None = None

    def get_settings(self) -> CliSettings:
        """Return the CLI settings, loading them on first call.

        Raises:
            SettingsError: If the settings file is missing or invalid
        """
        if self.settings is None:
            self.settings = SettingsLoader.load(self.config_path)
            logger.debug(f"Project root: {self.settings.project_root}")
        return self.settings

    def get_config_manager(self) -> CompatibilityConfigManager:
        if self.config_manager is None:
            self.config_manager = ConfigManager.from_settings(self.get_settings())
        return self.config_manager

    def get_settings_store(self) -> SettingsBackend:
        if self.settings_store is None:
            self.settings_store = SettingsStore(self.get_settings().settings_path)
        return self.settings_store

    def get_app_state(self) -> ModeProvider:
        if self.app_state is None:
            self.app_state = AppState(self.get_settings().mode)
        return self.app_state

    def get_reporter(self) -> ConsoleReporter:
        if self.reporter is None:
            self.reporter = ConsoleReporter()
        return self.reporter
