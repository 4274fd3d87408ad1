"""Compatibility configuration command for modern-frontend CLI.

This module provides the frontend:config command for generating and
displaying the configuration of modules and themes compatible with the
modern frontend.
"""

import logging
from typing import Any

import click

from modern_frontend_cli.commands.exit_codes import ExitCode
from modern_frontend_cli.console_reporter import ConsoleReporter
from modern_frontend_cli.context import FrontendContext
from modern_frontend_cli.exceptions import FrontendError, SettingsError
from modern_frontend_cli.ports import CompatibilityConfigManager

logger = logging.getLogger(__name__)

USAGE_LINES = [
    "--generate   Generate or update the configuration file.",
    "--show       Display the current configuration of compatible modules and themes.",
    "--modules    Display only the modules configuration.",
    "--themes     Display only the themes configuration.",
]


class ConfigQueryCommand:
    """Generate or display the modules/themes compatibility configuration."""

    def __init__(self, config_manager: CompatibilityConfigManager, reporter: ConsoleReporter):
        self.config_manager = config_manager
        self.reporter = reporter

    def run(
        self,
        generate: bool = False,
        show: bool = False,
        modules_only: bool = False,
        themes_only: bool = False,
    ) -> ExitCode:
        """Execute the command.

        Args:
            generate: Regenerate the configuration file
            show: Display the configuration (generated first when missing)
            modules_only: Restrict display to the modules section
            themes_only: Restrict display to the themes section

        Returns:
            ExitCode.SUCCESS, or ExitCode.FAILURE when no action was requested
            or a collaborator failed
        """
        if not generate and not show:
            self.show_usage()
            return ExitCode.FAILURE

        try:
            if generate:
                self.generate_config()
            elif not self.config_manager.has_config():
                self.reporter.note("Configuration file not found. Generating it now...")
                self.generate_config()

            if show:
                self.show_config(modules_only, themes_only)
        except FrontendError as e:
            logger.debug(f"frontend:config failed: {e!r}")
            self.reporter.error(str(e))
            return ExitCode.FAILURE

        return ExitCode.SUCCESS

    def generate_config(self) -> None:
        self.config_manager.generate()
        self.reporter.info("Configuration file has been generated successfully.")

        rows = [[path] for path in self.config_manager.get_config_file_path()]
        self.reporter.table(["Files Generated"], rows)

    def show_config(self, modules_only: bool, themes_only: bool) -> None:
        config_data = self.config_manager.get()
        self.reporter.info("Current Configuration")

        if not modules_only and not themes_only:
            modules_only = themes_only = True

        if modules_only:
            self._show_section(config_data, "modules", "Module")
        if themes_only:
            self._show_section(config_data, "themes", "Theme")

    def _show_section(self, config_data: dict[str, Any], section: str, label: str) -> None:
        self.reporter.note(f"{section.capitalize()} Configuration")

        entries = config_data.get(section)
        if not entries:
            self.reporter.warning(f"No {section} configuration found.")
            return

        rows = [[name, entry["src"]] for name, entry in entries.items()]
        self.reporter.table([label, "Path"], rows)

    def show_usage(self) -> None:
        self.reporter.error("No option specified. Use one of the following:")
        self.reporter.listing(USAGE_LINES)


def register_config_command(main: click.Group) -> None:
    """Register frontend:config command with main CLI group.

    Args:
        main: The main CLI group to register commands with
    """

    @main.command(name="frontend:config")
    @click.option(
        "--generate",
        is_flag=True,
        help="Generate or update the configuration file for active compatible modules and themes.",
    )
    @click.option(
        "--show",
        is_flag=True,
        help="Display the current configuration of compatible modules and themes.",
    )
    @click.option("--modules", is_flag=True, help="Display only the modules configuration.")
    @click.option("--themes", is_flag=True, help="Display only the themes configuration.")
    @click.pass_context
    def frontend_config(
        ctx: click.Context, generate: bool, show: bool, modules: bool, themes: bool
    ):
        """Manage configuration of modules and themes compatible with the modern frontend.

        \b
        Examples:
            modern-frontend frontend:config --generate
            modern-frontend frontend:config --show
            modern-frontend frontend:config --show --modules
            modern-frontend frontend:config --show --themes
        """
        frontend: FrontendContext = ctx.obj
        try:
            config_manager = frontend.get_config_manager()
        except SettingsError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        command = ConfigQueryCommand(config_manager, frontend.get_reporter())
        exit_code = command.run(
            generate=generate, show=show, modules_only=modules, themes_only=themes
        )
        ctx.exit(int(exit_code))
