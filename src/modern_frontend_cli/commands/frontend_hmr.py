"""Hot Module Replacement command for modern-frontend CLI.

This module provides the frontend:hmr command for showing and toggling
the HMR development flag stored in the application settings.
"""

import logging

import click

from modern_frontend_cli.commands.exit_codes import ExitCode
from modern_frontend_cli.console_reporter import ConsoleReporter
from modern_frontend_cli.context import FrontendContext
from modern_frontend_cli.exceptions import FrontendError, SettingsError
from modern_frontend_cli.ports import PRODUCTION_MODE, ModeProvider, SettingsBackend
from modern_frontend_cli.settings_store import HMR_ENABLED

logger = logging.getLogger(__name__)

CACHE_HINT = "If configuration cache is active, please clear it to apply the changes."


class HmrToggleCommand:
    """Show, enable or disable Hot Module Replacement (HMR).

    Flags are not mutually exclusive: show wins over enable, enable wins
    over disable.
    """

    def __init__(
        self,
        settings_store: SettingsBackend,
        app_state: ModeProvider,
        reporter: ConsoleReporter,
    ):
        self.settings_store = settings_store
        self.app_state = app_state
        self.reporter = reporter

    def run(self, show: bool = False, enable: bool = False, disable: bool = False) -> ExitCode:
        try:
            if show:
                self.show_status()
            elif enable:
                self.set_hmr(True)
                self.reporter.success(
                    f"Hot Module Replacement (HMR) has been enabled. {CACHE_HINT}"
                )
            elif disable:
                self.set_hmr(False)
                self.reporter.success(
                    f"Hot Module Replacement (HMR) has been disabled. {CACHE_HINT}"
                )
            else:
                self.reporter.error("Please specify an option: --show, --enable, or --disable.")
                return ExitCode.FAILURE
        except FrontendError as e:
            logger.debug(f"frontend:hmr failed: {e!r}")
            self.reporter.error(f"An error occurred: {e}")
            return ExitCode.FAILURE

        return ExitCode.SUCCESS

    def is_enabled(self) -> bool:
        return bool(self.settings_store.get_value(HMR_ENABLED))

    def show_status(self) -> None:
        enabled = self.is_enabled()
        status_text = "enabled" if enabled else "disabled"
        self.reporter.info(f"Hot Module Replacement (HMR) is currently {status_text}.")

        if enabled and self.app_state.get_mode() == PRODUCTION_MODE:
            self.reporter.warning(
                "Hot Module Replacement (HMR) is enabled but will be ignored "
                "because the system is in production mode."
            )

    def set_hmr(self, state: bool) -> None:
        self.settings_store.save(HMR_ENABLED, state)


def register_hmr_command(main: click.Group) -> None:
    """Register frontend:hmr command with main CLI group.

    Args:
        main: The main CLI group to register commands with
    """

    @main.command(name="frontend:hmr")
    @click.option(
        "--show", is_flag=True, help="Show the current status of Hot Module Replacement (HMR)."
    )
    @click.option("--enable", is_flag=True, help="Enable Hot Module Replacement (HMR).")
    @click.option("--disable", is_flag=True, help="Disable Hot Module Replacement (HMR).")
    @click.pass_context
    def frontend_hmr(ctx: click.Context, show: bool, enable: bool, disable: bool):
        """Manage Hot Module Replacement (HMR) for the modern frontend.

        \b
        Examples:
            modern-frontend frontend:hmr --show
            modern-frontend frontend:hmr --enable
            modern-frontend frontend:hmr --disable
        """
        frontend: FrontendContext = ctx.obj
        try:
            settings_store = frontend.get_settings_store()
            app_state = frontend.get_app_state()
        except SettingsError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        command = HmrToggleCommand(settings_store, app_state, frontend.get_reporter())
        exit_code = command.run(show=show, enable=enable, disable=disable)
        ctx.exit(int(exit_code))
