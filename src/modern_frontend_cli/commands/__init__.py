"""Commands for modern-frontend CLI."""

from modern_frontend_cli.commands.exit_codes import ExitCode
from modern_frontend_cli.commands.frontend_config import ConfigQueryCommand, register_config_command
from modern_frontend_cli.commands.frontend_hmr import HmrToggleCommand, register_hmr_command

__all__ = [
    "ConfigQueryCommand",
    "ExitCode",
    "HmrToggleCommand",
    "register_config_command",
    "register_hmr_command",
]
