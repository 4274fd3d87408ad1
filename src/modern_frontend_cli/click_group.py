"""Custom Click group with automatic help display on errors.

This module provides a custom Click Group class that displays contextual
help when syntax errors occur.
"""

from typing import Any

import click


class FrontendGroup(click.Group):
    """Custom Click group that auto-displays help on usage errors and unknown commands."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except (
            click.exceptions.UsageError,
            click.exceptions.BadParameter,
            click.exceptions.MissingParameter,
        ) as e:
            click.echo(f"Error: {e.format_message()}", err=True)

            # Prefer the subcommand context when the error came from there
            error_ctx = e.ctx if e.ctx else ctx

            click.echo("")
            click.echo(error_ctx.get_help())
            error_ctx.exit(e.exit_code)
            return None  # never reached
