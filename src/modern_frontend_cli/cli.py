"""CLI entry point for modern-frontend.

Commands:
    modern-frontend                      # Show help
    modern-frontend frontend:config      # Generate/show compatibility config
    modern-frontend frontend:hmr         # Show/enable/disable HMR
"""

import logging

import click

from modern_frontend_cli import __version__
from modern_frontend_cli.click_group import FrontendGroup
from modern_frontend_cli.commands import register_config_command, register_hmr_command
from modern_frontend_cli.context import FrontendContext


@click.group(
    cls=FrontendGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option("--config", help="Config file path", type=click.Path(dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """modern-frontend - modern frontend build pipeline administration.

    \b
    COMMANDS:
        frontend:config   Generate or show the modules/themes compatibility config
        frontend:hmr      Show, enable or disable Hot Module Replacement (HMR)

    \b
    EXAMPLES:
        $ modern-frontend frontend:config --generate
        $ modern-frontend frontend:config --show --themes
        $ modern-frontend frontend:hmr --enable
        $ modern-frontend frontend:hmr --show

    \b
    CONFIGURATION:
        Config file: ~/.modern-frontend/config.toml (or MODERN_FRONTEND_CONFIG)
        Keys: project_root, module_roots, theme_roots, output_dir,
              settings_file, marker_file, mode

    For help on any command: modern-frontend <command> --help
    """
    # Set up logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format="%(message)s"
    )

    # If no subcommand provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    # Tests may pass a prepared context through obj=
    if ctx.obj is None:
        ctx.obj = FrontendContext(config_path=config)


register_config_command(main)
register_hmr_command(main)


if __name__ == "__main__":
    main()


__all__ = ["main"]
