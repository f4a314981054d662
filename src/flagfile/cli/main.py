# topmark:header:start
#
#   project      : FlagFile
#   file         : main.py
#   file_relpath : src/flagfile/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them from
there.
"""

from __future__ import annotations

import click

from flagfile.cli.cli_types import ColorMode
from flagfile.cli.commands.check import check_command
from flagfile.cli.commands.scan import scan_command
from flagfile.cli.commands.version import version_command
from flagfile.cli.console import ClickConsole
from flagfile.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from flagfile.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose
    ctx.obj["verbosity_level"] = level_cli

    # FLAGFILE_LOG_LEVEL wins; otherwise -v/-vv/-vvv turn on INFO/DEBUG/TRACE logging.
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else (level_cli if verbose else None)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Load and check key=value flag files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the FlagFile CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'flagfile check CONFIG --schema SCHEMA' to validate a flag file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(scan_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
