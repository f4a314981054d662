# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/flagfile/cli/options.py
#   project      : FlagFile
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, parser switches,
output format) and their resolution logic, so commands and groups can stay thin.
It also provides [`config_file_option`][flagfile.cli.options.config_file_option],
which lets any Click application load a flag file into a
[`FlagSet`][flagfile.flags.flagset.FlagSet] from a ``--config PATH`` option.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from flagfile.cli.cli_types import ColorMode, EnumChoiceParam, OutputFormat
from flagfile.cli.errors import FlagfileUsageError, cli_error_for
from flagfile.config.logging import TRACE_LEVEL, get_logger
from flagfile.core.engine import parse_file
from flagfile.core.errors import ParseError
from flagfile.core.options import DEFAULT_OPTIONS, ParseOptions

if TYPE_CHECKING:
    from flagfile.core.target import FlagTarget

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        FlagfileUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FlagfileUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. Machine formats (JSON) never use color.
      2. ``--color=always`` / ``--color=never``.
      3. ``FORCE_COLOR`` (set and not ``"0"``) enables, ``NO_COLOR`` disables.
      4. Otherwise, color follows ``stdout.isatty()``.
    """
    if output_format == OutputFormat.JSON:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a --format option selecting text or JSON output."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def parse_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --allow-unknown-keys and --sections, the parser switches."""
    f = click.option(
        "--allow-unknown-keys",
        "allow_unknown_keys",
        is_flag=True,
        default=False,
        help="Skip keys that the schema does not declare instead of failing.",
    )(f)
    f = click.option(
        "--sections",
        "parse_sections",
        is_flag=True,
        default=False,
        help="Prefix keys with their [section] name (section.key).",
    )(f)
    return f


def config_file_option(
    target: FlagTarget,
    *param_decls: str,
    options: ParseOptions = DEFAULT_OPTIONS,
    **attrs: object,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a decorator adding an option that loads a flag file into ``target``.

    The option (``--config`` unless ``param_decls`` says otherwise) is eager, so
    the flag file is applied before the command body runs. Parse and open errors
    are reported as CLI errors with the matching exit code.

    Args:
        target (FlagTarget): Registry the flag file is loaded into.
        *param_decls (str): Click parameter declarations, e.g. ``"--settings"``.
        options (ParseOptions): Parser options used for the load (keyword only).
        **attrs (object): Extra keyword arguments forwarded to `click.option`.

    Returns:
        Callable[[Callable[P, R]], Callable[P, R]]: The option decorator.
    """

    def _load(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
        if value is None or ctx.resilient_parsing:
            return value
        try:
            parse_file(value, target, options)
        except (OSError, ParseError) as exc:
            raise cli_error_for(exc) from exc
        logger.info("Loaded flag file %s", value)
        return value

    decls = param_decls or ("--config",)
    attrs.setdefault("type", click.Path(dir_okay=False))
    attrs.setdefault("help", "Load flag values from a flag file.")
    attrs.setdefault("is_eager", True)
    attrs.setdefault("expose_value", True)
    return click.option(*decls, callback=_load, **attrs)  # type: ignore[arg-type]
