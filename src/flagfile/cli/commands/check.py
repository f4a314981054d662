# topmark:header:start
#
#   project      : FlagFile
#   file         : check.py
#   file_relpath : src/flagfile/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile `check` command.

Loads a TOML flag schema, applies a flag file to it and prints the resulting
flag values. Any malformed line, unknown flag (unless ``--allow-unknown-keys``)
or rejected value fails the command with ``CONFIG_ERROR``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from flagfile.cli.cli_types import OutputFormat
from flagfile.cli.errors import cli_error_for
from flagfile.cli.options import output_format_option, parse_options
from flagfile.config.logging import get_logger
from flagfile.core.engine import parse_file
from flagfile.core.errors import ParseError
from flagfile.core.options import ParseOptions
from flagfile.flags.errors import SchemaError
from flagfile.flags.schema import load_schema

if TYPE_CHECKING:
    from flagfile.cli.console import ClickConsole
    from flagfile.flags.flagset import FlagSet

logger = get_logger(__name__)

SET_MARKER = "*"


def render_text(flags: FlagSet, console: ClickConsole, *, verbosity: int) -> None:
    """Print one ``name = value`` line per flag; set flags are marked with ``*``."""
    width = max((len(flag.name) for flag in flags), default=0)
    for flag in flags:
        marker = SET_MARKER if flags.is_set(flag.name) else " "
        name = console.styled(flag.name.ljust(width), bold=True)
        line = f"{marker} {name} = {flag.value}"
        if verbosity > 0:
            line += console.styled(f"  ({flag.type_name}, default {flag.default_text!r})", dim=True)
        console.print(line)
        if verbosity > 0 and flag.usage:
            console.print(f"      {flag.usage}")


def render_json(flags: FlagSet, file: str) -> str:
    """Return the machine-readable view of ``flags`` after loading ``file``."""
    payload = {
        "file": file,
        "flags": {flag.name: str(flag.value) for flag in flags},
        "set": [flag.name for flag in flags.iter_set()],
    }
    return json.dumps(payload, indent=2)


@click.command(
    name="check",
    help="Apply a flag file to a TOML flag schema and show the resulting values.",
)
@click.argument("config_path", metavar="CONFIG", type=click.Path(dir_okay=False))
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="TOML document declaring the flags under [flags].",
)
@parse_options
@output_format_option
def check_command(
    *,
    config_path: str,
    schema_path: str,
    allow_unknown_keys: bool,
    parse_sections: bool,
    output_format: OutputFormat | None = None,
) -> None:
    """Check CONFIG against the flags declared in the schema.

    Args:
        config_path (str): Flag file to load.
        schema_path (str): TOML schema declaring the flags.
        allow_unknown_keys (bool): Skip undeclared keys instead of failing.
        parse_sections (bool): Prefix keys with their ``[section]`` name.
        output_format (OutputFormat | None): Output format (text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity", 0)

    try:
        flags = load_schema(Path(schema_path))
    except SchemaError as exc:
        raise cli_error_for(exc) from exc

    options = ParseOptions(allow_unknown_keys=allow_unknown_keys, parse_sections=parse_sections)
    logger.info("Checking %s against %s (%s)", config_path, schema_path, options)
    try:
        parse_file(config_path, flags, options)
    except (OSError, ParseError) as exc:
        raise cli_error_for(exc) from exc

    if (output_format or OutputFormat.TEXT) == OutputFormat.JSON:
        console.print(render_json(flags, os.path.abspath(config_path)))
    else:
        render_text(flags, console, verbosity=verbosity)
