# topmark:header:start
#
#   project      : FlagFile
#   file         : version.py
#   file_relpath : src/flagfile/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile `version` command.

Prints the current FlagFile version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from flagfile.cli.cli_types import OutputFormat
from flagfile.cli.options import output_format_option
from flagfile.constants import FLAGFILE_VERSION

if TYPE_CHECKING:
    from flagfile.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of FlagFile.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of FlagFile.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if (output_format or OutputFormat.TEXT) == OutputFormat.JSON:
        console.print(json.dumps({"version": FLAGFILE_VERSION}))
    else:
        console.print(console.styled(FLAGFILE_VERSION, bold=True))
