# topmark:header:start
#
#   project      : FlagFile
#   file         : scan.py
#   file_relpath : src/flagfile/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile `scan` command.

Shows how each line of a flag file is classified, without applying it to any
schema. Unlike parsing, scanning continues past malformed lines so that all of
them are reported; the command still fails if any was found.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from flagfile.cli.cli_types import OutputFormat
from flagfile.cli.errors import FlagfileConfigError, cli_error_for
from flagfile.cli.options import output_format_option
from flagfile.core.scanner import LineKind, iter_lines

if TYPE_CHECKING:
    from flagfile.cli.console import ClickConsole
    from flagfile.core.scanner import ScannedLine


def describe(line: ScannedLine) -> str:
    """Return a short human-readable description of a scanned line."""
    if line.kind is LineKind.SECTION:
        return f"[{line.section}]"
    if line.kind is LineKind.ASSIGNMENT:
        return f"{line.key} = {line.value}"
    return line.content


def as_record(line: ScannedLine) -> dict[str, Any]:
    """Return the JSON record for a scanned line."""
    record: dict[str, Any] = {"line": line.lineno, "kind": line.kind.value}
    if line.kind is LineKind.SECTION:
        record["section"] = line.section
    elif line.kind is LineKind.ASSIGNMENT:
        record["key"] = line.key
        record["value"] = line.value
    elif line.kind is LineKind.MALFORMED:
        record["content"] = line.content
    return record


@click.command(
    name="scan",
    help="Show how each line of a flag file is classified.",
)
@click.argument("config_path", metavar="CONFIG", type=click.Path(dir_okay=False))
@click.option(
    "--all",
    "show_blank",
    is_flag=True,
    default=False,
    help="Also list blank and comment-only lines.",
)
@output_format_option
def scan_command(
    *,
    config_path: str,
    show_blank: bool,
    output_format: OutputFormat | None = None,
) -> None:
    """List the classified lines of CONFIG."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    try:
        with open(config_path, encoding="utf-8") as fp:
            lines = [
                line for line in iter_lines(fp) if show_blank or line.kind is not LineKind.BLANK
            ]
    except (OSError, UnicodeDecodeError) as exc:
        raise cli_error_for(exc) from exc

    malformed = [line for line in lines if line.kind is LineKind.MALFORMED]

    if (output_format or OutputFormat.TEXT) == OutputFormat.JSON:
        console.print(json.dumps([as_record(line) for line in lines], indent=2))
    else:
        for line in lines:
            kind = line.kind.value.ljust(10)
            if line.kind is LineKind.MALFORMED:
                kind = console.styled(kind, fg="red")
            console.print(f"{line.lineno:>5}  {kind} {describe(line)}")

    if malformed:
        first = malformed[0]
        raise FlagfileConfigError(
            f"{config_path}:{first.lineno}: {len(malformed)} malformed line(s), "
            f"first: {first.content!r}"
        )
