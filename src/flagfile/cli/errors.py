# topmark:header:start
#
#   project      : FlagFile
#   file         : errors.py
#   file_relpath : src/flagfile/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Exceptions for the FlagFile CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. [`cli_error_for`][flagfile.cli.errors.cli_error_for]
    maps library and OS errors to the matching class.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from flagfile.cli.exit_codes import ExitCode
from flagfile.core.errors import FlagfileError


class FlagfileCliError(click.ClickException):
    """Base class for all FlagFile CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class FlagfileUsageError(FlagfileCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FlagfileConfigError(FlagfileCliError):
    """Error for a malformed or rejected flag file, or an invalid schema."""

    exit_code = ExitCode.CONFIG_ERROR


class FlagfileFileNotFoundError(FlagfileCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FlagfilePermissionDeniedError(FlagfileCliError):
    """Error for insufficient permissions."""

    exit_code = ExitCode.PERMISSION_DENIED


class FlagfileIOError(FlagfileCliError):
    """Error for other I/O errors while reading files."""

    exit_code = ExitCode.IO_ERROR


class FlagfileEncodingError(FlagfileCliError):
    """Error for input that cannot be decoded as text."""

    exit_code = ExitCode.ENCODING_ERROR


def cli_error_for(exc: Exception) -> FlagfileCliError:
    """Return the CLI error matching a library or OS exception.

    Args:
        exc (Exception): Error raised while loading a schema or a flag file.

    Returns:
        FlagfileCliError: An exception carrying the matching exit code.
    """
    if isinstance(exc, FlagfileError) and isinstance(exc.__cause__, FileNotFoundError):
        return FlagfileFileNotFoundError(str(exc))
    if isinstance(exc, FileNotFoundError):
        return FlagfileFileNotFoundError(f"{exc.filename or exc}: file not found")
    if isinstance(exc, PermissionError):
        return FlagfilePermissionDeniedError(f"{exc.filename or exc}: permission denied")
    if isinstance(exc, FlagfileError):
        return FlagfileConfigError(str(exc))
    if isinstance(exc, UnicodeDecodeError):
        return FlagfileEncodingError(f"cannot decode input: {exc}")
    if isinstance(exc, OSError):
        if exc.filename:
            return FlagfileIOError(f"{exc.filename}: {exc.strerror or exc}")
        return FlagfileIOError(str(exc))
    return FlagfileCliError(str(exc))
