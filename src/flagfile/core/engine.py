# topmark:header:start
#
#   project      : FlagFile
#   file         : engine.py
#   file_relpath : src/flagfile/core/engine.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Assignment engine: apply a flag file to a registry.

The engine drives the [scanner][flagfile.core.scanner] one line at a time, keeps the
current ``[section]`` scope, composes effective keys and hands each assignment to a
[`FlagTarget`][flagfile.core.target.FlagTarget]. Parsing stops at the first error,
which is raised as a [`ParseError`][flagfile.core.errors.ParseError] annotated with the
line number (and the file path when parsing through
[`parse_file`][flagfile.core.engine.parse_file]).

Assignments made before a failing line are kept; there is no rollback.

The engine keeps no state between calls. Concurrent parses into the same registry
are not coordinated.
"""

from __future__ import annotations

import io
import os
from typing import IO, TYPE_CHECKING, AnyStr

from flagfile.config.logging import get_logger
from flagfile.core.errors import (
    MalformedLineError,
    ParseError,
    StreamReadError,
    UnknownKeyError,
    ValueRejectedError,
)
from flagfile.core.options import DEFAULT_OPTIONS, ParseOptions
from flagfile.core.scanner import LineKind, iter_lines
from flagfile.core.target import SetOutcome, SetResult

if TYPE_CHECKING:
    from flagfile.config.logging import FlagfileLogger
    from flagfile.core.scanner import ScannedLine
    from flagfile.core.target import FlagTarget

logger: FlagfileLogger = get_logger(__name__)

SECTION_SEPARATOR = "."


def compose_key(scope: str, key: str, *, sections: bool) -> str:
    """Return the effective registry key for ``key`` under ``scope``.

    Args:
        scope (str): Active section name (``""`` for the root scope).
        key (str): Bare key from the assignment line.
        sections (bool): Whether section scoping is enabled.

    Returns:
        str: ``scope.key`` when sections are enabled and a scope is active, else ``key``.
    """
    if sections and scope:
        return f"{scope}{SECTION_SEPARATOR}{key}"
    return key


def _rejection(key: str, value: str, result: SetResult) -> Exception:
    """Map a failed registry outcome to the parser's error taxonomy."""
    if result.outcome is SetOutcome.UNKNOWN_KEY:
        err: Exception = UnknownKeyError(key)
    else:
        reason = getattr(result.error, "reason", None) or str(result.error)
        err = ValueRejectedError(key, value, reason)
    err.__cause__ = result.error
    return err


class _Assigner:
    """Per-call state of one parse: section scope and the current line number."""

    def __init__(self, target: FlagTarget, options: ParseOptions) -> None:
        self.target = target
        self.options = options
        self.scope = ""
        self.lineno = 0

    def feed(self, line: ScannedLine) -> None:
        """Apply one scanned line.

        Raises:
            MalformedLineError: For a malformed line.
            UnknownKeyError: For an unknown key when unknown keys are not tolerated.
            ValueRejectedError: When the registry rejects the value.
        """
        self.lineno = line.lineno
        kind = line.kind

        if kind is LineKind.BLANK:
            return

        if kind is LineKind.SECTION:
            if self.options.parse_sections:
                logger.trace("line %d: entering section [%s]", line.lineno, line.section)
                self.scope = line.section
            else:
                logger.trace("line %d: ignoring section [%s]", line.lineno, line.section)
            return

        if kind is LineKind.MALFORMED:
            raise MalformedLineError(line.content)

        key = compose_key(self.scope, line.key, sections=self.options.parse_sections)
        try:
            result = self.target.try_set(key, line.value)
        except Exception as exc:
            # A registry that raises instead of reporting is treated as a rejection.
            result = SetResult.rejected(exc)
        if result.ok:
            logger.trace("line %d: %s = %r", line.lineno, key, line.value)
            return
        if result.outcome is SetOutcome.UNKNOWN_KEY and self.options.allow_unknown_keys:
            logger.debug("line %d: skipping unknown key %r", line.lineno, key)
            return
        raise _rejection(key, line.value, result)


def parse(
    stream: IO[AnyStr],
    target: FlagTarget,
    options: ParseOptions = DEFAULT_OPTIONS,
    *,
    encoding: str = "utf-8",
) -> None:
    """Parse newline-delimited ``name=value`` pairs from ``stream`` into ``target``.

    Comments begin at any ``#`` or ``;`` character and whitespace is trimmed. Blank
    lines are ignored. ``[section]`` headers are ignored unless
    ``options.parse_sections`` is set, in which case following keys are looked up
    as ``section.key``.

    Args:
        stream (IO[AnyStr]): Readable text or binary stream. It is not closed.
        target (FlagTarget): Registry receiving the assignments.
        options (ParseOptions): Parser options.
        encoding (str): Encoding used when ``stream`` yields bytes.

    Raises:
        ParseError: On the first malformed line, rejected assignment or read error.
            The underlying error is available as ``ParseError.cause``.
    """
    state = _Assigner(target, options)
    lines = iter_lines(stream, encoding=encoding)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as exc:
            # Nothing more can be read; attribute the failure to the last line reached.
            err = StreamReadError(str(exc))
            err.__cause__ = exc
            raise ParseError(err, line=state.lineno) from err
        try:
            state.feed(line)
        except (MalformedLineError, UnknownKeyError, ValueRejectedError) as exc:
            raise ParseError(exc, line=line.lineno) from exc


def parse_string(
    text: str,
    target: FlagTarget,
    options: ParseOptions = DEFAULT_OPTIONS,
) -> None:
    """Parse flag file ``text`` held in memory.

    Raises:
        ParseError: As for [`parse`][flagfile.core.engine.parse].
    """
    parse(io.StringIO(text), target, options)


def parse_file(
    path: str | os.PathLike[str],
    target: FlagTarget,
    options: ParseOptions = DEFAULT_OPTIONS,
    *,
    encoding: str = "utf-8",
) -> None:
    """Open ``path``, parse it into ``target`` and close it.

    Args:
        path (str | os.PathLike[str]): Flag file to read.
        target (FlagTarget): Registry receiving the assignments.
        options (ParseOptions): Parser options.
        encoding (str): Text encoding of the file.

    Raises:
        OSError: If ``path`` cannot be opened (not annotated with a line).
        ParseError: As for [`parse`][flagfile.core.engine.parse], with ``file`` set
            to the resolved path.
    """
    resolved = os.path.abspath(os.fspath(path))
    logger.debug("Loading flag file %s", resolved)
    with open(resolved, encoding=encoding) as fp:
        try:
            parse(fp, target, options)
        except ParseError as exc:
            exc.file = resolved
            raise
