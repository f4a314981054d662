# topmark:header:start
#
#   project      : FlagFile
#   file         : errors.py
#   file_relpath : src/flagfile/core/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Error model for the flag file parser.

Every error raised while parsing a stream leaves [`parse`][flagfile.core.engine.parse]
as a single [`ParseError`][flagfile.core.errors.ParseError] carrying the 1-based line
number, the file identity (when known) and the underlying cause. The cause is one of:

- [`MalformedLineError`][flagfile.core.errors.MalformedLineError]: a non-blank line that
  is neither a section header nor an assignment. Always fatal.
- [`UnknownKeyError`][flagfile.core.errors.UnknownKeyError]: the registry does not know
  the effective key. Fatal unless unknown keys are tolerated.
- [`ValueRejectedError`][flagfile.core.errors.ValueRejectedError]: the registry knows the
  key but refused the value. Always fatal.
- [`StreamReadError`][flagfile.core.errors.StreamReadError]: the input could not be read
  to the end. Always fatal.

Errors raised while *opening* a file are not parse errors and propagate unchanged.
"""

from __future__ import annotations


class FlagfileError(Exception):
    """Base class for all FlagFile errors."""


class MalformedLineError(FlagfileError, ValueError):
    """A non-blank line is neither a ``[section]`` header nor a ``key=value`` pair.

    Attributes:
        content (str): The comment-stripped, trimmed offending text.
    """

    def __init__(self, content: str) -> None:
        super().__init__(f"parse error: {content!r}")
        self.content = content


class UnknownKeyError(FlagfileError, LookupError):
    """The registry has no flag registered under the effective key.

    Attributes:
        key (str): The effective (possibly section-prefixed) key.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"no such flag: {key!r}")
        self.key = key

    def __str__(self) -> str:
        # LookupError would otherwise repr() the single argument.
        return str(self.args[0])


class ValueRejectedError(FlagfileError, ValueError):
    """The registry recognized the key but rejected the value.

    Attributes:
        key (str): The effective key.
        value (str): The trimmed value text that was rejected.
        reason (str): Human-readable reason reported by the registry.
    """

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(f"invalid value {value!r} for flag {key!r}: {reason}")
        self.key = key
        self.value = value
        self.reason = reason


class StreamReadError(FlagfileError, OSError):
    """The input stream failed while being read.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"read error: {reason}")

    def __str__(self) -> str:
        return str(self.args[0])


class ParseError(FlagfileError):
    """A parse failure annotated with its position.

    Attributes:
        file (str): Path of the source, or ``""`` when the source has no known identity.
        line (int): 1-based line number at which parsing stopped.
        cause (Exception): The underlying error (also chained as ``__cause__``).
    """

    def __init__(self, cause: Exception, *, line: int, file: str = "") -> None:
        super().__init__(cause)
        self.cause = cause
        self.line = line
        self.file = file

    def __str__(self) -> str:
        if self.file:
            return f"{self.file}:{self.line}: {self.cause}"
        return f"{self.line}: {self.cause}"

    def __repr__(self) -> str:
        return f"ParseError(file={self.file!r}, line={self.line}, cause={self.cause!r})"
