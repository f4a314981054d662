# topmark:header:start
#
#   project      : FlagFile
#   file         : errors.py
#   file_relpath : src/flagfile/flags/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Errors raised by the flag registry and the schema loader."""

from __future__ import annotations

from flagfile.core.errors import FlagfileError


class FlagError(FlagfileError):
    """Base class for flag registry errors."""


class FlagRedefinedError(FlagError, ValueError):
    """A flag name was registered twice in the same flag set."""

    def __init__(self, name: str, flagset: str = "") -> None:
        where = f"{flagset} " if flagset else ""
        super().__init__(f"{where}flag redefined: {name}")
        self.name = name


class UnknownFlagError(FlagError, LookupError):
    """No flag is registered under the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no such flag: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidFlagValueError(FlagError, ValueError):
    """A flag value failed the flag's own coercion or validation."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"invalid value {value!r} for flag {name!r}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


class SchemaError(FlagError):
    """A flag schema document could not be loaded or is inconsistent."""
