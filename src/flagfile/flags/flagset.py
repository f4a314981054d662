# topmark:header:start
#
#   project      : FlagFile
#   file         : flagset.py
#   file_relpath : src/flagfile/flags/flagset.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Registry of named, typed flags.

A [`FlagSet`][flagfile.flags.flagset.FlagSet] maps flag names to typed values. It is
the registry the parser assigns into: it implements
[`FlagTarget`][flagfile.core.target.FlagTarget] through
[`try_set`][flagfile.flags.flagset.FlagSet.try_set], reporting a typed outcome instead
of raising.

Typical usage:
    ```python
    from flagfile import FlagSet, parse_file

    flags = FlagSet("server")
    flags.add_uint("port", 8080, "Port to listen on.")
    flags.add_bool("debug", False, "Enable debug output.")

    parse_file("server.conf", flags)
    port: int = flags["port"]
    ```

Names are opaque, case-sensitive strings; dotted names (``server.port``) are how
section-scoped keys are addressed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from flagfile.config.logging import get_logger
from flagfile.core.target import SetResult
from flagfile.flags.errors import FlagRedefinedError, InvalidFlagValueError, UnknownFlagError
from flagfile.flags.values import (
    BoolValue,
    DurationValue,
    FlagValue,
    FloatValue,
    FuncValue,
    IntValue,
    StringValue,
    UintValue,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from datetime import timedelta

    from flagfile.config.logging import FlagfileLogger

logger: FlagfileLogger = get_logger(__name__)


@dataclass
class Flag:
    """A registered flag.

    Attributes:
        name (str): Flag name as used in flag files.
        usage (str): Help text.
        value (FlagValue[Any]): Typed value holder.
        default_text (str): Rendering of the value at registration time.
    """

    name: str
    usage: str
    value: FlagValue[Any]
    default_text: str

    @property
    def type_name(self) -> str:
        """Return the short type name of the value (``bool``, ``int``, ...)."""
        return self.value.type_name


class FlagSet:
    """A named set of flags.

    Args:
        name (str): Optional name used in error messages.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._formal: dict[str, Flag] = {}
        self._actual: dict[str, Flag] = {}

    # --- Registration ---

    def add(self, name: str, value: FlagValue[Any], usage: str = "") -> Flag:
        """Register ``value`` under ``name``.

        Raises:
            FlagRedefinedError: If ``name`` is already registered.
        """
        if name in self._formal:
            raise FlagRedefinedError(name, self.name)
        flag = Flag(name=name, usage=usage, value=value, default_text=str(value))
        self._formal[name] = flag
        logger.trace("Registered flag %r (%s, default=%r)", name, value.type_name, str(value))
        return flag

    def add_bool(self, name: str, default: bool = False, usage: str = "") -> Flag:
        """Register a boolean flag."""
        return self.add(name, BoolValue(default), usage)

    def add_int(self, name: str, default: int = 0, usage: str = "") -> Flag:
        """Register a signed integer flag."""
        return self.add(name, IntValue(default), usage)

    def add_uint(self, name: str, default: int = 0, usage: str = "") -> Flag:
        """Register an unsigned integer flag."""
        if default < 0:
            raise ValueError(f"default for uint flag {name!r} must be >= 0")
        return self.add(name, UintValue(default), usage)

    def add_float(self, name: str, default: float = 0.0, usage: str = "") -> Flag:
        """Register a floating point flag."""
        return self.add(name, FloatValue(default), usage)

    def add_string(self, name: str, default: str = "", usage: str = "") -> Flag:
        """Register a string flag."""
        return self.add(name, StringValue(default), usage)

    def add_duration(self, name: str, default: timedelta, usage: str = "") -> Flag:
        """Register a duration flag."""
        return self.add(name, DurationValue(default), usage)

    def add_func(self, name: str, fn: Callable[[str], None], usage: str = "") -> Flag:
        """Register a flag that calls ``fn`` with each assigned text."""
        return self.add(name, FuncValue(fn), usage)

    # --- Lookup ---

    def lookup(self, name: str) -> Flag | None:
        """Return the flag registered under ``name``, or None."""
        return self._formal.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._formal

    def __iter__(self) -> Iterator[Flag]:
        for name in sorted(self._formal):
            yield self._formal[name]

    def __len__(self) -> int:
        return len(self._formal)

    def __getitem__(self, name: str) -> Any:
        flag = self._formal.get(name)
        if flag is None:
            raise UnknownFlagError(name)
        return flag.value.get()

    # --- Assignment ---

    def set(self, name: str, text: str) -> None:
        """Assign ``text`` to the flag ``name``.

        Raises:
            UnknownFlagError: If ``name`` is not registered.
            InvalidFlagValueError: If the flag's coercion or callback rejects ``text``
                (any exception it raises is converted).
        """
        flag = self._formal.get(name)
        if flag is None:
            raise UnknownFlagError(name)
        try:
            flag.value.set(text)
        except Exception as exc:
            raise InvalidFlagValueError(name, text, str(exc)) from exc
        self._actual[name] = flag

    def try_set(self, key: str, value: str) -> SetResult:
        """Assign like [`set`][flagfile.flags.flagset.FlagSet.set] but report a typed outcome.

        Returns:
            SetResult: ``APPLIED``, ``UNKNOWN_KEY`` or ``REJECTED`` (with the
                [`InvalidFlagValueError`][flagfile.flags.errors.InvalidFlagValueError]).
        """
        try:
            self.set(key, value)
        except UnknownFlagError as exc:
            return SetResult.unknown_key(exc)
        except InvalidFlagValueError as exc:
            return SetResult.rejected(exc)
        return SetResult.applied()

    def is_set(self, name: str) -> bool:
        """Return True if ``name`` was explicitly assigned."""
        return name in self._actual

    def iter_set(self) -> Iterator[Flag]:
        """Iterate the explicitly assigned flags, sorted by name."""
        for name in sorted(self._actual):
            yield self._actual[name]

    def as_dict(self) -> dict[str, Any]:
        """Return a ``{name: value}`` snapshot of all flags."""
        return {flag.name: flag.value.get() for flag in self}

    def __repr__(self) -> str:
        return f"FlagSet(name={self.name!r}, flags={len(self)})"
