# topmark:header:start
#
#   project      : FlagFile
#   file         : values.py
#   file_relpath : src/flagfile/flags/values.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Typed flag values.

Each [`FlagValue`][flagfile.flags.values.FlagValue] owns the coercion from text to a
Python value. A failed coercion raises ``ValueError``; the flag set turns that into
an [`InvalidFlagValueError`][flagfile.flags.errors.InvalidFlagValueError].

The accepted syntaxes follow Go's ``flag`` package so that existing flag files keep
their meaning:

- bool: ``1 t T TRUE true True 0 f F FALSE false False``
- int / uint: ASCII integer literals with optional ``0x``/``0o``/``0b`` prefix, a
  leading ``0`` meaning octal, and ``_`` separators; 64-bit range
- float: anything ``float()`` accepts
- duration: ``300ms``, ``1h30m``, ``-1.5h``, ``0``
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Final, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1

_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9A-Za-z_]+", re.ASCII)
_LEGACY_OCTAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?0[0-7_]+", re.ASCII)


class FlagValue(ABC, Generic[T]):
    """Holder of a typed flag value with text coercion.

    Subclasses implement [`parse`][flagfile.flags.values.FlagValue.parse] and, when the
    default ``str()`` rendering does not fit, [`format`][flagfile.flags.values.FlagValue.format].
    """

    type_name: ClassVar[str] = "value"
    is_bool_flag: ClassVar[bool] = False

    def __init__(self, default: T) -> None:
        self._value: T = default

    @abstractmethod
    def parse(self, text: str) -> T:
        """Convert ``text`` to a typed value.

        Raises:
            ValueError: If ``text`` is not acceptable for this type.
        """

    def format(self, value: T) -> str:
        """Render ``value`` as flag file text."""
        return str(value)

    def set(self, text: str) -> None:
        """Parse ``text`` and store the result (last write wins)."""
        self._value = self.parse(text)

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def __str__(self) -> str:
        return self.format(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def parse_bool(text: str) -> bool:
    """Parse a boolean the way Go's ``strconv.ParseBool`` does."""
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError("invalid syntax, expected a boolean")


class BoolValue(FlagValue[bool]):
    """Boolean flag value."""

    type_name = "bool"
    is_bool_flag = True

    def parse(self, text: str) -> bool:
        return parse_bool(text)

    def format(self, value: bool) -> str:
        return "true" if value else "false"


def parse_int(text: str, *, lo: int, hi: int) -> int:
    """Parse an integer literal within ``[lo, hi]`` like Go's ``strconv.ParseInt(s, 0, 64)``.

    Base prefixes ``0x``, ``0o`` and ``0b`` are honored and a bare leading ``0`` means
    octal (``0123`` is 83). Only ASCII digits are accepted.
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError("invalid syntax, expected an integer")
    if _LEGACY_OCTAL_RE.fullmatch(text):
        sign, digits = (text[0], text[2:]) if text[0] in "+-" else ("", text[1:])
        text = f"{sign}0o{digits}"
    try:
        n = int(text, 0)
    except ValueError:
        raise ValueError("invalid syntax, expected an integer") from None
    if not lo <= n <= hi:
        raise ValueError(f"value out of range [{lo}, {hi}]")
    return n


class IntValue(FlagValue[int]):
    """Signed 64-bit integer flag value."""

    type_name = "int"

    def parse(self, text: str) -> int:
        return parse_int(text, lo=INT64_MIN, hi=INT64_MAX)


class UintValue(FlagValue[int]):
    """Unsigned 64-bit integer flag value."""

    type_name = "uint"

    def parse(self, text: str) -> int:
        return parse_int(text, lo=0, hi=UINT64_MAX)


class FloatValue(FlagValue[float]):
    """Floating point flag value."""

    type_name = "float"

    def parse(self, text: str) -> float:
        try:
            return float(text)
        except ValueError:
            raise ValueError("invalid syntax, expected a number") from None


class StringValue(FlagValue[str]):
    """String flag value, stored verbatim."""

    type_name = "string"

    def parse(self, text: str) -> str:
        return text


# Units in microseconds, the resolution of `timedelta`.
_DURATION_UNITS: Final[dict[str, Decimal]] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # micro sign
    "μs": Decimal(1),  # greek mu
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_DURATION_PART_RE: Final[re.Pattern[str]] = re.compile(
    r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
)
_DURATION_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:ns|us|µs|μs|ms|s|m|h))+"
)


def parse_duration(text: str) -> timedelta:
    """Parse a Go-style duration string such as ``1h30m`` or ``-250ms``."""
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION_RE.fullmatch(text):
        raise ValueError("invalid duration, expected e.g. '300ms' or '1h30m'")
    sign = -1 if text.startswith("-") else 1
    total = Decimal(0)
    for number, unit in _DURATION_PART_RE.findall(text):
        total += Decimal(number) * _DURATION_UNITS[unit]
    return timedelta(microseconds=sign * int(total))


def format_duration(value: timedelta) -> str:
    """Render a duration in the compact ``1h2m3.5s`` form."""
    us = value // timedelta(microseconds=1)
    if us == 0:
        return "0s"
    sign = "-" if us < 0 else ""
    us = abs(us)
    if us < 1_000:
        return f"{sign}{us}µs"
    if us < 1_000_000:
        return f"{sign}{_trim(Decimal(us) / 1_000)}ms"
    hours, rest = divmod(us, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_trim(Decimal(rest) / 1_000_000)}s"


def _trim(d: Decimal) -> str:
    s = format(d, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


class DurationValue(FlagValue[timedelta]):
    """Duration flag value stored as ``datetime.timedelta``."""

    type_name = "duration"

    def parse(self, text: str) -> timedelta:
        return parse_duration(text)

    def format(self, value: timedelta) -> str:
        return format_duration(value)


class FuncValue(FlagValue[str]):
    """Flag value that forwards each assignment to a callback.

    The callback receives the text; raising ``ValueError`` rejects it. The last
    accepted text is kept as the value.
    """

    type_name = "func"

    def __init__(self, fn: Callable[[str], None]) -> None:
        super().__init__("")
        self._fn = fn

    def parse(self, text: str) -> str:
        self._fn(text)
        return text
