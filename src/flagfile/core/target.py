# topmark:header:start
#
#   project      : FlagFile
#   file         : target.py
#   file_relpath : src/flagfile/core/target.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Contract between the parser and the settings registry it populates.

The parser only needs to hand a key and a value to the registry and learn which
of three things happened. The outcome is typed so that "unknown key" can be told
apart from "bad value" without inspecting error text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class SetOutcome(Enum):
    """Result of offering a value to a registry."""

    APPLIED = "applied"
    UNKNOWN_KEY = "unknown_key"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SetResult:
    """Typed outcome of [`FlagTarget.try_set`][flagfile.core.target.FlagTarget.try_set].

    Attributes:
        outcome (SetOutcome): What happened.
        error (Exception | None): The registry's exception for ``REJECTED`` (and optionally
            ``UNKNOWN_KEY``); ``None`` when applied.
    """

    outcome: SetOutcome
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Return True if the value was applied."""
        return self.outcome is SetOutcome.APPLIED

    @classmethod
    def applied(cls) -> SetResult:
        """Return the shared success result."""
        return _APPLIED

    @classmethod
    def unknown_key(cls, error: Exception | None = None) -> SetResult:
        """Return an ``UNKNOWN_KEY`` result."""
        return cls(SetOutcome.UNKNOWN_KEY, error)

    @classmethod
    def rejected(cls, error: Exception) -> SetResult:
        """Return a ``REJECTED`` result wrapping ``error``."""
        return cls(SetOutcome.REJECTED, error)


_APPLIED = SetResult(SetOutcome.APPLIED)


@runtime_checkable
class FlagTarget(Protocol):
    """Anything the parser can assign values to."""

    def try_set(self, key: str, value: str) -> SetResult:
        """Offer ``value`` for ``key`` without raising for unknown keys or bad values."""
        ...
