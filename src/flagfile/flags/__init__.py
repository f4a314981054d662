# topmark:header:start
#
#   project      : FlagFile
#   file         : __init__.py
#   file_relpath : src/flagfile/flags/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Typed flag registry and schema loading."""

from __future__ import annotations

from flagfile.flags.errors import (
    FlagError,
    FlagRedefinedError,
    InvalidFlagValueError,
    SchemaError,
    UnknownFlagError,
)
from flagfile.flags.flagset import Flag, FlagSet
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

__all__ = [
    "BoolValue",
    "DurationValue",
    "Flag",
    "FlagError",
    "FlagRedefinedError",
    "FlagSet",
    "FlagValue",
    "FloatValue",
    "FuncValue",
    "IntValue",
    "InvalidFlagValueError",
    "SchemaError",
    "StringValue",
    "UintValue",
    "UnknownFlagError",
]
