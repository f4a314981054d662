# topmark:header:start
#
#   project      : FlagFile
#   file         : __init__.py
#   file_relpath : src/flagfile/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile package.

FlagFile loads ``key=value`` flag files (INI-like, with ``#``/``;`` comments and
optional ``[section]`` scoping) into a registry of named, typed flags. It exposes a
small typed API and a CLI for checking flag files against a TOML flag schema.
"""

from __future__ import annotations

from flagfile.core.config_flag import ConfigFileValue, config_flag
from flagfile.core.engine import compose_key, parse, parse_file, parse_string
from flagfile.core.errors import (
    FlagfileError,
    MalformedLineError,
    ParseError,
    StreamReadError,
    UnknownKeyError,
    ValueRejectedError,
)
from flagfile.core.options import DEFAULT_OPTIONS, ParseOptions
from flagfile.core.scanner import LineKind, ScannedLine, iter_lines, scan_line
from flagfile.core.target import FlagTarget, SetOutcome, SetResult
from flagfile.flags import (
    Flag,
    FlagError,
    FlagRedefinedError,
    FlagSet,
    FlagValue,
    InvalidFlagValueError,
    SchemaError,
    UnknownFlagError,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "ConfigFileValue",
    "Flag",
    "FlagError",
    "FlagRedefinedError",
    "FlagSet",
    "FlagTarget",
    "FlagValue",
    "FlagfileError",
    "InvalidFlagValueError",
    "LineKind",
    "MalformedLineError",
    "ParseError",
    "ParseOptions",
    "ScannedLine",
    "SchemaError",
    "SetOutcome",
    "SetResult",
    "StreamReadError",
    "UnknownFlagError",
    "UnknownKeyError",
    "ValueRejectedError",
    "compose_key",
    "config_flag",
    "iter_lines",
    "parse",
    "parse_file",
    "parse_string",
    "scan_line",
]
