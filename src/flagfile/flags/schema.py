# topmark:header:start
#
#   project      : FlagFile
#   file         : schema.py
#   file_relpath : src/flagfile/flags/schema.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Declare a flag set in TOML.

A schema document lists flags under a ``[flags]`` table, one sub-table per flag:

```toml
[flags.verbose]
type = "bool"
default = false
usage = "Enable verbose output."

[flags."server.port"]
type = "uint"
default = 8080
```

Parsing is done with `tomlkit`. Defaults go through the flag's own coercion, so a
schema default obeys exactly the same rules as a value read from a flag file.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from flagfile.config.logging import get_logger
from flagfile.flags.errors import FlagRedefinedError, SchemaError
from flagfile.flags.flagset import FlagSet
from flagfile.flags.values import (
    BoolValue,
    DurationValue,
    FlagValue,
    FloatValue,
    IntValue,
    StringValue,
    UintValue,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path

    from flagfile.config.logging import FlagfileLogger

logger: FlagfileLogger = get_logger(__name__)

FLAGS_TABLE: Final[str] = "flags"
KEY_TYPE: Final[str] = "type"
KEY_DEFAULT: Final[str] = "default"
KEY_USAGE: Final[str] = "usage"

VALUE_TYPES: Final[dict[str, type[FlagValue[Any]]]] = {
    "bool": BoolValue,
    "int": IntValue,
    "uint": UintValue,
    "float": FloatValue,
    "string": StringValue,
    "duration": DurationValue,
}

# Zero values used when a schema entry has no default.
_ZERO_VALUES: Final[dict[str, object]] = {
    "bool": False,
    "int": 0,
    "uint": 0,
    "float": 0.0,
    "string": "",
    "duration": timedelta(0),
}


def _default_text(value: object) -> str:
    """Render a TOML default as flag file text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise TypeError(f"unsupported default of type {type(value).__name__}")


def _build_value(name: str, entry: Mapping[str, Any], where: str) -> FlagValue[Any]:
    type_name = entry.get(KEY_TYPE)
    if not isinstance(type_name, str) or type_name not in VALUE_TYPES:
        raise SchemaError(
            f"{where}: flag {name!r} has invalid type {type_name!r} "
            f"(expected one of: {', '.join(VALUE_TYPES)})"
        )
    value_cls = VALUE_TYPES[type_name]

    value = value_cls(_ZERO_VALUES[type_name])
    if KEY_DEFAULT not in entry:
        return value

    try:
        text = _default_text(entry[KEY_DEFAULT])
    except TypeError as exc:
        raise SchemaError(f"{where}: flag {name!r}: {exc}") from exc
    try:
        value.set(text)
    except ValueError as exc:
        raise SchemaError(f"{where}: invalid default {text!r} for flag {name!r}: {exc}") from exc
    return value


def _iter_entries(
    table: Mapping[str, Any], prefix: str, where: str
) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(dotted_name, entry)`` pairs.

    A sub-table without a ``type`` key is a namespace: ``[flags.server.port]`` and
    ``[flags."server.port"]`` both declare the flag ``server.port``.
    """
    for key, entry in table.items():
        dotted = f"{prefix}{key}"
        if not isinstance(entry, dict):
            raise SchemaError(f"{where}: [{FLAGS_TABLE}.{dotted}] must be a table")
        entry_tbl = cast("dict[str, Any]", entry)
        if KEY_TYPE in entry_tbl:
            yield dotted, entry_tbl
        elif entry_tbl and all(isinstance(v, dict) for v in entry_tbl.values()):
            yield from _iter_entries(entry_tbl, f"{dotted}.", where)
        else:
            raise SchemaError(f"{where}: flag {dotted!r} has no {KEY_TYPE!r}")


def build_flagset(table: Mapping[str, Any], *, source: str = "", name: str = "") -> FlagSet:
    """Build a flag set from an already parsed schema document.

    Args:
        table (Mapping[str, Any]): Parsed document; flags live under ``[flags]``.
        source (str): Where the document came from, used in error messages.
        name (str): Name given to the resulting flag set.

    Returns:
        FlagSet: A flag set with every declared flag registered at its default.

    Raises:
        SchemaError: If the document is structurally invalid.
    """
    where = source or "<schema>"
    flags_any = table.get(FLAGS_TABLE, {})
    if not isinstance(flags_any, dict):
        raise SchemaError(f"{where}: [{FLAGS_TABLE}] must be a table")
    flags_tbl = cast("dict[str, Any]", flags_any)

    fs = FlagSet(name)
    for flag_name, entry_tbl in _iter_entries(flags_tbl, "", where):
        usage = entry_tbl.get(KEY_USAGE, "")
        if not isinstance(usage, str):
            raise SchemaError(f"{where}: flag {flag_name!r}: usage must be a string")
        unknown = sorted(set(entry_tbl) - {KEY_TYPE, KEY_DEFAULT, KEY_USAGE})
        if unknown:
            logger.warning(
                "%s: ignoring unknown key(s) %s for flag %r", where, ", ".join(unknown), flag_name
            )
        try:
            fs.add(flag_name, _build_value(flag_name, entry_tbl, where), usage)
        except FlagRedefinedError as exc:
            raise SchemaError(f"{where}: {exc}") from exc

    logger.debug("%s: declared %d flag(s)", where, len(fs))
    return fs


def load_schema(path: Path, *, name: str = "") -> FlagSet:
    """Load a TOML flag schema from the filesystem.

    Args:
        path (Path): Path to the schema document.
        name (str): Name given to the resulting flag set.

    Returns:
        FlagSet: The declared flags at their defaults.

    Raises:
        SchemaError: If the file cannot be read or parsed, or declares invalid flags.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"cannot read schema {path}: {exc.strerror or exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SchemaError(f"cannot parse schema {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return build_flagset(cast("dict[str, Any]", data_any), source=str(path), name=name)
