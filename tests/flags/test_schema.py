# topmark:header:start
#
#   project      : FlagFile
#   file         : test_schema.py
#   file_relpath : tests/flags/test_schema.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Tests for TOML flag schemas (`flagfile.flags.schema`)."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

import pytest
import tomlkit

from flagfile.flags.errors import SchemaError
from flagfile.flags.schema import build_flagset, load_schema

if TYPE_CHECKING:
    from pathlib import Path

SCHEMA = """\
[flags.verbose]
type = "bool"
usage = "Enable verbose output."

[flags.workers]
type = "uint"
default = 4

[flags.ratio]
type = "float"
default = 1

[flags.timeout]
type = "duration"
default = "30s"

[flags."server.host"]
type = "string"
default = "localhost"

[flags.server.port]
type = "uint"
default = 8080
"""


def _write(tmp_path: Path, text: str, name: str = "schema.toml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_schema(tmp_path: Path) -> None:
    fs = load_schema(_write(tmp_path, SCHEMA), name="demo")
    assert fs.name == "demo"
    assert [f.name for f in fs] == [
        "ratio",
        "server.host",
        "server.port",
        "timeout",
        "verbose",
        "workers",
    ]
    assert fs["verbose"] is False
    assert fs["workers"] == 4
    assert fs["ratio"] == 1.0
    assert fs["timeout"] == timedelta(seconds=30)
    assert fs["server.port"] == 8080
    verbose = fs.lookup("verbose")
    assert verbose is not None
    assert verbose.usage == "Enable verbose output."
    assert verbose.default_text == "false"


def test_schema_defaults_are_not_explicit_assignments(tmp_path: Path) -> None:
    fs = load_schema(_write(tmp_path, SCHEMA))
    assert list(fs.iter_set()) == []


def test_build_flagset_from_parsed_document() -> None:
    doc = tomlkit.parse('[flags.name]\ntype = "string"\n').unwrap()
    fs = build_flagset(doc)
    assert fs["name"] == ""


def test_document_without_flags_is_empty() -> None:
    assert len(build_flagset({})) == 0


@pytest.mark.parametrize(
    ("text", "match"),
    [
        ('[flags.x]\ntype = "complex"\n', "invalid type 'complex'"),
        ("[flags.x]\ndefault = 1\n", "has no 'type'"),
        ("[flags]\nx = 1\n", "must be a table"),
        ('flags = "nope"\n', "must be a table"),
        ('[flags.x]\ntype = "uint"\ndefault = -1\n', "invalid default '-1'"),
        ('[flags.x]\ntype = "bool"\ndefault = "yes"\n', "invalid default 'yes'"),
        ('[flags.x]\ntype = "int"\ndefault = [1]\n', "unsupported default"),
        ('[flags.x]\ntype = "int"\nusage = 3\n', "usage must be a string"),
    ],
)
def test_invalid_schemas(tmp_path: Path, text: str, match: str) -> None:
    with pytest.raises(SchemaError, match=match):
        load_schema(_write(tmp_path, text))


def test_duplicate_dotted_name_is_rejected(tmp_path: Path) -> None:
    text = '[flags."a.b"]\ntype = "int"\n\n[flags.a.b]\ntype = "int"\n'
    with pytest.raises(SchemaError, match="flag redefined: a.b"):
        load_schema(_write(tmp_path, text))


def test_unknown_entry_keys_are_warned_about(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("WARNING", logger="flagfile")
    fs = load_schema(_write(tmp_path, '[flags.x]\ntype = "int"\nhelp = "typo"\n'))
    assert "x" in fs
    assert any("help" in r.getMessage() for r in caplog.records)


def test_missing_schema_file(tmp_path: Path) -> None:
    with pytest.raises(SchemaError, match="cannot read schema") as excinfo:
        load_schema(tmp_path / "absent.toml")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_toml_syntax_error(tmp_path: Path) -> None:
    with pytest.raises(SchemaError, match="cannot parse schema"):
        load_schema(_write(tmp_path, "[flags.x\ntype = \n"))
