# topmark:header:start
#
#   project      : FlagFile
#   file         : test_scan.py
#   file_relpath : tests/cli/test_scan.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""CLI tests for the `scan` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from flagfile.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

CONF = "# settings\n[server]\nport = 80 ; http\n\nname=a=b\n"


@mark_cli
def test_scan_lists_classified_lines(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_text(CONF, encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "scan", "app.conf"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "    2  section    [server]",
        "    3  assignment port = 80",
        "    5  assignment name = a=b",
    ]


@mark_cli
def test_scan_all_includes_blank_lines(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_text(CONF, encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "scan", "app.conf", "--all"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == 5
    assert lines[0].split() == ["1", "blank"]


@mark_cli
def test_scan_json(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_text(CONF, encoding="utf-8")
    result = run_cli_in(tmp_path, ["scan", "app.conf", "--format", "json"])

    assert_SUCCESS(result)
    records = json.loads(result.output)
    assert records == [
        {"line": 2, "kind": "section", "section": "server"},
        {"line": 3, "kind": "assignment", "key": "port", "value": "80"},
        {"line": 5, "kind": "assignment", "key": "name", "value": "a=b"},
    ]


@mark_cli
def test_scan_reports_all_malformed_lines_and_fails(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_text("a=1\nbad line\nb=2\nalso bad\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "scan", "app.conf"])

    assert_CONFIG_ERROR(result)
    assert "    2  malformed  bad line" in result.output
    assert "    4  malformed  also bad" in result.output
    assert "app.conf:2: 2 malformed line(s), first: 'bad line'" in result.output


@mark_cli
def test_scan_missing_file(tmp_path: Path) -> None:
    assert_FILE_NOT_FOUND(run_cli_in(tmp_path, ["scan", "absent.conf"]))


@mark_cli
def test_scan_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_bytes(b"a=\xff\xfe\n")
    result = run_cli_in(tmp_path, ["scan", "app.conf"])

    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
