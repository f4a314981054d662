# topmark:header:start
#
#   project      : FlagFile
#   file         : test_errors.py
#   file_relpath : tests/core/test_errors.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Tests for error rendering in `flagfile.core.errors`."""

from __future__ import annotations

from flagfile.core.errors import (
    FlagfileError,
    MalformedLineError,
    ParseError,
    StreamReadError,
    UnknownKeyError,
    ValueRejectedError,
)


def test_parse_error_without_file() -> None:
    err = ParseError(MalformedLineError("b"), line=4)
    assert str(err) == "4: parse error: 'b'"
    assert err.file == ""


def test_parse_error_with_file() -> None:
    err = ParseError(UnknownKeyError("x"), line=12, file="/etc/app.conf")
    assert str(err) == "/etc/app.conf:12: no such flag: 'x'"


def test_cause_is_kept_not_stringified() -> None:
    cause = ValueRejectedError("u", "-1", "value out of range")
    err = ParseError(cause, line=1)
    assert err.cause is cause
    assert cause.reason == "value out of range"


def test_error_hierarchy() -> None:
    assert issubclass(MalformedLineError, ValueError)
    assert issubclass(ValueRejectedError, ValueError)
    assert issubclass(UnknownKeyError, LookupError)
    assert issubclass(StreamReadError, OSError)
    for cls in (
        MalformedLineError,
        ValueRejectedError,
        UnknownKeyError,
        StreamReadError,
        ParseError,
    ):
        assert issubclass(cls, FlagfileError)


def test_unknown_key_message_is_not_repr_quoted_twice() -> None:
    assert str(UnknownKeyError("k")) == "no such flag: 'k'"


def test_stream_read_error_message() -> None:
    assert str(StreamReadError("boom")) == "read error: boom"


def test_repr_mentions_position() -> None:
    text = repr(ParseError(MalformedLineError("zz"), line=3, file="f.conf"))
    assert "f.conf" in text
    assert "line=3" in text
