# topmark:header:start
#
#   project      : FlagFile
#   file         : test_properties.py
#   file_relpath : tests/core/test_properties.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Property tests for the scanner and the assignment engine (Hypothesis)."""

from __future__ import annotations

import string
from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from flagfile.core.engine import parse_string
from flagfile.core.errors import MalformedLineError, ParseError
from flagfile.core.options import ParseOptions
from flagfile.core.target import SetResult

# Text that can never start a comment, a header or split an assignment.
SAFE_CHARS = string.ascii_letters + string.digits + "._-/:+@"
PADDING = st.text(alphabet=" \t", max_size=3)

names = st.text(alphabet=SAFE_CHARS, min_size=1, max_size=12)
values = st.text(alphabet=SAFE_CHARS + " =", max_size=20)
comments = st.builds(
    lambda marker, body: marker + body,
    st.sampled_from("#;"),
    st.text(alphabet=SAFE_CHARS + " #;=[]", max_size=20),
)


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def try_set(self, key: str, value: str) -> SetResult:
        self.calls.append((key, value))
        return SetResult.applied()


noise_line = st.one_of(
    PADDING,
    st.builds(lambda p, c: p + c, PADDING, comments),
    st.builds(lambda p, n: f"{p}[{n}]", PADDING, st.one_of(st.just(""), names)),
)


@given(lines=st.lists(noise_line, max_size=15), sections=st.booleans())
def test_noise_only_inputs_never_touch_the_registry(lines: list[str], sections: bool) -> None:
    target = Recorder()
    parse_string("\n".join(lines), target, ParseOptions(parse_sections=sections))
    assert target.calls == []


@given(pad=st.tuples(PADDING, PADDING, PADDING, PADDING), key=names, value=values)
def test_assignment_dispatches_trimmed_pair(
    pad: tuple[str, str, str, str], key: str, value: str
) -> None:
    target = Recorder()
    parse_string(f"{pad[0]}{key}{pad[1]}={pad[2]}{value}{pad[3]}\n", target)
    assert target.calls == [(key, value.strip())]


@given(section=names, key=names, value=values)
def test_section_scope_prefixes_key(section: str, key: str, value: str) -> None:
    target = Recorder()
    parse_string(
        f"[{section}]\n{key}={value}\n[]\n{key}={value}\n",
        target,
        ParseOptions(parse_sections=True),
    )
    assert target.calls == [(f"{section}.{key}", value.strip()), (key, value.strip())]


@given(words=st.lists(names, min_size=1, max_size=4), before=st.lists(noise_line, max_size=5))
def test_malformed_line_error_names_the_text(words: list[str], before: list[str]) -> None:
    bad = " ".join(words)
    text = "\n".join([*before, f"  {bad}  "])
    with pytest.raises(ParseError) as excinfo:
        parse_string(text, Recorder())
    assert isinstance(excinfo.value.cause, MalformedLineError)
    assert excinfo.value.cause.content == bad
    assert repr(bad) in str(excinfo.value)
    assert excinfo.value.line == len(before) + 1


@given(pairs=st.lists(st.tuples(names, values), max_size=10))
def test_parsing_twice_gives_the_same_calls(pairs: list[tuple[str, str]]) -> None:
    text = "".join(f"{k} = {v}\n" for k, v in pairs)
    first, second = Recorder(), Recorder()
    parse_string(text, first)
    parse_string(text, second)
    assert first.calls == second.calls == [(k, v.strip()) for k, v in pairs]


assignment_line = st.tuples(names, values).map(lambda kv: ("set", kv))
header_line = st.one_of(st.just(""), names).map(lambda s: ("section", s))
blank_or_comment = st.one_of(PADDING, st.builds(lambda p, c: p + c, PADDING, comments))
noise_entry = blank_or_comment.map(lambda n: ("noise", n))


@pytest.mark.hypothesis_slow
@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=500,
)
@given(
    entries=st.lists(st.one_of(assignment_line, header_line, noise_entry), max_size=40),
    sections=st.booleans(),
)
def test_mixed_documents_dispatch_in_order(
    entries: list[tuple[str, Any]], sections: bool
) -> None:
    lines: list[str] = []
    expected: list[tuple[str, str]] = []
    scope = ""
    for kind, payload in entries:
        if kind == "set":
            key, value = payload
            lines.append(f"{key}={value}")
            effective = f"{scope}.{key}" if sections and scope else key
            expected.append((effective, value.strip()))
        elif kind == "section":
            lines.append(f"[{payload}]")
            scope = str(payload)
        else:
            lines.append(str(payload))

    target = Recorder()
    parse_string("\n".join(lines), target, ParseOptions(parse_sections=sections))
    assert target.calls == expected
