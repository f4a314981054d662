# topmark:header:start
#
#   project      : FlagFile
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Pytest configuration for the FlagFile test suite.

Sets up global fixtures and the logging configuration for test runs, and provides
the small flag set most parser tests load into (one flag per basic type, mirroring
how a real application declares its settings).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from flagfile.config import logging
from flagfile.core.engine import parse_string
from flagfile.core.options import DEFAULT_OPTIONS
from flagfile.flags.flagset import FlagSet

if TYPE_CHECKING:
    from flagfile.core.options import ParseOptions

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def silence_flagfile_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure FlagFile's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove FLAGFILE_LOG_LEVEL.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@dataclass
class BasicFlags:
    """A flag set with one bool, uint, int and string flag named b, u, i, s."""

    fs: FlagSet

    @property
    def b(self) -> bool:
        return self.fs["b"]

    @property
    def u(self) -> int:
        return self.fs["u"]

    @property
    def i(self) -> int:
        return self.fs["i"]

    @property
    def s(self) -> str:
        return self.fs["s"]

    def values(self) -> tuple[bool, int, int, str]:
        return (self.b, self.u, self.i, self.s)


ZERO_VALUES: tuple[bool, int, int, str] = (False, 0, 0, "")


def new_flags() -> BasicFlags:
    """Return a fresh [`BasicFlags`][tests.conftest.BasicFlags] at zero values."""
    fs = FlagSet("test")
    fs.add_bool("b", False, "bool flag")
    fs.add_uint("u", 0, "uint flag")
    fs.add_int("i", 0, "int flag")
    fs.add_string("s", "", "string flag")
    return BasicFlags(fs)


def parse_flags(contents: str, options: ParseOptions = DEFAULT_OPTIONS) -> BasicFlags:
    """Parse ``contents`` into fresh basic flags, letting errors propagate."""
    flags = new_flags()
    parse_string(contents, flags.fs, options)
    return flags


@pytest.fixture
def flags() -> BasicFlags:
    """Fresh basic flags."""
    return new_flags()
