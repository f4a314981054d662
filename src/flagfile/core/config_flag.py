# topmark:header:start
#
#   project      : FlagFile
#   file         : config_flag.py
#   file_relpath : src/flagfile/core/config_flag.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""A flag whose value is the path of a flag file to load.

Registering ``config_flag(flags)`` under e.g. ``config`` lets one flag file (or a
command line) pull in another: setting the flag parses the named file into
``flags``.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from flagfile.core.engine import parse_file
from flagfile.core.errors import ParseError
from flagfile.core.options import DEFAULT_OPTIONS, ParseOptions
from flagfile.flags.values import FlagValue

if TYPE_CHECKING:
    from flagfile.core.target import FlagTarget


class ConfigFileValue(FlagValue[str]):
    """Flag value that loads a flag file into a target when set.

    The stored value is the last path loaded, but ``str()`` is always empty so the
    flag has no meaningful default to display. A file that (directly or indirectly)
    loads itself is rejected.
    """

    type_name = "config"

    def __init__(self, target: FlagTarget, options: ParseOptions = DEFAULT_OPTIONS) -> None:
        super().__init__("")
        self._target = target
        self._options = options
        self._loading: set[str] = set()

    def parse(self, text: str) -> str:
        resolved = os.path.abspath(text)
        if resolved in self._loading:
            raise ValueError(f"recursive load of {resolved}")
        self._loading.add(resolved)
        try:
            parse_file(resolved, self._target, self._options)
        except OSError as exc:
            raise ValueError(f"cannot open {text}: {exc.strerror or exc}") from exc
        except ParseError as exc:
            raise ValueError(str(exc)) from exc
        finally:
            self._loading.discard(resolved)
        return text

    def format(self, value: str) -> str:
        return ""


def config_flag(target: FlagTarget, options: ParseOptions = DEFAULT_OPTIONS) -> ConfigFileValue:
    """Return a flag value that, when set to a path, parses that file into ``target``."""
    return ConfigFileValue(target, options)
