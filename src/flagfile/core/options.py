# topmark:header:start
#
#   project      : FlagFile
#   file         : options.py
#   file_relpath : src/flagfile/core/options.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Parser options fixed for the lifetime of one parse call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ParseOptions:
    """Behavioral switches for a single parse.

    Attributes:
        allow_unknown_keys (bool): Skip assignments whose effective key is not known
            to the registry instead of aborting the parse.
        parse_sections (bool): Prefix keys with the active ``[section]`` name
            (``section.key``). When False, section headers are recognized and ignored.
    """

    allow_unknown_keys: bool = False
    parse_sections: bool = False


DEFAULT_OPTIONS: Final[ParseOptions] = ParseOptions()
