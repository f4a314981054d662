# topmark:header:start
#
#   project      : FlagFile
#   file         : constants.py
#   file_relpath : src/flagfile/constants.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FLAGFILE_VERSION: str = get_version("flagfile")
