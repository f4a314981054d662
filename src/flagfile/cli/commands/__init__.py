# topmark:header:start
#
#   project      : FlagFile
#   file         : __init__.py
#   file_relpath : src/flagfile/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""FlagFile CLI subcommands."""

from __future__ import annotations
