# topmark:header:start
#
#   project      : FlagFile
#   file         : __init__.py
#   file_relpath : src/flagfile/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Click-based command line interface for FlagFile."""

from __future__ import annotations
