# topmark:header:start
#
#   project      : FlagFile
#   file         : __init__.py
#   file_relpath : src/flagfile/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Runtime configuration of FlagFile itself (logging)."""

from __future__ import annotations
