# topmark:header:start
#
#   project      : FlagFile
#   file         : __init__.py
#   file_relpath : src/flagfile/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Flag file parsing core: scanner, assignment engine and error model."""

from __future__ import annotations
