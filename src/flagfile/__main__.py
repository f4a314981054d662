# topmark:header:start
#
#   project      : FlagFile
#   file         : __main__.py
#   file_relpath : src/flagfile/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Module entry point for running FlagFile via ``python -m flagfile``.

Delegates to :func:`flagfile.cli.main.cli`, the single authoritative CLI entry point.

Examples:
    Check a flag file against a schema::

        python -m flagfile check app.conf --schema flags.toml
"""

from __future__ import annotations

from flagfile.cli.main import cli

if __name__ == "__main__":
    cli()
