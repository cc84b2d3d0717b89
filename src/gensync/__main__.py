# topmark:header:start
#
#   project      : GenSync
#   file         : __main__.py
#   file_relpath : src/gensync/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running GenSync via ``python -m gensync``.

Delegates to :func:`gensync.cli.main.cli`, the same Click group used by the
``gensync`` console script.

Examples:
    Verify a checked-in generated file from CI::

        my-generator | python -m gensync sync --mode ensure src/generated.rs
"""

from __future__ import annotations

from gensync.cli.main import cli

if __name__ == "__main__":
    cli()
