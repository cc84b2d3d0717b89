# topmark:header:start
#
#   project      : GenSync
#   file         : __init__.py
#   file_relpath : src/gensync/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    gensync = "gensync.cli.main:cli"

All subcommands live in [`gensync.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
