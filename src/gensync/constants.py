# topmark:header:start
#
#   project      : GenSync
#   file         : constants.py
#   file_relpath : src/gensync/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

GENSYNC_VERSION: str = get_version("gensync")

# Line comment syntax recognized by the scanner.
COMMENT_MARKER: str = "//"
COMMENT_PREFIX: str = f"{COMMENT_MARKER} "

# Separator between a tag name and the block identifier (``Section: widgets``).
TAG_SEPARATOR: str = ":"

PREAMBLE: str = "Generated file, do not edit by hand, see"

# Config discovery inside the project root.
GENSYNC_TOML_NAME: str = "gensync.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: tuple[str, str] = ("tool", "gensync")

LOG_LEVEL_ENV: str = "GENSYNC_LOG_LEVEL"
