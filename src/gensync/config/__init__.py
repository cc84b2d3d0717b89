# topmark:header:start
#
#   project      : GenSync
#   file         : __init__.py
#   file_relpath : src/gensync/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for GenSync.

The [`Config`][gensync.config.model.Config] dataclass carries the explicit
project root plus formatter and rendering settings. Values are loaded from
``gensync.toml`` or the ``[tool.gensync]`` table of ``pyproject.toml``
(see [`gensync.config.io`][]).
"""

from __future__ import annotations

from gensync.config.io import load_config
from gensync.config.model import Config, FormatterSettings

__all__: list[str] = [
    "Config",
    "FormatterSettings",
    "load_config",
]
