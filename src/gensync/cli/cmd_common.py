# topmark:header:start
#
#   project      : GenSync
#   file         : cmd_common.py
#   file_relpath : src/gensync/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by GenSync subcommands.

Subcommands fetch the console and the lazily loaded configuration from the
Click context object populated by the group (see [`gensync.cli.main`][]).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import click

from gensync.cli.errors import GensyncConfigError, GensyncFileNotFoundError, GensyncIOError
from gensync.config.io import load_config
from gensync.config.logging import get_logger
from gensync.errors import ConfigError

if TYPE_CHECKING:
    from gensync.cli.console import ClickConsole
    from gensync.config.model import Config

logger = get_logger(__name__)


class OutputFormat(Enum):
    """Program output formats for listing commands."""

    TEXT = "text"
    JSON = "json"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the effective configuration, loading it on first use.

    Raises:
        GensyncConfigError: If the config file is malformed.
    """
    ctx.ensure_object(dict)
    config: Config | None = ctx.obj.get("config")
    if config is None:
        root: Path = ctx.obj.get("root") or Path.cwd()
        try:
            config = load_config(root)
        except ConfigError as exc:
            raise GensyncConfigError(str(exc)) from exc
        ctx.obj["config"] = config
    return config


def read_text_input(source: str) -> str:
    """Read text from a file path or from STDIN when ``source`` is ``-``.

    Raises:
        GensyncFileNotFoundError: If the file does not exist.
        GensyncIOError: If the file cannot be read or decoded.
    """
    if source == "-":
        # Strict UTF-8 without newline translation, as for files.
        try:
            return click.get_binary_stream("stdin").read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise GensyncIOError(f"Cannot read STDIN: {exc}") from exc
    path = Path(source)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise GensyncFileNotFoundError(f"No such file: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise GensyncIOError(f"Cannot read {path}: {exc}") from exc
