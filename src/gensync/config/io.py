# topmark:header:start
#
#   project      : GenSync
#   file         : io.py
#   file_relpath : src/gensync/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load GenSync configuration from TOML.

Sources, in order of precedence (the first one found wins):

1. ``<root>/gensync.toml`` (top-level table);
2. ``<root>/pyproject.toml`` (``[tool.gensync]`` table).

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures.
Typed getters coerce values and fall back to defaults with a debug message
when a value has the wrong type.

Example ``gensync.toml``::

    generator = "`tools/codegen.py`"
    source_url = "https://github.com/acme/widgets/blob/main"

    [formatter]
    command = ["rustfmt", "--edition", "2021"]
    style_config = "rustfmt.toml"
    toolchain = "stable"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from gensync.config.logging import get_logger
from gensync.config.model import Config, FormatterSettings
from gensync.constants import GENSYNC_TOML_NAME, PYPROJECT_SECTION, PYPROJECT_TOML_NAME
from gensync.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from gensync.config.logging import GensyncLogger

TomlTable = dict[str, Any]

logger: GensyncLogger = get_logger(__name__)


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Return True if ``val`` is a TOML table (unwrapped into a ``dict``)."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key`` or an empty dict."""
    value: Any = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The value when it is a string, otherwise ``None``.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.debug("Ignoring non-string value for '%s': %r", key, value)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    A single string is accepted and split on whitespace.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value.split()
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return cast("list[str]", value)
    logger.debug("Ignoring non-list value for '%s': %r", key, value)
    return None


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the document cannot be parsed.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Error decoding TOML from {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def find_config_table(root: Path) -> tuple[TomlTable, Path | None]:
    """Locate the GenSync table for the project at ``root``.

    Returns:
        tuple[TomlTable, Path | None]: The table (possibly empty) and the file
        it was read from (``None`` when no config was found).
    """
    gensync_toml: Path = root / GENSYNC_TOML_NAME
    if gensync_toml.is_file():
        logger.debug("Loading config from %s", gensync_toml)
        return load_toml_dict(gensync_toml), gensync_toml

    pyproject: Path = root / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        table: TomlTable = load_toml_dict(pyproject)
        for key in PYPROJECT_SECTION:
            table = get_table_value(table, key)
        if table:
            logger.debug("Loading [%s] from %s", ".".join(PYPROJECT_SECTION), pyproject)
            return table, pyproject

    logger.debug("No GenSync config found in %s; using defaults", root)
    return {}, None


def formatter_settings_from_table(table: TomlTable) -> FormatterSettings:
    """Build `FormatterSettings` from a ``[formatter]`` table, keeping defaults for gaps."""
    defaults = FormatterSettings()
    command: list[str] | None = get_string_list_or_none(table, "command")
    style_config: str | None = get_string_value_or_none(table, "style_config")
    toolchain_env: str | None = get_string_value_or_none(table, "toolchain_env")

    # An explicit empty string disables the style flag / toolchain pinning.
    return FormatterSettings(
        command=tuple(command) if command else defaults.command,
        style_config=(style_config or None) if "style_config" in table else defaults.style_config,
        style_config_flag=get_string_value_or_none(table, "style_config_flag")
        or defaults.style_config_flag,
        toolchain_env=(toolchain_env or None)
        if "toolchain_env" in table
        else defaults.toolchain_env,
        toolchain=get_string_value_or_none(table, "toolchain") or defaults.toolchain,
    )


def config_from_table(root: Path, table: TomlTable, source: Path | None = None) -> Config:
    """Build a `Config` for ``root`` from an unwrapped GenSync table."""
    base: Config = Config.from_defaults(root)
    return Config(
        root=base.root,
        generator=get_string_value_or_none(table, "generator") or base.generator,
        source_url=get_string_value_or_none(table, "source_url") or base.source_url,
        formatter=formatter_settings_from_table(get_table_value(table, "formatter")),
        config_files=(source,) if source is not None else (),
    )


def load_config(root: Path) -> Config:
    """Load the configuration for the project rooted at ``root``.

    Args:
        root (Path): Project root directory.

    Returns:
        Config: The effective configuration (defaults when no file is found).

    Raises:
        ConfigError: If a config file exists but is malformed.
    """
    table, source = find_config_table(root)
    config: Config = config_from_table(root, table, source)
    logger.trace("Effective config: %s", config.to_dict())
    return config
