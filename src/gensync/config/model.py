# topmark:header:start
#
#   project      : GenSync
#   file         : model.py
#   file_relpath : src/gensync/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable configuration model.

`Config` is built once per invocation (from defaults or from a TOML file via
[`gensync.config.io.load_config`][]) and passed explicitly to the operations
that need the project root or formatter settings. Nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_GENERATOR: str = "`xtask/src/codegen`"


@dataclass(frozen=True)
class FormatterSettings:
    """How to invoke the external formatter.

    Attributes:
        command (tuple[str, ...]): Executable and fixed arguments, e.g.
            ``("rustfmt", "--config", "fn_single_line=true")``.
        style_config (str | None): Style configuration file, relative to the
            project root. ``None`` disables the style flag.
        style_config_flag (str): Flag used to pass ``style_config``.
        toolchain_env (str | None): Environment variable used to pin the
            toolchain for the formatter process.
        toolchain (str): Value assigned to ``toolchain_env``.
    """

    command: tuple[str, ...] = ("rustfmt", "--config", "fn_single_line=true")
    style_config: str | None = "rustfmt.toml"
    style_config_flag: str = "--config-path"
    toolchain_env: str | None = "RUSTUP_TOOLCHAIN"
    toolchain: str = "stable"

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping (used by diagnostics output)."""
        return {
            "command": list(self.command),
            "style_config": self.style_config,
            "style_config_flag": self.style_config_flag,
            "toolchain_env": self.toolchain_env,
            "toolchain": self.toolchain,
        }


@dataclass(frozen=True)
class Config:
    """Per-invocation configuration.

    Attributes:
        root (Path): Absolute project root. Relative paths in messages and
            location descriptors are rendered against it.
        generator (str): Location cited by the generated-file preamble.
        source_url (str | None): Optional base URL prepended to rendered
            locations (e.g. a repository browse URL).
        formatter (FormatterSettings): External formatter invocation.
        config_files (tuple[Path, ...]): Files the values were loaded from.
    """

    root: Path
    generator: str = DEFAULT_GENERATOR
    source_url: str | None = None
    formatter: FormatterSettings = field(default_factory=FormatterSettings)
    config_files: tuple[Path, ...] = ()

    @classmethod
    def from_defaults(cls, root: Path) -> Config:
        """Return a configuration with built-in defaults for ``root``."""
        return cls(root=root.resolve())

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping of the effective configuration."""
        return {
            "root": str(self.root),
            "generator": self.generator,
            "source_url": self.source_url,
            "formatter": self.formatter.to_dict(),
            "config_files": [str(p) for p in self.config_files],
        }
