# topmark:header:start
#
#   project      : GenSync
#   file         : location.py
#   file_relpath : src/gensync/location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source locations rendered as cross-references for generated documentation.

A [`Location`][gensync.location.Location] renders as::

    crates/ide/src/hover.rs#L42[hover.rs]

or, with a ``base_url``::

    https://github.com/acme/widgets/blob/main/crates/ide/src/hover.rs#L42[hover.rs]

Paths always use ``/`` separators, whatever the host platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gensync.config.logging import GensyncLogger, get_logger
from gensync.utils.file import relative_to_root

logger: GensyncLogger = get_logger(__name__)


@dataclass(frozen=True)
class Location:
    """A (file, line) pair inside the project root.

    Attributes:
        file (Path): Source file; must lie inside the root passed to `render`.
        line (int): 1-based line number.
    """

    file: Path
    line: int

    def render(self, root: Path, *, base_url: str | None = None) -> str:
        """Render the root-relative descriptor string.

        Args:
            root (Path): Project root; must be an ancestor of ``self.file``.
            base_url (str | None): Optional URL prefix joined with ``/``.

        Returns:
            str: ``"[<base_url>/]<relpath>#L<line>[<basename>]"``.

        Raises:
            ValueError: If ``self.file`` is not inside ``root``.
        """
        rel: Path | None = relative_to_root(self.file, root)
        if rel is None:
            raise ValueError(f"{self.file} is not inside the project root {root}")
        path: str = rel.as_posix().replace("\\", "/")
        if base_url:
            path = f"{base_url.rstrip('/')}/{path}"
        return f"{path}#L{self.line}[{self.file.name}]"
