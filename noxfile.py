# topmark:header:start
#
#   project      : GenSync
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GenSync project automation via Nox.

Sessions:
  - `qa`: pytest + pyright, once per supported Python.
  - `lint` / `format_check` / `format`: Ruff.
  - `property_test`: Hypothesis property tests only.

Supported Pythons are read from the ``Programming Language :: Python :: X.Y``
classifiers in ``pyproject.toml``, so the matrix has a single source of truth.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib

    def _load_pyproject(text: str) -> dict[str, Any]:
        return tomllib.loads(text)

else:
    import tomlkit

    def _load_pyproject(text: str) -> dict[str, Any]:
        return tomlkit.parse(text).unwrap()


PYPROJECT: Path = Path(__file__).parent / "pyproject.toml"
_CLASSIFIER_RE = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions declared in the project classifiers.

    Falls back to the running interpreter when none are declared.
    """
    project: dict[str, Any] = _load_pyproject(PYPROJECT.read_text(encoding="utf-8")).get(
        "project", {}
    )
    found: set[tuple[int, int]] = set()
    for classifier in project.get("classifiers", []):
        match = _CLASSIFIER_RE.match(classifier)
        if match:
            found.add((int(match.group(1)), int(match.group(2))))
    if not found:
        found.add(sys.version_info[:2])
    return [f"{major}.{minor}" for major, minor in sorted(found)]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and pyright."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "tests", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail if Ruff would reformat anything."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:  # noqa: A001
    """Apply Ruff formatting."""
    session.install("ruff")
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run only the Hypothesis property tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-k", "property", *session.posargs)
