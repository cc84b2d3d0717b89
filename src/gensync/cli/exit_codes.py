# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/gensync/cli/exit_codes.py
#   project      : GenSync
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the GenSync CLI.

GenSync aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `STALE=2`, which
signals that a generated file was out of date in ``--mode ensure`` (and has been
rewritten). Click reports its own parameter errors with 2 as well.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the GenSync CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        STALE: A generated file was not up to date (``--mode ensure``).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        FORMATTER_UNAVAILABLE: The external formatter is missing or failed.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    STALE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    FORMATTER_UNAVAILABLE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
