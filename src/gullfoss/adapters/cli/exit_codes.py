"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - process exit codes (sysexits-style where one fits).
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    Values follow sysexits.h and errno conventions:

    * 0–1: generic success / failure
    * 2: usage error (Click)
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
