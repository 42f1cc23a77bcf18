"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful integer instead of a bare ``1``.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    ``CONFIG_ERROR`` is ``EX_CONFIG`` from sysexits.h. Usage errors keep
    Click's own exit code 2.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
