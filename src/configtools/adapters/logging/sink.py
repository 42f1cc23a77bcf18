"""Standard-library implementation of the log sink controller.

Applies the ``loglevel``, ``logfile`` and ``logpattern`` settings to the
process-wide root logger.

Contents:
    * :class:`LogFileSettings` - Pydantic validation of a file destination request.
    * :func:`to_logging_level` - Map :class:`LogLevel` onto stdlib level numbers.
    * :func:`build_file_handler` - Daily rotating, appending file handler.
    * :class:`StdlibLogSinkController` - The controller used in production.

System Role:
    Lives in the adapters layer; the resolution engine only sees the
    ``LogSinkController`` port.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from configtools.domain.enums import LogLevel
from configtools.domain.errors import LogConfigurationError

#: Python has no TRACE level; it sits below DEBUG.
TRACE: Final[int] = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS: Final[dict[LogLevel, int]] = {
    LogLevel.ALL: 1,
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.OFF: logging.CRITICAL + 1,
}

#: Rotated files are named ``<logfile>.<ROTATION_SUFFIX>``.
ROTATION_SUFFIX: Final[str] = "%Y-%m-%d"


def to_logging_level(level: LogLevel) -> int:
    """Return the stdlib level number for *level*.

    Example:
        >>> to_logging_level(LogLevel.WARN) == logging.WARNING
        True
        >>> to_logging_level(LogLevel.OFF) > logging.CRITICAL
        True
    """
    return _LEVELS[level]


class LogFileSettings(BaseModel):
    """Validated request for a file log destination.

    Example:
        >>> settings = LogFileSettings(path=Path("/tmp/app.log"), pattern="%(message)s")
        >>> settings.path.name
        'app.log'
    """

    path: Path
    pattern: str

    model_config = ConfigDict(frozen=True)

    @field_validator("path")
    @classmethod
    def _path_is_named(cls, value: Path) -> Path:
        if str(value).strip() in ("", "."):
            raise ValueError("log file path is empty")
        return value

    @field_validator("pattern")
    @classmethod
    def _pattern_is_percent_format(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("log pattern is empty")
        # Raises ValueError for patterns without any %(field)s placeholder.
        logging.Formatter(value, style="%", validate=True)
        return value


def build_file_handler(settings: LogFileSettings) -> logging.handlers.TimedRotatingFileHandler:
    """Create the appending, midnight-rotating handler for *settings*.

    Rotated files keep the ``<logfile>.YYYY-MM-DD`` naming and are never
    pruned (``backupCount=0``).
    """
    settings.path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        settings.path,
        when="midnight",
        backupCount=0,
        encoding="utf-8",
    )
    handler.suffix = ROTATION_SUFFIX
    handler.setFormatter(logging.Formatter(settings.pattern))
    return handler


class StdlibLogSinkController:
    """Drive the root logger (or *logger*, for tests) from configuration.

    Example:
        >>> target = logging.getLogger("configtools.example")
        >>> StdlibLogSinkController(target).set_level(LogLevel.ERROR)
        >>> target.level == logging.ERROR
        True
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger()
        self.file_handler: logging.Handler | None = None

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(to_logging_level(level))

    def replace_file_destination(self, path: Path, pattern: str) -> None:
        """Swap every handler of the logger for one rotating file handler.

        The new handler is built before anything is detached, so a bad path
        or pattern leaves the existing destinations in place.

        Raises:
            LogConfigurationError: If the path or pattern is invalid or the
                file cannot be opened.
        """
        try:
            settings = LogFileSettings(path=path, pattern=pattern)
            handler = build_file_handler(settings)
        except ValidationError as exc:
            raise LogConfigurationError(f"invalid log file configuration: {exc}") from exc
        except OSError as exc:
            raise LogConfigurationError(f"cannot open log file {path}: {exc}") from exc

        for existing in list(self._logger.handlers):
            self._logger.removeHandler(existing)
            existing.close()
        self._logger.addHandler(handler)
        self.file_handler = handler


__all__ = [
    "ROTATION_SUFFIX",
    "TRACE",
    "LogFileSettings",
    "StdlibLogSinkController",
    "build_file_handler",
    "to_logging_level",
]
