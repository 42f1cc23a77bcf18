"""In-memory logging adapters for testing.

Contents:
    * :class:`LogSinkSpy` - Records log sink calls instead of touching the root logger.
    * :func:`init_logging_in_memory` - No-op console logging initializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from configtools.application.ports import ConfigurationService
from configtools.domain.enums import LogLevel


def _empty_levels() -> list[LogLevel]:
    return []


def _empty_destinations() -> list[tuple[Path, str]]:
    return []


@dataclass
class LogSinkSpy:
    """Captures LogSinkController calls for test assertions.

    Attributes:
        levels: Every level passed to ``set_level``, in call order.
        file_destinations: Every ``(path, pattern)`` passed to
            ``replace_file_destination``, in call order.
        raise_exception: When set, both operations raise this exception
            without recording the call.

    Example:
        >>> spy = LogSinkSpy()
        >>> spy.set_level(LogLevel.OFF)
        >>> spy.current_level
        <LogLevel.OFF: 'off'>
    """

    levels: list[LogLevel] = field(default_factory=_empty_levels)
    file_destinations: list[tuple[Path, str]] = field(default_factory=_empty_destinations)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.levels.clear()
        self.file_destinations.clear()
        self.raise_exception = None

    @property
    def current_level(self) -> LogLevel | None:
        return self.levels[-1] if self.levels else None

    @property
    def current_destination(self) -> tuple[Path, str] | None:
        return self.file_destinations[-1] if self.file_destinations else None

    def set_level(self, level: LogLevel) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.levels.append(level)

    def replace_file_destination(self, path: Path, pattern: str) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.file_destinations.append((path, pattern))


def init_logging_in_memory(config: ConfigurationService) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


__all__ = ["LogSinkSpy", "init_logging_in_memory"]
