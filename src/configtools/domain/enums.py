"""Type-safe domain enums for log levels, source kinds and output formats."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidLogLevelError


class LogLevel(str, Enum):
    """Severities accepted by the ``loglevel`` configuration key.

    Matching is case-insensitive; ``warn`` is the spelling used in
    configuration files, not Python's ``warning``.

    Example:
        >>> LogLevel.parse("WARN")
        <LogLevel.WARN: 'warn'>
        >>> LogLevel.parse(" off ") is LogLevel.OFF
        True
    """

    ALL = "all"
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    OFF = "off"

    @classmethod
    def parse(cls, raw: str) -> LogLevel:
        """Return the level named by *raw*.

        Raises:
            InvalidLogLevelError: If *raw* names no known level.
        """
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(level.value for level in cls)
            raise InvalidLogLevelError(f"invalid log level {raw!r}: expected one of {allowed}") from exc


class SourceKind(str, Enum):
    """Which backing source answers ordinary lookups.

    Example:
        >>> SourceKind.ENVIRONMENT.value
        'environment'
    """

    FILE = "file"
    ENVIRONMENT = "environment"
    DEFAULT = "default"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class ValueType(str, Enum):
    """Typed accessor selected by the ``get`` command."""

    STRING = "string"
    LONG = "long"
    INT = "int"
    DOUBLE = "double"
    BOOLEAN = "boolean"


__all__ = [
    "LogLevel",
    "OutputFormat",
    "SourceKind",
    "ValueType",
]
