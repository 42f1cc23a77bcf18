"""Domain-specific exceptions for typed error handling at boundaries.

Every error raised by the resolution engine derives from
:class:`ConfigurationError` so callers can catch the whole family at once.
The more specific types also inherit from the builtin exception that best
describes them (``KeyError``, ``ValueError``) so generic handlers keep working.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Example:
        >>> from configtools.domain.errors import ConfigurationError
        >>> err = ConfigurationError("no default configuration")
        >>> str(err)
        'no default configuration'
    """


class MissingDefaultConfigurationError(ConfigurationError):
    """The bundled default resource could not be located or read.

    Fatal at construction: the version key and the default fallback both
    depend on the default bundle.
    """


class FileLoadError(ConfigurationError):
    """A configuration file exists but could not be copied or parsed."""


class RequiredKeyMissingError(ConfigurationError, KeyError):
    """A required key has no value in any applicable source.

    ``KeyError.__str__`` would wrap the message in quotes; the plain message
    is restored so ``str(err)`` reads the same as for the other errors.

    Example:
        >>> err = RequiredKeyMissingError.for_key("not.in.file")
        >>> str(err)
        'required configuration parameter not.in.file not found'
        >>> err.key
        'not.in.file'
        >>> isinstance(err, KeyError)
        True
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key

    @classmethod
    def for_key(cls, key: str) -> RequiredKeyMissingError:
        return cls(f"required configuration parameter {key} not found", key=key)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ParseError(ConfigurationError, ValueError):
    """A present value could not be parsed into the requested numeric type.

    Example:
        >>> err = ParseError("value.int", "abc", "int")
        >>> str(err)
        "configuration parameter value.int: cannot parse 'abc' as int"
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, key: str | None, raw: str, target: str) -> None:
        label = f"configuration parameter {key}" if key is not None else "configuration value"
        super().__init__(f"{label}: cannot parse {raw!r} as {target}")
        self.key = key
        self.raw = raw
        self.target = target


class InvalidOverrideError(ConfigurationError, ValueError):
    """An override targeted a key that can never be overridden (``version``)."""


class InvalidLogLevelError(ConfigurationError, ValueError):
    """The ``loglevel`` value is not one of the supported severities."""


class LogConfigurationError(ConfigurationError):
    """The log file destination could not be built (bad path or pattern)."""


__all__ = [
    "ConfigurationError",
    "FileLoadError",
    "InvalidLogLevelError",
    "InvalidOverrideError",
    "LogConfigurationError",
    "MissingDefaultConfigurationError",
    "ParseError",
    "RequiredKeyMissingError",
]
