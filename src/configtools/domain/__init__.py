"""Domain layer - pure resolution rules with no I/O or framework dependencies.

Contents:
    * :mod:`.coercion` - String to typed value parsing
    * :mod:`.enums` - Domain enumerations (LogLevel, SourceKind, OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.keys` - Reserved keys and key/value normalisation
    * :mod:`.sources` - Active source variants and selection rules
"""

from __future__ import annotations

from .coercion import parse_boolean, parse_double, parse_int, parse_long
from .enums import LogLevel, OutputFormat, SourceKind, ValueType
from .errors import (
    ConfigurationError,
    FileLoadError,
    InvalidLogLevelError,
    InvalidOverrideError,
    LogConfigurationError,
    MissingDefaultConfigurationError,
    ParseError,
    RequiredKeyMissingError,
)
from .keys import (
    ENV_USE_DEFAULT,
    KEY_LOGFILE,
    KEY_LOGLEVEL,
    KEY_LOGPATTERN,
    KEY_VERSION,
    environment_key,
)
from .sources import ActiveSource, DefaultAsFallback, EnvironmentBacked, FileBundle

__all__ = [
    # Coercion
    "parse_boolean",
    "parse_double",
    "parse_int",
    "parse_long",
    # Enums
    "LogLevel",
    "OutputFormat",
    "SourceKind",
    "ValueType",
    # Errors
    "ConfigurationError",
    "FileLoadError",
    "InvalidLogLevelError",
    "InvalidOverrideError",
    "LogConfigurationError",
    "MissingDefaultConfigurationError",
    "ParseError",
    "RequiredKeyMissingError",
    # Keys
    "ENV_USE_DEFAULT",
    "KEY_LOGFILE",
    "KEY_LOGLEVEL",
    "KEY_LOGPATTERN",
    "KEY_VERSION",
    "environment_key",
    # Sources
    "ActiveSource",
    "DefaultAsFallback",
    "EnvironmentBacked",
    "FileBundle",
]
