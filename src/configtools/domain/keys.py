"""Reserved configuration keys and key/value normalisation rules."""

from __future__ import annotations

from typing import Final

KEY_LOGLEVEL: Final[str] = "loglevel"
KEY_LOGFILE: Final[str] = "logfile"
KEY_LOGPATTERN: Final[str] = "logpattern"
KEY_VERSION: Final[str] = "version"

RESERVED_KEYS: Final[frozenset[str]] = frozenset({KEY_LOGLEVEL, KEY_LOGFILE, KEY_LOGPATTERN, KEY_VERSION})

#: Keys whose override re-runs the log file configuration.
LOG_FILE_KEYS: Final[frozenset[str]] = frozenset({KEY_LOGFILE, KEY_LOGPATTERN})

#: Any non-empty value forces the default bundle when no file is available.
ENV_USE_DEFAULT: Final[str] = "CONFIG_USE_DEFAULT"

#: Canonical extension of property files.
PROPERTIES_SUFFIX: Final[str] = ".properties"


def environment_key(key: str) -> str:
    """Map a configuration key onto its environment variable name.

    Example:
        >>> environment_key("an.example")
        'AN_EXAMPLE'
        >>> environment_key("foo")
        'FOO'
    """
    return key.upper().replace(".", "_")


def normalize_value(raw: str | None) -> str | None:
    """Trim *raw*; blank and missing values both mean "no value".

    Example:
        >>> normalize_value("  spaced  ")
        'spaced'
        >>> normalize_value("   ") is None
        True
        >>> normalize_value(None) is None
        True
    """
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def is_version_key(key: str) -> bool:
    """Return True when *key* names the version entry, ignoring case.

    Example:
        >>> is_version_key("VeRsIoN")
        True
        >>> is_version_key("version.extra")
        False
    """
    return key.lower() == KEY_VERSION


__all__ = [
    "ENV_USE_DEFAULT",
    "KEY_LOGFILE",
    "KEY_LOGLEVEL",
    "KEY_LOGPATTERN",
    "KEY_VERSION",
    "LOG_FILE_KEYS",
    "PROPERTIES_SUFFIX",
    "RESERVED_KEYS",
    "environment_key",
    "is_version_key",
    "normalize_value",
]
