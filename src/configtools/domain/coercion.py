"""Best-effort coercion of resolved string values into typed results.

Integers follow strict base-10 rules: an optional sign followed by ASCII
digits, with range checks for 64-bit ``long`` and 32-bit ``int``. Python's
``int()`` is more lenient (underscores, surrounding whitespace, Unicode
digits) so the format is checked first. Booleans never fail.
"""

from __future__ import annotations

import re

from .errors import ParseError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _parse_integer(raw: str, low: int, high: int, target: str, key: str | None) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise ParseError(key, raw, target)
    value = int(raw)
    if not low <= value <= high:
        raise ParseError(key, raw, target)
    return value


def parse_long(raw: str, key: str | None = None) -> int:
    """Parse a signed 64-bit integer.

    Example:
        >>> parse_long("123456")
        123456
        >>> parse_long("-9223372036854775808")
        -9223372036854775808
        >>> parse_long("1_000")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        configtools.domain.errors.ParseError: ...
    """
    return _parse_integer(raw, LONG_MIN, LONG_MAX, "long", key)


def parse_int(raw: str, key: str | None = None) -> int:
    """Parse a signed 32-bit integer.

    Example:
        >>> parse_int("+123")
        123
    """
    return _parse_integer(raw, INT_MIN, INT_MAX, "int", key)


def parse_double(raw: str, key: str | None = None) -> float:
    """Parse a floating-point number.

    Accepts what ``float()`` accepts (exponents, ``inf``, ``nan``) except
    digit-group underscores.

    Example:
        >>> parse_double("1.235894")
        1.235894
        >>> parse_double("1e3")
        1000.0
    """
    if "_" in raw:
        raise ParseError(key, raw, "double")
    try:
        return float(raw)
    except ValueError as exc:
        raise ParseError(key, raw, "double") from exc


def parse_boolean(raw: str) -> bool:
    """Return ``True`` only for a case-insensitive ``"true"``.

    Example:
        >>> parse_boolean("TRUE")
        True
        >>> parse_boolean("1")
        False
        >>> parse_boolean("yes")
        False
    """
    return raw.strip().lower() == "true"


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "parse_boolean",
    "parse_double",
    "parse_int",
    "parse_long",
]
