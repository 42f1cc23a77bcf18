"""Active source variants and the pure decision rules around them.

The active source is chosen once per engine instance and is one of:

* :class:`FileBundle` - properties parsed from a configuration file.
* :class:`EnvironmentBacked` - lookups go to the process environment with
  the key transformed by :func:`~configtools.domain.keys.environment_key`.
* :class:`DefaultAsFallback` - the default bundle answers ordinary lookups.

Bundles are typed as plain ``Mapping[str, str]`` so this module stays free of
I/O and third-party types; adapters hand in ``lib_layered_config.Config``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from .enums import SourceKind
from .keys import KEY_VERSION, environment_key, normalize_value


@dataclass(frozen=True, slots=True)
class FileBundle:
    """Properties loaded from the configuration file at *path*."""

    bundle: Mapping[str, str]
    path: Path
    kind: ClassVar[SourceKind] = SourceKind.FILE


@dataclass(frozen=True, slots=True)
class EnvironmentBacked:
    """Lookups are answered by *environ* (normally ``os.environ``)."""

    environ: Mapping[str, str]
    kind: ClassVar[SourceKind] = SourceKind.ENVIRONMENT


@dataclass(frozen=True, slots=True)
class DefaultAsFallback:
    """The default bundle doubles as the active source."""

    bundle: Mapping[str, str]
    kind: ClassVar[SourceKind] = SourceKind.DEFAULT


ActiveSource = FileBundle | EnvironmentBacked | DefaultAsFallback


def _bundle_value(bundle: Mapping[str, str], key: str) -> str | None:
    # Subscript instead of .get(): Config.get() treats dots as nesting.
    try:
        return bundle[key]
    except KeyError:
        return None


def lookup(source: ActiveSource, key: str) -> str | None:
    """Return the raw (untrimmed) value of *key* in *source*, or None.

    Example:
        >>> lookup(EnvironmentBacked({"AN_EXAMPLE": "x"}), "an.example")
        'x'
        >>> lookup(DefaultAsFallback({"a.b": "1"}), "a.b")
        '1'
        >>> lookup(DefaultAsFallback({"a.b": "1"}), "A.B") is None
        True
    """
    if isinstance(source, EnvironmentBacked):
        return source.environ.get(environment_key(key))
    return _bundle_value(source.bundle, key)


def bundle_value(bundle: Mapping[str, str], key: str) -> str | None:
    """Return the normalised value of *key* in *bundle*, or None."""
    return normalize_value(_bundle_value(bundle, key))


def select_source(
    *,
    file_bundle: FileBundle | None,
    default_bundle: Mapping[str, str],
    environ: Mapping[str, str],
    use_default: bool,
) -> ActiveSource:
    """Decide the active source once a file has (or has not) been loaded.

    A loaded file always wins. Without one, *use_default* selects the default
    bundle and everything else falls through to the environment.

    Example:
        >>> select_source(file_bundle=None, default_bundle={}, environ={}, use_default=True).kind
        <SourceKind.DEFAULT: 'default'>
        >>> select_source(file_bundle=None, default_bundle={}, environ={}, use_default=False).kind
        <SourceKind.ENVIRONMENT: 'environment'>
    """
    if file_bundle is not None:
        return file_bundle
    if use_default:
        return DefaultAsFallback(default_bundle)
    return EnvironmentBacked(environ)


def shadows_version(source: ActiveSource) -> bool:
    """Return True when a non-default source defines a version that is ignored.

    Example:
        >>> shadows_version(EnvironmentBacked({"VERSION": "9"}))
        True
        >>> shadows_version(DefaultAsFallback({"version": "9"}))
        False
    """
    if isinstance(source, DefaultAsFallback):
        return False
    return normalize_value(lookup(source, KEY_VERSION)) is not None


def describe(source: ActiveSource) -> str:
    """Return a short human-readable description of *source*.

    Example:
        >>> describe(EnvironmentBacked({}))
        'environment variables'
    """
    if isinstance(source, FileBundle):
        return f"configuration file {source.path}"
    if isinstance(source, EnvironmentBacked):
        return "environment variables"
    return "default configuration"


__all__ = [
    "ActiveSource",
    "DefaultAsFallback",
    "EnvironmentBacked",
    "FileBundle",
    "bundle_value",
    "describe",
    "lookup",
    "select_source",
    "shadows_version",
]
