"""Parse and apply ``--set KEY=VALUE`` CLI overrides to a configuration service."""

from __future__ import annotations

from dataclasses import dataclass

from configtools.application.ports import OverridableConfigurationService


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    key: str
    value: str


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``KEY=VALUE`` string into a ConfigOverride.

    The first ``=`` separates the key from the value. Keys are flat, so dots
    are kept as part of the key. The key is stripped of surrounding blanks;
    the value is kept verbatim (lookups trim it).

    Args:
        raw: Raw override string (e.g., ``loglevel=debug``).

    Returns:
        Parsed ConfigOverride.

    Raises:
        ValueError: If the string lacks ``=`` or the key is empty.

    Examples:
        >>> parse_override("value.string=foo bar")
        ConfigOverride(key='value.string', value='foo bar')
        >>> parse_override("a=b=c").value
        'b=c'
        >>> parse_override("empty=").value
        ''
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    key, value = raw.split("=", maxsplit=1)
    key = key.strip()
    if not key:
        raise ValueError(f"Invalid override {raw!r}: key is empty")

    return ConfigOverride(key=key, value=value)


def apply_overrides(service: OverridableConfigurationService, raw_overrides: tuple[str, ...]) -> None:
    """Parse every raw override and hand it to ``service.override_parameter``.

    All strings are parsed before the first one is applied, so a malformed
    entry leaves the service untouched.

    Raises:
        ValueError: If any override string is malformed, or targets ``version``
            (``InvalidOverrideError`` is a ValueError).
    """
    parsed = [parse_override(raw) for raw in raw_overrides]
    for override in parsed:
        service.override_parameter(override.key, override.value)


__all__ = [
    "ConfigOverride",
    "apply_overrides",
    "parse_override",
]
