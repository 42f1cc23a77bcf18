"""Property-based tests for the resolution engine.

Uses hypothesis to generate keys and values and verify that the override
layer, blank handling, the version guard and the environment key mapping
hold for arbitrary inputs, not just hand-picked examples.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from configtools.adapters.config.file_service import StaticConfigurationFileService
from configtools.adapters.config.service import DefaultConfigurationService
from configtools.adapters.memory import LogSinkSpy
from configtools.domain.coercion import LONG_MAX, LONG_MIN, parse_long
from configtools.domain.errors import InvalidOverrideError
from configtools.domain.keys import RESERVED_KEYS, environment_key

if TYPE_CHECKING:
    from conftest import DefaultsPackage

_KEYS = st.from_regex(r"[a-z][a-z0-9]{0,6}(\.[a-z][a-z0-9]{0,6}){0,2}", fullmatch=True).filter(
    lambda key: key not in RESERVED_KEYS
)
_MEANINGFUL_VALUES = st.text(min_size=1, max_size=40).filter(lambda value: value.strip() != "")
_BLANK_VALUES = st.text(alphabet=" \t\r\n", max_size=10)


def _engine(defaults_package: DefaultsPackage, environ: dict[str, str] | None = None) -> DefaultConfigurationService:
    return DefaultConfigurationService(
        StaticConfigurationFileService(None, defaults_package.resource),
        log_sink=LogSinkSpy(),
        environ=environ or {},
    )


@pytest.mark.os_agnostic
@given(key=_KEYS, env_value=_MEANINGFUL_VALUES, override=_MEANINGFUL_VALUES)
@settings(max_examples=60, deadline=None)
def test_override_always_wins(defaults_package: DefaultsPackage, key: str, env_value: str, override: str) -> None:
    """Whatever the source holds, the trimmed override is returned."""
    engine = _engine(defaults_package, {environment_key(key): env_value})

    engine.override_parameter(key, override)

    assert engine.get_string(key) == override.strip()


@pytest.mark.os_agnostic
@given(key=_KEYS, blank=_BLANK_VALUES)
@settings(max_examples=60, deadline=None)
def test_whitespace_only_values_are_absent(defaults_package: DefaultsPackage, key: str, blank: str) -> None:
    """Blank source values and blank overrides both read as absent."""
    engine = _engine(defaults_package, {environment_key(key): blank})

    assert engine.get_optional_string(key) is None

    engine.override_parameter(key, blank)

    assert engine.get_optional_string(key) is None


@pytest.mark.os_agnostic
@given(
    casing=st.lists(st.booleans(), min_size=7, max_size=7),
    value=st.text(max_size=20),
)
@settings(max_examples=60, deadline=None)
def test_version_override_is_rejected_in_any_case(
    defaults_package: DefaultsPackage,
    casing: list[bool],
    value: str,
) -> None:
    """Every capitalisation of ``version`` is refused and the version stays put."""
    key = "".join(char.upper() if upper else char for char, upper in zip("version", casing))
    engine = _engine(defaults_package)

    with pytest.raises(InvalidOverrideError):
        engine.override_parameter(key, value)

    assert engine.get_version() == defaults_package.version


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=LONG_MIN, max_value=LONG_MAX))
@settings(max_examples=200)
def test_long_values_round_trip_through_text(value: int) -> None:
    """Every 64-bit integer survives str -> parse_long."""
    assert parse_long(str(value)) == value


@pytest.mark.os_agnostic
@given(key=_KEYS)
@settings(max_examples=200)
def test_environment_key_has_no_dots_or_lowercase(key: str) -> None:
    """The environment name is upper-case with underscores instead of dots."""
    env_key = environment_key(key)

    assert "." not in env_key
    assert env_key == env_key.upper()
    assert env_key.replace("_", ".").lower() == key
