"""Typed coercion stories: long, int, double and boolean parsing."""

from __future__ import annotations

import math

import pytest

from configtools.domain.coercion import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    parse_boolean,
    parse_double,
    parse_int,
    parse_long,
)
from configtools.domain.errors import ConfigurationError, ParseError


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("123456", 123456),
        ("-17", -17),
        ("+5", 5),
        ("007", 7),
        (str(LONG_MAX), LONG_MAX),
        (str(LONG_MIN), LONG_MIN),
    ],
)
def test_parse_long_accepts_signed_decimal_digits(raw: str, expected: int) -> None:
    """An optional sign followed by ASCII digits parses as long."""
    assert parse_long(raw) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["1_000", "12a", "1.0", "0x10", " 1", "", "-", str(LONG_MAX + 1), str(LONG_MIN - 1)])
def test_parse_long_rejects_malformed_or_out_of_range(raw: str) -> None:
    """Underscores, fractions, hex, blanks and overflow all raise ParseError."""
    with pytest.raises(ParseError):
        parse_long(raw)


@pytest.mark.os_agnostic
def test_parse_int_applies_the_32_bit_range() -> None:
    """int parsing accepts the 32-bit bounds and rejects one past them."""
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int(str(INT_MIN)) == INT_MIN

    with pytest.raises(ParseError):
        parse_int(str(INT_MAX + 1))
    with pytest.raises(ParseError):
        parse_int(str(INT_MIN - 1))


@pytest.mark.os_agnostic
def test_parse_int_accepts_a_value_that_long_also_accepts() -> None:
    """123 is a valid int and a valid long."""
    assert parse_int("123") == parse_long("123") == 123


@pytest.mark.os_agnostic
def test_parse_error_names_key_raw_value_and_target() -> None:
    """The error message identifies the key, the raw text and the target type."""
    with pytest.raises(ParseError) as exc:
        parse_int("abc", "value.int")

    assert exc.value.key == "value.int"
    assert exc.value.raw == "abc"
    assert exc.value.target == "int"
    assert "value.int" in str(exc.value)
    assert isinstance(exc.value, ConfigurationError)
    assert isinstance(exc.value, ValueError)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1.235894", 1.235894),
        ("-0.5", -0.5),
        ("1e3", 1000.0),
        ("42", 42.0),
        ("Infinity", math.inf),
    ],
)
def test_parse_double_accepts_decimal_and_exponent_forms(raw: str, expected: float) -> None:
    """Decimal, exponent and infinity spellings parse as double."""
    assert parse_double(raw) == expected


@pytest.mark.os_agnostic
def test_parse_double_accepts_nan() -> None:
    """NaN is a legal double."""
    assert math.isnan(parse_double("NaN"))


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["abc", "1_0.5", "1.2.3", ""])
def test_parse_double_rejects_malformed_values(raw: str) -> None:
    """Non-numeric text and digit-group underscores raise ParseError."""
    with pytest.raises(ParseError):
        parse_double(raw, "value.double")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["true", "TRUE", "True", " tRuE "])
def test_parse_boolean_is_true_only_for_true(raw: str) -> None:
    """Any letter case of ``true`` is True."""
    assert parse_boolean(raw) is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["false", "1", "yes", "on", "truthy", ""])
def test_parse_boolean_is_false_for_everything_else(raw: str) -> None:
    """Every other value is False and nothing raises."""
    assert parse_boolean(raw) is False
