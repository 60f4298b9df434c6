"""
Test Parsers
============

Scalar and collection parsing shared by the accessors and the struct loader.
"""

import pytest

from envconfig.errors import LengthMismatchError, ParseError
from envconfig.utils.parsing import (
    INT32_BITS,
    int_bounds,
    parse_bool,
    parse_int,
    parse_int_list,
    split_list,
)


@pytest.mark.parametrize("token", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true_tokens(token):
    assert parse_bool(token) is True


@pytest.mark.parametrize("token", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false_tokens(token):
    assert parse_bool(token) is False


@pytest.mark.parametrize("token", ["yes", "on", "tRuE", " true", "2", ""])
def test_parse_bool_rejects_other_tokens(token):
    with pytest.raises(ParseError, match="invalid syntax"):
        parse_bool(token)


def test_parse_int_accepts_signs_and_leading_zeros():
    assert parse_int("42") == 42
    assert parse_int("-42") == -42
    assert parse_int("+7") == 7
    assert parse_int("007") == 7


@pytest.mark.parametrize("value", ["not_a_number", "1.5", " 1", "1 ", "1_000", "", "-", "0x10"])
def test_parse_int_rejects_malformed_values(value):
    with pytest.raises(ParseError, match="invalid syntax"):
        parse_int(value)


def test_parse_int_enforces_width():
    assert parse_int("9223372036854775807") == 2**63 - 1
    assert parse_int("-9223372036854775808") == -2**63
    with pytest.raises(ParseError, match="value out of range"):
        parse_int("9223372036854775808")

    assert parse_int("2147483647", INT32_BITS) == 2**31 - 1
    with pytest.raises(ParseError, match="value out of range"):
        parse_int("2147483648", INT32_BITS)
    with pytest.raises(ParseError, match="value out of range"):
        parse_int("-2147483649", INT32_BITS)


def test_int_bounds_rejects_unknown_width():
    with pytest.raises(ValueError):
        int_bounds(16)


def test_parse_int_list_basic():
    assert parse_int_list("8080,8081,8082") == [8080, 8081, 8082]
    assert parse_int_list("-1,0,1") == [-1, 0, 1]


def test_parse_int_list_trims_whitespace():
    assert parse_int_list(" 1 , 2 , 3 ") == [1, 2, 3]


def test_parse_int_list_empty_elements_are_zero():
    assert parse_int_list("1,,3") == [1, 0, 3]
    assert parse_int_list(",") == [0, 0]


def test_parse_int_list_empty_input():
    assert parse_int_list("") == []
    assert parse_int_list("", length=3) == [0, 0, 0]


def test_parse_int_list_round_trip():
    values = [5, -12, 0, 2**62, -2**63]
    assert parse_int_list(",".join(str(v) for v in values)) == values


def test_parse_int_list_fixed_length():
    assert parse_int_list("1,2,3", length=3) == [1, 2, 3]

    with pytest.raises(LengthMismatchError) as exc_info:
        parse_int_list("1,2", length=3)
    assert exc_info.value.got == 2
    assert exc_info.value.expected == 3
    assert str(exc_info.value) == "array length mismatch: got 2 values, expected 3"


def test_parse_int_list_reports_token_index():
    with pytest.raises(ParseError) as exc_info:
        parse_int_list("1,abc,3")
    assert exc_info.value.index == 1
    assert "invalid int value at index 1" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ParseError)


def test_parse_int_list_respects_element_width():
    assert parse_int_list("2147483647", INT32_BITS) == [2147483647]
    with pytest.raises(ParseError, match="index 0"):
        parse_int_list("2147483648", INT32_BITS)


@pytest.mark.parametrize("value,separator,expected", [
    ("a,b,c", ",", ["a", "b", "c"]),
    ("a;b;c", ";", ["a", "b", "c"]),
    ("single", ",", ["single"]),
    ("", ",", [""]),
    ("a b c", " ", ["a", "b", "c"]),
    (" a , b ", ",", [" a ", " b "]),
    ("abc", "", ["a", "b", "c"]),
])
def test_split_list(value, separator, expected):
    assert split_list(value, separator) == expected
