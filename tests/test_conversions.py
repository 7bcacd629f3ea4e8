import pytest

from ftkit.conversions import (
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)


def test_format_string_returns_text():
    assert format_string("hello") == "hello"


def test_format_string_none_is_null_marker():
    assert format_string(None) == "(null)"


def test_format_string_rejects_non_text():
    with pytest.raises(TypeError):
        format_string(12)


@pytest.mark.parametrize("address", [0, None])
def test_format_pointer_zero_is_nil(address):
    assert format_pointer(address) == "(nil)"


@pytest.mark.parametrize("address", [1, 15, 16, 4096, 0xDEADBEEF, 2**63 + 5])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert text == text.lower()
    assert int(text, 16) == address


def test_format_pointer_wraps_negative_to_uintptr():
    assert int(format_pointer(-1), 16) == 2**64 - 1


@pytest.mark.parametrize("base", range(2, 17))
@pytest.mark.parametrize("number", [0, 1, 7, 255, 1000, 2**31 - 1, 2**40])
def test_format_int_round_trip(base, number):
    assert int(format_int(number, base), base) == number
    assert int(format_int(-number, base), base) == -number


def test_format_int_decimal_matches_str():
    for number in (0, 9, 10, -1, 123456):
        assert format_int(number) == str(number)


def test_format_int_int_min():
    assert format_int(-2147483648) == "-2147483648"


def test_format_int_negative_prefix():
    assert format_int(-300, 16) == "-" + format_int(300, 16)


def test_format_int_upper_case():
    assert format_int(255, 16, True) == "FF"
    assert format_int(48879, 16, True) == format_int(48879, 16).upper()


@pytest.mark.parametrize("base", [0, 1, 17])
def test_format_int_invalid_base(base):
    with pytest.raises(ValueError):
        format_int(5, base)


def test_format_int_rejects_non_integer():
    with pytest.raises(TypeError):
        format_int("5")


def test_format_unsigned_plain():
    assert format_unsigned(123) == "123"


def test_format_unsigned_wraps_negative():
    assert format_unsigned(-1) == str(2**32 - 1)
    assert format_unsigned(2**32 + 4) == str(4)