import io

import pytest

from cubkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
    write_line,
    write_number,
    write_text,
)


@pytest.mark.parametrize("char", ["a", "z", "A", "Z", "m"])
def test_letters_are_alpha_and_alnum(char):
    assert is_alpha(char) is True
    assert is_alnum(char) is True
    assert is_digit(char) is False


@pytest.mark.parametrize("char", ["0", "5", "9"])
def test_digits(char):
    assert is_digit(char) is True
    assert is_alnum(char) is True
    assert is_alpha(char) is False


@pytest.mark.parametrize("char", ["@", "[", "`", "{", " ", "/", ":"])
def test_boundary_symbols_are_not_alnum(char):
    assert is_alnum(char) is False


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_ascii("é") is False


def test_ascii_range_on_codes():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_printable_range():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_mapping_on_strings():
    assert to_upper("a") == "A"
    assert to_lower("Q") == "q"
    assert to_upper("5") == "5"
    assert to_lower("!") == "!"


def test_case_mapping_round_trip_on_codes():
    for code in range(ord("a"), ord("z") + 1):
        assert to_lower(to_upper(code)) == code
        assert is_alpha(to_upper(code))


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_write_number_extremes():
    out = io.StringIO()
    write_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, 42, -13, 1000000])
def test_write_number_round_trip(number):
    out = io.StringIO()
    write_number(number, out)
    assert int(out.getvalue()) == number


def test_write_text_and_line():
    out = io.StringIO()
    write_text("Error", out)
    write_line("Wrong file", out)
    assert out.getvalue() == "Error" + "Wrong file" + "\n"


def test_none_writes_nothing():
    out = io.StringIO()
    write_text(None, out)
    write_line(None, out)
    assert out.getvalue() == ""