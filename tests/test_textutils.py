import pytest

from cubkit.textutils import (
    atoi,
    compare_prefix,
    find_bounded,
    is_digits,
    itoa,
    split,
    substring,
    trim,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42abc", -42),
        ("+17", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("255,100,0", 255),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_negative_has_sign():
    assert itoa(-15).startswith("-")
    assert itoa(0) == "0"


def test_split_drops_empty_words():
    assert split(",,a,,b,c,", ",") == ["a", "b", "c"]


def test_split_without_separator():
    assert split("word", " ") == ["word"]
    assert split("   ", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_trim_both_ends():
    assert trim("  \nNO ./path \n ", " \n") == "NO ./path"


def test_trim_everything():
    assert trim("xxxx", "x") == ""


def test_trim_none_and_empty_set():
    assert trim(" a ", None) == " a "
    assert trim(" a ", "") == " a "


def test_substring_cases():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 2, 100) == "llo"
    assert substring("hello", 5, 2) == ""
    assert substring("hello", 9, 2) == ""


def test_substring_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


def test_find_bounded():
    assert find_bounded("map.cub", ".cub", 7) == 3
    assert find_bounded("map.cub", ".cub", 6) == -1
    assert find_bounded("abc", "", 0) == 0
    assert find_bounded("", "a", 5) == -1


def test_find_bounded_negative_limit():
    with pytest.raises(ValueError):
        find_bounded("abc", "a", -1)


def test_compare_prefix_equal_within_limit():
    assert compare_prefix("NO ./a", "NO ./b", 3) == 0
    assert compare_prefix("abc", "abc", 10) == 0
    assert compare_prefix("a", "b", 0) == 0


def test_compare_prefix_ordering():
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("abd", "abc", 3) > 0
    assert compare_prefix("ab", "abc", 3) < 0


def test_compare_prefix_high_bytes_sort_last():
    assert compare_prefix(b"\xc8", b"A", 1) > 0
    assert compare_prefix(b"A", b"\xc8", 1) < 0
    assert compare_prefix(b"\xc9", b"\xc8", 1) > 0


def test_compare_prefix_is_antisymmetric():
    pairs = [("SO", "NO"), ("F 1", "C 1"), ("x", "xy")]
    for first, second in pairs:
        assert compare_prefix(first, second, 5) == -compare_prefix(second, first, 5)


def test_is_digits():
    assert is_digits("0123456789") is True
    assert is_digits("") is True
    assert is_digits("12a") is False
    assert is_digits("-1") is False
    assert is_digits("\u0663") is False