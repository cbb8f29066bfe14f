import pytest

from cubkit.colors import lookup_color
from cubkit.xpm import (
    XpmError,
    XpmImage,
    find_unquoted,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1 ",
"a c #FF0000",
"b c None",
// pixels
"ab",
"ba"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"/*" /*'
    assert find_unquoted(text, "/*") == text.rindex("/*")


def test_find_unquoted_missing():
    assert find_unquoted("abc", "x") == -1


def test_find_unquoted_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_strip_block_comment_keeps_length():
    text = "a /* hidden */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hidden" not in result
    assert result.split() == ["a", "b"]


def test_strip_line_comment_removes_newline():
    text = 'x // note\n"y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert "\n" not in result
    assert result.split() == ["x", '"y"']


def test_strip_comments_leaves_quoted_markers():
    text = '"a/*b*/c" "d//e"'
    assert strip_comments(text) == text


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_named_ignores_case():
    assert text_to_rgb("RED", None) == lookup_color("red")


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_basic():
    image = parse_xpm(["2 1 2 1", "a c #FF0000", "b c #00FF00", "ba"])
    assert (image.width, image.height) == (2, 1)
    assert image.pixels == (0x00FF00, 0xFF0000)


def test_parse_xpm_transparent_colour():
    image = parse_xpm(["1 1 1 1", ". c None", "."])
    assert image.pixel(0, 0) == 0xFF000000


def test_parse_xpm_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixel(0, 0) == 0x000002


def test_parse_xpm_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 0x000001


def test_parse_xpm_unknown_key_is_zero():
    image = parse_xpm(["2 1 1 1", "a c #123456", "az"])
    assert image.pixels == (0x123456, 0)


def test_parse_xpm_zero_width():
    with pytest.raises(XpmError):
        parse_xpm(["0 1 1 1", "a c #000000", ""])


def test_parse_xpm_short_header():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1"])


def test_parse_xpm_missing_c_key():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a m #000000", "a"])


def test_parse_xpm_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c #000000", "a"])


def test_parse_xpm_text_sample():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(1, 1) == 0xFF0000


def test_pixel_out_of_range():
    image = XpmImage(1, 1, (0,))
    with pytest.raises(IndexError):
        image.pixel(1, 0)


def test_load_xpm_matches_text_parse(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")