import pytest

from cubkit.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
        ("gray100", 0xFFFFFF),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NoNe") == -1


def test_names_with_spaces():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("misty rose") == lookup_color("mistyrose")


def test_first_entry_wins_for_repeated_name():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    assert 0 <= gray <= 0xFFFFFF


def test_gray_scale_is_monotonic():
    values = [lookup_color(f"gray{level}") for level in range(0, 101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize("name", ["", "notacolour", "snow5", "whitee", " red"])
def test_unknown_names(name):
    assert lookup_color(name) is None


def test_only_ascii_letters_are_folded():
    assert lookup_color("\u0130vory") is None
    assert lookup_color("IVORY") == lookup_color("ivory")