import pytest

from solong.colors import COLOR_NAMES, NONE_COLOR, color_by_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xfffafa),
        ("white", 0xffffff),
        ("black", 0x0),
        ("navy", 0x80),
        ("red", 0xff0000),
        ("green", 0xff00),
        ("blue", 0xff),
        ("ghost white", 0xf8f8ff),
        ("lightgreen", 0x90ee90),
        ("gray50", 0x7f7f7f),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("SNOW") == color_by_name("snow")
    assert color_by_name("Ghost White") == color_by_name("ghost white")


def test_none_is_transparent_marker():
    assert color_by_name("none") == NONE_COLOR
    assert color_by_name("None") == -1


def test_first_entry_wins_for_repeated_names():
    assert color_by_name("dark slate") == 0x2f4f4f
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xfafad2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("no such colour")
    with pytest.raises(KeyError):
        color_by_name("")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_agree(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_scale_is_monotonic_and_neutral():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == color_by_name("black")
    assert values[-1] == color_by_name("white")
    for value in values:
        r, g, b = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_all_values_fit_in_rgb():
    for name, value in COLOR_NAMES.items():
        if name == "none":
            assert value == NONE_COLOR
        else:
            assert 0 <= value <= 0xFFFFFF


def test_keys_are_lower_case_and_agree_with_lookup():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert color_by_name(name.upper()) == value


def test_numbered_first_variant_matches_base_colour():
    assert color_by_name("snow1") == color_by_name("snow")
    assert color_by_name("red1") == color_by_name("red")
    assert color_by_name("cyan1") == color_by_name("cyan")


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["snow"] = 0  # type: ignore[index]
    assert color_by_name("snow") == 0xfffafa