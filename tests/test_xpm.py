import pytest

from solong.colors import NONE_COLOR, color_by_name
from solong.xpm import (
    XpmError,
    lookup_color,
    split_words,
    str_str,
    str_str_quoted,
    strip_comments,
    xpm_file_to_image,
    xpm_text_to_image,
    xpm_to_image,
)

SAMPLE = [
    "2 2 2 1",
    ". c #FF0000",
    "# c None",
    ".#",
    "#.",
]

SAMPLE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000",
"# c None",
// pixels
".#",
"#."
};
"""


def test_str_str():
    assert str_str('abc"def', '"') == 3
    assert str_str("abc", "x") == -1


def test_str_str_quoted_skips_strings():
    assert str_str_quoted('"/*" /* x */', "/*") == 5
    assert str_str_quoted('"/* only */"', "/*") == -1


def test_split_words():
    assert split_words(" a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = "/* XPM */\nx"
    result = strip_comments(text)
    assert result == " " * 9 + "\nx"
    assert len(result) == len(text)


def test_strip_line_comment_with_newline():
    assert strip_comments("a // b\nc") == "a " + " " * 5 + "c"


def test_comment_inside_string_kept():
    assert strip_comments('"/*x*/"') == '"/*x*/"'


def test_lookup_color():
    assert lookup_color("#FF0000") == 0xFF0000
    assert lookup_color("None") == NONE_COLOR
    assert lookup_color("White") == color_by_name("white")
    assert lookup_color("dark", "slate") == color_by_name("dark slate")
    assert lookup_color("nosuchcolour") == 0


def test_xpm_to_image_pixels():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_short_keys_take_last_definition():
    image = xpm_to_image(["1 1 2 1", ". c #000001", ". c #000002", "."])
    assert image.get_pixel(0, 0) == lookup_color("#000002")


def test_long_keys_take_first_definition():
    image = xpm_to_image(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.get_pixel(0, 0) == lookup_color("#000001")


def test_undefined_key_is_zero():
    image = xpm_to_image(["2 1 1 1", ". c #00FF00", ".?"])
    assert image.get_pixel(0, 0) == lookup_color("#00FF00")
    assert image.get_pixel(1, 0) == 0


def test_text_matches_lines():
    from_text = xpm_text_to_image(SAMPLE_TEXT)
    from_lines = xpm_to_image(SAMPLE)
    assert from_text.data == from_lines.data


def test_file_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_TEXT)
    image = xpm_file_to_image(path)
    assert image.data == xpm_to_image(SAMPLE).data


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")


@pytest.mark.parametrize("lines", [
    ["0 2 2 1", ". c #FF0000", "# c None", ".#", "#."],
    ["2 2"],
    [],
    ["2 2 1 1", ". #FF0000", "..", ".."],
    ["2 2 1 1", ". c", "..", ".."],
    ["2 2 1 1", ". c #FF0000", ".."],
    ["2 2 1 1", ". c #FF0000", "..", "."],
])
def test_invalid_xpm(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)