import pytest

from solong.mapfile import (
    MapError,
    check_extension,
    check_newlines,
    parse_map,
    read_map,
    validate_map,
)

VALID_TEXT = "1111111\n1P0C0E1\n1H0V0U1\n1111111"
VALID_ROWS = VALID_TEXT.split("\n")


def test_parse_map_splits_rows():
    assert parse_map(VALID_TEXT) == VALID_ROWS


@pytest.mark.parametrize(
    "text",
    ["\n111", "111\n\n111", "111\n", "\n"],
)
def test_check_newlines_rejects(text):
    with pytest.raises(MapError, match="format"):
        check_newlines(text)


def test_parse_map_rejects_trailing_newline():
    with pytest.raises(MapError):
        parse_map(VALID_TEXT + "\n")


@pytest.mark.parametrize("path", ["map.txt", "map.be", "map.ber.bak", "ber"])
def test_check_extension_rejects(path):
    with pytest.raises(MapError, match="extension"):
        check_extension(path)


def test_read_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert read_map(path) == VALID_ROWS
    assert read_map(str(path)) == VALID_ROWS


def test_read_map_checks_extension_first(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID_TEXT)
    with pytest.raises(MapError):
        read_map(path)


def test_read_map_rejects_bad_format(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT + "\n")
    with pytest.raises(MapError):
        read_map(path)


def test_validate_map_accepts_valid_map():
    assert validate_map(iter(VALID_ROWS)) == VALID_ROWS


def test_validate_map_not_rectangular():
    with pytest.raises(MapError, match="rectangular"):
        validate_map(["11111", "1PCE1", "1111"])


def test_validate_map_invalid_character():
    with pytest.raises(MapError, match="characters"):
        validate_map(["11111", "1PXE1", "1C001", "11111"])


def test_validate_map_two_players():
    with pytest.raises(MapError, match="only one"):
        validate_map(["111111", "1PPCE1", "111111"])


def test_validate_map_open_border():
    with pytest.raises(MapError, match="surrounded"):
        validate_map(["11111", "0PCE1", "11111"])


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1P0E1", "11111"],
        ["11111", "1PC01", "11111"],
        ["11111", "10CE1", "11111"],
    ],
)
def test_validate_map_missing_required(rows):
    with pytest.raises(MapError, match="at least one"):
        validate_map(rows)


def test_validate_map_empty():
    with pytest.raises(MapError):
        validate_map([])


def test_row_length_checked_before_characters():
    with pytest.raises(MapError, match="rectangular"):
        validate_map(["11111", "1PX"])