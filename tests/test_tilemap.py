import pytest

from solong.tilemap import (
    IMG_SIZE,
    EnemyType,
    TileType,
    Vector,
    build_tilemap,
    tile_type_for,
)

ROWS = [
    "11111",
    "1PCH1",
    "1VCE1",
    "11111",
]


@pytest.fixture
def tilemap():
    return build_tilemap(ROWS)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("1", TileType.WALL),
        ("0", TileType.EMPTY),
        ("C", TileType.COLLECTABLE),
        ("P", TileType.PLAYER),
        ("E", TileType.EXIT),
        ("H", TileType.ENEMY),
        ("V", TileType.ENEMY),
        ("U", TileType.POWER_UP),
        ("x", TileType.EMPTY),
    ],
)
def test_tile_type_for(char, expected):
    assert tile_type_for(char) is expected


def test_tile_types_follow_rows(tilemap):
    for y, row in enumerate(ROWS):
        for x, char in enumerate(row):
            assert tilemap.tile_at(x, y).type is tile_type_for(char)


def test_positions_are_pixel_coordinates(tilemap):
    assert tilemap.tile_at(2, 1).position == Vector(2 * IMG_SIZE, 1 * IMG_SIZE)
    assert tilemap.tile_at(0, 0).position == Vector(0, 0)


def test_player_and_collectables(tilemap):
    assert tilemap.player is tilemap.tile_at(1, 1)
    assert tilemap.player.type is TileType.PLAYER
    assert tilemap.collects == 2


def test_enemies_in_scan_order(tilemap):
    assert [e.type for e in tilemap.enemies] == [
        EnemyType.HORIZONTAL,
        EnemyType.VERTICAL,
    ]
    assert tilemap.enemies[0].tile is tilemap.tile_at(3, 1)
    assert tilemap.enemies[1].tile is tilemap.tile_at(1, 2)
    assert all(e.direction == 0 for e in tilemap.enemies)


def test_window_size(tilemap):
    assert tilemap.window_size == Vector(5 * IMG_SIZE, 4 * IMG_SIZE)
    assert (tilemap.width, tilemap.height) == (5, 4)


def test_neighbours_are_linked(tilemap):
    centre = tilemap.tile_at(2, 1)
    assert centre.up is tilemap.tile_at(2, 0)
    assert centre.down is tilemap.tile_at(2, 2)
    assert centre.left is tilemap.tile_at(1, 1)
    assert centre.right is tilemap.tile_at(3, 1)
    assert centre.right.left is centre


def test_edges_have_no_outside_neighbours(tilemap):
    corner = tilemap.tile_at(0, 0)
    assert corner.up is None and corner.left is None
    far = tilemap.tile_at(4, 3)
    assert far.down is None and far.right is None


@pytest.mark.parametrize("x, y", [(5, 0), (0, 4), (-1, 0), (0, -1)])
def test_tile_at_out_of_range(tilemap, x, y):
    with pytest.raises(IndexError):
        tilemap.tile_at(x, y)


def test_last_player_wins():
    tilemap = build_tilemap(["1111", "1PP1", "1111"])
    assert tilemap.player is tilemap.tile_at(2, 1)