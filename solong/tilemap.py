"""Tile grid built from the rows of a map, with the game state it implies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

__all__ = [
    "IMG_SIZE",
    "CAMERA_SIZE",
    "TileType",
    "EnemyType",
    "Vector",
    "Tile",
    "Enemy",
    "TileMap",
    "tile_type_for",
    "build_tilemap",
]

IMG_SIZE = 64
CAMERA_SIZE = 6


class TileType(Enum):
    """Kinds of tile, valued by the character that stands for them."""

    EMPTY = "0"
    WALL = "1"
    COLLECTABLE = "C"
    PLAYER = "P"
    EXIT = "E"
    ENEMY = "M"
    POWER_UP = "U"


class EnemyType(Enum):
    """Enemy patrol direction, valued by its map character."""

    HORIZONTAL = "H"
    VERTICAL = "V"


@dataclass(frozen=True)
class Vector:
    """A pair of integer coordinates."""

    x: int
    y: int


@dataclass(eq=False)
class Tile:
    """One cell of the map, with its pixel position and its neighbours."""

    type: TileType
    position: Vector
    up: Optional["Tile"] = field(default=None, repr=False)
    down: Optional["Tile"] = field(default=None, repr=False)
    left: Optional["Tile"] = field(default=None, repr=False)
    right: Optional["Tile"] = field(default=None, repr=False)


@dataclass(eq=False)
class Enemy:
    """An enemy standing on a tile."""

    type: EnemyType
    tile: Tile
    direction: int = 0


@dataclass
class TileMap:
    """The linked tile grid and the game variables read from the map."""

    tiles: list[list[Tile]]
    player: Optional[Tile] = None
    collects: int = 0
    enemies: list[Enemy] = field(default_factory=list)
    window_size: Vector = Vector(0, 0)

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile in column ``x`` of row ``y``."""
        if not (0 <= y < len(self.tiles)) or not (0 <= x < len(self.tiles[y])):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.tiles[y][x]


_TILE_TYPES = {
    "1": TileType.WALL,
    "C": TileType.COLLECTABLE,
    "P": TileType.PLAYER,
    "E": TileType.EXIT,
    "H": TileType.ENEMY,
    "V": TileType.ENEMY,
    "U": TileType.POWER_UP,
}


def tile_type_for(char: str) -> TileType:
    """Map a map character to its tile type; anything unknown is empty."""
    return _TILE_TYPES.get(char, TileType.EMPTY)


def build_tilemap(rows: Iterable[str]) -> TileMap:
    """Build the linked tile grid for ``rows`` and collect the game state."""
    rows = list(rows)
    tiles = [
        [
            Tile(tile_type_for(char), Vector(x * IMG_SIZE, y * IMG_SIZE))
            for x, char in enumerate(row)
        ]
        for y, row in enumerate(rows)
    ]
    tilemap = TileMap(tiles)

    for y, (row, tile_row) in enumerate(zip(rows, tiles)):
        for x, (char, tile) in enumerate(zip(row, tile_row)):
            if y > 0 and x < len(tiles[y - 1]):
                tile.up = tiles[y - 1][x]
            if y + 1 < len(tiles) and x < len(tiles[y + 1]):
                tile.down = tiles[y + 1][x]
            if x > 0:
                tile.left = tile_row[x - 1]
            if x + 1 < len(tile_row):
                tile.right = tile_row[x + 1]

            if tile.type is TileType.PLAYER:
                tilemap.player = tile
            elif tile.type is TileType.COLLECTABLE:
                tilemap.collects += 1
            elif tile.type is TileType.ENEMY:
                tilemap.enemies.append(Enemy(EnemyType(char), tile))

    last_width = len(rows[-1]) if rows else 0
    tilemap.window_size = Vector(last_width * IMG_SIZE, len(rows) * IMG_SIZE)
    return tilemap