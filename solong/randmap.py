"""Random wall layouts drawn from Perlin noise."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from solong.perlin import noise3
from solong.tilemap import TileType

__all__ = ["generate_map", "render_map", "main"]

_GLYPHS = {
    TileType.EMPTY: "0",
    TileType.WALL: "1",
    TileType.COLLECTABLE: "C",
}


def generate_map(
    width: int = 30,
    height: int = 30,
    seed: Optional[float] = None,
    frequency: float = 5.0,
    threshold: float = 0.15,
) -> list[list[TileType]]:
    """Return a ``height`` by ``width`` grid of walls and floor, walled all round.

    A cell is a wall where the noise exceeds ``threshold``. ``seed`` is the
    noise depth coordinate; a random one is drawn when it is not given.
    """
    if width < 1 or height < 1:
        raise ValueError("map dimensions must be positive")
    if seed is None:
        seed = float(random.randrange(2**31))

    grid = []
    for y in range(height):
        row = []
        for x in range(width):
            nx = x / width * frequency
            ny = y / height * frequency
            border = x in (0, width - 1) or y in (0, height - 1)
            if border or noise3(nx, ny, seed, 0, 0, 0) > threshold:
                row.append(TileType.WALL)
            else:
                row.append(TileType.EMPTY)
        grid.append(row)
    return grid


def render_map(grid: Sequence[Sequence[TileType]]) -> str:
    """Render a grid one line per row; unexpected tiles show as ``?``."""
    return "".join(
        "".join(_GLYPHS.get(tile, "?") for tile in row) + "\n" for row in grid
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Generate a random map and print it."""
    parser = argparse.ArgumentParser(description="Generate a random map.")
    parser.add_argument("--width", type=int, default=30)
    parser.add_argument("--height", type=int, default=30)
    parser.add_argument("--seed", type=float, default=None)
    parser.add_argument("--frequency", type=float, default=5.0)
    parser.add_argument("--threshold", type=float, default=0.15)
    args = parser.parse_args(argv)

    print("Generating map...")
    try:
        grid = generate_map(args.width, args.height, args.seed,
                            args.frequency, args.threshold)
    except ValueError as exc:
        parser.error(str(exc))
    print("Map generated!")
    print(render_map(grid), end="")
    return 0