# solong

Tools for a small tile-based game in which a player collects every item on a
map and then reaches the exit while avoiding enemies.

## What it provides

- `solong.mapfile`: read `.ber` map files with `read_map` (the path must end
  in `.ber`) or parse map text with `parse_map`. Both reject text that starts
  or ends with a newline or holds an empty line. `validate_map` checks the rows.
  They must form a rectangle, use only the characters `1 0 C E P H V U`, have
  walls (`1`) all around the border, and hold exactly one player `P`, at least
  one exit `E` and at least one collectable `C`. Every problem raises
  `MapError`, which is a subclass of `ValueError`.
- `solong.tilemap`: `build_tilemap` turns rows into a `TileMap`. The map is a
  grid of `Tile`s, each linked to its `up`, `down`, `left` and `right`
  neighbours, with pixel positions in steps of `IMG_SIZE` (64). The map also
  holds the player tile, the number of collectables, a list of `Enemy` objects
  (`H` is horizontal, `V` is vertical) and the window size. `TileMap.tile_at(x, y)`
  returns one tile and raises `IndexError` outside the grid. `tile_type_for`
  maps a character to its `TileType`.
- `solong.perlin`: 3D Perlin noise. It offers `noise3`, `noise3_seed`, and
  `noise3_wrap_nonpow2` for any wrap period. It also offers the fractal sums
  `fbm_noise3`, `ridge_noise3` and `turbulence_noise3`.
- `solong.randmap`: `generate_map` builds a grid of walls and floor from noise,
  with a wall border all round. `render_map` turns a grid into text.
- `solong.image`: an in-memory `Image` with `put_pixel` and `get_pixel`. It
  supports 8, 16, 24 or 32 bits per pixel, either byte order, and rows padded to
  32 bits. `ColorFormat.from_masks` describes a visual's channel layout, and
  `ColorFormat.good_color` converts an `0xRRGGBB` colour into that layout.
- `solong.xpm`: load XPM pixmaps into an `Image`. `xpm_file_to_image` reads a
  file, `xpm_text_to_image` takes the file's text and `xpm_to_image` takes the
  strings. The colour `none` becomes the pixel value `0xFF000000`. Bad data
  raises `XpmError`. The helpers `strip_comments`, `split_words` and
  `lookup_color` are available too.
- `solong.colors`: `color_by_name` looks up an X11 colour name, ignoring case,
  and returns its `0xRRGGBB` value. It raises `KeyError` for an unknown name.
  The name `none` gives `NONE_COLOR` (-1).

## Installing

```
pip install .
```

## Generating a map

```
solong-randmap
```

This prints "Generating map..." and then "Map generated!". After that it prints
a 30×30 map of walls (`1`) and floor (`0`) with a wall border. The options
`--width`, `--height`, `--seed`, `--frequency` (default 5.0) and `--threshold`
(default 0.15) change the map. Without `--seed`, a random one is drawn.

## Using the library

```python
from solong.mapfile import read_map, validate_map
from solong.tilemap import build_tilemap

rows = validate_map(read_map("level.ber"))
tilemap = build_tilemap(rows)
print(tilemap.collects, tilemap.player.position)
```

## What it does not do

The package has no game window, no rendering to the screen, no keyboard input
and no game loop. It loads, checks and models maps, and it builds images in
memory. Displaying and playing them is left to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```