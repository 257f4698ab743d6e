"""Map loading and checking, tile grids, Perlin-noise maps, XPM images and colour names."""

__version__ = "0.1.0"
__all__ = ["colors", "image", "mapfile", "perlin", "randmap", "tilemap", "xpm"]