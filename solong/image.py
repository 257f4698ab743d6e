"""In-memory pixel images and the conversion of colours to a visual's pixel layout."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["ColorFormat", "Image"]

_SUPPORTED_BPP = (8, 16, 24, 32)


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return the shift and the width in bits of a contiguous channel mask."""
    if mask <= 0:
        raise ValueError("colour masks must be positive")
    shift = (mask & -mask).bit_length() - 1
    remaining = mask >> shift
    bits = 0
    while remaining & 1:
        remaining >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class ColorFormat:
    """How a visual packs red, green and blue into a pixel value."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(cls, depth: int, red_mask: int, green_mask: int,
                   blue_mask: int) -> "ColorFormat":
        """Build a format from the channel masks of a true-colour visual."""
        red_shift, red_bits = _mask_layout(red_mask)
        green_shift, green_bits = _mask_layout(green_mask)
        blue_shift, blue_bits = _mask_layout(blue_mask)
        return cls(depth, red_shift, red_bits, green_shift, green_bits,
                   blue_shift, blue_bits)

    def good_color(self, color: int) -> int:
        """Convert an ``0xRRGGBB`` colour to this format's pixel value.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


@dataclass
class Image:
    """A ``width`` by ``height`` pixel buffer.

    ``endian`` is the byte order of each pixel: 0 for little endian,
    1 for big endian. Rows are ``size_line`` bytes long, padded to 32 bits.
    """

    width: int
    height: int
    bpp: int = 32
    endian: int = 0
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.bpp not in _SUPPORTED_BPP:
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        if self.endian not in (0, 1):
            raise ValueError("endian must be 0 or 1")
        self.size_line = (self.width * self.bpp + 31) // 32 * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at pixel (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._byteorder)