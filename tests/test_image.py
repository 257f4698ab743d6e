import pytest

from solong.image import ColorFormat, Image

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242

TRUE_COLOR = ColorFormat.from_masks(24, 0xFF0000, 0x00FF00, 0x0000FF)


def _map_color(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    expected = {}
    for y in range(image.height):
        for x in range(image.width):
            color = TRUE_COLOR.good_color(_map_color(x, y, image.width, image.height, kind))
            image.put_pixel(x, y, color)
            expected[(x, y)] = color
    return expected


@pytest.mark.parametrize("size,kind", [((IM1_SX, IM1_SY), 1),
                                       ((IM3_SX, IM3_SY), 1),
                                       ((IM3_SX, IM3_SY), 2)])
@pytest.mark.parametrize("endian", [0, 1])
def test_color_map_round_trip(size, kind, endian):
    image = Image(*size, endian=endian)
    expected = _fill(image, kind)
    assert all(image.get_pixel(x, y) == c for (x, y), c in expected.items())


def test_new_image_layout():
    image = Image(IM1_SX, IM1_SY)
    assert image.bpp == 32
    assert image.size_line == IM1_SX * 4
    assert len(image.data) == image.size_line * IM1_SY
    assert set(image.data) == {0}


def test_little_endian_bytes():
    image = Image(1, 1, endian=0)
    image.put_pixel(0, 0, 0x112233)
    assert bytes(image.data) == b"\x33\x22\x11\x00"


def test_big_endian_bytes():
    image = Image(1, 1, endian=1)
    image.put_pixel(0, 0, 0x112233)
    assert bytes(image.data) == b"\x00\x11\x22\x33"


def test_pixel_truncated_to_pixel_size():
    image = Image(2, 1, bpp=16)
    image.put_pixel(1, 0, 0x12345678)
    assert image.get_pixel(1, 0) == 0x5678
    assert image.get_pixel(0, 0) == 0


def test_negative_color_stored_unsigned():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_true_color_is_identity():
    assert TRUE_COLOR.good_color(0xFF99FF) == 0xFF99FF
    assert TRUE_COLOR.good_color(0x00FFFF) == 0x00FFFF


def test_rgb565_conversion():
    fmt = ColorFormat.from_masks(16, 0xF800, 0x07E0, 0x001F)
    assert (fmt.red_shift, fmt.red_bits) == (11, 5)
    assert (fmt.green_shift, fmt.green_bits) == (5, 6)
    assert fmt.good_color(0xFF0000) == 0xF800
    assert fmt.good_color(0x00FF00) == 0x07E0
    assert fmt.good_color(0x0000FF) == 0x001F
    assert fmt.good_color(0xFFFFFF) == 0xFFFF


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        ColorFormat.from_masks(16, 0, 0x07E0, 0x001F)


@pytest.mark.parametrize("args", [(0, 5), (5, 0), (-1, 3)])
def test_bad_dimensions(args):
    with pytest.raises(ValueError):
        Image(*args)


def test_bad_bpp_and_endian():
    with pytest.raises(ValueError):
        Image(4, 4, bpp=12)
    with pytest.raises(ValueError):
        Image(4, 4, endian=2)


@pytest.mark.parametrize("point", [(IM1_SX, 0), (0, IM1_SY), (-1, 0)])
def test_pixel_out_of_range(point):
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.put_pixel(*point, 0)
    with pytest.raises(IndexError):
        image.get_pixel(*point)