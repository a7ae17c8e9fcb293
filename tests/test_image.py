import sys

import pytest

from fractview.image import Image, channel_shifts, color_value

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _local_endian():
    return 1 if (0x11223344).to_bytes(4, sys.byteorder)[0] == 0x11 else 0


@pytest.mark.parametrize(
    "width, height, kind",
    [(IM1_SX, IM1_SY, 1), (IM3_SX, IM3_SY, 1), (IM3_SX, IM3_SY, 2)],
)
def test_color_map_round_trip(width, height, kind):
    endian = _local_endian()
    image = Image(width, height, endian)
    for y in range(height):
        for x in range(width):
            image.put_pixel(x, y, color_value(_color_map(x, y, width, height, kind)))
    for y in range(height):
        for x in range(width):
            assert image.get_pixel(x, y) == _color_map(x, y, width, height, kind)


def test_local_endian_bytes_match_native_int():
    endian = _local_endian()
    image = Image(IM1_SX, IM1_SY, endian)
    color = _color_map(5, 7, IM1_SX, IM1_SY, 1)
    image.put_pixel(5, 7, color)
    offset = 7 * image.size_line + 5 * (image.bpp // 8)
    assert bytes(image.data[offset:offset + 4]) == color.to_bytes(4, sys.byteorder)


def test_geometry_of_new_image():
    image = Image(IM3_SX, IM3_SY)
    assert image.bpp == 32
    assert image.size_line == IM3_SX * 4
    assert len(image.data) >= image.size_line * IM3_SY


def test_new_image_is_black():
    image = Image(IM1_SX, IM1_SY)
    assert image.get_pixel(0, 0) == 0
    assert image.get_pixel(IM1_SX - 1, IM1_SY - 1) == 0


@pytest.mark.parametrize("endian, expected", [(1, b"\x11\x22\x33\x44"), (0, b"\x44\x33\x22\x11")])
def test_byte_order(endian, expected):
    image = Image(1, 1, endian)
    image.put_pixel(0, 0, 0x11223344)
    assert bytes(image.data[:4]) == expected
    assert image.get_pixel(0, 0) == 0x11223344


def test_negative_color_is_stored_as_unsigned():
    image = Image(2, 2)
    image.put_pixel(1, 1, -1)
    assert image.get_pixel(1, 1) == 0xFFFFFFFF


def test_fill_sets_every_pixel():
    image = Image(3, 4, 1)
    image.fill(0xFF99FF)
    assert {image.get_pixel(x, y) for y in range(4) for x in range(3)} == {0xFF99FF}


def test_as_array_reflects_pixels():
    image = Image(4, 3)
    image.put_pixel(2, 1, 0x00FFFF)
    array = image.as_array()
    assert array.shape == (3, 4)
    assert int(array[1, 2]) == 0x00FFFF
    assert int(array.sum()) == 0x00FFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_bounds_pixel(x, y):
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-3, 2)])
def test_invalid_size(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_invalid_endian():
    with pytest.raises(ValueError):
        Image(2, 2, 2)


def test_deep_visual_keeps_color():
    assert color_value(0xFF99FF, 24, channel_shifts(0xF800, 0x07E0, 0x001F)) == 0xFF99FF


def test_channel_shifts_for_888():
    assert channel_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_565_white_fills_all_masks():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert color_value(0xFFFFFF, 16, shifts) == 0xF800 | 0x07E0 | 0x001F
    assert color_value(0x000000, 16, shifts) == 0


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFF99FF, 0x00FFFF, 0xFFFFFF])
def test_shallow_depth_with_888_masks_is_identity(color):
    shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert color_value(color, 16, shifts) == color


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0xFF00, 0xFF)