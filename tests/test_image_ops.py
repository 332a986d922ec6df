import math

import pytest

from grayhist.image_ops import (
    is_gray_pixel,
    is_grayscale,
    to_grayscale_avg,
    to_grayscale_luma,
)
from grayhist.pixel_buffer import PixelBuffer


def test_avg_truncates(color_buffer):
    src = color_buffer.copy()
    to_grayscale_avg(color_buffer)
    for (r, g, b, a), out in zip(src.pixels, color_buffer.pixels):
        v = (r + g + b) // 3
        assert out == (v, v, v, a)
        assert 0 <= v <= 255


def test_avg_known_values():
    buf = PixelBuffer(1, 2, [(1, 1, 2, 7), (255, 255, 254, 255)])
    to_grayscale_avg(buf)
    assert buf.pixels == [(1, 1, 1, 7), (254, 254, 254, 255)]


def test_avg_on_gray_image_is_noop():
    values = [0, 1, 17, 128, 254, 255]
    buf = PixelBuffer(len(values), 1, [(v, v, v, 200) for v in values])
    before = buf.pixels[:]
    to_grayscale_avg(buf)
    assert buf.pixels == before


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((100, 0, 0), 21),
        ((0, 100, 0), 71),
        ((0, 0, 100), 7),
        ((10, 20, 30), 18),
        ((0, 0, 0), 0),
    ],
)
def test_luma_truncates_not_rounds(rgb, expected):
    buf = PixelBuffer(1, 1, [rgb + (42,)])
    to_grayscale_luma(buf)
    assert buf.pixels == [(expected, expected, expected, 42)]


def test_luma_matches_formula(color_buffer):
    src = color_buffer.copy()
    to_grayscale_luma(color_buffer)
    for (r, g, b, a), out in zip(src.pixels, color_buffer.pixels):
        v = math.floor(r * 0.2126 + g * 0.7152 + b * 0.0722)
        assert out == (v, v, v, a)


def test_grayscale_ops_return_same_buffer(color_buffer):
    assert to_grayscale_avg(color_buffer) is color_buffer
    assert to_grayscale_luma(color_buffer) is color_buffer


def test_is_grayscale_strict(black_and_white, color_buffer):
    assert is_grayscale(black_and_white)
    assert not is_grayscale(color_buffer)


def test_is_grayscale_after_conversion(color_buffer):
    to_grayscale_luma(color_buffer)
    assert is_grayscale(color_buffer)


def test_empty_image_is_grayscale():
    assert is_grayscale(PixelBuffer(0, 0, []))


@pytest.mark.parametrize(
    "rgb, strict, lenient",
    [
        ((10, 10, 10), True, True),
        ((10, 20, 20), False, True),
        ((10, 10, 20), False, True),
        ((10, 20, 10), False, False),
        ((1, 2, 3), False, False),
    ],
)
def test_gray_pixel_rules(rgb, strict, lenient):
    assert is_gray_pixel(*rgb, strict=True) is strict
    assert is_gray_pixel(*rgb, strict=False) is lenient


def test_lenient_image_check():
    buf = PixelBuffer(2, 1, [(10, 20, 20, 255), (5, 5, 5, 255)])
    assert not is_grayscale(buf, strict=True)
    assert is_grayscale(buf, strict=False)


def test_luma_white_truncates_to_254():
    # suma wag w arytmetyce float daje odrobinę mniej niż 255
    buf = PixelBuffer(1, 1, [(255, 255, 255, 255)])
    to_grayscale_luma(buf)
    assert buf.pixels == [(254, 254, 254, 255)]
