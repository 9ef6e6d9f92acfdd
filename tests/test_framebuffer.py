"""Tests for the packed pixel framebuffer."""

import numpy as np
import pytest
from PIL import Image

from voxeltrace.core.color import Color
from voxeltrace.renderer.framebuffer import Framebuffer


@pytest.fixture
def framebuffer():
    return Framebuffer(4, 3)


def test_starts_black(framebuffer):
    assert framebuffer.get_buffer().shape == (3, 4)
    assert not framebuffer.get_buffer().any()


def test_point_writes_packed_color(framebuffer):
    framebuffer.point(2, 1, Color(1.0, 0.0, 0.0))
    assert framebuffer.get_buffer()[1, 2] == 0xFF0000
    assert framebuffer.get_pixel(2, 1) == Color(1.0, 0.0, 0.0)


@pytest.mark.parametrize("x, y", [(4, 0), (0, 3), (-1, 0), (0, -1), (100, 100)])
def test_out_of_range_point_is_ignored(framebuffer, x, y):
    framebuffer.point(x, y, Color.white())
    assert not framebuffer.get_buffer().any()


def test_clear_uses_background(framebuffer):
    framebuffer.set_background_color(Color(0.0, 0.0, 1.0))
    framebuffer.clear()
    assert (framebuffer.get_buffer() == 0x0000FF).all()


def test_to_rgb_array(framebuffer):
    framebuffer.point(0, 0, Color.from_hex(0x336699))
    rgb = framebuffer.to_rgb_array()
    assert rgb.shape == (3, 4, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 0]) == (0x33, 0x66, 0x99)


def test_save_png(framebuffer, tmp_path):
    framebuffer.point(3, 2, Color.white())
    path = tmp_path / "frames" / "frame.png"
    framebuffer.save(str(path))

    with Image.open(path) as img:
        assert img.size == (4, 3)
        assert img.getpixel((3, 2)) == (255, 255, 255)
        assert img.getpixel((0, 0)) == (0, 0, 0)


def test_save_unknown_format(framebuffer, tmp_path):
    with pytest.raises(ValueError):
        framebuffer.save(str(tmp_path / "frame.notanimage"))


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_dimensions(width, height):
    with pytest.raises(ValueError):
        Framebuffer(width, height)
