#!/usr/bin/env python3
"""Tests for RenderBuffer pixel access and drawing primitives."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from PIL import Image

from jumping_ball_lines import RenderBuffer

RED = (255, 0, 0)


def count_pixels(buffer, color):
    return sum(
        1
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.get_pixel(x, y)[:3] == color
    )


def test_pixels_and_clear():
    print("\n=== Test: Pixel Access ===")

    buffer = RenderBuffer(8, 4)
    assert buffer.get_pixel(0, 0) == (0, 0, 0, 255)

    # Radius 0.5 around a pixel center paints exactly that pixel
    buffer.fill_circle(2.5, 1.5, 0.5, RED)
    assert buffer.get_pixel(2, 1) == (255, 0, 0, 255)
    assert buffer.get_pixel(3, 1) == (0, 0, 0, 255)

    # Out of bounds reads are transparent
    assert buffer.get_pixel(20, 20) == (0, 0, 0, 0)

    buffer.clear((10, 20, 30))
    assert buffer.get_pixel(7, 3) == (10, 20, 30, 255)
    buffer.clear()
    assert buffer.get_pixel(7, 3) == (0, 0, 0, 0)

    print("✓ get/clear work")


def test_invalid_size():
    with pytest.raises(ValueError):
        RenderBuffer(0, 10)


def test_draw_horizontal_line():
    print("\n=== Test: draw_line ===")

    buffer = RenderBuffer(10, 5)
    buffer.draw_line(1, 2.5, 8, 2.5, RED, width=1.0)

    for x in range(1, 8):
        assert buffer.get_pixel(x, 2)[:3] == RED
    assert buffer.get_pixel(5, 0)[:3] != RED
    assert buffer.get_pixel(5, 4)[:3] != RED

    print("✓ Line covers its row only")


def test_draw_point_line():
    buffer = RenderBuffer(5, 5)
    buffer.draw_line(2.5, 2.5, 2.5, 2.5, RED)
    assert count_pixels(buffer, RED) == 1


def test_line_is_clipped():
    buffer = RenderBuffer(5, 5)
    buffer.draw_line(-10, 2.5, 20, 2.5, RED)
    assert count_pixels(buffer, RED) == 5


def test_fill_circle():
    print("\n=== Test: fill_circle ===")

    buffer = RenderBuffer(11, 11)
    buffer.fill_circle(5.5, 5.5, 3, RED)

    assert buffer.get_pixel(5, 5)[:3] == RED
    assert buffer.get_pixel(5, 2)[:3] == RED
    assert buffer.get_pixel(0, 0)[:3] != RED
    assert buffer.get_pixel(8, 8)[:3] != RED

    print("✓ Disc filled around its center")


def test_image_conversion():
    buffer = RenderBuffer(6, 3)
    buffer.fill_circle(1.5, 1.5, 0.5, RED)

    image = buffer.to_image()
    assert image.size == (6, 3)
    assert image.mode == "RGBA"
    assert image.getpixel((1, 1)) == (255, 0, 0, 255)

    rgb = Image.new("RGB", (4, 2), (0, 128, 0))
    loaded = RenderBuffer.from_image(rgb)
    assert (loaded.width, loaded.height) == (4, 2)
    assert loaded.get_pixel(3, 1) == (0, 128, 0, 255)


if __name__ == "__main__":
    test_pixels_and_clear()
    test_invalid_size()
    test_draw_horizontal_line()
    test_draw_point_line()
    test_line_is_clipped()
    test_fill_circle()
    test_image_conversion()
    print("\nAll render buffer tests passed!")
