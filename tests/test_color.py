import dataclasses

import pytest

from vectorpaint.color import Color, ColorSpace, convert_color


def test_rgb_is_opaque_srgb():
    c = Color.rgb(0.1, 0.2, 0.3)
    assert (c.red, c.green, c.blue) == (0.1, 0.2, 0.3)
    assert c.alpha == 1.0
    assert c.color_space is ColorSpace.SRGB


def test_rgba_keeps_alpha():
    c = Color.rgba(0.1, 0.2, 0.3, 0.4)
    assert c.alpha == 0.4
    assert c.color_space is ColorSpace.SRGB


def test_convert_color_order():
    assert convert_color(Color.rgba(0.5, 0.25, 0.125, 0.75)) == (0.5, 0.25, 0.125, 0.75)


def test_convert_color_of_rgb_has_full_alpha():
    assert convert_color(Color.rgb(0.0, 0.5, 1.0)) == (0.0, 0.5, 1.0, 1.0)


def test_rgb_equals_rgba_with_full_alpha():
    assert Color.rgb(1.0, 0.0, 0.5) == Color.rgba(1.0, 0.0, 0.5, 1.0)


def test_color_is_immutable():
    c = Color.rgb(1.0, 1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.red = 0.0
    assert c.red == 1.0
    assert convert_color(c) == (1.0, 1.0, 1.0, 1.0)