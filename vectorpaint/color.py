"""Colours, colour spaces and pixel formats."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ColorSpace(enum.Enum):
    SRGB = "srgb"
    EXTENDED_SRGB = "extended_srgb"
    DISPLAY_P3 = "display_p3"


class ColorFormat(enum.Enum):
    """Pixel format of texture data."""

    RGBA = "rgba"  # 8 bits per channel with alpha
    Y8 = "y8"  # single 8-bit channel, e.g. for font glyphs


@dataclass(frozen=True)
class Color:
    """A colour with floating-point channels."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0
    color_space: ColorSpace = ColorSpace.SRGB

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> Color:
        return cls(red, green, blue, 1.0, ColorSpace.SRGB)

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        return cls(red, green, blue, alpha, ColorSpace.SRGB)


def convert_color(color: Color) -> tuple[float, float, float, float]:
    """Return the colour as an (r, g, b, a) tuple."""
    return (color.red, color.green, color.blue, color.alpha)