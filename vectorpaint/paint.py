"""Paints: how a filled or stroked shape is coloured.

A paint is a box gradient in the space of its transform. Solid colours,
linear, radial and shadow gradients and image patterns are all special
cases of it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .color import Color, convert_color
from .units import Point, Rect, Transform2D

RGBA = tuple[float, float, float, float]

_LARGE = 1e5


def _rgba(color) -> RGBA:
    r, g, b, a = color
    return (float(r), float(g), float(b), float(a))


@dataclass
class Paint:
    """Paint parameters handed to a device for stroking and filling."""

    xform: Transform2D = field(default_factory=Transform2D.identity)
    extent: tuple[float, float] = (0.0, 0.0)
    radius: float = 0.0
    feather: float = 1.0
    inner_color: RGBA = (0.0, 0.0, 0.0, 1.0)
    outer_color: RGBA = (0.0, 0.0, 0.0, 1.0)
    image: int | None = None

    @classmethod
    def solid(cls, color) -> Paint:
        """A paint of one colour, given as an (r, g, b, a) sequence."""
        rgba = _rgba(color)
        return cls(
            xform=Transform2D.identity(),
            extent=(0.0, 0.0),
            radius=0.0,
            feather=1.0,
            inner_color=rgba,
            outer_color=rgba,
            image=None,
        )

    @classmethod
    def linear_gradient(
        cls, start_point: Point, end_point: Point, inner_color, outer_color
    ) -> Paint:
        """A gradient from inner_color at start_point to outer_color at end_point."""
        dx = end_point.x - start_point.x
        dy = end_point.y - start_point.y
        d = math.sqrt(dx * dx + dy * dy)
        if d > 0.0001:
            dx /= d
            dy /= d
        else:
            dx = 0.0
            dy = 1.0

        return cls(
            xform=Transform2D(
                dy,
                -dx,
                dx,
                dy,
                start_point.x - dx * _LARGE,
                start_point.y - dy * _LARGE,
            ),
            extent=(_LARGE, _LARGE + d * 0.5),
            radius=0.0,
            feather=max(d, 1.0),
            inner_color=_rgba(inner_color),
            outer_color=_rgba(outer_color),
            image=None,
        )

    @classmethod
    def radial_gradient(
        cls, center_point: Point, in_radius: float, out_radius: float, inner_color, outer_color
    ) -> Paint:
        """A circular gradient between two radii around center_point."""
        r = (in_radius + out_radius) * 0.5
        f = out_radius - in_radius
        return cls(
            xform=Transform2D(1.0, 0.0, 0.0, 1.0, center_point.x, center_point.y),
            extent=(r, r),
            radius=r,
            feather=max(f, 1.0),
            inner_color=_rgba(inner_color),
            outer_color=_rgba(outer_color),
            image=None,
        )

    @classmethod
    def shadow_gradient(
        cls, rect: Rect, radius: float, feather: float, inner_color, outer_color
    ) -> Paint:
        """A feathered rounded-box gradient, as used for drop shadows."""
        origin, size = rect.origin, rect.size
        return cls(
            xform=Transform2D(
                1.0,
                0.0,
                0.0,
                1.0,
                origin.x + size.width * 0.5,
                origin.y + size.height * 0.5,
            ),
            extent=(size.width * 0.5, size.height * 0.5),
            radius=radius,
            feather=max(feather, 1.0),
            inner_color=_rgba(inner_color),
            outer_color=_rgba(outer_color),
            image=None,
        )

    @classmethod
    def image_pattern(
        cls,
        resource_key: int,
        transform: Transform2D,
        alpha: float,
        texture_size: tuple[int, int] | None = None,
    ) -> Paint:
        """A pattern repeating the texture resource_key.

        texture_size is the (width, height) of the texture, or None when the
        texture is not known, in which case a 1 x 1 extent is used.
        """
        if texture_size is None:
            extent = (1.0, 1.0)
        else:
            extent = (float(texture_size[0]), float(texture_size[1]))
        color = (1.0, 1.0, 1.0, float(alpha))
        return cls(
            xform=transform,
            extent=extent,
            radius=0.0,
            feather=0.0,
            inner_color=color,
            outer_color=color,
            image=resource_key,
        )

    def set_color(self, color: Color) -> None:
        """Turn this paint into a solid paint of color."""
        rgba = convert_color(color)
        self.xform = Transform2D.identity()
        self.extent = (0.0, 0.0)
        self.radius = 0.0
        self.feather = 1.0
        self.inner_color = rgba
        self.outer_color = rgba
        self.image = None