"""Geometry primitives: points, sizes, rectangles and 2D affine transforms.

Coordinates are plain floats. The unit a value is measured in (pixels,
device units, user pixels) is a matter of convention, and the aliases at the
bottom of this module name the common ones.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in 2D space."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    origin: Point
    size: Size

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlap of two rectangles, or None if it has no area."""
        x0 = max(self.min_x, other.min_x)
        y0 = max(self.min_y, other.min_y)
        x1 = min(self.max_x, other.max_x)
        y1 = min(self.max_y, other.max_y)
        if not (x1 > x0 and y1 > y0):
            return None
        return Rect(Point(x0, y0), Size(x1 - x0, y1 - y0))


@dataclass(frozen=True)
class Transform2D:
    """A 2D affine transform in row-vector form.

    A point (x, y) maps to (x*m11 + y*m21 + m31, x*m12 + y*m22 + m32).
    """

    m11: float
    m12: float
    m21: float
    m22: float
    m31: float
    m32: float

    @classmethod
    def identity(cls) -> Transform2D:
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def then(self, other: Transform2D) -> Transform2D:
        """Return the transform that applies self first, then other."""
        return Transform2D(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
            self.m31 * other.m11 + self.m32 * other.m21 + other.m31,
            self.m31 * other.m12 + self.m32 * other.m22 + other.m32,
        )

    def inverse(self) -> Transform2D | None:
        """Return the inverse transform, or None if the matrix is singular."""
        det = self.m11 * self.m22 - self.m12 * self.m21
        if det == 0.0:
            return None
        inv = 1.0 / det
        return Transform2D(
            inv * self.m22,
            inv * -self.m12,
            inv * -self.m21,
            inv * self.m11,
            inv * (self.m21 * self.m32 - self.m22 * self.m31),
            inv * (self.m31 * self.m12 - self.m11 * self.m32),
        )

    def then_translate(self, dx: float, dy: float) -> Transform2D:
        """Apply self, then translate by (dx, dy)."""
        return self.then(_translation(dx, dy))

    def pre_translate(self, dx: float, dy: float) -> Transform2D:
        """Translate by (dx, dy), then apply self."""
        return _translation(dx, dy).then(self)

    def pre_rotate(self, angle: float) -> Transform2D:
        """Rotate by angle (radians), then apply self."""
        return _rotation(angle).then(self)

    def transform_point(self, point: Point) -> Point:
        return Point(
            point.x * self.m11 + point.y * self.m21 + self.m31,
            point.x * self.m12 + point.y * self.m22 + self.m32,
        )


def _translation(dx: float, dy: float) -> Transform2D:
    return Transform2D(1.0, 0.0, 0.0, 1.0, dx, dy)


def _rotation(angle: float) -> Transform2D:
    cos = math.cos(angle)
    sin = math.sin(angle)
    return Transform2D(cos, sin, -sin, cos, 0.0, 0.0)


PixelPoint = Point
PixelSize = Size
PixelRect = Rect
PixelTransform = Transform2D
DevicePoint = Point
DeviceSize = Size
DeviceRect = Rect
DeviceTransform = Transform2D