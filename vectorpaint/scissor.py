"""Scissor rectangles: clipping to a possibly transformed rectangle."""

from __future__ import annotations

from dataclasses import dataclass

from .units import Point, Rect, Size, Transform2D


@dataclass(frozen=True)
class Scissor:
    """A clip rectangle given by the transform of its centre and half its size.

    An extent below zero means that no scissor is set.
    """

    xform: Transform2D
    extent: tuple[float, float]

    @classmethod
    def empty(cls) -> Scissor:
        return cls(Transform2D.identity(), (-1.0, -1.0))

    @classmethod
    def from_rect(cls, rect: Rect) -> Scissor:
        width = max(rect.size.width, 0.0)
        height = max(rect.size.height, 0.0)
        xform = Transform2D.identity().then_translate(
            rect.origin.x + width * 0.5, rect.origin.y + height * 0.5
        )
        return cls(xform, (width * 0.5, height * 0.5))

    def intersect_with_rect(self, rect: Rect, current_transform: Transform2D) -> Scissor:
        """Intersect with rect, given in the space of current_transform.

        If the rotations differ, the current scissor is approximated by its
        bounding box in the current space; the result is always a rectangle.
        """
        if self.extent[0] < 0.0:
            return Scissor.from_rect(rect)

        ex, ey = self.extent
        inverse = current_transform.inverse() or Transform2D.identity()
        p = self.xform.then(inverse)
        tex = ex * abs(p.m11) + ey * abs(p.m21)
        tey = ex * abs(p.m12) + ey * abs(p.m22)
        current = Rect(Point(p.m31 - tex, p.m32 - tey), Size(tex * 2.0, tey * 2.0))
        overlap = current.intersection(rect)
        if overlap is None:
            return Scissor.empty()
        return Scissor.from_rect(overlap)

    def apply_transform(self, transform: Transform2D) -> Scissor:
        return Scissor(self.xform.then(transform), self.extent)