"""Path elements and flattening of paths into polylines.

A path is a sequence of elements (MoveTo, LineTo, BezierTo, ClosePath,
SetSolidity). FlattenedPath turns it into sub-paths made of points, with
curves subdivided, winding enforced and segment directions computed.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from .units import Point

_F32_MAX = 3.4028234663852886e38
_I32_MAX = 2**31 - 1


class Solidity(enum.Enum):
    SOLID = "solid"
    HOLE = "hole"


class LineCap(enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(enum.Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@dataclass(frozen=True)
class MoveTo:
    """Start a new sub-path at point."""

    point: Point


@dataclass(frozen=True)
class LineTo:
    """Add a straight segment to point."""

    point: Point


@dataclass(frozen=True)
class BezierTo:
    """Add a cubic Bezier segment with control points c1, c2 ending at point."""

    c1: Point
    c2: Point
    point: Point


@dataclass(frozen=True)
class ClosePath:
    """Mark the current sub-path as closed."""


@dataclass(frozen=True)
class SetSolidity:
    """Set whether the current sub-path is a solid shape or a hole."""

    solidity: Solidity


@dataclass(slots=True)
class VPoint:
    """A flattened path point with its outgoing direction and join data."""

    x: float
    y: float
    dx: float = 0.0
    dy: float = 0.0
    length: float = 0.0
    dmx: float = 0.0
    dmy: float = 0.0
    corner: bool = False
    left: bool = False
    bevel: bool = False
    inner_bevel: bool = False


@dataclass
class Path:
    """A sub-path: a run of points in FlattenedPath.points plus its geometry."""

    first: int
    count: int = 0
    closed: bool = False
    num_bevel: int = 0
    solidity: Solidity = Solidity.SOLID
    fill: list = field(default_factory=list)
    stroke: list = field(default_factory=list)
    convex: bool = False

    @property
    def num_fill(self) -> int:
        return len(self.fill)

    @property
    def num_stroke(self) -> int:
        return len(self.stroke)


@dataclass
class Bounds:
    """Axis-aligned bounds of the flattened points."""

    min: Point = field(default_factory=lambda: Point(_F32_MAX, _F32_MAX))
    max: Point = field(default_factory=lambda: Point(-_F32_MAX, -_F32_MAX))

    def _include(self, x: float, y: float) -> None:
        self.min = Point(min(self.min.x, x), min(self.min.y, y))
        self.max = Point(max(self.max.x, x), max(self.max.y, y))


def _close_enough(ax: float, ay: float, bx: float, by: float, tol: float) -> bool:
    dx = bx - ax
    dy = by - ay
    return dx * dx + dy * dy < tol * tol


def _normalize(x: float, y: float) -> tuple[float, float, float]:
    d = math.sqrt(x * x + y * y)
    if d > 1e-6:
        inv = 1.0 / d
        x *= inv
        y *= inv
    return x, y, d


def poly_area(points) -> float:
    """Return the signed area of a polygon given by objects with x and y."""
    if len(points) < 3:
        return 0.0
    a = points[0]
    area = 0.0
    for b, c in zip(points[1:], points[2:]):
        abx = b.x - a.x
        aby = b.y - a.y
        acx = c.x - a.x
        acy = c.y - a.y
        area += acx * aby - abx * acy
    return area * 0.5


def curve_divs(r: float, arc: float, tess_tol: float) -> int:
    """Return how many divisions an arc of radius r needs, at least 2."""
    try:
        da = math.acos(r / (r + tess_tol)) * 2.0
    except (ZeroDivisionError, ValueError):
        return 2
    if math.isnan(da):
        return 2
    if da == 0.0:
        return _I32_MAX if arc > 0.0 else 2
    return max(math.ceil(arc / da), 2)


@dataclass
class FlattenedPath:
    """Sub-paths of a path flattened into points."""

    points: list[VPoint] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    bounds: Bounds = field(default_factory=Bounds)

    @classmethod
    def from_elements(cls, path, dist_tol: float, tess_tol: float) -> FlattenedPath:
        """Flatten a sequence of path elements."""
        flattened = cls()
        for element in path:
            match element:
                case MoveTo(point=point):
                    flattened._add_path()
                    flattened._add_point(point.x, point.y, True, dist_tol)
                case LineTo(point=point):
                    flattened._add_point(point.x, point.y, True, dist_tol)
                case BezierTo(c1=c1, c2=c2, point=point):
                    if flattened.points:
                        last = flattened.points[-1]
                        flattened._tesselate_bezier(
                            last.x, last.y, c1.x, c1.y, c2.x, c2.y,
                            point.x, point.y, 0, True, tess_tol,
                        )
                case ClosePath():
                    if flattened.paths:
                        flattened.paths[-1].closed = True
                case SetSolidity(solidity=solidity):
                    if flattened.paths:
                        flattened.paths[-1].solidity = solidity
                case _:
                    raise TypeError(f"unknown path element: {element!r}")
        flattened._finish(dist_tol)
        return flattened

    def clear(self) -> None:
        self.points.clear()
        self.paths.clear()

    def _points_of(self, path: Path) -> list[VPoint]:
        return self.points[path.first:path.first + path.count]

    def _add_path(self) -> Path:
        path = Path(first=len(self.points))
        self.paths.append(path)
        return path

    def _add_point(self, x: float, y: float, corner: bool, dist_tol: float) -> None:
        if not self.paths:
            return
        path = self.paths[-1]
        if path.count > 0 and self.points:
            last = self.points[-1]
            if _close_enough(last.x, last.y, x, y, dist_tol):
                last.corner = last.corner or corner
                return
        self.points.append(VPoint(x, y, corner=corner))
        path.count += 1

    def _tesselate_bezier(self, x1, y1, x2, y2, x3, y3, x4, y4, level, corner, tess_tol):
        if level > 10:
            return

        x12 = (x1 + x2) * 0.5
        y12 = (y1 + y2) * 0.5
        x23 = (x2 + x3) * 0.5
        y23 = (y2 + y3) * 0.5
        x34 = (x3 + x4) * 0.5
        y34 = (y3 + y4) * 0.5
        x123 = (x12 + x23) * 0.5
        y123 = (y12 + y23) * 0.5

        dx = x4 - x1
        dy = y4 - y1
        d2 = abs((x2 - x4) * dy - (y2 - y4) * dx)
        d3 = abs((x3 - x4) * dy - (y3 - y4) * dx)

        if (d2 + d3) * (d2 + d3) < tess_tol * (dx * dx + dy * dy):
            self._add_point(x4, y4, corner, tess_tol)
            return

        x234 = (x23 + x34) * 0.5
        y234 = (y23 + y34) * 0.5
        x1234 = (x123 + x234) * 0.5
        y1234 = (y123 + y234) * 0.5

        self._tesselate_bezier(
            x1, y1, x12, y12, x123, y123, x1234, y1234, level + 1, False, tess_tol
        )
        self._tesselate_bezier(
            x1234, y1234, x234, y234, x34, y34, x4, y4, level + 1, corner, tess_tol
        )

    def _finish(self, dist_tol: float) -> None:
        for path in self.paths:
            pts = self._points_of(path)

            # A last point equal to the first one closes the path.
            if pts and _close_enough(pts[-1].x, pts[-1].y, pts[0].x, pts[0].y, dist_tol):
                path.count -= 1
                path.closed = True
                pts = pts[:-1]

            if path.count > 2:
                area = poly_area(pts)
                if (path.solidity is Solidity.SOLID and area < 0.0) or (
                    path.solidity is Solidity.HOLE and area > 0.0
                ):
                    pts.reverse()
                    self.points[path.first:path.first + path.count] = pts

            for p0, p1 in zip(pts, pts[1:] + pts[:1]):
                p0.dx, p0.dy, p0.length = _normalize(p1.x - p0.x, p1.y - p0.y)
                self.bounds._include(p0.x, p0.y)

    def calculate_joins(self, w: float, line_join: LineJoin, miter_limit: float) -> None:
        """Compute extrusion vectors and mark which joins need bevels."""
        iw = 1.0 / w if w > 0.0 else 0.0
        bevel_joins = line_join in (LineJoin.BEVEL, LineJoin.ROUND)

        for path in self.paths:
            pts = self._points_of(path)
            nleft = 0
            path.num_bevel = 0

            for p0, p1 in zip(pts[-1:] + pts[:-1], pts):
                dlx0 = p0.dy
                dly0 = -p0.dx
                dlx1 = p1.dy
                dly1 = -p1.dx

                p1.dmx = (dlx0 + dlx1) * 0.5
                p1.dmy = (dly0 + dly1) * 0.5
                dmr2 = p1.dmx * p1.dmx + p1.dmy * p1.dmy
                if dmr2 > 0.000001:
                    scale = min(1.0 / dmr2, 600.0)
                    p1.dmx *= scale
                    p1.dmy *= scale

                p1.left = False
                p1.bevel = False
                p1.inner_bevel = False

                cross = p1.dx * p0.dy - p0.dx * p1.dy
                if cross > 0.0:
                    nleft += 1
                    p1.left = True

                limit = max(min(p0.length, p1.length) * iw, 1.01)
                if dmr2 * limit * limit < 1.0:
                    p1.inner_bevel = True

                if p1.corner and (dmr2 * miter_limit * miter_limit < 1.0 or bevel_joins):
                    p1.bevel = True

                if p1.bevel or p1.inner_bevel:
                    path.num_bevel += 1

            path.convex = nleft == path.count