"""Expansion of flattened paths into triangle-strip vertices for stroking and filling."""

from __future__ import annotations

import math

from .path import FlattenedPath, LineCap, LineJoin, Path, VPoint, curve_divs
from .vertex import TexturedVertex

_WHITE = (1.0, 1.0, 1.0, 1.0)
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _vertex(x: float, y: float, u: float, v: float = 1.0) -> TexturedVertex:
    return TexturedVertex((x, y), (u, v), _WHITE)


def _normalized(x: float, y: float) -> tuple[float, float]:
    d = math.sqrt(x * x + y * y)
    if d > 1e-6:
        inv = 1.0 / d
        return x * inv, y * inv
    return x, y


def _join_divisions(value: float, ncap: int) -> int:
    """Round value up to an integer, saturating like a float-to-int cast, then clamp."""
    if math.isnan(value):
        n = 0
    elif math.isinf(value):
        n = _I32_MAX if value > 0 else _I32_MIN
    else:
        n = min(max(math.ceil(value), _I32_MIN), _I32_MAX)
    return min(max(n, 2), ncap)


def _points(flattened: FlattenedPath, path: Path) -> list[VPoint]:
    return flattened.points[path.first:path.first + path.count]


def _choose_bevel(bevel: bool, p0: VPoint, p1: VPoint, w: float):
    if bevel:
        return (
            p1.x + p0.dy * w,
            p1.y - p0.dx * w,
            p1.x + p1.dy * w,
            p1.y - p1.dx * w,
        )
    x = p1.x + p1.dmx * w
    y = p1.y + p1.dmy * w
    return (x, y, x, y)


def _round_join(out, p0, p1, lw, rw, lu, ru, ncap) -> None:
    dlx0, dly0 = p0.dy, -p0.dx
    dlx1, dly1 = p1.dy, -p1.dx

    if p1.left:
        lx0, ly0, lx1, ly1 = _choose_bevel(p1.inner_bevel, p0, p1, lw)
        a0 = -math.atan2(dly0, -dlx0)
        a1 = -math.atan2(dly1, -dlx1)
        if a1 > a0:
            a1 -= math.pi * 2.0

        out.append(_vertex(lx0, ly0, lu))
        out.append(_vertex(p1.x - dlx0 * rw, p1.y - dly0 * rw, ru))

        n = _join_divisions((a0 - a1) / math.pi * ncap, ncap)
        for i in range(n):
            u = i / (n - 1)
            a = a0 + u * (a1 - a0)
            rx = p1.x + math.cos(a) * rw
            ry = p1.y + math.sin(a) * rw
            out.append(_vertex(p1.x, p1.y, 0.5))
            out.append(_vertex(rx, ry, ru))

        out.append(_vertex(lx1, ly1, lu))
        out.append(_vertex(p1.x - dlx1 * rw, p1.y - dly1 * rw, ru))
    else:
        rx0, ry0, rx1, ry1 = _choose_bevel(p1.inner_bevel, p0, p1, -rw)
        a0 = math.atan2(dly0, dlx0)
        a1 = math.atan2(dly1, dlx1)
        if a1 < a0:
            a1 += math.pi * 2.0

        out.append(_vertex(p1.x + dlx0 * rw, p1.y + dly0 * rw, lu))
        out.append(_vertex(rx0, ry0, ru))

        n = _join_divisions((a0 - a1) / math.pi * ncap, ncap)
        for i in range(n):
            u = i / (n - 1)
            a = a0 + u * (a1 - a0)
            lx = p1.x + math.cos(a) * lw
            ly = p1.y + math.cos(a) * lw
            out.append(_vertex(lx, ly, lu))
            out.append(_vertex(p1.x, p1.y, 0.5))

        out.append(_vertex(p1.x + dlx1 * rw, p1.y + dly1 * rw, lu))
        out.append(_vertex(rx1, ry1, ru))


def _bevel_join(out, p0, p1, lw, rw, lu, ru) -> None:
    dlx0, dly0 = p0.dy, -p0.dx
    dlx1, dly1 = p1.dy, -p1.dx

    if p1.left:
        lx0, ly0, lx1, ly1 = _choose_bevel(p1.inner_bevel, p0, p1, lw)

        out.append(_vertex(lx0, ly0, lu))
        out.append(_vertex(p1.x - dlx0 * rw, p1.y - dly0 * rw, ru))

        if p1.bevel:
            out.append(_vertex(lx0, ly0, lu))
            out.append(_vertex(p1.x - dlx0 * rw, p1.y - dly0 * rw, ru))
            out.append(_vertex(lx1, ly1, lu))
            out.append(_vertex(p1.x - dlx1 * rw, p1.y - dly1 * rw, ru))
        else:
            rx0 = p1.x - p1.dmx * rw
            ry0 = p1.y - p1.dmy * rw
            out.append(_vertex(p1.x, p1.y, 0.5))
            out.append(_vertex(p1.x - dlx0 * rw, p1.y - dly0 * rw, ru))
            out.append(_vertex(rx0, ry0, ru))
            out.append(_vertex(rx0, ry0, ru))
            out.append(_vertex(p1.x, p1.y, 0.5))
            out.append(_vertex(p1.x - dlx1 * rw, p1.y - dly1 * rw, ru))

        out.append(_vertex(lx1, ly1, lu))
        out.append(_vertex(p1.x - dlx1 * rw, p1.y - dly1 * rw, ru))
    else:
        rx0, ry0, rx1, ry1 = _choose_bevel(p1.inner_bevel, p0, p1, -rw)

        out.append(_vertex(p1.x + dlx0 * lw, p1.y + dly0 * lw, lu))

        if p1.bevel:
            out.append(_vertex(p1.x + dlx0 * lw, p1.y + dly0 * lw, lu))
            out.append(_vertex(rx0, ry0, ru))
            out.append(_vertex(p1.x + dlx1 * lw, p1.y + dly1 * lw, lu))
            out.append(_vertex(rx1, ry1, ru))
        else:
            lx0 = p1.x + p1.dmx * lw
            ly0 = p1.y + p1.dmy * lw
            out.append(_vertex(p1.x + dlx0 * lw, p1.y + dly0 * lw, lu))
            out.append(_vertex(p1.x, p1.y, 0.5))
            out.append(_vertex(lx0, ly0, lu))
            out.append(_vertex(lx0, ly0, lu))
            out.append(_vertex(p1.x + dlx1 * lw, p1.y + dly1 * lw, lu))
            out.append(_vertex(p1.x, p1.y, 0.5))

        out.append(_vertex(p1.x + dlx1 * lw, p1.y + dly1 * lw, lu))
        out.append(_vertex(rx1, ry1, ru))


def _butt_cap_start(out, p, dx, dy, w, d, aa, u0, u1) -> None:
    px = p.x - dx * d
    py = p.y - dy * d
    dlx, dly = dy, -dx
    out.append(_vertex(px + dlx * w - dx * aa, py + dly * w - dy * aa, u0, 0.0))
    out.append(_vertex(px - dlx * w - dx * aa, py - dly * w - dy * aa, u1, 0.0))
    out.append(_vertex(px + dlx * w, py + dly * w, u0))
    out.append(_vertex(px - dlx * w, py - dly * w, u1))


def _butt_cap_end(out, p, dx, dy, w, d, aa, u0, u1) -> None:
    px = p.x - dx * d
    py = p.y - dy * d
    dlx, dly = dy, -dx
    out.append(_vertex(px + dlx * w, py + dly * w, u0))
    out.append(_vertex(px - dlx * w, py - dly * w, u1))
    out.append(_vertex(px + dlx * w + dx * aa, py + dly * w + dy * aa, u0, 0.0))
    out.append(_vertex(px - dlx * w + dx * aa, py - dly * w + dy * aa, u1, 0.0))


def _round_cap_start(out, p, dx, dy, w, ncap, u0, u1) -> None:
    px, py = p.x, p.y
    dlx, dly = dy, -dx
    for i in range(ncap):
        a = i / (ncap - 1) * math.pi
        ax = math.cos(a) * w
        ay = math.sin(a) * w
        out.append(_vertex(px - dlx * ax - dx * ay, py - dly * ax - dy * ay, u0))
        out.append(_vertex(px, py, 0.5))
    out.append(_vertex(px + dlx * w, py + dly * w, u0))
    out.append(_vertex(px - dlx * w, py - dly * w, u1))


def _round_cap_end(out, p, dx, dy, w, ncap, u0, u1) -> None:
    px, py = p.x, p.y
    dlx, dly = dy, -dx
    out.append(_vertex(px + dlx * w, py + dly * w, u0))
    out.append(_vertex(px - dlx * w, py - dly * w, u1))
    for i in range(ncap):
        a = i / (ncap - 1) * math.pi
        ax = math.cos(a) * w
        ay = math.sin(a) * w
        out.append(_vertex(px, py, 0.5))
        out.append(_vertex(px - dlx * ax + dx * ay, py - dly * ax + dy * ay, u0))


def _close_loop(out, lu: float, ru: float) -> None:
    v0, v1 = out[0], out[1]
    out.append(_vertex(v0.pos[0], v0.pos[1], lu))
    out.append(_vertex(v1.pos[0], v1.pos[1], ru))


def expand_stroke(
    flattened: FlattenedPath,
    w: float,
    fringe: float,
    line_cap: LineCap,
    line_join: LineJoin,
    miter_limit: float,
    tess_tol: float,
) -> None:
    """Build stroke vertices of every sub-path; fill vertices are cleared.

    Open sub-paths with fewer than two points and empty closed sub-paths get
    no stroke.
    """
    aa = fringe
    u0, u1 = 0.0, 1.0
    ncap = curve_divs(w, math.pi, tess_tol)

    w += aa * 0.5

    # Without antialiasing the fringe gradient is not used.
    if aa == 0.0:
        u0 = u1 = 0.5

    flattened.calculate_joins(w, line_join, miter_limit)

    for path in flattened.paths:
        path.fill = []
        pts = _points(flattened, path)
        looped = path.closed
        out: list[TexturedVertex] = []

        if (looped and not pts) or (not looped and len(pts) < 2):
            path.stroke = out
            continue

        if looped:
            pairs = list(zip(pts[-1:] + pts[:-1], pts))
        else:
            pairs = list(zip(pts[:-2], pts[1:-1]))
            dx, dy = _normalized(pts[1].x - pts[0].x, pts[1].y - pts[0].y)
            if line_cap is LineCap.BUTT:
                _butt_cap_start(out, pts[0], dx, dy, w, -aa * 0.5, aa, u0, u1)
            elif line_cap is LineCap.SQUARE:
                _butt_cap_start(out, pts[0], dx, dy, w, w - aa, aa, u0, u1)
            else:
                _round_cap_start(out, pts[0], dx, dy, w, ncap, u0, u1)

        for p0, p1 in pairs:
            if p1.bevel or p1.inner_bevel:
                if line_join is LineJoin.ROUND:
                    _round_join(out, p0, p1, w, w, u0, u1, ncap)
                else:
                    _bevel_join(out, p0, p1, w, w, u0, u1)
            else:
                out.append(_vertex(p1.x + p1.dmx * w, p1.y + p1.dmy * w, u0))
                out.append(_vertex(p1.x - p1.dmx * w, p1.y - p1.dmy * w, u1))

        if looped:
            _close_loop(out, u0, u1)
        else:
            p0, p1 = pts[-2], pts[-1]
            dx, dy = _normalized(p1.x - p0.x, p1.y - p0.y)
            if line_cap is LineCap.BUTT:
                _butt_cap_end(out, p1, dx, dy, w, -aa * 0.5, aa, u0, u1)
            elif line_cap is LineCap.ROUND:
                _butt_cap_end(out, p1, dx, dy, w, w - aa, aa, u0, u1)
            else:
                _round_cap_end(out, p1, dx, dy, w, ncap, u0, u1)

        path.stroke = out


def expand_fill(
    flattened: FlattenedPath,
    w: float,
    line_join: LineJoin,
    miter_limit: float,
    fringe_width: float,
) -> None:
    """Build fill vertices of every sub-path and, when w > 0, its fringe strip."""
    aa = fringe_width
    fringe = w > 0.0

    flattened.calculate_joins(w, line_join, miter_limit)

    convex = len(flattened.paths) == 1 and flattened.paths[0].convex
    woff = 0.5 * aa

    for path in flattened.paths:
        pts = _points(flattened, path)
        if not pts:
            path.fill = []
            path.stroke = []
            continue

        pairs = list(zip(pts[-1:] + pts[:-1], pts))
        fill: list[TexturedVertex] = []

        if fringe:
            for p0, p1 in pairs:
                if p1.bevel:
                    if p1.left:
                        fill.append(
                            _vertex(p1.x + p1.dmx * woff, p1.y + p1.dmy * woff, 0.5)
                        )
                    else:
                        dlx0, dly0 = p0.dy, -p0.dx
                        dlx1, dly1 = p1.dy, -p1.dx
                        fill.append(_vertex(p1.x + dlx0 * woff, p1.y + dly0 * woff, 0.5))
                        fill.append(_vertex(p1.x + dlx1 * woff, p1.y + dly1 * woff, 0.5))
                else:
                    fill.append(_vertex(p1.x + p1.dmx * woff, p1.y + p1.dmy * woff, 0.5))
        else:
            fill.extend(_vertex(pt.x, pt.y, 0.5) for pt in pts)

        path.fill = fill

        if not fringe:
            path.stroke = []
            continue

        lw = w + woff
        rw = w - woff
        lu = 0.0
        ru = 1.0

        # Convex shapes get only half a fringe so they can be drawn without stenciling.
        if convex:
            lw = woff
            lu = 0.5

        stroke: list[TexturedVertex] = []
        for p0, p1 in pairs:
            if p1.bevel or p1.inner_bevel:
                _bevel_join(stroke, p0, p1, lw, rw, lu, ru)
            else:
                stroke.append(_vertex(p1.x + p1.dmx * lw, p1.y + p1.dmy * lw, lu))
                stroke.append(_vertex(p1.x - p1.dmx * rw, p1.y - p1.dmy * rw, ru))

        _close_loop(stroke, lu, ru)
        path.stroke = stroke