"""Clipping of lines, rectangles and images against a clip rectangle."""

from __future__ import annotations

_INSIDE = 0
_LEFT = 1
_RIGHT = 2
_BOTTOM = 4
_TOP = 8


def _clip_code(x, y, clip_x1, clip_y1, clip_width, clip_height) -> int:
    code = _INSIDE
    if x < clip_x1:
        code |= _LEFT
    if x > clip_x1 + clip_width:
        code |= _RIGHT
    if y < clip_y1:
        code |= _BOTTOM
    if y > clip_y1 + clip_height:
        code |= _TOP
    return code


def clip_line(x1, y1, x2, y2, clip_x1, clip_y1, clip_width, clip_height):
    """Clip a line segment with the Cohen-Sutherland algorithm.

    Return the clipped (x1, y1, x2, y2), or None if nothing is visible.
    """
    clip_x2 = clip_x1 + clip_width
    clip_y2 = clip_y1 + clip_height
    code1 = _clip_code(x1, y1, clip_x1, clip_y1, clip_width, clip_height)
    code2 = _clip_code(x2, y2, clip_x1, clip_y1, clip_width, clip_height)

    while True:
        if code1 == _INSIDE and code2 == _INSIDE:
            return (x1, y1, x2, y2)
        if code1 & code2:
            return None

        code_out = code1 if code1 != _INSIDE else code2
        if code_out & _TOP:
            x = x1 + (x2 - x1) * (clip_y2 - y1) / (y2 - y1)
            y = clip_y2
        elif code_out & _BOTTOM:
            x = x1 + (x2 - x1) * (clip_y1 - y1) / (y2 - y1)
            y = clip_y1
        elif code_out & _RIGHT:
            y = y1 + (y2 - y1) * (clip_x2 - x1) / (x2 - x1)
            x = clip_x2
        else:
            y = y1 + (y2 - y1) * (clip_x1 - x1) / (x2 - x1)
            x = clip_x1

        if code_out == code1:
            x1, y1 = x, y
            code1 = _clip_code(x1, y1, clip_x1, clip_y1, clip_width, clip_height)
        else:
            x2, y2 = x, y
            code2 = _clip_code(x2, y2, clip_x1, clip_y1, clip_width, clip_height)


def clip_rect(x1, y1, width, height, clip_x1, clip_y1, clip_width, clip_height):
    """Return the overlap (x, y, width, height) of two rectangles, or None."""
    overlap_x1 = max(x1, clip_x1)
    overlap_x2 = min(x1 + width, clip_x1 + clip_width)
    if overlap_x2 <= overlap_x1:
        return None
    overlap_y1 = max(y1, clip_y1)
    overlap_y2 = min(y1 + height, clip_y1 + clip_height)
    if overlap_y2 <= overlap_y1:
        return None
    return (overlap_x1, overlap_y1, overlap_x2 - overlap_x1, overlap_y2 - overlap_y1)


def clip_image(x1, y1, width, height, clip_x1, clip_y1, clip_width, clip_height, uv):
    """Clip an image rectangle and adjust its texture coordinates to match.

    Return (x, y, width, height, (u0, v0, u1, v1)), or None if nothing is visible.
    """
    clipped = clip_rect(x1, y1, width, height, clip_x1, clip_y1, clip_width, clip_height)
    if clipped is None:
        return None
    cx, cy, cw, ch = clipped
    u0, v0, u1, v1 = uv
    new_uv = (
        ((cx - x1) / width) * (u1 - u0) + u0,
        ((cy - y1) / height) * (v1 - v0) + v0,
        ((cx + cw - x1) / width) * (u1 - u0) + u0,
        ((cy + ch - y1) / height) * (v1 - v0) + v0,
    )
    return (cx, cy, cw, ch, new_uv)