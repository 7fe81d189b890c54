"""Vertex records passed to a device for triangle rendering.

bytes(vertex) gives the packed little-endian float32 layout a GPU buffer uses.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass


def _floats(values, count: int) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"expected {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class ColoredVertex:
    """A vertex with a position and an RGBA colour."""

    pos: tuple[float, float]
    color: tuple[float, float, float, float]

    _LAYOUT = struct.Struct("<2f4f")

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos", _floats(self.pos, 2))
        object.__setattr__(self, "color", _floats(self.color, 4))

    def __bytes__(self) -> bytes:
        return self._LAYOUT.pack(*self.pos, *self.color)


@dataclass(frozen=True)
class TexturedVertex:
    """A vertex with a position, texture coordinates and an RGBA colour."""

    pos: tuple[float, float]
    tex_coords: tuple[float, float]
    color: tuple[float, float, float, float]

    _LAYOUT = struct.Struct("<2f2f4f")

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos", _floats(self.pos, 2))
        object.__setattr__(self, "tex_coords", _floats(self.tex_coords, 2))
        object.__setattr__(self, "color", _floats(self.color, 4))

    def __bytes__(self) -> bytes:
        return self._LAYOUT.pack(*self.pos, *self.tex_coords, *self.color)


@dataclass(frozen=True)
class TexturedY8Vertex(TexturedVertex):
    """A textured vertex sampling a single-channel (Y8) texture."""