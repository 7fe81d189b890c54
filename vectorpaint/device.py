"""Abstract rendering device, render target and texture interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from .vertex import ColoredVertex, TexturedVertex, TexturedY8Vertex


class Texture(ABC):
    """A texture owned by a device."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return (width, height). Safe to call from any thread."""

    @abstractmethod
    def update(self, memory: bytes, offset_x: int, offset_y: int, width: int, height: int) -> None:
        """Replace a region of the texture with pixel data.

        Some devices allow this only on the thread that owns the device.
        """


class RenderTarget(ABC):
    """Something a device can render into."""

    @abstractmethod
    def update_size(self, width: int, height: int) -> None:
        """Change the size of the target."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""

    @abstractmethod
    def aspect_ratio(self) -> float:
        """Return the width to height ratio."""

    @abstractmethod
    def device_transform(self):
        """Return the transform from pixel to device coordinates."""


@dataclass
class DrawingState:
    """Clip and transform settings recorded by a device."""

    clip_rect: object = None
    clip_path: tuple | None = None
    transforms: tuple = ()


@dataclass
class _StateStack:
    current: DrawingState = field(default_factory=DrawingState)
    saved: list[DrawingState] = field(default_factory=list)


def _corners(rect):
    x0 = rect.origin.x
    y0 = rect.origin.y
    x1 = rect.origin.x + rect.size.width
    y1 = rect.origin.y + rect.size.height
    return x0, y0, x1, y1


def _textured_quad(vertex_type, rect, uv, color):
    x0, y0, x1, y1 = _corners(rect)
    u0, v0, u1, v1 = uv
    return [
        vertex_type((x0, y0), (u0, v0), color),
        vertex_type((x1, y0), (u1, v0), color),
        vertex_type((x0, y1), (u0, v1), color),
        vertex_type((x1, y0), (u1, v0), color),
        vertex_type((x1, y1), (u1, v1), color),
        vertex_type((x0, y1), (u0, v1), color),
    ]


class Device(ABC):
    """A rendering back end that draws triangles, lines and paths."""

    @property
    def _states(self) -> _StateStack:
        stack = self.__dict__.get("_state_stack")
        if stack is None:
            stack = _StateStack()
            self.__dict__["_state_stack"] = stack
        return stack

    @property
    def drawing_state(self) -> DrawingState:
        """The clip and transform settings currently in effect."""
        return self._states.current

    @abstractmethod
    def create_texture(self, memory, width: int, height: int, format, updatable: bool) -> Texture:
        """Create a texture, initialised from memory if it is not None."""

    @abstractmethod
    def create_render_target(self, width: int, height: int) -> tuple[Texture, RenderTarget]:
        """Create an offscreen target and the texture that backs it."""

    @abstractmethod
    def clear(self, target: RenderTarget, color) -> None:
        """Fill the whole target with an (r, g, b, a) colour."""

    @abstractmethod
    def triangles_colored(self, target: RenderTarget, vertices, transform) -> None:
        """Draw a triangle list of ColoredVertex."""

    @abstractmethod
    def triangles_textured(
        self, target: RenderTarget, texture: Texture, filtering: bool, vertices, transform
    ) -> None:
        """Draw a triangle list of TexturedVertex sampling an RGBA texture."""

    @abstractmethod
    def triangles_textured_y8(
        self, target: RenderTarget, texture: Texture, filtering: bool, vertices, transform
    ) -> None:
        """Draw a triangle list of TexturedY8Vertex sampling a Y8 texture."""

    @abstractmethod
    def line(
        self, target: RenderTarget, color, thickness: float, start_point, end_point, transform
    ) -> None:
        """Draw a straight line."""

    def rect_colored(self, target: RenderTarget, color, rect, transform) -> None:
        """Draw a solid rectangle as two triangles."""
        x0, y0, x1, y1 = _corners(rect)
        color = tuple(color)
        self.triangles_colored(
            target,
            [
                ColoredVertex((x0, y0), color),
                ColoredVertex((x1, y0), color),
                ColoredVertex((x0, y1), color),
                ColoredVertex((x1, y0), color),
                ColoredVertex((x1, y1), color),
                ColoredVertex((x0, y1), color),
            ],
            transform,
        )

    def rect_textured(
        self, target: RenderTarget, texture: Texture, filtering: bool, color, rect, uv, transform
    ) -> None:
        """Draw a textured rectangle; uv is (u0, v0, u1, v1)."""
        self.triangles_textured(
            target,
            texture,
            filtering,
            _textured_quad(TexturedVertex, rect, uv, tuple(color)),
            transform,
        )

    def rect_textured_y8(
        self, target: RenderTarget, texture: Texture, filtering: bool, color, rect, uv, transform
    ) -> None:
        """Draw a rectangle textured from a single-channel texture."""
        self.triangles_textured_y8(
            target,
            texture,
            filtering,
            _textured_quad(TexturedY8Vertex, rect, uv, tuple(color)),
            transform,
        )

    @abstractmethod
    def stroke(
        self,
        target: RenderTarget,
        paint,
        texture,
        filtering: bool,
        paths,
        thickness: float,
        fringe_width: float,
        antialiasing: bool,
        scissor,
        composite_operation_state,
        transform,
    ) -> None:
        """Stroke expanded paths with a paint."""

    @abstractmethod
    def fill(
        self,
        target: RenderTarget,
        paint,
        texture,
        filtering: bool,
        paths,
        bounds,
        fringe_width: float,
        antialiasing: bool,
        scissor,
        composite_operation_state,
        transform,
    ) -> None:
        """Fill expanded paths with a paint."""

    def save_state(self) -> None:
        """Push a copy of the current clip and transform settings."""
        stack = self._states
        stack.saved.append(replace(stack.current))

    def restore_state(self) -> None:
        """Return to the most recently saved settings; no-op when none are saved."""
        stack = self._states
        if stack.saved:
            stack.current = stack.saved.pop()

    def set_clip_rect(self, rect) -> None:
        """Record rect as the clip rectangle for subsequent drawing."""
        self._states.current.clip_rect = rect

    def set_clip_path(self, path) -> None:
        """Record path as the clip path for subsequent drawing."""
        self._states.current.clip_path = tuple(path)

    def transform(self, transform) -> None:
        """Record a transform applied to subsequent drawing."""
        current = self._states.current
        current.transforms = current.transforms + (transform,)