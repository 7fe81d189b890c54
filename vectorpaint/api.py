"""Abstract interfaces that drawing back ends implement."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DrawingError(Exception):
    """Raised when a back end cannot complete a drawing operation."""


class Context(ABC):
    """A drawing context: creates builders and paints and draws display lists."""

    @abstractmethod
    def create_display_list_builder(self):
        """Return a new display list builder. Raise DrawingError on failure."""

    @abstractmethod
    def create_paint(self):
        """Return a new paint. Raise DrawingError on failure."""

    @abstractmethod
    def draw(self, surface, display_list) -> None:
        """Draw a display list onto a surface. Raise DrawingError on failure."""


class DisplayListBuilder(ABC):
    """Collects drawing commands into a display list."""

    @abstractmethod
    def draw_line(self, start, end, paint) -> None:
        """Record a line from start to end drawn with paint."""

    @abstractmethod
    def build(self):
        """Return the finished display list. Raise DrawingError on failure."""


class Surface(ABC):
    """Something a display list can be drawn onto."""

    @abstractmethod
    def draw(self, display_list) -> None:
        """Draw the display list. Raise DrawingError on failure."""