"""Device-independent 2D vector drawing: geometry, clipping, path tessellation, paints and back-end interfaces."""

__version__ = "0.6.0"

__all__ = [
    "api",
    "clipping",
    "color",
    "device",
    "expand",
    "paint",
    "path",
    "scissor",
    "units",
    "vertex",
]