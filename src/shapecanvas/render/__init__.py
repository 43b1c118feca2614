"""Rendering core: backend protocol, colours, shapes and the canvas."""

from .backend import ColorHandle, GraphicsBackend, scratch_surface
from .canvas import Canvas, CanvasState
from .colors import ColorResolver
from .shapes import Circle, Rectangle, Shape, ShapeFactory, ShapeKind, Triangle

__all__ = [
    "Canvas",
    "CanvasState",
    "Circle",
    "ColorHandle",
    "ColorResolver",
    "GraphicsBackend",
    "Rectangle",
    "Shape",
    "ShapeFactory",
    "ShapeKind",
    "Triangle",
    "scratch_surface",
]
