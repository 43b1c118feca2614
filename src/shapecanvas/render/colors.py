"""Colour resolution glue between callers and the graphics backend."""

from __future__ import annotations

from numbers import Real
from typing import Any, Sequence

from shapecanvas.render.backend import ColorHandle, GraphicsBackend, scratch_surface


def is_rgb_triplet(value: Any) -> bool:
    """Return True for a 3-element sequence of numbers (bools excluded)."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    if len(value) != 3:
        return False
    return all(isinstance(v, Real) and not isinstance(v, bool) for v in value)


class ColorResolver:
    """Map an RGB triplet or an existing handle to a backend colour handle.

    Triplets are resolved against a scratch 1x1 surface so that callers do
    not need access to the canvas; anything else is assumed to be a handle
    already obtained from :meth:`Canvas.color` and is returned unchanged.
    """

    def __init__(self, backend: GraphicsBackend) -> None:
        self.backend = backend

    def resolve(self, color: Any) -> ColorHandle:
        if is_rgb_triplet(color):
            r, g, b = color
            with scratch_surface(self.backend) as surface:
                return self.backend.allocate_color(surface, r, g, b)
        return color
