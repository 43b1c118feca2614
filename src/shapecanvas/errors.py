"""Exception hierarchy shared by the renderer modules."""

from __future__ import annotations


class ShapeCanvasError(Exception):
    """Base class for every error raised by shapecanvas."""


class InsufficientCoordinates(ShapeCanvasError, ValueError):
    """``set_position`` received fewer values than the shape needs."""

    def __init__(self, shape: str, required: int, got: int, usage: str) -> None:
        self.shape = shape
        self.required = required
        self.got = got
        super().__init__(
            f"{shape} needs at least {required} coordinates, got {got}. "
            f"Use: {usage}"
        )


class InvalidColor(ShapeCanvasError, ValueError):
    """A colour channel is outside 0..255."""


class UnresolvedColor(ShapeCanvasError):
    """A shape was drawn before ``set_color`` resolved its colour."""


class CanvasFinalized(ShapeCanvasError, RuntimeError):
    """The canvas surface was already emitted and released by ``out()``."""


class SurfaceDestroyed(ShapeCanvasError, RuntimeError):
    """A backend primitive was called on a destroyed surface."""


class UnknownBackend(ShapeCanvasError, ValueError):
    """No graphics backend is registered under the requested name."""


class PositionNotSet(ShapeCanvasError):
    """A shape was scaled or drawn before ``set_position`` gave it geometry."""
