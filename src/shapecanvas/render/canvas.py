"""Canvas: owner of the raster surface, the colour table and draw registry.

A canvas moves through three states::

    UNINITIALIZED --open()--> INITIALIZED --out()--> FINALIZED

The surface is acquired once by :meth:`Canvas.open` (called lazily by the
first ``color``/``draw``) and released once by :meth:`Canvas.out`. A
finalized canvas stays addressable but every further ``color``, ``draw``
or ``out`` raises :class:`~shapecanvas.errors.CanvasFinalized`.

Callers may construct a canvas explicitly and pass it around, or use the
process-wide instance returned by :meth:`Canvas.get_instance`.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import BinaryIO, ClassVar, Dict, Optional, Tuple

from shapecanvas.errors import CanvasFinalized
from shapecanvas.render.backend import RGB, ColorHandle, GraphicsBackend, Surface
from shapecanvas.render.shapes import Shape

logger = logging.getLogger(__name__)

CONTENT_TYPES = {"jpeg": "image/jpeg", "png": "image/png"}


class CanvasState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    FINALIZED = "finalized"


class Canvas:
    """Fixed-size raster canvas that rasterizes shapes as they are drawn."""

    _instance: ClassVar[Optional["Canvas"]] = None

    def __init__(
        self,
        backend: GraphicsBackend,
        width: int = 800,
        height: int = 600,
        background: RGB = (230, 230, 230),
        image_format: str = "jpeg",
    ) -> None:
        self.backend = backend
        self.width = int(width)
        self.height = int(height)
        self.background = tuple(background)
        self.image_format = image_format
        self.shapes: Dict[str, Shape] = {}
        self._surface: Surface = None
        self._state = CanvasState.UNINITIALIZED

    @classmethod
    def get_instance(cls) -> "Canvas":
        """Return the process-wide canvas, creating and opening it once."""
        if cls._instance is None:
            from shapecanvas.config import get_runtime

            rc = get_runtime()
            inst = cls(
                rc.backend,
                width=rc.settings.width,
                height=rc.settings.height,
                background=rc.settings.background,
                image_format=rc.settings.image_format,
            )
            inst.open()
            cls._instance = inst
        return cls._instance

    @property
    def state(self) -> CanvasState:
        return self._state

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def surface(self) -> Surface:
        """The live backend surface (opens the canvas if needed)."""
        return self._live_surface()

    @property
    def content_type(self) -> str:
        return CONTENT_TYPES.get(self.image_format, "application/octet-stream")

    def open(self) -> "Canvas":
        if self._state is CanvasState.FINALIZED:
            raise CanvasFinalized("canvas was already emitted; it cannot be reopened")
        if self._state is CanvasState.INITIALIZED:
            return self
        self._surface = self.backend.create_surface(self.width, self.height)
        r, g, b = self.background
        bg = self.backend.allocate_color(self._surface, r, g, b)
        self.backend.fill_rectangle(
            self._surface, 0, 0, self.width - 1, self.height - 1, bg
        )
        self._state = CanvasState.INITIALIZED
        logger.debug(
            "canvas opened %dx%d on %s backend",
            self.width,
            self.height,
            self.backend.name,
        )
        return self

    def _live_surface(self) -> Surface:
        if self._state is CanvasState.FINALIZED:
            raise CanvasFinalized("canvas surface was released by out()")
        if self._state is CanvasState.UNINITIALIZED:
            self.open()
        return self._surface

    def color(self, red: int, green: int, blue: int) -> ColorHandle:
        """Resolve an RGB triplet to a handle usable on this canvas."""
        return self.backend.allocate_color(self._live_surface(), red, green, blue)

    def draw(self, shape: Shape) -> bool:
        """Register *shape* and rasterize it immediately.

        A shape without a colour or position is rejected before the surface
        is opened or the shape registered.
        Later mutations of *shape* do not re-render it. The shape stays
        registered even when the backend reports a failed draw.
        """
        shape.check_drawable()
        surface = self._live_surface()
        self.shapes[shape.uid] = shape
        ok = bool(shape.draw(self.backend, surface))
        if not ok:
            logger.warning("backend failed to draw %s %s", shape.kind.value, shape.uid)
        return ok

    def out(
        self, stream: Optional[BinaryIO] = None, image_format: Optional[str] = None
    ) -> "Canvas":
        """Encode the surface to *stream* (stdout by default) and release it."""
        surface = self._live_surface()
        fmt = image_format or self.image_format
        if stream is None:
            stream = sys.stdout.buffer
        try:
            ok = self.backend.encode(surface, stream, fmt)
            if not ok:
                logger.warning("backend failed to encode canvas as %s", fmt)
            stream.flush()
        finally:
            self.backend.destroy_surface(surface)
            self._surface = None
            self._state = CanvasState.FINALIZED
        logger.debug("canvas emitted as %s with %d shape(s)", fmt, len(self.shapes))
        return self
