"""Pillow-based GraphicsBackend (default).

Surfaces are RGB ``PIL.Image`` objects wrapped with their ``ImageDraw``
context. Encoding goes through ``Image.save`` so any stream accepting
bytes (stdout, a file, ``io.BytesIO``) works.

Example:
    backend = PillowBackend()
    surface = backend.create_surface(800, 600)
    green = backend.allocate_color(surface, 0, 255, 0)
    backend.fill_rectangle(surface, 10, 10, 100, 50, green)
    with open("/tmp/out.png", "wb") as f:
        backend.encode(surface, f, "png")
    backend.destroy_surface(surface)
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from PIL import Image, ImageDraw

from shapecanvas.errors import SurfaceDestroyed
from shapecanvas.render.backend import ColorHandle, pack_rgb, unpack_rgb

logger = logging.getLogger(__name__)

_PIL_FORMATS = {"jpeg": "JPEG", "jpg": "JPEG", "png": "PNG"}


class PillowSurface:
    """An RGB image plus its draw context; unusable once destroyed."""

    def __init__(self, width: int, height: int) -> None:
        self._img: Image.Image | None = Image.new("RGB", (width, height), (0, 0, 0))
        self._draw: ImageDraw.ImageDraw | None = ImageDraw.Draw(self._img)

    @property
    def alive(self) -> bool:
        return self._img is not None

    @property
    def image(self) -> Image.Image:
        if self._img is None:
            raise SurfaceDestroyed("surface was destroyed")
        return self._img

    @property
    def draw(self) -> ImageDraw.ImageDraw:
        if self._draw is None:
            raise SurfaceDestroyed("surface was destroyed")
        return self._draw

    def close(self) -> None:
        if self._img is not None:
            self._img.close()
        self._img = None
        self._draw = None


class PillowBackend:
    """GraphicsBackend implementation using Pillow."""

    name = "pillow"

    def __init__(self, jpeg_quality: int = 75) -> None:
        self.jpeg_quality = int(jpeg_quality)

    def create_surface(self, width: int, height: int) -> PillowSurface:
        return PillowSurface(int(width), int(height))

    def allocate_color(
        self, surface: PillowSurface, r: int, g: int, b: int
    ) -> ColorHandle:
        if not surface.alive:
            raise SurfaceDestroyed("cannot allocate a colour on a destroyed surface")
        return pack_rgb(r, g, b)

    def fill_rectangle(
        self,
        surface: PillowSurface,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: ColorHandle,
    ) -> bool:
        # Corners may arrive in any order; Pillow requires x0 <= x1
        xa, xb = sorted((int(round(x1)), int(round(x2))))
        ya, yb = sorted((int(round(y1)), int(round(y2))))
        try:
            surface.draw.rectangle((xa, ya, xb, yb), fill=unpack_rgb(color))
        except (TypeError, ValueError) as e:
            logger.warning("fill_rectangle failed: %s", e)
            return False
        return True

    def draw_ellipse(
        self,
        surface: PillowSurface,
        cx: float,
        cy: float,
        width: float,
        height: float,
        color: ColorHandle,
    ) -> bool:
        # width/height are full axis lengths centred on (cx, cy)
        hw = abs(float(width)) / 2.0
        hh = abs(float(height)) / 2.0
        bbox = (
            int(round(cx - hw)),
            int(round(cy - hh)),
            int(round(cx + hw)),
            int(round(cy + hh)),
        )
        try:
            surface.draw.ellipse(bbox, outline=unpack_rgb(color), width=1)
        except (TypeError, ValueError) as e:
            logger.warning("draw_ellipse failed: %s", e)
            return False
        return True

    def encode(
        self, surface: PillowSurface, stream: BinaryIO, image_format: str
    ) -> bool:
        fmt = _PIL_FORMATS.get(image_format.lower())
        if fmt is None:
            logger.warning("unsupported image format %r", image_format)
            return False
        params = {"quality": self.jpeg_quality} if fmt == "JPEG" else {}
        try:
            surface.image.save(stream, format=fmt, **params)
        except OSError as e:
            logger.warning("encoding %s failed: %s", fmt, e)
            return False
        return True

    def destroy_surface(self, surface: PillowSurface) -> None:
        surface.close()
