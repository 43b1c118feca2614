"""Pygame-based GraphicsBackend with headless (offscreen) support.

Suitable for deterministic, headless use by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from shapecanvas.platform.display.pygame_backend import PygameBackend

    backend = PygameBackend()
    surface = backend.create_surface(800, 600)
    red = backend.allocate_color(surface, 255, 20, 20)
    backend.draw_ellipse(surface, 200, 200, 130, 130, red)
"""

from __future__ import annotations

import logging
import os
from typing import Any, BinaryIO

import pygame

from shapecanvas.errors import SurfaceDestroyed
from shapecanvas.render.backend import ColorHandle, pack_rgb, unpack_rgb

logger = logging.getLogger(__name__)

_NAMEHINTS = {"jpeg": "frame.jpg", "jpg": "frame.jpg", "png": "frame.png"}


class PygameSurface:
    """An offscreen pygame surface; unusable once destroyed."""

    def __init__(self, width: int, height: int) -> None:
        self._surface: Any = pygame.Surface((width, height), depth=24)

    @property
    def alive(self) -> bool:
        return self._surface is not None

    @property
    def surface(self) -> Any:
        if self._surface is None:
            raise SurfaceDestroyed("surface was destroyed")
        return self._surface

    def close(self) -> None:
        self._surface = None


class PygameBackend:
    """GraphicsBackend implementation drawing on offscreen pygame surfaces.

    Surfaces are created 24-bit without a display window; colour handles
    are packed true-colour values so they remain valid across surfaces.
    """

    name = "pygame"

    def __init__(self) -> None:
        # Ensure headless if requested
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        if not pygame.get_init():
            pygame.init()

    def create_surface(self, width: int, height: int) -> PygameSurface:
        return PygameSurface(int(width), int(height))

    def allocate_color(
        self, surface: PygameSurface, r: int, g: int, b: int
    ) -> ColorHandle:
        if not surface.alive:
            raise SurfaceDestroyed("cannot allocate a colour on a destroyed surface")
        return pack_rgb(r, g, b)

    def fill_rectangle(
        self,
        surface: PygameSurface,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: ColorHandle,
    ) -> bool:
        xa, xb = sorted((int(round(x1)), int(round(x2))))
        ya, yb = sorted((int(round(y1)), int(round(y2))))
        # Both corners are inclusive
        rect = pygame.Rect(xa, ya, xb - xa + 1, yb - ya + 1)
        try:
            surface.surface.fill(unpack_rgb(color), rect)
        except (TypeError, ValueError, pygame.error) as e:
            logger.warning("fill_rectangle failed: %s", e)
            return False
        return True

    def draw_ellipse(
        self,
        surface: PygameSurface,
        cx: float,
        cy: float,
        width: float,
        height: float,
        color: ColorHandle,
    ) -> bool:
        w = int(round(abs(float(width))))
        h = int(round(abs(float(height))))
        rect = pygame.Rect(0, 0, w, h)
        rect.center = (int(round(cx)), int(round(cy)))
        try:
            pygame.draw.ellipse(surface.surface, unpack_rgb(color), rect, 1)
        except (TypeError, ValueError, pygame.error) as e:
            logger.warning("draw_ellipse failed: %s", e)
            return False
        return True

    def encode(
        self, surface: PygameSurface, stream: BinaryIO, image_format: str
    ) -> bool:
        namehint = _NAMEHINTS.get(image_format.lower())
        if namehint is None:
            logger.warning("unsupported image format %r", image_format)
            return False
        try:
            pygame.image.save(surface.surface, stream, namehint)
        except pygame.error as e:
            logger.warning("encoding %s failed: %s", image_format, e)
            return False
        return True

    def destroy_surface(self, surface: PygameSurface) -> None:
        surface.close()
