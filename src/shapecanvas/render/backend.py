"""Framework-agnostic graphics backend protocol.

Defines the narrow set of raster primitives the renderer needs so that
different frameworks (pillow, pygame, ...) can be plugged in. Colour
handles are packed true-colour integers (``0xRRGGBB``), which makes them
valid on any surface produced by the same backend.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, BinaryIO, Iterator, Protocol, Tuple

from shapecanvas.errors import InvalidColor

ColorHandle = int
RGB = Tuple[int, int, int]
Surface = Any


class GraphicsBackend(Protocol):
    name: str

    def create_surface(self, width: int, height: int) -> Surface:
        ...

    def allocate_color(self, surface: Surface, r: int, g: int, b: int) -> ColorHandle:
        ...

    def fill_rectangle(
        self,
        surface: Surface,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: ColorHandle,
    ) -> bool:
        ...

    def draw_ellipse(
        self,
        surface: Surface,
        cx: float,
        cy: float,
        width: float,
        height: float,
        color: ColorHandle,
    ) -> bool:
        ...

    def encode(self, surface: Surface, stream: BinaryIO, image_format: str) -> bool:
        ...

    def destroy_surface(self, surface: Surface) -> None:
        ...


def pack_rgb(r: int, g: int, b: int) -> ColorHandle:
    """Pack channels into a true-colour handle, validating the 0..255 range."""
    channels = []
    for ch in (r, g, b):
        try:
            v = int(ch)
        except (TypeError, ValueError, OverflowError):
            raise InvalidColor(
                f"colour channel must be an integer, got {ch!r}"
            ) from None
        if not 0 <= v <= 255:
            raise InvalidColor(f"colour channel out of range 0..255: {v}")
        channels.append(v)
    return (channels[0] << 16) | (channels[1] << 8) | channels[2]


def unpack_rgb(handle: ColorHandle) -> RGB:
    h = int(handle)
    return (h >> 16) & 0xFF, (h >> 8) & 0xFF, h & 0xFF


@contextmanager
def scratch_surface(backend: GraphicsBackend) -> Iterator[Surface]:
    """Yield a throwaway 1x1 surface that is destroyed on every exit path."""
    surface = backend.create_surface(1, 1)
    try:
        yield surface
    finally:
        backend.destroy_surface(surface)
