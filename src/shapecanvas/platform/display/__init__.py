"""Concrete graphics backends and a name-based selector."""

from __future__ import annotations

from typing import Any

from shapecanvas.errors import UnknownBackend
from shapecanvas.render.backend import GraphicsBackend

BACKEND_NAMES = ("pillow", "pygame")


def make_backend(name: str, **kwargs: Any) -> GraphicsBackend:
    """Construct the backend registered under *name*.

    pygame is imported only when requested so that the default Pillow
    path works without SDL.
    """
    key = str(name).strip().lower()
    if key == "pillow":
        from .pillow_backend import PillowBackend

        return PillowBackend(**kwargs)
    if key == "pygame":
        from .pygame_backend import PygameBackend

        return PygameBackend()
    raise UnknownBackend(
        f"unknown backend {name!r}; expected one of " + ", ".join(BACKEND_NAMES)
    )
