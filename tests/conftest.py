from __future__ import annotations

import io
from pathlib import Path
from typing import Any, BinaryIO, Callable, Iterator

import pytest

from shapecanvas import config
from shapecanvas.errors import SurfaceDestroyed
from shapecanvas.render.backend import ColorHandle, pack_rgb
from shapecanvas.render.canvas import Canvas
from shapecanvas.render.colors import ColorResolver


class _Surface:
    def __init__(self, width: int, height: int) -> None:
        self.size = (width, height)
        self.alive = True


class RecordingBackend:
    """In-memory backend that records every primitive call."""

    name = "recording"

    def __init__(self, *, fail_draws: bool = False) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.surfaces: list[_Surface] = []
        self.fail_draws = fail_draws

    def _live(self, surface: _Surface) -> None:
        if not surface.alive:
            raise SurfaceDestroyed("surface was destroyed")

    def create_surface(self, width: int, height: int) -> _Surface:
        s = _Surface(width, height)
        self.surfaces.append(s)
        self.calls.append(("create_surface", width, height))
        return s

    def allocate_color(self, surface: _Surface, r: int, g: int, b: int) -> ColorHandle:
        self._live(surface)
        self.calls.append(("allocate_color", surface.size, (r, g, b)))
        return pack_rgb(r, g, b)

    def fill_rectangle(
        self, surface: _Surface, x1: float, y1: float, x2: float, y2: float, color: Any
    ) -> bool:
        self._live(surface)
        self.calls.append(("fill_rectangle", x1, y1, x2, y2, color))
        return not self.fail_draws

    def draw_ellipse(
        self, surface: _Surface, cx: float, cy: float, w: float, h: float, color: Any
    ) -> bool:
        self._live(surface)
        self.calls.append(("draw_ellipse", cx, cy, w, h, color))
        return not self.fail_draws

    def encode(self, surface: _Surface, stream: BinaryIO, image_format: str) -> bool:
        self._live(surface)
        self.calls.append(("encode", image_format))
        stream.write(b"IMG:" + image_format.encode())
        return True

    def destroy_surface(self, surface: _Surface) -> None:
        surface.alive = False
        self.calls.append(("destroy_surface", surface.size))

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def resolver(backend: RecordingBackend) -> ColorResolver:
    return ColorResolver(backend)


@pytest.fixture
def canvas(backend: RecordingBackend) -> Canvas:
    return Canvas(backend)


@pytest.fixture
def stream() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture(autouse=True)
def isolated_runtime(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    # Keep the process-wide canvas and runtime config from leaking between tests
    monkeypatch.setenv("SHAPECANVAS_HOME", str(tmp_path / "home"))
    monkeypatch.setattr(Canvas, "_instance", None)
    monkeypatch.setattr(config, "_RUNTIME", None)
    yield


@pytest.fixture
def make_recording() -> Callable[..., RecordingBackend]:
    return RecordingBackend
