"""Demonstration scene: a green rectangle and a red circle outline.

Provides ``render_demo`` (draws the scene onto a canvas) and ``run``
(builds the canvas from configuration, draws and emits it).
"""

from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional

from shapecanvas.config import RuntimeConfig, get_runtime
from shapecanvas.render.canvas import Canvas
from shapecanvas.render.shapes import Shape, ShapeFactory

logger = logging.getLogger(__name__)


def render_demo(canvas: Canvas, factory: ShapeFactory) -> List[Shape]:
    """Draw the demo shapes onto *canvas* and return them in draw order."""
    rectangle = factory.create("Rectangle").set_position([350, 150, 600, 400])
    rectangle.set_color(canvas.color(0, 255, 0))
    rectangle.scale(2)
    canvas.draw(rectangle)

    circle = (
        factory.create("Circle")
        .set_position([200, 200, 100])
        .set_color(canvas.color(255, 20, 20))
        .scale(3)
    )
    canvas.draw(circle)
    return [rectangle, circle]


def make_canvas(rc: RuntimeConfig) -> Canvas:
    s = rc.settings
    return Canvas(
        rc.backend,
        width=s.width,
        height=s.height,
        background=s.background,
        image_format=s.image_format,
    )


def run(
    *,
    stream: Optional[BinaryIO] = None,
    rc: Optional[RuntimeConfig] = None,
) -> Canvas:
    """Render the demo scene and emit it to *stream* (stdout by default)."""
    rc = rc or get_runtime()
    canvas = make_canvas(rc)
    shapes = render_demo(canvas, ShapeFactory(rc.resolver))
    logger.info(
        "rendered %d shape(s) on %dx%d canvas", len(shapes), canvas.width, canvas.height
    )
    return canvas.out(stream)
