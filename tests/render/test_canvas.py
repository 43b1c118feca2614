from __future__ import annotations

import io
import logging

import pytest

from shapecanvas.errors import CanvasFinalized, PositionNotSet, UnresolvedColor
from shapecanvas.render.backend import pack_rgb
from shapecanvas.render.canvas import Canvas, CanvasState
from shapecanvas.render.shapes import ShapeFactory


def test_new_canvas_is_uninitialized(canvas: Canvas, backend) -> None:
    assert canvas.state is CanvasState.UNINITIALIZED
    assert canvas.size == (800, 600)
    assert backend.calls == []


def test_open_paints_background_once(canvas: Canvas, backend) -> None:
    canvas.open()
    canvas.open()
    assert canvas.state is CanvasState.INITIALIZED
    assert backend.calls == [
        ("create_surface", 800, 600),
        ("allocate_color", (800, 600), (230, 230, 230)),
        ("fill_rectangle", 0, 0, 799, 599, pack_rgb(230, 230, 230)),
    ]


def test_color_opens_lazily(canvas: Canvas, backend) -> None:
    handle = canvas.color(0, 255, 0)
    assert canvas.state is CanvasState.INITIALIZED
    assert handle == pack_rgb(0, 255, 0)
    assert backend.calls[-1] == ("allocate_color", (800, 600), (0, 255, 0))
    assert backend.names().count("create_surface") == 1


def test_draw_registers_and_rasterizes(canvas: Canvas, backend, resolver) -> None:
    factory = ShapeFactory(resolver)
    rect = factory.create("Rectangle").set_position([1, 2, 3, 4])
    rect.set_color(canvas.color(1, 2, 3))
    assert canvas.draw(rect) is True
    assert canvas.shapes == {rect.uid: rect}
    assert backend.calls[-1] == ("fill_rectangle", 1, 2, 3, 4, pack_rgb(1, 2, 3))


def test_draw_is_eager(canvas: Canvas, backend, resolver) -> None:
    rect = ShapeFactory(resolver).create("Rectangle").set_position([1, 2, 3, 4])
    canvas.draw(rect.set_color(5))
    n = len(backend.calls)
    rect.scale(10)
    assert len(backend.calls) == n


def test_draw_triplet_color_reaches_backend_as_handle(
    canvas: Canvas, backend, resolver
) -> None:
    circle = ShapeFactory(resolver).create("Circle").set_position([10, 10, 4])
    circle.set_color([0, 255, 0])
    canvas.draw(circle)
    drawn = backend.calls[-1]
    assert drawn[0] == "draw_ellipse"
    assert drawn[-1] == pack_rgb(0, 255, 0)
    assert drawn[-1] != [0, 255, 0]


def test_draw_unresolved_color_rejected(canvas: Canvas, resolver) -> None:
    circle = ShapeFactory(resolver).create("Circle").set_position([1, 1, 1])
    with pytest.raises(UnresolvedColor):
        canvas.draw(circle)
    assert canvas.shapes == {}


def test_draw_unresolved_color_leaves_canvas_unopened(
    canvas: Canvas, backend, resolver
) -> None:
    rect = ShapeFactory(resolver).create("Rectangle").set_position([1, 2, 3, 4])
    with pytest.raises(UnresolvedColor):
        canvas.draw(rect)
    assert canvas.state is CanvasState.UNINITIALIZED
    assert backend.calls == []


def test_draw_unpositioned_shape_rejected(canvas: Canvas, resolver) -> None:
    circle = ShapeFactory(resolver).create("Circle").set_color(3)
    with pytest.raises(PositionNotSet):
        canvas.draw(circle)
    assert canvas.shapes == {}
    assert canvas.state is CanvasState.UNINITIALIZED


def test_failed_draw_is_logged_and_kept(
    make_recording, resolver, caplog: pytest.LogCaptureFixture
) -> None:
    backend = make_recording(fail_draws=False)
    canvas = Canvas(backend).open()
    backend.fail_draws = True
    rect = ShapeFactory(resolver).create("Rectangle").set_position([1, 2, 3, 4])
    rect.set_color(1)
    with caplog.at_level(logging.WARNING, logger="shapecanvas.render.canvas"):
        assert canvas.draw(rect) is False
    assert rect.uid in canvas.shapes
    assert "failed to draw" in caplog.text


def test_out_encodes_then_destroys(canvas: Canvas, backend, stream) -> None:
    canvas.color(1, 1, 1)
    assert canvas.out(stream) is canvas
    assert backend.names()[-2:] == ["encode", "destroy_surface"]
    assert backend.calls[-2] == ("encode", "jpeg")
    assert stream.getvalue() == b"IMG:jpeg"
    assert canvas.state is CanvasState.FINALIZED
    assert backend.surfaces[0].alive is False


def test_out_format_override(backend, stream) -> None:
    Canvas(backend, image_format="jpeg").out(stream, image_format="png")
    assert stream.getvalue() == b"IMG:png"


def test_content_type(backend) -> None:
    assert Canvas(backend).content_type == "image/jpeg"
    assert Canvas(backend, image_format="png").content_type == "image/png"


def test_use_after_out_is_fatal(canvas: Canvas, resolver, stream) -> None:
    canvas.out(stream)
    with pytest.raises(CanvasFinalized):
        canvas.color(1, 2, 3)
    rect = ShapeFactory(resolver).create("Rectangle").set_position([1, 2, 3, 4])
    with pytest.raises(CanvasFinalized):
        canvas.draw(rect.set_color(1))
    with pytest.raises(CanvasFinalized):
        canvas.out(io.BytesIO())
    with pytest.raises(CanvasFinalized):
        canvas.open()
    assert canvas.state is CanvasState.FINALIZED


def test_custom_size_and_background(backend) -> None:
    Canvas(backend, width=20, height=10, background=(1, 2, 3)).open()
    assert backend.calls[0] == ("create_surface", 20, 10)
    assert backend.calls[-1] == ("fill_rectangle", 0, 0, 19, 9, pack_rgb(1, 2, 3))


def test_get_instance_is_a_singleton() -> None:
    a = Canvas.get_instance()
    b = Canvas.get_instance()
    assert a is b
    assert a.state is CanvasState.INITIALIZED
    assert a.size == (800, 600)


def test_get_instance_survives_out() -> None:
    a = Canvas.get_instance()
    a.out(io.BytesIO())
    assert Canvas.get_instance() is a
    assert a.state is CanvasState.FINALIZED
