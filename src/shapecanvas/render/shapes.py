"""Shape variants and the factory that builds them.

The variant set is closed: :class:`Circle`, :class:`Rectangle` and
:class:`Triangle`. Every shape exposes the same fluent API
(``set_position``/``scale``/``set_color``/``rotate``) returning ``self``,
and ``draw`` rasterizes onto a backend surface.

Example:
    factory = ShapeFactory(ColorResolver(backend))
    rect = factory.create("Rectangle").set_position([350, 150, 600, 400])
    rect.set_color(canvas.color(0, 255, 0)).scale(2)
    canvas.draw(rect)
"""

from __future__ import annotations

import abc
import enum
import logging
import uuid
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Type

from shapecanvas.errors import (
    InsufficientCoordinates,
    PositionNotSet,
    UnresolvedColor,
)
from shapecanvas.render.backend import ColorHandle, GraphicsBackend, Surface
from shapecanvas.render.colors import ColorResolver

logger = logging.getLogger(__name__)

# Pixels each edge (or the radius) moves per unit of scale factor
SCALE_STEP_PX = 10


class ShapeKind(str, enum.Enum):
    CIRCLE = "Circle"
    RECTANGLE = "Rectangle"
    TRIANGLE = "Triangle"


class Shape(abc.ABC):
    """Common state and fluent operations shared by all variants."""

    kind: ClassVar[ShapeKind]

    def __init__(self, resolver: Optional[ColorResolver] = None) -> None:
        self.uid: str = uuid.uuid4().hex
        self.color: Optional[ColorHandle] = None
        self._resolver = resolver

    @abc.abstractmethod
    def set_position(self, coords: Sequence[float]) -> "Shape":
        ...

    @abc.abstractmethod
    def scale(self, factor: float) -> "Shape":
        ...

    @abc.abstractmethod
    def _draw(self, backend: GraphicsBackend, surface: Surface) -> bool:
        ...

    @property
    def has_position(self) -> bool:
        return True

    def check_drawable(self) -> None:
        """Raise if the shape lacks a resolved colour or its geometry."""
        if self.color is None:
            raise UnresolvedColor(
                f"{self.kind.value} {self.uid} has no colour; call set_color first"
            )
        if not self.has_position:
            raise PositionNotSet(
                f"{self.kind.value} {self.uid} has no position; "
                "call set_position first"
            )

    def set_color(self, color: Any) -> "Shape":
        """Store a colour handle, resolving ``[r, g, b]`` triplets first."""
        resolver = self._resolver
        if resolver is None:
            # Imported here to avoid a config -> shapes import cycle
            from shapecanvas.config import default_resolver

            resolver = default_resolver()
        self.color = resolver.resolve(color)
        return self

    def rotate(self, angle: float) -> "Shape":
        return self

    def draw(self, backend: GraphicsBackend, surface: Surface) -> bool:
        """Rasterize onto *surface*; returns the backend primitive's result."""
        self.check_drawable()
        return self._draw(backend, surface)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(uid={self.uid!r})"


def _require(shape: str, coords: Sequence[float], n: int, usage: str) -> List[float]:
    values = list(coords)
    if len(values) < n:
        raise InsufficientCoordinates(shape, n, len(values), usage)
    return values


class Rectangle(Shape):
    kind = ShapeKind.RECTANGLE

    def __init__(self, resolver: Optional[ColorResolver] = None) -> None:
        super().__init__(resolver)
        self.x1: Optional[float] = None
        self.y1: Optional[float] = None
        self.x2: Optional[float] = None
        self.y2: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return None not in (self.x1, self.y1, self.x2, self.y2)

    def set_position(self, coords: Sequence[float]) -> "Rectangle":
        # Corners are stored as given; no normalization of their order
        v = _require("Rectangle", coords, 4, "[x1, y1, x2, y2]")
        self.x1, self.y1, self.x2, self.y2 = v[0], v[1], v[2], v[3]
        return self

    def scale(self, factor: float) -> "Rectangle":
        if not self.has_position:
            raise PositionNotSet("Rectangle must be positioned before scaling")
        d = factor * SCALE_STEP_PX
        self.x1 = self.x1 - d  # type: ignore[operator]
        self.y1 = self.y1 - d  # type: ignore[operator]
        self.x2 = self.x2 + d  # type: ignore[operator]
        self.y2 = self.y2 + d  # type: ignore[operator]
        return self

    def _draw(self, backend: GraphicsBackend, surface: Surface) -> bool:
        return backend.fill_rectangle(
            surface,
            self.x1,  # type: ignore[arg-type]
            self.y1,  # type: ignore[arg-type]
            self.x2,  # type: ignore[arg-type]
            self.y2,  # type: ignore[arg-type]
            self.color,  # type: ignore[arg-type]
        )


class Circle(Shape):
    kind = ShapeKind.CIRCLE

    def __init__(self, resolver: Optional[ColorResolver] = None) -> None:
        super().__init__(resolver)
        self.cx: Optional[float] = None
        self.cy: Optional[float] = None
        self.radius: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return None not in (self.cx, self.cy, self.radius)

    def set_position(self, coords: Sequence[float]) -> "Circle":
        v = _require("Circle", coords, 3, "[cx, cy, radius]")
        self.cx, self.cy, self.radius = v[0], v[1], v[2]
        return self

    def scale(self, factor: float) -> "Circle":
        if not self.has_position:
            raise PositionNotSet("Circle must be positioned before scaling")
        self.radius = self.radius + factor * SCALE_STEP_PX  # type: ignore[operator]
        return self

    def _draw(self, backend: GraphicsBackend, surface: Surface) -> bool:
        # The radius is passed as both axis lengths of the outline ellipse
        return backend.draw_ellipse(
            surface,
            self.cx,  # type: ignore[arg-type]
            self.cy,  # type: ignore[arg-type]
            self.radius,  # type: ignore[arg-type]
            self.radius,  # type: ignore[arg-type]
            self.color,  # type: ignore[arg-type]
        )


class Triangle(Shape):
    """Placeholder variant: geometry is held but never set, scaled or drawn."""

    kind = ShapeKind.TRIANGLE

    def __init__(self, resolver: Optional[ColorResolver] = None) -> None:
        super().__init__(resolver)
        self.x1: Optional[float] = None
        self.y1: Optional[float] = None
        self.x2: Optional[float] = None
        self.y2: Optional[float] = None
        self.x3: Optional[float] = None
        self.y3: Optional[float] = None

    def set_position(self, coords: Any) -> "Triangle":
        return self

    def scale(self, factor: Any) -> "Triangle":
        return self

    def _draw(self, backend: GraphicsBackend, surface: Surface) -> bool:
        return True


_SHAPES: Dict[ShapeKind, Type[Shape]] = {
    ShapeKind.CIRCLE: Circle,
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.TRIANGLE: Triangle,
}


class ShapeFactory:
    """Build default shapes by type name.

    Unknown names silently produce a :class:`Circle`.
    """

    def __init__(self, resolver: Optional[ColorResolver] = None) -> None:
        self._resolver = resolver

    @staticmethod
    def kinds() -> List[str]:
        return [k.value for k in _SHAPES]

    def create(self, type_name: str) -> Shape:
        try:
            kind = ShapeKind(type_name)
        except ValueError:
            logger.debug("unknown shape type %r; falling back to Circle", type_name)
            kind = ShapeKind.CIRCLE
        return _SHAPES[kind](self._resolver)
