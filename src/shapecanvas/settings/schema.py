"""Pydantic model for render settings."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from shapecanvas.platform.display import BACKEND_NAMES

from .values import CANVAS_DEFAULTS, DEFAULT_BACKEND, IMAGE_FORMATS, OUTPUT_DEFAULTS


class RenderSettings(BaseModel):
    """Settings controlling the canvas and its encoded output.

    Parameters
    ----------
    width, height: Canvas size in pixels.
    background: RGB triplet painted once when the surface is created.
    image_format: ``jpeg`` or ``png``.
    jpeg_quality: Encoder quality (1-95) used for JPEG output.
    backend: Name of the graphics backend (``pillow`` or ``pygame``).
    """

    width: int = Field(default=int(CANVAS_DEFAULTS["width"]), gt=0)
    height: int = Field(default=int(CANVAS_DEFAULTS["height"]), gt=0)
    background: Tuple[int, int, int] = Field(
        default=tuple(CANVAS_DEFAULTS["background"])  # type: ignore[arg-type]
    )
    image_format: str = Field(default=str(OUTPUT_DEFAULTS["format"]))
    jpeg_quality: int = Field(
        default=int(OUTPUT_DEFAULTS["jpeg_quality"]), ge=1, le=95
    )
    backend: str = Field(default=DEFAULT_BACKEND)

    @field_validator("background")
    @classmethod
    def _chk_background(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        if any(not 0 <= c <= 255 for c in v):
            raise ValueError("background channels must be within 0..255")
        return v

    @field_validator("image_format")
    @classmethod
    def _chk_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v == "jpg":
            v = "jpeg"
        if v not in IMAGE_FORMATS:
            raise ValueError(
                "invalid image format: must be one of " + ", ".join(IMAGE_FORMATS)
            )
        return v

    @field_validator("backend")
    @classmethod
    def _chk_backend(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in BACKEND_NAMES:
            raise ValueError(
                "invalid backend: must be one of " + ", ".join(BACKEND_NAMES)
            )
        return v
