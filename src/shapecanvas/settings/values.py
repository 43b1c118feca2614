"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. Each section is
merged over the built-in defaults below, so a partial YAML file only
overrides the keys it names. Malformed entries are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

_DEFAULT_CANVAS: Dict[str, Any] = {
    "width": 800,
    "height": 600,
    "background": [230, 230, 230],
}
_DEFAULT_OUTPUT: Dict[str, Any] = {"format": "jpeg", "jpeg_quality": 75}
_DEFAULT_BACKEND: Dict[str, Any] = {"default": "pillow"}


def _merge_ints(dst: Dict[str, Any], src: Any, keys: List[str]) -> None:
    if not isinstance(src, dict):
        return
    for k in keys:
        v = src.get(k)
        if isinstance(v, int) and not isinstance(v, bool):
            dst[k] = v


def _load(path: Path) -> Dict[str, Dict[str, Any]]:
    canvas = dict(_DEFAULT_CANVAS)
    output = dict(_DEFAULT_OUTPUT)
    backend = dict(_DEFAULT_BACKEND)
    raw: Any = {}
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raw = {}

    cv = raw.get("canvas")
    _merge_ints(canvas, cv, ["width", "height"])
    if isinstance(cv, dict):
        bg = cv.get("background")
        if (
            isinstance(bg, list)
            and len(bg) == 3
            and all(isinstance(c, int) for c in bg)
        ):
            canvas["background"] = list(bg)
    out = raw.get("output")
    _merge_ints(output, out, ["jpeg_quality"])
    if isinstance(out, dict) and isinstance(out.get("format"), str):
        output["format"] = out["format"].lower()
    be = raw.get("backend")
    if isinstance(be, dict) and isinstance(be.get("default"), str):
        backend["default"] = be["default"].lower()
    return {"canvas": canvas, "output": output, "backend": backend}


_values = _load(_YAML_PATH)

# --- Public accessors ----------------------------------------------------
CANVAS_DEFAULTS: Dict[str, Any] = dict(_values["canvas"])
OUTPUT_DEFAULTS: Dict[str, Any] = dict(_values["output"])
DEFAULT_BACKEND: str = str(_values["backend"]["default"])
IMAGE_FORMATS = ("jpeg", "png")

__all__ = [
    "CANVAS_DEFAULTS",
    "OUTPUT_DEFAULTS",
    "DEFAULT_BACKEND",
    "IMAGE_FORMATS",
]
