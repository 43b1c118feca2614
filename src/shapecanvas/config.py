"""Runtime configuration helpers.

Small aggregator that merges defaults from settings.values, the optional
settings file and CLI overrides into a RuntimeConfig, and owns the
backend instance the process-wide canvas and shapes share.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .platform.display import make_backend
from .render.backend import GraphicsBackend
from .render.colors import ColorResolver
from .settings.schema import RenderSettings
from .settings.store import SettingsStore

_OVERRIDES = {
    "format": "image_format",
    "backend": "backend",
    "quality": "jpeg_quality",
}


@dataclass(slots=True)
class RuntimeConfig:
    settings: RenderSettings
    backend: GraphicsBackend
    resolver: ColorResolver


def make_render_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from stored settings and optional CLI *args*.

    Rules:
    - Settings from SettingsStore.load() (defaults when no file exists)
      form the baseline.
    - Attributes on *args* (argparse.Namespace-like) that are not None
      override the matching fields for the current run. The merged values
      are validated again, so a bad override raises ValidationError.
    """
    settings = SettingsStore.load()
    if args is not None:
        updates = {}
        for attr, field in _OVERRIDES.items():
            v = getattr(args, attr, None)
            if v is not None:
                updates[field] = v
        if updates:
            settings = RenderSettings.model_validate(
                settings.model_dump() | updates
            )

    kwargs = {}
    if settings.backend == "pillow":
        kwargs["jpeg_quality"] = settings.jpeg_quality
    backend = make_backend(settings.backend, **kwargs)
    return RuntimeConfig(
        settings=settings, backend=backend, resolver=ColorResolver(backend)
    )


# Runtime singleton -----------------------------------------------------
_RUNTIME: RuntimeConfig | None = None


def get_runtime() -> RuntimeConfig:
    """Return the current runtime config, creating a default if needed."""
    global _RUNTIME
    if _RUNTIME is None:
        _RUNTIME = make_render_config()
    return _RUNTIME


def set_runtime(rc: RuntimeConfig) -> None:
    """Install *rc* as the process runtime config (used by the CLI)."""
    global _RUNTIME
    _RUNTIME = rc


def default_resolver() -> ColorResolver:
    """Colour resolver bound to the runtime backend."""
    return get_runtime().resolver
