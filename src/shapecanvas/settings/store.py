"""Settings loading helpers (read-only)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import RenderSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load :class:`RenderSettings` from an optional JSON file."""

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("SHAPECANVAS_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.shapecanvas"))
        return base / "settings.json"

    @classmethod
    def load(cls) -> RenderSettings:
        """Load settings from disk, returning defaults on error."""
        path = cls.settings_path()
        if not path.exists():
            return RenderSettings()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return RenderSettings.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("ignoring unreadable settings file %s: %s", path, e)
            return RenderSettings()
