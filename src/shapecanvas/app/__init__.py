"""Application package for shapecanvas.

Holds the demonstration scene that the CLI renders.
"""

from . import demo  # re-export the scene module

__all__ = ["demo"]
