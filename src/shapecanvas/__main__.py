"""Console entrypoint for the shapecanvas renderer.

This module delegates to :mod:`shapecanvas.cli` so that running
``python -m shapecanvas`` or the installed ``shapecanvas`` console script
executes the same code.
"""

from __future__ import annotations

import sys

from shapecanvas.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`shapecanvas.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
