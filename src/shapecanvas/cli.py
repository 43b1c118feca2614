"""Command-line interface for shapecanvas.

Renders the demonstration scene and writes the encoded image to stdout
or to ``--output``. Invoked via the console script or
``python -m shapecanvas``.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from shapecanvas import __version__
from shapecanvas.app import demo
from shapecanvas.config import make_render_config, set_runtime
from shapecanvas.errors import ShapeCanvasError
from shapecanvas.platform.display import BACKEND_NAMES
from shapecanvas.settings.values import IMAGE_FORMATS

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    Options left unset fall back to the stored settings.
    """
    p = argparse.ArgumentParser(
        prog="shapecanvas", description="Render the shape demo to an image"
    )
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the image to this file instead of stdout",
    )
    p.add_argument(
        "--format",
        choices=IMAGE_FORMATS,
        default=None,
        help="Image encoding (default from settings: jpeg)",
    )
    p.add_argument(
        "--backend",
        choices=BACKEND_NAMES,
        default=None,
        help="Graphics backend (default from settings: pillow)",
    )
    p.add_argument(
        "--quality",
        type=int,
        default=None,
        help="JPEG quality 1-95 (pillow backend only)",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: WARNING)",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint; returns the process exit status."""
    args = parse_args(argv)

    if args.version:
        print(f"shapecanvas {__version__}")
        return 0

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        rc = make_render_config(args=args)
        set_runtime(rc)
        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with args.output.open("wb") as f:
                demo.run(stream=f, rc=rc)
            logger.info("wrote %s", args.output)
        else:
            demo.run(rc=rc)
    except (ShapeCanvasError, ValidationError, OSError):
        logger.exception("rendering failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
