"""
iconstyle command line.

Usage:
  iconstyle mass-export -s icons/ -o out/ --style neumorphism
  iconstyle mass-export -s icons/ -o out/ --style frosted-glass --gradient "linear-gradient(45deg, #ff0000, #0000ff)"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from iconstyle import __version__
from iconstyle.config import settings
from iconstyle.engine.batch import export_directory
from iconstyle.errors import InvalidInput
from iconstyle.models.style import StyleConfig, StylePreset
from iconstyle.svg.gradient_parser import parse_gradient

logger = logging.getLogger("iconstyle.cli")


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.iconstyle_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconstyle", description="Restyle SVG icons onto decorative bases")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("mass-export", help="Export a directory of source icons to a new style")
    export.add_argument("-s", "--source", required=True, type=Path, metavar="PATH",
                        help="Folder containing the source SVG icons")
    export.add_argument("-o", "--output", required=True, type=Path, metavar="PATH",
                        help="Directory where the generated icons will be saved")
    export.add_argument("--style", required=True, choices=[p.value for p in StylePreset],
                        help="Style preset to apply")
    export.add_argument("--gradient", help='Optional base gradient, e.g. "linear-gradient(45deg, #ff0000, #0000ff)"')
    export.add_argument("--color", default="#333333", help="Foreground icon color (default: %(default)s)")
    export.add_argument("--width", type=int, default=128, help="Canvas width (default: %(default)s)")
    export.add_argument("--height", type=int, default=128, help="Canvas height (default: %(default)s)")
    export.add_argument("--corner-radius", type=float, default=25.0,
                        help="Corner radius of the base shape (default: %(default)s)")
    export.add_argument("--padding", type=int, default=16,
                        help="Padding between icon and base edge (default: %(default)s)")
    export.add_argument("--workers", type=int, default=None,
                        help="Worker threads (default: ICONSTYLE_MAX_WORKERS or executor default)")
    return parser


def mass_export(args: argparse.Namespace) -> int:
    try:
        gradient = parse_gradient(args.gradient) if args.gradient is not None else None
        styles = StyleConfig(
            width=args.width,
            height=args.height,
            corner_radius=args.corner_radius,
            padding=args.padding,
            icon_color=args.color,
            gradient=gradient,
        )
    except (InvalidInput, ValidationError) as e:
        logger.error("%s", e)
        return 1

    workers = args.workers if args.workers is not None else settings.iconstyle_max_workers

    try:
        report = export_directory(args.source, args.output, StylePreset(args.style), styles, max_workers=workers)
    except NotADirectoryError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Failed to create output directory: %s", e)
        return 1

    if report.failed:
        logger.warning("%d of %d files failed", report.failed, len(report.results))
    logger.info("Mass export complete!")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    _configure_logging()
    args = build_parser().parse_args(argv)

    if args.command == "mass-export":
        return mass_export(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
