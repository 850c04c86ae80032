"""Command line entry point.

$ tiling-patterns square --output /tmp/squares.png --width 800 --height 600 --size 40
$ tiling-patterns hexagon --output /tmp/hex.png --width 800 --height 600 --size 24 --base-color "#264653"
$ tiling-patterns voronoi-random --output /tmp/cells.webp --width 800 --height 600 --size 60
"""

import argparse
import logging
from typing import Optional, Sequence

from .colors import DEFAULT_BASE_COLOR, hex_to_rgb
from .geometry import SamplingError
from .patterns import PATTERNS, generate
from .setup_logging import setup_logging

logger = logging.getLogger(__name__)

DESCRIPTIONS = {
    "square": "Create a pattern of squares",
    "hexagon": "Create a pattern of hexagons",
    "voronoi-random": "Create a random voronoi pattern",
}


def positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def hex_color(s: str) -> str:
    try:
        hex_to_rgb(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return s


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tiling-patterns", description="CLI tool to generate images of tiling patterns")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--output", required=True, help="Output image path; format follows the extension")
    common.add_argument("--width", type=positive_int, required=True, help="Canvas width in pixels")
    common.add_argument("--height", type=positive_int, required=True, help="Canvas height in pixels")
    common.add_argument("--size", type=positive_int, required=True, help="Tile size (cell size for voronoi-random) in pixels")
    common.add_argument("--base-color", type=hex_color, default=DEFAULT_BASE_COLOR, help="Base color hex (default: %(default)s)")

    sub = ap.add_subparsers(dest="pattern", metavar="PATTERN", required=True)
    for name in PATTERNS:
        sp = sub.add_parser(name, parents=[common], help=DESCRIPTIONS[name], description=DESCRIPTIONS[name])
        if name == "voronoi-random":
            sp.add_argument("--strict-nearest", action="store_true",
                            help="Color each pixel by its nearest anchor, without the inner-radius override")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        out = generate(
            output=args.output, pattern=args.pattern,
            width=args.width, height=args.height, size=args.size,
            base_color=args.base_color,
            strict_nearest=getattr(args, "strict_nearest", False),
        )
    except (OSError, ValueError, SamplingError) as e:
        logger.error("Could not generate %s pattern: %s", args.pattern, e)
        return 1
    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
