"""High-level API: pick a pattern, render it and save it."""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

from PIL import Image

from .colors import DEFAULT_BASE_COLOR, RGB, hex_to_rgb
from .lattice import render_hexagons, render_squares
from .voronoi import render_voronoi

logger = logging.getLogger(__name__)

Renderer = Callable[..., Image.Image]

PATTERNS: Dict[str, Renderer] = {
    "square": render_squares,
    "hexagon": render_hexagons,
    "voronoi-random": render_voronoi,
}

# Writers that reject RGBA input
NO_ALPHA_FORMATS = {"JPEG", "MPO", "EPS", "PCX", "PPM"}


@dataclass
class GenerateArgs:
    output: str
    pattern: str
    width: int
    height: int
    size: int
    base_color: str = DEFAULT_BASE_COLOR
    strict_nearest: bool = False    # voronoi-random only

    def validate(self) -> RGB:
        """Check the arguments and return the parsed base colour."""
        if self.pattern not in PATTERNS:
            raise ValueError(f"Unknown pattern: {self.pattern!r}. Choose from {list(PATTERNS)}")
        for name in ("width", "height", "size"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value}")
        return hex_to_rgb(self.base_color)


def render(args: GenerateArgs, rng: Optional[random.Random] = None) -> Image.Image:
    """Render the selected pattern in memory."""
    base = args.validate()
    renderer = PATTERNS[args.pattern]
    kwargs = {"rng": rng}
    if args.pattern == "voronoi-random":
        kwargs["strict"] = args.strict_nearest
    logger.info("Rendering %s pattern %dx%d (size=%d, base=%s)",
                args.pattern, args.width, args.height, args.size, args.base_color)
    return renderer(args.width, args.height, args.size, base, **kwargs)


def generate(
    output: str,
    pattern: str,
    width: int,
    height: int,
    size: int,
    base_color: str = DEFAULT_BASE_COLOR,
    strict_nearest: bool = False,
    rng: Optional[random.Random] = None,
) -> str:
    """High-level convenience. Returns the output path after saving.

    The file format follows the output extension (anything Pillow can write).
    Formats without an alpha channel, such as JPEG, get an RGB image.
    """
    args = GenerateArgs(
        output=output, pattern=pattern, width=width, height=height,
        size=size, base_color=base_color, strict_nearest=strict_nearest,
    )
    out = Path(output)
    fmt = Image.registered_extensions().get(out.suffix.lower())
    if fmt is None:
        raise ValueError(f"Unknown image file extension: {out.suffix!r}")
    img = render(args, rng=rng)
    if fmt in NO_ALPHA_FORMATS:
        img = img.convert("RGB")
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(out, format=fmt)
    logger.info("Saved %s", out)
    return str(out)
