"""
tiling_patterns
===============

Renders tiling patterns to images for use as textures and backgrounds. Every
tile (or cell) is painted with its own lightness variation of one base color.

Patterns
--------
- square          a plain grid of `size` x `size` tiles
- hexagon         flat-top hexagons with side `size`
- voronoi-random  random cells roughly `size` pixels across; cell seeds are
                  blue-noise samples (no two closer than size / 2) and pixels
                  are resolved on a thread pool, one column per task

Quick start
-----------
>>> from tiling_patterns import generate
>>> generate(
...     output="cells.png", pattern="voronoi-random",
...     width=1920, height=1080, size=80, base_color="#1b4332",
... )

Output is random on every run. The rendering functions accept a
`random.Random` instance for callers that need repeatable images.

Command line
------------
$ tiling-patterns voronoi-random --output cells.png --width 1920 --height 1080 --size 80
"""

from .colors import DEFAULT_BASE_COLOR, color_like, hex_to_rgb
from .geometry import Bounds, DistanceRange, Point, SamplingError
from .lattice import hexagon_tiles, render_hexagons, render_squares, square_tiles
from .patterns import PATTERNS, GenerateArgs, generate, render
from .sampler import generate_anchor_points
from .voronoi import Anchor, assign_colors, rasterize, render_voronoi, resolve_column

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_COLOR", "color_like", "hex_to_rgb",
    "Bounds", "DistanceRange", "Point", "SamplingError",
    "hexagon_tiles", "render_hexagons", "render_squares", "square_tiles",
    "PATTERNS", "GenerateArgs", "generate", "render",
    "generate_anchor_points",
    "Anchor", "assign_colors", "rasterize", "render_voronoi", "resolve_column",
]
