"""Deterministic square and flat-top hexagon grids."""

import math
import random
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from .colors import RGB, color_like
from .geometry import Point

Box = Tuple[int, int, int, int]
HexTile = Tuple[Point, Point, Point, Point, Point, Point]


def _new_canvas(width: int, height: int) -> Image.Image:
    return Image.new("RGBA", (width, height), (0, 0, 0, 0))


# ---------------------------- Squares ---------------------------------------

def square_tiles(width: int, height: int, size: int) -> List[Box]:
    """Pixel boxes (x0, y0, x1, y1), corners inclusive, column by column."""
    columns = math.ceil(width / size)
    rows = math.ceil(height / size)
    return [
        (i * size, j * size, (i + 1) * size - 1, (j + 1) * size - 1)
        for i in range(columns)
        for j in range(rows)
    ]


def render_squares(width: int, height: int, size: int, base: RGB, rng: Optional[random.Random] = None) -> Image.Image:
    rng = rng or random.Random()
    canvas = _new_canvas(width, height)
    draw = ImageDraw.Draw(canvas)
    for box in square_tiles(width, height, size):
        draw.rectangle(box, fill=color_like(base, rng))
    return canvas


# ---------------------------- Hexagons --------------------------------------

def hexagon_tiles(width: int, height: int, size: int) -> List[HexTile]:
    """Flat-top hexagons of side `size` covering a width x height canvas.

    Rows are half a hexagon high and alternate between two x offsets, so the
    hexagon at row j shares its lower-right edge with the one at row j + 1.

    Columns start left of the canvas and stop before `width`, so the even-row
    column past the right edge is never emitted; a strip at most `size / 2`
    wide along the right edge can stay uncovered.
    """
    half_height = math.sin(math.pi / 3) * size
    row_count = math.ceil(height / half_height) + 1
    tiles: List[HexTile] = []
    for i in range(-size, width, 3 * size):
        for j in range(-size, row_count):
            ax = float(i) if j % 2 == 0 else i + size * 1.5
            top, middle, bottom = j * half_height, (j + 1) * half_height, (j + 2) * half_height
            tiles.append((
                Point(ax, top),
                Point(ax + size, top),
                Point(ax + size * 1.5, middle),
                Point(ax + size, bottom),
                Point(ax, bottom),
                Point(ax - size * 0.5, middle),
            ))
    return tiles


def render_hexagons(width: int, height: int, size: int, base: RGB, rng: Optional[random.Random] = None) -> Image.Image:
    rng = rng or random.Random()
    canvas = _new_canvas(width, height)
    draw = ImageDraw.Draw(canvas)
    for tile in hexagon_tiles(width, height, size):
        draw.polygon([(int(p.x), int(p.y)) for p in tile], fill=color_like(base, rng))
    return canvas
