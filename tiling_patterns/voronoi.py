"""Randomized cellular ("voronoi-random") pattern.

Anchors are sampled with `sampler.generate_anchor_points`, each gets its own
colour variant, and every pixel is painted with the colour of its governing
anchor. Pixels are resolved column by column: columns are grouped in bands of
`BAND_WIDTH`, the columns of a band run concurrently on a thread pool, and the
band's results are merged into the buffer before the next band starts.

Governing anchor
----------------
Only anchors with `x - d < anchor.x < x + d` are considered for column `x`.
They are scanned in generation order; an anchor closer than `d / 2` to the
pixel replaces the current pick unconditionally, any other anchor only when it
is strictly closer than the current pick. The inner-radius override makes the
result order dependent: when several anchors are inside `d / 2`, the last one
scanned wins. Pass `strict=True` for a plain nearest-anchor search instead.
"""

import concurrent.futures as cf
import logging
import random
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from .colors import RGB, RGBA, color_like
from .geometry import Bounds, Point
from .sampler import generate_anchor_points

logger = logging.getLogger(__name__)

BAND_WIDTH = 10
ROW_CHUNK = 512


@dataclass(frozen=True)
class Anchor:
    point: Point
    color: RGBA


class ColumnResult(NamedTuple):
    """Resolved pixels of one column: buffer rows and their RGBA colours."""
    x: int
    rows: np.ndarray
    colors: np.ndarray


class AnchorSet:
    """Read-only snapshot of anchors shared by all column workers."""

    def __init__(self, anchors: Sequence[Anchor]):
        self.anchors: Tuple[Anchor, ...] = tuple(anchors)
        xy = np.array([(a.point.x, a.point.y) for a in self.anchors], dtype=np.float64).reshape(-1, 2)
        colors = np.array([a.color for a in self.anchors], dtype=np.uint8).reshape(-1, 4)
        xy.flags.writeable = False
        colors.flags.writeable = False
        self.xy = xy
        self.colors = colors

    def __len__(self) -> int:
        return len(self.anchors)


# ---------------------------- Cells -----------------------------------------

def assign_colors(points: Sequence[Point], base: RGB, rng: Optional[random.Random] = None) -> Tuple[Anchor, ...]:
    """Pair every point with an independent colour variant of `base`."""
    rng = rng or random.Random()
    return tuple(Anchor(point=p, color=color_like(base, rng)) for p in points)


# ---------------------------- Rasterizer ------------------------------------

def resolve_column(
    x: int,
    height: int,
    anchors: AnchorSet,
    minimum_distance: int,
    strict: bool = False,
    row_chunk: int = ROW_CHUNK,
) -> ColumnResult:
    """Find the governing anchor of every pixel in column `x`.

    Rows are resolved `row_chunk` at a time so the distance matrix stays
    bounded on tall canvases.
    """
    if row_chunk <= 0:
        raise ValueError(f"row_chunk must be positive, got {row_chunk}")
    xs = anchors.xy[:, 0]
    window = np.flatnonzero((xs > x - minimum_distance) & (xs < x + minimum_distance))
    if window.size == 0:
        return ColumnResult(x, np.empty(0, dtype=np.intp), np.empty((0, 4), dtype=np.uint8))

    dx2 = (float(x) - anchors.xy[window, 0]) ** 2
    ay = anchors.xy[window, 1]
    inner_radius2 = (minimum_distance / 2.0) ** 2
    pick = np.empty(height, dtype=np.intp)

    for start in range(0, height, row_chunk):
        ys = np.arange(start, min(start + row_chunk, height), dtype=np.float64)
        # (rows, len(window)) squared distances, columns in generation order
        d2 = dx2[np.newaxis, :] + (ys[:, np.newaxis] - ay[np.newaxis, :]) ** 2

        # argmin keeps the first of equal minima, like a strictly-closer scan
        chunk = np.argmin(d2, axis=1)
        if not strict:
            inner = d2 < inner_radius2
            last_inner = inner.shape[1] - 1 - np.argmax(inner[:, ::-1], axis=1)
            chunk = np.where(inner.any(axis=1), last_inner, chunk)
        pick[start:start + len(ys)] = chunk

    return ColumnResult(x, np.arange(height, dtype=np.intp), anchors.colors[window[pick]])


def rasterize(
    bounds: Bounds,
    anchors: Sequence[Anchor],
    minimum_distance: int,
    strict: bool = False,
    band_width: int = BAND_WIDTH,
) -> np.ndarray:
    """Paint an (height, width, 4) RGBA buffer from `anchors`.

    Pixels without any anchor in their column window stay transparent. An
    exception raised by a column worker aborts the whole render.
    """
    if band_width <= 0:
        raise ValueError(f"band_width must be positive, got {band_width}")
    snapshot = anchors if isinstance(anchors, AnchorSet) else AnchorSet(anchors)
    buffer = np.zeros((bounds.height, bounds.width, 4), dtype=np.uint8)

    with cf.ThreadPoolExecutor(max_workers=band_width, thread_name_prefix="voronoi-column") as executor:
        for start in range(0, bounds.width, band_width):
            futures = [
                executor.submit(resolve_column, x, bounds.height, snapshot, minimum_distance, strict)
                for x in range(start, min(start + band_width, bounds.width))
            ]
            cf.wait(futures)
            for future in futures:
                column = future.result()
                buffer[column.rows, column.x] = column.colors

    return buffer


# ---------------------------- Pattern ---------------------------------------

def render_voronoi(
    width: int,
    height: int,
    size: int,
    base: RGB,
    rng: Optional[random.Random] = None,
    strict: bool = False,
) -> Image.Image:
    """Render the random cellular pattern; cells are roughly `size` pixels across."""
    minimum_distance = size // 2
    if minimum_distance <= 0:
        raise ValueError(f"voronoi-random needs size >= 2, got {size}")
    rng = rng or random.Random()
    bounds = Bounds(width, height)

    points = generate_anchor_points(bounds, minimum_distance, rng=rng)
    anchors = assign_colors(points, base, rng)
    logger.info("Rasterizing %d cells on a %dx%d canvas", len(anchors), width, height)

    buffer = rasterize(bounds, anchors, minimum_distance, strict=strict)
    return Image.fromarray(buffer)
