"""Blue-noise anchor sampling by frontier-driven dart throwing.

Starting from one random seed point, every accepted point spawns a ring of
candidates between `d` and `2d` away. Candidates are evaluated in FIFO order
and accepted only if they keep at least `d` from every point accepted so far.
Sampling ends when the frontier runs dry.
"""

import logging
import random
from collections import deque
from typing import Deque, List, Optional

import numpy as np

from .geometry import Bounds, DistanceRange, Point, SamplingError, random_point_around

logger = logging.getLogger(__name__)

CANDIDATES_PER_POINT = 25

__all__ = ["generate_anchor_points", "SamplingError", "CANDIDATES_PER_POINT"]


class _AcceptedPoints:
    """Growable (n, 2) array of accepted coordinates, in acceptance order."""

    def __init__(self, capacity: int = 256):
        self._xy = np.empty((capacity, 2), dtype=np.float64)
        self._n = 0
        self.points: List[Point] = []

    def append(self, p: Point) -> None:
        if self._n == len(self._xy):
            self._xy = np.concatenate([self._xy, np.empty_like(self._xy)])
        self._xy[self._n] = (p.x, p.y)
        self._n += 1
        self.points.append(p)

    def min_squared_distance(self, p: Point) -> float:
        d = self._xy[:self._n] - (p.x, p.y)
        return float(np.min(np.einsum("ij,ij->i", d, d)))


def generate_anchor_points(
    bounds: Bounds,
    minimum_distance: int,
    rng: Optional[random.Random] = None,
    candidates_per_point: int = CANDIDATES_PER_POINT,
    max_attempts: int = 1000,
) -> List[Point]:
    """Grow a point set over `bounds` with pairwise distance >= minimum_distance.

    Raises SamplingError when a candidate cannot be placed inside the bounds
    within `max_attempts` draws (e.g. a distance far larger than the canvas).
    """
    if isinstance(minimum_distance, bool) or not isinstance(minimum_distance, int):
        raise ValueError(f"minimum_distance must be an integer, got {minimum_distance!r}")
    if minimum_distance <= 0:
        raise ValueError(f"minimum_distance must be positive, got {minimum_distance}")
    rng = rng or random.Random()
    distance = DistanceRange(minimum_distance, minimum_distance * 2)
    squared_minimum = minimum_distance * minimum_distance

    def spawn(source: Point) -> List[Point]:
        return [random_point_around(source, distance, bounds, rng, max_attempts)
                for _ in range(candidates_per_point)]

    accepted = _AcceptedPoints()
    first = Point(rng.random() * bounds.width, rng.random() * bounds.height)
    accepted.append(first)

    frontier: Deque[Point] = deque(spawn(first))
    evaluated = 0
    while frontier:
        candidate = frontier.popleft()
        evaluated += 1
        if accepted.min_squared_distance(candidate) >= squared_minimum:
            accepted.append(candidate)
            frontier.extend(spawn(candidate))

    logger.debug("Sampled %d anchors from %d candidates over %dx%d (d=%d)",
                 len(accepted.points), evaluated, bounds.width, bounds.height,
                 minimum_distance)
    return accepted.points
