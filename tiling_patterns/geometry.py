"""Planar value types shared by the pattern generators."""

import math
import random
from dataclasses import dataclass


class SamplingError(RuntimeError):
    """Raised when no in-bounds point can be found around a centre."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def squared_distance_from(self, other: "Point") -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2


@dataclass(frozen=True)
class Bounds:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Bounds must be positive, got {self.width}x{self.height}")

    def contains(self, point: Point) -> bool:
        """Open-interval test; points on the canvas edge are outside."""
        return 0.0 < point.x < self.width and 0.0 < point.y < self.height


@dataclass(frozen=True)
class DistanceRange:
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum <= 0 or self.minimum > self.maximum:
            raise ValueError(
                f"Invalid distance range: minimum={self.minimum}, maximum={self.maximum}"
            )


def random_point_around(
    center: Point,
    distance: DistanceRange,
    bounds: Bounds,
    rng: random.Random,
    max_attempts: int = 1000,
) -> Point:
    """Pick a point inside `bounds` at a random angle and distance from `center`.

    Out-of-bounds draws are thrown away and redrawn, up to `max_attempts` times.
    """
    spread = distance.maximum - distance.minimum
    for _ in range(max_attempts):
        angle = rng.random() * 2.0 * math.pi
        radius = distance.minimum + rng.random() * spread
        point = Point(center.x + radius * math.cos(angle),
                      center.y + radius * math.sin(angle))
        if bounds.contains(point):
            return point
    raise SamplingError(
        f"No point within {bounds.width}x{bounds.height} found at distance "
        f"{distance.minimum}..{distance.maximum} from ({center.x:.1f}, {center.y:.1f}) "
        f"after {max_attempts} attempts"
    )
