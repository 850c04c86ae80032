# ==============================================================================
# File: tests/test_sampler.py
# Purpose: point geometry and blue-noise anchor sampling.
# ==============================================================================
import itertools
import math
import random
import unittest

from tiling_patterns.geometry import Bounds, DistanceRange, Point, SamplingError, random_point_around
from tiling_patterns.sampler import generate_anchor_points


class TestGeometry(unittest.TestCase):

    def test_squared_distance(self):
        self.assertEqual(Point(0, 0).squared_distance_from(Point(3, 4)), 25.0)
        self.assertEqual(Point(1.5, -2).squared_distance_from(Point(1.5, -2)), 0.0)

    def test_bounds_must_be_positive(self):
        for w, h in ((0, 10), (10, 0), (-1, 5)):
            with self.subTest(w=w, h=h):
                with self.assertRaises(ValueError):
                    Bounds(w, h)

    def test_bounds_contains_is_open(self):
        b = Bounds(10, 20)
        self.assertTrue(b.contains(Point(0.1, 19.9)))
        self.assertFalse(b.contains(Point(0, 5)))
        self.assertFalse(b.contains(Point(5, 20)))
        self.assertFalse(b.contains(Point(-1, 5)))

    def test_distance_range_invariants(self):
        DistanceRange(5, 5)
        with self.assertRaises(ValueError):
            DistanceRange(0, 10)
        with self.assertRaises(ValueError):
            DistanceRange(10, 5)

    def test_random_point_around_respects_distance_and_bounds(self):
        rng = random.Random(3)
        bounds = Bounds(100, 100)
        center = Point(5, 5)
        distance = DistanceRange(10, 20)
        for _ in range(500):
            p = random_point_around(center, distance, bounds, rng)
            self.assertTrue(bounds.contains(p))
            d = math.sqrt(p.squared_distance_from(center))
            self.assertGreaterEqual(d, 10 - 1e-9)
            self.assertLessEqual(d, 20 + 1e-9)

    def test_random_point_around_gives_up(self):
        with self.assertRaises(SamplingError):
            random_point_around(Point(5, 5), DistanceRange(50, 100), Bounds(10, 10),
                                random.Random(1), max_attempts=100)


class TestAnchorSampler(unittest.TestCase):

    def assertSeparated(self, points, minimum_distance):
        squared = minimum_distance ** 2
        for a, b in itertools.combinations(points, 2):
            self.assertGreaterEqual(a.squared_distance_from(b), squared)

    def test_points_keep_minimum_distance(self):
        for seed in (1, 2, 3):
            with self.subTest(seed=seed):
                points = generate_anchor_points(Bounds(200, 150), 15, rng=random.Random(seed))
                self.assertGreater(len(points), 1)
                self.assertSeparated(points, 15)

    def test_points_stay_inside_bounds(self):
        bounds = Bounds(120, 80)
        points = generate_anchor_points(bounds, 10, rng=random.Random(9))
        for p in points:
            self.assertTrue(0 <= p.x < 120 and 0 <= p.y < 80, p)
        # every point after the seed came from a candidate, which is strictly inside
        for p in points[1:]:
            self.assertTrue(bounds.contains(p), p)

    def test_large_canvas_terminates(self):
        points = generate_anchor_points(Bounds(500, 500), 20)
        self.assertGreaterEqual(len(points), 1)
        self.assertSeparated(points, 20)

    def test_covers_the_canvas(self):
        """Blue noise leaves no hole much wider than the candidate ring."""
        points = generate_anchor_points(Bounds(200, 200), 10, rng=random.Random(11))
        rng = random.Random(0)
        for _ in range(200):
            probe = Point(rng.uniform(20, 180), rng.uniform(20, 180))
            nearest = min(probe.squared_distance_from(p) for p in points)
            self.assertLess(nearest, 40 ** 2)

    def test_same_generator_same_points(self):
        a = generate_anchor_points(Bounds(100, 100), 12, rng=random.Random(77))
        b = generate_anchor_points(Bounds(100, 100), 12, rng=random.Random(77))
        self.assertEqual(a, b)

    def test_rejects_non_positive_distance(self):
        with self.assertRaises(ValueError):
            generate_anchor_points(Bounds(100, 100), 0)

    def test_rejects_non_integer_distance(self):
        for bad in (7.5, 10.0, "10", True):
            with self.subTest(distance=bad):
                with self.assertRaises(ValueError):
                    generate_anchor_points(Bounds(100, 100), bad)

    def test_distance_larger_than_canvas_fails_explicitly(self):
        with self.assertRaises(SamplingError):
            generate_anchor_points(Bounds(10, 10), 50, rng=random.Random(4), max_attempts=50)


if __name__ == "__main__":
    unittest.main()
