# ==============================================================================
# File: tests/test_colors.py
# Purpose: hex parsing and lightness variation of the base colour.
# ==============================================================================
import colorsys
import random
import unittest

from tiling_patterns.colors import DEFAULT_BASE_COLOR, color_like, hex_to_rgb


def _hls(rgb):
    return colorsys.rgb_to_hls(*(c / 255.0 for c in rgb[:3]))


class TestHexToRgb(unittest.TestCase):

    def test_accepts_long_and_short_forms(self):
        self.assertEqual(hex_to_rgb("#1b4332"), (0x1b, 0x43, 0x32))
        self.assertEqual(hex_to_rgb("1B4332"), (0x1b, 0x43, 0x32))
        self.assertEqual(hex_to_rgb("#fa0"), (0xff, 0xaa, 0x00))
        self.assertEqual(hex_to_rgb("  #000000 "), (0, 0, 0))

    def test_rejects_malformed_strings(self):
        for bad in ("", "#12345", "#1234567", "#12345g", "green", "#xyz"):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    hex_to_rgb(bad)


class TestColorLike(unittest.TestCase):

    def test_variant_keeps_hue_and_stays_in_lightness_range(self):
        """Lightness lands in [3/4 L, 4/3 L]; hue and saturation survive up to 8-bit rounding."""
        base = hex_to_rgb(DEFAULT_BASE_COLOR)
        h0, l0, s0 = _hls(base)
        rng = random.Random(1234)
        tolerance = 2 / 255.0
        for _ in range(200):
            variant = color_like(base, rng)
            self.assertEqual(len(variant), 4)
            self.assertEqual(variant[3], 255)
            h, l, s = _hls(variant)
            self.assertGreaterEqual(l, l0 * 0.75 - tolerance)
            self.assertLessEqual(l, l0 * 4.0 / 3.0 + tolerance)
            self.assertAlmostEqual(h, h0, delta=0.01)
            self.assertAlmostEqual(s, s0, delta=0.05)

    def test_black_stays_black(self):
        rng = random.Random(0)
        for _ in range(20):
            self.assertEqual(color_like((0, 0, 0), rng), (0, 0, 0, 255))

    def test_bright_colours_are_clamped(self):
        rng = random.Random(5)
        for _ in range(50):
            r, g, b, a = color_like((255, 255, 255), rng)
            self.assertEqual(r, g)
            self.assertEqual(g, b)
            self.assertTrue(191 <= r <= 255)
            self.assertEqual(a, 255)

    def test_injected_generator_is_repeatable(self):
        base = (120, 40, 200)
        first = [color_like(base, random.Random(42)) for _ in range(3)]
        second = [color_like(base, random.Random(42)) for _ in range(3)]
        self.assertEqual(first, second)

    def test_works_without_a_generator(self):
        self.assertEqual(color_like((10, 20, 30))[3], 255)


if __name__ == "__main__":
    unittest.main()
