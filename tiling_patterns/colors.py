"""Colour helpers: hex parsing and lightness variation of a base colour."""

import colorsys
import random
from typing import Optional, Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

DEFAULT_BASE_COLOR = "#1b4332"

# Lightness of a variant is drawn from [L * MIN, L * MAX].
LIGHTNESS_MIN_FACTOR = 3.0 / 4.0
LIGHTNESS_MAX_FACTOR = 4.0 / 3.0

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert '#RRGGBB' or 'RRGGBB' to (r,g,b). Handles shorthand '#RGB' too."""
    h = hex_color.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c*2 for c in h)
    if len(h) != 6 or not set(h) <= _HEX_DIGITS:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    return (r, g, b)


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(channel * 255.0)))


def color_like(base: RGB, rng: Optional[random.Random] = None) -> RGBA:
    """Return an opaque variant of `base` with the same hue and saturation.

    The lightness is drawn uniformly between 3/4 and 4/3 of the base
    lightness, so a black base stays black.
    """
    rng = rng or random.Random()
    r, g, b = (c / 255.0 for c in base)
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    new_lightness = rng.uniform(lightness * LIGHTNESS_MIN_FACTOR,
                                lightness * LIGHTNESS_MAX_FACTOR)
    nr, ng, nb = colorsys.hls_to_rgb(hue, new_lightness, saturation)
    return (_to_byte(nr), _to_byte(ng), _to_byte(nb), 255)
