"""Colour palettes for curves.

A palette is either a scale between two anchor colours blended in the
perceptual HSLuv space or one of the named fixed palettes. Both are expanded with
pairwise midpoints before use. Colours are ``(r, g, b)`` tuples of ints
in 0-255.
"""

from enum import Enum

import hsluv

from .errors import ConfigError


class Palettes(Enum):
    ROYALTY = "royalty"
    DELTA_BLUES = "delta-blues"
    PINOT_NOIR = "pinot-noir"
    ALGAE = "algae"
    SCEPTER = "scepter"
    FIRE = "fire"
    PERFUME = "perfume"
    ROSE = "rose"
    GRAY_SCALE = "gray-scale"
    PORCO_ROSSO = "porco-rosso"
    SPIRITED_AWAY = "spirited-away"
    TOTORO = "totoro"


class ColorMode(Enum):
    PALETTE = "palette"
    SCALE = "scale"


PALETTE_HEX = {
    Palettes.ROYALTY: (0x1C4572, 0x84561B, 0x6D3E32, 0x0A0E20),
    Palettes.DELTA_BLUES: (0x003566, 0x000000, 0x008080),
    Palettes.PINOT_NOIR: (0x701C1C, 0x1A1717, 0x77806E),
    Palettes.ALGAE: (0xA3B18A, 0x588157, 0x3A5A40, 0x344E41),
    Palettes.SCEPTER: (0xB7A635, 0x4E1406),
    Palettes.FIRE: (0x621708, 0x941B0C, 0xBC3908, 0xF6AA1C),
    Palettes.PERFUME: (0xD9798B, 0x8C4962, 0x59364A, 0x594832),
    Palettes.ROSE: (0xBF2642, 0x731F2E, 0x400C16),
    Palettes.GRAY_SCALE: (0x000000, 0xE6E6E6, 0xA0A0A0),
    Palettes.PORCO_ROSSO: (0x002B75, 0x862A23, 0xBD8878),
    Palettes.SPIRITED_AWAY: (0xD9A404, 0xF2B988, 0xBF3030, 0x0D0D0D),
    Palettes.TOTORO: (0x6A7AB2, 0xF27E9D, 0x454259, 0x9B8660),
}


def hex_to_rgb(value):
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def _to_hsluv(color):
    """``(hue in degrees, saturation 0-100, lightness 0-100)``."""
    return hsluv.rgb_to_hsluv([c / 255.0 for c in color])


def _from_hsluv(h, s, l):
    rgb = hsluv.hsluv_to_rgb([h % 360.0, min(max(s, 0.0), 100.0),
                              min(max(l, 0.0), 100.0)])
    return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in rgb)


def lerp(c1, c2, t):
    """Straight RGB interpolation between two colours."""
    return tuple(int(round(a + (b - a) * t)) for a, b in zip(c1, c2))


def darken(color, amount):
    """Lower the HSLuv lightness by a fixed ``amount`` (0-1)."""
    h, s, l = _to_hsluv(color)
    return _from_hsluv(h, s, l - amount * 100.0)


def color_scale(color1, color2, n=8, hue_path="direct"):
    """Blend ``n`` colours between two anchors.

    The first anchor is desaturated and lightened by half, the second
    saturated and darkened by half, so the scale runs from a pale tint
    to a deep shade.

    Args:
        color1, color2: Anchor colours as (r, g, b).
        n: Number of colours (>= 2).
        hue_path: ``"direct"`` interpolates hue numerically,
            ``"shortest"`` goes the short way around the hue circle.

    Returns:
        List of ``n`` colours.
    """
    h1, s1, l1 = _to_hsluv(color1)
    h2, s2, l2 = _to_hsluv(color2)
    s1 -= s1 * 0.5
    l1 += (100.0 - l1) * 0.5
    s2 += (100.0 - s2) * 0.5
    l2 -= l2 * 0.5

    if hue_path == "shortest":
        if h2 - h1 > 180.0:
            h2 -= 360.0
        elif h1 - h2 > 180.0:
            h2 += 360.0
    elif hue_path != "direct":
        raise ConfigError(f"Unknown hue path: {hue_path!r}")

    colors = []
    for p in range(n):
        t = p / (n - 1) if n > 1 else 0.0
        colors.append(_from_hsluv((1 - t) * h1 + t * h2,
                                  (1 - t) * s1 + t * s2,
                                  (1 - t) * l1 + t * l2))
    return colors


def expand_palette(colors):
    """Append the midpoint of every pair ``(i, j)`` with ``i <= j``."""
    result = list(colors)
    n = len(colors)
    for i in range(n):
        for j in range(i, n):
            result.append(lerp(colors[i], colors[j], 0.5))
    return result


class Palette:
    """A list of colours with uniform random sampling."""

    def __init__(self, colors):
        if not colors:
            raise ConfigError("Palette needs at least one colour")
        self.colors = [tuple(c) for c in colors]

    @classmethod
    def named(cls, name):
        raw = [hex_to_rgb(h) for h in PALETTE_HEX[Palettes(name)]]
        return cls(expand_palette(raw))

    @classmethod
    def scale(cls, color1, color2, n=8, hue_path="direct"):
        return cls(expand_palette(color_scale(color1, color2, n, hue_path)))

    def rand_color(self, rng):
        return self.colors[rng.randint(0, len(self.colors))]

    def __len__(self):
        return len(self.colors)
