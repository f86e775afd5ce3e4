"""Procedural background textures.

Textures are built as ``(h, w, 3)`` uint8 arrays before any curve is
drawn. Grain textures consume the draw-pass RNG; cloud textures are
deterministic FBM.
"""

from enum import Enum

import numpy as np

from .noise import fbm


class Background(Enum):
    LIGHT_GRAIN = "light-grain"
    DARK_GRAIN = "dark-grain"
    LIGHT_CLOUDS = "light-clouds"
    DARK_CLOUDS = "dark-clouds"
    COLOR_GRAIN = "color-grain"


def _light_grain(w, h, rng):
    """White paper multiplied by random grey specks at 10% opacity."""
    brt = rng.randint(0, 256, size=(h, w)).astype(np.float64)
    alpha = 25 / 255.0
    value = 1.0 - alpha + alpha * brt / 255.0
    return np.repeat(value[:, :, np.newaxis], 3, axis=2)


def _dark_grain(w, h, rng):
    """Near-black speckle: white under black at 78-94% opacity."""
    alpha = rng.randint(200, 241, size=(h, w)).astype(np.float64) / 255.0
    return np.repeat((1.0 - alpha)[:, :, np.newaxis], 3, axis=2)


def _clouds(w, h, base):
    """Soft FBM clouds around grey level ``base`` (0-255)."""
    jj, ii = np.meshgrid(np.arange(h), np.arange(w), indexing='ij')
    n = fbm(ii * 0.05, jj * 0.10, octaves=4)
    level = base + np.floor(30.0 * (n + 1.0) * 0.5)
    return np.repeat((level / 255.0)[:, :, np.newaxis], 3, axis=2)


def make_background(kind, w, h, rng, grain_color=(128, 128, 128)):
    """Build a background texture.

    Args:
        kind: Background style.
        w, h: Texture size in pixels.
        rng: numpy RandomState for grain styles.
        grain_color: Tint for COLOR_GRAIN as (r, g, b).

    Returns:
        ``(h, w, 3)`` uint8 array.
    """
    kind = Background(kind)
    if kind is Background.LIGHT_GRAIN:
        tex = _light_grain(w, h, rng)
    elif kind is Background.DARK_GRAIN:
        tex = _dark_grain(w, h, rng)
    elif kind is Background.LIGHT_CLOUDS:
        tex = _clouds(w, h, 225)
    elif kind is Background.DARK_CLOUDS:
        tex = _clouds(w, h, 25)
    else:
        tint = np.array(grain_color, dtype=np.float64) / 255.0
        tex = _light_grain(w, h, rng) * tint

    return np.clip(np.round(tex * 255), 0, 255).astype(np.uint8)


def tile(texture, w, h):
    """Repeat ``texture`` to cover a ``w`` x ``h`` canvas."""
    th, tw = texture.shape[:2]
    reps_y = -(-h // th)
    reps_x = -(-w // tw)
    return np.tile(texture, (reps_y, reps_x, 1))[:h, :w]
