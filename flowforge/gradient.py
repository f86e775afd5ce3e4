"""Linear colour ramps for extruded ribbons."""

from enum import Enum

import numpy as np


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
PALE = (230, 230, 230)
SHADOW = (30, 30, 30)


class GradStyle(Enum):
    PLAIN = "plain"
    LIGHT = "light"
    DARK = "dark"
    FIBER = "fiber"
    LIGHT_FIBER = "light-fiber"
    DARK_FIBER = "dark-fiber"


def gradient_stops(color, style, rng):
    """Stops ``[(offset, (r, g, b)), ...]`` for one ribbon segment.

    Fiber styles place the main colour at a random offset near the far
    end, drawn from ``rng``.
    """
    style = GradStyle(style)
    if style is GradStyle.LIGHT_FIBER:
        return [(0.0, WHITE), (rng.uniform(0.7, 1.0), color), (1.0, WHITE)]
    if style is GradStyle.DARK_FIBER:
        return [(0.0, WHITE), (rng.uniform(0.7, 1.0), color), (1.0, BLACK)]
    if style is GradStyle.FIBER:
        return [(0.0, WHITE), (rng.uniform(0.7, 0.9), color)]
    if style is GradStyle.DARK:
        return [(0.0, PALE), (0.875, color), (1.0, SHADOW)]
    if style is GradStyle.LIGHT:
        return [(0.0, WHITE), (0.125, PALE), (0.875, color), (1.0, WHITE)]
    return [(0.0, PALE), (0.8, color)]


def gradient_ramp(stops, n):
    """Sample ``stops`` at ``n`` evenly spaced positions along [0, 1].

    Positions outside the first and last stop take the end colours.

    Returns:
        ``(n, 3)`` uint8 array.
    """
    offsets = np.array([s[0] for s in stops], dtype=np.float64)
    colors = np.array([s[1] for s in stops], dtype=np.float64)
    t = np.linspace(0.0, 1.0, n) if n > 1 else np.zeros(n)
    ramp = np.stack([np.interp(t, offsets, colors[:, c]) for c in range(3)],
                    axis=-1)
    return np.clip(np.round(ramp), 0, 255).astype(np.uint8)
