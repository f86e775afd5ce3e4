"""Per-point stroke sizes for dots and extrusions."""

import math
from enum import Enum

import numpy as np

from .errors import ConfigError
from .noise import perlin, permutation_table


# Fixed seed for periodic sizing, independent of the flow field.
PERIODIC_SEED = 98713


class Dir(Enum):
    BOTH = "both"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SizeFn(Enum):
    CONSTANT = "constant"
    EXPANDING = "expanding"
    CONTRACTING = "contracting"
    PERIODIC = "periodic"


def center_distance(x, y, w, h, direction=Dir.BOTH):
    """Normalized distance of ``(x, y)`` from the canvas centre."""
    cx = abs(x - w / 2.0)
    cy = abs(y - h / 2.0)
    if direction is Dir.HORIZONTAL:
        return cx / w
    if direction is Dir.VERTICAL:
        return cy / h
    return math.sqrt(cx * cx / (w * w) + cy * cy / (h * h))


class SizeFunction:
    """Maps a canvas point to a stroke radius.

    Args:
        kind: SizeFn rule.
        width, height: Canvas size; must be positive.
        size: Base size.
        direction: Axis restriction for EXPANDING and CONTRACTING.
        scale: Noise scale for PERIODIC.
        min_size: Lower bound for every rule except CONSTANT.
    """

    def __init__(self, kind, width, height, size, direction=Dir.BOTH,
                 scale=10.0, min_size=25.0):
        if width <= 0 or height <= 0:
            raise ConfigError(f"Canvas must be non-empty, got {width}x{height}")
        self.kind = SizeFn(kind)
        self.width = width
        self.height = height
        self.size = size
        self.direction = Dir(direction)
        self.scale = scale
        self.min_size = min_size
        self._perm = permutation_table(PERIODIC_SEED)

    def __call__(self, x, y):
        if self.kind is SizeFn.CONSTANT:
            return self.size * 0.5
        if self.kind is SizeFn.EXPANDING:
            d = center_distance(x, y, self.width, self.height, self.direction)
            return max(self.min_size, d * self.size)
        if self.kind is SizeFn.CONTRACTING:
            d = center_distance(x, y, self.width, self.height, self.direction)
            return max(self.min_size, (0.5 - d) * self.size)
        # PERIODIC
        n = perlin(self.scale * x / self.width, self.scale * y / self.height,
                   self._perm)
        n01 = (float(n) + 1.0) * 0.5
        return max(self.min_size, n01 * self.size / 2.0)

    def radii(self, points):
        """Sizes for every row of an ``(n, 2)`` point array."""
        return np.array([self(x, y) for x, y in points], dtype=np.float64)
