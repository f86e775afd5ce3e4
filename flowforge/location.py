"""Seed point placement strategies.

``Location.starts`` returns the starting points of every curve in a
draw pass as an ``(n, 2)`` array. Density-driven strategies produce
about ``width * height / sep**2`` points.
"""

import math
from enum import Enum

import numpy as np

from .errors import ConfigError


CIRCLE_RADII = (1 / 6, 1 / 3.5, 1 / 2.5)


def halton(index, base):
    """Radical inverse of ``index`` in ``base`` (one Halton coordinate)."""
    f = 1.0
    r = 0.0
    while index > 0:
        f /= base
        r += f * (index % base)
        index //= base
    return r


def halton_23(w, h, n, start=1):
    """``n`` points of the base-(2, 3) Halton sequence scaled to w x h."""
    pts = np.empty((n, 2), dtype=np.float64)
    for i in range(n):
        pts[i, 0] = halton(start + i, 2) * w
        pts[i, 1] = halton(start + i, 3) * h
    return pts


def poisson_disk(w, h, radius, rng, k=30):
    """Blue-noise points with pairwise distance >= ``radius``.

    Bridson's algorithm: a background grid with cells of size
    ``radius / sqrt(2)`` holds at most one sample each, and every
    active sample spawns up to ``k`` candidates in the annulus
    ``[radius, 2 * radius)``.
    """
    cell = radius / math.sqrt(2)
    gw = int(math.ceil(w / cell)) + 1
    gh = int(math.ceil(h / cell)) + 1
    grid = -np.ones((gh, gw), dtype=np.int64)
    samples = []
    active = []

    def fits(px, py):
        gx, gy = int(px / cell), int(py / cell)
        for j in range(max(0, gy - 2), min(gh, gy + 3)):
            for i in range(max(0, gx - 2), min(gw, gx + 3)):
                s = grid[j, i]
                if s >= 0:
                    sx, sy = samples[s]
                    if (sx - px) ** 2 + (sy - py) ** 2 < radius * radius:
                        return False
        return True

    def add(px, py):
        grid[int(py / cell), int(px / cell)] = len(samples)
        active.append(len(samples))
        samples.append((px, py))

    add(rng.uniform(0, w), rng.uniform(0, h))

    while active:
        slot = rng.randint(0, len(active))
        sx, sy = samples[active[slot]]
        for _ in range(k):
            angle = rng.uniform(0, 2 * math.pi)
            dist = rng.uniform(radius, 2 * radius)
            px = sx + dist * math.cos(angle)
            py = sy + dist * math.sin(angle)
            if 0 <= px < w and 0 <= py < h and fits(px, py):
                add(px, py)
                break
        else:
            active[slot] = active[-1]
            active.pop()

    return np.array(samples, dtype=np.float64).reshape(-1, 2)


class Location(Enum):
    GRID = "grid"
    RAND = "rand"
    HALTON = "halton"
    POISSON = "poisson"
    CIRCLE = "circle"
    LISSAJOUS = "lissajous"

    def starts(self, w, h, sep, rng):
        """Seed points for a ``w`` x ``h`` canvas.

        Args:
            w, h: Canvas size.
            sep: Spacing between seeds; density-driven strategies place
                ``floor(w * h / sep**2)`` points.
            rng: numpy RandomState for the random strategies.

        Returns:
            ``(n, 2)`` float array of points inside (or on) the canvas.
        """
        if not sep > 0:
            raise ConfigError(f"Seed separation must be positive, got {sep}")
        if w <= 0 or h <= 0:
            raise ConfigError(f"Canvas must be non-empty, got {w}x{h}")
        n = int(math.floor((w * h) / (sep * sep)))

        if self is Location.GRID:
            xs = np.arange(int(math.floor(w / sep + 1e-9)) + 1) * sep
            ys = np.arange(int(math.floor(h / sep + 1e-9)) + 1) * sep
            gx, gy = np.meshgrid(xs, ys, indexing='ij')
            return np.stack([gx.ravel(), gy.ravel()], axis=-1)

        if self is Location.RAND:
            return np.stack([rng.uniform(0, w, n), rng.uniform(0, h, n)],
                            axis=-1)

        if self is Location.HALTON:
            return halton_23(w, h, n, start=rng.randint(1, 2**16))

        if self is Location.POISSON:
            return poisson_disk(w, h, sep / 1.2, rng)

        if self is Location.CIRCLE:
            cx, cy = w / 2.0, h / 2.0
            rings = []
            for d in CIRCLE_RADII:
                delta = sep / (d * max(w, h))
                theta = np.arange(0.0, 2 * math.pi + 1e-12, delta)
                rings.append(np.stack([cx + d * w * np.cos(theta),
                                       cy + d * h * np.sin(theta)], axis=-1))
            return np.concatenate(rings)

        if self is Location.LISSAJOUS:
            cx, cy = w / 2.0, h / 2.0
            t = np.arange(n) * 2.0 * math.pi / max(n, 1)
            x = 0.8 * w * np.sin(3.0 * t + math.pi / 2.0)
            y = 0.8 * h * np.sin(2.0 * t)
            return np.stack([x / 2.0 + cx, y / 2.0 + cy], axis=-1)

        raise ConfigError(f"Unknown location: {self}")
