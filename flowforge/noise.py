"""Procedural lattice noise sampled at arbitrary points.

Every function takes coordinate arrays (or scalars) of the same shape
and returns an array of that shape. Values are nominally in [-1, 1].
"""

import numpy as np


# Gradient directions for 2D Perlin noise, indexed by hash & 7.
_GRADIENTS = np.array([
    [1.0, 1.0], [-1.0, 1.0], [1.0, -1.0], [-1.0, -1.0],
    [1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0],
])


def _fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def permutation_table(seed):
    """Build a 512-entry permutation table for the given seed.

    The table is the usual 256-entry shuffle repeated twice so that
    nested lookups never need a modulo.
    """
    rng = np.random.RandomState(seed % (2**32))
    perm = rng.permutation(256)
    return np.concatenate([perm, perm]).astype(np.int64)


def _hash(perm, ix, iy):
    return perm[perm[ix & 255] + (iy & 255)]


def _lattice(x, y):
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    x0 = np.floor(x)
    y0 = np.floor(y)
    return x0.astype(np.int64), y0.astype(np.int64), x - x0, y - y0


def perlin(x, y, perm):
    """Classic 2D gradient noise.

    Args:
        x, y: Sample coordinates (lattice spacing 1).
        perm: Permutation table from ``permutation_table``.

    Returns:
        Array of noise values clipped to [-1, 1].
    """
    ix, iy, fx, fy = _lattice(x, y)

    def corner(dx, dy):
        g = _GRADIENTS[_hash(perm, ix + dx, iy + dy) & 7]
        return g[..., 0] * (fx - dx) + g[..., 1] * (fy - dy)

    u = _fade(fx)
    v = _fade(fy)
    n0 = corner(0, 0) + u * (corner(1, 0) - corner(0, 0))
    n1 = corner(0, 1) + u * (corner(1, 1) - corner(0, 1))
    return np.clip(n0 + v * (n1 - n0), -1.0, 1.0)


def value_noise(x, y, perm):
    """Single-octave lattice value noise with smooth interpolation.

    Random values live on the integer lattice and are blended with the
    quintic fade, so the result is continuous but not gradient based.
    """
    ix, iy, fx, fy = _lattice(x, y)

    def corner(dx, dy):
        return _hash(perm, ix + dx, iy + dy) / 127.5 - 1.0

    u = _fade(fx)
    v = _fade(fy)
    n0 = corner(0, 0) + u * (corner(1, 0) - corner(0, 0))
    n1 = corner(0, 1) + u * (corner(1, 1) - corner(0, 1))
    return n0 + v * (n1 - n0)


def fbm(x, y, seed=0, octaves=6, frequency=1.0, lacunarity=2.094395,
        persistence=0.5):
    """Fractal Brownian motion (layered Perlin noise).

    Args:
        x, y: Sample coordinates.
        seed: Base seed; octave ``i`` uses ``seed + i``.
        octaves: Number of noise layers.
        frequency: Frequency of the first octave.
        lacunarity: Frequency multiplier per octave.
        persistence: Amplitude decay per octave (0-1).

    Returns:
        Array with values in [-1, 1].
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    result = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    amplitude = 1.0
    total_amplitude = 0.0
    freq = frequency

    for i in range(octaves):
        perm = permutation_table(seed + i)
        result += amplitude * perlin(x * freq, y * freq, perm)
        total_amplitude += amplitude
        amplitude *= persistence
        freq *= lacunarity

    return np.clip(result / total_amplitude, -1.0, 1.0)


def billow(x, y, seed=0, octaves=6, frequency=1.0, lacunarity=2.094395,
           persistence=0.5):
    """Billowy fractal noise: each octave is folded with 2|n| - 1."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    result = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    amplitude = 1.0
    total_amplitude = 0.0
    freq = frequency

    for i in range(octaves):
        perm = permutation_table(seed + i)
        signal = 2.0 * np.abs(perlin(x * freq, y * freq, perm)) - 1.0
        result += amplitude * signal
        total_amplitude += amplitude
        amplitude *= persistence
        freq *= lacunarity

    return np.clip(result / total_amplitude, -1.0, 1.0)


def ridged(x, y, seed=0, octaves=6, frequency=1.0, lacunarity=2.094395,
           persistence=1.0, attenuation=2.0):
    """Ridged multifractal noise.

    Each octave is inverted around its zero crossing and squared, then
    weighted by the previous octave so ridges sharpen where the coarse
    layers are already high.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    shape = np.broadcast(x, y).shape
    result = np.zeros(shape, dtype=np.float64)
    weight = np.ones(shape, dtype=np.float64)
    amplitude = 1.0
    total_amplitude = 0.0
    freq = frequency

    for i in range(octaves):
        perm = permutation_table(seed + i)
        signal = 1.0 - np.abs(perlin(x * freq, y * freq, perm))
        signal = signal * signal * weight
        weight = np.clip(signal / attenuation, 0.0, 1.0)
        result += amplitude * signal
        total_amplitude += amplitude
        amplitude *= persistence
        freq *= lacunarity

    return np.clip(2.0 * result / total_amplitude - 1.0, -1.0, 1.0)


def worley(x, y, perm, distance=True):
    """Cellular (Worley) noise on a jittered unit grid.

    Each lattice cell holds one feature point. The nearest feature is
    searched in the 3x3 neighbourhood of the sample's cell.

    Args:
        x, y: Sample coordinates.
        perm: Permutation table.
        distance: Return the nearest-feature distance mapped to [-1, 1]
            when True, otherwise the nearest cell's random value.
    """
    ix, iy, fx, fy = _lattice(x, y)
    best = np.full(fx.shape, np.inf)
    best_value = np.zeros(fx.shape)

    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            h = _hash(perm, ix + dx, iy + dy)
            jx = perm[(h + 31) & 511] / 255.0
            jy = perm[(h + 97) & 511] / 255.0
            px = dx + jx - fx
            py = dy + jy - fy
            d = np.sqrt(px * px + py * py)
            closer = d < best
            best = np.where(closer, d, best)
            best_value = np.where(closer, h / 127.5 - 1.0, best_value)

    if distance:
        return np.clip(2.0 * best - 1.0, -1.0, 1.0)
    return best_value


def cylinders(x, y, frequency=1.0):
    """Concentric bands around the origin, 1 on each ring and -1 between."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    d = np.sqrt(x * x + y * y) * frequency
    inner = d - np.floor(d)
    nearest = np.minimum(inner, 1.0 - inner)
    return 1.0 - nearest * 4.0


def curl(source, x, y, eps=1e-4):
    """Direction of the curl of a scalar field, normalized to [-1, 1].

    The gradient of ``source`` is estimated by central differences and
    rotated by 90 degrees; the heading of the rotated vector is returned
    as ``atan2 / pi``.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    dndx = (source(x + eps, y) - source(x - eps, y)) / (2.0 * eps)
    dndy = (source(x, y + eps) - source(x, y - eps)) / (2.0 * eps)
    return np.arctan2(-dndx, dndy) / np.pi
