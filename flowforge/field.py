"""Noise fields that steer traced curves.

A ``NoiseField`` wraps one of a closed set of noise kinds behind a
single ``angle(x, y)`` operation. The raw sample is nominally in
[-1, 1]; it is scaled by ``factor`` and the integrator multiplies it by
pi to obtain a heading.
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import noise
from .errors import ConfigError


class NoiseKind(Enum):
    FBM = "fbm"
    BILLOW = "billow"
    RIDGED = "ridged"
    VALUE = "value"
    CYLINDERS = "cylinders"
    WORLEY = "worley"
    CURL = "curl"
    MAGNET = "magnet"
    GRAVITY = "gravity"
    SINUSOIDAL = "sinusoidal"


FRACTAL_KINDS = (NoiseKind.FBM, NoiseKind.BILLOW, NoiseKind.RIDGED)


@dataclass(frozen=True)
class NoiseOptions:
    """Maps canvas coordinates into noise space.

    A canvas point ``(x, y)`` is sampled at
    ``(scale * x / width, scale * y / height)`` and the result is
    multiplied by ``factor``. The defaults leave coordinates untouched.
    """
    width: float = 1.0
    height: float = 1.0
    scale: float = 1.0
    factor: float = 1.0

    def transform(self, x, y):
        return self.scale * x / self.width, self.scale * y / self.height


@dataclass(frozen=True)
class FractalParams:
    """Knobs for the FBM, BILLOW and RIDGED kinds.

    Persistence, lacunarity and frequency only matter when octaves > 1.
    """
    octaves: int = 4
    persistence: float = 0.5
    lacunarity: float = 2.094395
    frequency: float = 1.0

    def validate(self):
        if not 1 <= self.octaves <= 8:
            raise ConfigError(f"octaves must be in 1..8, got {self.octaves}")
        if not 0.05 <= self.persistence <= 0.95:
            raise ConfigError(
                f"persistence must be in [0.05, 0.95], got {self.persistence}")
        if self.lacunarity <= 0 or self.frequency <= 0:
            raise ConfigError("lacunarity and frequency must be positive")


@dataclass(frozen=True)
class SineParams:
    """Frequencies and exponents of the SINUSOIDAL kind."""
    xfreq: float = 1.0
    yfreq: float = 1.0
    xexp: float = 2.0
    yexp: float = 2.0


def _power(base, exponent):
    # Integral exponents keep the plain power; fractional ones would give
    # NaN for negative bases, so they keep the sign of the base instead.
    if float(exponent).is_integer():
        return base ** exponent
    return np.sign(base) * np.abs(base) ** exponent


def sinusoidal(x, y, params):
    """Closed form ``pi * (2 + sin(xf x)^xe + sin(yf y)^ye)``."""
    sx = np.sin(params.xfreq * np.asarray(x, dtype=np.float64))
    sy = np.sin(params.yfreq * np.asarray(y, dtype=np.float64))
    return np.pi * (2.0 + _power(sx, params.xexp) + _power(sy, params.yexp))


def magnet(x, y, sinks):
    """Direction from ``(x, y)`` to the nearest sink, as ``atan2 / pi``.

    With no sinks the field is defined to be 0 everywhere.
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    if len(sinks) == 0:
        return np.zeros(x.shape)

    sinks = np.asarray(sinks, dtype=np.float64)
    sx = sinks[:, 0].reshape((-1,) + (1,) * x.ndim)
    sy = sinks[:, 1].reshape((-1,) + (1,) * y.ndim)
    d2 = (sx - x) ** 2 + (sy - y) ** 2
    nearest = np.argmin(d2, axis=0)
    px = sinks[:, 0][nearest]
    py = sinks[:, 1][nearest]
    return np.arctan2(py - y, px - x) / np.pi


def place_sinks(width, height, rng, count=3, placement="random"):
    """Choose attractor points for MAGNET and GRAVITY fields.

    Args:
        width, height: Canvas size in pixels.
        rng: numpy RandomState; consumed only for random placement.
        count: Number of random sinks.
        placement: ``"random"`` for uniform positions on the canvas or
            ``"quadrants"`` for the four quadrant centres.

    Returns:
        Tuple of ``(x, y)`` tuples.
    """
    if placement == "quadrants":
        return tuple((fx * width, fy * height)
                     for fy in (0.25, 0.75) for fx in (0.25, 0.75))
    if placement != "random":
        raise ConfigError(f"Unknown sink placement: {placement!r}")
    if count < 0:
        raise ConfigError(f"sink count must be >= 0, got {count}")
    r = rng.random_sample((count, 2))
    return tuple((float(a) * width, float(b) * height) for a, b in r)


class NoiseField:
    """A flow field backed by one noise kind.

    Sampling is pure: ``angle`` never changes the field. The only
    randomness (MAGNET/GRAVITY sinks) is fixed when the field is built.
    """

    def __init__(self, kind, options=None, fractal=None, sine=None,
                 sinks=(), worley_distance=True, cylinder_frequency=2.0,
                 center=(0.0, 0.0), seed=0):
        self.kind = NoiseKind(kind)
        self.options = options or NoiseOptions()
        self.fractal = fractal or FractalParams()
        self.sine = sine or SineParams()
        self.sinks = tuple(tuple(s) for s in sinks)
        self.worley_distance = worley_distance
        self.cylinder_frequency = cylinder_frequency
        self.center = center
        self.seed = seed
        self._perm = noise.permutation_table(seed)
        if self.kind in FRACTAL_KINDS:
            self.fractal.validate()

    @classmethod
    def build(cls, kind, width, height, scale=4.0, factor=1.0, fractal=None,
              sine=None, rng=None, sink_count=3, sink_placement="random",
              seed=0):
        """Construct the field for a ``width`` x ``height`` canvas.

        Each kind gets its sampling options up front: lattice and
        analytic kinds are scaled to the canvas, while MAGNET and
        GRAVITY sample raw pixel coordinates so their sinks can live in
        canvas space.
        """
        kind = NoiseKind(kind)
        if width <= 0 or height <= 0:
            raise ConfigError(f"Canvas must be non-empty, got {width}x{height}")
        fractal = fractal or FractalParams()

        if kind in (NoiseKind.MAGNET, NoiseKind.GRAVITY):
            if rng is None:
                raise ConfigError(f"{kind.value} field needs an rng")
            sinks = place_sinks(width, height, rng, sink_count,
                                sink_placement)
            return cls(kind, NoiseOptions(), sinks=sinks, seed=seed)

        options = NoiseOptions(width=width, height=height, scale=scale,
                               factor=factor)
        # Cylinders are centred on the canvas midpoint in noise space.
        center = options.transform(width / 2.0, height / 2.0)
        return cls(kind, options, fractal=fractal, sine=sine,
                   cylinder_frequency=fractal.octaves / 2.0,
                   center=center, seed=seed)

    def raw(self, x, y):
        """Sample the underlying noise in noise-space coordinates."""
        kind = self.kind
        f = self.fractal
        if kind is NoiseKind.FBM:
            return noise.fbm(x, y, self.seed, f.octaves, f.frequency,
                             f.lacunarity, f.persistence)
        if kind is NoiseKind.BILLOW:
            return noise.billow(x, y, self.seed, f.octaves, f.frequency,
                                f.lacunarity, f.persistence)
        if kind is NoiseKind.RIDGED:
            return noise.ridged(x, y, self.seed, f.octaves, f.frequency,
                                f.lacunarity, f.persistence)
        if kind is NoiseKind.VALUE:
            return noise.value_noise(x, y, self._perm)
        if kind is NoiseKind.WORLEY:
            return noise.worley(x, y, self._perm, self.worley_distance)
        if kind is NoiseKind.CYLINDERS:
            cx, cy = self.center
            return noise.cylinders(np.asarray(x) - cx, np.asarray(y) - cy,
                                   self.cylinder_frequency)
        if kind is NoiseKind.CURL:
            return noise.curl(lambda a, b: noise.perlin(a, b, self._perm),
                              x, y)
        if kind is NoiseKind.MAGNET:
            return magnet(x, y, self.sinks)
        if kind is NoiseKind.GRAVITY:
            return noise.curl(lambda a, b: magnet(a, b, self.sinks), x, y)
        if kind is NoiseKind.SINUSOIDAL:
            return sinusoidal(x, y, self.sine)
        raise ConfigError(f"Unknown noise kind: {kind}")

    def angle(self, x, y):
        """Scaled field sample at canvas point ``(x, y)``.

        Returns a float for scalar input, otherwise an array shaped like
        the broadcast of ``x`` and ``y``.
        """
        sx, sy = self.options.transform(np.asarray(x, dtype=np.float64),
                                        np.asarray(y, dtype=np.float64))
        value = self.options.factor * np.asarray(self.raw(sx, sy))
        if value.ndim == 0:
            return float(value)
        return value

    def __repr__(self):
        return f"NoiseField({self.kind.value}, {self.options})"


def heading(field, x, y):
    """Heading in radians at ``(x, y)``: the field angle times pi."""
    return field.angle(x, y) * math.pi
