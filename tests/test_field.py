"""Tests for noise fields."""

import math

import numpy as np
import pytest

from flowforge.errors import ConfigError
from flowforge.field import (
    FractalParams, NoiseField, NoiseKind, NoiseOptions, SineParams,
    magnet, place_sinks,
)

BOUNDED_KINDS = [k for k in NoiseKind if k is not NoiseKind.SINUSOIDAL]


def _field(kind, seed=3):
    rng = np.random.RandomState(seed)
    return NoiseField.build(kind, 400, 300, scale=4.0, factor=1.0, rng=rng)


@pytest.mark.parametrize("kind", BOUNDED_KINDS)
def test_angle_finite_and_in_range(kind):
    field = _field(kind)
    rng = np.random.RandomState(0)
    xs = rng.uniform(-200, 600, 500)
    ys = rng.uniform(-200, 500, 500)
    values = field.angle(xs, ys)
    assert values.shape == (500,)
    assert np.all(np.isfinite(values))
    assert np.all(values >= -1.0) and np.all(values <= 1.0)


def test_sinusoidal_finite_for_fractional_exponents():
    field = NoiseField(NoiseKind.SINUSOIDAL,
                       sine=SineParams(2.0, 2.0, 1.5, 0.5))
    xs = np.linspace(-10, 10, 201)
    values = field.angle(xs, xs[::-1])
    assert np.all(np.isfinite(values))


@pytest.mark.parametrize("kind", list(NoiseKind))
def test_scalar_input_gives_float(kind):
    field = _field(kind)
    value = field.angle(123.5, 77.25)
    assert isinstance(value, float)
    assert math.isfinite(value)


@pytest.mark.parametrize("kind", list(NoiseKind))
def test_sampling_is_pure(kind):
    field = _field(kind)
    first = field.angle(50.0, 60.0)
    field.angle(np.arange(100.0), np.arange(100.0))
    assert field.angle(50.0, 60.0) == first


def test_sinusoidal_matches_closed_form():
    params = SineParams(xfreq=1.5, yfreq=0.5, xexp=2.0, yexp=3.0)
    field = NoiseField(NoiseKind.SINUSOIDAL, sine=params)
    for x, y in [(0.0, 0.0), (1.0, 2.0), (-3.3, 0.7), (10.0, -4.0)]:
        expected = math.pi * (2 + math.sin(1.5 * x) ** 2
                              + math.sin(0.5 * y) ** 3)
        assert field.angle(x, y) == pytest.approx(expected, rel=1e-12)


def test_sinusoidal_applies_scale_and_factor():
    params = SineParams()
    opts = NoiseOptions(width=100.0, height=50.0, scale=2.0, factor=0.5)
    field = NoiseField(NoiseKind.SINUSOIDAL, opts, sine=params)
    x, y = 30.0, 20.0
    sx, sy = 2.0 * x / 100.0, 2.0 * y / 50.0
    expected = 0.5 * math.pi * (2 + math.sin(sx) ** 2 + math.sin(sy) ** 2)
    assert field.angle(x, y) == pytest.approx(expected, rel=1e-12)


def test_magnet_without_sinks_is_zero():
    field = NoiseField(NoiseKind.MAGNET, sinks=())
    assert field.angle(10.0, 20.0) == 0.0
    assert np.all(field.angle(np.arange(5.0), np.arange(5.0)) == 0.0)


def test_magnet_points_at_nearest_sink():
    sinks = [(100.0, 0.0), (0.0, 100.0)]
    # (90, 0) is closest to the first sink, straight to the right.
    assert magnet(90.0, 0.0, sinks) == pytest.approx(0.0)
    # (0, 90) is closest to the second sink, straight down (+y).
    assert magnet(0.0, 90.0, sinks) == pytest.approx(0.5)
    # Past the first sink the heading points back at it: pi, i.e. 1.0.
    assert abs(magnet(130.0, 0.0, sinks)) == pytest.approx(1.0)


def test_magnet_sinks_fixed_at_construction():
    field = _field(NoiseKind.MAGNET, seed=11)
    sinks = field.sinks
    assert len(sinks) == 3
    field.angle(np.arange(50.0), np.arange(50.0))
    assert field.sinks == sinks
    for x, y in sinks:
        assert 0 <= x <= 400 and 0 <= y <= 300


def test_same_rng_seed_gives_same_sinks():
    a = _field(NoiseKind.GRAVITY, seed=5)
    b = _field(NoiseKind.GRAVITY, seed=5)
    c = _field(NoiseKind.GRAVITY, seed=6)
    assert a.sinks == b.sinks
    assert a.sinks != c.sinks


def test_quadrant_sinks():
    sinks = place_sinks(200, 100, rng=None, placement="quadrants")
    assert sinks == ((50.0, 25.0), (150.0, 25.0), (50.0, 75.0), (150.0, 75.0))


def test_magnet_needs_rng():
    with pytest.raises(ConfigError):
        NoiseField.build(NoiseKind.MAGNET, 100, 100)


def test_unknown_sink_placement():
    with pytest.raises(ConfigError):
        place_sinks(100, 100, np.random.RandomState(0), placement="corners")


@pytest.mark.parametrize("params", [
    FractalParams(octaves=0),
    FractalParams(octaves=9),
    FractalParams(persistence=0.99),
    FractalParams(lacunarity=0.0),
])
def test_fractal_params_rejected(params):
    with pytest.raises(ConfigError):
        NoiseField(NoiseKind.FBM, fractal=params)


def test_empty_canvas_rejected():
    with pytest.raises(ConfigError):
        NoiseField.build(NoiseKind.FBM, 0, 100)


def test_cylinders_centred_on_canvas():
    field = NoiseField.build(NoiseKind.CYLINDERS, 400, 400, scale=4.0)
    # The centre sits on a ring.
    assert field.angle(200.0, 200.0) == pytest.approx(1.0)
    # Radially symmetric about the centre.
    assert field.angle(260.0, 200.0) == pytest.approx(field.angle(140.0, 200.0))
    assert field.angle(200.0, 260.0) == pytest.approx(field.angle(260.0, 200.0))


def test_worley_value_mode():
    field = NoiseField(NoiseKind.WORLEY, worley_distance=False)
    values = field.angle(np.linspace(0, 20, 100), np.linspace(5, 9, 100))
    assert np.all(values >= -1.0) and np.all(values <= 1.0)
    # Piecewise constant: far fewer distinct values than samples.
    assert len(np.unique(values)) < 50
