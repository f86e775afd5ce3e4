"""Tests for curve tracing."""

import math

import numpy as np
import pytest

from flowforge.errors import ConfigError
from flowforge.field import NoiseField, NoiseKind, SineParams, heading
from flowforge.integrator import CurveDirection, Integrator


def _fbm_field():
    return NoiseField.build(NoiseKind.FBM, 500, 500, scale=4.0)


class _NanField:
    def angle(self, x, y):
        return float("nan")


def test_sinusoidal_regression_fixture():
    """Eleven points computed by hand from the closed form."""
    field = NoiseField(NoiseKind.SINUSOIDAL, sine=SineParams(1.0, 1.0, 2.0, 2.0))
    integrator = Integrator(field, step_size=4.0, curve_length=10, speed=1.0)

    def field_heading(x, y):
        raw = float(np.pi * (2.0 + np.sin(1.0 * np.float64(x)) ** 2.0
                             + np.sin(1.0 * np.float64(y)) ** 2.0))
        return 1.0 * raw * math.pi

    x, y = 0.0, 0.0
    theta = field_heading(x, y)
    expected = [(x, y)]
    for _ in range(10):
        x = x + 4.0 * math.cos(theta)
        y = y + 4.0 * math.sin(theta)
        theta = field_heading(x, y)
        expected.append((x, y))

    curve = integrator.trace_one_sided(0.0, 0.0)
    assert curve.shape == (11, 2)
    assert theta == pytest.approx(heading(field, x, y))
    np.testing.assert_allclose(curve, np.array(expected), rtol=1e-9, atol=1e-9)
    # First step heads along 2*pi^2 radians.
    assert curve[1, 0] == pytest.approx(4.0 * math.cos(2 * math.pi ** 2))
    assert curve[1, 1] == pytest.approx(4.0 * math.sin(2 * math.pi ** 2))


@pytest.mark.parametrize("length", [0, 1, 7, 50])
def test_one_sided_length_and_start(length):
    integrator = Integrator(_fbm_field(), 3.0, length, 0.7)
    curve = integrator.trace_one_sided(120.5, 80.25)
    assert curve.shape == (length + 1, 2)
    assert curve[0, 0] == 120.5
    assert curve[0, 1] == 80.25


@pytest.mark.parametrize("length", [0, 1, 6, 7, 50])
def test_two_sided_contains_seed(length):
    integrator = Integrator(_fbm_field(), 3.0, length, 0.7)
    curve = integrator.trace_two_sided(200.0, 210.0)
    assert len(curve) == 2 * (length // 2) + 1
    matches = np.all(curve == np.array([200.0, 210.0]), axis=1)
    assert matches.any()


def test_two_sided_arms_mirror_first_step():
    integrator = Integrator(_fbm_field(), 5.0, 10, 0.5)
    curve = integrator.trace_two_sided(250.0, 250.0)
    mid = 5
    forward = curve[mid + 1] - curve[mid]
    backward = curve[mid - 1] - curve[mid]
    np.testing.assert_allclose(forward, -backward, atol=1e-9)


def test_trace_is_deterministic():
    integrator = Integrator(_fbm_field(), 2.0, 40, 0.3)
    a = integrator.trace_one_sided(33.0, 44.0)
    b = integrator.trace_one_sided(33.0, 44.0)
    assert a.tobytes() == b.tobytes()


def test_magnet_traces_reproducible_with_same_rng_seed():
    def trace(seed):
        field = NoiseField.build(NoiseKind.MAGNET, 300, 300,
                                 rng=np.random.RandomState(seed))
        return Integrator(field, 2.0, 30, 1.0).trace_one_sided(150.0, 150.0)

    assert trace(9).tobytes() == trace(9).tobytes()


def test_speed_zero_draws_straight_line():
    field = _fbm_field()
    integrator = Integrator(field, 2.5, 20, speed=0.0)
    curve = integrator.trace_one_sided(100.0, 100.0)
    theta = heading(field, 100.0, 100.0)
    k = np.arange(21)
    np.testing.assert_allclose(curve[:, 0], 100.0 + 2.5 * k * math.cos(theta),
                               atol=1e-9)
    np.testing.assert_allclose(curve[:, 1], 100.0 + 2.5 * k * math.sin(theta),
                               atol=1e-9)


def test_speed_one_follows_field():
    field = _fbm_field()
    integrator = Integrator(field, 2.5, 20, speed=1.0)
    for v in integrator.iter_vertices(300.0, 40.0):
        assert v.theta == pytest.approx(heading(field, v.x, v.y), abs=1e-12)


def test_zero_step_size_is_degenerate():
    integrator = Integrator(_fbm_field(), 0.0, 15, 0.5)
    curve = integrator.trace_one_sided(10.0, 20.0)
    assert curve.shape == (16, 2)
    assert np.all(curve == np.array([10.0, 20.0]))


def test_trace_dispatches_on_direction():
    integrator = Integrator(_fbm_field(), 2.0, 10, 1.0)
    assert len(integrator.trace(5.0, 5.0, CurveDirection.ONE_SIDED)) == 11
    assert len(integrator.trace(5.0, 5.0, "two-sided")) == 11
    assert len(Integrator(_fbm_field(), 2.0, 9, 1.0).trace(5.0, 5.0, "two-sided")) == 9


@pytest.mark.parametrize("direction", list(CurveDirection))
def test_trace_many_matches_single_traces(direction):
    integrator = Integrator(_fbm_field(), 3.0, 25, 0.6)
    seeds = np.array([[10.0, 10.0], [250.0, 100.0], [480.0, 470.0]])
    curves = integrator.trace_many(seeds, direction)
    assert curves.shape[0] == 3
    for seed, curve in zip(seeds, curves):
        single = integrator.trace(seed[0], seed[1], direction)
        assert curve.shape == single.shape
        np.testing.assert_allclose(curve, single, rtol=1e-7, atol=1e-6)


def test_trace_many_empty():
    integrator = Integrator(_fbm_field(), 3.0, 10, 0.6)
    curves = integrator.trace_many(np.empty((0, 2)))
    assert curves.shape == (0, 11, 2)


def test_non_finite_curve_rejected():
    integrator = Integrator(_NanField(), 1.0, 5, 1.0)
    with pytest.raises(ConfigError):
        integrator.trace_one_sided(0.0, 0.0)
    with pytest.raises(ConfigError):
        integrator.trace_many([[0.0, 0.0]])


@pytest.mark.parametrize("kwargs", [
    dict(step_size=-1.0, curve_length=10, speed=0.5),
    dict(step_size=float("inf"), curve_length=10, speed=0.5),
    dict(step_size=1.0, curve_length=-1, speed=0.5),
    dict(step_size=1.0, curve_length=2.5, speed=0.5),
    dict(step_size=1.0, curve_length=float("inf"), speed=0.5),
    dict(step_size=1.0, curve_length=float("nan"), speed=0.5),
    dict(step_size=1.0, curve_length=10, speed=1.5),
    dict(step_size=1.0, curve_length=10, speed=-0.1),
])
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(ConfigError):
        Integrator(_fbm_field(), **kwargs)
