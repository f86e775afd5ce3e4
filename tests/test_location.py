"""Tests for seed point placement."""

import numpy as np
import pytest

from flowforge.errors import ConfigError
from flowforge.location import Location, halton, poisson_disk


def test_grid_count_inclusive():
    pts = Location.GRID.starts(1000, 1000, 50, np.random.RandomState(0))
    assert len(pts) == 21 * 21
    assert pts[:, 0].min() == 0 and pts[:, 0].max() == 1000
    assert pts[:, 1].min() == 0 and pts[:, 1].max() == 1000


def test_grid_non_square():
    pts = Location.GRID.starts(100, 40, 30, np.random.RandomState(0))
    # x in {0, 30, 60, 90}, y in {0, 30}
    assert len(pts) == 4 * 2


@pytest.mark.parametrize("location", [Location.RAND, Location.HALTON,
                                      Location.LISSAJOUS])
@pytest.mark.parametrize("w, h, sep", [(1000, 1000, 50), (640, 480, 33),
                                       (300, 200, 7)])
def test_density_driven_counts(location, w, h, sep):
    pts = location.starts(w, h, sep, np.random.RandomState(1))
    assert abs(len(pts) - (w * h) // (sep * sep)) <= 1


@pytest.mark.parametrize("location", list(Location))
def test_points_inside_canvas(location):
    w, h = 400, 300
    pts = location.starts(w, h, 20, np.random.RandomState(2))
    assert len(pts) > 0
    assert pts.shape[1] == 2
    assert np.all(pts[:, 0] >= -1e-9) and np.all(pts[:, 0] <= w + 1e-9)
    assert np.all(pts[:, 1] >= -1e-9) and np.all(pts[:, 1] <= h + 1e-9)


@pytest.mark.parametrize("location", list(Location))
def test_reproducible_with_same_rng_seed(location):
    a = location.starts(300, 300, 25, np.random.RandomState(4))
    b = location.starts(300, 300, 25, np.random.RandomState(4))
    np.testing.assert_array_equal(a, b)


def test_poisson_minimum_separation():
    radius = 30 / 1.2
    pts = Location.POISSON.starts(300, 200, 30, np.random.RandomState(7))
    diff = pts[:, np.newaxis, :] - pts[np.newaxis, :, :]
    dist = np.hypot(diff[..., 0], diff[..., 1])
    np.fill_diagonal(dist, np.inf)
    assert dist.min() >= radius - 1e-9


def test_poisson_covers_canvas():
    pts = poisson_disk(200, 200, 10.0, np.random.RandomState(3))
    # Blue noise packs far more points than a sparse random scatter.
    assert len(pts) > 150
    hist, _, _ = np.histogram2d(pts[:, 0], pts[:, 1], bins=4,
                                range=[[0, 200], [0, 200]])
    assert hist.min() > 0


def test_halton_radical_inverse():
    assert halton(1, 2) == 0.5
    assert halton(2, 2) == 0.25
    assert halton(3, 2) == 0.75
    assert halton(1, 3) == pytest.approx(1 / 3)
    assert halton(2, 3) == pytest.approx(2 / 3)
    assert halton(3, 3) == pytest.approx(1 / 9)


def test_circle_rings():
    w = h = 600
    pts = Location.CIRCLE.starts(w, h, 10, np.random.RandomState(0))
    radii = np.hypot(pts[:, 0] - w / 2, pts[:, 1] - h / 2)
    for d in (1 / 6, 1 / 3.5, 1 / 2.5):
        assert np.any(np.isclose(radii, d * w))
    assert np.all(np.isclose(radii[:, np.newaxis],
                             np.array([1 / 6, 1 / 3.5, 1 / 2.5]) * w).any(axis=1))
    # Neighbours on the innermost ring are one separation apart.
    inner = pts[np.isclose(radii, w / 6)]
    step = np.hypot(*(inner[1] - inner[0]))
    assert step == pytest.approx(10, rel=1e-3)


@pytest.mark.parametrize("sep", [0, -5])
def test_non_positive_separation_rejected(sep):
    with pytest.raises(ConfigError):
        Location.GRID.starts(100, 100, sep, np.random.RandomState(0))
