"""Curve tracing through a noise field.

Starting from a seed point, a curve repeatedly samples the field
heading and takes a fixed-length step along an exponentially smoothed
version of it::

    theta' = (1 - speed) * theta + speed * pi * field.angle(x1, y1)

``speed = 1`` follows the field exactly; ``speed = 0`` keeps the first
heading forever and draws a straight ray.
"""

import math
from collections import deque, namedtuple
from enum import Enum

import numpy as np

from .errors import ConfigError
from .field import heading


Vertex = namedtuple("Vertex", ["x", "y", "theta"])


class CurveDirection(Enum):
    ONE_SIDED = "one-sided"
    TWO_SIDED = "two-sided"


def _check_finite(points):
    if not np.all(np.isfinite(points)):
        raise ConfigError(
            "Traced curve contains non-finite coordinates; check the "
            "noise parameters and step size")
    return points


class Integrator:
    """Traces curves through a ``NoiseField``.

    Args:
        field: The NoiseField to follow.
        step_size: Distance between consecutive points (>= 0).
        curve_length: Number of integration steps.
        speed: Blend weight toward the freshly sampled heading, in [0, 1].
        width, height: Canvas size the curves are traced on.
    """

    def __init__(self, field, step_size, curve_length, speed=1.0,
                 width=None, height=None):
        if not math.isfinite(step_size) or step_size < 0:
            raise ConfigError(f"step_size must be finite and >= 0, got {step_size}")
        if (not math.isfinite(curve_length) or curve_length < 0
                or int(curve_length) != curve_length):
            raise ConfigError(
                f"curve_length must be a non-negative integer, got {curve_length}")
        if not 0.0 <= speed <= 1.0:
            raise ConfigError(f"speed must be in [0, 1], got {speed}")
        self.field = field
        self.step_size = float(step_size)
        self.curve_length = int(curve_length)
        self.speed = float(speed)
        self.width = width
        self.height = height

    def _blend(self, theta, x, y):
        return (1.0 - self.speed) * theta + self.speed * heading(self.field, x, y)

    def iter_vertices(self, x, y):
        """Yield the ``curve_length + 1`` vertices of a one-sided curve."""
        theta = heading(self.field, x, y)
        v = Vertex(float(x), float(y), theta)
        yield v
        for _ in range(self.curve_length):
            x1 = v.x + self.step_size * math.cos(v.theta)
            y1 = v.y + self.step_size * math.sin(v.theta)
            theta = self._blend(theta, x1, y1)
            v = Vertex(x1, y1, theta)
            yield v

    def trace_one_sided(self, x, y):
        """Trace forward from ``(x, y)``.

        Returns:
            ``(curve_length + 1, 2)`` array whose first row is the seed.
        """
        pts = np.array([(v.x, v.y) for v in self.iter_vertices(x, y)],
                       dtype=np.float64)
        return _check_finite(pts)

    def trace_two_sided(self, x, y):
        """Trace ``curve_length // 2`` steps each way from ``(x, y)``.

        The backward arm steps against the heading and is prepended, so
        the seed ends up in the middle of the returned
        ``(2 * (curve_length // 2) + 1, 2)`` array.
        """
        theta_back = heading(self.field, x, y)
        theta_front = theta_back
        vertices = deque([Vertex(float(x), float(y), theta_back)])

        for _ in range(self.curve_length // 2):
            v_back = vertices[-1]
            v_front = vertices[0]
            xb = v_back.x + self.step_size * math.cos(v_back.theta)
            yb = v_back.y + self.step_size * math.sin(v_back.theta)
            xf = v_front.x + self.step_size * math.cos(math.pi + v_front.theta)
            yf = v_front.y + self.step_size * math.sin(math.pi + v_front.theta)
            theta_back = self._blend(theta_back, xb, yb)
            theta_front = self._blend(theta_front, xf, yf)
            vertices.append(Vertex(xb, yb, theta_back))
            vertices.appendleft(Vertex(xf, yf, theta_front))

        pts = np.array([(v.x, v.y) for v in vertices], dtype=np.float64)
        return _check_finite(pts)

    def trace(self, x, y, direction=CurveDirection.ONE_SIDED):
        if CurveDirection(direction) is CurveDirection.TWO_SIDED:
            return self.trace_two_sided(x, y)
        return self.trace_one_sided(x, y)

    def trace_many(self, points, direction=CurveDirection.ONE_SIDED):
        """Trace every seed in ``points`` at once.

        Applies the same recurrence as ``trace`` element-wise over all
        seeds, sampling the field once per step for the whole batch.

        Args:
            points: ``(n, 2)`` array of seed points.
            direction: CurveDirection.

        Returns:
            ``(n, n_points, 2)`` array; ``curves[i]`` is the curve of
            ``points[i]``.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        two_sided = CurveDirection(direction) is CurveDirection.TWO_SIDED
        steps = self.curve_length // 2 if two_sided else self.curve_length
        n_pts = 2 * steps + 1 if two_sided else steps + 1
        mid = steps if two_sided else 0

        curves = np.empty((len(points), n_pts, 2), dtype=np.float64)
        curves[:, mid] = points
        if len(points) == 0:
            return curves

        x0 = points[:, 0]
        y0 = points[:, 1]
        theta0 = heading(self.field, x0, y0)

        arms = [(1, 0.0)]
        if two_sided:
            arms.append((-1, math.pi))

        for sign, offset in arms:
            x, y, theta = x0, y0, theta0
            for k in range(1, steps + 1):
                x = x + self.step_size * np.cos(offset + theta)
                y = y + self.step_size * np.sin(offset + theta)
                theta = self._blend(theta, x, y)
                curves[:, mid + sign * k, 0] = x
                curves[:, mid + sign * k, 1] = y

        return _check_finite(curves)
