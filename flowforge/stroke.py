"""Painting traced curves onto a Pillow canvas."""

import math
from enum import Enum

import numpy as np
from PIL import Image, ImageDraw

from .gradient import gradient_ramp, gradient_stops


class CurveStyle(Enum):
    LINE = "line"
    DOTS = "dots"
    EXTRUSION = "extrusion"


class DotStyle(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    PEARL = "pearl"


def chaikin(points, iterations):
    """Corner-cutting smoothing of a closed polygon."""
    pts = np.asarray(points, dtype=np.float64)
    for _ in range(iterations):
        nxt = np.roll(pts, -1, axis=0)
        q = 0.75 * pts + 0.25 * nxt
        r = 0.25 * pts + 0.75 * nxt
        pts = np.stack([q, r], axis=1).reshape(-1, 2)
    return pts


def pearl_polygon(cx, cy, radius, sides, smoothness, rng):
    """A pebble-like blob: a jittered polygon rounded by Chaikin passes."""
    start = rng.uniform(0, 2 * math.pi)
    pts = []
    for i in range(sides):
        a = start + 2 * math.pi * i / sides + rng.uniform(-0.2, 0.2)
        r = radius * rng.uniform(0.85, 1.15)
        pts.append((cx + r * math.cos(a), cy + r * math.sin(a)))
    return chaikin(pts, smoothness)


class StrokeRenderer:
    """Draws curves onto an RGB ``PIL.Image`` in place.

    Args:
        image: Target canvas.
        stroke_width: Line width for LINE curves, dot outlines and
            extrusion strips.
    """

    def __init__(self, image, stroke_width=1.0):
        self.image = image
        self.stroke_width = stroke_width
        self.draw = ImageDraw.Draw(image)

    def draw_line(self, curve, color):
        if len(curve) < 2 or self.stroke_width <= 0:
            return
        width = max(1, int(round(self.stroke_width)))
        self.draw.line([tuple(p) for p in curve], fill=tuple(color),
                       width=width, joint="curve")

    def draw_dots(self, curve, color, size_fn, dot_style=DotStyle.CIRCLE,
                  stroke_color=(255, 255, 255), rng=None, pearl_sides=4,
                  pearl_smoothness=3):
        """Stamp one dot per curve point, sized by ``size_fn``."""
        dot_style = DotStyle(dot_style)
        outline = tuple(stroke_color) if self.stroke_width > 0 else None
        width = max(1, int(round(self.stroke_width))) if outline else 0

        for x, y in curve:
            r = size_fn(x, y)
            if r <= 0:
                continue
            if dot_style is DotStyle.PEARL:
                poly = pearl_polygon(x, y, r, pearl_sides, pearl_smoothness,
                                     rng)
                self.draw.polygon([tuple(p) for p in poly], fill=tuple(color),
                                  outline=outline, width=width)
            elif dot_style is DotStyle.SQUARE:
                self.draw.rectangle([x - r, y - r, x + r, y + r],
                                    fill=tuple(color), outline=outline,
                                    width=width)
            else:
                self.draw.ellipse([x - r, y - r, x + r, y + r],
                                  fill=tuple(color), outline=outline,
                                  width=width)

    def draw_extrusion(self, curve, color, size_fn, grad_style, rng):
        """Paint a vertical gradient strip of half-height ``size_fn`` at
        every curve point."""
        w, h = self.image.size
        strip_w = max(1, int(round(self.stroke_width)))

        for x, y in curve:
            r = size_fn(x, y)
            y0 = int(math.floor(y - r))
            y1 = int(math.ceil(y + r))
            x0 = int(math.floor(x - strip_w / 2.0))
            n = y1 - y0
            if n <= 0:
                continue
            ramp = gradient_ramp(gradient_stops(color, grad_style, rng), n)

            # Clip the strip to the canvas.
            top = max(0, -y0)
            bottom = n - max(0, y1 - h)
            left = max(0, -x0)
            right = strip_w - max(0, x0 + strip_w - w)
            if bottom <= top or right <= left:
                continue
            strip = np.repeat(ramp[top:bottom, np.newaxis, :],
                              right - left, axis=1)
            self.image.paste(Image.fromarray(strip, 'RGB'),
                             (x0 + left, y0 + top))

    def draw_border(self, color, width=20):
        w, h = self.image.size
        # Half the stroke falls outside the canvas.
        self.draw.rectangle([0, 0, w - 1, h - 1], outline=tuple(color),
                            width=max(1, width // 2))
