"""Main flow-field rendering pipeline.

One draw pass fills a procedural background, builds the noise field
and integrator, places seed points, then traces and paints one curve
per seed and finishes with an optional border.
"""

import logging
import time

import numpy as np
from PIL import Image

from .background import make_background, tile
from .color import ColorMode, Palette, darken
from .config import FlowConfig
from .errors import ConfigError
from .field import NoiseField
from .integrator import Integrator
from .size import SizeFunction
from .stroke import CurveStyle, StrokeRenderer

logger = logging.getLogger(__name__)

# Seeds traced together per numpy batch.
BATCH_SIZE = 512

# Independent random streams of a draw pass, in derivation order.
_STREAMS = ("background", "field", "seeds", "paint")


def _split_rng(seed):
    """Derive one RandomState per pipeline stage from a single seed.

    Stages draw from their own streams so that, for example, the curves
    of a pass do not depend on how much randomness the background used.
    """
    master = np.random.RandomState(seed)
    return {name: np.random.RandomState(master.randint(0, 2**31))
            for name in _STREAMS}


def _resolve_seed(config, seed):
    """An explicit ``seed`` wins over the one carried by ``config``."""
    seed = config.seed if seed is None else seed
    if not 0 <= seed < 2**32 or int(seed) != seed:
        raise ConfigError(f"seed must be an integer in [0, 2**32), got {seed}")
    return int(seed)


def build_field(config, rng):
    return NoiseField.build(
        config.noise, config.width, config.height,
        scale=config.noise_scale, factor=config.noise_factor,
        fractal=config.fractal(), sine=config.sine(), rng=rng,
        sink_count=config.sink_count, sink_placement=config.sink_placement,
        seed=config.noise_seed,
    )


def build_integrator(config, field):
    return Integrator(field, config.spacing, config.curve_length,
                      config.speed, config.width, config.height)


def build_palette(config):
    if config.color_mode is ColorMode.PALETTE:
        return Palette.named(config.palette)
    return Palette.scale(config.anchor1, config.anchor2,
                         hue_path=config.hue_path)


def build_size_fn(config):
    return SizeFunction(config.size_fn, config.width, config.height,
                        config.size, config.size_dir, config.size_scale,
                        config.min_size)


def _seed_points(config, rng):
    return config.location.starts(config.width, config.height,
                                  config.seed_separation(), rng)


def _iter_curves(integrator, starts, direction):
    for i in range(0, len(starts), BATCH_SIZE):
        yield from integrator.trace_many(starts[i:i + BATCH_SIZE], direction)


def trace_curves(config=None, seed=None):
    """Trace every curve of a draw pass without rasterizing.

    Produces the same curves that ``render`` paints for the same config
    and seed.

    Returns:
        List of ``(n_points, 2)`` arrays, one per seed point.
    """
    config = (config or FlowConfig()).validate()
    rngs = _split_rng(_resolve_seed(config, seed))
    integrator = build_integrator(config, build_field(config, rngs["field"]))
    starts = _seed_points(config, rngs["seeds"])
    return list(_iter_curves(integrator, starts, config.curve_direction))


def render(config=None, seed=None):
    """Render a flow-field image.

    Args:
        config: FlowConfig instance (defaults used if None).
        seed: Random seed; defaults to ``config.seed``.

    Returns:
        PIL Image in RGB mode.
    """
    config = (config or FlowConfig()).validate()
    seed = _resolve_seed(config, seed)
    rngs = _split_rng(seed)
    w, h = config.width, config.height

    # --- Pipeline ---

    # 1. Background texture
    t0 = time.perf_counter()
    tw = min(w, config.texture_tile or w)
    th = min(h, config.texture_tile or h)
    texture = make_background(config.background, tw, th, rngs["background"],
                              config.grain_color)
    canvas = Image.fromarray(tile(texture, w, h), 'RGB')
    logger.debug("background %s in %.2fs", config.background.value,
                 time.perf_counter() - t0)

    # 2. Flow field and integrator
    field = build_field(config, rngs["field"])
    integrator = build_integrator(config, field)

    # 3. Seed points
    starts = _seed_points(config, rngs["seeds"])
    logger.debug("%d seeds from %s", len(starts), config.location.value)

    # 4. Curves
    t0 = time.perf_counter()
    paint = rngs["paint"]
    palette = build_palette(config)
    size_fn = build_size_fn(config)
    strokes = StrokeRenderer(canvas, config.stroke_width)

    for curve in _iter_curves(integrator, starts, config.curve_direction):
        color = palette.rand_color(paint)
        if config.curve_style is CurveStyle.LINE:
            strokes.draw_line(curve, color)
        elif config.curve_style is CurveStyle.DOTS:
            strokes.draw_dots(curve, color, size_fn, config.dot_style,
                              config.dot_stroke_color, paint,
                              config.pearl_sides, config.pearl_smoothness)
        else:
            strokes.draw_extrusion(curve, color, size_fn, config.grad_style,
                                   paint)
    logger.debug("curves in %.2fs", time.perf_counter() - t0)

    # 5. Border
    if config.border:
        strokes.draw_border(darken(palette.rand_color(paint), 0.25),
                            config.border_width)

    logger.info("Rendered %dx%d %s field, %d curves (seed %d)",
                w, h, config.noise.value, len(starts), seed)
    return canvas
