"""FlowForge - Flow-field generative art from traced noise curves."""

from .config import FlowConfig
from .errors import ConfigError
from .renderer import render, trace_curves

__version__ = "0.1.0"
__all__ = ["generate", "render", "trace_curves", "FlowConfig", "ConfigError"]


def generate(preset=None, seed=None, **kwargs):
    """Generate a flow-field image.

    Args:
        preset: Optional preset name (``"solar"``, ``"canyon"``, ...).
            Keyword arguments override the preset's values.
        seed: Random seed; defaults to the config's ``seed``.
        **kwargs: FlowConfig parameters (noise, location, curve_style,
            width, height, palette, etc.).

    Returns:
        PIL Image in RGB mode.
    """
    if preset is not None:
        config = FlowConfig.from_preset(preset, **kwargs)
    else:
        config = FlowConfig(**kwargs)
    return render(config, seed=seed)
