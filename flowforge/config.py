"""Parameter bundle for a draw pass."""

import math
from dataclasses import dataclass, fields

from .background import Background
from .color import ColorMode, Palettes
from .errors import ConfigError
from .field import FractalParams, NoiseKind, SineParams
from .gradient import GradStyle
from .integrator import CurveDirection
from .location import Location
from .presets import PRESETS
from .size import Dir, SizeFn
from .stroke import CurveStyle, DotStyle


# Fields holding enum selections, with the enum each one accepts.
_ENUM_FIELDS = {
    "curve_style": CurveStyle,
    "curve_direction": CurveDirection,
    "location": Location,
    "noise": NoiseKind,
    "background": Background,
    "color_mode": ColorMode,
    "palette": Palettes,
    "dot_style": DotStyle,
    "size_fn": SizeFn,
    "size_dir": Dir,
    "grad_style": GradStyle,
}


@dataclass
class FlowConfig:
    """Configuration for a flow-field rendering.

    Enum fields also accept their string values (``noise="curl"``).
    """

    # Randomness: seeds placement, grain and colour picks of a draw pass
    seed: int = 98713

    # Canvas
    width: int = 1000
    height: int = 1000
    border: bool = True
    border_width: int = 20

    # Curves
    curve_style: CurveStyle = CurveStyle.DOTS
    curve_direction: CurveDirection = CurveDirection.ONE_SIDED
    spacing: float = 4.0
    curve_length: int = 50
    speed: float = 1.0
    stroke_width: float = 1.0

    # Seed placement
    location: Location = Location.HALTON
    density: float = 50.0

    # Flow field
    noise: NoiseKind = NoiseKind.FBM
    noise_scale: float = 4.0
    noise_factor: float = 1.0
    noise_seed: int = 0
    octaves: int = 4
    persistence: float = 0.5
    lacunarity: float = 2.094395
    frequency: float = 1.0
    xfreq: float = 1.0
    yfreq: float = 1.0
    xexp: float = 2.0
    yexp: float = 2.0
    sink_count: int = 3
    sink_placement: str = "random"

    # Background
    background: Background = Background.LIGHT_GRAIN
    grain_color: tuple = (128, 128, 128)
    texture_tile: int = None

    # Colour
    color_mode: ColorMode = ColorMode.SCALE
    anchor1: tuple = (20, 134, 187)
    anchor2: tuple = (0, 0, 0)
    palette: Palettes = Palettes.ROYALTY
    hue_path: str = "direct"

    # Dots
    dot_style: DotStyle = DotStyle.CIRCLE
    dot_stroke_color: tuple = (255, 255, 255)
    pearl_sides: int = 4
    pearl_smoothness: int = 3

    # Dot and extrusion sizing
    size_fn: SizeFn = SizeFn.CONTRACTING
    size: float = 100.0
    size_dir: Dir = Dir.BOTH
    size_scale: float = 10.0
    min_size: float = 25.0

    # Extrusion
    grad_style: GradStyle = GradStyle.PLAIN

    def __post_init__(self):
        for name, enum in _ENUM_FIELDS.items():
            value = getattr(self, name)
            if value is None:
                raise ConfigError(f"{name} must be set")
            try:
                setattr(self, name, enum(value))
            except ValueError:
                choices = ", ".join(e.value for e in enum)
                raise ConfigError(
                    f"Invalid {name} {value!r}; choose from: {choices}"
                ) from None

    @classmethod
    def from_preset(cls, name, **overrides):
        """Build a config from a named preset, then apply ``overrides``."""
        key = name.replace("-", "_").lower()
        if key not in PRESETS:
            raise ConfigError(
                f"Unknown preset {name!r}; choose from: {', '.join(PRESETS)}")
        params = dict(PRESETS[key])
        params.update(overrides)
        return cls(**params)

    def fractal(self):
        return FractalParams(self.octaves, self.persistence,
                             self.lacunarity, self.frequency)

    def sine(self):
        return SineParams(self.xfreq, self.yfreq, self.xexp, self.yexp)

    def seed_separation(self):
        """Distance between curve seeds; higher density packs them closer."""
        return max(1.0, 105.0 - self.density)

    def validate(self):
        """Reject bundles the renderer cannot draw.

        Raises:
            ConfigError: On the first invalid parameter.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"Canvas must be non-empty, got {self.width}x{self.height}")
        for name in ("spacing", "speed", "stroke_width", "density",
                     "noise_scale", "noise_factor", "size", "size_scale",
                     "min_size", "xfreq", "yfreq", "xexp", "yexp"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigError(f"{name} must be finite")
        if self.spacing < 0:
            raise ConfigError(f"spacing must be >= 0, got {self.spacing}")
        if (not math.isfinite(self.curve_length) or self.curve_length < 0
                or int(self.curve_length) != self.curve_length):
            raise ConfigError(
                f"curve_length must be a non-negative integer, "
                f"got {self.curve_length}")
        if not 0 <= self.seed < 2**32 or int(self.seed) != self.seed:
            raise ConfigError(f"seed must be an integer in [0, 2**32), got {self.seed}")
        if not 0.0 <= self.speed <= 1.0:
            raise ConfigError(f"speed must be in [0, 1], got {self.speed}")
        if self.stroke_width < 0:
            raise ConfigError("stroke_width must be >= 0")
        if not 5.0 <= self.density <= 100.0:
            raise ConfigError(f"density must be in [5, 100], got {self.density}")
        if self.size < 0 or self.min_size < 0:
            raise ConfigError("size and min_size must be >= 0")
        if self.noise_scale <= 0:
            raise ConfigError("noise_scale must be positive")
        if not 3 <= self.pearl_sides <= 8:
            raise ConfigError("pearl_sides must be in 3..8")
        if not 0 <= self.pearl_smoothness <= 5:
            raise ConfigError("pearl_smoothness must be in 0..5")
        if self.sink_placement not in ("random", "quadrants"):
            raise ConfigError(
                f"sink_placement must be 'random' or 'quadrants', "
                f"got {self.sink_placement!r}")
        if self.hue_path not in ("direct", "shortest"):
            raise ConfigError(
                f"hue_path must be 'direct' or 'shortest', got {self.hue_path!r}")
        if self.texture_tile is not None and self.texture_tile <= 0:
            raise ConfigError("texture_tile must be positive")
        for name in ("grain_color", "anchor1", "anchor2", "dot_stroke_color"):
            color = getattr(self, name)
            if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
                raise ConfigError(f"{name} must be three values in 0-255")
        if self.noise in (NoiseKind.FBM, NoiseKind.BILLOW, NoiseKind.RIDGED):
            self.fractal().validate()
        return self

    def to_dict(self):
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[f.name] = value.value if f.name in _ENUM_FIELDS else value
        return out
