"""CLI entry point for FlowForge."""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import generate
from .background import Background
from .color import Palettes
from .config import FlowConfig
from .errors import ConfigError
from .field import NoiseKind
from .location import Location
from .presets import PRESETS
from .stroke import CurveStyle


def _choices(enum):
    return [e.value for e in enum]


def main():
    parser = argparse.ArgumentParser(
        description="Render flow-field art from curves traced through noise"
    )
    parser.add_argument(
        "--preset", "-p", choices=sorted(PRESETS), default=None,
        help="Start from a named preset"
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed (default: 98713)"
    )
    parser.add_argument(
        "--output", "-o", default="flow.png",
        help="Output file path (default: flow.png)"
    )
    parser.add_argument("--width", "-W", type=int, default=None,
                        help="Canvas width in pixels (default: 1000)")
    parser.add_argument("--height", "-H", type=int, default=None,
                        help="Canvas height in pixels (default: 1000)")
    parser.add_argument("--noise", "-n", choices=_choices(NoiseKind),
                        default=None, help="Flow field noise kind")
    parser.add_argument("--location", "-l", choices=_choices(Location),
                        default=None, help="Seed point placement")
    parser.add_argument("--style", choices=_choices(CurveStyle), default=None,
                        help="Curve drawing style")
    parser.add_argument("--background", "-b", choices=_choices(Background),
                        default=None, help="Background texture")
    parser.add_argument("--palette", choices=_choices(Palettes), default=None,
                        help="Use a named palette instead of a colour scale")
    parser.add_argument(
        "--anchors", nargs=6, type=int, default=None,
        metavar=("R1", "G1", "B1", "R2", "G2", "B2"),
        help="Anchor colours for the colour scale"
    )
    parser.add_argument("--curve-length", type=int, default=None,
                        help="Integration steps per curve")
    parser.add_argument("--spacing", type=float, default=None,
                        help="Step size between curve points")
    parser.add_argument("--speed", type=float, default=None,
                        help="Convergence speed 0.0-1.0")
    parser.add_argument("--density", type=float, default=None,
                        help="Seed density 5-100")
    parser.add_argument("--two-sided", action="store_true",
                        help="Grow curves in both directions from each seed")
    parser.add_argument("--no-border", action="store_true",
                        help="Skip the frame around the canvas")
    parser.add_argument("--show-config", action="store_true",
                        help="Print the resolved parameters and exit")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log progress (-vv for debug output)")

    args = parser.parse_args()

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level,
                        format="%(levelname)s %(name)s: %(message)s")

    kwargs = {}
    for name in ("width", "height", "noise", "location", "background",
                 "curve_length", "spacing", "speed", "density"):
        value = getattr(args, name)
        if value is not None:
            kwargs[name] = value
    if args.style:
        kwargs["curve_style"] = args.style
    if args.palette:
        kwargs["color_mode"] = "palette"
        kwargs["palette"] = args.palette
    if args.anchors:
        kwargs["color_mode"] = "scale"
        kwargs["anchor1"] = tuple(args.anchors[:3])
        kwargs["anchor2"] = tuple(args.anchors[3:])
    if args.two_sided:
        kwargs["curve_direction"] = "two-sided"
    if args.no_border:
        kwargs["border"] = False

    try:
        if args.show_config:
            if args.preset:
                config = FlowConfig.from_preset(args.preset, **kwargs)
            else:
                config = FlowConfig(**kwargs)
            print(json.dumps(config.validate().to_dict(), indent=2))
            return
        image = generate(preset=args.preset, seed=args.seed, **kwargs)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output))
    print(f"Saved flow field ({image.size[0]}x{image.size[1]}) to {output}")


if __name__ == "__main__":
    main()
