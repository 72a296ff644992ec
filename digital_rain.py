"""
Digital Rain
----------------------------------------------
Columns of katakana, digits and symbols streaming down a pygame window.

    python digital_rain.py --fps 30 --count 60

Close the window (or pass --frames N) to stop.
"""

import argparse
import logging
import os
import sys

import numpy as np

from rain_config import RainConfig, parse_color
from rain_glyphs import GlyphSet
from rain_columns import FallModel
from rain_display import DisplayWindow, SurfaceUnavailableError
from rain_renderer import PygameCanvas, Renderer
from rain_driver import AnimationDriver

logger = logging.getLogger("digital_rain")

LOG_LEVEL_ENV = "DIGITAL_RAIN_LOG_LEVEL"
DEFAULTS = RainConfig()


# -------- Argument parsing --------

def _window_size(text):
    try:
        w, h = (int(v) for v in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError("window size must be positive")
    return (w, h)


def _color(text):
    try:
        return parse_color(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _parse_args():
    parser = argparse.ArgumentParser(description="Render the digital rain effect.")
    parser.add_argument("-n", "--count", type=int, default=DEFAULTS.max_symbol_count,
                        help=f"Number of falling columns (default: {DEFAULTS.max_symbol_count})")
    parser.add_argument("--font-size", type=int, default=DEFAULTS.symbol_font_size,
                        help=f"Glyph size in px (default: {DEFAULTS.symbol_font_size})")
    parser.add_argument("--font-family", default=DEFAULTS.symbol_font_family,
                        help="Comma separated SysFont names, first installed one wins")
    parser.add_argument("--fps", type=int, default=DEFAULTS.frame_rate_per_second,
                        help=f"Ticks per second (default: {DEFAULTS.frame_rate_per_second})")
    parser.add_argument("--fade-rate", type=float, default=DEFAULTS.symbol_alpha_fade_rate,
                        help=f"Alpha of the per-frame wash (default: {DEFAULTS.symbol_alpha_fade_rate})")
    parser.add_argument("--foreground", type=_color, default=DEFAULTS.symbol_color_foreground,
                        help="Bright glyph color as r,g,b (default: 0,255,0)")
    parser.add_argument("--fade-color", type=_color, default=DEFAULTS.symbol_color_fade,
                        help="Trail glyph color as r,g,b (default: 255,255,255)")
    parser.add_argument("--background", type=_color, default=DEFAULTS.canvas_background_color,
                        help="Background color as r,g,b (default: 0,0,0)")
    parser.add_argument("--size", type=_window_size, default=None,
                        help="Window size as WxH (default: 1024x768)")
    parser.add_argument("--fullscreen", action="store_true",
                        help="Use the whole screen instead of a window")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random source")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--log-level", type=str.upper, default=os.getenv(LOG_LEVEL_ENV, "INFO"),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help=f"Logging level (default: ${LOG_LEVEL_ENV} or INFO)")
    return parser


def config_from_args(args):
    return RainConfig(
        max_symbol_count=args.count,
        symbol_alpha_fade_rate=args.fade_rate,
        symbol_font_size=args.font_size,
        symbol_font_family=args.font_family,
        symbol_color_foreground=args.foreground,
        symbol_color_fade=args.fade_color,
        canvas_background_color=args.background,
        frame_rate_per_second=args.fps,
    )


# -------- Wiring --------

def build_driver(config, window, rng):
    canvas = PygameCanvas(window.surface)
    renderer = Renderer(config, canvas, window)

    def rebind(size):
        canvas.surface = window.surface

    window.on_resize(rebind)
    window.on_resize(renderer.resize)
    model = FallModel(GlyphSet(), window, rng, config.symbol_font_size)
    return AnimationDriver(config, model, renderer, window=window)


def main(argv=None):
    parser = _parse_args()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    window = DisplayWindow(size=args.size, fullscreen=args.fullscreen)
    try:
        window.open()
        driver = build_driver(config, window, np.random.default_rng(args.seed))
        driver.run(max_ticks=args.frames)
    except SurfaceUnavailableError as e:
        logger.error("cannot start: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("interrupted")
    finally:
        window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
