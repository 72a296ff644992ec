"""
Rain renderer
----------------------------------------------
Draws a pool of positions onto a canvas. Every frame starts with a
translucent wash in the background color, so earlier glyphs are dimmed
rather than erased and leave a trail behind each column.
"""

import logging

import pygame

from rain_display import SurfaceUnavailableError

logger = logging.getLogger(__name__)


# -------- Canvas adapter --------

def parse_font_spec(spec):
    """Split ``"16px family[,family...]"`` into (16, "family[,family...]")."""
    size_text, _, family = spec.strip().partition(" ")
    if not size_text.endswith("px"):
        raise ValueError(f"font size must be given in px, got {spec!r}")
    return int(size_text[:-2]), family.strip() or None


class PygameCanvas:
    """Minimal 2D drawing context over a pygame Surface.

    Coordinates for text are baseline-anchored, like an HTML canvas.
    """

    def __init__(self, surface):
        self.surface = surface
        self._fonts = {}
        self._font = None
        self._layers = {}

    def fill_rect(self, rect, rgba):
        rect = pygame.Rect(rect)
        if rgba[3] >= 255:
            self.surface.fill(rgba[:3], rect)
            return
        # plain fill() ignores alpha on the display surface, so blend a layer
        key = (rect.size, tuple(rgba))
        layer = self._layers.get(key)
        if layer is None:
            layer = pygame.Surface(rect.size, pygame.SRCALPHA)
            layer.fill(rgba)
            self._layers[key] = layer
        self.surface.blit(layer, rect.topleft)

    def set_font(self, spec):
        """Select a font from a canvas-style spec such as ``"16px monospace"``."""
        font = self._fonts.get(spec)
        if font is None:
            size, family = parse_font_spec(spec)
            try:
                if not pygame.font.get_init():
                    pygame.font.init()
                font = pygame.font.SysFont(family, size)
            except pygame.error as e:
                raise SurfaceUnavailableError(f"font system unavailable: {e}") from e
            self._fonts[spec] = font
        self._font = font

    def fill_text(self, text, x, y, rgba):
        if self._font is None:
            raise RuntimeError("set_font() must be called before fill_text()")
        img = self._font.render(text, True, rgba[:3])
        if rgba[3] < 255:
            img.set_alpha(rgba[3])
        self.surface.blit(img, (x, y - self._font.get_ascent()))

    def resize(self, size):
        self._layers.clear()


# -------- Renderer --------

class Renderer:
    def __init__(self, config, canvas, viewport):
        self.config = config
        self.canvas = canvas
        self.viewport = viewport
        self._wash = config.wash_color().rgba()
        self._backdrop = config.canvas_background_color.with_alpha(1.0).rgba()

    def _full_rect(self):
        return (0, 0, self.viewport.width(), self.viewport.height())

    def prime(self):
        """Paint the opaque background once, before the first frame."""
        self.canvas.fill_rect(self._full_rect(), self._backdrop)

    def render_frame(self, positions, glyph_color):
        cfg = self.config
        canvas = self.canvas
        canvas.fill_rect(self._full_rect(), self._wash)

        canvas.set_font(cfg.font_spec())
        rgba = glyph_color.rgba()
        for p in positions:
            canvas.fill_text(p.glyph, p.x, p.y, rgba)

    def resize(self, size):
        logger.debug("renderer resized to %dx%d", size[0], size[1])
        self.canvas.resize(size)
