"""
Digital rain configuration
----------------------------------------------
Colors and the read-only settings record shared by every part of a run.
"""

from dataclasses import dataclass, field


# -------- Colors --------

@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    alpha: float = None

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            v = getattr(self, name)
            if not 0 <= v <= 255:
                raise ValueError(f"{name} must be in 0..255, got {v}")
        if self.alpha is not None and not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in 0..1, got {self.alpha}")

    def with_alpha(self, alpha):
        return Color(self.red, self.green, self.blue, alpha)

    def effective_alpha(self):
        # zero counts as unset
        return self.alpha or 1.0

    def rgba(self):
        """Return an (r, g, b, a) tuple with alpha scaled to 0..255 for pygame."""
        return (self.red, self.green, self.blue,
                int(round(self.effective_alpha() * 255)))


def parse_color(text):
    """Parse ``"r,g,b"`` or ``"r,g,b,a"`` into a Color."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(f"expected r,g,b or r,g,b,a, got {text!r}")
    try:
        r, g, b = (int(p) for p in parts[:3])
        a = float(parts[3]) if len(parts) == 4 else None
    except ValueError:
        raise ValueError(f"bad color component in {text!r}") from None
    return Color(r, g, b, a)


# -------- Settings --------

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
GREEN = Color(0, 255, 0)

# comma separated so SysFont can fall through to whatever is installed
DEFAULT_FONT_FAMILY = "notosanscjkjp,msgothic,dejavusansmono,monospace"


@dataclass(frozen=True)
class RainConfig:
    max_symbol_count: int = 60
    symbol_alpha_fade_rate: float = 0.05
    symbol_font_size: int = 16
    symbol_font_family: str = DEFAULT_FONT_FAMILY
    symbol_color_foreground: Color = field(default=GREEN)
    symbol_color_fade: Color = field(default=WHITE)
    canvas_background_color: Color = field(default=BLACK)
    frame_rate_per_second: int = 30

    def __post_init__(self):
        if self.max_symbol_count <= 0:
            raise ValueError("max_symbol_count must be positive")
        if not 0.0 <= self.symbol_alpha_fade_rate <= 1.0:
            raise ValueError("symbol_alpha_fade_rate must be in 0..1")
        if self.symbol_font_size <= 0:
            raise ValueError("symbol_font_size must be positive")
        if self.frame_rate_per_second <= 0:
            raise ValueError("frame_rate_per_second must be positive")

    def font_spec(self):
        return f"{self.symbol_font_size}px {self.symbol_font_family}"

    def wash_color(self):
        """Background color at the fade rate, painted before every frame."""
        return self.canvas_background_color.with_alpha(self.symbol_alpha_fade_rate)
