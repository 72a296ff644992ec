"""
Falling columns
----------------------------------------------
A Position is one falling glyph. FallModel holds what a column needs to
move (glyphs, viewport, random source, font size) and produces new
Positions; it never mutates the ones it is given.
"""

import math
from dataclasses import dataclass

SPAWN_LIFT = 50             # px above the spawn band
RESPAWN_OFFSET_DIVISOR = 8  # respawns land in the top eighth
FALL_MIN_FACTOR = 0.75      # fall per tick is [0.75, 1.5) * font size


@dataclass(frozen=True)
class Position:
    glyph: str
    x: int
    y: float
    respawned: bool = False


class FallModel:
    def __init__(self, glyphs, viewport, rng, font_size):
        self.glyphs = glyphs
        self.viewport = viewport
        self.rng = rng
        self.font_size = font_size

    def fall_distance(self):
        base = FALL_MIN_FACTOR * self.font_size
        return base + self.rng.random() * base

    def spawn(self, offset_divisor=1, respawned=False):
        """Fresh position at a random grid column.

        The divisor squeezes the vertical spread: 1 covers the whole
        height, 8 keeps new columns near the top. Both are then lifted by
        SPAWN_LIFT so a column can start above the visible area.
        """
        glyph = self.glyphs.pick_random(self.rng)
        fs = self.font_size
        x = int(math.floor(self.rng.random() * self.viewport.width() / fs)) * fs
        y = self.rng.random() * self.viewport.height() / offset_divisor - SPAWN_LIFT
        return Position(glyph, x, y, respawned)

    def advance(self, position):
        new_y = position.y + self.fall_distance()
        if new_y > self.viewport.height():
            return self.spawn(RESPAWN_OFFSET_DIVISOR, respawned=True)
        # a new glyph shows up at the advanced row every tick
        return Position(self.glyphs.pick_random(self.rng), position.x, new_y)
