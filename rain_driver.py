"""
Animation driver
----------------------------------------------
Two ticks make one visible frame:

  even tick  advance every column, draw the pool in the fade color
  odd tick   redraw the same pool in the foreground color

so the bright glyph always sits on top of its own fading trail. Columns
advance at half the tick rate.
"""

import logging

import pygame

from rain_pool import create_pool, advance_all

logger = logging.getLogger(__name__)


class AnimationDriver:
    def __init__(self, config, model, renderer, window=None, clock=None):
        self.config = config
        self.model = model
        self.renderer = renderer
        self.window = window
        self.clock = clock if clock is not None else pygame.time.Clock()
        self._pool = create_pool(model, config.max_symbol_count)
        self.frame_number = 0
        self.running = False

    @property
    def pool(self):
        return self._pool

    def tick(self, frame_number):
        cfg = self.config
        if frame_number % 2 == 0:
            self._pool = advance_all(self.model, self._pool)
            self.renderer.render_frame(self._pool, cfg.symbol_color_fade)
        else:
            self.renderer.render_frame(self._pool, cfg.symbol_color_foreground)

    def stop(self):
        self.running = False

    def run(self, max_ticks=None):
        """Tick until stopped, the window closes or ``max_ticks`` ran.

        Returns the number of ticks executed.
        """
        fps = self.config.frame_rate_per_second
        self.renderer.prime()
        self.running = True
        self.frame_number = 0
        logger.info("rain started: %d columns, %d ticks/s",
                    len(self._pool), fps)

        while self.running:
            if max_ticks is not None and self.frame_number >= max_ticks:
                break
            # returns at least 1000 / fps ms after its previous return
            self.clock.tick(fps)
            self.tick(self.frame_number)
            self.frame_number += 1

            if self.window is not None:
                self.window.present()
                if not self.window.pump():
                    self.stop()

        self.running = False
        logger.info("rain stopped after %d ticks", self.frame_number)
        return self.frame_number
