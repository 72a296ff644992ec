"""
Display window
----------------------------------------------
Owns the pygame window: acquiring it, reporting its size, telling
listeners when it is resized and flipping finished frames to the screen.
"""

import logging

import pygame
from pygame.locals import QUIT, VIDEORESIZE, RESIZABLE, FULLSCREEN

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = (1024, 768)


class SurfaceUnavailableError(RuntimeError):
    """No drawing surface could be obtained; the rain cannot run."""


class DisplayWindow:
    def __init__(self, size=None, fullscreen=False, caption="Digital Rain"):
        self.size = size or DEFAULT_WINDOW_SIZE
        self.fullscreen = fullscreen
        self.caption = caption
        self.surface = None
        self._resize_callbacks = []

    def open(self):
        try:
            pygame.init()
            if self.fullscreen:
                surface = pygame.display.set_mode((0, 0), FULLSCREEN)
            else:
                surface = pygame.display.set_mode(self.size, RESIZABLE)
            pygame.display.set_caption(self.caption)
        except pygame.error as e:
            raise SurfaceUnavailableError(f"could not open a display surface: {e}") from e
        if surface is None:
            raise SurfaceUnavailableError("pygame returned no display surface")
        self.surface = surface
        logger.info("display opened at %dx%d", *surface.get_size())
        return surface

    def _require_surface(self):
        if self.surface is None:
            raise SurfaceUnavailableError("display window is not open")
        return self.surface

    # -------- Viewport --------

    def width(self):
        return self._require_surface().get_width()

    def height(self):
        return self._require_surface().get_height()

    # -------- Resize notifier --------

    def on_resize(self, callback):
        """Register ``callback(size)``; it also fires once right away."""
        self._resize_callbacks.append(callback)
        callback(self._require_surface().get_size())

    def _notify_resize(self):
        # pygame 2 has already resized the display surface by now
        self.surface = pygame.display.get_surface()
        size = self.surface.get_size()
        logger.debug("window resized to %dx%d", *size)
        for callback in self._resize_callbacks:
            callback(size)

    # -------- Frame presentation --------

    def present(self):
        pygame.display.flip()

    def pump(self):
        """Drain pending events. Returns False once the window was closed."""
        keep_running = True
        for event in pygame.event.get():
            if event.type == QUIT:
                keep_running = False
            elif event.type == VIDEORESIZE:
                self._notify_resize()
        return keep_running

    def close(self):
        pygame.quit()
        self.surface = None
