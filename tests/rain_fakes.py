"""Test doubles: scripted random source, fixed viewport, recording canvas, renderer and clock."""


class ScriptedRandom:
    """Hands out the given values from random(), in order."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        if not self.values:
            raise AssertionError("scripted random source ran dry")
        return self.values.pop(0)


class FixedViewport:
    """Viewport of a constant size."""

    def __init__(self, width, height):
        self._width = width
        self._height = height

    def width(self):
        return self._width

    def height(self):
        return self._height


class RecordingCanvas:
    """Canvas that records every call as a tuple."""

    def __init__(self):
        self.calls = []

    def fill_rect(self, rect, rgba):
        self.calls.append(("fill_rect", tuple(rect), tuple(rgba)))

    def set_font(self, spec):
        self.calls.append(("set_font", spec))

    def fill_text(self, text, x, y, rgba):
        self.calls.append(("fill_text", text, x, y, tuple(rgba)))

    def resize(self, size):
        self.calls.append(("resize", tuple(size)))

    def names(self):
        return [c[0] for c in self.calls]


class RecordingRenderer:
    def __init__(self):
        self.frames = []
        self.primed = 0

    def prime(self):
        self.primed += 1

    def render_frame(self, positions, glyph_color):
        self.frames.append((tuple(positions), glyph_color))


class NoWaitClock:
    def __init__(self):
        self.calls = 0

    def tick(self, fps):
        self.calls += 1
        return 0
