"""Glyph catalog for the falling columns."""

import math

# Half-width katakana, digits and punctuation. Order matters: the final
# entry is never picked (see GlyphSet.pick_index).
GLYPHS = (
    "日", "ﾊ", "ﾐ", "ﾋ", "ｰ", "ｳ", "ｼ", "ﾅ", "ﾓ", "ﾆ", "ｻ", "ﾜ",
    "ﾂ", "ｵ", "ﾘ", "ｱ", "ﾎ", "ﾃ", "ﾏ", "ｹ", "ﾒ", "ｴ", "ｶ", "ｷ",
    "ﾑ", "ﾕ", "ﾗ", "ｾ", "ﾈ", "ｽ", "ﾀ", "ﾇ", "ﾍ",
    "0", "1", "2", "3", "4", "5", "7", "8", "9",
    "T", "H", "E", "M", "A", "T", "R", "I", "X",
    ":", "・", ".", "=", "*", "+", "-", "<", ">", "¦", "｜",
    "ｸ", "ç", "ﾘ", "Ɛ",
)


class GlyphSet:
    """Immutable, ordered glyph catalog with uniform random selection."""

    def __init__(self, glyphs=GLYPHS):
        glyphs = tuple(glyphs)
        if len(glyphs) < 2:
            raise ValueError("a glyph set needs at least two glyphs")
        self._glyphs = glyphs

    def __len__(self):
        return len(self._glyphs)

    def __getitem__(self, index):
        return self._glyphs[index]

    def pick_index(self, rng):
        # Scales by N - 1, so the index lands in [0, N - 1): the last
        # entry is unreachable.
        return int(math.floor(rng.random() * (len(self._glyphs) - 1)))

    def pick_random(self, rng):
        return self._glyphs[self.pick_index(rng)]
