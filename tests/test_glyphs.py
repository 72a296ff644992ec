"""Tests for the glyph catalog."""

import unittest

import numpy as np

from rain_glyphs import GLYPHS, GlyphSet
from rain_fakes import ScriptedRandom


class TestGlyphSet(unittest.TestCase):

    def setUp(self):
        self.glyphs = GlyphSet()

    def test_default_catalog(self):
        self.assertEqual(len(self.glyphs), 66)
        self.assertEqual(self.glyphs[0], "日")
        self.assertEqual(self.glyphs[-1], "Ɛ")

    def test_pick_is_from_catalog(self):
        rng = np.random.default_rng(7)
        for _ in range(500):
            self.assertIn(self.glyphs.pick_random(rng), GLYPHS)

    def test_index_bounds(self):
        self.assertEqual(self.glyphs.pick_index(ScriptedRandom([0.0])), 0)
        self.assertEqual(self.glyphs.pick_index(ScriptedRandom([0.9999999])), 64)

    def test_last_entry_never_drawn(self):
        """100k draws reach every index but the last one."""
        rng = np.random.default_rng(2024)
        counts = np.bincount(
            [self.glyphs.pick_index(rng) for _ in range(100_000)],
            minlength=len(self.glyphs),
        )
        self.assertTrue(np.all(counts[:-1] > 0))
        self.assertEqual(counts[-1], 0)

    def test_two_glyph_set_always_picks_first(self):
        pair = GlyphSet("ab")
        rng = np.random.default_rng(3)
        self.assertEqual({pair.pick_random(rng) for _ in range(200)}, {"a"})

    def test_needs_two_glyphs(self):
        with self.assertRaises(ValueError):
            GlyphSet("a")
        with self.assertRaises(ValueError):
            GlyphSet([])


if __name__ == "__main__":
    unittest.main()
