"""
Pytest configuration for the digital rain tests.

- puts the repo root on sys.path so the flat modules import from any cwd
- selects SDL's dummy drivers before pygame is imported, so no window or
  audio device is needed
"""

import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

_repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)

import pygame  # noqa: E402


def pytest_configure(config):
    pygame.init()


def pytest_unconfigure(config):
    pygame.quit()
