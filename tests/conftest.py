"""Shared fixtures: headless pygame and the map-points view plugin."""
from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pygame
import pytest

from mappoints.api import AppConfig
from mappoints.app.context import Context
from mappoints.app.loader import load_view_module

ROOT = Path(__file__).resolve().parents[1]
VIEW_ROOT = ROOT / "views" / "map-points"


@pytest.fixture(scope="session", autouse=True)
def headless_pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def make_ctx(tmp_path):
    """Build a Context around an off-screen surface; saved points go to tmp_path."""

    def _make(screen_size=(320, 240), debug=False):
        return Context(
            screen=pygame.Surface(screen_size),
            clock=pygame.time.Clock(),
            cfg=AppConfig(screen_size=screen_size, debug=debug),
            resources={"store_root": tmp_path},
            screen_size=screen_size,
        )

    return _make


@pytest.fixture
def view_module():
    return load_view_module(VIEW_ROOT)
