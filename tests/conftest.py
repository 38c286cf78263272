"""
conftest.py
-----------
Shared pytest configuration and fixtures for Tap to Claim tests.

Contains:
- Headless pygame setup (dummy video/audio drivers)
- Service fixtures with a seeded random source
- Helpers that write small PNG and atlas files into tmp_path
"""

import json
import os
import random

# Must be set before pygame initializes its video subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest
from unittest.mock import MagicMock

from tap_to_claim.core.services.asset_loader import TextureCache
from tap_to_claim.core.services.service_locator import ServiceLocator
from tap_to_claim.graphics.animations.frame_animation import AnimationRegistry


pygame.init()


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def rng():
    """Seeded random source so ambient spawns are reproducible."""
    return random.Random(1234)


@pytest.fixture
def textures():
    return TextureCache()


@pytest.fixture
def services(textures, rng):
    """ServiceLocator wired like MainLoop does, without a window."""
    locator = ServiceLocator(textures=textures, animations=AnimationRegistry())
    locator.register_global("rng", rng)
    locator.register_global("set_cursor", MagicMock())
    return locator


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with common methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    return draw_manager


@pytest.fixture
def asset_dir(tmp_path):
    """
    Asset folder holding every file the Boot and Preload stages declare:
    background, a 4-frame platform sheet and the coin atlas.
    """
    images = tmp_path / "images"
    images.mkdir()
    write_png(images / "bg.png", (1024, 768), (2, 138, 248))
    write_png(images / "platforms.png", (256, 16), (120, 80, 40))
    write_atlas(images / "coin.png", images / "coin.json",
                ["Coin1.png"] + [f"TurningCoin{i}.png" for i in range(1, 5)])
    return tmp_path


# ===========================================================
# Test utilities
# ===========================================================

def write_png(path, size=(32, 32), color=(255, 255, 255)):
    """Save a solid-color PNG and return its path as a string."""
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill((*color, 255))
    pygame.image.save(surface, str(path))
    return str(path)


def write_atlas(texture_path, manifest_path, names, frame_size=32, as_array=False):
    """
    Write a horizontal strip texture plus a TexturePacker-style manifest.

    Args:
        as_array: Use the ``frames: [{filename: ...}]`` layout instead of a hash
    """
    write_png(texture_path, (frame_size * len(names), frame_size), (212, 175, 55))
    rects = {
        name: {"frame": {"x": i * frame_size, "y": 0, "w": frame_size, "h": frame_size}}
        for i, name in enumerate(names)
    }
    if as_array:
        frames = [dict(filename=name, **data) for name, data in rects.items()]
    else:
        frames = rects
    with open(manifest_path, "w", encoding="utf-8") as f:
        json.dump({"frames": frames, "meta": {"image": os.path.basename(str(texture_path))}}, f)
    return str(texture_path), str(manifest_path)


def mouse_event(kind, pos, button=1):
    """Build a pygame mouse event."""
    if kind == pygame.MOUSEMOTION:
        return pygame.event.Event(kind, pos=pos, rel=(0, 0), buttons=(0, 0, 0))
    return pygame.event.Event(kind, pos=pos, button=button)


def click(target, pos):
    """Send down/up at ``pos`` to anything with handle_event()."""
    target.handle_event(mouse_event(pygame.MOUSEBUTTONDOWN, pos))
    target.handle_event(mouse_event(pygame.MOUSEBUTTONUP, pos))


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside tests/scenes as a unit test."""
    for item in items:
        if "scenes" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
