"""
game_settings.py
----------------
Centralized constants for the stage flow, rendering and input.
"""

import os


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Canvas and window configuration."""
    WIDTH: int = 1024
    HEIGHT: int = 768
    FPS: int = 60
    CAPTION: str = "Tap to Claim"
    BACKGROUND_COLOR: str = "#028af8"

    # Upper bound for a single frame delta (seconds)
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DIR: str = os.path.join(PACKAGE_ROOT, "assets", "fonts")
    DEFAULT: str = "PixelOperator.ttf"
    FALLBACK: str = None


# ===========================================================
# Asset Locations
# ===========================================================

class Assets:
    """Root folder that asset paths declared by stages are resolved against."""
    BASE_PATH: str = os.path.join(PACKAGE_ROOT, "assets")


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering and pointer hit-testing."""
    BACKGROUND: int = 0
    AMBIENT: int = 100
    WORLD: int = 300
    UI: int = 600
    MODAL_DIM: int = 700
    MODAL: int = 800


# ===========================================================
# Stage Flow
# ===========================================================

class Stages:
    """Fixed presentation order. Each stage starts the next one itself."""
    BOOT: str = "Boot"
    PRELOAD: str = "Preload"
    MAIN_MENU: str = "MainMenu"
    GAME: str = "Game"
    GAME_OVER: str = "GameOver"

    ORDER = (BOOT, PRELOAD, MAIN_MENU, GAME, GAME_OVER)
