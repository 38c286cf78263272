"""
service_locator.py
------------------
Centralized access to the game-wide services a stage may use.
Passed to every stage at construction; stages never reach for globals.
"""

from typing import Any


# ===========================================================
# Service Locator
# ===========================================================


class ServiceLocator:
    """Container for game-wide services plus a small named registry."""

    __slots__ = (
        "stage_controller",
        "draw_manager",
        "textures",
        "animations",
        "_global_systems",
    )

    def __init__(self, textures=None, animations=None, draw_manager=None):
        """
        Args:
            textures: TextureCache filled by the asset loaders
            animations: AnimationRegistry holding frame animation definitions
            draw_manager: DrawManager (None in headless tests)
        """
        self.stage_controller = None
        self.textures = textures
        self.animations = animations
        self.draw_manager = draw_manager
        self._global_systems = {}

    # ===========================================================
    # Global System Access
    # ===========================================================

    def register_global(self, name: str, system: Any) -> None:
        """
        Register a value that persists across stages.

        Args:
            name: System identifier
            system: System instance
        """
        self._global_systems[name] = system

    def get_global(self, name: str, default: Any = None) -> Any:
        return self._global_systems.get(name, default)
