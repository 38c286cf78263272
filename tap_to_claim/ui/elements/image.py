"""
image.py
--------
Image and sprite element backed by the shared texture cache.
"""

from typing import Optional, Tuple, Union

from tap_to_claim.core.runtime.game_settings import Layers
from tap_to_claim.ui.core.ui_element import UIElement


class ImageElement(UIElement):
    """Draws one frame of a cached texture. Frame may be swapped by animations."""

    def __init__(self, textures, x: float, y: float, texture: str,
                 frame: Optional[Union[int, str]] = None, layer: int = Layers.WORLD, name: str = None):
        super().__init__(x, y, layer=layer, name=name or texture)
        self.textures = textures
        self.texture = texture
        self.frame = frame

    def build_surface(self):
        return self.textures.get_frame(self.texture, self.frame)

    def get_size(self) -> Tuple[int, int]:
        surface = self.build_surface()
        if surface is None:
            return 0, 0
        return surface.get_size()
