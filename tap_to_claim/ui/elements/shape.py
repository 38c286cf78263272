"""
shape.py
--------
Filled and/or outlined rectangle element.
"""

from typing import Optional, Tuple

import pygame

from tap_to_claim.core.runtime.game_settings import Layers
from tap_to_claim.ui.core.ui_element import UIElement


class RectElement(UIElement):
    """Rectangle whose width/height can change every frame (e.g. progress bars)."""

    def __init__(self, x: float, y: float, width: float, height: float,
                 fill: Optional[Tuple[int, int, int]] = None, fill_alpha: float = 1.0,
                 layer: int = Layers.UI, name: str = None):
        super().__init__(x, y, layer=layer, name=name)
        self.width = width
        self.height = height
        self.fill = fill
        self.fill_alpha = fill_alpha
        self.stroke_color = None
        self.stroke_width = 0

    def set_stroke_style(self, width: int, color: Tuple[int, int, int]):
        self.stroke_width = width
        self.stroke_color = color
        return self

    def get_size(self) -> Tuple[int, int]:
        return self.width, self.height

    def build_surface(self):
        w, h = max(1, round(self.width)), max(1, round(self.height))
        surf = pygame.Surface((w, h), pygame.SRCALPHA)

        if self.fill is not None:
            surf.fill((*self.fill[:3], round(255 * self.fill_alpha)))

        if self.stroke_width > 0 and self.stroke_color is not None:
            pygame.draw.rect(surf, self.stroke_color, surf.get_rect(), self.stroke_width)

        return surf
