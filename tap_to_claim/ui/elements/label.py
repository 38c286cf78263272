"""
label.py
--------
Text element with fill/stroke styling, surface caching and a reveal mask.
"""

import os
from typing import Dict, Optional, Tuple

import pygame

from tap_to_claim.core.runtime.game_settings import Fonts, Layers
from tap_to_claim.core.runtime.palette import to_rgb
from tap_to_claim.ui.core.ui_element import UIElement


class TextElement(UIElement):
    """Single-line text. Origin defaults to top-left like a plain text object."""

    _font_cache: Dict[Tuple[Optional[str], int], pygame.font.Font] = {}

    def __init__(self, x: float, y: float, text: str, font_size: int = 24,
                 color: str = "#ffffff", stroke: Optional[str] = None,
                 stroke_thickness: int = 0, font: Optional[str] = None,
                 layer: int = Layers.UI, name: str = None):
        super().__init__(x, y, layer=layer, origin=(0.0, 0.0), name=name or text)
        self.font_size = font_size
        self.font_name = font

        self._text = text
        self._color = color
        self.stroke = stroke
        self.stroke_thickness = stroke_thickness

        # Fraction of the text width shown, left to right (1.0 = all)
        self.reveal = 1.0

        # Caching
        self._surface_cache: Optional[pygame.Surface] = None
        self._dirty = True

    # ===========================================================
    # Styled properties
    # ===========================================================

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        if value != self._text:
            self._text = value
            self._dirty = True

    @property
    def color(self) -> str:
        return self._color

    def set_style(self, fill: str = None, stroke: str = None, stroke_thickness: int = None):
        """Update any of fill color, stroke color and stroke thickness."""
        if fill is not None:
            self._color = fill
        if stroke is not None:
            self.stroke = stroke
        if stroke_thickness is not None:
            self.stroke_thickness = stroke_thickness
        self._dirty = True
        return self

    # ===========================================================
    # Rendering
    # ===========================================================

    @classmethod
    def _get_cached_font(cls, size: int, font_name: Optional[str] = None) -> pygame.font.Font:
        """Get or create cached font by name and size."""
        if font_name is None:
            font_name = Fonts.DEFAULT

        font_path = os.path.join(Fonts.DIR, font_name) if font_name else None
        cache_key = (font_path, size)
        if cache_key not in cls._font_cache:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                cls._font_cache[cache_key] = pygame.font.Font(font_path, size)
            except (FileNotFoundError, OSError, pygame.error):
                cls._font_cache[cache_key] = pygame.font.Font(Fonts.FALLBACK, size)
        return cls._font_cache[cache_key]

    def _render_text(self) -> pygame.Surface:
        font = self._get_cached_font(self.font_size, self.font_name)
        fill = font.render(self._text, True, to_rgb(self._color))
        pad = self.stroke_thickness if self.stroke else 0
        if not pad:
            return fill

        # Outline: stamp the stroke color around the fill
        outline = font.render(self._text, True, to_rgb(self.stroke))
        w, h = fill.get_size()
        surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        for dx in (-pad, 0, pad):
            for dy in (-pad, 0, pad):
                if dx or dy:
                    surf.blit(outline, (pad + dx, pad + dy))
        surf.blit(fill, (pad, pad))
        return surf

    def build_surface(self):
        if self._dirty or self._surface_cache is None:
            self._surface_cache = self._render_text()
            self._dirty = False

        if self.reveal >= 1.0:
            return self._surface_cache

        w, h = self._surface_cache.get_size()
        shown = max(0, min(w, round(w * self.reveal)))
        masked = pygame.Surface((w, h), pygame.SRCALPHA)
        masked.blit(self._surface_cache, (0, 0), pygame.Rect(0, 0, shown, h))
        return masked

    def get_size(self) -> Tuple[int, int]:
        if self._dirty or self._surface_cache is None:
            self._surface_cache = self._render_text()
            self._dirty = False
        return self._surface_cache.get_size()
