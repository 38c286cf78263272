"""
ui_element.py
-------------
Base class for everything a stage puts on screen.

Every element exposes the same capability set: position (x, y, origin),
visibility (visible, active, alpha) and z-order (layer). Pointer routing,
dialogs and tweens only rely on these attributes.
"""

from typing import Tuple

import pygame

from tap_to_claim.core.runtime.game_settings import Layers


class UIElement:
    """Positionable, hideable, layered display object."""

    def __init__(self, x: float = 0, y: float = 0, layer: int = Layers.UI,
                 origin: Tuple[float, float] = (0.5, 0.5), name: str = None):
        """
        Args:
            x, y: Position of the origin point in canvas pixels
            layer: Z-order; higher draws later and is hit-tested first
            origin: Normalized anchor inside the element (0.5, 0.5 = center)
            name: Optional identifier for logs and tests
        """
        self.name = name or self.__class__.__name__
        self.x = x
        self.y = y
        self.layer = layer
        self.origin_x, self.origin_y = origin

        # Visibility
        self.visible = True
        self.active = True
        self.alpha = 1.0

        # Transform (visual only)
        self.scale_x = 1.0
        self.scale_y = 1.0
        self.rotation = 0.0

    # ===========================================================
    # Fluent setters
    # ===========================================================

    def set_origin(self, x: float, y: float = None):
        self.origin_x = x
        self.origin_y = x if y is None else y
        return self

    def set_visible(self, visible: bool):
        self.visible = visible
        return self

    def set_active(self, active: bool):
        self.active = active
        return self

    def set_position(self, x: float, y: float):
        self.x, self.y = x, y
        return self

    @property
    def scale(self) -> float:
        return self.scale_x

    @scale.setter
    def scale(self, value: float):
        self.scale_x = self.scale_y = value

    # ===========================================================
    # Geometry
    # ===========================================================

    def get_size(self) -> Tuple[int, int]:
        """Unscaled size in pixels. Subclasses override."""
        return 0, 0

    def get_bounds(self) -> pygame.Rect:
        """Axis-aligned screen rectangle, used for hit-testing."""
        w, h = self.get_size()
        w *= abs(self.scale_x)
        h *= abs(self.scale_y)
        left = self.x - self.origin_x * w
        top = self.y - self.origin_y * h
        return pygame.Rect(round(left), round(top), round(w), round(h))

    def contains(self, point) -> bool:
        return self.get_bounds().collidepoint(point)

    # ===========================================================
    # Rendering
    # ===========================================================

    def build_surface(self):
        """Return the untransformed surface for this element, or None."""
        return None

    def draw(self, draw_manager):
        """Queue the transformed surface on the element's layer."""
        if not self.visible or self.alpha <= 0:
            return

        surface = self.build_surface()
        if surface is None:
            return

        if self.scale_x != 1.0 or self.scale_y != 1.0:
            w, h = surface.get_size()
            size = (max(1, round(w * abs(self.scale_x))), max(1, round(h * abs(self.scale_y))))
            surface = pygame.transform.scale(surface, size)

        bounds = self.get_bounds()
        if self.rotation:
            # Rotate around the element's center; keeps the bounds center
            center = bounds.center
            surface = pygame.transform.rotate(surface, -self.rotation)
            bounds = surface.get_rect(center=center)

        if self.alpha < 1.0:
            surface = surface.copy()
            surface.set_alpha(round(255 * max(0.0, self.alpha)))

        draw_manager.queue_draw(surface, bounds, layer=self.layer)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name} ({self.x:.0f}, {self.y:.0f}) layer={self.layer}>"
