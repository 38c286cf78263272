"""
draw_manager.py
---------------
Per-frame layered draw queue.

Elements queue (surface, destination) pairs on a layer while the current
stage draws; render() clears the canvas to the background color and blits
the layers from lowest to highest. Within a layer, queue order is kept.
"""

from collections import defaultdict

import pygame

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.palette import to_rgb


class DrawManager:
    """Collects one frame's draw calls, then renders them in layer order."""

    def __init__(self, background_color: str = "#000000"):
        """
        Args:
            background_color: Hex color the canvas is cleared to every frame
        """
        self.background_color = to_rgb(background_color)
        self.layers = defaultdict(list)  # {layer: [(surface, dest), ...]}
        self._order = []

        DebugLogger.init_entry("DrawManager")

    def clear(self):
        """Empty every layer. Layer keys stay, so the sort order is reused."""
        for queued in self.layers.values():
            queued.clear()

    def queue_draw(self, surface: pygame.Surface, rect, layer: int = 0):
        """
        Args:
            surface: Surface to blit
            rect: Destination rect or (x, y)
            layer: Lower layers are drawn first
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="drawing")
            return

        if layer not in self.layers:
            self._order = sorted([*self.layers, layer])
        self.layers[layer].append((surface, rect))

    @property
    def queued_count(self) -> int:
        return sum(map(len, self.layers.values()))

    def render(self, target_surface: pygame.Surface):
        target_surface.fill(self.background_color)
        for layer in self._order:
            queued = self.layers[layer]
            if queued:
                target_surface.blits(queued, doreturn=False)
