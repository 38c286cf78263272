"""
pointer_router.py
-----------------
Explicit dispatch table from hit regions to interactive controls.

Responsibilities
----------------
- Keep the stage's interactive regions in one table.
- Hit-test only visible and active elements, topmost first.
- Turn mouse motion into enter/leave pairs, and button 1 into down/up.
- Let regions without a control block everything beneath them (modal dimmer).
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

import pygame

from tap_to_claim.core.debug.debug_logger import DebugLogger


@dataclass
class HitRegion:
    element: object
    control: Optional[object]
    order: int


class PointerRouter:
    """Routes pointer events of one stage."""

    def __init__(self, on_cursor: Optional[Callable[[bool], None]] = None):
        """
        Args:
            on_cursor: Called with True when a control is hovered and False
                       when the pointer leaves it (hand cursor hook)
        """
        self.regions: List[HitRegion] = []
        self.hovered: Optional[HitRegion] = None
        self.on_cursor = on_cursor
        self._counter = 0

    # ===========================================================
    # Table
    # ===========================================================

    def register(self, element, control=None) -> HitRegion:
        """
        Add a hit region. ``control=None`` makes the region input-blocking only.
        """
        region = HitRegion(element, control, self._counter)
        self._counter += 1
        self.regions.append(region)
        return region

    def unregister(self, element):
        self.regions = [r for r in self.regions if r.element is not element]
        if self.hovered is not None and self.hovered.element is element:
            self.hovered = None

    def clear(self):
        self.regions.clear()
        self.hovered = None

    def hit_test(self, pos) -> Optional[HitRegion]:
        """Topmost visible and active region under ``pos``."""
        candidates = [
            r for r in self.regions
            if r.element.visible and r.element.active and r.element.contains(pos)
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda r: (r.element.layer, r.order))

    # ===========================================================
    # Pointer events
    # ===========================================================

    def pointer_move(self, pos) -> bool:
        target = self.hit_test(pos)
        if target is self.hovered:
            return target is not None

        previous, self.hovered = self.hovered, target
        if previous is not None and previous.control is not None:
            previous.control.pointer_leave()
            self._set_cursor(False)
        if target is not None and target.control is not None:
            target.control.pointer_enter()
            self._set_cursor(True)
        return target is not None

    def pointer_down(self, pos) -> bool:
        self.pointer_move(pos)
        if self.hovered is None:
            return False
        if self.hovered.control is not None:
            self.hovered.control.pointer_down()
        return True

    def pointer_up(self, pos) -> bool:
        self.pointer_move(pos)
        if self.hovered is None:
            return False
        if self.hovered.control is not None:
            self.hovered.control.pointer_up()
        return True

    def handle_event(self, event) -> bool:
        """
        Route a pygame mouse event.

        Returns:
            bool: True if a region was under the pointer
        """
        if event.type == pygame.MOUSEMOTION:
            return self.pointer_move(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            DebugLogger.trace(f"Pointer down at {event.pos}", category="input")
            return self.pointer_down(event.pos)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            DebugLogger.trace(f"Pointer up at {event.pos}", category="input")
            return self.pointer_up(event.pos)
        return False

    def _set_cursor(self, hand: bool):
        if self.on_cursor is not None:
            self.on_cursor(hand)
