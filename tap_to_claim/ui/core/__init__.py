"""
UI core exports.

Base display element and the pointer dispatch table.
"""

from tap_to_claim.ui.core.ui_element import UIElement
from tap_to_claim.ui.core.pointer_router import HitRegion, PointerRouter

__all__ = [
    'UIElement',
    'HitRegion',
    'PointerRouter',
]
