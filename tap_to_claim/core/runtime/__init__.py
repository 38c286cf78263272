"""
Runtime configuration exports.

Provides game-wide constants and the color palette. All exports are
lightweight class constants with no initialization overhead; the stage
lifecycle classes are imported from their own modules.
"""

from tap_to_claim.core.runtime.game_settings import (
    Display,
    Fonts,
    Assets,
    Layers,
    Stages,
)
from tap_to_claim.core.runtime.palette import Colors, color_with_hash, to_rgb

__all__ = [
    # Display & Rendering
    'Display',
    'Fonts',
    'Assets',
    'Layers',
    # Palette
    'Colors',
    'color_with_hash',
    'to_rgb',
    # Stage flow
    'Stages',
]
