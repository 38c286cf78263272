"""
palette.py
----------
Closed palette of gold tones used by the menu text and buttons.

Colors are stored in their ``0x`` textual form. ``color_with_hash`` swaps the
prefix for the ``#`` form used by text styles; no hex validation is done.
"""

from enum import Enum
from typing import Tuple, Union


class Colors(str, Enum):
    YELLOW = "0xffff00"
    RICH_GOLD = "0xd4af37"
    DARK_GOLD = "0xbd9258"
    WARM_GOLD = "0xc29b57"
    DEEP_GOLD = "0xb58863"
    LIGHT_GOLD = "0xe8c899"
    METALLIC_GOLD = "0xb8860b"
    CHAMPAGNE_GOLD = "0xd8b07d"


def color_with_hash(color: Union[Colors, str]) -> str:
    """Return the color with its ``0x`` prefix replaced by ``#``."""
    value = color.value if isinstance(color, Colors) else color
    return value.replace("0x", "#")


def to_rgb(color: Union[Colors, str]) -> Tuple[int, int, int]:
    """
    Convert a ``#rgb``, ``#rrggbb`` or ``0xrrggbb`` string to an RGB tuple.

    Raises:
        ValueError: If the string does not hold 3 or 6 hex digits.
    """
    value = color_with_hash(color).lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Unsupported color format: {color!r}")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
