"""
test_palette.py
---------------
Unit tests for the gold palette and color helpers.
"""

import pytest

from tap_to_claim.core.runtime.palette import Colors, color_with_hash, to_rgb


def test_color_with_hash_swaps_prefix():
    assert color_with_hash(Colors.DARK_GOLD) == "#bd9258"
    assert color_with_hash(Colors.YELLOW) == "#ffff00"


def test_color_with_hash_does_not_validate():
    assert color_with_hash("0xnothex") == "#nothex"
    assert color_with_hash("#abc") == "#abc"


def test_palette_is_closed():
    assert len(Colors) == 8
    assert all(c.value.startswith("0x") for c in Colors)


@pytest.mark.parametrize("value, expected", [
    ("#ff0", (255, 255, 0)),
    ("#0f0", (0, 255, 0)),
    ("#028af8", (2, 138, 248)),
    (Colors.LIGHT_GOLD, (232, 200, 153)),
])
def test_to_rgb(value, expected):
    assert to_rgb(value) == expected


def test_to_rgb_rejects_bad_length():
    with pytest.raises(ValueError):
        to_rgb("#12345")
