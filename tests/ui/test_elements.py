"""
test_elements.py
----------------
Unit tests for the display elements (base, image, text, rectangle).
"""

import pygame
import pytest

from tap_to_claim.core.runtime.game_settings import Layers
from tap_to_claim.ui.elements.image import ImageElement
from tap_to_claim.ui.elements.label import TextElement
from tap_to_claim.ui.elements.shape import RectElement


# ===========================================================
# Geometry
# ===========================================================

def test_bounds_follow_origin():
    rect = RectElement(280, 384, 4, 28).set_origin(0.0, 0.5)
    assert rect.get_bounds() == pygame.Rect(280, 370, 4, 28)


def test_bounds_follow_scale():
    rect = RectElement(100, 100, 20, 10)
    rect.scale = 2.0
    assert rect.get_bounds() == pygame.Rect(80, 90, 40, 20)


def test_fluent_setters():
    rect = RectElement(0, 0, 1, 1).set_position(5, 6).set_visible(False).set_active(False)
    assert (rect.x, rect.y, rect.visible, rect.active) == (5, 6, False, False)


# ===========================================================
# Drawing
# ===========================================================

def test_draw_queues_on_layer(mock_draw_manager):
    rect = RectElement(10, 10, 4, 4, fill=(255, 255, 255), layer=Layers.MODAL_DIM)
    rect.draw(mock_draw_manager)

    surface, bounds = mock_draw_manager.queue_draw.call_args[0]
    assert mock_draw_manager.queue_draw.call_args[1]["layer"] == Layers.MODAL_DIM
    assert surface.get_size() == (4, 4)
    assert bounds == pygame.Rect(8, 8, 4, 4)


@pytest.mark.parametrize("visible, alpha", [(False, 1.0), (True, 0.0)])
def test_hidden_or_transparent_is_not_drawn(mock_draw_manager, visible, alpha):
    rect = RectElement(10, 10, 4, 4, fill=(255, 255, 255))
    rect.visible = visible
    rect.alpha = alpha
    rect.draw(mock_draw_manager)
    mock_draw_manager.queue_draw.assert_not_called()


def test_rotated_draw_keeps_center(mock_draw_manager):
    rect = RectElement(100, 100, 20, 10, fill=(255, 0, 0))
    rect.rotation = 90
    rect.draw(mock_draw_manager)

    surface, bounds = mock_draw_manager.queue_draw.call_args[0]
    assert surface.get_size() == (10, 20)
    assert bounds.center == (100, 100)


# ===========================================================
# Image / Text
# ===========================================================

def test_image_uses_cached_frame(textures):
    textures.add_frames("platforms", [pygame.Surface((64, 16)), pygame.Surface((32, 8))])
    image = ImageElement(textures, 0, 0, "platforms", 1)

    assert image.get_size() == (32, 8)
    image.frame = 5
    assert image.get_size() == (0, 0)


def test_image_with_missing_texture_is_skipped(textures, mock_draw_manager):
    ImageElement(textures, 0, 0, "nothing").draw(mock_draw_manager)
    mock_draw_manager.queue_draw.assert_not_called()


def test_text_origin_defaults_to_top_left():
    label = TextElement(10, 20, "Tap to Claim!")
    bounds = label.get_bounds()
    assert bounds.topleft == (10, 20)
    assert bounds.width > 0


def test_text_stroke_grows_surface():
    plain = TextElement(0, 0, "001000", font_size=40)
    stroked = TextElement(0, 0, "001000", font_size=40, stroke="#bd9258", stroke_thickness=2)

    pw, ph = plain.get_size()
    assert stroked.get_size() == (pw + 4, ph + 4)


def test_text_reveal_masks_surface():
    label = TextElement(0, 0, "Loading...", font_size=30)
    full = label.build_surface()
    label.reveal = 0.0
    masked = label.build_surface()

    assert masked.get_size() == full.get_size()
    assert masked.get_bounding_rect().width == 0


def test_set_style_rerenders():
    label = TextElement(0, 0, "Play")
    first = label.build_surface()
    label.set_style(fill="#ff0")
    assert label.build_surface() is not first
    assert label.color == "#ff0"
