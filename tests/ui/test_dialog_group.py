"""
test_dialog_group.py
--------------------
Unit tests for DialogGroup show/hide semantics.
"""

from unittest.mock import patch

import pytest

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.ui.elements.dialog_group import DialogGroup
from tap_to_claim.ui.elements.label import TextElement
from tap_to_claim.ui.elements.shape import RectElement


@pytest.fixture
def parts():
    members = [TextElement(0, 0, "🔽"), TextElement(0, 0, "🔼"), TextElement(0, 0, "Connect Wallet")]
    dimmer = RectElement(512, 384, 1024, 768, fill=(0, 0, 0), fill_alpha=0.95)
    status = TextElement(0, 0, "Loading...").set_visible(False)
    return members, dimmer, status


def test_hide_covers_members_and_companions(parts):
    members, dimmer, status = parts
    status.set_visible(True)
    dialog = DialogGroup(members, dimmer=dimmer, status=status)

    dialog.hide()

    for element in members + [dimmer, status]:
        assert element.visible is False
        assert element.active is False
    assert not dialog.visible


def test_show_touches_members_only(parts):
    members, dimmer, status = parts
    dialog = DialogGroup(members, dimmer=dimmer, status=status)
    dialog.hide()

    dialog.show()

    assert all(m.visible and m.active for m in members)
    assert dimmer.visible is False
    assert status.visible is False
    assert dialog.visible and dialog.active


def test_hide_twice_is_harmless(parts):
    members, dimmer, status = parts
    dialog = DialogGroup(members, dimmer=dimmer, status=status)

    with patch.object(DebugLogger, "state") as logged:
        dialog.hide()
        dialog.hide()

    logged.assert_called_once()
    for element in members + [dimmer, status]:
        assert element.visible is False
        assert element.active is False
    assert dialog.visible is False
    assert dialog.active is False


def test_add_member_and_companions(parts):
    members, dimmer, status = parts
    dialog = DialogGroup(dimmer=dimmer)
    dialog.add(members[0])

    assert dialog.members == [members[0]]
    assert dialog.companions == [dimmer]
