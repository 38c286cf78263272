"""
dialog_group.py
---------------
Modal dialog toggle: flips active/visible on a group of elements at once.
"""

from typing import List, Optional

from tap_to_claim.core.debug.debug_logger import DebugLogger


class DialogGroup:
    """
    Ordered members plus two companions (dimmer and status text).

    ``show()`` touches the members only. ``hide()`` also hides the companions,
    which are not members but must disappear together with the dialog.
    """

    def __init__(self, members: Optional[List] = None, dimmer=None, status=None, name: str = "dialog"):
        self.members = list(members or [])
        self.dimmer = dimmer
        self.status = status
        self.name = name
        self.active = True
        self.visible = True

    def add(self, element):
        self.members.append(element)
        return element

    @property
    def companions(self) -> List:
        return [e for e in (self.dimmer, self.status) if e is not None]

    def show(self):
        for element in self.members:
            element.active = True
            element.visible = True
        self.active = self.visible = True
        DebugLogger.state(f"Dialog '{self.name}' shown", category="ui")

    def hide(self):
        """Hide members and companions. Nothing happens if all are hidden already."""
        targets = self.members + self.companions
        if not self.visible and not self.active and not any(
                e.visible or e.active for e in targets):
            return

        for element in targets:
            element.active = False
            element.visible = False
        self.active = self.visible = False
        DebugLogger.state(f"Dialog '{self.name}' hidden", category="ui")
