"""
interactive_control.py
----------------------
Pointer-driven state machine shared by every clickable element.

States
------
REST (initial), HOVER, ACTIVE.

Transitions
-----------
- pointer_enter: REST -> HOVER          (hover effect)
- pointer_leave: HOVER/ACTIVE -> REST   (rest effect)
- pointer_down:  HOVER -> ACTIVE        (active effect)
- pointer_up:    ACTIVE -> HOVER        (hover effect, then action once)

Any other event/state pair is ignored. Button variants differ only in the
effect functions they install, not by subclassing.

Rotation is in degrees, as pygame.transform.rotate takes it, so the coin
press spins the sprite through half a turn (180).
"""

from enum import Enum
from typing import Callable, Dict, Optional

from tap_to_claim.core.debug.debug_logger import DebugLogger


class ControlState(Enum):
    REST = "rest"
    HOVER = "hover"
    ACTIVE = "active"


# Effect signature: effect(control) -> None
Effect = Callable[["InteractiveControl"], None]


def _no_effect(control):
    pass


class InteractiveControl:
    """
    Wraps a display element with pointer feedback and an optional action.

    Attributes:
        element: The UIElement whose hit region receives pointer events
        state: Current ControlState
        effects: ControlState -> effect function
        action: Zero-argument callable fired on ACTIVE -> HOVER
    """

    def __init__(self, element, effects: Optional[Dict[ControlState, Effect]] = None,
                 action: Optional[Callable[[], None]] = None, name: str = None):
        self.element = element
        self.name = name or getattr(element, "name", "control")
        self.state = ControlState.REST
        self.effects = {state: _no_effect for state in ControlState}
        if effects:
            self.effects.update(effects)
        self.action = action

    # ===========================================================
    # Pointer events
    # ===========================================================

    def pointer_enter(self) -> bool:
        if self.state is not ControlState.REST:
            return False
        self._enter(ControlState.HOVER)
        return True

    def pointer_leave(self) -> bool:
        if self.state is ControlState.REST:
            return False
        self._enter(ControlState.REST)
        return True

    def pointer_down(self) -> bool:
        if self.state is not ControlState.HOVER:
            return False
        self._enter(ControlState.ACTIVE)
        return True

    def pointer_up(self) -> bool:
        if self.state is not ControlState.ACTIVE:
            return False
        self._enter(ControlState.HOVER)
        if self.action is not None:
            DebugLogger.action(f"'{self.name}' fired", category="ui")
            self.action()
        return True

    # ===========================================================
    # Internals
    # ===========================================================

    def _enter(self, state: ControlState):
        DebugLogger.trace(f"'{self.name}' {self.state.value} -> {state.value}", category="input")
        self.state = state
        self.effects[state](self)

    def __repr__(self):
        return f"<InteractiveControl {self.name} {self.state.value}>"


# ===========================================================
# Variants
# ===========================================================

TEXT_BUTTON_FILLS = {
    ControlState.HOVER: "#ff0",
    ControlState.REST: "#0f0",
    ControlState.ACTIVE: "#0ff",
}


def text_button(label, action: Optional[Callable[[], None]] = None) -> InteractiveControl:
    """Recolor the label's fill on every state change."""

    def recolor(state):
        return lambda control: control.element.set_style(fill=TEXT_BUTTON_FILLS[state])

    effects = {state: recolor(state) for state in ControlState}
    return InteractiveControl(label, effects, action, name=label.text)


# Active feedback: spin and grow, then shrink back and stay half transparent
COIN_PRESS_TWEEN = {
    "props": {"rotation": 180, "scale_x": 1.5, "scale_y": 1.5},
    "ease": "Power1",
    "duration": 1.0,
    "repeat": 0,
    "yoyo": True,
}
COIN_PRESSED_ALPHA = 0.5


def coin_button(sprite, tweens, action: Optional[Callable[[], None]] = None) -> InteractiveControl:
    """
    Coin sprite button. Pressing starts a yoyo tween from the sprite's current
    values; pressing again mid-flight starts another one on top of it.
    """

    def on_hover(control):
        DebugLogger.trace("Hover", category="ui")

    def on_rest(control):
        DebugLogger.trace("Rest", category="ui")

    def on_active(control):
        DebugLogger.trace("Active!", category="ui")
        element = control.element

        def settle():
            element.alpha = COIN_PRESSED_ALPHA

        options = {k: v for k, v in COIN_PRESS_TWEEN.items() if k != "props"}
        tweens.add(element, COIN_PRESS_TWEEN["props"], on_complete=settle, **options)

    effects = {
        ControlState.HOVER: on_hover,
        ControlState.REST: on_rest,
        ControlState.ACTIVE: on_active,
    }
    return InteractiveControl(sprite, effects, action, name="coin_button")
