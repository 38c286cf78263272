"""
tween.py
--------
Property interpolation over time for UI feedback effects.

A tween captures the start values of its targets when it begins, so a tween
started while another one is still moving the same properties continues
from wherever those properties currently are. Nothing guards against such
overlap; the newer tween simply writes last.
"""

from typing import Callable, Dict, List, Optional

from tap_to_claim.core.debug.debug_logger import DebugLogger


# ===========================================================
# Easing
# ===========================================================

def linear(t: float) -> float:
    return t


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in(t: float) -> float:
    return t ** 2


def ease_in_out(t: float) -> float:
    return t * t * (3 - 2 * t)


EASINGS: Dict[str, Callable[[float], float]] = {
    "Linear": linear,
    "Power1": ease_out,
    "Quad.easeOut": ease_out,
    "Quad.easeIn": ease_in,
    "Sine.easeInOut": ease_in_out,
}


# ===========================================================
# Tween
# ===========================================================

class Tween:
    """
    Interpolates numeric attributes of one or more targets.

    Phases per cycle: forward (start -> end), optional hold, optional
    yoyo (end -> start). ``repeat`` counts extra cycles; -1 loops forever.
    """

    def __init__(self, targets, props: Dict[str, float], duration: float = 1.0,
                 ease: str = "Linear", yoyo: bool = False, repeat: int = 0,
                 hold: float = 0.0, on_complete: Optional[Callable] = None):
        if duration <= 0:
            raise ValueError("Tween duration must be positive")
        if ease not in EASINGS:
            raise ValueError(f"Unknown ease '{ease}'")

        self.targets = list(targets) if isinstance(targets, (list, tuple)) else [targets]
        self.props = dict(props)
        self.duration = duration
        self.ease = EASINGS[ease]
        self.yoyo = yoyo
        self.repeat = repeat
        self.hold = hold if yoyo else 0.0
        self.on_complete = on_complete

        # Start values, captured now
        self._start = [
            {name: float(getattr(target, name)) for name in self.props}
            for target in self.targets
        ]

        self.elapsed = 0.0
        self.cycles_done = 0
        self.finished = False

    @property
    def cycle_length(self) -> float:
        if self.yoyo:
            return self.duration * 2 + self.hold
        return self.duration

    def _apply(self, t: float):
        k = self.ease(t)
        for target, start in zip(self.targets, self._start):
            for name, end in self.props.items():
                setattr(target, name, start[name] + (end - start[name]) * k)

    def _position(self, elapsed: float) -> float:
        """Normalized position inside the current cycle."""
        if elapsed <= self.duration:
            return elapsed / self.duration
        if not self.yoyo:
            return 1.0
        back = elapsed - self.duration - self.hold
        if back <= 0:
            return 1.0
        return max(0.0, 1.0 - back / self.duration)

    def update(self, dt: float) -> bool:
        """
        Advance the tween.

        Returns:
            bool: True when the tween has finished
        """
        if self.finished:
            return True

        self.elapsed += dt

        while self.elapsed >= self.cycle_length:
            if self.repeat != -1 and self.cycles_done >= self.repeat:
                self._apply(0.0 if self.yoyo else 1.0)
                self._finish()
                return True
            self.elapsed -= self.cycle_length
            self.cycles_done += 1

        self._apply(self._position(self.elapsed))
        return False

    def _finish(self):
        self.finished = True
        if callable(self.on_complete):
            self.on_complete()


# ===========================================================
# Tween Manager
# ===========================================================

class TweenManager:
    """Owns the tweens of one stage."""

    def __init__(self):
        self.active: List[Tween] = []

    def add(self, targets, props: Dict[str, float], **options) -> Tween:
        tween = Tween(targets, props, **options)
        self.active.append(tween)
        DebugLogger.trace(f"Tween started: {sorted(props)}", category="animation")
        return tween

    def update(self, dt: float):
        # Tweens created by on_complete callbacks are picked up next frame
        for tween in list(self.active):
            if tween.update(dt):
                self.active.remove(tween)

    def clear(self):
        """Discard in-flight tweens without completing them."""
        self.active.clear()

    def __len__(self):
        return len(self.active)
