"""
frame_animation.py
------------------
Frame-by-frame sprite animations.

Responsibilities
----------------
- Hold game-wide animation definitions (key -> ordered frames, rate, repeat).
- Build frame-name sequences for atlas frames (prefix + number + suffix).
- Drive per-sprite playback at the definition's frame rate.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from tap_to_claim.core.debug.debug_logger import DebugLogger


@dataclass(frozen=True)
class AnimationFrame:
    texture: str
    frame: Union[int, str]


@dataclass(frozen=True)
class AnimationDef:
    """
    Attributes:
        key: Registry key, e.g. "turning_coin_anim"
        frames: Ordered frames
        frame_rate: Frames per second
        repeat: Extra loops after the first pass; -1 loops forever
    """
    key: str
    frames: tuple
    frame_rate: float = 24.0
    repeat: int = 0


# ===========================================================
# Registry
# ===========================================================

class AnimationRegistry:
    """Game-wide animation definitions, created once during preload."""

    def __init__(self):
        self._defs: Dict[str, AnimationDef] = {}

    @staticmethod
    def generate_frame_names(texture: str, prefix: str = "", suffix: str = "",
                             start: int = 0, end: int = 0, zero_pad: int = 0) -> List[AnimationFrame]:
        """Build frames ``prefix + str(n).zfill(zero_pad) + suffix`` for start..end inclusive."""
        step = 1 if end >= start else -1
        return [
            AnimationFrame(texture, f"{prefix}{str(n).zfill(zero_pad)}{suffix}")
            for n in range(start, end + step, step)
        ]

    def create(self, key: str, frames: List[AnimationFrame], frame_rate: float = 24.0,
               repeat: int = 0) -> AnimationDef:
        if not frames:
            raise ValueError(f"Animation '{key}' needs at least one frame")
        if frame_rate <= 0:
            raise ValueError(f"Animation '{key}' needs a positive frame rate")

        if key in self._defs:
            DebugLogger.warn(f"Animation '{key}' already exists, keeping the first", category="animation")
            return self._defs[key]

        definition = AnimationDef(key, tuple(frames), frame_rate, repeat)
        self._defs[key] = definition
        DebugLogger.action(f"Created animation '{key}' ({len(frames)} frames @ {frame_rate} fps)")
        return definition

    def get(self, key: str) -> Optional[AnimationDef]:
        return self._defs.get(key)

    def exists(self, key: str) -> bool:
        return key in self._defs

    def clear(self):
        self._defs.clear()


# ===========================================================
# Playback
# ===========================================================

class AnimationPlayer:
    """Plays one AnimationDef on one image element."""

    __slots__ = ("element", "definition", "index", "loops_done", "timer", "playing")

    def __init__(self, element):
        self.element = element
        self.definition: Optional[AnimationDef] = None
        self.index = 0
        self.loops_done = 0
        self.timer = 0.0
        self.playing = False

    @property
    def current_frame(self) -> Optional[AnimationFrame]:
        if self.definition is None:
            return None
        return self.definition.frames[self.index]

    def play(self, definition: AnimationDef):
        self.definition = definition
        self.index = 0
        self.loops_done = 0
        self.timer = 0.0
        self.playing = True
        self._apply()

    def stop(self):
        self.playing = False

    def advance(self):
        """Step to the next frame, wrapping while repeats remain."""
        if not self.playing:
            return

        frames = self.definition.frames
        if self.index + 1 < len(frames):
            self.index += 1
        elif self.definition.repeat == -1 or self.loops_done < self.definition.repeat:
            self.loops_done += 1
            self.index = 0
        else:
            self.playing = False
            return
        self._apply()

    def update(self, dt: float):
        if not self.playing:
            return

        interval = 1.0 / self.definition.frame_rate
        self.timer += dt
        while self.playing and self.timer >= interval:
            self.timer -= interval
            self.advance()

    def _apply(self):
        frame = self.current_frame
        self.element.texture = frame.texture
        self.element.frame = frame.frame
