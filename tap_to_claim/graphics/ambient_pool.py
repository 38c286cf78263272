"""
ambient_pool.py
---------------
Fixed-size pool of decorative actors drifting right across the menu.

Actors are plain records; a single pool-level update moves all of them.
Nothing is ever destroyed: an actor that leaves the right edge is moved
back to the reset offset on the left.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.game_settings import Display, Layers


@dataclass
class AmbientActor:
    x: float
    y: float
    scale: float
    alpha: float
    speed: float
    frame: int = 0

    def __post_init__(self):
        for field_name in ("speed", "scale"):
            value = getattr(self, field_name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
                raise ValueError(f"AmbientActor {field_name} must be a non-negative finite number, got {value!r}")


class AmbientPool:
    """
    Owns N ambient actors and their wraparound motion.

    Attributes:
        actors: Spawned AmbientActor records
        wrap_x: x at or beyond which an actor is recycled
        reset_x: x an actor is moved back to
    """

    def __init__(self, count: int = 10, max_speed: int = 15, max_scale: float = 5.0,
                 alpha: float = 0.25, frames: int = 4, reset_x: float = -10, margin: float = 50,
                 canvas_width: int = Display.WIDTH, canvas_height: int = Display.HEIGHT,
                 rng: Optional[random.Random] = None):
        if count < 0:
            raise ValueError("AmbientPool count must be non-negative")
        if max_speed < 1:
            raise ValueError("AmbientPool max_speed must be at least 1")
        if frames < 1:
            raise ValueError("AmbientPool needs at least one frame")

        self.count = count
        self.max_speed = max_speed
        self.max_scale = max_scale
        self.alpha = alpha
        self.frames = frames
        self.reset_x = reset_x
        self.wrap_x = canvas_width + margin
        self.canvas_height = canvas_height
        self.rng = rng or random.Random()

        self.actors: List[AmbientActor] = []

    # ===========================================================
    # Spawning
    # ===========================================================

    def spawn(self) -> List[AmbientActor]:
        """Create all actors at the left reset offset with random looks and speed."""
        self.actors = [
            AmbientActor(
                x=self.reset_x,
                y=self.canvas_height * self.rng.random() + 1,
                scale=self.max_scale * self.rng.random(),
                alpha=self.alpha,
                speed=self.rng.randrange(self.max_speed),
                frame=self.rng.randrange(self.frames),
            )
            for _ in range(self.count)
        ]
        DebugLogger.state(f"Spawned {len(self.actors)} ambient actors", category="background")
        return self.actors

    def add(self, actor: AmbientActor):
        self.actors.append(actor)

    # ===========================================================
    # Update
    # ===========================================================

    def update(self):
        """Move every actor by its own speed and recycle those past the edge."""
        for actor in self.actors:
            actor.x += actor.speed
            if actor.x >= self.wrap_x:
                actor.x = self.reset_x

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager, sprite):
        """
        Draw actors through one reusable sprite element.

        Args:
            draw_manager: DrawManager receiving the queued surfaces
            sprite: ImageElement pointed at the actor sheet
        """
        for actor in self.actors:
            sprite.x, sprite.y = actor.x, actor.y
            sprite.scale = actor.scale
            sprite.alpha = actor.alpha
            sprite.frame = actor.frame
            sprite.layer = Layers.AMBIENT
            sprite.draw(draw_manager)

    def __len__(self):
        return len(self.actors)
