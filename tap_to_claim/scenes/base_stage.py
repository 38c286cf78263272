"""
base_stage.py
-------------
Base class for all presentation stages.

Provides:
- Lifecycle hooks (setup_once, prepare_assets, build, tick)
- Stage-owned display list, pointer dispatch table, tweens and animations
- Helpers for adding elements and handing control to the next stage
- destroy(), called by the controller when the stage is replaced
"""

from abc import ABC, abstractmethod

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.game_settings import Layers
from tap_to_claim.core.runtime.scene_state import StageState
from tap_to_claim.core.services.config_manager import load_config
from tap_to_claim.graphics.animations.frame_animation import AnimationPlayer
from tap_to_claim.graphics.animations.tween import TweenManager
from tap_to_claim.ui.core.pointer_router import PointerRouter
from tap_to_claim.ui.elements.image import ImageElement
from tap_to_claim.ui.elements.label import TextElement
from tap_to_claim.ui.elements.shape import RectElement


class BaseStage(ABC):
    """
    Base class for all stages.

    Attributes:
        name: Registry name, set by the controller
        index: Position in the fixed stage order
        state: Current StageState
        loader: AssetLoader created for this activation
        services: ServiceLocator for shared caches and the controller
    """

    ASSET_MANIFEST = "assets.yaml"

    def __init__(self, services):
        """
        Args:
            services: ServiceLocator instance for dependency injection
        """
        self.services = services
        self.name = self.__class__.__name__
        self.index = -1
        self.state = StageState.INACTIVE
        self.loader = None

        # Convenience access to shared caches
        self.controller = services.stage_controller
        self.textures = services.textures
        self.animations = services.animations

        # Stage-owned objects, dropped in destroy()
        self.display_list = []
        self.pointer = PointerRouter(on_cursor=services.get_global("set_cursor"))
        self.tweens = TweenManager()
        self.anim_players = []

        self._setup_done = False

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def setup_once(self):
        """Initialize stage-local constants. Runs at most once."""
        pass

    def prepare_assets(self, loader):
        """Declare assets on ``loader``. Leave empty when nothing is needed."""
        pass

    @abstractmethod
    def build(self):
        """Create visible objects and wire input."""
        pass

    def tick(self, dt: float):
        """
        Per-frame logic, after tweens and animations advanced.

        Args:
            dt: Delta time in seconds
        """
        pass

    # ===========================================================
    # Controller plumbing
    # ===========================================================

    def declare_configured_assets(self, loader):
        """Queue this stage's entries from assets.yaml."""
        manifest = load_config(self.ASSET_MANIFEST).get(self.name, [])
        loader.declare(manifest)
        DebugLogger.state(f"{self.name} declared {len(manifest)} assets", category="loading")

    def run_setup(self):
        if self._setup_done:
            return
        self._setup_done = True
        self.setup_once()

    def step(self, dt: float):
        """Advance owned systems, then run tick() if still live."""
        self.tweens.update(dt)
        for player in self.anim_players:
            player.update(dt)

        if self.state is StageState.LIVE:
            self.tick(dt)

    def start(self, name: str) -> bool:
        """Hand control to another stage."""
        return self.controller.start(name)

    def destroy(self):
        """Discard everything this stage created, including in-flight tweens."""
        self.tweens.clear()
        self.pointer.clear()
        self.anim_players.clear()
        self.display_list.clear()
        if self.loader is not None:
            self.loader.events.clear_all()
        DebugLogger.state(f"Destroyed {self.name}")

    # ===========================================================
    # Display list helpers
    # ===========================================================

    def add(self, element):
        self.display_list.append(element)
        return element

    def add_image(self, x, y, texture, frame=None, layer=Layers.WORLD):
        return self.add(ImageElement(self.textures, x, y, texture, frame, layer=layer))

    def add_text(self, x, y, text, layer=Layers.UI, **style):
        return self.add(TextElement(x, y, text, layer=layer, **style))

    def add_rect(self, x, y, width, height, fill=None, fill_alpha=1.0, layer=Layers.UI):
        return self.add(RectElement(x, y, width, height, fill, fill_alpha, layer=layer))

    def play_animation(self, element, key: str):
        """
        Start a registered frame animation on ``element``.

        Returns:
            AnimationPlayer or None if ``key`` was never created
        """
        definition = self.animations.get(key)
        if definition is None:
            DebugLogger.warn(f"Missing animation '{key}'", category="animation")
            return None
        player = AnimationPlayer(element)
        player.play(definition)
        self.anim_players.append(player)
        return player

    def make_interactive(self, element, control=None):
        """Register ``element`` in the pointer table. No control = input blocker."""
        self.pointer.register(element, control)
        return control

    # ===========================================================
    # Input / Rendering
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Handle input events.

        Args:
            event: pygame event object
        """
        return self.pointer.handle_event(event)

    def draw(self, draw_manager):
        """
        Render the stage.

        Args:
            draw_manager: DrawManager instance for queuing draws
        """
        for element in self.display_list:
            element.draw(draw_manager)
