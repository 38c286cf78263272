"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame, the window and the game-wide caches
- Hand the StageController its registry and start the Boot stage
- Run one event -> update -> render pass per frame
- Stop cleanly on quit or on a fatal asset error
"""

import random

import pygame

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.game_settings import Display, Stages
from tap_to_claim.core.runtime.stage_controller import StageController
from tap_to_claim.core.services.asset_loader import AssetLoadError, TextureCache
from tap_to_claim.core.services.service_locator import ServiceLocator
from tap_to_claim.graphics.animations.frame_animation import AnimationRegistry
from tap_to_claim.graphics.draw_manager import DrawManager


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    One stage update per rendered frame; the frame delta is clamped to
    Display.MAX_FRAME_TIME.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, registry=None, asset_base_path: str = None):
        """
        Args:
            registry: StageRegistry to run (None = the game's default order)
            asset_base_path: Root folder for asset files (None = Assets.BASE_PATH)
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_core_systems()
        self._init_stage_controller(registry, asset_base_path)

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()

        # SCALED keeps the 1024x768 canvas and letterboxes on resize
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT), pygame.SCALED)
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}, caption '{Display.CAPTION}'")

    def _init_core_systems(self):
        """Create the draw manager and the caches shared by every stage."""
        self.draw_manager = DrawManager(Display.BACKGROUND_COLOR)
        self.services = ServiceLocator(
            textures=TextureCache(),
            animations=AnimationRegistry(),
            draw_manager=self.draw_manager,
        )
        self.services.register_global("set_cursor", self._set_cursor)
        self.services.register_global("rng", random.Random())

        DebugLogger.init_sub("TextureCache and AnimationRegistry ready")

    def _init_stage_controller(self, registry, asset_base_path):
        if registry is None:
            # Deferred: stage modules import the runtime package
            from tap_to_claim.scenes import default_registry
            registry = default_registry()

        self.stages = StageController(registry, self.services, asset_base_path=asset_base_path)
        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    @staticmethod
    def _set_cursor(hand: bool):
        """Show the hand cursor while a control is hovered."""
        cursor = pygame.SYSTEM_CURSOR_HAND if hand else pygame.SYSTEM_CURSOR_ARROW
        try:
            pygame.mouse.set_cursor(cursor)
        except pygame.error as e:
            DebugLogger.warn(f"Cursor change failed: {e}", category="input")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self, first_stage: str = Stages.BOOT):
        """Execute the main loop until quit."""
        if not self.stages.start(first_stage):
            DebugLogger.fail(f"Cannot start '{first_stage}'")
            self.running = False

        DebugLogger.section("Game Loop")

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Display.MAX_FRAME_TIME)

            self._handle_events()
            if not self.running:
                break

            try:
                self.stages.update(frame_time)
            except AssetLoadError as e:
                DebugLogger.fail(str(e), category="loading")
                self.running = False
                break

            self._draw()

        self.stages.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            self.stages.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.stages.draw(self.draw_manager)
        self.draw_manager.render(self.screen)
        pygame.display.flip()
