"""
preload_stage.py
----------------
Loads the menu assets behind a progress bar, registers the coin
animation, then starts the main menu.
"""

from tap_to_claim.core.runtime.game_settings import Display, Layers, Stages
from tap_to_claim.scenes.base_stage import BaseStage
from tap_to_claim.ui.elements.progress_reporter import ProgressReporter


class PreloadStage(BaseStage):
    """Progress bar grows from the left; 100% equals BAR_MAX_WIDTH pixels."""

    OUTLINE_SIZE = (468, 32)
    BAR_HEIGHT = 28
    BAR_MIN_WIDTH = 4
    BAR_MAX_WIDTH = 464

    COIN_ANIMATION = "turning_coin_anim"

    def setup_once(self):
        cx, cy = Display.WIDTH / 2, Display.HEIGHT / 2

        # Background was fetched by Boot
        self.add_image(cx, cy, "background", layer=Layers.BACKGROUND)

        self.outline = self.add_rect(cx, cy, *self.OUTLINE_SIZE, layer=Layers.UI)
        self.outline.set_stroke_style(1, (255, 255, 255))

        # Left edge stays put while the width grows
        self.bar = self.add_rect(cx - 230 - self.BAR_MIN_WIDTH / 2, cy, self.BAR_MIN_WIDTH,
                                 self.BAR_HEIGHT, fill=(255, 255, 255), layer=Layers.UI)
        self.bar.set_origin(0.0, 0.5)

        self.reporter = ProgressReporter(self.bar, self.BAR_MIN_WIDTH, self.BAR_MAX_WIDTH)
        self.reporter.attach(self.loader)

    def prepare_assets(self, loader):
        self.declare_configured_assets(loader)

    def build(self):
        if not self.animations.exists(self.COIN_ANIMATION):
            frames = self.animations.generate_frame_names(
                "coin_atlas", prefix="TurningCoin", suffix=".png", start=1, end=4, zero_pad=0
            )
            self.animations.create(self.COIN_ANIMATION, frames, frame_rate=3, repeat=-1)

        self.start(Stages.MAIN_MENU)
