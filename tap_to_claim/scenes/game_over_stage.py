"""
game_over_stage.py
------------------
Last stage of the chain. Nothing starts from here.
"""

from tap_to_claim.core.runtime.game_settings import Display, Layers
from tap_to_claim.core.runtime.palette import Colors, color_with_hash
from tap_to_claim.scenes.base_stage import BaseStage


class GameOverStage(BaseStage):

    def build(self):
        cx, cy = Display.WIDTH / 2, Display.HEIGHT / 2
        self.add_image(cx, cy, "background", layer=Layers.BACKGROUND)
        self.title = self.add_text(cx, cy, "Game Over", font_size=64,
                                   color="#ffffff", stroke=color_with_hash(Colors.DEEP_GOLD),
                                   stroke_thickness=4)
        self.title.set_origin(0.5)
