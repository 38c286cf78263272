"""
game_stage.py
-------------
Gameplay placeholder. Shows a header and an "End" button leading to GameOver.
"""

from tap_to_claim.core.runtime.game_settings import Display, Layers, Stages
from tap_to_claim.core.runtime.palette import Colors, color_with_hash
from tap_to_claim.scenes.base_stage import BaseStage
from tap_to_claim.ui.elements.interactive_control import text_button


class GameStage(BaseStage):

    def build(self):
        cx, cy = Display.WIDTH / 2, Display.HEIGHT / 2
        self.add_image(cx, cy, "background", layer=Layers.BACKGROUND)

        self.add_text(cx, 100, "Claiming...", font_size=52,
                      color=color_with_hash(Colors.LIGHT_GOLD)).set_origin(0.5)

        label = self.add_text(cx, cy + 200, "End", font_size=40,
                              color=color_with_hash(Colors.DARK_GOLD),
                              stroke=color_with_hash(Colors.YELLOW), stroke_thickness=2)
        label.set_origin(0.5)
        self.end_button = self.make_interactive(label, text_button(label, self.end_game))

    def end_game(self):
        self.start(Stages.GAME_OVER)
