"""
main_menu_stage.py
------------------
Main menu: drifting platforms, the coin balance, the coin button and the
Connect-Wallet dialog that covers everything until it is dismissed.

Layout values come from config/main_menu.yaml.
"""

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.game_settings import Display, Layers, Stages
from tap_to_claim.core.runtime.palette import Colors, color_with_hash
from tap_to_claim.core.services.config_manager import load_config
from tap_to_claim.graphics.ambient_pool import AmbientPool
from tap_to_claim.scenes.base_stage import BaseStage
from tap_to_claim.ui.elements.dialog_group import DialogGroup
from tap_to_claim.ui.elements.image import ImageElement
from tap_to_claim.ui.elements.interactive_control import coin_button, text_button


class MainMenuStage(BaseStage):
    """
    Menu stage. The dialog starts visible; the coin button and the Play
    button underneath only receive input once it is hidden.
    """

    CONFIG_FILE = "main_menu.yaml"
    COIN_TEXTURE = "coin_atlas"
    COIN_FRAME = "Coin1.png"

    def setup_once(self):
        self.cfg = load_config(self.CONFIG_FILE).get("main_menu", {})
        self.cx = Display.WIDTH / 2
        self.cy = Display.HEIGHT / 2

    def build(self):
        self._build_background()
        self._build_game_ui()
        self._build_connect_wallet_ui()

    # ===========================================================
    # Background
    # ===========================================================

    def _build_background(self):
        self.background = self.add_image(self.cx, self.cy, "background", layer=Layers.BACKGROUND)

        ambient = dict(self.cfg.get("ambient", {}))
        texture = ambient.pop("texture", "platforms")
        self.ambient = AmbientPool(rng=self.services.get_global("rng"), **ambient)
        self.ambient.spawn()

        # One sprite redrawn per actor instead of N display objects
        self.ambient_sprite = ImageElement(self.textures, 0, 0, texture, 0, layer=Layers.AMBIENT)

    # ===========================================================
    # Game UI
    # ===========================================================

    def _build_game_ui(self):
        title_cfg = self.cfg.get("title", {})
        self.title = self.add_text(
            self.cx, title_cfg.get("y", 100), title_cfg.get("text", "Tap to Claim!"),
            font_size=title_cfg.get("font_size", 52), color="#ffffff", stroke="#ffffff",
            stroke_thickness=title_cfg.get("stroke_thickness", 1),
        ).set_origin(0.5)

        coin_cfg = self.cfg.get("spinning_coin", {})
        self.spinning_coin = self.add_image(
            self.cx + coin_cfg.get("offset_x", -100), coin_cfg.get("y", 200),
            self.COIN_TEXTURE, "TurningCoin1.png",
        )
        self.spinning_coin.scale = coin_cfg.get("scale", 0.2)
        self.play_animation(self.spinning_coin, coin_cfg.get("animation", "turning_coin_anim"))

        balance_cfg = self.cfg.get("balance", {})
        self.balance = self.add_text(
            self.cx + balance_cfg.get("offset_x", 50), balance_cfg.get("y", 200),
            balance_cfg.get("text", "001000"), font_size=balance_cfg.get("font_size", 40),
            color="#ffffff", stroke=color_with_hash(Colors.DARK_GOLD),
            stroke_thickness=balance_cfg.get("stroke_thickness", 2),
        ).set_origin(0.5)

        button_cfg = self.cfg.get("coin_button", {})
        self.coin = self.add_image(self.cx, button_cfg.get("y", 500), self.COIN_TEXTURE, self.COIN_FRAME)
        self.coin_control = self.make_interactive(
            self.coin, coin_button(self.coin, self.tweens, self.click_coin)
        )

        play_cfg = self.cfg.get("play_button", {})
        play_label = self.add_text(
            self.cx, play_cfg.get("y", 640), play_cfg.get("text", "Play"),
            font_size=play_cfg.get("font_size", 40), color="#0f0",
        ).set_origin(0.5)
        self.play_control = self.make_interactive(play_label, text_button(play_label, self.click_play))

    # ===========================================================
    # Connect Wallet Dialog
    # ===========================================================

    def _build_connect_wallet_ui(self):
        wallet_cfg = self.cfg.get("connect_wallet", {})
        offset = wallet_cfg.get("pointer_offset", 100)
        pointer_size = wallet_cfg.get("pointer_font_size", 50)

        # Covers the whole canvas and swallows input for everything below
        self.dimmer = self.add_rect(
            self.cx, self.cy, Display.WIDTH, Display.HEIGHT, fill=(0, 0, 0),
            fill_alpha=wallet_cfg.get("dim_alpha", 0.95), layer=Layers.MODAL_DIM,
        )
        self.make_interactive(self.dimmer)

        pointer_down = self.add_text(self.cx, self.cy - offset, "🔽", font_size=pointer_size,
                                     layer=Layers.MODAL).set_origin(0.5)
        pointer_up = self.add_text(self.cx, self.cy + offset, "🔼", font_size=pointer_size,
                                   layer=Layers.MODAL).set_origin(0.5)

        wallet_label = self.add_text(
            self.cx, self.cy, wallet_cfg.get("text", "Connect Wallet"),
            font_size=wallet_cfg.get("font_size", 40), color=color_with_hash(Colors.DARK_GOLD),
            stroke=color_with_hash(Colors.YELLOW), stroke_thickness=wallet_cfg.get("stroke_thickness", 3),
            layer=Layers.MODAL,
        ).set_origin(0.5)
        self.wallet_control = self.make_interactive(
            wallet_label, text_button(wallet_label, self.click_connect_wallet)
        )

        loading_cfg = self.cfg.get("loading_text", {})
        self.loading_text = self.add_text(
            self.cx, self.cy, loading_cfg.get("text", "Loading..."),
            font_size=loading_cfg.get("font_size", 30), layer=Layers.MODAL,
        ).set_origin(0.5)
        self.loading_text.reveal = 0.0
        self.tweens.add(self.loading_text, {"reveal": 1.0},
                        duration=loading_cfg.get("reveal_duration", 2.0), repeat=-1)
        self.loading_text.set_visible(False)

        self.dialog = DialogGroup(
            [pointer_down, pointer_up, wallet_label],
            dimmer=self.dimmer, status=self.loading_text, name="connect_wallet",
        )

    # ===========================================================
    # Actions
    # ===========================================================

    def click_coin(self):
        DebugLogger.action("Hello from btn callback", category="ui")
        self.loading_text.set_visible(True)

    def click_play(self):
        self.start(Stages.GAME)

    def click_connect_wallet(self):
        self.dialog.hide()

    # ===========================================================
    # Frame
    # ===========================================================

    def tick(self, dt: float):
        self.ambient.update()

    def draw(self, draw_manager):
        self.ambient.draw(draw_manager, self.ambient_sprite)
        super().draw(draw_manager)
