"""
boot_stage.py
-------------
First stage: fetches the background the preload screen sits on.
"""

from tap_to_claim.core.runtime.game_settings import Stages
from tap_to_claim.scenes.base_stage import BaseStage


class BootStage(BaseStage):

    def prepare_assets(self, loader):
        self.declare_configured_assets(loader)

    def build(self):
        self.start(Stages.PRELOAD)
