"""
Stage module exports.

Provides the base stage, the five game stages and the registry that puts
them in their fixed order.
"""

from tap_to_claim.core.runtime.game_settings import Stages
from tap_to_claim.core.runtime.stage_registry import StageRegistry
from tap_to_claim.scenes.base_stage import BaseStage
from tap_to_claim.scenes.boot_stage import BootStage
from tap_to_claim.scenes.game_over_stage import GameOverStage
from tap_to_claim.scenes.game_stage import GameStage
from tap_to_claim.scenes.main_menu_stage import MainMenuStage
from tap_to_claim.scenes.preload_stage import PreloadStage


STAGE_CLASSES = {
    Stages.BOOT: BootStage,
    Stages.PRELOAD: PreloadStage,
    Stages.MAIN_MENU: MainMenuStage,
    Stages.GAME: GameStage,
    Stages.GAME_OVER: GameOverStage,
}


def default_registry() -> StageRegistry:
    """Registry holding Boot, Preload, MainMenu, Game, GameOver in that order."""
    registry = StageRegistry()
    for name in Stages.ORDER:
        registry.register(name, STAGE_CLASSES[name])
    return registry


__all__ = [
    'BaseStage',
    'BootStage',
    'PreloadStage',
    'MainMenuStage',
    'GameStage',
    'GameOverStage',
    'STAGE_CLASSES',
    'default_registry',
]
