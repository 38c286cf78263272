"""
Service exports.

Provides the asset pipeline, typed events, config loading and the
service locator handed to every stage.
"""

from tap_to_claim.core.services.asset_loader import AssetLoadError, AssetLoader, TextureCache
from tap_to_claim.core.services.config_manager import load_config
from tap_to_claim.core.services.event_manager import (
    EventManager,
    FileCompleteEvent,
    FileErrorEvent,
    LoadCompleteEvent,
    LoadProgressEvent,
)
from tap_to_claim.core.services.service_locator import ServiceLocator

__all__ = [
    'AssetLoadError',
    'AssetLoader',
    'TextureCache',
    'load_config',
    'EventManager',
    'FileCompleteEvent',
    'FileErrorEvent',
    'LoadCompleteEvent',
    'LoadProgressEvent',
    'ServiceLocator',
]
