"""
asset_loader.py
---------------
Declarative asset queue and the game-wide texture cache it fills.

Responsibilities
----------------
- Let a stage declare images, sprite sheets and atlases in prepare_assets().
- Fetch one queued asset per frame and report progress through typed events.
- Store decoded surfaces in a TextureCache that outlives the stage.
- Raise AssetLoadError on a missing or malformed file (no retry).
"""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import pygame

from tap_to_claim.core.debug.debug_logger import DebugLogger
from tap_to_claim.core.runtime.game_settings import Assets
from tap_to_claim.core.services.event_manager import (
    EventManager,
    FileCompleteEvent,
    FileErrorEvent,
    LoadCompleteEvent,
    LoadProgressEvent,
)


class AssetLoadError(RuntimeError):
    """A declared asset could not be read or decoded."""

    def __init__(self, key: str, path: str, reason: str):
        super().__init__(f"Failed to load asset '{key}' from {path}: {reason}")
        self.key = key
        self.path = path
        self.reason = reason


@dataclass
class AssetRequest:
    """One queued asset declaration."""
    kind: str
    key: str
    path: str
    options: Dict = field(default_factory=dict)


# ===========================================================
# Texture Cache
# ===========================================================

class TextureCache:
    """Decoded surfaces keyed by asset key. Shared by every stage."""

    def __init__(self):
        self.images: Dict[str, pygame.Surface] = {}
        self.frames: Dict[str, Union[List[pygame.Surface], Dict[str, pygame.Surface]]] = {}

    def exists(self, key: str) -> bool:
        return key in self.images or key in self.frames

    def add_image(self, key: str, surface: pygame.Surface):
        self.images[key] = surface

    def add_frames(self, key: str, frames):
        self.frames[key] = frames

    def frame_names(self, key: str) -> List:
        """Frame identifiers for a sheet (indices) or atlas (names)."""
        frames = self.frames.get(key)
        if frames is None:
            return []
        if isinstance(frames, dict):
            return list(frames.keys())
        return list(range(len(frames)))

    def get_frame(self, key: str, frame: Optional[Union[int, str]] = None) -> Optional[pygame.Surface]:
        """
        Resolve a surface for ``key``.

        Args:
            key: Image, sprite sheet or atlas key
            frame: Frame index (sheet) or frame name (atlas); None picks the
                   plain image or the first frame

        Returns:
            pygame.Surface or None if the key or frame is unknown
        """
        if key in self.frames:
            frames = self.frames[key]
            if isinstance(frames, dict):
                if frame is None:
                    return next(iter(frames.values()), None)
                return frames.get(frame)
            index = 0 if frame is None else frame
            if isinstance(index, int) and 0 <= index < len(frames):
                return frames[index]
            return None

        return self.images.get(key)

    def clear(self):
        self.images.clear()
        self.frames.clear()


# ===========================================================
# Asset Loader
# ===========================================================

class AssetLoader:
    """
    Per-stage loader. The stage controller creates a fresh one for every
    activation, so subscriptions die with the stage that made them.
    """

    def __init__(self, textures: TextureCache, base_path: str = None):
        self.textures = textures
        self.base_path = base_path if base_path is not None else Assets.BASE_PATH
        self.events = EventManager()

        self._queue: List[AssetRequest] = []
        self._total = 0
        self._done = 0
        self._complete_sent = False

    # ===========================================================
    # Declarations
    # ===========================================================

    def set_path(self, path: str):
        """Set the folder that subsequent relative paths are resolved against."""
        self.base_path = path

    def image(self, key: str, path: str):
        self._enqueue(AssetRequest("image", key, self._resolve(path)))

    def spritesheet(self, key: str, path: str, frame_width: int, frame_height: int):
        self._enqueue(AssetRequest(
            "spritesheet", key, self._resolve(path),
            {"frame_width": frame_width, "frame_height": frame_height},
        ))

    def atlas(self, key: str, texture_path: str, manifest_path: str):
        self._enqueue(AssetRequest(
            "atlas", key, self._resolve(texture_path),
            {"manifest": self._resolve(manifest_path)},
        ))

    def declare(self, manifest: List[Dict]):
        """
        Queue entries from a config manifest.

        Each entry needs ``type`` and ``key``; images and sprite sheets take
        ``path``, atlases take ``texture`` and ``manifest``.
        """
        for entry in manifest:
            kind = entry.get("type")
            key = entry.get("key")
            if kind == "image":
                self.image(key, entry["path"])
            elif kind == "spritesheet":
                self.spritesheet(key, entry["path"], entry["frame_width"], entry["frame_height"])
            elif kind == "atlas":
                self.atlas(key, entry["texture"], entry["manifest"])
            else:
                DebugLogger.warn(f"Unknown asset type '{kind}' for key '{key}'", category="loading")

    def _enqueue(self, request: AssetRequest):
        # Keys already in the shared cache are not fetched twice
        if self.textures.exists(request.key):
            DebugLogger.trace(f"Skipping cached asset '{request.key}'", category="loading")
            return
        self._queue.append(request)
        self._total += 1
        self._complete_sent = False

    def _resolve(self, path: str) -> str:
        if os.path.isabs(path) or not self.base_path:
            return path
        return os.path.join(self.base_path, path)

    # ===========================================================
    # Subscriptions
    # ===========================================================

    def on(self, event_type, callback):
        self.events.subscribe(event_type, callback)

    # ===========================================================
    # Loading
    # ===========================================================

    @property
    def pending(self) -> bool:
        return bool(self._queue)

    @property
    def total(self) -> int:
        return self._total

    @property
    def progress(self) -> float:
        if self._total == 0:
            return 1.0
        return self._done / self._total

    def update(self) -> bool:
        """
        Fetch the next queued asset.

        Returns:
            bool: True once the queue is empty

        Raises:
            AssetLoadError: If the asset cannot be loaded
        """
        if self._queue:
            request = self._queue.pop(0)
            self._load(request)
            self._done += 1
            self.events.dispatch(FileCompleteEvent(request.key, request.kind))
            self.events.dispatch(LoadProgressEvent(self.progress))

        if self._queue:
            return False

        if not self._complete_sent:
            self._complete_sent = True
            DebugLogger.system(f"Loaded {self._done}/{self._total} assets", category="loading")
            self.events.dispatch(LoadCompleteEvent(self._total))
        return True

    def load_all(self):
        """Drain the whole queue in one call."""
        while not self.update():
            pass

    def _load(self, request: AssetRequest):
        loaders = {
            "image": self._load_image,
            "spritesheet": self._load_spritesheet,
            "atlas": self._load_atlas,
        }
        try:
            loaders[request.kind](request)
        except (FileNotFoundError, OSError, pygame.error, ValueError, KeyError) as e:
            self.events.dispatch(FileErrorEvent(request.key, request.path, str(e)))
            DebugLogger.fail(f"Asset '{request.key}' failed: {e}", category="loading")
            raise AssetLoadError(request.key, request.path, str(e)) from e

        DebugLogger.action(f"Loaded {request.kind} '{request.key}'", category="loading")

    # ===========================================================
    # Decoders
    # ===========================================================

    @staticmethod
    def _read_surface(path: str) -> pygame.Surface:
        surface = pygame.image.load(path)
        # convert_alpha needs a display mode; headless runs keep the raw surface
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return surface

    def _load_image(self, request: AssetRequest):
        self.textures.add_image(request.key, self._read_surface(request.path))

    def _load_spritesheet(self, request: AssetRequest):
        sheet = self._read_surface(request.path)
        fw = request.options["frame_width"]
        fh = request.options["frame_height"]
        if fw <= 0 or fh <= 0:
            raise ValueError(f"invalid frame size {fw}x{fh}")

        width, height = sheet.get_size()
        frames = [
            sheet.subsurface(pygame.Rect(x, y, fw, fh))
            for y in range(0, height - fh + 1, fh)
            for x in range(0, width - fw + 1, fw)
        ]
        if not frames:
            raise ValueError(f"sheet {width}x{height} smaller than one {fw}x{fh} frame")
        self.textures.add_frames(request.key, frames)

    def _load_atlas(self, request: AssetRequest):
        texture = self._read_surface(request.path)
        with open(request.options["manifest"], "r", encoding="utf-8") as f:
            manifest = json.load(f)

        entries = manifest["frames"]
        # TexturePacker writes either a name->data hash or a list with "filename"
        if isinstance(entries, dict):
            items = entries.items()
        else:
            items = ((entry["filename"], entry) for entry in entries)

        frames = {}
        for name, data in items:
            rect = data["frame"]
            frames[name] = texture.subsurface(pygame.Rect(rect["x"], rect["y"], rect["w"], rect["h"]))
        self.textures.add_frames(request.key, frames)
