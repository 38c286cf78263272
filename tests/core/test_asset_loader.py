"""
test_asset_loader.py
--------------------
Unit tests for AssetLoader and TextureCache.

Responsibilities
----------------
- Verify images, sprite sheets and atlases end up in the shared cache.
- Verify progress, file-complete and load-complete notifications.
- Verify cached keys are skipped and missing files raise AssetLoadError.
"""

import pytest

from tap_to_claim.core.services.asset_loader import AssetLoadError, AssetLoader, TextureCache
from tap_to_claim.core.services.event_manager import (
    FileCompleteEvent,
    FileErrorEvent,
    LoadCompleteEvent,
    LoadProgressEvent,
)
from tests.conftest import write_atlas, write_png


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def loader(textures, tmp_path):
    return AssetLoader(textures, base_path=str(tmp_path))


def record(loader, *event_types):
    seen = []
    for event_type in event_types:
        loader.on(event_type, seen.append)
    return seen


# ===========================================================
# Declarations
# ===========================================================

def test_empty_loader_is_complete(loader):
    assert not loader.pending
    assert loader.progress == 1.0

    seen = record(loader, LoadCompleteEvent)
    assert loader.update() is True
    assert seen == [LoadCompleteEvent(0)]


def test_image_is_cached_under_key(loader, textures, tmp_path):
    write_png(tmp_path / "bg.png", (40, 20))
    loader.image("background", "bg.png")

    assert loader.pending
    assert loader.update() is True
    assert textures.get_frame("background").get_size() == (40, 20)


def test_relative_paths_use_set_path(textures, tmp_path):
    sub = tmp_path / "images"
    sub.mkdir()
    write_png(sub / "bg.png")

    loader = AssetLoader(textures, base_path="unused")
    loader.set_path(str(sub))
    loader.image("background", "bg.png")
    loader.load_all()

    assert textures.exists("background")


def test_spritesheet_is_sliced_into_frames(loader, textures, tmp_path):
    write_png(tmp_path / "platforms.png", (256, 16))
    loader.spritesheet("platforms", "platforms.png", 64, 16)
    loader.load_all()

    assert textures.frame_names("platforms") == [0, 1, 2, 3]
    assert textures.get_frame("platforms", 3).get_size() == (64, 16)
    assert textures.get_frame("platforms", 4) is None


def test_spritesheet_smaller_than_frame_fails(loader, tmp_path):
    write_png(tmp_path / "tiny.png", (8, 8))
    loader.spritesheet("tiny", "tiny.png", 64, 16)

    with pytest.raises(AssetLoadError):
        loader.update()


@pytest.mark.parametrize("as_array", [False, True])
def test_atlas_frames_by_name(loader, textures, tmp_path, as_array):
    write_atlas(tmp_path / "coin.png", tmp_path / "coin.json",
                ["Coin1.png", "TurningCoin1.png"], as_array=as_array)
    loader.atlas("coin_atlas", "coin.png", "coin.json")
    loader.load_all()

    assert textures.frame_names("coin_atlas") == ["Coin1.png", "TurningCoin1.png"]
    assert textures.get_frame("coin_atlas", "TurningCoin1.png").get_size() == (32, 32)
    assert textures.get_frame("coin_atlas", "Nope.png") is None
    # No frame given: first frame
    assert textures.get_frame("coin_atlas") is not None


def test_declare_reads_manifest_entries(loader, textures, tmp_path):
    write_png(tmp_path / "bg.png")
    write_png(tmp_path / "platforms.png", (128, 16))
    write_atlas(tmp_path / "coin.png", tmp_path / "coin.json", ["Coin1.png"])

    loader.declare([
        {"type": "image", "key": "background", "path": "bg.png"},
        {"type": "spritesheet", "key": "platforms", "path": "platforms.png",
         "frame_width": 64, "frame_height": 16},
        {"type": "atlas", "key": "coin_atlas", "texture": "coin.png", "manifest": "coin.json"},
        {"type": "audio", "key": "music", "path": "music.ogg"},
    ])

    assert loader.total == 3
    loader.load_all()
    assert all(textures.exists(k) for k in ("background", "platforms", "coin_atlas"))


# ===========================================================
# Progress and events
# ===========================================================

def test_one_file_per_update_with_progress(loader, tmp_path):
    for name in ("a", "b", "c"):
        write_png(tmp_path / f"{name}.png")
        loader.image(name, f"{name}.png")
    seen = record(loader, LoadProgressEvent, FileCompleteEvent, LoadCompleteEvent)

    results = [loader.update() for _ in range(3)]

    assert results == [False, False, True]
    progress = [e.fraction for e in seen if isinstance(e, LoadProgressEvent)]
    assert progress == pytest.approx([1 / 3, 2 / 3, 1.0])
    assert [e.key for e in seen if isinstance(e, FileCompleteEvent)] == ["a", "b", "c"]
    assert sum(isinstance(e, LoadCompleteEvent) for e in seen) == 1


def test_load_complete_is_sent_once(loader, tmp_path):
    write_png(tmp_path / "a.png")
    loader.image("a", "a.png")
    seen = record(loader, LoadCompleteEvent)

    loader.update()
    loader.update()

    assert seen == [LoadCompleteEvent(1)]


def test_cached_key_is_skipped(textures, tmp_path):
    write_png(tmp_path / "bg.png")
    first = AssetLoader(textures, base_path=str(tmp_path))
    first.image("background", "bg.png")
    first.load_all()

    second = AssetLoader(textures, base_path=str(tmp_path))
    second.image("background", "bg.png")

    assert not second.pending
    assert second.total == 0


def test_missing_file_reports_and_raises(loader, tmp_path):
    loader.image("ghost", "ghost.png")
    errors = record(loader, FileErrorEvent)

    with pytest.raises(AssetLoadError) as exc:
        loader.update()

    assert exc.value.key == "ghost"
    assert exc.value.path.endswith("ghost.png")
    assert len(errors) == 1 and errors[0].key == "ghost"


def test_broken_atlas_manifest_raises(loader, tmp_path):
    write_png(tmp_path / "coin.png")
    (tmp_path / "coin.json").write_text("{\"frames\": {\"Coin1.png\": {}}}", encoding="utf-8")
    loader.atlas("coin_atlas", "coin.png", "coin.json")

    with pytest.raises(AssetLoadError):
        loader.update()


# ===========================================================
# Texture cache
# ===========================================================

def test_texture_cache_unknown_key():
    cache = TextureCache()
    assert cache.get_frame("nothing") is None
    assert cache.frame_names("nothing") == []
    assert not cache.exists("nothing")
