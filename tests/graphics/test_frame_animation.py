"""
test_frame_animation.py
-----------------------
Unit tests for AnimationRegistry and AnimationPlayer.
"""

from types import SimpleNamespace

import pytest

from tap_to_claim.graphics.animations.frame_animation import (
    AnimationFrame,
    AnimationPlayer,
    AnimationRegistry,
)


@pytest.fixture
def registry():
    return AnimationRegistry()


@pytest.fixture
def coin_frames():
    return AnimationRegistry.generate_frame_names(
        "coin_atlas", prefix="TurningCoin", suffix=".png", start=1, end=4
    )


@pytest.fixture
def sprite():
    return SimpleNamespace(texture="coin_atlas", frame="Coin1.png")


def test_generate_frame_names(coin_frames):
    assert [f.frame for f in coin_frames] == [
        "TurningCoin1.png", "TurningCoin2.png", "TurningCoin3.png", "TurningCoin4.png",
    ]
    assert all(f.texture == "coin_atlas" for f in coin_frames)


def test_generate_frame_names_zero_pad():
    frames = AnimationRegistry.generate_frame_names("atlas", prefix="f", start=8, end=10, zero_pad=3)
    assert [f.frame for f in frames] == ["f008", "f009", "f010"]


def test_create_and_lookup(registry, coin_frames):
    definition = registry.create("turning_coin_anim", coin_frames, frame_rate=3, repeat=-1)

    assert registry.exists("turning_coin_anim")
    assert registry.get("turning_coin_anim") is definition
    assert registry.get("other") is None
    assert len(definition.frames) == 4


def test_duplicate_key_keeps_first(registry, coin_frames):
    first = registry.create("turning_coin_anim", coin_frames, frame_rate=3)
    second = registry.create("turning_coin_anim", coin_frames[:1], frame_rate=10)
    assert second is first


@pytest.mark.parametrize("frames, rate", [([], 3), ([AnimationFrame("a", 0)], 0)])
def test_invalid_definition_raises(registry, frames, rate):
    with pytest.raises(ValueError):
        registry.create("bad", frames, frame_rate=rate)


def test_play_applies_first_frame(registry, coin_frames, sprite):
    player = AnimationPlayer(sprite)
    player.play(registry.create("spin", coin_frames, frame_rate=3, repeat=-1))
    assert sprite.frame == "TurningCoin1.png"


def test_looping_is_cyclic(registry, coin_frames, sprite):
    player = AnimationPlayer(sprite)
    player.play(registry.create("spin", coin_frames, frame_rate=3, repeat=-1))

    for _ in range(4 * 5):
        player.advance()
    assert sprite.frame == "TurningCoin1.png"

    player.advance()
    assert sprite.frame == "TurningCoin2.png"
    assert player.playing


def test_non_looping_stops_on_last_frame(registry, coin_frames, sprite):
    player = AnimationPlayer(sprite)
    player.play(registry.create("once", coin_frames, frame_rate=3, repeat=0))

    for _ in range(10):
        player.advance()

    assert sprite.frame == "TurningCoin4.png"
    assert not player.playing


def test_update_follows_frame_rate(registry, coin_frames, sprite):
    player = AnimationPlayer(sprite)
    player.play(registry.create("spin", coin_frames, frame_rate=3, repeat=-1))

    player.update(0.2)
    assert sprite.frame == "TurningCoin1.png"
    player.update(0.2)
    assert sprite.frame == "TurningCoin2.png"
    player.update(1.0)
    assert sprite.frame == "TurningCoin1.png"


def test_stop_freezes_frame(registry, coin_frames, sprite):
    player = AnimationPlayer(sprite)
    player.play(registry.create("spin", coin_frames, frame_rate=3, repeat=-1))
    player.stop()
    player.update(5.0)
    assert sprite.frame == "TurningCoin1.png"
