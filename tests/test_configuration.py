"""Configuration and slice model validation"""
import sys
import os
import math

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fortune_wheel.configuration import (
    PinConfiguration, PinPosition, SliceBackgroundColors, SpinSettings,
    WheelConfiguration, WheelGeometry, WheelStartPosition,
)
from fortune_wheel.slices import ContentKind, ImageContent, Slice, TextContent, TextMode


# ── Positions ──

def test_start_position_radians():
    assert WheelStartPosition.TOP.radians == 0.0
    assert WheelStartPosition.RIGHT.radians == pytest.approx(math.pi / 2)
    assert WheelStartPosition.BOTTOM.radians == pytest.approx(math.pi)
    assert WheelStartPosition.LEFT.radians == pytest.approx(3 * math.pi / 2)


def test_position_parse():
    assert WheelStartPosition.parse("BOTTOM") is WheelStartPosition.BOTTOM
    assert WheelStartPosition.parse(WheelStartPosition.LEFT) is WheelStartPosition.LEFT
    assert PinPosition.parse("right") is PinPosition.RIGHT
    with pytest.raises(ValueError):
        WheelStartPosition.parse("diagonal")


def test_geometry_needs_a_slice():
    with pytest.raises(ValueError):
        WheelGeometry(0)
    assert WheelGeometry(3).start_position is WheelStartPosition.TOP


# ── Colors ──

def test_even_odd_colors():
    colors = SliceBackgroundColors.even_odd("#111", "#222")
    assert [colors.color_for_index(i) for i in range(4)] == ["#111", "#222", "#111", "#222"]


def test_custom_colors_cycle():
    colors = SliceBackgroundColors.custom(["a", "b", "c"])
    assert [colors.color_for_index(i) for i in range(5)] == ["a", "b", "c", "a", "b"]


def test_colors_validation():
    with pytest.raises(ValueError):
        SliceBackgroundColors.custom([])
    with pytest.raises(ValueError):
        SliceBackgroundColors.from_dict({"pattern": "even_odd", "colors": ["#fff"]})


# ── Pin / settings ──

def test_pin_needs_a_visual():
    with pytest.raises(ValueError):
        PinConfiguration()
    assert PinConfiguration(icon="arrow").position is PinPosition.TOP


def test_spin_settings_from_dict_keeps_defaults():
    settings = SpinSettings.from_dict({"full_rotations": 9, "edge_collision_detection": True})
    assert settings.full_rotations == 9
    assert settings.edge_collision_detection
    assert settings.animation_curve == "ease_out_cubic"
    assert settings.landing_full_rotations == 2


def test_wheel_configuration_from_empty_dict():
    config = WheelConfiguration.from_dict({})
    assert config.start_position is WheelStartPosition.TOP
    assert config.slice_preferences.background_colors is None
    assert config.circle_preferences.border_dots is None


# ── Slices ──

def test_slice_background_conflict():
    with pytest.raises(ValueError):
        Slice(background_color="#fff", gradient=object())
    with pytest.raises(ValueError):
        Slice(background_color="#fff", background_image="bg.png")


def test_slice_factories():
    text = Slice.text("Win", data={"prize": 1})
    assert text.contents[0].kind is ContentKind.TEXT
    assert text.contents[0].mode is TextMode.HORIZONTAL
    assert text.data == {"prize": 1}

    image = Slice.image("coin.png")
    assert image.contents[0].preferred_size == (50.0, 50.0)

    both = Slice.text_with_image("Coin", "coin.png")
    assert [c.kind for c in both.contents] == [ContentKind.IMAGE, ContentKind.TEXT]
    assert isinstance(both.contents[0], ImageContent)
    assert isinstance(both.contents[1], TextContent)
