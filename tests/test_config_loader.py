"""Config loader tests: YAML parsing, mtime cache, defaults"""
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fortune_wheel.configuration import ColorPattern, PinPosition, WheelStartPosition
from fortune_wheel.lib import config_loader


@pytest.fixture(autouse=True)
def fresh_cache():
    config_loader.clear_cache()
    yield
    config_loader.clear_cache()


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


SAMPLE = """
wheel:
  start_position: right
  content_margins: 12
  slices:
    background_colors:
      pattern: even_odd
      colors: ["#000000", "#FFFFFF"]
pin:
  image: pointer.png
  position: left
spin:
  full_rotations: 7
  animation_curve: linear
"""


def test_load_sections(tmp_path):
    path = _write(tmp_path / "wheel.yaml", SAMPLE)

    wheel = config_loader.load_wheel_configuration(path)
    assert wheel.start_position == WheelStartPosition.RIGHT
    assert wheel.content_margins == 12
    assert wheel.layer_insets == 10.0
    colors = wheel.slice_preferences.background_colors
    assert colors.pattern == ColorPattern.EVEN_ODD
    assert colors.color_for_index(3) == "#FFFFFF"

    pin = config_loader.load_pin_configuration(path)
    assert pin.image == "pointer.png"
    assert pin.position == PinPosition.LEFT

    settings = config_loader.load_spin_settings(path)
    assert settings.full_rotations == 7
    assert settings.animation_curve == "linear"
    # Unspecified keys keep their defaults
    assert settings.animation_duration == 5.0


def test_cache_returns_same_object_until_modified(tmp_path):
    path = _write(tmp_path / "wheel.yaml", SAMPLE)

    first = config_loader.load_config(path)
    assert config_loader.load_config(path) is first

    _write(path, "spin:\n  full_rotations: 2\n")
    stat = os.stat(path)
    os.utime(path, (stat.st_atime, stat.st_mtime + 10))

    reloaded = config_loader.load_config(path)
    assert reloaded is not first
    assert reloaded["spin"]["full_rotations"] == 2


def test_missing_file_uses_defaults(tmp_path):
    data = config_loader.load_config(tmp_path / "nope.yaml")
    assert data["spin"]["full_rotations"] == 5
    assert config_loader.load_pin_configuration(tmp_path / "nope.yaml") is None


def test_empty_file_uses_defaults(tmp_path):
    path = _write(tmp_path / "empty.yaml", "")
    assert config_loader.load_spin_settings(path).animation_duration == 5.0


def test_non_mapping_root_rejected(tmp_path):
    path = _write(tmp_path / "list.yaml", "- 1\n- 2\n")
    with pytest.raises(ValueError):
        config_loader.load_config(path)


def test_invalid_pin_rejected(tmp_path):
    path = _write(tmp_path / "pin.yaml", "pin:\n  position: top\n")
    with pytest.raises(ValueError):
        config_loader.load_pin_configuration(path)


def test_package_defaults():
    settings = config_loader.load_spin_settings()
    assert settings.full_rotations == 5
    assert settings.tick_interval_ms == 16

    pin = config_loader.load_pin_configuration()
    assert pin.icon == "arrow_drop_down"

    wheel = config_loader.load_wheel_configuration()
    assert len(wheel.slice_preferences.background_colors.colors) == 4
    assert wheel.circle_preferences.center_indicator.radius == 30.0
