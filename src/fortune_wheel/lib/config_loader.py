"""
Configuration loader with mtime-based Hot-Reload.
src/fortune_wheel/lib/config_loader.py

Loads the wheel configuration (.yaml): appearance, pin and spin timing,
from fortune_wheel/config/ or an explicit path. Caches by file mtime:
a modified file is re-read on the next call.
"""

import os
import yaml
import logging

from ..configuration import PinConfiguration, SpinSettings, WheelConfiguration

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Cache storage
# ─────────────────────────────────────────────────────────────────────────────

_cache = {}  # path → { "mtime": float, "data": any }

_CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config")

DEFAULT_CONFIG_FILE = "wheel_config.yaml"


def _get_path(*parts):
    return os.path.join(_CONFIG_DIR, *parts)


def _load_yaml_with_cache(filepath):
    """Read and parse YAML file if mtime changed."""
    if not os.path.exists(filepath):
        logger.error(f"[ConfigLoader] File not found: {filepath}")
        return None

    mtime = os.path.getmtime(filepath)
    cached = _cache.get(filepath)

    if cached and cached["mtime"] == mtime:
        return cached["data"]

    with open(filepath, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    basename = os.path.basename(filepath)
    if cached:
        logger.info(f"[ConfigLoader] Reloaded: {basename}")
    else:
        logger.info(f"[ConfigLoader] Loaded: {basename}")

    _cache[filepath] = {"mtime": mtime, "data": data}
    return data


def clear_cache():
    _cache.clear()


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def load_config(path=None):
    """
    Load the raw configuration dict.

    Args:
        path: YAML file; defaults to fortune_wheel/config/wheel_config.yaml
    Returns:
        dict with optional keys: wheel, pin, spin. Built-in defaults if the
        file is missing or empty.
    """
    filepath = os.fspath(path) if path is not None else _get_path(DEFAULT_CONFIG_FILE)
    data = _load_yaml_with_cache(filepath)
    if not data:
        logger.error(f"[ConfigLoader] Failed to load {os.path.basename(filepath)}, using defaults")
        return _default_config()
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {filepath}")
    return data


def load_wheel_configuration(path=None):
    """Return WheelConfiguration from the `wheel:` section."""
    return WheelConfiguration.from_dict(load_config(path).get("wheel") or {})


def load_spin_settings(path=None):
    """Return SpinSettings from the `spin:` section."""
    return SpinSettings.from_dict(load_config(path).get("spin") or {})


def load_pin_configuration(path=None):
    """Return PinConfiguration from the `pin:` section, or None when absent."""
    pin = load_config(path).get("pin")
    if not pin:
        return None
    return PinConfiguration.from_dict(pin)


def _default_config():
    """Fallback defaults if config file is missing."""
    return {
        "wheel": {
            "start_position": "top",
            "layer_insets": 10.0,
            "content_margins": 8.0,
        },
        "spin": {
            "animation_duration": 5.0,
            "animation_curve": "ease_out_cubic",
            "full_rotations": 5,
            "continuous_rotations_per_second": 1.0,
            "deceleration_duration": 3.0,
        },
    }
