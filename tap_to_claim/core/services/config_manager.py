"""
config_manager.py
-----------------
Reads the YAML/JSON files under ``tap_to_claim/config``.

Bare names ("main_menu.yaml") resolve against the packaged config folder;
absolute or existing relative paths are used as given. The loaded mapping
is merged over an optional default mapping, so a partial file only
overrides the keys it sets. Keys named ``_notes`` are comments for humans
and never reach the game.
"""

import json
import os

import yaml

from tap_to_claim.core.debug.debug_logger import DebugLogger


CONFIG_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

NOTES_KEY = "_notes"

_PARSERS = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def load_config(filename, default_dict=None, strict=False):
    """
    Load and merge a configuration file.

    Args:
        filename: Name inside the config folder, or a path
        default_dict: Values used for keys the file does not set
        strict: Raise instead of falling back to ``default_dict``

    Returns:
        dict: ``default_dict`` overlaid with the file's contents

    Raises:
        FileNotFoundError: In strict mode, if the file is missing or unparsable
    """
    defaults = default_dict or {}
    path = resolve_config_path(filename)

    try:
        data = _read(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return dict(defaults)

    if not isinstance(data, dict):
        data = {}
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return merge_config(defaults, data)


def resolve_config_path(filename):
    if os.path.isabs(filename) or os.path.exists(filename):
        return filename
    return os.path.join(CONFIG_ROOT, filename.replace("\\", "/").lstrip("/"))


def merge_config(base, override):
    """Recursive dict overlay. Nested dicts merge, everything else replaces."""
    merged = dict(base)
    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = value
    return merged


def _read(path):
    # JSON is the fallback for unknown suffixes
    parser = _PARSERS.get(os.path.splitext(path)[1].lower(), json.load)
    with open(path, "r", encoding="utf-8") as f:
        return parser(f)
