"""
config_manager.py
-----------------
Loads tuning overrides from disk and merges them over the built-in defaults.

Features:
- Supports .json and .yaml/.yml files
- Recursively merges nested sections (e.g. upgrade_base_costs)
- Ignores '_notes' keys for human-readable configs
- Drops unknown keys with a warning instead of failing
"""

import json
import os
from dataclasses import asdict, fields

import yaml

from catfish.core.debug.debug_logger import DebugLogger
from catfish.core.runtime.game_settings import TuningConfig


YAML_EXTENSIONS = (".yaml", ".yml")


# ===========================================================
# Public API
# ===========================================================

def load_config(path, default_dict=None, strict=False):
    """
    Load a configuration file and merge it over defaults.

    Args:
        path: Path to a .json, .yaml or .yml file
        default_dict: Default fallback config
        strict: If True, raise on a missing or malformed file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    try:
        if path.lower().endswith(YAML_EXTENSIONS):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"Top level of {os.path.basename(path)} must be a mapping")

        return _merge_dicts(default_dict, data)

    except FileNotFoundError as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {path}") from e
        DebugLogger.warn(f"Config not found: {path} - using defaults", category="loading")
        return dict(default_dict)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise ValueError(f"Invalid config {path}: {e}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return dict(default_dict)


def load_tuning(path=None, strict=False) -> TuningConfig:
    """
    Build a TuningConfig, optionally overridden by a config file.

    Args:
        path: Optional override file; None returns pure defaults
        strict: Propagate load errors instead of falling back

    Returns:
        TuningConfig: Merged tuning values
    """
    defaults = asdict(TuningConfig())
    if path is None:
        return TuningConfig(**defaults)

    merged = load_config(path, defaults, strict=strict)

    known = {f.name for f in fields(TuningConfig)}
    unknown = sorted(set(merged) - known)
    for key in unknown:
        DebugLogger.warn(f"Ignoring unknown tuning key '{key}'", category="loading")
        merged.pop(key)

    DebugLogger.system(f"Tuning loaded from {os.path.basename(path)}", category="loading")
    return TuningConfig(**merged)


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file yields an empty mapping."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
