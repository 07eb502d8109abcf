"""
config_manager.py
-----------------
Configuration loader for the packaged simulation data files.

Features:
- Supports .json and .py config files (.py files export DEFAULT_CONFIG)
- Indexes the package config directory once, then resolves by file name
- Recursively merges loaded data over caller defaults
- Ignores '_notes' keys so configs can carry human-readable comments
"""

import os
import json
import importlib.util

from sidescroller.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_ROOT = os.path.join(PACKAGE_ROOT, "config")

SEARCH_DIRS = [
    DATA_ROOT,
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file and merge it over defaults.

    Args:
        filename: Bare file name ("character.json"), name without
            extension, or an absolute path
        default_dict: Values used for any key the file does not set
        strict: Raise FileNotFoundError instead of falling back to defaults

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename):
        path = filename
    else:
        path = _resolve(filename)

    try:
        if path.endswith(".py"):
            data = _load_py_module(path)
        else:
            data = _load_json(path)
    except (json.JSONDecodeError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Walk SEARCH_DIRS and remember the first path seen for each file name."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for name in sorted(files):
                if name.endswith((".json", ".py")) and name != "__init__.py":
                    _FILE_INDEX.setdefault(name, os.path.join(root, name))

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def get_indexed_files():
    """Return copy of file index for debugging."""
    if _FILE_INDEX is None:
        build_file_index()
    return dict(_FILE_INDEX)


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve(filename):
    if _FILE_INDEX is None:
        build_file_index()

    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if name in _FILE_INDEX:
        return _FILE_INDEX[name]

    for ext in (".json", ".py"):
        if name + ext in _FILE_INDEX:
            return _FILE_INDEX[name + ext]

    # Not indexed; let the loader report the missing file
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_py_module(path):
    """Execute a Python config file and return its DEFAULT_CONFIG dict."""
    module_spec = importlib.util.spec_from_file_location("sidescroller_config_module", path)
    if module_spec is None or module_spec.loader is None:
        raise OSError(f"Cannot import config module: {path}")

    module = importlib.util.module_from_spec(module_spec)
    try:
        module_spec.loader.exec_module(module)
    except (ImportError, SyntaxError) as e:
        DebugLogger.warn(f"Failed to load Python config {path}: {e}", category="loading")
        return {}

    DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="loading")
    return getattr(module, "DEFAULT_CONFIG", {})


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge override into a copy of default, skipping '_notes'."""
    merged = {
        key: (_merge_dicts(value, {}) if isinstance(value, dict) else value)
        for key, value in default.items()
        if key != "_notes"
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict):
            base = merged.get(key)
            merged[key] = _merge_dicts(base if isinstance(base, dict) else {}, value)
        else:
            merged[key] = value
    return merged
