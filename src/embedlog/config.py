"""Configuration management for embedlog.

Three-layer config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .embedlog.json in the working directory or above
  3. Global config — ~/.embedlog/config.json

Anything still unset falls back to DEFAULTS. A project file might be::

    {"level": "debug", "show_level": true, "word_bits": 16}
"""

import json
import os
from pathlib import Path

from embedlog.lib.log_lib import parse_level
from embedlog.lib.log_lib.formatter import DEFAULT_WORD_BITS
from embedlog.lib.log_lib.levels import VERBOSE

PROJECT_CONFIG_NAME = ".embedlog.json"

DEFAULTS = {
    "level": VERBOSE,
    "show_level": True,
    "strict": False,
    "word_bits": DEFAULT_WORD_BITS,
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.embedlog/)."""
    return Path.home() / ".embedlog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .embedlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .embedlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def _from_file(cfg, key):
    # JSON may spell keys with dashes or underscores
    value = cfg.get(key)
    if value is None:
        value = cfg.get(key.replace("_", "-"))
    return value


def _normalize(key, value):
    if key == "level":
        return parse_level(value)
    if key == "word_bits":
        return int(value)
    if key in ("show_level", "strict"):
        return bool(value)
    return value


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args=None, keys=None, start_dir=None, config_path=None):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace, None means unset)
      2. Project .embedlog.json (or the file named by config_path)
      3. Global ~/.embedlog/config.json
    and falls back to DEFAULTS.

    Returns a dict with resolved, normalized values.

    Raises:
        LevelError: If a configured level name is unknown.
    """
    if keys is None:
        keys = list(DEFAULTS)

    if config_path:
        project_cfg = load_json(config_path)
    else:
        project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config()

    resolved = {}
    for key in keys:
        value = getattr(args, key, None) if args is not None else None
        if value is None:
            value = _from_file(project_cfg, key)
        if value is None:
            value = _from_file(global_cfg, key)
        if value is None:
            value = DEFAULTS.get(key)
        resolved[key] = _normalize(key, value) if value is not None else None

    return resolved


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, directory=None):
    """Write .embedlog.json to the given directory (default: cwd)."""
    target = Path(directory or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data):
    """Write the global config file."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
