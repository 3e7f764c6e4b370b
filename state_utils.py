import os
import json
from dataclasses import fields, replace

from loguru import logger

from grid_board import BoardConfig

APP_STATE_DIR = os.path.join(os.path.expanduser("~"), ".grid_game")
SETTINGS_JSON = os.path.join(APP_STATE_DIR, "settings.json")


def read_json(path, default):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except (OSError, ValueError) as e:
        logger.warning(f"could not read {path}: {e}")
        return default


def write_json(path, obj):
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False, indent=2)
        logger.info(f"settings written to {path}")
    except OSError as e:
        logger.warning(f"could not write {path}: {e}")


def read_settings(path=SETTINGS_JSON):
    """Settings object from disk; anything but a JSON object reads as {}."""
    settings = read_json(path, {})
    if not isinstance(settings, dict):
        logger.warning(f"ignoring malformed settings in {path}: expected an object")
        return {}
    return settings


def _valid_override(name, value):
    # bool is an int subclass but never a valid size or position
    if isinstance(value, bool):
        return False
    if name == "num_squares":
        return isinstance(value, int) and value > 0
    if name in ("top_x", "top_y", "width"):
        return isinstance(value, (int, float))
    return isinstance(value, str)


def load_board_config(settings=None) -> BoardConfig:
    """BoardConfig defaults overlaid with the settings' "board" object."""
    if settings is None:
        settings = read_settings()
    raw = settings.get("board") or {}
    if not isinstance(raw, dict):
        logger.warning(f"ignoring malformed board settings: {raw!r}")
        return BoardConfig()
    known = {f.name for f in fields(BoardConfig)}
    overrides = {}
    for k, v in raw.items():
        if k not in known:
            continue
        if not _valid_override(k, v):
            logger.warning(f"ignoring board setting {k}={v!r}, keeping default")
            continue
        overrides[k] = v
    return replace(BoardConfig(), **overrides)
