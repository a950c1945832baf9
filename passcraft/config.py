# passcraft/config.py
"""
Read-only settings for passcraft.
Settings are read from $PASSCRAFT_CONFIG, or ~/.passcraft/config.json as a fallback.
Values missing from the file keep their defaults.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "use_uppercase": True,
    "use_numbers": True,
    "use_symbols": True,
    "copies": 1,
}

ENV_VAR = "PASSCRAFT_CONFIG"

# bounds every caller applies to a requested length
MIN_LENGTH = 4
MAX_LENGTH = 128


def config_path() -> str:
    env = os.getenv(ENV_VAR)
    if env:
        return env
    return os.path.join(os.path.expanduser("~"), ".passcraft", "config.json")


def _coerce(data: Dict[str, Any]) -> Dict[str, Any]:
    out = DEFAULTS.copy()
    for key, default in DEFAULTS.items():
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass; keep the two apart
        if type(value) is not type(default):
            logger.warning("ignoring config key %r: expected %s, got %r",
                           key, type(default).__name__, value)
            continue
        if key == "length" and not MIN_LENGTH <= value <= MAX_LENGTH:
            logger.warning("ignoring config length %d: must be between %d and %d",
                           value, MIN_LENGTH, MAX_LENGTH)
            continue
        if key == "copies" and value < 1:
            logger.warning("ignoring config copies %d: must be at least 1", value)
            continue
        out[key] = value
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("config %s is not a JSON object, using defaults", p)
        return DEFAULTS.copy()
    return _coerce(data)
