# config_manager.py - JSON config manager

import json
import logging
import math
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_results": 20,      # cap on /prefix output
    "sort_results": True,   # show prefix matches alphabetically
    "log_level": "WARNING",
    "default_weight": 1.0,  # /edge weight when none given
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def _coerce(default, val):
    """Convert `val` to the type of `default` (bools accept yes/no style text)."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {val!r}")
    return type(default)(val)


def check_weight(w):
    """Edge weights must be finite and non-negative."""
    w = float(w)
    if not math.isfinite(w) or w < 0:
        raise ValueError(f"weight must be a finite number >= 0, got {w}")
    return w


def _validate(key, val):
    """Range checks applied after type coercion."""
    if key == "log_level":
        level = str(val).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {val!r} (use one of {', '.join(LOG_LEVELS)})")
        return level
    if key == "max_results":
        return max(1, val)
    if key == "default_weight":
        return check_weight(val)
    return val


class Config:
    def __init__(self, path="dsutils.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: top level is not an object", self.path)
            return
        for k, v in loaded.items():
            if k not in DEFAULTS:
                logger.warning("unknown config key %r in %s", k, self.path)
                continue
            try:
                self.data[k] = _validate(k, _coerce(DEFAULTS[k], v))
            except (TypeError, ValueError) as e:
                logger.warning("bad value for %r in %s: %s", k, self.path, e)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        """Return (key, value) rows for display."""
        return [(k, v) for k, v in self.data.items()]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _validate(key, _coerce(DEFAULTS[key], val))
        self.save()
