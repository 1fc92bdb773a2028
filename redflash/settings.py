"""Application settings loaded from JSON.

Settings are read from:
    ~/Library/Application Support/RedFlash/settings.json

The file is optional and hand-edited; RedFlash never writes it and never
stores the countdown itself.  Example::

    {"base_duration": 600, "adjust_step": 30}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "RedFlash"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    base_duration: int = 5 * 60            # seconds
    alarm_duration: float = 5.0            # seconds of solid red
    tick_interval_ms: int = 100
    adjust_step: int = 10                  # seconds per ▲/▼ press

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 800
    window_height: int = 480
    fullscreen: bool = False

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"


def _to_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    if value in (0, 1):
        return bool(value)
    raise ValueError(f"not a boolean: {value!r}")


# Field annotations are strings under ``from __future__ import annotations``.
_CONVERTERS = {
    "int": int,
    "float": float,
    "bool": _to_bool,
    "str": str,
}


def _coerce(data: dict) -> dict:
    """Convert known keys to their field types, dropping bad values."""
    coerced = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        try:
            coerced[f.name] = _CONVERTERS[f.type](value)
        except (TypeError, ValueError) as exc:
            logger.warning(
                "settings: %s=%r is invalid (%s), using default %r",
                f.name, value, exc, f.default,
            )
    return coerced


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("ignoring unreadable settings file %s: not an object", SETTINGS_PATH)
        return Settings()
    return Settings(**_coerce(data))
