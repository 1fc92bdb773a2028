"""Timer package.

``engine`` and ``display`` are pure Python.  The Qt adapter lives in
``redflash.timer.controller`` and is imported explicitly.
"""

from .display import TimerDisplay, format_time
from .engine import (
    TimerEngine,
    TimerMode,
    TimerState,
    DEFAULT_BASE_DURATION,
    ALARM_DURATION_SECONDS,
    MIN_SECONDS,
    MAX_SECONDS,
    LOW_TIME_THRESHOLD,
)

__all__ = [
    "TimerEngine",
    "TimerMode",
    "TimerState",
    "TimerDisplay",
    "format_time",
    "DEFAULT_BASE_DURATION",
    "ALARM_DURATION_SECONDS",
    "MIN_SECONDS",
    "MAX_SECONDS",
    "LOW_TIME_THRESHOLD",
]
