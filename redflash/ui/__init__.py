"""UI package."""

from .timer_widget import TimerWidget
from .flash_overlay import FlashOverlay

__all__ = [
    "TimerWidget",
    "FlashOverlay",
]
