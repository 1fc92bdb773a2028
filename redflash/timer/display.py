"""Display values derived from the timer engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import TimerMode


def format_time(seconds: int) -> str:
    """``m:ss`` with unpadded minutes, e.g. ``300 → "5:00"``."""
    m, s = divmod(max(0, seconds), 60)
    return f"{m}:{s:02d}"


@dataclass(frozen=True)
class TimerDisplay:
    """One rendered frame of the countdown.

    ``should_flash`` drives the pulsing overlay and ``is_low_time_color``
    the red time label.  They differ only at zero: a countdown paused at
    0:00 is still red but no longer flashes.
    """

    remaining_seconds: int
    text: str
    mode: TimerMode
    is_alarming: bool
    should_flash: bool
    is_low_time_color: bool
