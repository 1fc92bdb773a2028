"""Countdown state machine for RedFlash.

States
------
PAUSED     Not counting.  ``paused_remaining_seconds`` is authoritative.
RUNNING    Counting down towards ``deadline``.
ALARMING   Time ran out; solid alarm until ``alarm_ends_at``.

Transitions
-----------
PAUSED → RUNNING        (start)
RUNNING → PAUSED        (pause)
RUNNING → ALARMING      (tick once the deadline has passed)
ALARMING → RUNNING      (tick once the alarm is over; auto-restart)
Any → PAUSED            (reset, also cancels an alarm)

Time keeping is deadline based: remaining time is always derived from the
stored deadline and the current clock reading, so late or missed ticks
never cause drift.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from .display import TimerDisplay, format_time


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    PAUSED = "paused"
    RUNNING = "running"
    ALARMING = "alarming"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_BASE_DURATION = 5 * 60
ALARM_DURATION_SECONDS = 5.0
MIN_SECONDS = 0
MAX_SECONDS = 10 * 60 * 60  # 10 h
LOW_TIME_THRESHOLD = 60

Clock = Callable[[], float]
Listener = Callable[["TimerState"], None]


def clamp_seconds(seconds: int, low: int = MIN_SECONDS) -> int:
    return max(low, min(MAX_SECONDS, seconds))


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    """Immutable snapshot of the countdown.

    ``deadline`` exists only while RUNNING and ``alarm_ends_at`` only while
    ALARMING; any other combination raises ``ValueError``.
    """

    base_duration_seconds: int
    mode: TimerMode
    paused_remaining_seconds: int
    deadline: float | None = None
    alarm_ends_at: float | None = None

    def __post_init__(self) -> None:
        if (self.deadline is not None) != (self.mode is TimerMode.RUNNING):
            raise ValueError(
                f"deadline must be set exactly when running (mode={self.mode.value})"
            )
        if (self.alarm_ends_at is not None) != (self.mode is TimerMode.ALARMING):
            raise ValueError(
                f"alarm_ends_at must be set exactly when alarming (mode={self.mode.value})"
            )

    @classmethod
    def paused(cls, base: int, remaining: int) -> TimerState:
        return cls(base, TimerMode.PAUSED, remaining)

    @classmethod
    def running(cls, base: int, remaining: int, deadline: float) -> TimerState:
        return cls(base, TimerMode.RUNNING, remaining, deadline=deadline)

    @classmethod
    def alarming(cls, base: int, alarm_ends_at: float) -> TimerState:
        return cls(base, TimerMode.ALARMING, 0, alarm_ends_at=alarm_ends_at)


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Framework-free countdown with a flash/alarm/auto-restart cycle.

    Every command is synchronous and invalid sequences (``start`` while
    running, ``pause`` while paused, anything but ``reset`` while alarming)
    are silent no-ops.  Listeners registered with :meth:`subscribe` receive
    the new :class:`TimerState` after every effective change.
    """

    def __init__(
        self,
        base_duration: int = DEFAULT_BASE_DURATION,
        *,
        clock: Clock = time.monotonic,
        alarm_duration: float = ALARM_DURATION_SECONDS,
    ) -> None:
        self._clock = clock
        self._alarm_duration = float(alarm_duration)
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

        base = clamp_seconds(int(base_duration), low=1)
        self._state = TimerState.paused(base, base)

    # ══════════════════════════════════════════════════════════════════
    #  QUERIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def mode(self) -> TimerMode:
        return self._state.mode

    @property
    def base_duration(self) -> int:
        return self._state.base_duration_seconds

    @property
    def alarm_duration(self) -> float:
        return self._alarm_duration

    @property
    def is_running(self) -> bool:
        return self._state.mode is TimerMode.RUNNING

    @property
    def is_alarming(self) -> bool:
        return self._state.mode is TimerMode.ALARMING

    @property
    def should_flash(self) -> bool:
        """True in the final minute of a countdown, before the alarm."""
        return self.display().should_flash

    @property
    def is_low_time_color(self) -> bool:
        """True whenever the time label should use the danger colour."""
        return self.display().is_low_time_color

    def remaining_seconds(self, now: float | None = None) -> int:
        """Whole seconds left, rounded up, always within 0..36000."""
        state = self._state
        if state.mode is TimerMode.ALARMING:
            return 0
        if state.mode is TimerMode.RUNNING:
            if now is None:
                now = self._clock()
            # Rounded to µs first: float clock readings carry noise that
            # would otherwise push an exact 90.0 up to 91.
            return clamp_seconds(math.ceil(round(state.deadline - now, 6)))
        return state.paused_remaining_seconds

    def display(self, now: float | None = None) -> TimerDisplay:
        """Everything the presentation layer needs for one frame."""
        with self._lock:
            remaining = self.remaining_seconds(now)
            alarming = self.is_alarming
            return TimerDisplay(
                remaining_seconds=remaining,
                text=format_time(remaining),
                mode=self._state.mode,
                is_alarming=alarming,
                should_flash=0 < remaining <= LOW_TIME_THRESHOLD and not alarming,
                is_low_time_color=remaining <= LOW_TIME_THRESHOLD and not alarming,
            )

    # ══════════════════════════════════════════════════════════════════
    #  OBSERVERS
    # ══════════════════════════════════════════════════════════════════

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ══════════════════════════════════════════════════════════════════
    #  COMMANDS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        with self._lock:
            changed = self._swap(self._started())
        self._notify(changed)

    def pause(self) -> None:
        with self._lock:
            changed = self._swap(self._paused())
        self._notify(changed)

    def toggle_start(self) -> None:
        with self._lock:
            new_state = self._paused() if self.is_running else self._started()
            changed = self._swap(new_state)
        self._notify(changed)

    def adjust(self, delta_seconds: int) -> None:
        """Add (or with a negative value, remove) time from the countdown.

        A running countdown is re-anchored to a fresh deadline rather than
        shifted, so repeated adjustments never accumulate rounding error.
        """
        delta_seconds = int(delta_seconds)
        with self._lock:
            state = self._state
            if state.mode is TimerMode.ALARMING:
                logger.debug("adjust(%+d) ignored while alarming", delta_seconds)
                return
            now = self._clock()
            new_value = clamp_seconds(self.remaining_seconds(now) + delta_seconds)
            if state.mode is TimerMode.RUNNING:
                new_state = replace(
                    state, paused_remaining_seconds=new_value, deadline=now + new_value,
                )
            else:
                new_state = replace(state, paused_remaining_seconds=new_value)
            changed = self._swap(new_state)
        self._notify(changed)

    def reset(self) -> None:
        """Back to PAUSED at the base duration.  Cancels an active alarm."""
        with self._lock:
            base = self._state.base_duration_seconds
            changed = self._swap(TimerState.paused(base, base))
        self._notify(changed)

    def set_base_duration(self, seconds: int) -> None:
        """Change the duration used by the next reset or auto-restart."""
        base = clamp_seconds(int(seconds), low=1)
        with self._lock:
            changed = self._swap(replace(self._state, base_duration_seconds=base))
        self._notify(changed)

    # ══════════════════════════════════════════════════════════════════
    #  TICK
    # ══════════════════════════════════════════════════════════════════

    def on_tick(self, now: float | None = None) -> TimerDisplay:
        """Advance the alarm cycle.  Call every 100 ms (never under 1 Hz)."""
        with self._lock:
            if now is None:
                now = self._clock()
            state = self._state
            new_state: TimerState | None = None

            if state.mode is TimerMode.ALARMING:
                if now >= state.alarm_ends_at:
                    base = state.base_duration_seconds
                    new_state = TimerState.running(base, base, now + base)
                    logger.info("alarm finished, restarting at %s", format_time(base))
            elif state.mode is TimerMode.RUNNING:
                if self.remaining_seconds(now) <= 0:
                    new_state = TimerState.alarming(
                        state.base_duration_seconds, now + self._alarm_duration,
                    )
                    logger.info("time is up, alarming for %.1fs", self._alarm_duration)

            changed = self._swap(new_state)
        self._notify(changed)
        return self.display(now)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _started(self) -> TimerState | None:
        state = self._state
        if state.mode is not TimerMode.PAUSED:
            logger.debug("start ignored while %s", state.mode.value)
            return None
        now = self._clock()
        remaining = self.remaining_seconds(now)
        return TimerState.running(
            state.base_duration_seconds, remaining, now + remaining,
        )

    def _paused(self) -> TimerState | None:
        state = self._state
        if state.mode is not TimerMode.RUNNING:
            logger.debug("pause ignored while %s", state.mode.value)
            return None
        return TimerState.paused(
            state.base_duration_seconds, self.remaining_seconds(),
        )

    def _swap(self, new_state: TimerState | None) -> TimerState | None:
        """Install *new_state*; returns it, or None if nothing changed.

        Caller must hold ``self._lock``.
        """
        old_state = self._state
        if new_state is None or new_state == old_state:
            return None
        self._state = new_state
        if old_state.mode is not new_state.mode:
            logger.debug(
                "%s → %s", old_state.mode.value, new_state.mode.value,
            )
        return new_state

    def _notify(self, new_state: TimerState | None) -> None:
        """Tell listeners about a committed state; called with the lock released."""
        if new_state is None:
            return
        for listener in list(self._listeners):
            listener(new_state)
