"""Qt adapter around :class:`TimerEngine`.

The engine knows nothing about Qt.  ``TimerController`` owns the polling
``QTimer``, forwards user commands, and turns engine changes into signals
the widgets connect to.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .display import TimerDisplay
from .engine import TimerEngine, TimerMode, TimerState


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 100
ADJUST_STEP_SECONDS = 10


class TimerController(QObject):
    """Polls the engine and republishes it as Qt signals.

    Signals
    -------
    tick(display: TimerDisplay)
        Emitted after every poll and every command.
    mode_changed(mode: TimerMode)
        Emitted on every mode transition.
    alarm_started()
        Time ran out; the solid alarm is showing.
    alarm_finished()
        The alarm ran its course and the countdown restarted.  Not
        emitted when ``reset`` cancels the alarm.
    """

    tick = pyqtSignal(object)
    mode_changed = pyqtSignal(object)
    alarm_started = pyqtSignal()
    alarm_finished = pyqtSignal()

    def __init__(
        self,
        engine: TimerEngine | None = None,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine if engine is not None else TimerEngine()
        self._mode: TimerMode = self._engine.mode
        self._engine.subscribe(self._on_state)

        # ── Qt timer ──────────────────────────────────────────────────
        # Clamp to 1 Hz at the slowest so the zero crossing is never late.
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(max(1, min(1000, interval_ms)))
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def mode(self) -> TimerMode:
        return self._engine.mode

    @property
    def is_polling(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def display(self) -> TimerDisplay:
        return self._engine.display()

    # ══════════════════════════════════════════════════════════════════
    #  POLLING
    # ══════════════════════════════════════════════════════════════════

    def start_polling(self) -> None:
        if not self._qt_timer.isActive():
            self._qt_timer.start()
            logger.debug("polling every %d ms", self._qt_timer.interval())

    def stop_polling(self) -> None:
        self._qt_timer.stop()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        self._engine.start()
        self._publish()

    def pause(self) -> None:
        self._engine.pause()
        self._publish()

    def toggle_start(self) -> None:
        self._engine.toggle_start()
        self._publish()

    def adjust(self, delta_seconds: int = ADJUST_STEP_SECONDS) -> None:
        self._engine.adjust(delta_seconds)
        self._publish()

    def reset(self) -> None:
        self._engine.reset()
        self._publish()

    def set_base_duration(self, seconds: int) -> None:
        self._engine.set_base_duration(seconds)
        self._publish()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        self.tick.emit(self._engine.on_tick())

    def _publish(self) -> None:
        self.tick.emit(self._engine.display())

    def _on_state(self, state: TimerState) -> None:
        previous = self._mode
        if state.mode is previous:
            return
        self._mode = state.mode
        self.mode_changed.emit(state.mode)

        if state.mode is TimerMode.ALARMING:
            self.alarm_started.emit()
        elif previous is TimerMode.ALARMING and state.mode is TimerMode.RUNNING:
            self.alarm_finished.emit()
