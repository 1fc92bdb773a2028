"""Main application window for RedFlash."""

from __future__ import annotations

import logging
import time

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QWidget

from .settings import Settings, load_settings
from .timer.controller import TimerController
from .timer.display import TimerDisplay
from .timer.engine import Clock, TimerEngine
from .ui.flash_overlay import FlashOverlay, PULSE, SOLID
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget


logger = logging.getLogger(__name__)


class RedFlashApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__()
        self.setWindowTitle("RedFlash")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── engine + controller ───────────────────────────────────────
        engine = TimerEngine(
            self._settings.base_duration,
            clock=clock,
            alarm_duration=self._settings.alarm_duration,
        )
        self._controller = TimerController(
            engine, self, interval_ms=self._settings.tick_interval_ms,
        )

        # ── widgets ───────────────────────────────────────────────────
        central = QWidget(self)
        central.setObjectName("central")
        self.setCentralWidget(central)

        self._flash = FlashOverlay(central)
        self._timer_widget = TimerWidget(
            self._controller, central, adjust_step=self._settings.adjust_step,
        )
        self._flash.lower()

        self.setStyleSheet(build_stylesheet())

        self._controller.tick.connect(self._on_display)
        self._on_display(self._controller.display())
        self._controller.start_polling()

        logger.debug(
            "window ready: base=%ss alarm=%ss poll=%sms",
            engine.base_duration, engine.alarm_duration, self._controller.interval_ms,
        )
        if self._settings.fullscreen:
            self.showFullScreen()

    # ══════════════════════════════════════════════════════════════════
    #  DISPLAY
    # ══════════════════════════════════════════════════════════════════

    def _on_display(self, display: TimerDisplay) -> None:
        if display.is_alarming:
            self._flash.set_effect(SOLID)
        elif display.should_flash:
            self._flash.set_effect(PULSE)
        else:
            self._flash.set_effect(None)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the countdown."""
        self._controller.toggle_start()

    def _on_escape(self) -> None:
        """Reset to the base duration, cancelling any alarm."""
        self._controller.reset()

    def _on_arrow(self, direction: int) -> None:
        self._controller.adjust(direction * self._timer_widget.adjust_step)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        central = self.centralWidget()
        if central:
            self._flash.setGeometry(0, 0, central.width(), central.height())
            self._timer_widget.setGeometry(0, 0, central.width(), central.height())

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space (start/pause), Escape (reset), Up/Down (adjust)."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
        elif key == Qt.Key.Key_Escape:
            self._on_escape()
        elif key == Qt.Key.Key_Up:
            self._on_arrow(1)
        elif key == Qt.Key.Key_Down:
            self._on_arrow(-1)
        else:
            super().keyPressEvent(event)
            return
        event.accept()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._controller.stop_polling()
        event.accept()
