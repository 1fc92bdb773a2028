"""Main timer display widget.

Layout (top → bottom):
    - Control row: ▼ −10s, Start/Pause, Reset, ▲ +10s
    - Large time label, centred in the remaining space
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)

from ..timer.controller import TimerController, ADJUST_STEP_SECONDS
from ..timer.display import TimerDisplay
from ..timer.engine import TimerMode
from .styles import time_font_size, time_label_color


class TimerWidget(QWidget):
    """Countdown label plus the four control buttons."""

    def __init__(
        self,
        controller: TimerController,
        parent: QWidget | None = None,
        *,
        adjust_step: int = ADJUST_STEP_SECONDS,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._adjust_step = max(1, adjust_step)
        self._low_time: bool = False
        self._build_ui()
        self._apply_label_color()
        self._connect_signals()
        self._refresh_display(controller.display())

    @property
    def adjust_step(self) -> int:
        return self._adjust_step

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 0)
        layout.setSpacing(0)

        # ── controls at top ──────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(16)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        step = self._adjust_step
        self._down_btn = QPushButton(f"▼ −{step}s", self)
        self._down_btn.setAccessibleName(f"Subtract {step} seconds")

        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setAccessibleName("Start timer")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setAccessibleName("Reset timer")

        self._up_btn = QPushButton(f"▲ +{step}s", self)
        self._up_btn.setAccessibleName(f"Add {step} seconds")

        for btn in (
            self._down_btn, self._start_pause_btn, self._reset_btn, self._up_btn,
        ):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        # ── time display ─────────────────────────────────────────────
        layout.addStretch(1)
        self._time_label = QLabel("", self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setAccessibleName("Time remaining")
        font = QFont()
        font.setWeight(QFont.Weight.Black)
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPixelSize(time_font_size(self.width()))
        self._time_label.setFont(font)
        layout.addWidget(self._time_label)
        layout.addStretch(1)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._down_btn.clicked.connect(lambda: self._controller.adjust(-self._adjust_step))
        self._up_btn.clicked.connect(lambda: self._controller.adjust(self._adjust_step))
        self._start_pause_btn.clicked.connect(self._controller.toggle_start)
        self._reset_btn.clicked.connect(self._controller.reset)

        self._controller.tick.connect(self._refresh_display)

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh_display(self, display: TimerDisplay) -> None:
        self._time_label.setText(display.text)
        if display.is_low_time_color != self._low_time:
            self._low_time = display.is_low_time_color
            self._apply_label_color()
        self._time_label.setAccessibleDescription(
            f"{display.remaining_seconds} seconds remaining"
        )

        running = display.mode is TimerMode.RUNNING
        self._start_pause_btn.setText("Pause" if running else "Start")
        self._start_pause_btn.setAccessibleName(
            "Pause timer" if running else "Start timer"
        )

        # Every control is locked while the solid alarm shows.
        enabled = not display.is_alarming
        for btn in (
            self._down_btn, self._start_pause_btn, self._reset_btn, self._up_btn,
        ):
            btn.setEnabled(enabled)

    def _apply_label_color(self) -> None:
        self._time_label.setStyleSheet(f"color: {time_label_color(self._low_time)};")

    # ── sizing ────────────────────────────────────────────────────────────

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        font = self._time_label.font()
        font.setPixelSize(time_font_size(self.width()))
        self._time_label.setFont(font)
