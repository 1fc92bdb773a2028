"""Full-window alarm overlay.

pulse  — translucent red easing in and out while the last minute runs
solid  — opaque red for the duration of the alarm

The widget is transparent for mouse events and sits behind the time
label and buttons in the z-order.
"""

from __future__ import annotations

import math

from PyQt6.QtCore import Qt, QTimer, QRectF
from PyQt6.QtGui import QPainter, QColor
from PyQt6.QtWidgets import QWidget

from .styles import PALETTE, FLASH_PEAK_ALPHA, FLASH_HALF_PERIOD_MS


PULSE = "pulse"
SOLID = "solid"

_FRAME_MS = 33  # ~30 fps


class FlashOverlay(QWidget):
    """Transparent overlay painting the flash and solid alarm states."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self._effect: str | None = None
        self._elapsed_ms: int = 0

        self._timer = QTimer(self)
        self._timer.setInterval(_FRAME_MS)
        self._timer.timeout.connect(self._tick)
        self.hide()

    # ── public API ─────────────────────────────────────────────────────

    @property
    def effect(self) -> str | None:
        return self._effect

    def set_effect(self, effect: str | None) -> None:
        """Switch to ``PULSE``, ``SOLID`` or ``None`` (hidden)."""
        if effect == self._effect:
            return
        self._effect = effect
        self._elapsed_ms = 0

        if effect == PULSE:
            self._timer.start()
        else:
            self._timer.stop()

        self.setVisible(effect is not None)
        self.update()

    def pulse_alpha(self) -> float:
        """Current overlay opacity, 0.0 → FLASH_PEAK_ALPHA and back."""
        if self._effect == SOLID:
            return 1.0
        if self._effect != PULSE:
            return 0.0
        # Ease-in-out half cosine, auto-reversing every half period.
        t = (self._elapsed_ms % (2 * FLASH_HALF_PERIOD_MS)) / FLASH_HALF_PERIOD_MS
        if t > 1.0:
            t = 2.0 - t
        return FLASH_PEAK_ALPHA * (1 - math.cos(math.pi * t)) / 2

    # ── tick ───────────────────────────────────────────────────────────

    def _tick(self) -> None:
        self._elapsed_ms += self._timer.interval()
        self.update()

    # ── painting ───────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        if self._effect is None:
            return
        w, h = self.width(), self.height()
        if w == 0 or h == 0:
            return

        color = QColor(PALETTE["danger"])
        color.setAlphaF(self.pulse_alpha())

        painter = QPainter(self)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawRect(QRectF(0, 0, w, h))
        painter.end()
