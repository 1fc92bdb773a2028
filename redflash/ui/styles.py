"""Colours and QSS stylesheet for RedFlash."""

from __future__ import annotations

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":       "#000000",
    "text":     "#FFFFFF",
    "danger":   "#FF2B2B",
    "border":   "#FFFFFF",
    "disabled": "#555555",
}

FLASH_PEAK_ALPHA = 0.3        # translucent red at the top of each pulse
FLASH_HALF_PERIOD_MS = 800    # fade in over 0.8 s, fade out over 0.8 s

MAX_TIME_FONT_PX = 200
TIME_FONT_WIDTH_RATIO = 0.24


def time_font_size(window_width: int) -> int:
    """Pixel size for the time label: 24% of the width, capped at 200."""
    return max(1, int(min(window_width * TIME_FONT_WIDTH_RATIO, MAX_TIME_FONT_PX)))


def time_label_color(low_time: bool) -> str:
    return PALETTE["danger"] if low_time else PALETTE["text"]


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    """Return the application-wide QSS."""
    p = palette or PALETTE
    return f"""
    QMainWindow, QWidget#central {{
        background-color: {p['bg']};
    }}

    QPushButton {{
        background: transparent;
        color: {p['text']};
        border: 2px solid {p['border']};
        border-radius: 6px;
        padding: 6px 12px;
        font-size: 14px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: rgba(255, 255, 255, 30);
    }}
    QPushButton:disabled {{
        color: {p['disabled']};
        border-color: {p['disabled']};
    }}

    QLabel#timeLabel {{
        background: transparent;
        font-weight: 900;
    }}
    """
