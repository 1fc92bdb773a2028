"""Allow running RedFlash as a module: python -m redflash."""

import logging
import sys

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap
from PyQt6.QtWidgets import QApplication

from .settings import load_settings
from .app import RedFlashApp
from .ui.styles import PALETTE


def _make_icon(size: int = 256) -> QIcon:
    """Black tile with a red ring and a single clock hand at twelve."""
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(QColor(PALETTE["bg"]))
    p.drawRoundedRect(QRectF(0, 0, size, size), size * 0.2, size * 0.2)

    red = QColor(PALETTE["danger"])
    margin = size * 0.18
    p.setPen(QPen(red, size * 0.08))
    p.setBrush(Qt.BrushStyle.NoBrush)
    p.drawEllipse(QRectF(margin, margin, size - 2 * margin, size - 2 * margin))

    centre = size / 2
    p.setPen(QPen(
        QColor(PALETTE["text"]), size * 0.05,
        Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap,
    ))
    p.drawLine(int(centre), int(centre), int(centre), int(margin * 1.9))
    p.end()
    return QIcon(pixmap)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, str(settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("RedFlash ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("RedFlash")
    app.setOrganizationName("RedFlash")
    app.setWindowIcon(_make_icon())

    window = RedFlashApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
