"""Reusable widgets for the selection and timer pages."""

import time

from PySide6.QtCore import Qt, QSize, QTimer
from PySide6.QtGui import QColor, QFont, QIcon, QPainter
from PySide6.QtWidgets import (
    QAbstractItemView,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QWidget,
)
from oki.common.setup import PATHS
from oki.core.breathing import MAX_SCALE, breathing_scale

# Glyph fallbacks for signals whose icon isn't a bundled image, or when the image is missing.
_SIGNAL_GLYPHS = {
    "audio-volume-muted": "\U0001F507",
    "notification": "\U0001F514",
    "bell-icon": "\U0001F56D",
    "kru-icon": "\U0001F3B5",
}


class BellOptionButton(QPushButton):
    """Checkable tile showing one completion signal: icon on top, label under it."""

    def __init__(self, signal, parent=None):
        super().__init__(parent)
        self.signal = signal
        self.setObjectName("bellOption")
        self.setCheckable(True)
        self.setFixedSize(80, 80)
        self.setFont(QFont(self.font().family(), 11))

        icon_path = PATHS.assets / f"{signal.icon_name}.png"
        if signal.is_custom_icon and icon_path.is_file():
            self.setIcon(QIcon(str(icon_path)))
            self.setIconSize(QSize(40, 40))
            self.setText(signal.label)
        else:
            glyph = _SIGNAL_GLYPHS.get(signal.icon_name, "")
            self.setText(f"{glyph}\n{signal.label}")
        self.setToolTip(signal.label)


class WheelPicker(QListWidget):
    """Vertical list of integers that behaves like a picker wheel."""

    def __init__(self, values, initial=None, parent=None):
        super().__init__(parent)
        self.setObjectName("wheel")
        self.setFixedSize(100, 150)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setVerticalScrollMode(QAbstractItemView.ScrollPerItem)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self._values = list(values)
        for v in self._values:
            item = QListWidgetItem(str(v))
            item.setTextAlignment(Qt.AlignCenter)
            self.addItem(item)
        self.currentRowChanged.connect(self._on_row_changed)
        self.setValue(initial if initial in self._values else self._values[0])

    def value(self):
        row = self.currentRow()
        return self._values[row] if row >= 0 else self._values[0]

    def setValue(self, value):
        if value not in self._values:
            return
        row = self._values.index(value)
        self.setCurrentRow(row)
        self.scrollToItem(self.item(row), QAbstractItemView.PositionAtCenter)

    def _on_row_changed(self, row):
        if row >= 0:
            self.scrollToItem(self.item(row), QAbstractItemView.PositionAtCenter)


class BreathingCircle(QWidget):
    """Soft circle that grows and shrinks on the breathing cadence.

    Repaints from a ~30 fps QTimer while running; the scale itself comes from
    ``oki.core.breathing`` so it is a pure function of time since ``start()``.
    """

    BASE_DIAMETER = 200

    def __init__(self, color, parent=None):
        super().__init__(parent)
        self._color = QColor(color)
        self._started = None
        self._scale = 1.0
        side = int(self.BASE_DIAMETER * MAX_SCALE) + 4
        self.setMinimumSize(side, side)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(33)
        self._frame_timer.timeout.connect(self._advance)

    def set_color(self, color):
        self._color = QColor(color)
        self.update()

    def start(self):
        self._started = time.monotonic()
        self._frame_timer.start()

    def stop(self):
        self._frame_timer.stop()
        self._started = None
        self._scale = 1.0
        self.update()

    def _advance(self):
        if self._started is not None:
            self._scale = breathing_scale(time.monotonic() - self._started)
            self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)
        painter.setBrush(self._color)
        diameter = self.BASE_DIAMETER * self._scale
        x = (self.width() - diameter) / 2
        y = (self.height() - diameter) / 2
        painter.drawEllipse(int(x), int(y), int(diameter), int(diameter))
        painter.end()
