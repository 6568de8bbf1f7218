"""Settings dialog for Oki — appearance and breathing circle."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

# Small settings sheet opened from the gear button. Each toggle calls on_change(key, value) right away, so the main
# window can persist and restyle while the dialog is still open.
class SettingsDialog(QDialog):

    def __init__(self, parent, settings, on_change):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)
        self._on_change = on_change

        outer = QVBoxLayout(self)
        outer.setContentsMargins(20, 20, 20, 20)
        outer.setSpacing(15)

        # Appearance
        title = QLabel("Appearance")
        title.setObjectName("sectionTitle")
        outer.addWidget(title)

        hint = QLabel("Choose between light and dark mode to match your meditation environment and reduce eye strain.")
        hint.setObjectName("hint")
        hint.setWordWrap(True)
        outer.addWidget(hint)

        row = QHBoxLayout()
        row.addStretch()
        row.addWidget(QLabel("\U0001F319"))
        self._light_mode = QCheckBox()
        self._light_mode.setChecked(settings["light_mode"])
        self._light_mode.setToolTip("On: light mode. Off: dark mode.")
        self._light_mode.toggled.connect(lambda on: self._on_change("light_mode", on))
        row.addWidget(self._light_mode)
        row.addWidget(QLabel("☀"))
        row.addStretch()
        outer.addLayout(row)

        divider = QFrame()
        divider.setObjectName("divider")
        divider.setFrameShape(QFrame.HLine)
        outer.addWidget(divider)

        # Breathing circle
        title = QLabel("Breathing circle")
        title.setObjectName("sectionTitle")
        outer.addWidget(title)

        row = QHBoxLayout()
        row.addStretch()
        row.addWidget(QLabel("Off"))
        self._breathing = QCheckBox()
        self._breathing.setChecked(settings["breathing_animation_enabled"])
        self._breathing.toggled.connect(lambda on: self._on_change("breathing_animation_enabled", on))
        row.addWidget(self._breathing)
        row.addWidget(QLabel("On"))
        row.addStretch()
        outer.addLayout(row)

        outer.addStretch()

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        done_btn = QPushButton("Done")
        done_btn.setObjectName("textButton")
        done_btn.setCursor(Qt.PointingHandCursor)
        done_btn.clicked.connect(self.accept)
        btn_row.addWidget(done_btn)
        outer.addLayout(btn_row)
