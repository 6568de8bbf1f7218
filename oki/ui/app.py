import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)
from oki.common.logger import log
from oki.core import config
from oki.core.errors import PersistenceError
from oki.core.meditation import Meditation
from oki.core.sessions import SessionTracker
from oki.core.signals import CompletionSignal
from oki.core.store import JsonFileStore
from oki.core.timer import MAX_HOURS, MAX_MINUTES, Duration
from oki.ui.completion import CompletionPlayer
from oki.ui.dialogs.settings import SettingsDialog
from oki.ui.theme import build_stylesheet, theme_for
from oki.ui.ticks import QtTickSource
from oki.ui.widgets import BellOptionButton, BreathingCircle, WheelPicker

_PLAY_GLYPH = "▶"
_PAUSE_GLYPH = "⏸"
_SECOND_CHOICES = list(range(0, 51, 10))


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the meditation timer. Two pages in a stack: the selection page (bell, duration wheels, play) and the
# timer page (countdown, breathing circle, pause/play).
class MainWindow(QMainWindow):

    def __init__(self, store=None):
        super().__init__()
        self.setWindowTitle("Oki")

        # -- Persistence --
        self._store = store or JsonFileStore()
        self._tracker = SessionTracker(self._store)
        try:
            self.settings = config.load_settings(self._store)
        except PersistenceError:
            log.warning("Could not read settings, using defaults.", exc_info=True)
            self.settings = config.build_default_settings()

        self._meditation = None
        self._ticks = QtTickSource(self, after_tick=self._refresh_countdown)
        self._completion = CompletionPlayer(self, on_done=self._show_selection)

        # -- Build UI skeleton --
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)
        self._stack.addWidget(self._build_selection_page())
        self._stack.addWidget(self._build_timer_page())

        self._apply_style()
        self._refresh_sessions()
        QTimer.singleShot(0, self.adjustSize)

    # ------------------------------------------------------------------ #
    #  Style                                                               #
    # ------------------------------------------------------------------ #

    def _apply_style(self):
        t = theme_for(self.settings["light_mode"])
        style = build_stylesheet(t)
        self.setStyleSheet(style)
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(style)
        self._breathing_circle.set_color(t["breathing"])

    # ------------------------------------------------------------------ #
    #  Selection page                                                      #
    # ------------------------------------------------------------------ #

    def _build_selection_page(self):
        page = QWidget()
        page.setObjectName("page")
        lay = QVBoxLayout(page)
        lay.setSpacing(20)

        # Settings button
        top = QHBoxLayout()
        top.addStretch()
        gear = QPushButton("⚙")
        gear.setObjectName("iconButton")
        gear.setCursor(Qt.PointingHandCursor)
        gear.setToolTip("Settings")
        gear.clicked.connect(self._on_settings)
        top.addWidget(gear)
        lay.addLayout(top)

        # Starting bell
        lay.addWidget(self._section_title("Starting bell"))
        bell_row = QHBoxLayout()
        bell_row.setSpacing(12)
        bell_row.addStretch()
        self._bell_group = QButtonGroup(self)
        self._bell_group.setExclusive(True)
        chosen = CompletionSignal.from_label(self.settings["last_signal"]) or CompletionSignal.SILENT
        for signal in CompletionSignal:
            btn = BellOptionButton(signal)
            btn.setChecked(signal is chosen)
            self._bell_group.addButton(btn)
            bell_row.addWidget(btn)
        bell_row.addStretch()
        lay.addLayout(bell_row)

        # Duration wheels, hours on the left
        lay.addWidget(self._section_title("Duration"))
        wheels = QGridLayout()
        wheels.setHorizontalSpacing(0)
        self._hours = WheelPicker(range(0, MAX_HOURS + 1), self.settings["last_hours"])
        self._minutes = WheelPicker(range(0, MAX_MINUTES + 1), self.settings["last_minutes"])
        self._seconds = WheelPicker(_SECOND_CHOICES, self.settings["last_seconds"])
        for col, (label, wheel) in enumerate((("hours", self._hours),
                                              ("minutes", self._minutes),
                                              ("seconds", self._seconds))):
            lbl = QLabel(label)
            lbl.setObjectName("wheelLabel")
            lbl.setAlignment(Qt.AlignCenter)
            wheels.addWidget(lbl, 0, col)
            wheels.addWidget(wheel, 1, col)
        lay.addLayout(wheels)

        # Play
        play = QPushButton(_PLAY_GLYPH)
        play.setObjectName("roundAction")
        play.setFixedSize(80, 80)
        play.setCursor(Qt.PointingHandCursor)
        play.clicked.connect(self._on_play)
        lay.addSpacing(30)
        lay.addWidget(play, alignment=Qt.AlignCenter)

        self._sessions_lbl = QLabel()
        self._sessions_lbl.setObjectName("hint")
        self._sessions_lbl.setAlignment(Qt.AlignCenter)
        lay.addWidget(self._sessions_lbl)
        return page

    @staticmethod
    def _section_title(text):
        lbl = QLabel(text)
        lbl.setObjectName("sectionTitle")
        lbl.setAlignment(Qt.AlignCenter)
        return lbl

    def _selected_signal(self):
        btn = self._bell_group.checkedButton()
        return btn.signal if btn is not None else CompletionSignal.SILENT

    # ------------------------------------------------------------------ #
    #  Timer page                                                          #
    # ------------------------------------------------------------------ #

    def _build_timer_page(self):
        page = QWidget()
        page.setObjectName("page")
        lay = QVBoxLayout(page)
        lay.setSpacing(40)

        top = QHBoxLayout()
        back = QPushButton("‹ Back")
        back.setObjectName("textButton")
        back.setCursor(Qt.PointingHandCursor)
        back.clicked.connect(self._on_back)
        top.addWidget(back)
        top.addStretch()
        lay.addLayout(top)
        lay.addStretch()

        # Breathing circle sits behind the countdown in the same grid cell
        stack = QGridLayout()
        self._breathing_circle = BreathingCircle("#00000000")
        stack.addWidget(self._breathing_circle, 0, 0, Qt.AlignCenter)
        self._countdown_lbl = QLabel("00:00")
        self._countdown_lbl.setObjectName("countdown")
        self._countdown_lbl.setAlignment(Qt.AlignCenter)
        font = self._countdown_lbl.font()
        font.setStyleHint(QFont.Monospace)
        self._countdown_lbl.setFont(font)
        stack.addWidget(self._countdown_lbl, 0, 0, Qt.AlignCenter)
        lay.addLayout(stack)

        self._pause_btn = QPushButton(_PAUSE_GLYPH)
        self._pause_btn.setObjectName("roundAction")
        self._pause_btn.setFixedSize(80, 80)
        self._pause_btn.setCursor(Qt.PointingHandCursor)
        self._pause_btn.clicked.connect(self._on_pause_toggle)
        lay.addWidget(self._pause_btn, alignment=Qt.AlignCenter)
        lay.addStretch()
        return page

    # ------------------------------------------------------------------ #
    #  Actions                                                             #
    # ------------------------------------------------------------------ #

    def _on_play(self):
        duration = Duration(self._hours.value(), self._minutes.value(), self._seconds.value())
        signal = self._selected_signal()
        self._remember_selection(duration, signal)

        self._meditation = Meditation(
            duration,
            signal,
            self._tracker,
            notifier=self._on_meditation_complete,
            tick_source=self._ticks,
        )
        self._meditation.begin()

        self._pause_btn.setText(_PAUSE_GLYPH)
        self._pause_btn.setEnabled(True)
        self._refresh_countdown()
        if self.settings["breathing_animation_enabled"]:
            self._breathing_circle.show()
            self._breathing_circle.start()
        else:
            self._breathing_circle.hide()
        self._stack.setCurrentIndex(1)

    def _on_pause_toggle(self):
        if self._meditation is None:
            return
        timer = self._meditation.timer
        if not (timer.is_running or timer.is_paused):
            return
        timer.toggle_pause()
        self._pause_btn.setText(_PLAY_GLYPH if timer.is_paused else _PAUSE_GLYPH)

    def _on_back(self):
        self._completion.stop()
        self._show_selection()

    def _on_meditation_complete(self, signal):
        self._pause_btn.setEnabled(False)
        self._refresh_sessions()
        self._completion.play(signal)

    # Every way off the timer page goes through here, so the tick source never outlives the view.
    def _show_selection(self):
        if self._meditation is not None:
            self._meditation.end()
            self._meditation = None
        self._breathing_circle.stop()
        self._refresh_sessions()
        self._stack.setCurrentIndex(0)

    def _remember_selection(self, duration, signal):
        try:
            config.save_setting(self._store, "last_hours", duration.hours)
            config.save_setting(self._store, "last_minutes", duration.minutes)
            config.save_setting(self._store, "last_seconds", duration.seconds)
            config.save_setting(self._store, "last_signal", signal.label)
        except PersistenceError:
            log.warning("Could not save the picker selection.", exc_info=True)

    # ------------------------------------------------------------------ #
    #  Settings dialog                                                     #
    # ------------------------------------------------------------------ #

    def _on_settings(self):
        dlg = SettingsDialog(self, self.settings, on_change=self._on_setting_changed)
        dlg.exec()

    def _on_setting_changed(self, key, value):
        self.settings[key] = value
        try:
            config.save_setting(self._store, key, value)
        except PersistenceError:
            log.warning(f"Could not save setting '{key}'.", exc_info=True)
        if key == "light_mode":
            self._apply_style()

    # ------------------------------------------------------------------ #
    #  Display helpers                                                     #
    # ------------------------------------------------------------------ #

    def _refresh_countdown(self):
        if self._meditation is not None:
            self._countdown_lbl.setText(self._meditation.timer.formatted_remaining())

    def _refresh_sessions(self):
        try:
            count = self._tracker.today_count()
        except PersistenceError:
            log.warning("Could not read today's session count.", exc_info=True)
            count = 0
        self._sessions_lbl.setText(f"Sessions today: {count}")

    def closeEvent(self, event):
        self._completion.stop()
        if self._meditation is not None:
            self._meditation.end()
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
