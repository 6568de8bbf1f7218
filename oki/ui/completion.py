from PySide6.QtCore import QObject, QTimer, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer
from PySide6.QtWidgets import QApplication
from oki.common.logger import log
from oki.common.setup import PATHS
from oki.core.signals import HAPTIC_DISMISS_DELAY_MS, CompletionSignal, find_sound_files

# Turns a CompletionSignal into something the user notices, then calls on_done so the timer view can close.
# Silent closes right away, haptic alerts and closes after a short delay, tones close once the sound finishes. A sound
# file that fails to load falls through to the next format; closing right away only happens once none are left.
class CompletionPlayer(QObject):

    def __init__(self, window, on_done, assets_dir=None):
        super().__init__(window)
        self._window = window
        self._on_done = on_done
        self._assets_dir = assets_dir or PATHS.assets
        self._pending_sounds = []
        self._finished = False

        # One player for the life of the window, each tone only swaps the source
        self._audio = QAudioOutput(self)
        self._player = QMediaPlayer(self)
        self._player.setAudioOutput(self._audio)
        self._player.mediaStatusChanged.connect(self._on_media_status)
        self._player.errorOccurred.connect(self._on_media_error)

    def play(self, signal):
        self._finished = False
        log.info(f"Playing completion signal '{signal.label}'")
        if signal is CompletionSignal.HAPTIC:
            # No vibration motor on the desktop; the nearest thing is a beep plus a taskbar alert.
            QApplication.beep()
            QApplication.alert(self._window, HAPTIC_DISMISS_DELAY_MS)
            QTimer.singleShot(HAPTIC_DISMISS_DELAY_MS, self._finish)
        elif signal.plays_sound:
            self._pending_sounds = find_sound_files(signal, self._assets_dir)
            if not self._pending_sounds:
                log.warning(f"Sound file '{signal.sound_file_stem}' not found in any supported format")
            self._play_next_sound()
        else:
            self._finish()

    def _play_next_sound(self):
        if not self._pending_sounds:
            self._finish()
            return
        sound_path = self._pending_sounds.pop(0)
        self._player.setSource(QUrl.fromLocalFile(str(sound_path)))
        self._player.play()
        log.debug(f"Started playback of '{sound_path}'")

    def _on_media_status(self, status):
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._finish()

    def _on_media_error(self, error, message):
        if self._finished:
            return
        log.warning(f"Could not play '{self._player.source().toLocalFile()}': {message}")
        self._play_next_sound()

    # Stops any playback without notifying, for when the view is torn down mid-sound.
    def stop(self):
        self._finished = True
        self._pending_sounds = []
        self._player.stop()

    def _finish(self):
        if self._finished:
            return
        self._finished = True
        self._pending_sounds = []
        self._player.stop()
        self._on_done()
