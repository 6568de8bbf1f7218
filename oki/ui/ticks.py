from PySide6.QtCore import QTimer
from oki.common.logger import log
from oki.core.ticks import TICK_INTERVAL_MS

# QTimer-backed tick source. Fires on the Qt event loop, so ticks never overlap with each other or with UI handlers.
class QtTickSource:

    def __init__(self, parent=None, interval_ms=TICK_INTERVAL_MS, after_tick=None):
        self._timer = QTimer(parent)
        self._after_tick = after_tick
        self._timer.setInterval(interval_ms)
        self._callback = None
        self._timer.timeout.connect(self._on_timeout)

    @property
    def active(self):
        return self._timer.isActive()

    def start(self, callback):
        self._callback = callback
        self._timer.start()
        log.debug(f"Qt tick source started every {self._timer.interval()} ms")

    def stop(self):
        if self._timer.isActive():
            self._timer.stop()
            log.debug("Qt tick source stopped")
        self._callback = None

    def _on_timeout(self):
        if self._callback is not None:
            self._callback()
        # Display refresh, after the timer has seen the tick
        if self._after_tick is not None:
            self._after_tick()
