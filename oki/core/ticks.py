"""Tick sources — the one-second scheduling primitive a timer is driven by.

A tick source only needs ``start(callback)``, ``stop()`` and an ``active``
flag.  The Qt-backed source used by the GUI lives in ``oki.ui.ticks``; the
manual source here is for headless hosts and tests, where the caller decides
when a second has passed.
"""

from oki.common.logger import log

TICK_INTERVAL_MS = 1000


class ManualTickSource:
    """Delivers ticks only when ``fire()`` is called."""

    def __init__(self):
        self._callback = None
        self.fired = 0

    @property
    def active(self):
        return self._callback is not None

    def start(self, callback):
        self._callback = callback
        log.debug("Manual tick source started")

    def stop(self):
        if self._callback is not None:
            self._callback = None
            log.debug(f"Manual tick source stopped after {self.fired} ticks")

    def fire(self, count=1):
        """Deliver up to ``count`` ticks, stopping early once the source is stopped."""
        delivered = 0
        for _ in range(count):
            callback = self._callback
            if callback is None:
                break
            self.fired += 1
            delivered += 1
            callback()
        return delivered
