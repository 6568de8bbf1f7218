"""One meditation run — a countdown plus what happens when it finishes.

Hosts build a ``Meditation`` when the play button is pressed and call
``end()`` on every way out of the timer view.  When the countdown expires the
completion is recorded first and the signal handed to the host's notifier
second, so the count on screen is already current when the host dismisses.
"""

from datetime import datetime

from oki.common.logger import log
from oki.core.errors import PersistenceError
from oki.core.timer import CountdownTimer, TimerState


def _local_now():
    return datetime.now().astimezone()


class Meditation:
    """Glue between a ``CountdownTimer``, a ``SessionTracker`` and a notifier.

    ``notifier`` is called with the ``CompletionSignal`` once per completed
    run.  ``clock`` returns the "now" passed to the tracker.
    """

    def __init__(self, duration, signal, tracker, notifier=None, tick_source=None, clock=None):
        self.duration = duration
        self.signal = signal
        self.tracker = tracker
        self.notifier = notifier
        self.clock = clock or _local_now
        self.completed = False
        self.sessions_today = None
        self.timer = CountdownTimer(on_expired=self._on_expired, tick_source=tick_source)

    def begin(self):
        log.info(f"Beginning meditation of {self.duration.total_seconds}s with signal '{self.signal.label}'")
        self.timer.start(self.duration)

    def end(self):
        """Cancel the countdown if it is still going. Safe after completion."""
        if self.timer.state in (TimerState.RUNNING, TimerState.PAUSED):
            log.info(f"Meditation ended early with {self.timer.remaining_time()}s left")
            self.timer.cancel()

    def _on_expired(self):
        self.completed = True
        try:
            self.sessions_today = self.tracker.record_completion(self.clock())
        except PersistenceError:
            log.warning("Could not record completed session", exc_info=True)
        if self.notifier is not None:
            self.notifier(self.signal)
