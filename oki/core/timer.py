from dataclasses import dataclass
from enum import Enum
from oki.common.logger import log
from oki.core.errors import InvalidDurationError, InvalidStateError

MAX_HOURS = 12
MAX_MINUTES = 59
MAX_SECONDS = 59


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


# A requested countdown length, as picked on the three wheels.
@dataclass(frozen=True)
class Duration:
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self):
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    # Splits a total back into wheel values. Hours are not capped here.
    @staticmethod
    def from_seconds(total):
        if total < 0:
            raise InvalidDurationError(f"Duration cannot be negative, got {total} seconds")
        hours, rest = divmod(int(total), 3600)
        minutes, seconds = divmod(rest, 60)
        return Duration(hours, minutes, seconds)

    # Whether the values fit the wheel pickers. The core only cares that the total isn't negative.
    def within_picker_bounds(self):
        return (0 <= self.hours <= MAX_HOURS
                and 0 <= self.minutes <= MAX_MINUTES
                and 0 <= self.seconds <= MAX_SECONDS)


# Formats seconds as MM:SS, or HH:MM:SS once there's at least an hour left.
def format_remaining(seconds):
    seconds = max(0, int(seconds))
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    if h == 0:
        return f"{m:02d}:{s:02d}"
    return f"{h:02d}:{m:02d}:{s:02d}"

# Inverse of format_remaining. Raises ValueError for anything that isn't MM:SS or HH:MM:SS.
def parse_remaining(text):
    parts = text.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValueError(f"Not a countdown display value: {text!r}")
    values = [int(p) for p in parts]
    if any(v > 59 for v in values[1:]):
        raise ValueError(f"Minutes and seconds must be below 60: {text!r}")
    if len(values) == 2:
        return values[0] * 60 + values[1]
    return values[0] * 3600 + values[1] * 60 + values[2]


# Counts down from a Duration, one tick per second. Ticks come from the outside (a tick source or the host calling
# tick() directly), so the timer itself never sleeps or threads. on_expired fires once per run.
class CountdownTimer:

    def __init__(self, on_expired=None, tick_source=None, name="meditation"):
        self.name = name
        self.on_expired = on_expired
        self._tick_source = tick_source
        self._state = TimerState.IDLE
        self._remaining = 0
        log.debug(f"Initialized countdown timer '{name}'")

    @property
    def state(self):
        return self._state

    @property
    def is_running(self):
        return self._state is TimerState.RUNNING

    @property
    def is_paused(self):
        return self._state is TimerState.PAUSED

    def remaining_time(self):
        return self._remaining

    def formatted_remaining(self):
        return format_remaining(self._remaining)

    # Arms the timer with a duration and begins counting. Only valid from IDLE, so a cancelled timer can be reused.
    def start(self, duration):
        if self._state is not TimerState.IDLE:
            raise InvalidStateError("start", self._state)
        total = duration.total_seconds
        if total < 0:
            raise InvalidDurationError(f"Duration cannot be negative, got {total} seconds")
        self._remaining = total
        self._state = TimerState.RUNNING
        if self._tick_source is not None:
            self._tick_source.start(self.tick)
        log.debug(f"Started timer '{self.name}' with {total} seconds")

    # One elapsed second. Ignored unless RUNNING. Expires on the tick that reaches 0, or on the first tick that
    # finds it already at 0 (a zero-length run).
    def tick(self):
        if self._state is not TimerState.RUNNING:
            return
        if self._remaining > 0:
            self._remaining -= 1
        if self._remaining == 0:
            self._expire()

    def pause(self):
        if self._state is not TimerState.RUNNING:
            raise InvalidStateError("pause", self._state)
        self._state = TimerState.PAUSED
        log.debug(f"Paused timer '{self.name}' at {self._remaining} seconds")

    def resume(self):
        if self._state is not TimerState.PAUSED:
            raise InvalidStateError("resume", self._state)
        self._state = TimerState.RUNNING
        log.debug(f"Resumed timer '{self.name}' at {self._remaining} seconds")

    # Single play/pause button behaviour.
    def toggle_pause(self):
        if self._state is TimerState.RUNNING:
            self.pause()
        elif self._state is TimerState.PAUSED:
            self.resume()
        else:
            raise InvalidStateError("toggle_pause", self._state)

    # Stops the run without notifying. A no-op once expired, so hosts can call it on every dismissal path.
    def cancel(self):
        if self._state is TimerState.EXPIRED:
            return
        if self._state is TimerState.IDLE:
            raise InvalidStateError("cancel", self._state)
        self._stop_ticks()
        self._state = TimerState.IDLE
        log.debug(f"Cancelled timer '{self.name}' with {self._remaining} seconds left")

    def _expire(self):
        self._state = TimerState.EXPIRED
        self._stop_ticks()
        log.info(f"Timer '{self.name}' expired")
        if self.on_expired is not None:
            self.on_expired()

    def _stop_ticks(self):
        if self._tick_source is not None:
            self._tick_source.stop()
