from datetime import date, datetime
from oki.common.logger import log

SESSION_KEY = "sessions"


# Reduces a datetime or date to the calendar-day key the record is stored under ("YYYY-MM-DD").
def day_key(now=None):
    if now is None:
        now = datetime.now().astimezone()
    if isinstance(now, datetime):
        return now.date().isoformat()
    if isinstance(now, date):
        return now.isoformat()
    raise TypeError(f"Expected a date or datetime, got {type(now).__name__}")


# Counts completed meditations for the current calendar day. The count and the day it belongs to are kept in an
# injected key-value store; a stored day that isn't today means the effective count is 0. That rollover is only
# written back on the next completion, reads never touch the store.
class SessionTracker:

    def __init__(self, store):
        self.store = store

    # Returns the stored (count, last_day) pair, defaulting anything malformed to the fresh record.
    def _read_record(self):
        record = self.store.get(SESSION_KEY)
        if record is None:
            return 0, ""
        if not isinstance(record, dict):
            log.warning(f"Stored session record {record!r} is invalid, treating as fresh")
            return 0, ""
        count = record.get("count", 0)
        last_day = record.get("last_day", "")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            log.warning(f"Stored session count {count!r} is invalid, treating as 0")
            count = 0
        if not isinstance(last_day, str):
            log.warning(f"Stored session day {last_day!r} is invalid, treating as unset")
            last_day = ""
        return count, last_day

    def today_count(self, now=None):
        today = day_key(now)
        count, last_day = self._read_record()
        return count if last_day == today else 0

    # Records one finished session and returns today's new count. Not idempotent, every call is one more session.
    def record_completion(self, now=None):
        today = day_key(now)
        count, last_day = self._read_record()
        if last_day == today:
            count += 1
        else:
            if last_day:
                log.info(f"Day rolled over from {last_day} to {today}, discarding {count} sessions")
            count = 1
        self.store.set(SESSION_KEY, {"count": count, "last_day": today})
        log.info(f"Recorded completed session #{count} for {today}")
        return count
