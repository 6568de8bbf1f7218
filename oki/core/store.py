"""Key-value stores — the persistence substrate for settings and session counts.

Anything with ``get(key, default=None)`` and ``set(key, value)`` works.
``JsonFileStore`` keeps every key in one ``state.json`` and writes through on
each ``set``, the way the desktop app persists preferences the moment they
change.
"""

import json
from pathlib import Path
from oki.common.logger import log
from oki.common.setup import PATHS
from oki.core.errors import PersistenceError

_SCHEMA_VERSION = 1

STATE_PATH = PATHS.current / "state.json"


class MemoryStore:
    """Dict-backed store for tests and throwaway hosts."""

    def __init__(self, values=None):
        self._values = dict(values or {})

    def get(self, key, default=None):
        return self._values.get(key, default)

    def set(self, key, value):
        self._values[key] = value


class JsonFileStore:
    """Flat key-value store backed by a JSON file.

    The file is read lazily on first access.  A missing file is a fresh
    store; a corrupt one is logged and treated as fresh.  Any other OS-level
    failure surfaces as ``PersistenceError``.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else STATE_PATH
        self._values = None

    def _load(self):
        if self._values is not None:
            return self._values
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                state = json.load(f)
        except FileNotFoundError:
            log.info(f"No existing state found at '{self.path}', starting fresh.")
            state = {}
        except (json.JSONDecodeError, UnicodeDecodeError):
            log.warning(f"State file '{self.path}' is corrupt, starting fresh.", exc_info=True)
            state = {}
        except OSError as e:
            raise PersistenceError(f"Could not read '{self.path}': {e}") from e

        if not isinstance(state, dict) or not isinstance(state.get("values"), dict):
            if state:
                log.warning(f"State file '{self.path}' has no usable 'values' section, starting fresh.")
            state = {"values": {}}
        self._values = state["values"]
        return self._values

    def get(self, key, default=None):
        return self._load().get(key, default)

    def set(self, key, value):
        values = self._load()
        previous = values.get(key, _MISSING)
        values[key] = value
        try:
            self._write(values)
        except OSError as e:
            # Keep memory in line with disk
            if previous is _MISSING:
                del values[key]
            else:
                values[key] = previous
            raise PersistenceError(f"Could not write '{self.path}': {e}") from e

    def _write(self, values):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        state = {"meta": {"schema_version": _SCHEMA_VERSION}, "values": values}
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2)
        log.debug(f"Saved state to '{self.path}'")


_MISSING = object()
