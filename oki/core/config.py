from oki.common.logger import log
from oki.core.signals import CompletionSignal
from oki.core.timer import MAX_HOURS, MAX_MINUTES, MAX_SECONDS

#region === Defaults ===

# Default values for every persisted preference. The picker defaults start a fresh install on 2 minutes, silent.
_SETTINGS_DEFAULTS = {
    "light_mode": True,
    "breathing_animation_enabled": False,
    "last_hours": 0,
    "last_minutes": 2,
    "last_seconds": 0,
    "last_signal": CompletionSignal.SILENT.label,
}

# Upper bounds for the integer settings, inclusive
_INT_BOUNDS = {
    "last_hours": MAX_HOURS,
    "last_minutes": MAX_MINUTES,
    "last_seconds": MAX_SECONDS,
}

def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

#endregion === Defaults ===

#region === Loading and Saving ===

# Checks a single stored value against the type (and range) of its default.
def _is_valid(key, value):
    default = _SETTINGS_DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return (isinstance(value, int) and not isinstance(value, bool)
                and 0 <= value <= _INT_BOUNDS[key])
    if key == "last_signal":
        return isinstance(value, str) and CompletionSignal.from_label(value) is not None
    return isinstance(value, type(default))

# Reads every setting from the store, filling anything missing or malformed with its default.
def load_settings(store):
    settings = {}
    defaulted_values = set()
    for key, default in _SETTINGS_DEFAULTS.items():
        value = store.get(key, None)
        if value is None or not _is_valid(key, value):
            if value is not None:
                defaulted_values.add(key)
            value = default
        settings[key] = value

    if defaulted_values:
        log.warning(f"Loaded settings, but with invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
    else:
        log.info("Successfully loaded settings.")
    return settings

# Persists a single setting immediately.
def save_setting(store, key, value):
    if key not in _SETTINGS_DEFAULTS:
        raise KeyError(f"Unknown setting '{key}'")
    if not _is_valid(key, value):
        raise ValueError(f"Invalid value {value!r} for setting '{key}'")
    store.set(key, value)
    log.debug(f"Saved setting '{key}' = {value!r}")

#endregion === Loading and Saving ===
