"""Tests for session counting, the key-value stores, and settings.

Covers: oki.core.sessions, oki.core.store, oki.core.config
"""

import json
import shutil
import tempfile
import unittest
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch


MORNING = datetime(2026, 3, 14, 7, 30, tzinfo=timezone.utc)
EVENING = datetime(2026, 3, 14, 22, 15, tzinfo=timezone.utc)
NEXT_DAY = datetime(2026, 3, 15, 6, 0, tzinfo=timezone.utc)


# ──────────────────────────────────────────────────────────────────────────
# sessions.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestSessionTracker(unittest.TestCase):

    def setUp(self):
        from oki.core.sessions import SessionTracker
        from oki.core.store import MemoryStore
        self.store = MemoryStore()
        self.tracker = SessionTracker(self.store)

    def test_fresh_tracker_counts_zero(self):
        self.assertEqual(self.tracker.today_count(MORNING), 0)

    def test_two_completions_same_day(self):
        self.assertEqual(self.tracker.record_completion(MORNING), 1)
        self.assertEqual(self.tracker.record_completion(EVENING), 2)
        self.assertEqual(self.tracker.today_count(EVENING), 2)

    def test_day_rollover_resets_to_one(self):
        from oki.core.sessions import SESSION_KEY
        self.tracker.record_completion(MORNING)
        self.tracker.record_completion(EVENING)
        self.assertEqual(self.tracker.record_completion(NEXT_DAY), 1)
        self.assertEqual(self.tracker.today_count(NEXT_DAY), 1)
        self.assertEqual(self.store.get(SESSION_KEY), {"count": 1, "last_day": "2026-03-15"})

    def test_today_count_on_new_day_does_not_write(self):
        from oki.core.sessions import SESSION_KEY
        self.tracker.record_completion(MORNING)
        before = dict(self.store.get(SESSION_KEY))
        self.assertEqual(self.tracker.today_count(NEXT_DAY), 0)
        self.assertEqual(self.store.get(SESSION_KEY), before)

    def test_accepts_plain_dates(self):
        self.tracker.record_completion(date(2026, 3, 14))
        self.assertEqual(self.tracker.today_count(MORNING), 1)

    def test_defaults_to_local_now(self):
        self.tracker.record_completion()
        self.assertEqual(self.tracker.today_count(), 1)

    def test_rejects_non_dates(self):
        with self.assertRaises(TypeError):
            self.tracker.today_count("2026-03-14")

    def test_malformed_record_treated_as_fresh(self):
        from oki.core.sessions import SESSION_KEY
        self.store.set(SESSION_KEY, {"count": "lots", "last_day": "2026-03-14"})
        self.assertEqual(self.tracker.today_count(MORNING), 0)
        self.assertEqual(self.tracker.record_completion(MORNING), 1)

        self.store.set(SESSION_KEY, [3, "2026-03-14"])
        self.assertEqual(self.tracker.today_count(MORNING), 0)

    def test_persistence_error_propagates(self):
        from oki.core.errors import PersistenceError
        with patch.object(self.store, "set", side_effect=PersistenceError("disk gone")):
            with self.assertRaises(PersistenceError):
                self.tracker.record_completion(MORNING)
        self.assertEqual(self.tracker.today_count(MORNING), 0)


# ──────────────────────────────────────────────────────────────────────────
# store.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestJsonFileStore(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.path = Path(self.tmpdir) / "current" / "state.json"

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_missing_file_is_empty(self):
        from oki.core.store import JsonFileStore
        store = JsonFileStore(self.path)
        self.assertIsNone(store.get("light_mode"))
        self.assertEqual(store.get("light_mode", True), True)

    def test_set_writes_through(self):
        from oki.core.store import JsonFileStore
        store = JsonFileStore(self.path)
        store.set("light_mode", False)
        with open(self.path, encoding="utf-8") as f:
            on_disk = json.load(f)
        self.assertEqual(on_disk["values"]["light_mode"], False)
        self.assertEqual(on_disk["meta"]["schema_version"], 1)

    def test_roundtrip_through_new_instance(self):
        from oki.core.store import JsonFileStore
        JsonFileStore(self.path).set("sessions", {"count": 3, "last_day": "2026-03-14"})
        reloaded = JsonFileStore(self.path)
        self.assertEqual(reloaded.get("sessions"), {"count": 3, "last_day": "2026-03-14"})

    def test_corrupt_file_falls_back_to_empty(self):
        from oki.core.store import JsonFileStore
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{invalid json!!", encoding="utf-8")
        store = JsonFileStore(self.path)
        self.assertIsNone(store.get("light_mode"))
        store.set("light_mode", True)
        self.assertTrue(JsonFileStore(self.path).get("light_mode"))

    def test_wrong_shape_falls_back_to_empty(self):
        from oki.core.store import JsonFileStore
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2, 3]", encoding="utf-8")
        self.assertIsNone(JsonFileStore(self.path).get("anything"))

    def test_unreadable_path_raises_persistence_error(self):
        from oki.core.errors import PersistenceError
        from oki.core.store import JsonFileStore
        # A directory where the file should be
        self.path.mkdir(parents=True)
        store = JsonFileStore(self.path)
        with self.assertRaises(PersistenceError):
            store.get("light_mode")

    def test_failed_write_raises_and_rolls_back(self):
        from oki.core.errors import PersistenceError
        from oki.core.store import JsonFileStore
        store = JsonFileStore(self.path)
        store.set("light_mode", True)
        with patch("builtins.open", side_effect=PermissionError("read-only")):
            with self.assertRaises(PersistenceError):
                store.set("light_mode", False)
            with self.assertRaises(PersistenceError):
                store.set("breathing_animation_enabled", True)
        self.assertTrue(store.get("light_mode"))
        self.assertIsNone(store.get("breathing_animation_enabled"))

    def test_tracker_on_file_store(self):
        from oki.core.sessions import SessionTracker
        from oki.core.store import JsonFileStore
        SessionTracker(JsonFileStore(self.path)).record_completion(MORNING)
        tracker = SessionTracker(JsonFileStore(self.path))
        self.assertEqual(tracker.today_count(EVENING), 1)
        self.assertEqual(tracker.today_count(EVENING + timedelta(days=1)), 0)


# ──────────────────────────────────────────────────────────────────────────
# config.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestSettings(unittest.TestCase):

    def test_fresh_store_gives_defaults(self):
        from oki.core.config import load_settings
        from oki.core.store import MemoryStore
        settings = load_settings(MemoryStore())
        self.assertTrue(settings["light_mode"])
        self.assertFalse(settings["breathing_animation_enabled"])
        self.assertEqual((settings["last_hours"], settings["last_minutes"], settings["last_seconds"]), (0, 2, 0))
        self.assertEqual(settings["last_signal"], "None")

    def test_stored_values_win(self):
        from oki.core.config import load_settings
        from oki.core.store import MemoryStore
        store = MemoryStore({"light_mode": False, "last_minutes": 20, "last_signal": "Kru"})
        settings = load_settings(store)
        self.assertFalse(settings["light_mode"])
        self.assertEqual(settings["last_minutes"], 20)
        self.assertEqual(settings["last_signal"], "Kru")

    def test_invalid_values_are_defaulted(self):
        from oki.core.config import load_settings
        from oki.core.store import MemoryStore
        store = MemoryStore({
            "light_mode": "yes",
            "last_hours": 40,
            "last_minutes": True,
            "last_signal": "Gong",
        })
        with self.assertLogs("oki", level="WARNING") as logs:
            settings = load_settings(store)
        self.assertTrue(settings["light_mode"])
        self.assertEqual(settings["last_hours"], 0)
        self.assertEqual(settings["last_minutes"], 2)
        self.assertEqual(settings["last_signal"], "None")
        self.assertIn("last_hours", logs.output[0])

    def test_save_setting_validates(self):
        from oki.core.config import load_settings, save_setting
        from oki.core.store import MemoryStore
        store = MemoryStore()
        save_setting(store, "breathing_animation_enabled", True)
        self.assertTrue(load_settings(store)["breathing_animation_enabled"])
        with self.assertRaises(KeyError):
            save_setting(store, "theme", "Dark")
        with self.assertRaises(ValueError):
            save_setting(store, "last_seconds", 75)

    def test_default_settings_are_a_copy(self):
        from oki.core.config import build_default_settings
        first = build_default_settings()
        first["light_mode"] = False
        self.assertTrue(build_default_settings()["light_mode"])


if __name__ == "__main__":
    unittest.main()
