"""Tests for data directory resolution, the project path layout, and logging setup.

Covers: oki.common.setup, oki.common.logger
"""

import logging
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch


# ──────────────────────────────────────────────────────────────────────────
# setup.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestPaths(unittest.TestCase):

    def test_override_wins_over_everything(self):
        from oki.common.setup import resolve_data_dir
        env = {"OKI_DATA_DIR": "/srv/oki", "APPDATA": "/appdata", "XDG_DATA_HOME": "/xdg"}
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(resolve_data_dir(), Path("/srv/oki"))

    def test_appdata_before_xdg(self):
        from oki.common.setup import resolve_data_dir
        with patch.dict(os.environ, {"APPDATA": "/appdata", "XDG_DATA_HOME": "/xdg"}, clear=True):
            self.assertEqual(resolve_data_dir(), Path("/appdata") / "Oki")

    def test_xdg_data_home(self):
        from oki.common.setup import resolve_data_dir
        with patch.dict(os.environ, {"XDG_DATA_HOME": "/xdg"}, clear=True):
            self.assertEqual(resolve_data_dir(), Path("/xdg") / "oki")

    def test_falls_back_to_home(self):
        from oki.common.setup import resolve_data_dir
        with patch.dict(os.environ, {}, clear=True):
            with patch.object(Path, "home", return_value=Path("/home/sam")):
                self.assertEqual(resolve_data_dir(), Path("/home/sam/.local/share/oki"))

    def test_empty_values_are_skipped(self):
        from oki.common.setup import resolve_data_dir
        with patch.dict(os.environ, {"OKI_DATA_DIR": "", "APPDATA": "", "XDG_DATA_HOME": "/xdg"}, clear=True):
            self.assertEqual(resolve_data_dir(), Path("/xdg") / "oki")

    def test_build_creates_data_folders(self):
        from oki.common.setup import ProjectPaths
        tmpdir = tempfile.mkdtemp()
        try:
            data = Path(tmpdir) / "fresh"
            paths = ProjectPaths.build(data)
            self.assertEqual(paths.data, data)
            self.assertTrue(paths.logs.is_dir())
            self.assertTrue(paths.current.is_dir())
            self.assertEqual(paths.assets, paths.root / "assets")
        finally:
            shutil.rmtree(tmpdir, ignore_errors=True)


# ──────────────────────────────────────────────────────────────────────────
# logger.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.log_dir = Path(self.tmpdir)
        self.name = "oki_test_logger"

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_repeat_setup_does_not_duplicate_handlers(self):
        from oki.common.logger import get_logger
        logger = get_logger(self.name, log_dir=self.log_dir, console=True)
        names = sorted(h.get_name() for h in logger.handlers)
        get_logger(self.name, log_dir=self.log_dir, console=True)
        self.assertEqual(sorted(h.get_name() for h in logger.handlers), names)
        self.assertEqual(len(names), 4)

    def test_lines_reach_persistent_and_latest_logs(self):
        from oki.common.logger import get_logger
        logger = get_logger(self.name, log_dir=self.log_dir, historical_debugs=0)
        logger.info("session recorded")
        for handler in logger.handlers:
            handler.flush()
        self.assertIn("session recorded", (self.log_dir / f"{self.name}.log").read_text(encoding="utf-8"))
        self.assertIn("session recorded", (self.log_dir / "latest.log").read_text(encoding="utf-8"))
        self.assertFalse((self.log_dir / "debug").exists())

    def test_old_debug_runs_are_pruned(self):
        from oki.common.logger import get_logger
        debug_dir = self.log_dir / "debug"
        debug_dir.mkdir()
        for i in range(5):
            old = debug_dir / f"{self.name}_2020-01-0{i + 1}_00-00-00.log"
            old.write_text("", encoding="utf-8")
            os.utime(old, (1_577_836_800 + i * 86_400,) * 2)
        get_logger(self.name, log_dir=self.log_dir, historical_debugs=2)
        kept = sorted(p.name for p in debug_dir.glob(f"{self.name}_*.log"))
        self.assertEqual(len(kept), 2)
        self.assertIn(f"{self.name}_2020-01-05_00-00-00.log", kept)


if __name__ == "__main__":
    unittest.main()
