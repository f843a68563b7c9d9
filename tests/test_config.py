"""Tests for settings loading and the application logger.

Covers: dclock.core.config, dclock.common.logger
"""

import json
import logging
import os
import shutil
import tempfile
import time
import unittest
from pathlib import Path


# ──────────────────────────────────────────────────────────────────────────
# config.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestSettings(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._tmppath = Path(self.tmpdir)

        # Monkey-patch settings path to use temp dir
        from dclock.core import config
        self._orig_settings_path = config.SETTINGS_PATH
        config.SETTINGS_PATH = self._tmppath / "settings.json"

    def tearDown(self):
        from dclock.core import config
        config.SETTINGS_PATH = self._orig_settings_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, payload):
        from dclock.core import config
        with open(config.SETTINGS_PATH, "w", encoding="utf-8") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def test_missing_file_returns_defaults(self):
        from dclock.core import config
        settings = config.load_settings()
        self.assertEqual(settings, config.build_default_settings())
        self.assertEqual(settings["swipe_threshold"], 50)
        self.assertEqual(settings["tick_ms"], 1000)
        self.assertEqual(settings["accent_color"], "#7BABF3")

    def test_missing_file_is_not_created(self):
        from dclock.core import config
        config.load_settings()
        self.assertFalse(os.path.exists(config.SETTINGS_PATH))

    def test_loaded_values_override_defaults(self):
        from dclock.core import config
        self._write({"swipe_threshold": 80, "always_on_top": True, "accent_color": "#FF00FF"})
        settings = config.load_settings()
        self.assertEqual(settings["swipe_threshold"], 80)
        self.assertTrue(settings["always_on_top"])
        self.assertEqual(settings["accent_color"], "#FF00FF")
        self.assertEqual(settings["slide_ms"], 300)

    def test_wrong_types_fall_back_to_defaults(self):
        from dclock.core import config
        self._write({"swipe_threshold": "far", "always_on_top": 1, "tick_ms": True, "slide_ms": -5})
        with self.assertLogs("dclock", level="WARNING") as cm:
            settings = config.load_settings()
        self.assertEqual(settings["swipe_threshold"], 50)
        self.assertFalse(settings["always_on_top"])
        self.assertEqual(settings["tick_ms"], 1000)
        self.assertEqual(settings["slide_ms"], 300)
        self.assertIn("swipe_threshold", cm.output[0])

    def test_unknown_keys_ignored(self):
        from dclock.core import config
        self._write({"colour": "red"})
        settings = config.load_settings()
        self.assertNotIn("colour", settings)

    def test_corrupt_json_falls_back(self):
        from dclock.core import config
        self._write("{not json")
        settings = config.load_settings()
        self.assertEqual(settings, config.build_default_settings())

    def test_non_object_json_falls_back(self):
        from dclock.core import config
        self._write([1, 2, 3])
        settings = config.load_settings()
        self.assertEqual(settings, config.build_default_settings())

    def test_explicit_path(self):
        from dclock.core import config
        other = self._tmppath / "other.json"
        with open(other, "w", encoding="utf-8") as f:
            json.dump({"window_width": 1200}, f)
        self.assertEqual(config.load_settings(other)["window_width"], 1200)

    def test_defaults_are_fresh_copies(self):
        from dclock.core import config
        a = config.build_default_settings()
        a["tick_ms"] = 1
        self.assertEqual(config.build_default_settings()["tick_ms"], 1000)


# ──────────────────────────────────────────────────────────────────────────
# setup.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestEnsureDirectory(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._tmppath = Path(self.tmpdir)

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_creates_nested_directories(self):
        from dclock.common.setup import ensure_directory
        target = self._tmppath / "a" / "b" / "c"
        self.assertEqual(ensure_directory(target), target)
        self.assertTrue(target.is_dir())

    def test_existing_directory_is_left_alone(self):
        from dclock.common.setup import ensure_directory
        (self._tmppath / "keep.txt").write_text("x")
        self.assertEqual(ensure_directory(self._tmppath), self._tmppath)
        self.assertTrue((self._tmppath / "keep.txt").exists())

    def test_paths_point_at_existing_directories(self):
        from dclock.common.setup import PATHS
        self.assertTrue(PATHS.data.is_dir())
        self.assertTrue(PATHS.logs.is_dir())


# ──────────────────────────────────────────────────────────────────────────
# logger.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestLogger(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._tmppath = Path(self.tmpdir)
        self.name = f"dclock_test_{id(self)}"

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_creates_log_files(self):
        from dclock.common.logger import get_logger
        logger = get_logger(name=self.name, log_dir=self._tmppath)
        logger.info("hello")
        self.assertTrue((self._tmppath / f"{self.name}.log").exists())
        self.assertTrue((self._tmppath / "latest.log").exists())
        self.assertEqual(len(list((self._tmppath / "debug").glob(f"{self.name}_*.log"))), 1)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        from dclock.common.logger import get_logger
        get_logger(name=self.name, log_dir=self._tmppath)
        logger = get_logger(name=self.name, log_dir=self._tmppath, console=True)
        names = [h.get_name() for h in logger.handlers]
        self.assertEqual(len(names), len(set(names)))
        self.assertIn(f"{self.name}:console", names)
        self.assertFalse(logger.propagate)

    def test_prune_keeps_newest_runs(self):
        from dclock.common.logger import prune_debug_runs
        debug_dir = self._tmppath / "debug"
        debug_dir.mkdir()
        now = time.time()
        for i in range(5):
            p = debug_dir / f"{self.name}_{i}.log"
            p.write_text("x")
            os.utime(p, (now - i * 60, now - i * 60))
        removed = prune_debug_runs(debug_dir, self.name, 2)
        self.assertEqual(removed, 3)
        remaining = sorted(p.name for p in debug_dir.iterdir())
        self.assertEqual(remaining, [f"{self.name}_0.log", f"{self.name}_1.log"])


if __name__ == "__main__":
    unittest.main()
