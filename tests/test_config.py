"""
Unit tests for JSON config loading/validation and output profiles.
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solid_colors.config import PROFILES, get_profile, load_config, validate_config


class TestProfiles(unittest.TestCase):
    def test_profiles(self):
        self.assertEqual(tuple(PROFILES["color_images"]), (16, 16, "color_images"))
        self.assertEqual(tuple(PROFILES["images"]), (8, 8, "images"))
        self.assertEqual(tuple(PROFILES["sweep"]), (16, 16, "sample/solid_colors"))

    def test_unknown_profile(self):
        with self.assertRaises(KeyError):
            get_profile("huge")


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text):
        p = self.tmp / "cfg.json"
        p.write_text(text, encoding="utf-8")
        return str(p)

    def test_plain_json(self):
        self.assertEqual(load_config(self._write('{"width": 4}')), {"width": 4})

    def test_code_fenced_json(self):
        self.assertEqual(load_config(self._write('```json\n{"height": 2}\n```')), {"height": 2})

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(str(self.tmp / "nope.json"))

    def test_empty_file(self):
        with self.assertRaises(ValueError):
            load_config(self._write("   \n"))

    def test_invalid_json_names_file(self):
        path = self._write("{width: 4}")
        with self.assertRaises(ValueError) as ctx:
            load_config(path)
        self.assertIn(path, str(ctx.exception))

    def test_non_object(self):
        with self.assertRaises(ValueError):
            load_config(self._write("[1, 2]"))


class TestValidateConfig(unittest.TestCase):
    def test_valid(self):
        cfg = {"width": 8, "height": 8, "out_dir": "x", "colors": ["red"], "dry_run": False}
        self.assertIs(validate_config(cfg), cfg)

    def test_out_dir_under_regular_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("x")
            with self.assertRaises(ValueError):
                validate_config({"out_dir": str(blocker)})
            with self.assertRaises(ValueError):
                validate_config({"out_dir": str(blocker / "sub")})
            self.assertEqual(validate_config({"out_dir": str(Path(tmp) / "a" / "b")}), {"out_dir": str(Path(tmp) / "a" / "b")})

    def test_bad_values(self):
        for cfg in (
            {"width": 0},
            {"height": "16"},
            {"width": True},
            {"out_dir": 3},
            {"colors": "red"},
            {"colors": ["red", 1]},
            {"dry_run": "yes"},
            {"index": 1},
            {"out_dir": ""},
        ):
            with self.subTest(cfg=cfg):
                with self.assertRaises(ValueError):
                    validate_config(cfg)


if __name__ == "__main__":
    unittest.main()
