import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from term_ui import settings_store


class SettingsStoreTestCase(unittest.TestCase):
    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            data = settings_store.load_settings(Path(td) / "missing.ini")
        self.assertEqual(settings_store.DEFAULT_SETTINGS, data)

    def test_save_then_load_keeps_prompt_whitespace(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            with patch.object(settings_store, "SETTINGS_PATH", ini_path):
                settings_store.save_settings(
                    {"draw_count": "3", "prompt": "move> ", "quit_key": "x", "redraw_key": "l"}
                )
                text = ini_path.read_text(encoding="utf-8")
                data = settings_store.load_settings()
        self.assertIn("[game]", text)
        self.assertIn("draw_count = 3", text)
        self.assertEqual("move> ", data["prompt"])
        self.assertEqual("3", data["draw_count"])
        self.assertEqual("x", data["quit_key"])
        self.assertEqual("l", data["redraw_key"])

    def test_invalid_values_fall_back(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_text(
                "[game]\n"
                "draw_count = 2\n"
                "quit_key = quit\n"
                "redraw_key = r\n"
                "unknown = 1\n",
                encoding="utf-8",
            )
            data = settings_store.load_settings(ini_path)
        self.assertEqual("1", data["draw_count"])
        self.assertEqual("q", data["quit_key"])
        self.assertNotIn("unknown", data)

    def test_clashing_keys_reset_both(self):
        data = settings_store._sanitize({"quit_key": "z", "redraw_key": "z"})
        self.assertEqual(("q", "r"), (data["quit_key"], data["redraw_key"]))

    def test_unreadable_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_text("draw_count = 3\n", encoding="utf-8")
            data = settings_store.load_settings(ini_path)
        self.assertEqual(settings_store.DEFAULT_SETTINGS, data)

    def test_undecodable_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_bytes(b"[game]\nprompt = \xff\xfe\n")
            data = settings_store.load_settings(ini_path)
        self.assertEqual(settings_store.DEFAULT_SETTINGS, data)

    def test_non_ascii_keys_fall_back(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            settings_store.save_settings({"quit_key": "é", "redraw_key": "ü"}, ini_path)
            data = settings_store.load_settings(ini_path)
        self.assertEqual(("q", "r"), (data["quit_key"], data["redraw_key"]))

    def test_missing_section_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_text("[ui]\ndraw_count = 3\n", encoding="utf-8")
            data = settings_store.load_settings(ini_path)
        self.assertEqual("1", data["draw_count"])


if __name__ == "__main__":
    unittest.main()
