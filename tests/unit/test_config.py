import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "themes"))
sys.path.insert(0, str(ROOT / "packages" / "generator"))

from termthemes_generator.config import GeneratorConfig, default_catalog_path, load_config, save_config
from termthemes_generator.upstream import UPSTREAM_REPO


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertIsInstance(cfg, GeneratorConfig)
            self.assertEqual(cfg.upstream.repo_url, UPSTREAM_REPO)
            self.assertEqual(cfg.upstream.subdir, "windowsterminal")
            self.assertEqual(cfg.upstream.clone_depth, 1)
            self.assertEqual(cfg.catalog_path(), default_catalog_path())

    def test_default_catalog_path_is_in_package(self):
        path = default_catalog_path()
        self.assertEqual(path.name, "_catalog.py")
        self.assertEqual(path.parent.name, "termthemes")

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.upstream.repo_url = "https://example.invalid/schemes.git"
            cfg.output.catalog_path = str(Path(tmp) / "out.py")
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.upstream.repo_url, "https://example.invalid/schemes.git")
            self.assertEqual(reloaded.catalog_path(), Path(tmp) / "out.py")

    def test_malformed_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertLogs("termthemes.generator.config", level="WARNING"):
                cfg = load_config(path)
            self.assertEqual(cfg.upstream.repo_url, UPSTREAM_REPO)

    def test_values_are_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "upstream": {"clone_depth": 0, "unknown": True},
                "logging": {"level": "debug", "keep_log_files": 0},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.upstream.clone_depth, 1)
            self.assertEqual(cfg.logging.keep_log_files, 2)
            self.assertEqual(cfg.logging.level, "DEBUG")
            self.assertFalse(hasattr(cfg.upstream, "unknown"))

    def test_wrong_value_types_fall_back_to_defaults(self):
        bad_shapes = [
            {"upstream": {"clone_depth": "deep"}},
            {"config_version": "v1"},
            {"logging": {"keep_log_files": [7]}},
            {"upstream": {"repo_url": 42}},
            {"output": {"catalog_path": ["a", "b"]}},
        ]
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            for raw in bad_shapes:
                path.write_text(json.dumps(raw), encoding="utf-8")
                with self.assertLogs("termthemes.generator.config", level="WARNING") as logs:
                    cfg = load_config(path)
                self.assertEqual(cfg, GeneratorConfig(), raw)
                self.assertIn("invalid config", "\n".join(logs.output))

    def test_null_catalog_path_is_allowed(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"output": {"catalog_path": None}}), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.catalog_path(), default_catalog_path())


if __name__ == "__main__":
    unittest.main()
