import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

try:
    from PIL import Image
except Exception:  # pragma: no cover
    Image = None

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "generate"))
sys.path.insert(0, str(ROOT / "packages" / "themes"))
sys.path.insert(0, str(ROOT / "packages" / "generator"))

from termthemes_generate.cli import (
    EXIT_GENERATOR_ERROR,
    EXIT_INVALID_CATALOG,
    EXIT_OK,
    EXIT_PREVIEW_FAILED,
    EXIT_UNKNOWN_THEME,
    build_parser,
    main,
)
from termthemes import get_theme

FIXTURES = ROOT / "tests" / "fixtures" / "schemes"


def _run(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        rc = main(argv)
    return rc, out.getvalue()


class ParserTests(unittest.TestCase):
    def test_generate_command(self):
        args = build_parser().parse_args(["generate", "--source-dir", "schemes", "--output", "out.py"])
        self.assertEqual(args.command, "generate")
        self.assertEqual(args.source_dir, "schemes")
        self.assertEqual(args.output, "out.py")
        self.assertIsNone(args.repo)

    def test_preview_command(self):
        args = build_parser().parse_args(["preview", "Dracula", "--out", "d.png", "--cell", "32"])
        self.assertEqual(args.name, "Dracula")
        self.assertEqual(args.out, "d.png")
        self.assertEqual(args.cell, 32)

    def test_global_config_option(self):
        args = build_parser().parse_args(["--config", "gen.json", "validate"])
        self.assertEqual(args.config, "gen.json")
        self.assertEqual(args.command, "validate")

    def test_command_required(self):
        with patch("sys.stderr", io.StringIO()), self.assertRaises(SystemExit):
            build_parser().parse_args([])


class MainTests(unittest.TestCase):
    def test_validate_embedded_catalog(self):
        rc, out = _run(["validate"])
        self.assertEqual(rc, EXIT_OK)
        payload = json.loads(out)
        self.assertTrue(payload["success"])
        self.assertGreater(payload["total"], 0)
        self.assertNotEqual(EXIT_OK, EXIT_INVALID_CATALOG)

    def test_generate_from_local_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "_catalog.py"
            rc, out = _run(["generate", "--source-dir", str(FIXTURES), "--output", str(output)])
            self.assertEqual(rc, EXIT_OK)
            payload = json.loads(out)
            self.assertEqual(payload["theme_count"], 3)
            self.assertTrue(output.exists())

    def test_generate_missing_directory_fails(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "_catalog.py"
            rc, _ = _run(["generate", "--source-dir", str(Path(tmp) / "missing"), "--output", str(output)])
            self.assertEqual(rc, EXIT_GENERATOR_ERROR)
            self.assertFalse(output.exists())

    def test_preview_unknown_theme(self):
        with tempfile.TemporaryDirectory() as tmp:
            rc, _ = _run(["preview", "NonExistentTheme12345", "--out", str(Path(tmp) / "x.png")])
            self.assertEqual(rc, EXIT_UNKNOWN_THEME)

    def test_wrongly_typed_config_does_not_abort(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "gen.json"
            config.write_text(json.dumps({"config_version": "v1"}), encoding="utf-8")
            rc, out = _run(["--config", str(config), "validate"])
            self.assertEqual(rc, EXIT_OK)
            self.assertTrue(json.loads(out)["success"])

    def test_preview_unwritable_path(self):
        if Image is None:
            self.skipTest("Pillow not installed")
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            rc, out = _run(["preview", "Dracula", "--out", str(blocker / "dracula.png")])
            self.assertEqual(rc, EXIT_PREVIEW_FAILED)
            self.assertEqual(out, "")

    def test_preview_rejected_color(self):
        if Image is None:
            self.skipTest("Pillow not installed")
        broken = replace(get_theme("Dracula"), background="#nothex")
        with tempfile.TemporaryDirectory() as tmp:
            with patch("termthemes_generate.cli.get_theme", return_value=broken):
                rc, _ = _run(["preview", "Dracula", "--out", str(Path(tmp) / "d.png")])
            self.assertEqual(rc, EXIT_PREVIEW_FAILED)


if __name__ == "__main__":
    unittest.main()
