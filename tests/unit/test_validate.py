import sys
import unittest
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "themes"))
sys.path.insert(0, str(ROOT / "packages" / "generator"))

from termthemes import get_all_themes, get_theme
from termthemes_generator.validate import validate_catalog


class ValidateCatalogTests(unittest.TestCase):
    def test_embedded_catalog_is_clean(self):
        report = validate_catalog(get_all_themes())
        self.assertTrue(report.ok, report.errors)
        self.assertEqual(report.total, len(get_all_themes()))
        self.assertEqual(report.case_collisions, [])

    def test_reports_bad_color_and_name_mismatch(self):
        dracula = get_theme("Dracula")
        themes = {
            "Dracula": replace(dracula, red="#FF5555"),
            "Other": dracula,
        }
        report = validate_catalog(themes)
        self.assertFalse(report.ok)
        self.assertTrue(any("invalid red" in e for e in report.errors))
        self.assertTrue(any("different name" in e for e in report.errors))

    def test_reports_case_collisions(self):
        dracula = get_theme("Dracula")
        themes = {
            "Dracula": dracula,
            "dracula": replace(dracula, name="dracula"),
        }
        report = validate_catalog(themes)
        self.assertTrue(report.ok)
        self.assertEqual(report.case_collisions, [["Dracula", "dracula"]])


if __name__ == "__main__":
    unittest.main()
