import dataclasses
import re
import sys
import threading
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "themes"))

from termthemes import Theme, ThemeNotFound, get_all_themes, get_theme, list_themes
from termthemes.models import COLOR_FIELDS

HEX_RE = re.compile(r"#[0-9a-f]{6}")


class GetThemeTests(unittest.TestCase):
    def test_known_theme(self):
        theme = get_theme("Dracula")
        self.assertEqual(theme.name, "Dracula")
        self.assertEqual(theme.background, "#282a36")
        self.assertEqual(theme.foreground, "#f8f8f2")

    def test_case_insensitive(self):
        base = get_theme("Dracula")
        self.assertIs(get_theme("dracula"), base)
        self.assertIs(get_theme("DRACULA"), base)
        self.assertIs(get_theme("dRaCuLa"), base)

    def test_not_found(self):
        with self.assertRaises(ThemeNotFound) as ctx:
            get_theme("NonExistentTheme12345")
        self.assertEqual(ctx.exception.name, "NonExistentTheme12345")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_not_found_for_near_misses(self):
        for query in ("", "Dracula ", " dracula", "Draculaa"):
            with self.assertRaises(ThemeNotFound):
                get_theme(query)

    def test_every_case_permutation_resolves(self):
        for name, theme in get_all_themes().items():
            for query in (name, name.lower(), name.upper(), name.swapcase()):
                self.assertIs(get_theme(query), theme)


class CatalogTests(unittest.TestCase):
    def test_colors_are_canonical(self):
        for name, theme in get_all_themes().items():
            for field in COLOR_FIELDS:
                value = getattr(theme, field)
                self.assertIsNotNone(HEX_RE.fullmatch(value), f"{name}.{field}={value!r}")

    def test_names_match_keys(self):
        for key, theme in get_all_themes().items():
            self.assertTrue(theme.name)
            self.assertEqual(theme.name, key)

    def test_list_and_all_agree(self):
        names = list_themes()
        all_themes = get_all_themes()
        self.assertEqual(len(names), len(all_themes))
        self.assertEqual(set(names), set(all_themes))
        self.assertEqual(len(names), len(set(names)))

    def test_list_is_sorted(self):
        names = list_themes()
        self.assertEqual(names, sorted(names))

    def test_all_themes_lookup(self):
        self.assertEqual(get_all_themes()["Dracula"].name, "Dracula")

    @unittest.skipIf(len(get_all_themes()) < 400, "catalog not generated from the full upstream corpus")
    def test_full_catalog_size(self):
        self.assertGreaterEqual(len(list_themes()), 400)

    def test_mapping_is_read_only(self):
        with self.assertRaises(TypeError):
            get_all_themes()["Dracula"] = get_theme("Nord")  # type: ignore[index]

    def test_theme_is_frozen(self):
        theme = get_theme("Nord")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            theme.background = "#000000"  # type: ignore[misc]

    def test_list_copy_does_not_alias(self):
        names = list_themes()
        names.clear()
        self.assertTrue(list_themes())

    def test_concurrent_lookups(self):
        errors = []

        def worker():
            try:
                for name in list_themes():
                    get_theme(name.upper())
            except Exception as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])


class ThemeModelTests(unittest.TestCase):
    def test_ansi_colors_order(self):
        theme = get_theme("Dracula")
        palette = theme.ansi_colors()
        self.assertEqual(len(palette), 16)
        self.assertEqual(palette[0], theme.black)
        self.assertEqual(palette[5], theme.magenta)
        self.assertEqual(palette[13], theme.bright_magenta)
        self.assertEqual(palette[15], theme.bright_white)

    def test_as_dict(self):
        data = get_theme("Dracula").as_dict()
        self.assertEqual(len(data), 20)
        self.assertEqual(data["name"], "Dracula")
        self.assertIsInstance(Theme(**data), Theme)


if __name__ == "__main__":
    unittest.main()
